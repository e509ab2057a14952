"""
prefix_autocompleter - static prefix autocomplete over weighted terms.

    from prefix_autocompleter import BinarySearchAutocompleter
    ac = BinarySearchAutocompleter(["air", "bat", "bell", "boy"], [3, 2, 4, 1])
    ac.top_matches("b", 2)   # ["bell", "bat"]
"""

from prefix_autocompleter.core import (
    AutocompleteError,
    Autocompletor,
    BinarySearchAutocompleter,
    InvalidArgument,
    Term,
    TermFileError,
)
from prefix_autocompleter.utils.term_loader import build_from_file, load_terms

__all__ = [
    "AutocompleteError",
    "Autocompletor",
    "BinarySearchAutocompleter",
    "InvalidArgument",
    "Term",
    "TermFileError",
    "build_from_file",
    "load_terms",
]

__version__ = "0.1.0"
