"""
prefix_autocompleter.core

The searchable index:
 - Term and its orderings (lexicographic, prefix-of-length-r, weight)
 - first_index_of / last_index_of boundary binary searches
 - BinarySearchAutocompleter (prefix range + bounded top-k)
 - the Autocompletor protocol the outer surfaces depend on
"""

from .errors import AutocompleteError, InvalidArgument, TermFileError
from .term import Term, PrefixOrder, lexicographic_order, weight_order
from .boundary_search import NOT_FOUND, first_index_of, last_index_of
from .autocompleter import BinarySearchAutocompleter
from .protocols import Autocompletor

__all__ = [
    "AutocompleteError",
    "InvalidArgument",
    "TermFileError",
    "Term",
    "PrefixOrder",
    "lexicographic_order",
    "weight_order",
    "NOT_FOUND",
    "first_index_of",
    "last_index_of",
    "BinarySearchAutocompleter",
    "Autocompletor",
]
