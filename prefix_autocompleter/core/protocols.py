# prefix_autocompleter/core/protocols.py
"""
Protocol interface for autocompleters.

The CLI, TUI and profiling harness only rely on these query methods,
so any index that answers them (binary search over a sorted array, a trie,
etc) can be dropped in.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from prefix_autocompleter.core.term import Term


@runtime_checkable
class Autocompletor(Protocol):
    """Minimal query surface of a prefix autocompleter."""

    def top_matches(self, prefix: str, k: int) -> List[str]:
        """
        Return up to k words starting with prefix, highest weight first.
        Empty list if nothing matches.
        """
        ...

    def top_match(self, prefix: str) -> str:
        """Return the single highest-weight word starting with prefix, or ""."""
        ...

    def top_terms(self, prefix: str, k: int) -> List[Term]:
        """top_matches, but the Terms themselves so callers can show weights."""
        ...

    def top_term(self, prefix: str) -> Optional[Term]:
        """top_match, but the Term itself, None if nothing matches."""
        ...

    def weight_of(self, term: str) -> float:
        """Return the weight of term, or 0.0 if it is not in the vocabulary."""
        ...

    def __len__(self) -> int:
        """Number of terms in the vocabulary."""
        ...
