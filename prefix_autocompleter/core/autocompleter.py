# autocompleter.py
"""
BinarySearchAutocompleter - prefix autocomplete over a sorted term array.

Purpose:
 - Own the vocabulary as a tuple of Terms sorted lexicographically by word
 - Bound the run of terms sharing a prefix with two binary searches
 - Pick the top-k of that run by weight with a bounded min-heap

Because the array is sorted by word, every term starting with a given prefix
sits in one contiguous block. Both query paths (top_matches / top_match)
share the same block lookup and only differ in how they scan it.

Tie-break: heap entries are (weight, position) where position is the index in
the sorted array, so on equal weights the lexicographically larger word wins.
top_match uses a >= scan which picks the same term, keeping
top_matches(p, 1) == [top_match(p)].
"""

from __future__ import annotations
import heapq
from typing import Iterable, List, Optional, Sequence, Tuple

from prefix_autocompleter.core.boundary_search import (
    NOT_FOUND,
    first_index_of,
    last_index_of,
)
from prefix_autocompleter.core.errors import InvalidArgument
from prefix_autocompleter.core.term import PrefixOrder, Term, lexicographic_order
from prefix_autocompleter.utils.logger_utils import LOG

Range = Tuple[int, int]
EMPTY_RANGE: Range = (NOT_FOUND, NOT_FOUND)


class BinarySearchAutocompleter:
    """
    Static, read-only autocomplete index.

    Public API:
      - top_matches(prefix, k) -> List[str]
      - top_match(prefix) -> str
      - top_terms(prefix, k) / top_term(prefix): same, returning Terms (word + weight)
      - weight_of(term) -> float
      - prefix_range(prefix) -> (first, last), inclusive, (-1, -1) if none
    """

    def __init__(self, words: Sequence[str], weights: Sequence[float]):
        if words is None or weights is None:
            raise InvalidArgument("One or more arguments None")
        if len(words) != len(weights):
            raise InvalidArgument(
                f"words and weights differ in length ({len(words)} != {len(weights)})"
            )

        # Term() validates each pair, so a bad weight aborts before anything is stored
        terms = [Term(w, wt) for w, wt in zip(words, weights)]
        terms.sort()
        self._terms: Tuple[Term, ...] = tuple(terms)
        LOG.info(f"[BinarySearchAutocompleter] built index of {len(self._terms)} terms")

    @classmethod
    def build(cls, words: Sequence[str], weights: Sequence[float]) -> "BinarySearchAutocompleter":
        return cls(words, weights)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, float]]) -> "BinarySearchAutocompleter":
        """Build from (word, weight) pairs instead of parallel sequences."""
        if pairs is None:
            raise InvalidArgument("pairs is required")
        pairs = list(pairs)
        return cls([w for w, _ in pairs], [wt for _, wt in pairs])

    # read-only accessors -------------------------------------------------------
    @property
    def terms(self) -> Tuple[Term, ...]:
        return self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return first_index_of(self._terms, Term(word, 0), lexicographic_order) != NOT_FOUND

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(terms={len(self._terms)})"

    # search --------------------------------------------------------------------
    def prefix_range(self, prefix: str) -> Range:
        """Inclusive [first, last] bounds of the terms starting with prefix."""
        if prefix is None or not isinstance(prefix, str):
            raise InvalidArgument(f"prefix must be a string, got {prefix!r}")
        key = Term(prefix, 0)
        order = PrefixOrder(len(prefix))
        first = first_index_of(self._terms, key, order)
        if first == NOT_FOUND:
            return EMPTY_RANGE
        last = last_index_of(self._terms, key, order)
        if last == NOT_FOUND:
            return EMPTY_RANGE
        return first, last

    def top_terms(self, prefix: str, k: int) -> List[Term]:
        """
        Like top_matches but returns the Terms themselves, so callers that show
        weights get the weight of the exact entry picked (duplicate words included).
        """
        if k is None or isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgument(f"k must be an int, got {k!r}")
        if k < 0:
            raise InvalidArgument(f"k must be >= 0, got {k}")
        first, last = self.prefix_range(prefix)
        if first == NOT_FOUND or k == 0:
            return []

        # min-heap of (weight, position); smallest of the current top-k on top
        heap: List[Tuple[float, int]] = []
        for i in range(first, last + 1):
            heapq.heappush(heap, (self._terms[i].weight, i))
            if len(heap) > k:
                heapq.heappop(heap)

        drained = [heapq.heappop(heap) for _ in range(len(heap))]
        drained.reverse()
        out = [self._terms[i] for _, i in drained]
        LOG.debug(f"[top_matches] prefix={prefix!r} k={k} range=({first},{last}) -> {len(out)}")
        return out

    def top_matches(self, prefix: str, k: int) -> List[str]:
        """
        Return the k words with the largest weight starting with prefix, in
        descending weight order. Fewer than k if fewer match, [] if none.
        e.g. terms {air:3, bat:2, bell:4, boy:1}:
            top_matches("b", 2) -> ["bell", "bat"]
            top_matches("a", 2) -> ["air"]
        """
        return [t.word for t in self.top_terms(prefix, k)]

    def top_term(self, prefix: str) -> Optional[Term]:
        """The largest-weight Term starting with prefix (later term wins ties), None if none."""
        first, last = self.prefix_range(prefix)
        if first == NOT_FOUND:
            return None

        best = None
        for i in range(first, last + 1):
            t = self._terms[i]
            if best is None or t.weight >= best.weight:
                best = t
        return best

    def top_match(self, prefix: str) -> str:
        """
        Return the largest-weight word starting with prefix, "" if none.
        e.g. for {air:3, bat:2, bell:4, boy:1}, top_match("b") -> "bell".
        """
        best = self.top_term(prefix)
        return best.word if best is not None else ""

    def weight_of(self, term: str) -> float:
        """Return the weight of term, 0.0 if it is not in the vocabulary."""
        if term is None or not isinstance(term, str):
            raise InvalidArgument(f"term must be a string, got {term!r}")
        i = first_index_of(self._terms, Term(term, 0), lexicographic_order)
        if i == NOT_FOUND:
            return 0.0
        return self._terms[i].weight
