# term.py
# A single dictionary entry (word, weight) and the orderings used to search
# the sorted term array.
#
# Orderings are plain comparator callables: f(a, b) -> negative / 0 / positive.
# They never touch the Term itself, so the same sorted array can be searched
# under different orders (prefix range, exact word) without re-sorting.

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Callable
import math

from prefix_autocompleter.core.errors import InvalidArgument

Comparator = Callable[["Term", "Term"], int]


def _cmp(x, y) -> int:
    """Three-way compare for anything supporting < and >."""
    return (x > y) - (x < y)


@dataclass(frozen=True)
class Term:
    """
    Immutable (word, weight) pair.

    word: any string, empty allowed
    weight: non-negative real number, stored as float

    Default ordering (used by sorted()) is lexicographic by word.
    """

    word: str
    weight: float

    def __post_init__(self) -> None:
        if self.word is None or not isinstance(self.word, str):
            raise InvalidArgument(f"word must be a string, got {self.word!r}")
        w = self.weight
        if w is None or isinstance(w, bool) or not isinstance(w, Real):
            raise InvalidArgument(f"weight must be a real number, got {w!r}")
        if math.isnan(w) or w < 0:
            raise InvalidArgument(f"Negative weight {w}")
        object.__setattr__(self, "weight", float(w))

    def __lt__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.word < other.word

    def __str__(self) -> str:
        return f"{self.weight}\t{self.word}"


# orderings -----------------------------------------------------------------
def lexicographic_order(a: Term, b: Term) -> int:
    """Ordinal comparison of the full words."""
    return _cmp(a.word, b.word)


def weight_order(a: Term, b: Term) -> int:
    """Ascending by weight (smallest first, as a min-heap wants it)."""
    return _cmp(a.weight, b.weight)


class PrefixOrder:
    """
    Compares only the first r characters of each word.

    Two terms are equal under this order iff word[:r] is identical. A word
    shorter than r is compared as a whole, so it sorts before any r-length
    key it is a prefix of and can never equal one.
    """

    __slots__ = ("r",)

    def __init__(self, r: int) -> None:
        if r is None or r < 0:
            raise InvalidArgument(f"prefix length must be >= 0, got {r!r}")
        self.r = r

    def __call__(self, a: Term, b: Term) -> int:
        return _cmp(a.word[: self.r], b.word[: self.r])

    def __repr__(self) -> str:
        return f"PrefixOrder({self.r})"
