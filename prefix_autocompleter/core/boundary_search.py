# boundary_search.py
# Binary searches that find the first/last position of a run of elements
# equal to a key under some comparator. Used to bound the contiguous block
# of terms sharing a prefix in the lexicographically sorted array.
#
# Both searches make at most 1 + ceil(log2(n)) comparator calls: the loop
# halves a bracket of width n, then one final equality check.

from __future__ import annotations
from typing import Sequence

from prefix_autocompleter.core.errors import InvalidArgument
from prefix_autocompleter.core.term import Comparator, Term

NOT_FOUND = -1


def _check_args(a, key, comparator) -> None:
    if a is None or key is None or comparator is None:
        raise InvalidArgument("array, key and comparator are required")


def first_index_of(a: Sequence[Term], key: Term, comparator: Comparator) -> int:
    """
    Return the first index i with comparator(a[i], key) == 0, or -1.
    `a` must already be sorted under `comparator`.
    """
    _check_args(a, key, comparator)
    if len(a) == 0:
        return NOT_FOUND

    # invariant: a[low] < key (low == -1 is a virtual -inf), a[high] >= key
    low, high = -1, len(a) - 1
    while low + 1 != high:
        mid = (low + high) // 2
        if comparator(a[mid], key) < 0:
            low = mid
        else:
            high = mid

    if comparator(a[high], key) == 0:
        return high
    return NOT_FOUND


def last_index_of(a: Sequence[Term], key: Term, comparator: Comparator) -> int:
    """
    Return the last index i with comparator(a[i], key) == 0, or -1.
    Mirror image of first_index_of.
    """
    _check_args(a, key, comparator)
    if len(a) == 0:
        return NOT_FOUND

    # invariant: a[high] > key (high == n is a virtual +inf)
    low, high = 0, len(a)
    while low + 1 != high:
        mid = (low + high) // 2
        if comparator(a[mid], key) <= 0:
            low = mid
        else:
            high = mid

    if comparator(a[low], key) == 0:
        return low
    return NOT_FOUND
