# tests/test_boundary_search.py
# first_index_of / last_index_of: correctness and the comparator-call bound

import math
import random

import pytest

from prefix_autocompleter.core.boundary_search import (
    NOT_FOUND,
    first_index_of,
    last_index_of,
)
from prefix_autocompleter.core.errors import InvalidArgument
from prefix_autocompleter.core.term import PrefixOrder, Term, lexicographic_order


class CountingComparator:
    """Wraps a comparator and counts how often it is called."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.inner(a, b)


def _terms(*words):
    return sorted(Term(w, i) for i, w in enumerate(words))


@pytest.fixture
def small():
    return _terms("air", "bat", "bell", "boy", "boy", "cat")


def test_first_and_last_of_prefix_run(small):
    key = Term("b", 0)
    order = PrefixOrder(1)
    assert first_index_of(small, key, order) == 1
    assert last_index_of(small, key, order) == 4


def test_duplicates_bounded_exactly(small):
    key = Term("boy", 0)
    assert first_index_of(small, key, lexicographic_order) == 3
    assert last_index_of(small, key, lexicographic_order) == 4


def test_missing_key_returns_not_found(small):
    key = Term("d", 0)
    order = PrefixOrder(1)
    assert first_index_of(small, key, order) == NOT_FOUND
    assert last_index_of(small, key, order) == NOT_FOUND
    # falls between existing words
    key = Term("bz", 0)
    assert first_index_of(small, key, PrefixOrder(2)) == NOT_FOUND
    assert last_index_of(small, key, PrefixOrder(2)) == NOT_FOUND


def test_ends_of_array(small):
    assert first_index_of(small, Term("air", 0), lexicographic_order) == 0
    assert last_index_of(small, Term("cat", 0), lexicographic_order) == len(small) - 1


def test_empty_array():
    cmp = CountingComparator(lexicographic_order)
    assert first_index_of([], Term("a", 0), cmp) == NOT_FOUND
    assert last_index_of([], Term("a", 0), cmp) == NOT_FOUND
    assert cmp.calls == 0


def test_single_element():
    a = [Term("solo", 1)]
    assert first_index_of(a, Term("so", 0), PrefixOrder(2)) == 0
    assert last_index_of(a, Term("so", 0), PrefixOrder(2)) == 0
    assert first_index_of(a, Term("x", 0), PrefixOrder(1)) == NOT_FOUND


@pytest.mark.parametrize("fn", [first_index_of, last_index_of])
def test_missing_arguments_raise(fn, small):
    with pytest.raises(InvalidArgument):
        fn(None, Term("a", 0), lexicographic_order)
    with pytest.raises(InvalidArgument):
        fn(small, None, lexicographic_order)
    with pytest.raises(InvalidArgument):
        fn(small, Term("a", 0), None)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 8, 9, 16, 17, 100, 1000, 1023, 1024, 1025])
def test_comparator_call_bound(n):
    rng = random.Random(n)
    words = ["".join(rng.choice("abc") for _ in range(rng.randint(1, 4))) for _ in range(n)]
    a = sorted(Term(w, 1) for w in words)
    bound = 1 + math.ceil(math.log2(n))

    for probe in ["", "a", "ab", "b", "cc", "ccc", "d", words[0]]:
        key = Term(probe, 0)
        for fn in (first_index_of, last_index_of):
            cmp = CountingComparator(PrefixOrder(len(probe)))
            fn(a, key, cmp)
            assert cmp.calls <= bound, (fn.__name__, n, probe, cmp.calls)


def test_matches_linear_scan_on_random_data():
    rng = random.Random(7)
    words = ["".join(rng.choice("abcd") for _ in range(rng.randint(0, 5))) for _ in range(400)]
    a = sorted(Term(w, 1) for w in words)

    for probe in ["", "a", "b", "ab", "abc", "dd", "dddddd", "ca"]:
        hits = [i for i, t in enumerate(a) if t.word.startswith(probe)]
        key = Term(probe, 0)
        order = PrefixOrder(len(probe))
        first = first_index_of(a, key, order)
        last = last_index_of(a, key, order)
        if hits:
            assert (first, last) == (hits[0], hits[-1])
            # the run is contiguous
            assert hits == list(range(first, last + 1))
        else:
            assert first == last == NOT_FOUND
