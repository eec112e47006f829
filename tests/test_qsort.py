import pytest
from hypothesis import given
from hypothesis import strategies as st

from eposkit.clib import Rand
from eposkit.qsort import qsort


def ascending(x, y):
    return (x > y) - (x < y)


def descending(x, y):
    return (x < y) - (x > y)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_sorted(values):
    data = list(values)
    qsort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers(min_value=0, max_value=5), min_size=0, max_size=200))
def test_many_duplicates(values):
    data = list(values)
    qsort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers()))
def test_descending_comparator(values):
    data = list(values)
    qsort(data, descending)
    assert data == sorted(values, reverse=True)


@pytest.mark.parametrize("size", [0, 1, 2, 6, 7, 8, 40, 41, 100, 1000])
def test_random_arrays_of_boundary_sizes(size):
    rng = Rand(size + 1)
    values = [rng.rand() % 1000 for _ in range(size)]
    data = list(values)
    qsort(data, ascending)
    assert data == sorted(values)


def test_sorts_in_place():
    data = [5, 3, 9, 1, 7, 2, 8, 6, 4, 0]
    alias = data
    qsort(data, ascending)
    assert alias is data
    assert alias == list(range(10))


def test_records_ordered_by_key_and_kept_as_permutation():
    rng = Rand(42)
    records = [(rng.rand() % 10, i) for i in range(300)]
    data = list(records)
    qsort(data, lambda x, y: ascending(x[0], y[0]))
    keys = [key for key, _ in data]
    assert keys == sorted(keys)
    assert sorted(data) == sorted(records)


def test_strings():
    words = ["pear", "apple", "fig", "kiwi", "banana", "cherry", "date", "grape", "lime"]
    data = list(words)
    qsort(data, ascending)
    assert data == sorted(words)


@pytest.mark.parametrize("data", [[], [17]])
def test_trivial_inputs_make_no_comparisons(data):
    calls = []

    def counting(x, y):
        calls.append((x, y))
        return ascending(x, y)

    before = list(data)
    qsort(data, counting)
    assert data == before
    assert calls == []


def test_already_sorted_and_reversed():
    forward = list(range(500))
    backward = list(range(499, -1, -1))
    qsort(forward, ascending)
    qsort(backward, ascending)
    assert forward == list(range(500))
    assert backward == list(range(500))


def test_comparator_error_propagates():
    def broken(x, y):
        raise ValueError("cannot compare")

    with pytest.raises(ValueError, match="cannot compare"):
        qsort([3, 1, 2], broken)