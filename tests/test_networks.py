import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortcollection.networks import bitonic_sort, pairwise_sort

POWER_OF_TWO_LISTS = st.integers(min_value=0, max_value=6).flatmap(
    lambda exp: st.lists(st.integers(-1000, 1000), min_size=2**exp, max_size=2**exp)
)


@given(POWER_OF_TWO_LISTS)
def test_bitonic_sorts_ascending(data):
    expected = sorted(data)
    assert bitonic_sort(data) == expected


@given(POWER_OF_TWO_LISTS)
def test_bitonic_sorts_descending(data):
    expected = sorted(data, reverse=True)
    assert bitonic_sort(data, ascending=False) == expected


def test_bitonic_descending_example():
    assert bitonic_sort([3, 1, 4, 2], ascending=False) == [4, 3, 2, 1]


def test_bitonic_returns_same_list():
    data = [8, 7, 6, 5, 4, 3, 2, 1]
    result = bitonic_sort(data)
    assert result is data
    assert data == sorted(data)


@pytest.mark.parametrize("length", [3, 5, 6, 10, 12])
def test_bitonic_rejects_other_lengths(length):
    with pytest.raises(ValueError):
        bitonic_sort(list(range(length)))


def test_bitonic_empty_and_single():
    assert bitonic_sort([]) == []
    assert bitonic_sort([7]) == [7]


@given(st.lists(st.integers(-1000, 1000), max_size=80))
def test_pairwise_sorts_any_length(data):
    expected = sorted(data)
    assert pairwise_sort(data) == expected


@pytest.mark.parametrize("length", range(0, 20))
def test_pairwise_reverse_inputs(length):
    data = list(range(length, 0, -1))
    assert pairwise_sort(data) == list(range(1, length + 1))


def test_pairwise_returns_same_list():
    data = [5, 1, 4, 1, 5, 9, 2]
    result = pairwise_sort(data)
    assert result is data
    assert result == sorted([5, 1, 4, 1, 5, 9, 2])