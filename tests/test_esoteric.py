import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sortcollection.esoteric import (
    bad_sort,
    bogo_bogo_sort,
    bogo_sort,
    bubble_bogo_sort,
    cocktail_bogo_sort,
    exchange_bogo_sort,
    flip,
    less_bogo_sort,
    pancake_sort,
    silly_sort,
    sleep_sort,
    slow_sort,
    spaghetti_sort,
    stooge_sort,
)

small_ints = st.integers(min_value=-50, max_value=50)

RANDOM_INPUTS = [
    [],
    [7],
    [2, 1],
    [3, 1, 2],
    [4, 3, 2, 1],
    [1, 1, 0, 1],
    [5, -2, 5, 0, 3],
    [0, 1, 2, 3, 4],
]


@given(values=st.lists(small_ints, max_size=25))
def test_deterministic_sorts_match_sorted(values):
    expected = sorted(values)
    inputs = [list(values) for _ in range(4)]
    outputs = [
        bad_sort(inputs[0]),
        pancake_sort(inputs[1]),
        spaghetti_sort(inputs[2]),
        stooge_sort(inputs[3]),
    ]
    for data, result in zip(inputs, outputs):
        assert result is data
        assert data == expected


@given(values=st.lists(small_ints, max_size=8))
def test_recursive_sorts_match_sorted(values):
    expected = sorted(values)
    silly = list(values)
    slow = list(values)
    assert silly_sort(silly) == expected
    assert silly == expected
    assert slow_sort(slow) == expected
    assert slow == expected


@pytest.mark.parametrize("values", RANDOM_INPUTS)
def test_randomised_sorts(values):
    expected = sorted(values)
    inputs = [list(values) for _ in range(5)]
    outputs = [
        bogo_sort(inputs[0], random.Random(1234)),
        bubble_bogo_sort(inputs[1], random.Random(1234)),
        cocktail_bogo_sort(inputs[2], random.Random(1234)),
        exchange_bogo_sort(inputs[3], random.Random(1234)),
        less_bogo_sort(inputs[4], random.Random(1234)),
    ]
    for data, result in zip(inputs, outputs):
        assert result is data
        assert data == expected


@pytest.mark.parametrize("values", [[], [9], [2, 1], [3, 1, 2], [4, 2, 3, 1], [1, 0, 1, 0]])
def test_bogo_bogo_sort(values):
    data = list(values)
    assert bogo_bogo_sort(data, random.Random(7)) == sorted(values)


def test_randomised_sorts_are_reproducible():
    pairs = [
        (bogo_sort([3, 0, 2, 1], random.Random(99)), bogo_sort([3, 0, 2, 1], random.Random(99))),
        (
            bubble_bogo_sort([3, 0, 2, 1], random.Random(99)),
            bubble_bogo_sort([3, 0, 2, 1], random.Random(99)),
        ),
        (
            cocktail_bogo_sort([3, 0, 2, 1], random.Random(99)),
            cocktail_bogo_sort([3, 0, 2, 1], random.Random(99)),
        ),
        (
            exchange_bogo_sort([3, 0, 2, 1], random.Random(99)),
            exchange_bogo_sort([3, 0, 2, 1], random.Random(99)),
        ),
        (
            less_bogo_sort([3, 0, 2, 1], random.Random(99)),
            less_bogo_sort([3, 0, 2, 1], random.Random(99)),
        ),
        (
            bogo_bogo_sort([3, 0, 2, 1], random.Random(99)),
            bogo_bogo_sort([3, 0, 2, 1], random.Random(99)),
        ),
    ]
    for first, second in pairs:
        assert first == second == [0, 1, 2, 3]


@settings(max_examples=30)
@given(values=st.lists(st.integers(min_value=0, max_value=5), max_size=6))
def test_cocktail_bogo_sort_property(values):
    data = list(values)
    assert cocktail_bogo_sort(data, random.Random(0)) == sorted(values)


def test_flip_reverses_prefix_inclusive():
    data = [1, 2, 3, 4, 5]
    assert flip(data, 2) == [3, 2, 1, 4, 5]


@given(values=st.lists(small_ints, min_size=1, max_size=15), data=st.data())
def test_flip_twice_is_identity(values, data):
    end = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    working = list(values)
    flip(working, end)
    assert working[: end + 1] == values[end::-1]
    assert working[end + 1 :] == values[end + 1 :]
    flip(working, end)
    assert working == values


def test_pancake_sort_keeps_multiset():
    data = [3, 3, -1, 7, 0, 7]
    pancake_sort(data)
    assert sorted(data) == data
    assert sorted(data) == sorted([3, 3, -1, 7, 0, 7])


def test_spaghetti_sort_empty():
    data = []
    assert spaghetti_sort(data) == []


def test_sleep_sort_orders_by_delay():
    data = [3, 0, 2, 1, 2]
    result = sleep_sort(data, unit=0.05)
    assert result is data
    assert data == [0, 1, 2, 2, 3]


def test_sleep_sort_empty():
    assert sleep_sort([], unit=0.01) == []


def test_sleep_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        sleep_sort([1, -1], unit=0.01)


def test_sleep_sort_rejects_negative_unit():
    with pytest.raises(ValueError):
        sleep_sort([1, 2], unit=-0.5)