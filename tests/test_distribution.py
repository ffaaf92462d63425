import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortcollection.distribution import (
    bead_sort,
    bucket_sort,
    counting_sort,
    pigeonhole_sort,
    radix_lsd_sort,
)

INTS = st.lists(st.integers(-500, 500), max_size=60)
NON_NEGATIVE = st.lists(st.integers(0, 60), max_size=40)


@given(INTS)
def test_bucket_sort(data):
    expected = sorted(data)
    assert bucket_sort(data) == expected


def test_bucket_sort_keeps_zeros():
    data = [0, 3, 0, 1, 2]
    assert bucket_sort(data) == sorted([0, 3, 0, 1, 2])
    assert len(data) == 5


def test_bucket_sort_all_zero():
    assert bucket_sort([0, 0, 0]) == [0, 0, 0]


@given(INTS)
def test_counting_sort(data):
    expected = sorted(data)
    assert counting_sort(data) == expected


@given(NON_NEGATIVE)
def test_bead_sort(data):
    expected = sorted(data)
    assert bead_sort(data) == expected


def test_bead_sort_rejects_negative():
    with pytest.raises(ValueError):
        bead_sort([3, -1, 2])


def test_bead_sort_all_zero():
    assert bead_sort([0, 0]) == [0, 0]


@given(INTS)
def test_pigeonhole_sort(data):
    expected = sorted(data)
    assert pigeonhole_sort(data) == expected


@given(INTS, st.integers(2, 20))
def test_radix_sort_any_radix(data, radix):
    expected = sorted(data)
    assert radix_lsd_sort(data, radix) == expected


@given(INTS)
def test_radix_sort_default(data):
    expected = sorted(data)
    assert radix_lsd_sort(data) == expected


@pytest.mark.parametrize("radix", [1, 0, -3])
def test_radix_rejects_small_radix(radix):
    with pytest.raises(ValueError):
        radix_lsd_sort([2, 1], radix)


@pytest.mark.parametrize(
    "sort", [bucket_sort, counting_sort, bead_sort, pigeonhole_sort, radix_lsd_sort]
)
def test_sorts_in_place(sort):
    data = [9, 4, 7, 1, 1, 30]
    result = sort(data)
    assert result is data
    assert data == sorted([9, 4, 7, 1, 1, 30])


@pytest.mark.parametrize(
    "sort", [bucket_sort, counting_sort, bead_sort, pigeonhole_sort, radix_lsd_sort]
)
def test_empty(sort):
    assert sort([]) == []