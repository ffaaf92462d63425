import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortcollection.arrays import (
    SortCase,
    format_array,
    generate_array,
    is_sorted,
    split_time,
    time_message,
    write_after,
    write_before,
)


def test_format_array_layout():
    assert format_array([1, 2, 3]) == "\n1 2 3 "


@given(st.lists(st.integers()))
def test_format_array_round_trip(values):
    text = format_array(values)
    assert text.startswith("\n")
    assert [int(part) for part in text.split()] == values


@given(st.lists(st.integers()))
def test_is_sorted_matches_sorted_lists(values):
    assert is_sorted(sorted(values), True)
    assert is_sorted(sorted(values, reverse=True), False)


def test_is_sorted_detects_disorder():
    assert not is_sorted([2, 1, 3], True)
    assert not is_sorted([1, 3, 2], False)
    assert is_sorted([5, 5, 5], True)
    assert is_sorted([5, 5, 5], False)


def test_generate_ascending_and_descending():
    assert generate_array(6, SortCase.ASCENDING) == list(range(6))
    assert generate_array(6, SortCase.DESCENDING) == list(range(6, 0, -1))


def test_generate_identical():
    values = generate_array(7, SortCase.IDENTICAL)
    assert len(values) == 7
    assert set(values) == {1}


@given(st.integers(0, 200), st.integers(1, 50), st.integers(0, 2**32))
def test_generate_random_within_range(length, upper, seed):
    values = generate_array(length, SortCase.RANDOM, upper, random.Random(seed))
    assert len(values) == length
    assert all(1 <= value <= upper for value in values)


def test_generate_random_is_reproducible_with_seed():
    first = generate_array(20, SortCase.RANDOM, 100, random.Random(7))
    second = generate_array(20, SortCase.RANDOM, 100, random.Random(7))
    assert first == second


def test_unknown_case_falls_back_to_random():
    values = generate_array(50, 9, 3, random.Random(1))
    assert all(1 <= value <= 3 for value in values)


def test_generate_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_array(-1, SortCase.ASCENDING)
    with pytest.raises(ValueError):
        generate_array(3, SortCase.RANDOM, 0)


def test_split_time_example():
    assert split_time(1.5) == (1, 500000)


@given(st.integers(0, 10**9))
def test_split_time_round_trip(total_micros):
    seconds, micros = split_time(total_micros / 1_000_000)
    assert 0 <= micros < 1_000_000
    assert seconds * 1_000_000 + micros == total_micros


def test_split_time_rejects_negative():
    with pytest.raises(ValueError):
        split_time(-0.1)


def test_write_before_random_case(tmp_path):
    path = tmp_path / "data.txt"
    write_before(path, [3, 1, 2], False, "Bubble Sort", 32, SortCase.RANDOM)
    assert path.read_text(encoding="utf-8") == (
        "\n\tBubble Sort algorithm with length of 3 elements and range of 0 to 32 randomly."
    )


def test_write_before_uses_length_for_other_cases_and_displays(tmp_path):
    path = tmp_path / "data.txt"
    values = [0, 1, 2, 3]
    write_before(path, values, True, "Tim Sort", 32, SortCase.ASCENDING)
    content = path.read_text(encoding="utf-8")
    header, _, rest = content.partition("\n\tArray before sort:")
    assert header.endswith(f"to {len(values)} {SortCase.ASCENDING.label}.")
    assert rest == format_array(values) + "\n"


def test_write_after_appends(tmp_path):
    path = tmp_path / "data.txt"
    values = [4, 5]
    write_after(path, values, True, False, 0.0, True)
    write_after(path, values, True, True, 2.25, False)
    content = path.read_text(encoding="utf-8")
    assert content == (
        " Array sorted:" + format_array(values) + "\n"
        + " Array not sorted:" + format_array(values) + "\n"
        + time_message(2.25)
    )


def test_write_fails_on_directory(tmp_path):
    with pytest.raises(OSError):
        write_after(tmp_path, [1], True, True, 0.0, True)
    with pytest.raises(OSError):
        write_before(tmp_path, [1], True, "Bad Sort", 32, SortCase.RANDOM)