"""Sorting networks: bitonic and pairwise.

Every sort works on the given list in place and returns that same list.
"""

from __future__ import annotations


def _compare_swap(values: list, a: int, b: int) -> None:
    if values[a] > values[b]:
        values[a], values[b] = values[b], values[a]


def _bitonic_merge(values: list, start: int, length: int, ascending: bool) -> None:
    if length > 1:
        middle = length // 2
        for i in range(start, start + middle):
            if ascending == (values[i] > values[i + middle]):
                values[i], values[i + middle] = values[i + middle], values[i]
        _bitonic_merge(values, start, middle, ascending)
        _bitonic_merge(values, start + middle, middle, ascending)


def _bitonic(values: list, low: int, length: int, ascending: bool) -> None:
    if length > 1:
        middle = length // 2
        _bitonic(values, low, middle, True)
        _bitonic(values, low + middle, middle, False)
        _bitonic_merge(values, low, length, ascending)


def bitonic_sort(values: list, ascending: bool = True) -> list:
    """Sort with a bitonic network; the length must be a power of two.

    Raises ValueError for any other length greater than one.
    """
    length = len(values)
    if length > 1 and length & (length - 1):
        raise ValueError("bitonic sort needs a length that is a power of two")
    _bitonic(values, 0, length, ascending)
    return values


def _pairwise(values: list, start: int, end: int, gap: int) -> None:
    if start == end - gap:
        return
    for i in range(start + gap, end, 2 * gap):
        _compare_swap(values, i - gap, i)
    count = (end - start) // gap
    if count % 2 == 0:
        _pairwise(values, start, end, gap * 2)
        _pairwise(values, start + gap, end + gap, gap * 2)
    else:
        _pairwise(values, start, end + gap, gap * 2)
        _pairwise(values, start + gap, end, gap * 2)
    span = 1
    while span < count:
        span = span * 2 + 1
    i = start + gap
    while i + gap < end:
        k = span
        while k > 1:
            k //= 2
            if i + k * gap < end:
                _compare_swap(values, i, i + k * gap)
        i += 2 * gap


def pairwise_sort(values: list) -> list:
    """Sort with the pairwise sorting network, which accepts any length."""
    if len(values) > 1:
        _pairwise(values, 0, len(values), 1)
    return values