"""Hybrid sorts."""

from __future__ import annotations

RUN = 32


def _insertion_sort(values: list, start: int, end: int) -> None:
    for i in range(start + 1, end + 1):
        item = values[i]
        j = i - 1
        while j >= start and values[j] > item:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = item


def _merge(values: list, start: int, middle: int, end: int) -> None:
    left = values[start : middle + 1]
    right = values[middle + 1 : end + 1]
    i = j = 0
    k = start
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        k += 1
    rest = left[i:] + right[j:]
    values[k : k + len(rest)] = rest


def tim_sort(values: list) -> list:
    """Insertion-sort runs of 32 elements, then merge them pairwise in doubling widths."""
    length = len(values)
    for start in range(0, length, RUN):
        _insertion_sort(values, start, min(start + RUN - 1, length - 1))
    size = RUN
    while size < length:
        for left in range(0, length, 2 * size):
            middle = left + size - 1
            right = min(left + 2 * size - 1, length - 1)
            if middle < right:
                _merge(values, left, middle, right)
        size *= 2
    return values