"""Merge sorts: top-down, bottom-up and in-place.

Every sort works on the given list in place and returns that same list.
"""

from __future__ import annotations


def _merge(values: list[int], start: int, middle: int, end: int) -> None:
    left = values[start : middle + 1]
    right = values[middle + 1 : end + 1]
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[start : end + 1] = merged


def bottom_up_merge_sort(values: list[int]) -> list[int]:
    """Merge runs of width 1, 2, 4, ... until one run covers the list."""
    length = len(values)
    width = 1
    while width < length:
        for start in range(0, length - width, 2 * width):
            end = min(start + 2 * width - 1, length - 1)
            _merge(values, start, start + width - 1, end)
        width *= 2
    return values


def _merge_in_place(values: list[int], start: int, middle: int, end: int) -> None:
    second = middle + 1
    if values[middle] <= values[second]:
        return
    while start <= middle and second <= end:
        if values[start] <= values[second]:
            start += 1
        else:
            item = values[second]
            values[start + 1 : second + 1] = values[start:second]
            values[start] = item
            start += 1
            middle += 1
            second += 1


def _merge_sort_in_place(values: list[int], start: int, end: int) -> None:
    if start < end:
        middle = (start + end) // 2
        _merge_sort_in_place(values, start, middle)
        _merge_sort_in_place(values, middle + 1, end)
        if values[middle] < values[middle + 1]:
            return
        _merge_in_place(values, start, middle, end)


def in_place_merge_sort(values: list[int]) -> list[int]:
    """Merge sort that merges halves by shifting elements instead of using a buffer."""
    _merge_sort_in_place(values, 0, len(values) - 1)
    return values


def _merge_sort(values: list[int], start: int, end: int) -> None:
    if start < end:
        middle = (start + end) // 2
        _merge_sort(values, start, middle)
        _merge_sort(values, middle + 1, end)
        if values[middle] < values[middle + 1]:
            return
        _merge(values, start, middle, end)


def merge_sort(values: list[int]) -> list[int]:
    """Top-down merge sort that skips merging halves already in order."""
    _merge_sort(values, 0, len(values) - 1)
    return values