"""Selection sorts: plain, double-ended and heap sorts.

Every sort works on the given list in place and returns that same list.
"""

from __future__ import annotations

import operator
from collections.abc import Callable


def _swap(values: list, a: int, b: int) -> None:
    values[a], values[b] = values[b], values[a]


def double_selection_sort(values: list) -> list:
    """Place both the minimum and the maximum of the unsorted middle on each pass."""
    i, j = 0, len(values) - 1
    while i <= j:
        low, high = i, j
        for k in range(i, j + 1):
            if values[k] > values[high]:
                high = k
            if values[k] < values[low]:
                low = k
        if high == i:
            high = low
        _swap(values, i, low)
        _swap(values, j, high)
        i += 1
        j -= 1
    return values


def _sift_down(values: list, size: int, root: int, before: Callable) -> None:
    while True:
        top = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and before(values[child], values[top]):
                top = child
        if top == root:
            return
        _swap(values, root, top)
        root = top


def _heap_sort(values: list, before: Callable) -> list:
    length = len(values)
    for i in range(length // 2 - 1, -1, -1):
        _sift_down(values, length, i, before)
    for end in range(length - 1, 0, -1):
        _swap(values, 0, end)
        _sift_down(values, end, 0, before)
    return values


def max_heap_sort(values: list) -> list:
    """Heap sort with a max-heap, giving ascending order."""
    return _heap_sort(values, operator.gt)


def min_heap_sort(values: list) -> list:
    """Heap sort with a min-heap, giving descending order."""
    return _heap_sort(values, operator.lt)


def selection_sort(values: list) -> list:
    """Swap the smallest remaining element into each position in turn."""
    length = len(values)
    for i in range(length - 1):
        smallest = min(range(i, length), key=values.__getitem__)
        if smallest != i:
            _swap(values, i, smallest)
    return values