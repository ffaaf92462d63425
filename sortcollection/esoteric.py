"""Esoteric, fun and miscellaneous sorting algorithms.

Every sort works on the given list in place and returns that same list.
Algorithms that rely on chance take an optional ``random.Random`` so runs can
be reproduced; without one the module-level generator is used.
"""

from __future__ import annotations

import random
import threading
import time

from .arrays import is_sorted


def _source(rng: random.Random | None):
    return rng if rng is not None else random


def _prefix_sorted(values: list[int], size: int) -> bool:
    return is_sorted(values[:size])


def bad_sort(values: list[int]) -> list[int]:
    """Selection sort that finds each minimum by checking every later element."""
    length = len(values)
    for i in range(length):
        smallest = i
        for j in range(i, length):
            if all(values[j] <= later for later in values[j + 1 :]):
                smallest = j
                break
        values[i], values[smallest] = values[smallest], values[i]
    return values


def bogo_bogo_sort(values: list[int], rng: random.Random | None = None) -> list[int]:
    """Shuffle ever larger prefixes, starting over whenever a prefix is unsorted."""
    length = len(values)
    if length < 2:
        return values
    source = _source(rng)
    size = 2
    while True:
        if _prefix_sorted(values, size):
            if size == length:
                return values
            size += 1
        else:
            size = 2
        for i in range(size):
            r = source.randrange(size)
            values[i], values[r] = values[r], values[i]


def bogo_sort(values: list[int], rng: random.Random | None = None) -> list[int]:
    """Shuffle the whole list until it happens to be sorted."""
    source = _source(rng)
    length = len(values)
    while not is_sorted(values):
        for i in range(length):
            r = source.randrange(length)
            values[i], values[r] = values[r], values[i]
    return values


def bubble_bogo_sort(values: list[int], rng: random.Random | None = None) -> list[int]:
    """Fix a randomly chosen adjacent pair until the list is sorted."""
    source = _source(rng)
    while not is_sorted(values):
        r = source.randrange(len(values) - 1)
        if values[r] > values[r + 1]:
            values[r], values[r + 1] = values[r + 1], values[r]
    return values


def cocktail_bogo_sort(values: list[int], rng: random.Random | None = None) -> list[int]:
    """Move random elements to the edges of a window that shrinks from both ends.

    Inside the window, a randomly picked element larger than the last one is
    swapped to the end and one smaller than the first is swapped to the front.
    Once either edge holds the window's extreme, that edge closes in.
    """
    source = _source(rng)
    low, high = 0, len(values) - 1
    while low < high:
        window = values[low : high + 1]
        if is_sorted(window):
            return values
        max_placed = values[high] == max(window)
        min_placed = values[low] == min(window)
        while not max_placed and not min_placed:
            r = source.randint(low, high)
            picked = values[r]
            if picked > values[high]:
                values[r], values[high] = values[high], picked
            elif picked < values[low]:
                values[r], values[low] = values[low], picked
            window = values[low : high + 1]
            max_placed = values[high] == max(window)
            min_placed = values[low] == min(window)
        if min_placed:
            low += 1
        if max_placed:
            high -= 1
    return values


def exchange_bogo_sort(values: list[int], rng: random.Random | None = None) -> list[int]:
    """Swap two randomly chosen positions when they are out of order."""
    source = _source(rng)
    length = len(values)
    while not is_sorted(values):
        first = source.randrange(length)
        second = source.randrange(length)
        if first < second:
            out_of_order = values[first] > values[second]
        else:
            out_of_order = values[first] < values[second]
        if out_of_order:
            values[first], values[second] = values[second], values[first]
    return values


def less_bogo_sort(values: list[int], rng: random.Random | None = None) -> list[int]:
    """Grow a sorted prefix one element at a time by random swaps into its end."""
    source = _source(rng)
    length = len(values)
    for i in range(length):
        while not _prefix_sorted(values, i + 1):
            r = source.randrange(length)
            values[r], values[i] = values[i], values[r]
    return values


def flip(values: list[int], end: int) -> list[int]:
    """Reverse values[0..end], both ends included, in place."""
    if end >= 0:
        values[: end + 1] = values[end::-1]
    return values


def pancake_sort(values: list[int]) -> list[int]:
    """Sort by flipping prefixes to bring each maximum to its place."""
    for size in range(len(values), 1, -1):
        largest = max(range(size), key=values.__getitem__)
        if largest != size - 1:
            flip(values, largest)
            flip(values, size - 1)
    return values


def _silly(values: list[int], start: int, end: int) -> None:
    if start < end:
        middle = start + (end - start) // 2
        _silly(values, start, middle)
        _silly(values, middle + 1, end)
        if values[start] > values[middle + 1]:
            values[start], values[middle + 1] = values[middle + 1], values[start]
        _silly(values, start + 1, end)


def silly_sort(values: list[int]) -> list[int]:
    """Multiply-and-surrender sort that fixes the first element, then recurses on the rest."""
    _silly(values, 0, len(values) - 1)
    return values


def sleep_sort(values: list[int], unit: float = 1.0) -> list[int]:
    """Let one thread per value sleep value * unit seconds and collect them as they wake.

    Raises ValueError for negative values or a negative unit.
    """
    if unit < 0:
        raise ValueError("unit must not be negative")
    if any(value < 0 for value in values):
        raise ValueError("sleep sort needs non-negative values")
    woken: list[int] = []
    lock = threading.Lock()
    go = threading.Event()
    start: list[float] = []

    def bucket(value: int) -> None:
        go.wait()
        delay = start[0] + value * unit - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        with lock:
            woken.append(value)

    threads = [threading.Thread(target=bucket, args=(value,), daemon=True) for value in values]
    for thread in threads:
        thread.start()
    start.append(time.monotonic())
    go.set()
    for thread in threads:
        thread.join()
    values[:] = woken
    return values


def _slow(values: list[int], start: int, end: int) -> None:
    if start >= end:
        return
    middle = (start + end) // 2
    _slow(values, start, middle)
    _slow(values, middle + 1, end)
    if values[end] < values[middle]:
        values[end], values[middle] = values[middle], values[end]
    _slow(values, start, end - 1)


def slow_sort(values: list[int]) -> list[int]:
    """Multiply-and-surrender sort that places the maximum last, then recurses on the rest."""
    _slow(values, 0, len(values) - 1)
    return values


def spaghetti_sort(values: list[int]) -> list[int]:
    """Walk every value from the minimum to the maximum, collecting matching elements."""
    if not values:
        return values
    ordered = [
        item for key in range(min(values), max(values) + 1) for item in values if item == key
    ]
    values[:] = ordered
    return values


def _stooge(values: list[int], i: int, j: int) -> None:
    if values[i] > values[j]:
        values[i], values[j] = values[j], values[i]
    if j - i > 1:
        third = (j - i + 1) // 3
        _stooge(values, i, j - third)
        _stooge(values, i + third, j)
        _stooge(values, i, j - third)


def stooge_sort(values: list[int]) -> list[int]:
    """Sort the first two thirds, the last two thirds, then the first two thirds again."""
    if values:
        _stooge(values, 0, len(values) - 1)
    return values