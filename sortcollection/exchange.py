"""Exchange sorts: bubble, cocktail, comb, gnome, odd-even, circle and quick sorts.

Every sort works on the given list in place and returns that same list.
"""

from __future__ import annotations


def _swap(values: list, a: int, b: int) -> None:
    values[a], values[b] = values[b], values[a]


def bubble_sort(values: list) -> list:
    """Repeatedly bubble the largest remaining element to the end."""
    for end in range(len(values) - 1, 0, -1):
        for i in range(end):
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1)
    return values


def _circle(values: list, low: int, high: int) -> bool:
    if low == high:
        return False
    swapped = False
    p, q = low, high
    while p <= q:
        if p == q:
            # Odd-sized range: compare the centre with its right neighbour.
            q += 1
        if values[p] > values[q]:
            _swap(values, p, q)
            swapped = True
        p += 1
        q -= 1
    left = _circle(values, low, q)
    right = _circle(values, p, high)
    return swapped or left or right


def circle_sort(values: list) -> list:
    """Compare mirrored pairs of ever smaller halves until a pass swaps nothing."""
    if len(values) < 2:
        return values
    while _circle(values, 0, len(values) - 1):
        pass
    return values


def cocktail_shaker_sort(values: list) -> list:
    """Bubble forwards then backwards, narrowing the range from both ends."""
    start, end = 0, len(values) - 1
    while start < end:
        for i in range(start, end):
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1)
        end -= 1
        for i in range(end, start, -1):
            if values[i] < values[i - 1]:
                _swap(values, i, i - 1)
        start += 1
    return values


def comb_sort(values: list) -> list:
    """Bubble sort over a shrinking gap, with gaps 9 and 10 replaced by 11."""
    length = len(values)
    gap = length
    swapped = True
    while gap > 1 or swapped:
        gap = gap * 10 // 13
        if gap in (9, 10):
            gap = 11
        gap = max(gap, 1)
        swapped = False
        for i in range(length - gap):
            if values[i] > values[i + gap]:
                _swap(values, i, i + gap)
                swapped = True
    return values


def dual_pivot_quick_sort(values: list) -> list:
    """Quick sort partitioning around the first and last elements as two pivots."""
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        if values[end] < values[start]:
            _swap(values, start, end)
        first, last = values[start], values[end]
        p1, p2 = start + 1, end - 1
        k = p1
        while k <= p2:
            if values[k] < first:
                _swap(values, k, p1)
                p1 += 1
            elif values[k] >= last:
                while values[p2] > last and k < p2:
                    p2 -= 1
                _swap(values, k, p2)
                p2 -= 1
                if values[k] < first:
                    _swap(values, k, p1)
                    p1 += 1
            k += 1
        p1 -= 1
        p2 += 1
        _swap(values, p1, start)
        _swap(values, end, p2)
        pending.extend([(start, p1 - 1), (p1 + 1, p2 - 1), (p2 + 1, end)])
    return values


def gnome_sort(values: list) -> list:
    """Step forward while in order, otherwise swap and step back."""
    i = 1
    while i < len(values):
        if values[i] >= values[i - 1]:
            i += 1
        else:
            _swap(values, i, i - 1)
            if i != 1:
                i -= 1
    return values


def odd_even_sort(values: list) -> list:
    """Alternate compare-and-swap passes over odd and even adjacent pairs."""
    length = len(values)
    done = False
    while not done:
        done = True
        for offset in (1, 0):
            for i in range(offset, length - 1, 2):
                if values[i] > values[i + 1]:
                    _swap(values, i, i + 1)
                    done = False
    return values


def optimized_bubble_sort(values: list) -> list:
    """Bubble sort that stops after a pass without swaps."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if values[i + 1] < values[i]:
                _swap(values, i, i + 1)
                swapped = True
        if not swapped:
            break
    return values


def optimized_cocktail_shaker_sort(values: list) -> list:
    """Cocktail shaker sort that stops after a round trip without swaps."""
    start, end = 0, len(values) - 1
    swapped = True
    while swapped and start < end:
        swapped = False
        for i in range(start, end):
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1)
                swapped = True
        end -= 1
        for i in range(end, start, -1):
            if values[i] < values[i - 1]:
                _swap(values, i, i - 1)
                swapped = True
        start += 1
    return values


def optimized_gnome_sort(values: list) -> list:
    """Gnome sort that walks each element back into place, then resumes where it was."""
    for i in range(len(values)):
        j = i
        while j > 0 and values[j - 1] > values[j]:
            _swap(values, j, j - 1)
            j -= 1
    return values


def quick_sort(values: list) -> list:
    """Hoare-style quick sort around the middle element."""
    if not values:
        return values
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        pivot = values[(start + end) // 2]
        i, j = start, end
        while i <= j:
            while values[i] < pivot and i < end:
                i += 1
            while values[j] > pivot and j > start:
                j -= 1
            if i <= j:
                _swap(values, i, j)
                i += 1
                j -= 1
        if start < j:
            pending.append((start, j))
        if i < end:
            pending.append((i, end))
    return values


def quick_sort_3way(values: list) -> list:
    """Quick sort splitting into less-than, equal-to and greater-than the first element."""
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if end <= start:
            continue
        low, great = start, end
        pivot = values[start]
        i = start
        while i <= great:
            if values[i] < pivot:
                _swap(values, i, low)
                low += 1
                i += 1
            elif values[i] > pivot:
                _swap(values, i, great)
                great -= 1
            else:
                i += 1
        pending.append((start, low - 1))
        pending.append((great + 1, end))
    return values


def _partition(values: list, start: int, end: int) -> int:
    pivot = values[start]
    while start < end:
        while values[end] >= pivot and start < end:
            end -= 1
        if start != end:
            values[start] = values[end]
            start += 1
        while values[start] <= pivot and start < end:
            start += 1
        if start != end:
            values[end] = values[start]
            end -= 1
    values[start] = pivot
    return start


def stable_quick_sort(values: list) -> list:
    """Quick sort that moves elements into the hole left by the first-element pivot."""
    if not values:
        return values
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        middle = _partition(values, start, end)
        if start < middle - 1:
            pending.append((start, middle - 1))
        if end > middle + 1:
            pending.append((middle + 1, end))
    return values