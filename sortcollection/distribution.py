"""Non-comparison and distribution sorts: bucket, counting, bead, pigeonhole and radix.

Every sort works on the given list in place and returns that same list.
"""

from __future__ import annotations

from itertools import accumulate

from .insertion import insertion_sort

BUCKETS = 10


def bucket_sort(values: list[int]) -> list[int]:
    """Spread values over ten buckets by the decimal magnitude of the maximum.

    Each bucket is insertion-sorted and the buckets are joined in order.
    Values below the first bucket's upper bound, negatives included, go to the first.
    """
    if not values:
        return values
    top = max(values)
    magnitude = 1
    while top >= 1:
        top //= 10
        magnitude *= 10
    width = magnitude // BUCKETS
    buckets: list[list[int]] = [[] for _ in range(BUCKETS)]
    for value in values:
        index = 0 if width == 0 or value < width else min(value // width, BUCKETS - 1)
        buckets[index].append(value)
    values[:] = [item for bucket in buckets for item in insertion_sort(bucket)]
    return values


def counting_sort(values: list[int]) -> list[int]:
    """Stable counting sort over the range between the minimum and the maximum."""
    if not values:
        return values
    low, high = min(values), max(values)
    counts = [0] * (high - low + 1)
    for value in values:
        counts[value - low] += 1
    positions = list(accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        positions[value - low] -= 1
        output[positions[value - low]] = value
    values[:] = output
    return values


def bead_sort(values: list[int]) -> list[int]:
    """Gravity sort: beads on rods fall to the bottom and each row is counted.

    Raises ValueError for negative values.
    """
    if any(value < 0 for value in values):
        raise ValueError("bead sort needs non-negative values")
    if not values:
        return values
    length = len(values)
    # After falling, column j holds one bead in each of its bottom `column[j]` rows.
    columns = [sum(1 for value in values if value > j) for j in range(max(values))]
    values[:] = [
        sum(1 for count in columns if count >= length - row) for row in range(length)
    ]
    return values


def pigeonhole_sort(values: list[int]) -> list[int]:
    """Count each value into its hole, then read the holes back in order."""
    if not values:
        return values
    low = min(values)
    holes = [0] * (max(values) - low + 1)
    for value in values:
        holes[value - low] += 1
    values[:] = [low + offset for offset, count in enumerate(holes) for _ in range(count)]
    return values


def radix_lsd_sort(values: list[int], radix: int = 10) -> list[int]:
    """Least-significant-digit radix sort on the offsets from the minimum.

    Raises ValueError when the radix is below 2.
    """
    if radix < 2:
        raise ValueError("radix must be at least 2")
    if not values:
        return values
    low = min(values)
    span = max(values) - low
    exp = 1
    while span // exp >= 1:
        buckets: list[list[int]] = [[] for _ in range(radix)]
        for value in values:
            buckets[((value - low) // exp) % radix].append(value)
        values[:] = [item for bucket in buckets for item in bucket]
        exp *= radix
    return values