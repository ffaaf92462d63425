"""Array helpers: generation, display, order checks and result logs."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable, Sequence
from os import PathLike
from typing import Union

PathArg = Union[str, "PathLike[str]"]

ERROR_FILE = "\n\tError: Cannot open the file."
ERROR_ALLOC = "\n\tError: Array couldn't be allocated."
ERROR_NOT_NUMBER = "\n\tError: Value inserted is not a number. Try again.\n\n"
ERROR_MENU_RANGE = "\n\tError: Choose the value in the range displayed in menu.\n\n"
ERROR_CLEAR = "\n\tError: Couldn't clear the screen\n"
ERROR_OUT_OF_RANGE = "\n\tError: Value inserted is out of range. Try again.\n\n"

_MICROS = 1_000_000


class SortCase(enum.IntEnum):
    """The kind of input an array is generated as."""

    ASCENDING = 1
    RANDOM = 2
    DESCENDING = 3
    IDENTICAL = 4

    @property
    def label(self) -> str:
        """Word used in the results file."""
        return {
            SortCase.ASCENDING: "ascending",
            SortCase.RANDOM: "randomly",
            SortCase.DESCENDING: "descending",
            SortCase.IDENTICAL: "identical",
        }[self]

    @property
    def menu_label(self) -> str:
        """Word used in the configuration menu."""
        return {
            SortCase.ASCENDING: "Ascending.",
            SortCase.RANDOM: "Random.",
            SortCase.DESCENDING: "Descending.",
            SortCase.IDENTICAL: "Identical.",
        }[self]


def _as_case(case: int) -> SortCase:
    try:
        return SortCase(case)
    except ValueError:
        return SortCase.RANDOM


def format_array(values: Iterable[int]) -> str:
    """Return the values as printed on screen: a newline, then each value and a space."""
    return "\n" + "".join(f"{value} " for value in values)


def is_sorted(values: Sequence[int], ascending: bool = True) -> bool:
    """Tell whether the values are in ascending (or descending) order."""
    pairs = zip(values, values[1:])
    if ascending:
        return all(a <= b for a, b in pairs)
    return all(a >= b for a, b in pairs)


def generate_array(
    length: int,
    case: int = SortCase.RANDOM,
    random_range: int = 32,
    rng: random.Random | None = None,
) -> list[int]:
    """Build an array of the given length for the given case.

    Unknown cases fall back to random values in 1..random_range.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    kind = _as_case(case)
    if kind is SortCase.ASCENDING:
        return list(range(length))
    if kind is SortCase.DESCENDING:
        return list(range(length, 0, -1))
    if kind is SortCase.IDENTICAL:
        return [1] * length
    if random_range < 1:
        raise ValueError("random_range must be at least 1")
    source = rng if rng is not None else random
    return [source.randrange(random_range) + 1 for _ in range(length)]


def split_time(elapsed: float) -> tuple[int, int]:
    """Split a duration in seconds into whole seconds and microseconds."""
    if elapsed < 0:
        raise ValueError("elapsed time must not be negative")
    return divmod(round(elapsed * _MICROS), _MICROS)


def time_message(elapsed: float) -> str:
    """Return the execution time line as shown on screen and in the results file."""
    seconds, micros = split_time(elapsed)
    return f"\n\tExecution time: {seconds} seconds {micros} microseconds.\n"


def write_before(
    path: PathArg,
    values: Sequence[int],
    display: bool,
    algorithm: str,
    random_range: int,
    case: int,
) -> None:
    """Append the description of a run, and optionally the unsorted array, to a file.

    Raises OSError when the file cannot be opened.
    """
    kind = _as_case(case) if int(case) in (1, 2, 3) else SortCase.IDENTICAL
    upper = random_range if kind is SortCase.RANDOM else len(values)
    text = (
        f"\n\t{algorithm} algorithm with length of {len(values)} elements "
        f"and range of 0 to {upper} {kind.label}."
    )
    if display:
        text += "\n\tArray before sort:" + format_array(values) + "\n"
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)


def write_after(
    path: PathArg,
    values: Sequence[int],
    display: bool,
    show_time: bool,
    elapsed: float,
    sorted_ok: bool,
) -> None:
    """Append the sorted array and/or the execution time of a run to a file.

    Raises OSError when the file cannot be opened.
    """
    text = ""
    if display:
        state = " " if sorted_ok else " not "
        text += f" Array{state}sorted:" + format_array(values) + "\n"
    if show_time:
        text += time_message(elapsed)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)