"""Interactive menu that generates arrays, runs the chosen sort and reports on it."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import NamedTuple

from . import distribution, esoteric, exchange, hybrids, insertion, merge, networks, selection
from .arrays import (
    ERROR_FILE,
    ERROR_MENU_RANGE,
    ERROR_NOT_NUMBER,
    ERROR_OUT_OF_RANGE,
    SortCase,
    format_array,
    generate_array,
    is_sorted,
    time_message,
    write_after,
    write_before,
)
from .screen import clear_screen, farewell, title

LIMIT_SIZE = 67_108_864
INT_MAX = 2**31 - 1

CATEGORY_MENU = (
    "\tWhich category of sort would you like to see?\n0 - Exit.\n"
    "1 - Esoteric & Fun & Miscellaneous.\n2 - Exchange.\n3 - Hybrids.\n4 - Insertion.\n"
    "5 - Merge.\n6 - Networks & Concurrent.\n7 - Non-Comparison & Distribution.\n"
    "8 - Selection.\n9 - Configurations.\n-> "
)

CASE_MENU = (
    "\tInsert the sorting case:\n1 - Ascending.\n2 - Random.\n3 - Descending.\n"
    "4 - Identical elements.\n-> "
)

BITONIC_NOTE = (
    "\n\tNote: Bitonic sort just accepts lengths of power of 2.\n"
    "\tCurrent size: {current}.\n\tNew size applied on this algorithm: {new}.\n"
)


@dataclass
class Settings:
    """What the configuration menu can change."""

    length: int = 10
    random_range: int = 32
    case: int = SortCase.RANDOM
    power_of_two: int = 16
    save_to_file: bool = False
    display_array: bool = True
    show_time: bool = True
    results_path: str = "data.txt"
    sleep_unit: float = 1.0

    @property
    def case_label(self) -> str:
        """Name of the sorting case as shown in the configuration menu."""
        if self.case > 1:
            if self.case > 2:
                return "Descending." if self.case == 3 else "Identical."
            return "Random."
        return "Ascending."

    def menu_text(self) -> str:
        """The configuration menu with the current settings filled in."""

        def yes_no(flag: bool) -> str:
            return "YES." if flag else "NO."

        return (
            "\tConfigurations:\n0 - Menu.\n"
            f"1 - Change sorting case - {self.case_label}\n"
            f"2 - Change random interval - {self.random_range}.\n"
            f"3 - Change length of array - {self.length}.\n"
            f"4 - Save results in a text file - {yes_no(self.save_to_file)}\n"
            f"5 - Display arrays - {yes_no(self.display_array)}\n"
            f"6 - Display execution time - {yes_no(self.show_time)}\n-> "
        )


class _Entry(NamedTuple):
    name: str
    run: Callable[[list[int]], object]
    ascending: bool = True


@dataclass(frozen=True)
class _Category:
    menu: str
    entries: tuple[_Entry, ...]


def _catalog(rng: random.Random, settings: Settings) -> dict[int, _Category]:
    def with_rng(func: Callable) -> Callable[[list[int]], object]:
        return partial(func, rng=rng)

    def sleep(values: list[int]) -> object:
        return esoteric.sleep_sort(values, settings.sleep_unit)

    return {
        1: _Category(
            "\tChoose the sort to be aplied on Esoteric & Fun & Miscellaneous:\n 0 - Menu.\n"
            " 1 - Bad Sort.\n 2 - Bogo Bogo Sort.\n 3 - Bogo Sort.\n 4 - Bubble Bogo Sort.\n"
            " 5 - Cocktail Bogo Sort.\n 6 - Exchange Bogo Sort.\n 7 - Less Bogo Sort.\n"
            " 8 - Pancake Sort.\n 9 - Silly Sort.\n10 - Slow Sort.\n11 - Sleep Sort.\n"
            "12 - Spaghetti Sort.\n13 - Stooge Sort.\n-> ",
            (
                _Entry("Bad Sort", esoteric.bad_sort),
                _Entry("Bogo Bogo Sort", with_rng(esoteric.bogo_bogo_sort)),
                _Entry("Bogo Sort", with_rng(esoteric.bogo_sort)),
                _Entry("Bubble Bogo Sort", with_rng(esoteric.bubble_bogo_sort)),
                _Entry("Cocktail Bogo Sort", with_rng(esoteric.cocktail_bogo_sort)),
                _Entry("Exchange Bogo Sort", with_rng(esoteric.exchange_bogo_sort)),
                _Entry("Less Bogo Sort", with_rng(esoteric.less_bogo_sort)),
                _Entry("Pancake Sort", esoteric.pancake_sort),
                _Entry("Silly Sort", esoteric.silly_sort),
                _Entry("Slow Sort", esoteric.slow_sort),
                _Entry("Sleep Sort", sleep),
                _Entry("Spaghetti Sort", esoteric.spaghetti_sort),
                _Entry("Stooge Sort", esoteric.stooge_sort),
            ),
        ),
        2: _Category(
            "\tChoose the sort to be aplied on Exchange:\n 0 - Menu.\n 1 - Bubble Sort.\n"
            " 2 - Circle Sort.\n 3 - Cocktail Shaker Sort.\n 4 - Comb Sort.\n"
            " 5 - Dual Pivot Quick Sort.\n 6 - Gnome Sort.\n 7 - Odd-Even Sort.\n"
            " 8 - Optimized Bubble Sort.\n 9 - Optimized Cocktail Shaker Sort.\n"
            "10 - Optimized Gnome Sort.\n11 - Quick Sort.\n12 - Quick Sort 3-way.\n"
            "13 - Stable Quick Sort.\n-> ",
            (
                _Entry("Bubble Sort", exchange.bubble_sort),
                _Entry("Circle Sort", exchange.circle_sort),
                _Entry("Cocktail Shaker Sort", exchange.cocktail_shaker_sort),
                _Entry("Comb Sort", exchange.comb_sort),
                _Entry("Dual Pivot Quick Sort", exchange.dual_pivot_quick_sort),
                _Entry("Gnome Sort", exchange.gnome_sort),
                _Entry("Odd-Even Sort", exchange.odd_even_sort),
                _Entry("Optimized Bubble Sort", exchange.optimized_bubble_sort),
                _Entry("Optimized Cocktail Shaker Sort", exchange.optimized_cocktail_shaker_sort),
                _Entry("Optimized Gnome Sort", exchange.optimized_gnome_sort),
                _Entry("Quick Sort", exchange.quick_sort),
                _Entry("3-way Quick Sort", exchange.quick_sort_3way),
                _Entry("Stable Quick Sort", exchange.stable_quick_sort),
            ),
        ),
        3: _Category(
            "\tChoose the sort to be aplied on Hybrids:\n0 - Menu.\n1 - Tim Sort.\n-> ",
            (_Entry("Tim Sort", hybrids.tim_sort),),
        ),
        4: _Category(
            "\tChoose the sort to be aplied on Insertion:\n0 - Menu.\n1 - AVLTree Sort.\n"
            "2 - Binary Insertion Sort.\n3 - Cycle Sort.\n4 - Insertion Sort.\n"
            "5 - Patience Sort.\n6 - Shell Sort.\n7 - Tree Sort.\n-> ",
            (
                _Entry("AVL Tree Sort", insertion.avl_tree_sort),
                _Entry("Binary Insertion Sort", insertion.binary_insertion_sort),
                _Entry("Cycle Sort", insertion.cycle_sort),
                _Entry("Insertion Sort", insertion.insertion_sort),
                _Entry("Patience Sort", insertion.patience_sort),
                _Entry("Shell Sort", insertion.shell_sort),
                _Entry("Tree Sort", insertion.tree_sort),
            ),
        ),
        5: _Category(
            "\tChoose the sort to be aplied on Merge:\n0 - Menu.\n1 - Bottomup Merge Sort.\n"
            "2 - In-Place Merge Sort.\n3 - Merge Sort.\n-> ",
            (
                _Entry("Bottom-up Merge Sort", merge.bottom_up_merge_sort),
                _Entry("In Place Merge Sort", merge.in_place_merge_sort),
                _Entry("Merge Sort", merge.merge_sort),
            ),
        ),
        6: _Category(
            "\tChoose the sort to be aplied on Networks & Concurrent:\n0 - Menu.\n"
            "1 - Bitonic Sort.\n2 - Pairwise Network Sort.\n-> ",
            (
                _Entry("Bitonic Sort", networks.bitonic_sort),
                _Entry("Pairwise Network Sort", networks.pairwise_sort),
            ),
        ),
        7: _Category(
            "\tChoose the sort to be aplied on Non-Comparison & Distribution:\n0 - Menu.\n"
            "1 - Bucket Sort.\n2 - Counting Sort.\n3 - Gravity (Bead) Sort.\n"
            "4 - Pigeonhole Sort.\n5 - Radix LSD Sort.\n-> ",
            (
                _Entry("Bucket Sort", distribution.bucket_sort),
                _Entry("Counting Sort", distribution.counting_sort),
                _Entry("Gravity (Bead) Sort", distribution.bead_sort),
                _Entry("Pigeonhole Sort", distribution.pigeonhole_sort),
                _Entry("Radix LSD Sort", partial(distribution.radix_lsd_sort, radix=10)),
            ),
        ),
        8: _Category(
            "\tChoose the sort to be aplied on Selection:\n0 - Menu.\n"
            "1 - Double Selection Sort.\n2 - Max Heap Sort.\n3 - Min Heap Sort.\n"
            "4 - Selection Sort.\n-> ",
            (
                _Entry("Double Selection Sort", selection.double_selection_sort),
                _Entry("Max Heap Sort", selection.max_heap_sort),
                _Entry("Min Heap Sort", selection.min_heap_sort, ascending=False),
                _Entry("Selection Sort", selection.selection_sort),
            ),
        ),
    }


def _print_error(message: str) -> None:
    clear_screen()
    print(message, end="")


def _read_int(prompt: str) -> int:
    """Prompt for a whole number; raises ValueError if the line is not one."""
    print(prompt, end="", flush=True)
    return int(input().strip())


def _menu(text: str, highest: int) -> int:
    title()
    while True:
        try:
            option = _read_int(text)
        except ValueError:
            _print_error(ERROR_NOT_NUMBER)
            continue
        if 0 <= option <= highest:
            return option
        _print_error(ERROR_MENU_RANGE)


def _before_sort(values: list[int], algorithm: str, settings: Settings) -> None:
    if settings.save_to_file:
        try:
            write_before(
                settings.results_path,
                values,
                settings.display_array,
                algorithm,
                settings.random_range,
                settings.case,
            )
        except OSError:
            print(ERROR_FILE, end="")
    print(f"\tBefore {algorithm}.", end="")
    if settings.display_array:
        print(format_array(values), end="")
    print("\n\tSorting...", end="", flush=True)


def _after_sort(values: list[int], elapsed: float, ascending: bool, settings: Settings) -> bool:
    sorted_ok = is_sorted(values, ascending)
    print(" Array sorted." if sorted_ok else " Array not sorted.", end="")
    if settings.display_array:
        print(format_array(values), end="")
    if settings.show_time:
        print(time_message(elapsed), end="")
    if settings.save_to_file and (settings.display_array or settings.show_time):
        try:
            write_after(
                settings.results_path,
                values,
                settings.display_array,
                settings.show_time,
                elapsed,
                sorted_ok,
            )
        except OSError:
            print(ERROR_FILE, end="")
    return sorted_ok


def _run(values: list[int], entry: _Entry, settings: Settings) -> bool:
    _before_sort(values, entry.name, settings)
    tic = time.process_time()
    entry.run(values)
    toc = time.process_time()
    return _after_sort(values, toc - tic, entry.ascending, settings)


def _is_power_of_two(number: int) -> bool:
    return number > 0 and number & (number - 1) == 0


def _run_bitonic(values: list[int], entry: _Entry, settings: Settings, rng: random.Random) -> None:
    if not _is_power_of_two(len(values)):
        values = generate_array(
            settings.power_of_two, settings.case, settings.random_range, rng
        )
        print(BITONIC_NOTE.format(current=settings.length, new=settings.power_of_two), end="")
    _run(values, entry, settings)


def _read_random_range() -> int:
    while True:
        title()
        try:
            value = _read_int("Insert the random interval limit: ")
        except ValueError:
            _print_error(ERROR_NOT_NUMBER)
            continue
        clear_screen()
        return min(max(value, 3), INT_MAX)


def _read_length() -> int:
    while True:
        title()
        try:
            value = _read_int("Insert the new length of the array: ")
        except ValueError:
            _print_error(ERROR_NOT_NUMBER)
            continue
        if value < 2 or value > LIMIT_SIZE:
            _print_error(ERROR_OUT_OF_RANGE)
            continue
        clear_screen()
        return value


def _configure(settings: Settings) -> None:
    while True:
        title()
        while True:
            try:
                option = _read_int(settings.menu_text())
            except ValueError:
                _print_error(ERROR_NOT_NUMBER)
                continue
            if 0 <= option <= 6:
                break
            _print_error(ERROR_MENU_RANGE)
        clear_screen()
        if option == 0:
            return
        if option == 1:
            settings.case = _menu(CASE_MENU, 4)
            clear_screen()
        elif option == 2:
            settings.random_range = _read_random_range()
        elif option == 3:
            settings.length = _read_length()
            if _is_power_of_two(settings.length):
                settings.power_of_two = settings.length
        elif option == 4:
            settings.save_to_file = not settings.save_to_file
        elif option == 5:
            settings.display_array = not settings.display_array
        elif option == 6:
            settings.show_time = not settings.show_time


def _session(settings: Settings, rng: random.Random) -> None:
    catalog = _catalog(rng, settings)
    clear_screen()
    while True:
        values = generate_array(settings.length, settings.case, settings.random_range, rng)
        option = _menu(CATEGORY_MENU, 9)
        clear_screen()
        if option == 0:
            return
        if option == 9:
            _configure(settings)
            continue
        category = catalog[option]
        choice = _menu(category.menu, len(category.entries))
        clear_screen()
        if choice == 0:
            continue
        entry = category.entries[choice - 1]
        if entry.run is networks.bitonic_sort:
            _run_bitonic(values, entry, settings, rng)
        else:
            _run(values, entry, settings)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive sorting menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(
        prog="sortcollection",
        description="Interactive collection of sorting algorithms.",
    )
    parser.parse_args(argv)
    settings = Settings()
    rng = random.Random()
    try:
        _session(settings, rng)
    except (EOFError, KeyboardInterrupt):
        print()
    farewell()
    return 0