# sortcollection

A collection of sorting algorithms, from the everyday (quick sort, merge sort,
heap sort) to the esoteric (bogo sort, sleep sort, stooge sort), with an
interactive menu for watching them work on generated data.

## Installation

```
pip install .
```

## Interactive use

```
sortcollection
```

The menu reads choices from standard input. Pick a category and an
algorithm; the program shows the array before and after sorting, reports
whether the result is sorted, and prints the processor time the sort took.
The session ends on option 0, at end of input, or on Ctrl-C.

The configuration menu (option 9) changes:

- the input case: ascending, random, descending or identical elements;
- the upper limit for random values (kept at 3 or more);
- the array length (from 2 to 67,108,864);
- whether results are appended to `data.txt` in the current directory;
- whether arrays and execution time are displayed.

Bitonic sort only accepts lengths that are powers of two. When the configured
length is not one, the menu runs it on a separate array of the last
power-of-two length that was set (16 by default) and says so.

## Library use

Each algorithm sorts a list of integers in place and returns the same list:

```python
from sortcollection.exchange import quick_sort
from sortcollection.merge import merge_sort
from sortcollection.selection import max_heap_sort

values = [5, 3, 9, 1, 7]
quick_sort(values)
print(values)  # [1, 3, 5, 7, 9]
```

The randomised algorithms take an optional `random.Random` instance so runs
can be reproduced:

```python
import random
from sortcollection.esoteric import bogo_sort

values = [3, 1, 2]
bogo_sort(values, random.Random(0))
```

Modules by category:

- `sortcollection.esoteric`: `bad_sort`, `bogo_sort`, `bogo_bogo_sort`,
  `bubble_bogo_sort`, `cocktail_bogo_sort`, `exchange_bogo_sort`,
  `less_bogo_sort`, `pancake_sort` (with its helper `flip`), `silly_sort`,
  `slow_sort`, `sleep_sort`, `spaghetti_sort`, `stooge_sort`
- `sortcollection.exchange`: `bubble_sort`, `circle_sort`,
  `cocktail_shaker_sort`, `comb_sort`, `dual_pivot_quick_sort`, `gnome_sort`,
  `odd_even_sort`, `optimized_bubble_sort`, `optimized_cocktail_shaker_sort`,
  `optimized_gnome_sort`, `quick_sort`, `quick_sort_3way`, `stable_quick_sort`
- `sortcollection.hybrids`: `tim_sort`
- `sortcollection.insertion`: `avl_tree_sort`, `binary_insertion_sort`,
  `cycle_sort`, `insertion_sort`, `patience_sort`, `shell_sort`, `tree_sort`
- `sortcollection.merge`: `bottom_up_merge_sort`, `in_place_merge_sort`,
  `merge_sort`
- `sortcollection.networks`: `bitonic_sort(values, ascending=True)`,
  `pairwise_sort`
- `sortcollection.distribution`: `bucket_sort`, `counting_sort`, `bead_sort`,
  `pigeonhole_sort`, `radix_lsd_sort(values, radix=10)`
- `sortcollection.selection`: `double_selection_sort`, `max_heap_sort`,
  `min_heap_sort`, `selection_sort`

Things to know:

- `min_heap_sort` leaves the list in descending order.
- `sleep_sort(values, unit=1.0)` starts one thread per value and waits
  `value * unit` seconds for each, so keep values small or pass a small
  `unit`. It raises `ValueError` for negative values or a negative unit.
- `bitonic_sort` raises `ValueError` for lengths that are not powers of two.
- `bead_sort` raises `ValueError` for negative values.
- `radix_lsd_sort` raises `ValueError` for a radix below 2.

Helpers for building and checking arrays live in `sortcollection.arrays`:
`generate_array(length, case, random_range, rng)`, `is_sorted(values,
ascending)`, `format_array`, `split_time`, `time_message`, the `SortCase`
enumeration, and `write_before` / `write_after`, which append run reports to
a text file. `sortcollection.screen` holds `clear_screen`, `title` and
`farewell`, used by the menu.

## Running the tests

```
pip install ".[test]"
pytest
```