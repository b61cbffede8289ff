# dsakit

A collection of classic data-structure and algorithm routines. Each one is
a small, self-contained function that takes ordinary Python values and
returns its result. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `reverse_word`, `reverse_in_place`, `count_inversions`, `count_pairs_with_sum`, `pair_count_by_frequency`, `common_elements`, `has_triplet_sum`, `longest_consecutive_run`, `factorial_digits`, `find_duplicate`, `majority_element`, `negatives_first`, `repeated_elements`, `sort_by_parity_ii`, `to_24_hour` |
| `dsakit.subarrays` | `trapped_water`, `max_subarray_sum`, `min_jumps` |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `heap_sort` |
| `dsakit.searching` | `find_pivot`, `binary_search`, `search_rotated`, `first_and_last` |
| `dsakit.bits` | `count_set_bits`, `bits_to_flip`, `is_power_of_two` |
| `dsakit.strings` | `is_palindrome`, `longest_repeating_subsequence` |
| `dsakit.combinatorics` | `combination_sum`, `permutations` |
| `dsakit.bst` | `Node`, `build_tree`, `insert`, `lowest_common_ancestor`, `count_in_range`, `is_dead_end` |
| `dsakit.greedy` | `Job`, `Item`, `job_scheduling`, `fractional_knapsack`, `max_meetings` |
| `dsakit.matrix` | `median`, `common_in_all_rows`, `max_pair_difference`, `largest_histogram_area`, `max_rectangle_area`, `spiral_order` |
| `dsakit.editable_array` | `EditableArray`, `main` |

Sorting functions return new lists and leave their input alone;
`bubble_sort` returns the sorted list together with the number of passes
it made. Searches that may come up empty, such as `search_rotated`,
`first_and_last`, `find_pivot`, `majority_element` and `min_jumps`,
return `None` rather than a sentinel index. Invalid input, such as a
malformed time for `to_24_hour` or a list without duplicates for
`find_duplicate`, raises `ValueError`.

## Examples

```python
from dsakit.arrays import reverse_word, count_inversions, to_24_hour
from dsakit.subarrays import trapped_water
from dsakit.matrix import median
from dsakit.bits import is_power_of_two

reverse_word("hello")                      # "olleh"
count_inversions([2, 4, 1, 3, 5])          # 3
to_24_hour("07:05:45PM")                   # "19:05:45"
trapped_water([3, 0, 0, 2, 0, 4])          # 10
median([[1, 3, 5], [2, 6, 9], [3, 6, 9]])  # 5
is_power_of_two(31)                        # False
```

Binary trees can be built from a level-order description in which `N`
marks a missing child:

```python
from dsakit.bst import build_tree, lowest_common_ancestor

root = build_tree("5 4 6 3 N N 7")
lowest_common_ancestor(root, 7, 6).data  # 6
```

Greedy routines work on small frozen dataclasses:

```python
from dsakit.greedy import Item, fractional_knapsack

fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])  # 240.0
```

## Interactive array editor

`EditableArray` is a sequence of integers that supports `insert`,
`remove_at`, `remove_value` and `describe`, raising `IndexError` or
`ValueError` on a bad position or a missing value.

The `dsakit-array` command starts a menu-driven session on such an array,
reading from standard input: it asks for the size and the initial
elements, then lets you insert a value at an index, delete by position or
by value, and display the contents until you choose option 0 or input
runs out.

```
dsakit-array
```

## What it does not do

`dsakit-array` is the only command. The other routines are library
functions only; there is no command-line front end for them.