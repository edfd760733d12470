# algokit

A small collection of classic algorithms written as plain Python functions:
number conversions, bit tricks, sorting, searching, array puzzles, recursion
exercises, primes, string helpers, matrix operations and binary-tree
algorithms. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.conversions`: `add_binary`, `decimal_to_binary`, `hex_to_decimal`,
  `octal_to_decimal`, `to_binary`, `reverse_digits`,
  `next_without_adjacent_ones`. Binary and octal numbers are passed and
  returned as ordinary integers whose decimal digits are the digits of the
  number (`101` is five in binary); `to_binary` returns a string.
  `add_binary` produces the digits of the sum least significant first.
- `algokit.bits`: `get_bit`, `set_bit`, `clear_bit`, `update_bit`,
  `is_power_of_two`, `count_ones`, `subsets`, `unique`.
- `algokit.sorting`: `insertion_sort`, `bubble_sort`, `selection_sort`,
  `merge_sort`, `wave_sort`. Each takes an iterable and returns a new list.
- `algokit.searching`: `binary_search`, `linear_search`. Both return an
  index, or `None` when the key is absent.
- `algokit.matrices`: `spiral_order`, `transpose`, `multiply`,
  `search_sorted_matrix`. Matrices are lists of rows; ragged matrices and
  shapes that cannot be multiplied raise `MatrixShapeError`, a subclass of
  `ValueError`.
- `algokit.arrays`: `pair_sum`, `kadane`, `max_circular_subarray_sum`,
  `longest_arithmetic_subarray`, `record_breaking_days`,
  `first_repeating_index`, `subarrays_with_sum`,
  `smallest_missing_non_negative`, `subarray_sums`, `all_subarrays`,
  `negated`, `is_pythagorean_triplet`. `pair_sum` expects sorted input;
  `kadane` counts the empty sub-array, so it never returns less than 0, and
  raises `ValueError` on an empty input.
- `algokit.recursion`: `sum_to`, `power`, `factorial`, `fibonacci`,
  `is_sorted`, `count_down`, `count_up`, `first_occurrence`,
  `last_occurrence`, `reverse_string`, `replace_pi`, `tower_of_hanoi`,
  `remove_consecutive_duplicates`, `move_x_to_end`. Negative arguments
  where they make no sense raise `ValueError`; `tower_of_hanoi` returns the
  moves as `(from, to)` pairs.
- `algokit.primes`: `prime_sieve`, `prime_factors`.
- `algokit.text`: `is_palindrome`, `longest_word`, `to_upper`,
  `largest_number`, `most_frequent_char`.
- `algokit.employee`: `Employee`, a dataclass with `name`, `company` and
  `age`, and an `info()` method returning those fields one per line.
- `algokit.tree`: `Node`, `parse_level_order`, `build_level_order`,
  `build_preorder`, `level_order`, `inorder`, `preorder`, `postorder`,
  `count_leaves`, `is_identical`.
- `algokit.tree_traversal`: `boundary`, `zigzag`.
- `algokit.tree_metrics`: `height`, `diameter`, `diameter_fast`,
  `is_balanced`, `is_symmetric`, `is_sum_tree`.

## Building trees

`parse_level_order` reads space-separated values in level order, with `N`
for a missing child. `build_level_order` and `build_preorder` take integers,
with `-1` for a missing child, and raise `ValueError` if the values run out
before the tree is complete.

## Examples

```python
from algokit.sorting import wave_sort
from algokit.tree import parse_level_order, inorder
from algokit.tree_traversal import zigzag

wave_sort([3, 6, 5, 10, 7, 20])

root = parse_level_order("1 2 3 4 5 N 6")
inorder(root)
zigzag(root)
```

## What it does not do

The package is a library only. It has no command-line program and reads
nothing from standard input; every function is used by importing it.