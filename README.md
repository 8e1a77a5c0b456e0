# algosuite

A collection of well-known algorithm routines in plain Python, with no
third-party dependencies.

## Installation

```
pip install algosuite
```

## What is inside

- `algosuite.nodes`: `ListNode` (fields `val`, `next`) and `TreeNode`
  (fields `val`, `left`, `right`). `ListNode.from_iterable(values)` builds a
  linked list and returns its head, or `None` for no values; iterating over a
  `ListNode` yields the values from that node onward.
  `TreeNode.from_level_order(values)` builds a tree from level-order values,
  where `None` marks a missing child.
- `algosuite.linked_lists`: `add_two_numbers`, `remove_nth_from_end`,
  `merge_two_lists`, `merge_k_lists`, `reverse_k_group`, `split_list_to_parts`,
  `insert_greatest_common_divisors`, `delete_values`. These relink the nodes
  they are given rather than copying them.
- `algosuite.trees`: `postorder_traversal`, `is_sub_path`.
- `algosuite.arrays`: queries that leave their input untouched:
  `two_sum`, `find_median_sorted_arrays`, `search`, `search_range`,
  `max_sub_array`, `max_profit`, `single_number`, `largest_number`,
  `missing_number`, `find_max_consecutive_ones`, `max_distance`,
  `can_be_equal`, `min_swaps`.
- `algosuite.inplace`: routines that change a list in place:
  `remove_duplicates`, `remove_element`, `sort_colors`, `merge_sorted`,
  `rotate`, `move_zeroes`, `reverse_string`.
- `algosuite.strings`: `length_of_longest_substring`, `regex_match`
  (`.` and `*`), `longest_valid_parentheses`, `wildcard_match` (`?` and `*`),
  `min_cut`, `number_to_words`, `fraction_addition`, `count_seniors`.
- `algosuite.grids`: `spiral_order`, `largest_rectangle_area`,
  `maximal_rectangle`, `num_magic_squares_inside`, `spiral_matrix_iii`,
  `regions_by_slashes`.
- `algosuite.numeric`: `divide` and `find_complement`, which work with 32-bit
  signed integers (`INT_MIN`, `INT_MAX`), and `minimum_finish_time`.
- `algosuite.graphs`: `shortest_distance` (Dijkstra over an adjacency list of
  `(cost, neighbour)` pairs, returning `math.inf` when unreachable) and
  `modified_graph_edges`, which assigns weights to edges marked `-1`
  (`UNKNOWN_WEIGHT`) and returns new edge lists, or an empty list when no
  assignment works.

## Errors

Inputs that have no meaningful answer raise `ValueError`: for example the
median of two empty sequences, `max_sub_array` or `largest_number` of an empty
sequence, `number_to_words` outside `0..2**31 - 1`, a malformed expression in
`fraction_addition`, a position outside the list in `remove_nth_from_end`, or
a non-positive group or part count. `divide` raises `ZeroDivisionError` for a
zero divisor.

## Example

```python
from algosuite.nodes import ListNode
from algosuite.linked_lists import add_two_numbers
from algosuite.strings import number_to_words, fraction_addition
from algosuite.arrays import two_sum

total = add_two_numbers(ListNode.from_iterable([2, 4, 3]),
                        ListNode.from_iterable([5, 6, 4]))
print(list(total))                      # [7, 0, 8]

print(number_to_words(12345))           # Twelve Thousand Three Hundred Forty Five
print(two_sum([2, 7, 11, 15], 9))       # (0, 1)
print(fraction_addition("-1/2+1/2+1/3"))  # 1/3
```

## What it does not do

This is a library only: it has no command-line program. Each routine is
called from Python code.

## Running the tests

```
pip install -e ".[test]"
pytest
```