# algokit

Compact solutions to classic algorithm exercises. They are grouped by the kind
of data they work on. The package is plain Python and needs nothing beyond the
standard library.

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

### `algokit.numbers`

Integer, digit and combinatorial puzzles:

- `reverse_integer`: returns 0 when the result leaves the 32-bit range.
- `is_palindrome`, `my_pow`, `my_sqrt`, `climb_stairs`, `fib`.
- `solve_n_queens`: returns every board as a list of strings of `.` and `Q`.
- `generate`: the first rows of Pascal's triangle.
- `get_row`: a single row of Pascal's triangle.
- `trailing_zeroes`: the number of trailing zeros of `n!`.
- `is_happy`: allows eight rounds of summing squared digits.
- `count_primes`, `add_digits`, `is_ugly`, `can_win_nim`, `integer_break`, `arrange_coins`.
- `hamming_distance`: compares the 32-bit forms of its arguments.
- `find_complement`, `judge_square_sum`, `self_dividing_numbers`.

### `algokit.text`

String puzzles:

- `roman_to_int`: ignores characters that are not numerals.
- `longest_common_prefix`.
- `is_valid`: bracket matching.
- `str_str`: returns the first index of a substring, or -1.
- `count_and_say`, `length_of_last_word`, `can_construct`, `find_the_difference`.
- `judge_circle`.
- `to_lower_case`: lowers ASCII capitals only.
- `num_jewels_in_stones`.
- `unique_morse_representations`: uses the `MORSE` table and raises `ValueError` on a letter outside a–z.
- `remove_outer_parentheses`.
- `defang_ip_addr`.

### `algokit.arrays`

Puzzles over lists of integers:

- `two_sum`: returns the indices of every matching pair, flattened in scan order.
- `find_median_sorted_arrays`.
- `remove_duplicates`, `remove_element`, `search_insert` and `plus_one`: these change the list in place.
- `merge`: changes `nums1` in place.
- `max_sub_array`.
- `max_profit_once`: one trade.
- `max_profit`: any number of trades.
- `single_number`, `majority_element`, `contains_duplicate`.
- `reverse_string`: reverses in place.
- `top_k_frequent`: returns the `k` most frequent values, least frequent of them first.
- `intersection`, `intersect`.
- `search`: binary search.
- `flip_and_invert_image`, `fair_candy_swap`, `sort_array_by_parity`, `sort_array_by_parity_ii`.
- `repeated_n_times`, `sorted_squares`, `height_checker`, `relative_sort_array`.

### `algokit.dynamic`

Dynamic programming:

- `minimum_total`: the smallest top-to-bottom path through a number triangle.
- `rob`: houses in a row.
- `rob_circle`: houses in a circle.

### `algokit.structures`

- `QueueStack`: a last-in, first-out stack kept in a single queue. It has `push`, `pop`, `top` and `empty`. `pop` and `top` raise `IndexError` when the stack is empty.
- `NumArray`: a segment tree over a fixed list. `sum_range(i, j)` sums positions `i` through `j` inclusive and raises `IndexError` for a range outside the list.

### `algokit.linked`

Singly linked lists built from `ListNode` (fields `val` and `next`, iterable over its values):

- `build_list`, `list_values`.
- `merge_two_lists`: on ties the node from the second list comes first.
- `delete_duplicates`.
- `remove_elements`.
- `delete_node`: removes a node given only that node, by copying its successor.

### `algokit.trees`

Binary trees (`TreeNode` with `val`, `left`, `right`) and n-ary trees (`Node` with `val`, `children`):

- Binary trees: `inorder_traversal`, `preorder_traversal`, `is_same_tree`, `max_depth`, `invert_tree`, `sum_of_left_leaves`, `merge_trees`, `search_bst`, `range_sum_bst`, `is_unival_tree`.
- N-ary trees: `level_order`, `nary_max_depth`, `preorder`, `postorder`.

`range_sum_bst` sums the in-order values from the node holding `low` to the one holding `high`. It raises `ValueError` when either bound is not in the tree.

## Examples

```python
from algokit.numbers import solve_n_queens, generate
from algokit.text import roman_to_int
from algokit.arrays import two_sum
from algokit.linked import build_list, list_values, merge_two_lists
from algokit.structures import NumArray

len(solve_n_queens(8))           # 92
generate(3)                      # [[1], [1, 1], [1, 2, 1]]
roman_to_int("MCMXCIV")          # 1994
two_sum([2, 7, 11, 15], 9)       # [0, 1]

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)              # [1, 1, 2, 3, 4, 4]

NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 2)   # 1
```

## What it does not do

algokit is a library only. It has no command-line tool, and it does not read or store data of its own.