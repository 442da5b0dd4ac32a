# puzzlebox

A collection of classic algorithm puzzles written as small, tested Python
functions. Each module groups puzzles that share a technique.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Puzzles |
| --- | --- |
| `puzzlebox.stacks` | `asteroid_collision`, `find_celebrity`, `largest_rectangle_area`, `remove_k_digits` |
| `puzzlebox.monotonic` | `sum_subarray_ranges`, `sum_subarray_mins` (modulo 10**9 + 7), `sum_subarray_mins_brute`, `trapped_water` |
| `puzzlebox.pairs` | `friend_requests`, `max_pair_operations`, `divide_players` |
| `puzzlebox.windows` | `total_fruit`, `total_fruit_brute`, `longest_ones`, `sliding_max`, `longest_run_with_flips`, `max_consecutive_answers`, `count_subarrays_max_at_most`, `count_bounded_max_subarrays`, `count_bounded_max_subarrays_brute` |
| `puzzlebox.backtracking` | `combination_sum_unique`, `binary_strings_without_consecutive_ones`, `generate_parentheses`, `solve_n_queens`, `letter_combinations` |
| `puzzlebox.arrangements` | `count_beautiful_arrangements`, `count_beautiful_subsets` |
| `puzzlebox.subsets` | `subsets_by_mask`, `subsets_by_backtracking`, `format_subset` |
| `puzzlebox.concatenation` | `can_include`, `max_unique_concatenation_length`, `exploration_trace` |
| `puzzlebox.searching` | `min_eating_speed`, `kth_smallest_fraction`, `kth_smallest_fraction_search` |
| `puzzlebox.palindromes` | `longest_palindromic_substring`, `is_palindrome`, `rotations`, `can_rotate_to_palindrome` |
| `puzzlebox.binary` | `division_steps`, `powers_of_two`, `bit_string`, `string_bitmask`, `mask_letters`, `explain_binary` |
| `puzzlebox.linked` | `ListNode`, `build_list`, `has_cycle_hashing`, `has_cycle` |
| `puzzlebox.folders` | `delete_duplicate_folders` |

Invalid input is reported with `ValueError`. For example, `divide_players`
raises it when the players cannot be split into pairs of equal total skill,
and `min_eating_speed` raises it when there are fewer hours than piles.
`find_celebrity` returns `None` when nobody qualifies.

## Examples

```python
from puzzlebox.stacks import asteroid_collision
from puzzlebox.monotonic import trapped_water
from puzzlebox.backtracking import generate_parentheses
from puzzlebox.linked import build_list, has_cycle

asteroid_collision([5, 10, -5])          # [5, 10]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
generate_parentheses(2)                  # ['(())', '()()']
has_cycle(build_list([1, 2, 3, 4], 1))   # True
```

`explain_binary` returns a multi-line text walk-through of a number's
binary form, and `exploration_trace` yields the steps of the include/skip
search behind `max_unique_concatenation_length` one line at a time.

## What it does not do

There is no command-line program: nothing here reads puzzles from standard
input or prints answers. Everything is used by importing the functions
above and calling them from Python.