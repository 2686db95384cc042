# algokit

A collection of well-known algorithms and data structures written as plain,
dependency-free Python functions and small classes.

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
| `algokit.trees` | `TreeNode`, `is_same_tree`, `max_depth`, `sorted_array_to_bst` |
| `algokit.linked_lists` | `ListNode`, `RandomNode`, `build_list`, `list_values`, `add_two_numbers`, `remove_nth_from_end`, `rotate_right`, `delete_duplicates`, `reverse_between`, `sort_list`, `copy_random_list` |
| `algokit.bits` | `reverse_bits`, `hamming_weight` (32-bit unsigned values) |
| `algokit.strings` | `length_of_longest_substring`, `longest_palindrome`, `is_valid_brackets` |
| `algokit.concurrency` | `FooBar`, `ZeroEvenOdd`, `H2O`, `BoundedBlockingQueue`, `FizzBuzz` |
| `algokit.arrays` | `max_area`, `max_area_sorted`, `trap`, `product_except_self`, `candy`, `minimize_array_value`, `min_subarray_len`, `find_132_pattern` |
| `algokit.search` | `find_peak_element`, `search_range`, `search_matrix`, `find_kth_largest` |
| `algokit.numeric` | `power`, `integer_sqrt` |
| `algokit.dp` | `minimum_total`, `max_profit_with_cooldown`, `coin_change`, `jump`, `jump_dp`, `can_jump` |
| `algokit.combinatorics` | `generate_parenthesis`, `permute_unique`, `combine` |
| `algokit.sudoku` | `is_valid_sudoku` |
| `algokit.heaps` | `k_smallest_pairs`, `find_maximized_capital` |
| `algokit.graphs` | `find_cheapest_price` |

Invalid arguments raise `ValueError`. Some examples are `remove_nth_from_end`
with `n` larger than the list, `find_kth_largest` with `k` out of range,
`is_valid_sudoku` with a board that is not 9x9, and `integer_sqrt` with a
negative number.

## Examples

```python
from algokit.linked_lists import build_list, list_values, add_two_numbers
from algokit.strings import longest_palindrome
from algokit.dp import coin_change

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))              # [7, 0, 8]

print(longest_palindrome("babad"))     # bab
print(coin_change([1, 2, 5], 11))      # 3
```

The classes in `algokit.concurrency` are meant to be shared between threads.
For example, `FooBar(n)` lets one thread call `foo` and another call `bar`, and
the two callbacks then run strictly alternating, `n` times each:

```python
import threading
from algokit.concurrency import FooBar

out = []
fb = FooBar(2)
threads = [
    threading.Thread(target=fb.foo, args=(lambda: out.append("foo"),)),
    threading.Thread(target=fb.bar, args=(lambda: out.append("bar"),)),
]
for t in threads:
    t.start()
for t in threads:
    t.join()
print("".join(out))                    # foobarfoobar
```

## What it does not do

This is a library of functions only. It has no command-line tool. It also
has no prefix-tree type, no interval merging or insertion helpers and no web
crawler.