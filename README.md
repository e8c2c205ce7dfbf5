# drills

A small library of classic algorithm exercises: string checks, array
problems, matrix helpers, searching and sorting, dynamic programming,
singly linked lists and binary trees. Many problems come in several
variants (naive, counting, optimal) that can be compared side by side.

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## Modules

- `drills.strings`
  - `urlify(text, length)`: replaces spaces in the first `length`
    characters with `%20`; raises `ValueError` if `length` is out of range.
  - `is_anagram_sorted`, `is_anagram_counted`, `is_permutation_sorted`,
    `is_permutation_counted`: compare two strings as multisets of characters.
  - `is_unique_bruteforce`, `is_unique_hashing`, `is_unique_bitset`: check
    that no character repeats. The hashing and bitset variants accept ASCII
    only and raise `ValueError` otherwise.
  - `largest_number(numbers)`: concatenates strings or integers in the order
    that gives the largest result, returned as a string.
  - `reverse_words(text)`: reverses the order of dot-separated words and
    joins them with spaces (`"i.love.you"` gives `"you love i"`).
  - `compress(text)`: run-length encoding (`"aabbbcccc"` gives `"a2b3c4"`),
    returning the input unchanged unless the encoding is shorter.
  - `is_rotation`, `is_rotation_naive`: rotation checks.
- `drills.arrays`
  - `max_profit`, `max_profit_naive`: best profit from one buy and a later sell.
  - `find_duplicate` (Floyd's cycle detection; values must lie in
    `1..len(values)-1`), `find_duplicate_sorted`, `find_duplicate_counting`.
  - `leaders` (reported right to left), `leaders_naive` (left to right).
  - `missing_number_counting`, `missing_number_sum`, `missing_number_xor`:
    the value of `1..len(values)+1` absent from the input.
  - `reverse_in_groups(values, k)`: reverses each run of `k` items.
  - `sort_colors` (Dutch national flag), `sort_colors_counting`: sort 0s, 1s
    and 2s; any other value raises `ValueError`.
  - `trapped_water`, `trapped_water_prefix`, `trapped_water_naive`.
  - `single_number(values)`: XOR of all values, 0 for an empty sequence.
- `drills.matrix`: `pascal_triangle(rows)`, `zero_matrix(matrix)` (returns a
  new matrix; the input is not changed).
- `drills.search`: `binary_search(values, target, low, high)` returning the
  index or -1, `single_in_pairs(values)`, `merge_sort(values)` (returns a new
  list).
- `drills.dynamic`: `knapsack(values, weights, capacity)`,
  `can_partition(values)`, `has_subset_sum(values, total)`.
- `drills.tree`: `TreeNode` (a dataclass with `value`, `left`, `right`) and
  `preorder`, `level_order`, `left_view`, `height` (nodes, 0 when empty),
  `edge_height` (edges, -1 when empty), `is_balanced`, `is_bst`,
  `count_leaves`, `is_identical`, `is_mirror`, `is_symmetric`.
- `drills.linked_list`: `ListNode` (with `value` and `next`; iterating a node
  yields the nodes from it onward and raises `ValueError` on a cycle),
  `from_iterable`, `to_list`, `delete_middle`, `delete_middle_by_length`,
  `has_cycle`, `remove_cycle`, `intersection`, `merge_sorted`, `middle`,
  `pairwise_swap`, `reverse`, `is_palindrome_reversal`, `is_palindrome_stack`,
  `is_palindrome_recursive`, `remove_duplicates`, `remove_duplicates_naive`,
  `kth_from_end`, `reverse_in_groups`, `sort_counting`, `sort_one_pass`,
  `add_lists`. Most list operations work in place on the nodes they are given.

## Examples

```python
from drills.strings import compress, is_rotation
from drills.arrays import max_profit, trapped_water
from drills.dynamic import knapsack
from drills.linked_list import from_iterable, reverse, to_list

compress("aabbbcccc")                                # "a2b3c4"
is_rotation("waterbottle", "erbottlewat")            # True
max_profit([7, 1, 5, 3, 6, 4])                       # 5
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
knapsack([60, 100, 120], [10, 20, 30], 50)           # 220

to_list(reverse(from_iterable([1, 2, 3])))           # [3, 2, 1]
```

```python
from drills.tree import TreeNode, level_order, is_symmetric

root = TreeNode(1, TreeNode(2), TreeNode(2))
level_order(root)    # [1, 2, 2]
is_symmetric(root)   # True
```

## What it does not do

`drills` is a library only. It has no command-line program and does not read
input or print results; call the functions from your own code.

## Running the tests

```
pip install .[test]
pytest
```