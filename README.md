# leetkit

Plain-Python solutions to a set of classic interview problems on arrays,
strings, linked lists and binary trees. It has no runtime dependencies.

## Installation

```
pip install .
```

## Modules

- `leetkit.arrays`
  - `max_profit(prices)`: best profit from one buy followed by a later sell,
    or 0. The running minimum starts at 1,000,000, so prices are expected to
    be below that.
  - `binary_search(nums, target)`: index of `target` in an ascending
    sequence, or -1.
  - `two_sum(nums, target)`: indices of the first pair that sums to
    `target`, or an empty list.
  - `flood_fill(image, sr, sc, color)`: recolours the 4-connected region
    around `(sr, sc)` in place and returns the same image.
- `leetkit.text`
  - `is_anagram(s, t)`
  - `is_palindrome(s)`: compares only ASCII letters and digits, ignoring case.
  - `is_valid_parentheses(s)`: checks `()`, `[]` and `{}`; any other
    character makes the string invalid.
- `leetkit.linked_list`
  - `ListNode`: a node with `val` and `next`; `ListNode.from_iterable(values)`
    builds a list (returning `None` when empty), and iterating a node yields
    the values from it onwards.
  - `format_list(head)`: renders `1 -> 2 -> nullptr`.
  - `merge_two_lists(list1, list2)`: splices two sorted lists into one;
    on ties the node from `list1` comes first.
- `leetkit.trees`
  - `TreeNode`: a node with `val`, `left` and `right`.
  - `level_order(root)`: values breadth first, with `None` for empty child
    slots.
  - `format_tree(root)`: the same, rendered as `3, 9, null, ...`, or `[]`
    for an empty tree.
  - `is_balanced(root)`
  - `invert_tree(root)`: mirrors the tree in place and returns its root.
  - `lowest_common_ancestor(root, p, q)`: for a binary search tree; raises
    `ValueError` if the search runs off the tree.
- `leetkit.demo`: the worked examples behind the command below.

## Examples

```python
from leetkit.arrays import max_profit, two_sum
from leetkit.text import is_valid_parentheses
from leetkit.linked_list import ListNode, merge_two_lists
from leetkit.trees import TreeNode, is_balanced

max_profit([7, 1, 5, 3, 6, 4])          # 5
two_sum([2, 7, 11, 15], 9)              # [0, 1]
is_valid_parentheses("()[]{}")          # True

merged = merge_two_lists(ListNode.from_iterable([1, 2, 4]),
                         ListNode.from_iterable([1, 3, 4]))
list(merged)                            # [1, 1, 2, 3, 4, 4]

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
is_balanced(root)                       # True
```

## Demo command

The package installs a command that runs a fixed example for each problem
and prints its input and output:

```
leetkit-demo
```

With no arguments it runs every example. Give one or more names to run only
those, or `--list` to print the available names:

```
leetkit-demo --list
leetkit-demo two-sum flood-fill
```

The names are `balanced-binary-tree`, `best-time-to-buy-and-sell-stock`,
`binary-search`, `flood-fill`, `invert-binary-tree`,
`lowest-common-ancestor`, `merge-two-sorted-lists`, `two-sum`,
`valid-anagram`, `valid-palindrome` and `valid-parenthesis`. An unknown name
is reported as a usage error.

From Python, `leetkit.demo.run_demo(name)` returns the text of one example
as a string and raises `ValueError` for an unknown name. Boolean results are
printed as `1` or `0`.

The examples use built-in inputs only; the command does not read problems
from files or standard input.

## Running the tests

```
pip install ".[test]"
pytest
```