"""Worked examples for each algorithm, runnable from the command line."""

from __future__ import annotations

import argparse
import copy
from typing import Callable, Iterable, Iterator, Optional, Sequence

from leetkit.arrays import binary_search, flood_fill, max_profit, two_sum
from leetkit.linked_list import ListNode, format_list, merge_two_lists
from leetkit.text import is_anagram, is_palindrome, is_valid_parentheses
from leetkit.trees import (
    TreeNode,
    format_tree,
    invert_tree,
    is_balanced,
    lowest_common_ancestor,
)


def _flag(value: bool) -> int:
    return int(value)


def _spaced(values: Iterable[int]) -> str:
    return "".join(f"{v} " for v in values)


def _balanced_binary_tree() -> Iterator[str]:
    root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    yield "Input: "
    yield format_tree(root)
    yield f"Output: {_flag(is_balanced(root))}"


def _best_time_to_buy_and_sell_stock() -> Iterator[str]:
    prices = [7, 1, 5, 3, 6, 4]
    output = max_profit(prices)
    yield f"Input vector: {_spaced(prices)}"
    yield f"Output: {output}"


def _binary_search() -> Iterator[str]:
    nums = [-1, 0, 3, 5, 9, 12]
    target = 9
    output = binary_search(nums, target)
    yield f"Input vector: {_spaced(nums)}"
    yield f"Input target: {target}"
    yield f"Output: {output}"


def _flood_fill() -> Iterator[str]:
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    yield "Input: "
    yield from (_spaced(row) for row in image)
    yield "Output: "
    output = flood_fill(copy.deepcopy(image), 1, 1, 2)
    yield from (_spaced(row) for row in output)


def _invert_binary_tree() -> Iterator[str]:
    root = TreeNode(4)
    root.left = TreeNode(2, TreeNode(1), TreeNode(3))
    root.right = TreeNode(7, TreeNode(6), TreeNode(9))
    yield "Input tree (level-order traversal):"
    yield format_tree(root)
    inverted = invert_tree(root)
    yield "Inverted tree (level-order traversal):"
    yield format_tree(inverted)


def _lowest_common_ancestor() -> Iterator[str]:
    root = TreeNode(6)
    root.left = TreeNode(2, TreeNode(0), None)
    root.right = TreeNode(8, TreeNode(7), TreeNode(9))
    root.left.right = TreeNode(4, TreeNode(3), TreeNode(5))
    yield "Input tree (level-order traversal):"
    yield format_tree(root)
    output = lowest_common_ancestor(root, root.left, root.right)
    yield "Output node:"
    yield str(output.val)


def _merge_two_sorted_lists() -> Iterator[str]:
    list1 = ListNode.from_iterable([1, 2, 4])
    list2 = ListNode.from_iterable([1, 3, 4])
    yield "Input List 1: "
    yield format_list(list1)
    yield "Input List 2: "
    yield format_list(list2)
    yield "Output List"
    yield format_list(merge_two_lists(list1, list2))


def _two_sum() -> Iterator[str]:
    nums = [2, 7, 11, 15]
    target = 9
    first, second = two_sum(nums, target)
    yield f"Input vector: {_spaced(nums)}"
    yield f"Target: {target}"
    yield f"Indices of the two numbers are: [{first}, {second}]"
    yield f"The corresponding values are: {nums[first]} and {nums[second]}"


def _valid_anagram() -> Iterator[str]:
    s, t = "anagram", "nagaram"
    yield "Input strings: "
    yield f"s: {s}"
    yield f"t: {t}"
    yield f"Output: {_flag(is_anagram(s, t))}"


def _valid_palindrome() -> Iterator[str]:
    s = "A man, a plan, a canal: Panama"
    output = is_palindrome(s)
    yield f"Input string: {s}"
    yield f"Output: {_flag(output)}"


def _valid_parenthesis() -> Iterator[str]:
    s = "()[]{}"
    output = is_valid_parentheses(s)
    yield f"Input: {s}"
    yield f"Output: {_flag(output)}"


DEMOS: dict[str, Callable[[], Iterator[str]]] = {
    "balanced-binary-tree": _balanced_binary_tree,
    "best-time-to-buy-and-sell-stock": _best_time_to_buy_and_sell_stock,
    "binary-search": _binary_search,
    "flood-fill": _flood_fill,
    "invert-binary-tree": _invert_binary_tree,
    "lowest-common-ancestor": _lowest_common_ancestor,
    "merge-two-sorted-lists": _merge_two_sorted_lists,
    "two-sum": _two_sum,
    "valid-anagram": _valid_anagram,
    "valid-palindrome": _valid_palindrome,
    "valid-parenthesis": _valid_parenthesis,
}


def run_demo(name: str) -> str:
    """Return the text a named worked example prints."""
    try:
        demo = DEMOS[name]
    except KeyError:
        raise ValueError(f"unknown demo: {name!r}") from None
    return "".join(f"{line}\n" for line in demo())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the chosen worked examples, or all of them when none is named."""
    parser = argparse.ArgumentParser(
        prog="leetkit", description="Run worked algorithm examples."
    )
    parser.add_argument("names", nargs="*", metavar="NAME", help="demo to run")
    parser.add_argument("--list", action="store_true", help="list demo names")
    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(DEMOS))
        return 0

    unknown = [name for name in args.names if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")

    for name in args.names or DEMOS:
        print(run_demo(name), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())