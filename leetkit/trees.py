"""Binary tree node type and classic binary tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return node values breadth first, with None for every empty child slot."""
    if root is None:
        return []
    values: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        current = queue.popleft()
        if current is None:
            values.append(None)
        else:
            values.append(current.val)
            queue.append(current.left)
            queue.append(current.right)
    return values


def format_tree(root: Optional[TreeNode]) -> str:
    """Render a tree in level order, writing empty slots as ``null``."""
    if root is None:
        return "[]"
    return "".join(
        f"{'null' if value is None else value}, " for value in level_order(root)
    )


def _height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of a balanced subtree, or None as soon as imbalance is found."""
    if node is None:
        return 0
    left = _height(node.left)
    if left is None:
        return None
    right = _height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return _height(root) is not None


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> TreeNode:
    """Lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            return node
    raise ValueError("nodes are not both present in the search tree")