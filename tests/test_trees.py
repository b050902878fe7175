import pytest

from leetkit.trees import (
    TreeNode,
    format_tree,
    invert_tree,
    is_balanced,
    level_order,
    lowest_common_ancestor,
)


def _balanced_example():
    return TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))


def _invert_example():
    root = TreeNode(4)
    root.left = TreeNode(2, TreeNode(1), TreeNode(3))
    root.right = TreeNode(7, TreeNode(6), TreeNode(9))
    return root


def _bst_example():
    root = TreeNode(6)
    root.left = TreeNode(2, TreeNode(0), None)
    root.right = TreeNode(8, TreeNode(7), TreeNode(9))
    root.left.right = TreeNode(4, TreeNode(3), TreeNode(5))
    return root


def test_level_order_counts_empty_slots():
    values = level_order(_balanced_example())
    present = [v for v in values if v is not None]
    assert sorted(present) == [3, 7, 9, 15, 20]
    assert values.count(None) == len(present) + 1


def test_level_order_of_empty_tree():
    assert level_order(None) == []


def test_format_empty_tree():
    assert format_tree(None) == "[]"


def test_format_example_tree():
    assert format_tree(_balanced_example()) == (
        "3, 9, 20, null, null, 15, 7, null, null, null, null, "
    )


def test_example_tree_is_balanced():
    assert is_balanced(_balanced_example())
    assert is_balanced(None)


def test_chain_is_not_balanced():
    root = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert not is_balanced(root)


def test_deep_imbalance_below_root_detected():
    left = TreeNode(2, TreeNode(3, TreeNode(4)), None)
    right = TreeNode(5, TreeNode(6), TreeNode(7, TreeNode(8)))
    assert not is_balanced(TreeNode(1, left, right))


def test_invert_swaps_children():
    root = _invert_example()
    original_left, original_right = root.left, root.right
    result = invert_tree(root)
    assert result is root
    assert root.left is original_right
    assert root.right is original_left
    assert [root.left.left.val, root.left.right.val] == [9, 6]


def test_invert_twice_restores_tree():
    root = _invert_example()
    before = level_order(root)
    invert_tree(invert_tree(root))
    assert level_order(root) == before


def test_invert_keeps_balance():
    root = _balanced_example()
    assert is_balanced(invert_tree(root))


def test_invert_empty():
    assert invert_tree(None) is None


def test_lca_across_subtrees_is_root():
    root = _bst_example()
    assert lowest_common_ancestor(root, root.left, root.right) is root


def test_lca_of_ancestor_and_descendant():
    root = _bst_example()
    p = root.left
    q = root.left.right
    assert lowest_common_ancestor(root, p, q) is p


def test_lca_within_subtree():
    root = _bst_example()
    three = root.left.right.left
    five = root.left.right.right
    assert lowest_common_ancestor(root, three, five) is root.left.right


def test_lca_missing_node_raises():
    root = TreeNode(5, TreeNode(3), None)
    with pytest.raises(ValueError):
        lowest_common_ancestor(root, TreeNode(10), TreeNode(12))