import pytest

from algosuite.nodes import ListNode, TreeNode
from algosuite.trees import is_sub_path, postorder_traversal

SAMPLE = [1, 4, 4, None, 2, 2, None, 1, None, 6, 8, None, None, None, None, 1, 3]


def test_postorder_example():
    root = TreeNode.from_level_order([1, None, 2, 3])
    assert postorder_traversal(root) == [3, 2, 1]


def test_postorder_empty():
    assert postorder_traversal(None) == []


def test_postorder_full_tree():
    root = TreeNode.from_level_order([1, 2, 3, 4, 5, 6, 7])
    result = postorder_traversal(root)
    assert result == [4, 5, 2, 6, 7, 3, 1]


@pytest.mark.parametrize("values", [[5], [1, 2, 3, None, 4], SAMPLE])
def test_postorder_invariants(values):
    root = TreeNode.from_level_order(values)
    result = postorder_traversal(root)
    assert result[-1] == root.val
    assert sorted(result) == sorted(v for v in values if v is not None)


def _root_to_leaf_paths(node, prefix=()):
    path = prefix + (node.val,)
    children = [c for c in (node.left, node.right) if c is not None]
    if not children:
        yield list(path)
    for child in children:
        yield from _root_to_leaf_paths(child, path)


def test_every_root_to_leaf_path_is_a_sub_path():
    root = TreeNode.from_level_order(SAMPLE)
    for path in _root_to_leaf_paths(root):
        assert is_sub_path(ListNode.from_iterable(path), root)
        assert is_sub_path(ListNode.from_iterable(path[1:]), root) or len(path) == 1


def test_absent_value_is_not_a_sub_path():
    root = TreeNode.from_level_order(SAMPLE)
    assert not is_sub_path(ListNode.from_iterable([4, 99]), root)


def test_path_longer_than_tree_is_not_a_sub_path():
    root = TreeNode.from_level_order(SAMPLE)
    assert not is_sub_path(ListNode.from_iterable([1, 4, 2, 6, 8]), root)


def test_sub_path_in_empty_tree():
    assert is_sub_path(ListNode.from_iterable([1]), None) is False