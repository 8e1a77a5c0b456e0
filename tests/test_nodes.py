import pytest

from algosuite.nodes import ListNode, TreeNode


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, 0, -2], list(range(50))])
def test_list_round_trip(values):
    head = ListNode.from_iterable(values)
    assert list(head) == values


def test_empty_iterable_gives_none():
    assert ListNode.from_iterable([]) is None


def test_list_links_in_order():
    head = ListNode.from_iterable([4, 7])
    assert head.val == 4
    assert head.next.val == 7
    assert head.next.next is None


def test_list_repr_shows_values():
    assert repr(ListNode.from_iterable([1, 2])) == "ListNode([1, 2])"


def test_tree_from_level_order_with_gaps():
    root = TreeNode.from_level_order([1, None, 2, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3
    assert root.right.right is None


def test_tree_from_empty_level_order():
    assert TreeNode.from_level_order([]) is None


def test_tree_full_level():
    root = TreeNode.from_level_order([1, 2, 3, 4, 5, 6, 7])
    assert [root.left.val, root.right.val] == [2, 3]
    assert [root.left.left.val, root.left.right.val] == [4, 5]
    assert [root.right.left.val, root.right.right.val] == [6, 7]