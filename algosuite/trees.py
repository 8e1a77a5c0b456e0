"""Binary tree traversals and queries."""

from __future__ import annotations

from typing import List, Optional

from algosuite.nodes import ListNode, TreeNode


def postorder_traversal(root: Optional[TreeNode]) -> List[int]:
    """Return node values in post-order (left, right, node)."""
    if root is None:
        return []
    pending = [root]
    reversed_order: List[int] = []
    while pending:
        node = pending.pop()
        reversed_order.append(node.val)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return reversed_order[::-1]


def _matches_downward(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    if head is None:
        return True
    if root is None or root.val != head.val:
        return False
    return _matches_downward(head.next, root.left) or _matches_downward(
        head.next, root.right
    )


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Tell whether the list's values follow some downward path in the tree."""
    if root is None:
        return False
    return (
        _matches_downward(head, root)
        or is_sub_path(head, root.left)
        or is_sub_path(head, root.right)
    )