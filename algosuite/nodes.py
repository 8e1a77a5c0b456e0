"""Node types for singly linked lists and binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from ``values`` and return its head, or None if empty."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree of integers."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @classmethod
    def from_level_order(
        cls, values: Iterable[Optional[int]]
    ) -> Optional[TreeNode]:
        """Build a tree from level-order values where None marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending: deque[TreeNode] = deque([root])
        while pending:
            parent = pending.popleft()
            try:
                left = next(items)
            except StopIteration:
                break
            if left is not None:
                parent.left = cls(left)
                pending.append(parent.left)
            try:
                right = next(items)
            except StopIteration:
                break
            if right is not None:
                parent.right = cls(right)
                pending.append(parent.right)
        return root

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"