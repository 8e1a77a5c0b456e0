"""Operations on singly linked lists built from ListNode."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

from algosuite.nodes import ListNode


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end of the list and return the new head."""
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n):
        fast = fast.next if fast is not None else None
    if n < 1 or fast is None:
        raise ValueError(f"position {n} is outside the list")
    slow = dummy
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_two_lists(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes; ties take from l2 first."""
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists by pairwise divide and conquer."""
    if not lists:
        return None

    def merge_range(start: int, end: int) -> Optional[ListNode]:
        if start == end:
            return lists[start]
        if start + 1 == end:
            return merge_two_lists(lists[start], lists[end])
        mid = start + (end - start) // 2
        return merge_two_lists(merge_range(start, mid), merge_range(mid + 1, end))

    return merge_range(0, len(lists) - 1)


def _reverse_prefix(head: ListNode, k: int) -> ListNode:
    prev: Optional[ListNode] = None
    curr: Optional[ListNode] = head
    for _ in range(k):
        nxt = curr.next
        curr.next = prev
        prev, curr = curr, nxt
    return prev


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse every full group of k nodes; a short tail stays as it is."""
    if k < 1:
        raise ValueError("group size must be positive")
    dummy = ListNode(0, head)
    prev_group_end = dummy
    curr = head
    while curr is not None:
        group_start = curr
        count = 0
        while curr is not None and count < k:
            curr = curr.next
            count += 1
        if count == k:
            prev_group_end.next = _reverse_prefix(group_start, k)
            prev_group_end = group_start
        else:
            prev_group_end.next = group_start
            break
    return dummy.next


def split_list_to_parts(head: Optional[ListNode], k: int) -> List[Optional[ListNode]]:
    """Cut the list into k consecutive parts whose sizes differ by at most one."""
    if k < 1:
        raise ValueError("number of parts must be positive")
    size = sum(1 for _ in head) if head is not None else 0
    base, extra = divmod(size, k)
    parts: List[Optional[ListNode]] = []
    current = head
    for index in range(k):
        part_size = base + (1 if index < extra else 0)
        parts.append(current if part_size else None)
        prev: Optional[ListNode] = None
        for _ in range(part_size):
            prev = current
            current = current.next
        if prev is not None:
            prev.next = None
    return parts


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert between each pair of adjacent nodes a node holding their gcd."""
    curr = head
    while curr is not None and curr.next is not None:
        following = curr.next
        curr.next = ListNode(math.gcd(curr.val, following.val), following)
        curr = following
    return head


def delete_values(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink every node whose value appears in ``nums``."""
    banned = set(nums)
    dummy = ListNode(0, head)
    prev = dummy
    node = head
    while node is not None:
        if node.val in banned:
            prev.next = node.next
        else:
            prev = node
        node = node.next
    return dummy.next