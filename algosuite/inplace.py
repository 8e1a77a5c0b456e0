"""Operations that rearrange a mutable sequence in place."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its first k items are the distinct values; return k."""
    if not nums:
        return 0
    k = 1
    for value in nums[1:]:
        if value != nums[k - 1]:
            nums[k] = value
            k += 1
    return k


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the items not equal to val to the front, in order; return their count."""
    k = 0
    for value in list(nums):
        if value != val:
            nums[k] = value
            k += 1
    return k


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s by counting; anything else counts as 2."""
    zeros = sum(1 for value in nums if value == 0)
    ones = sum(1 for value in nums if value == 1)
    nums[:] = [0] * zeros + [1] * ones + [2] * (len(nums) - zeros - ones)


def merge_sorted(
    nums1: List[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Replace nums1 with the sorted merge of its first m and nums2's first n items."""
    nums1[:] = sorted([*nums1[:m], *nums2[:n]])


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate the list right by k steps."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = [*nums[len(nums) - k:], *nums[:len(nums) - k]]


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeros to the end while keeping the order of the other items."""
    left = 0
    for right, value in enumerate(nums):
        if value != 0:
            nums[left], nums[right] = nums[right], nums[left]
            left += 1


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    start, end = 0, len(chars) - 1
    while start < end:
        chars[start], chars[end] = chars[end], chars[start]
        start += 1
        end -= 1