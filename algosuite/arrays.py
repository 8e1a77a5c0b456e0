"""Queries over integer sequences that leave their input untouched."""

from __future__ import annotations

import math
from functools import cmp_to_key, reduce
from itertools import combinations
from operator import xor
from typing import List, Optional, Sequence, Tuple


def two_sum(nums: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Return the first index pair (i, j), i < j, whose values sum to target.

    Pairs are tried in order of i, then j. Returns None when no pair exists.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    total = n1 + n2
    if total == 0:
        raise ValueError("median of two empty sequences is undefined")
    half = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        mid1 = (low + high) // 2
        mid2 = half - mid1
        l1 = nums1[mid1 - 1] if mid1 > 0 else -math.inf
        l2 = nums2[mid2 - 1] if mid2 > 0 else -math.inf
        r1 = nums1[mid1] if mid1 < n1 else math.inf
        r2 = nums2[mid2] if mid2 < n2 else math.inf
        if l1 <= r2 and l2 <= r1:
            if total % 2:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2
        if l1 > r2:
            high = mid1 - 1
        else:
            low = mid1 + 1
    raise ValueError("inputs must be sorted")


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of target, or -1."""
    return next((i for i, value in enumerate(nums) if value == target), -1)


def search_range(nums: Sequence[int], target: int) -> List[int]:
    """Return [first, last] indices of target, with -1 for each when absent."""
    first = search(nums, target)
    if first == -1:
        return [-1, -1]
    last = next(i for i in reversed(range(len(nums))) if nums[i] == target)
    return [first, last]


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("sequence must not be empty")
    best = -math.inf
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return int(best)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell."""
    if not prices:
        return 0
    lowest = prices[0]
    profit = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def _concat_order(a: str, b: str) -> int:
    return (b + a > a + b) - (a + b > b + a)


def largest_number(nums: Sequence[int]) -> str:
    """Arrange the numbers so their concatenation is the largest possible."""
    if not nums:
        raise ValueError("sequence must not be empty")
    parts = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    if parts[0] == "0":
        return "0"
    return "".join(parts)


def missing_number(nums: Sequence[int]) -> int:
    """Return the value from 0..len(nums) that does not occur in nums."""
    return reduce(xor, nums, 0) ^ reduce(xor, range(len(nums) + 1), 0)


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = current = 0
    for value in nums:
        if value == 1:
            current += 1
        else:
            best = max(best, current)
            current = 0
    return max(best, current)


def max_distance(arrays: Sequence[Sequence[int]]) -> int:
    """Return the largest |a - b| with a and b taken from different sorted arrays."""
    if not arrays or any(not array for array in arrays):
        raise ValueError("need non-empty arrays")
    lowest, highest = arrays[0][0], arrays[0][-1]
    best = 0
    for array in arrays[1:]:
        first, last = array[0], array[-1]
        best = max(best, abs(last - lowest), abs(highest - first))
        lowest = min(lowest, first)
        highest = max(highest, last)
    return best


def can_be_equal(target: Sequence[int], arr: Sequence[int]) -> bool:
    """Tell whether arr can be turned into target by reversing subarrays."""
    return sorted(target) == sorted(arr)


def min_swaps(nums: Sequence[int]) -> int:
    """Return the fewest swaps that gather all 1s of a circular array together."""
    n = len(nums)
    ones = sum(1 for value in nums if value == 1)
    if ones == 0:
        return 0
    zeros = sum(1 for value in nums[:ones] if value == 0)
    best = min(ones, zeros)
    for i in range(ones, 2 * n):
        zeros += (nums[i % n] == 0) - (nums[(i - ones) % n] == 0)
        best = min(best, zeros)
    return best