"""Array puzzles: stock prices, selection, permutations and scanning."""

from __future__ import annotations

import heapq
import operator
import random
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, count, pairwise


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    return next(candidate for candidate in count(1) if candidate not in present)


def kth_largest(nums: Sequence[int], k: int) -> int:
    """The ``k``-th largest value (1-based) found by randomised selection."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return _select(list(nums), len(nums) - k)


def _select(values: list[int], index: int) -> int:
    """Return the value that would sit at ``index`` if ``values`` were sorted."""
    while True:
        pivot = random.choice(values)
        lower = [value for value in values if value < pivot]
        if index < len(lower):
            values = lower
            continue
        equal = sum(1 for value in values if value == pivot)
        if index < len(lower) + equal:
            return pivot
        index -= len(lower) + equal
        values = [value for value in values if value > pivot]


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    bucket = set(nums)
    longest = 0
    for start in bucket:
        if start - 1 in bucket:
            continue
        end = start
        while end in bucket:
            end += 1
        longest = max(longest, end - start)
    return longest


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore vote: the element occurring more than half the time."""
    if not nums:
        raise ValueError("nums must not be empty")
    elected = nums[0]
    votes = 0
    for num in nums:
        if votes == 0:
            elected = num
        votes += 1 if num == elected else -1
    return elected


def majority_element_dnc(nums: Sequence[int]) -> int:
    """Majority element found by divide and conquer."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidates = _majority_candidates(nums, 0, len(nums) - 1)
    if not candidates:
        raise ValueError("nums has no majority element")
    return candidates[0]


def _majority_candidates(nums: Sequence[int], lo: int, hi: int) -> list[int]:
    if lo == hi:
        return [nums[lo]]
    mid = lo + (hi - lo) // 2
    left = _majority_candidates(nums, lo, mid)
    right = _majority_candidates(nums, mid + 1, hi)
    right_set = set(right)
    merged = [value for value in left if value not in right_set] + right
    window = list(nums[lo : hi + 1])
    half = len(window) // 2
    return [value for value in merged if window.count(value) > half]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("sizes do not fit the given lists")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its lexicographically next permutation."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(
        i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot]
    )
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[: pivot : -1]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], operator.mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def single_number(nums: Sequence[int]) -> int:
    """The one value that appears an odd number of times when all others pair up."""
    return reduce(operator.xor, nums, 0)


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left, right = 0, len(height) - 1
    left_max = right_max = total = 0
    while left < right:
        left_max = max(left_max, height[left])
        right_max = max(right_max, height[right])
        if height[left] < height[right]:
            total += left_max - height[left]
            left += 1
        else:
            total += right_max - height[right]
            right -= 1
    return total


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two elements that add up to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None