"""Array algorithms: containers, rain water, products, windows and patterns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate
from operator import mul


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area between two lines, using two pointers."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] <= height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_area_sorted(height: Sequence[int]) -> int:
    """Return the largest water area between two lines by scanning heights from tallest down."""
    span: dict[int, tuple[int, int]] = {}
    for index, value in enumerate(height):
        first = span.get(value, (index, index))[0]
        span[value] = (first, index)

    best = 0
    left, right = len(height), -1
    for value in sorted(span, reverse=True):
        first, last = span[value]
        left = min(left, first)
        right = max(right, last)
        best = max(best, (right - left) * value)
    return best


def trap(height: Sequence[int]) -> int:
    """Return the amount of rain water held between the bars."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(map(min, left_max, right_max)) - sum(height)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements."""
    values = list(nums)
    if len(values) < 2:
        raise ValueError("at least two numbers are required")
    prefix = list(accumulate(values[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(values[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that higher-rated neighbours get more."""
    n = len(ratings)
    candies = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)


def minimize_array_value(nums: Sequence[int]) -> int:
    """Return the smallest possible maximum after shifting value leftwards.

    The values are expected to be non-negative.
    """
    best = 0
    for count, total in enumerate(accumulate(nums), start=1):
        best = max(best, -(-total // count))
    return best


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of positive numbers summing to at least target, or 0."""
    if target <= 0:
        raise ValueError("target must be positive")
    best = math.inf
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            best = min(best, right - left + 1)
            total -= nums[left]
            left += 1
    return 0 if best == math.inf else int(best)


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Return True if some i < j < k has nums[i] < nums[k] < nums[j]."""
    prefix_min = [math.inf, *accumulate(nums, min)]
    stack: list[float] = [math.inf]
    for i in range(len(nums) - 1, 0, -1):
        while stack[-1] <= prefix_min[i]:
            stack.pop()
        if nums[i] > stack[-1]:
            return True
        stack.append(nums[i])
    return False