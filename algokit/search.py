"""Searching: peaks, ranges, sorted matrices and order statistics."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Sequence
from operator import itemgetter


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its right neighbour and not smaller than its left."""
    lo, hi = 0, len(nums)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if mid == len(nums) - 1 or nums[mid] > nums[mid + 1]:
            hi = mid
        else:
            lo = mid + 1
    return lo


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of target in sorted nums, or [-1, -1]."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if target occurs in a row-wise sorted matrix whose rows follow each other."""
    if not matrix:
        return False
    row_index = max(0, bisect_right(matrix, target, key=itemgetter(0)) - 1)
    row = matrix[row_index]
    if not row:
        return False
    col = min(len(row) - 1, bisect_left(row, target))
    return row[col] == target


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest element, counting duplicates, by counting sort."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of elements")
    counts = Counter(nums)
    remain = k
    for value in range(max(counts), min(counts) - 1, -1):
        remain -= counts[value]
        if remain <= 0:
            return value
    raise RuntimeError("counts do not cover k elements")