"""Priority-queue algorithms: smallest pair sums and capital maximisation."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def k_smallest_pairs(nums1: Sequence[int], nums2: Sequence[int], k: int) -> list[list[int]]:
    """Return the k pairs [a, b] with the smallest sums from two sorted sequences."""
    if not nums1 or not nums2 or k <= 0:
        return []
    heap = [(a + nums2[0], i, 0) for i, a in enumerate(nums1)]
    heapq.heapify(heap)
    pairs: list[list[int]] = []
    while heap and len(pairs) < k:
        _, i, j = heapq.heappop(heap)
        pairs.append([nums1[i], nums2[j]])
        if j + 1 < len(nums2):
            heapq.heappush(heap, (nums1[i] + nums2[j + 1], i, j + 1))
    return pairs


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Return the capital after finishing at most k affordable projects greedily."""
    if len(profits) != len(capital):
        raise ValueError("profits and capital must have the same length")
    projects = sorted(zip(capital, profits))
    available: list[int] = []
    index = 0
    for _ in range(k):
        while index < len(projects) and projects[index][0] <= w:
            heapq.heappush(available, -projects[index][1])
            index += 1
        if not available:
            break
        w -= heapq.heappop(available)
    return w