import random
from collections import Counter

import pytest

from algokit.heaps import find_maximized_capital, k_smallest_pairs


def test_k_smallest_pairs_example():
    assert k_smallest_pairs([1, 7, 11], [2, 4, 6], 3) == [[1, 2], [1, 4], [1, 6]]


def test_k_smallest_pairs_empty_inputs():
    assert k_smallest_pairs([], [1, 2], 3) == []
    assert k_smallest_pairs([1, 2], [], 3) == []
    assert k_smallest_pairs([1, 2], [3], 0) == []


@pytest.mark.parametrize("seed", range(20))
def test_k_smallest_pairs_invariants(seed):
    rng = random.Random(seed)
    nums1 = sorted(rng.randint(-10, 10) for _ in range(rng.randint(1, 6)))
    nums2 = sorted(rng.randint(-10, 10) for _ in range(rng.randint(1, 6)))
    k = rng.randint(1, 40)
    result = k_smallest_pairs(nums1, nums2, k)
    assert len(result) == min(k, len(nums1) * len(nums2))
    sums = [a + b for a, b in result]
    assert sums == sorted(sums)
    all_sums = sorted(a + b for a in nums1 for b in nums2)
    assert sums == all_sums[: len(result)]
    available = Counter((a, b) for a in nums1 for b in nums2)
    used = Counter((a, b) for a, b in result)
    assert all(used[pair] <= available[pair] for pair in used)


def test_capital_example():
    assert find_maximized_capital(2, 0, [1, 2, 3], [0, 1, 1]) == 4


def test_capital_nothing_affordable():
    assert find_maximized_capital(1, 0, [5], [1]) == 0


def test_capital_zero_projects_allowed():
    assert find_maximized_capital(0, 7, [5, 9], [0, 0]) == 7


def test_capital_all_free_takes_best_k():
    profits = [4, 9, 1, 7, 3]
    assert find_maximized_capital(3, 2, profits, [0] * len(profits)) == 2 + sum(
        sorted(profits, reverse=True)[:3]
    )


@pytest.mark.parametrize("seed", range(20))
def test_capital_bounds(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 8)
    profits = [rng.randint(0, 10) for _ in range(n)]
    capital = [rng.randint(0, 15) for _ in range(n)]
    k = rng.randint(0, n)
    w = rng.randint(0, 5)
    result = find_maximized_capital(k, w, profits, capital)
    assert w <= result <= w + sum(sorted(profits, reverse=True)[:k])


def test_capital_length_mismatch_raises():
    with pytest.raises(ValueError):
        find_maximized_capital(1, 0, [1, 2], [0])