"""Dynamic programming and greedy solutions over sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a number triangle."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    row = list(triangle[-1])
    for level in reversed(triangle[:-1]):
        row = [value + min(a, b) for value, a, b in zip(level, row, row[1:])]
    return row[0]


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Return the best trading profit when every sale forces a one-day rest."""
    if not prices:
        return 0
    hold, buy, sell = 0, -prices[0], 0
    for price in prices[1:]:
        hold, buy, sell = max(hold, sell), max(buy, hold - price), buy + price
    return max(hold, sell)


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to amount, or -1 if none do."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    fewest: list[int | None] = [0] + [None] * amount
    for total in range(1, amount + 1):
        options = [
            fewest[total - coin]
            for coin in coins
            if coin <= total and fewest[total - coin] is not None
        ]
        fewest[total] = min(options) + 1 if options else None
    result = fewest[amount]
    return -1 if result is None else result


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps to reach the last index, assuming it is reachable."""
    if not nums:
        raise ValueError("nums must not be empty")
    jumps = 0
    remaining = 0
    farthest = 0
    for index, step in enumerate(nums[:-1]):
        farthest = max(farthest, index + step)
        if remaining == 0:
            jumps += 1
            remaining = farthest - index
        remaining -= 1
    return jumps


def jump_dp(nums: Sequence[int]) -> int:
    """Return the fewest jumps to reach the last index, computed backwards.

    Raises ValueError when the last index cannot be reached.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    steps = [math.inf] * n
    steps[-1] = 0
    for index in range(n - 2, -1, -1):
        reachable = steps[index + 1 : index + nums[index] + 1]
        steps[index] = min(reachable, default=math.inf) + 1
    if steps[0] == math.inf:
        raise ValueError("the last index is unreachable")
    return int(steps[0])


def can_jump(nums: Sequence[int]) -> bool:
    """Return True if the last index can be reached from the first."""
    if not nums:
        raise ValueError("nums must not be empty")
    reach = 0
    for step in nums[:-1]:
        reach = max(reach, step)
        if reach <= 0:
            return False
        reach -= 1
    return True