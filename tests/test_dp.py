import random

import pytest

from algokit.dp import (
    can_jump,
    coin_change,
    jump,
    jump_dp,
    max_profit_with_cooldown,
    minimum_total,
)


TRIANGLE = [[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]


def test_minimum_total_example():
    assert minimum_total(TRIANGLE) == 11


def test_minimum_total_single_row():
    assert minimum_total([[5]]) == 5


def test_minimum_total_shift_invariant():
    shifted = [[value + 10 for value in row] for row in TRIANGLE]
    assert minimum_total(shifted) == minimum_total(TRIANGLE) + 10 * len(TRIANGLE)


def test_minimum_total_empty_raises():
    with pytest.raises(ValueError):
        minimum_total([])


def test_max_profit_empty_and_single():
    assert max_profit_with_cooldown([]) == 0
    assert max_profit_with_cooldown([4]) == 0


def test_max_profit_falling_prices_gives_nothing():
    assert max_profit_with_cooldown([9, 7, 5, 3, 1]) == 0


@pytest.mark.parametrize("seed", range(20))
def test_max_profit_bounds(seed):
    rng = random.Random(seed)
    prices = [rng.randint(0, 20) for _ in range(rng.randint(2, 12))]
    best_single = max(
        max(prices[j] - prices[i] for i in range(len(prices)) for j in range(i, len(prices))),
        0,
    )
    unlimited = sum(max(b - a, 0) for a, b in zip(prices, prices[1:]))
    result = max_profit_with_cooldown(prices)
    assert best_single <= result <= unlimited


def test_coin_change_example():
    assert coin_change([1, 2, 5], 11) == 3


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_zero_amount():
    assert coin_change([1, 2], 0) == 0


def test_coin_change_single_coin_amounts():
    coins = [3, 7, 11]
    for coin in coins:
        assert coin_change(coins, coin) == 1


def test_coin_change_subadditive():
    coins = [1, 4, 6]
    for a in range(1, 15):
        for b in range(1, 15):
            assert coin_change(coins, a + b) <= coin_change(coins, a) + coin_change(coins, b)


def test_coin_change_rejects_bad_input():
    with pytest.raises(ValueError):
        coin_change([0, 1], 5)
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_jump_example():
    assert jump([2, 3, 1, 1, 4]) == 2
    assert jump_dp([2, 3, 1, 1, 4]) == 2


def test_jump_single_element():
    assert jump([0]) == 0
    assert jump_dp([0]) == 0


def test_jump_all_ones_walks_every_step():
    nums = [1] * 9
    assert jump(nums) == len(nums) - 1
    assert jump_dp(nums) == len(nums) - 1


@pytest.mark.parametrize("seed", range(30))
def test_jump_strategies_agree(seed):
    rng = random.Random(seed)
    nums = [rng.randint(1, 4) for _ in range(rng.randint(1, 15))]
    assert jump(nums) == jump_dp(nums)


def test_jump_dp_unreachable_raises():
    with pytest.raises(ValueError):
        jump_dp([3, 2, 1, 0, 4])


def test_jump_empty_raises():
    with pytest.raises(ValueError):
        jump([])


def test_can_jump_examples():
    assert can_jump([2, 3, 1, 1, 4]) is True
    assert can_jump([3, 2, 1, 0, 4]) is False
    assert can_jump([0]) is True


@pytest.mark.parametrize("seed", range(30))
def test_can_jump_agrees_with_jump_dp(seed):
    rng = random.Random(seed)
    nums = [rng.randint(0, 3) for _ in range(rng.randint(1, 12))]
    try:
        jump_dp(nums)
        reachable = True
    except ValueError:
        reachable = False
    assert can_jump(nums) is reachable


def test_can_jump_empty_raises():
    with pytest.raises(ValueError):
        can_jump([])