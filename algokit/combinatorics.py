"""Enumeration of bracket strings, permutations and combinations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import combinations


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of n bracket pairs, in ascending order."""
    if n < 0:
        raise ValueError("n must be non-negative")

    def build(prefix: str, to_open: int, depth: int) -> Iterator[str]:
        if len(prefix) == 2 * n:
            yield prefix
            return
        if to_open:
            yield from build(prefix + "(", to_open - 1, depth + 1)
        if depth:
            yield from build(prefix + ")", to_open, depth - 1)

    return list(build("", n, 0))


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ordering of nums."""
    counts = Counter(nums)
    size = len(nums)
    current: list[int] = []

    def build() -> Iterator[list[int]]:
        if len(current) == size:
            yield list(current)
            return
        for value, left in counts.items():
            if left:
                counts[value] -= 1
                current.append(value)
                yield from build()
                current.pop()
                counts[value] += 1

    return list(build())


def combine(n: int, k: int) -> list[list[int]]:
    """Return every k-element subset of 1..n in lexicographic order."""
    if k < 0:
        raise ValueError("k must be non-negative")
    return [list(combo) for combo in combinations(range(1, n + 1), k)]