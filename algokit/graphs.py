"""Shortest-path search on weighted directed graphs."""

from __future__ import annotations

import math
from collections.abc import Sequence


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest cost from src to dst with at most k stops, or -1."""
    if k < 0:
        raise ValueError("k must be non-negative")
    best = [math.inf] * n
    best[src] = 0
    for _ in range(k + 1):
        layer = [math.inf] * n
        layer[src] = 0
        for source, target, cost in flights:
            if best[source] != math.inf:
                layer[target] = min(layer[target], best[source] + cost)
        best = layer
    return -1 if best[dst] == math.inf else int(best[dst])