"""Dynamic programming: 0/1 knapsack, equal partition and subset sum."""

from __future__ import annotations

from typing import Sequence


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Largest total value of items whose total weight fits in ``capacity``."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def has_subset_sum(values: Sequence[int], total: int) -> bool:
    """Whether some subset of the non-negative ``values`` adds up to ``total``."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    reachable = [True] + [False] * total
    for value in values:
        for amount in range(total, value - 1, -1):
            if reachable[amount - value]:
                reachable[amount] = True
    return reachable[total]


def can_partition(values: Sequence[int]) -> bool:
    """Whether ``values`` splits into two groups with equal sums."""
    total = sum(values)
    if total % 2:
        return False
    return has_subset_sum(values, total // 2)