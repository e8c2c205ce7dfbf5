"""Array puzzles: profits, duplicates, leaders, missing values and more."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import accumulate, combinations
from operator import xor
from typing import Sequence


def max_profit_naive(prices: Sequence[int]) -> int:
    """Best profit from one buy and a later sell, trying every pair."""
    return max((sell - buy for buy, sell in combinations(prices, 2)), default=0) if prices else 0


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy and a later sell, in a single pass."""
    if not prices:
        return 0
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def _check_duplicate_input(values: Sequence[int]) -> None:
    n = len(values)
    if n < 2 or any(not 1 <= v < n for v in values):
        raise ValueError("values must hold at least two items, each in 1..len(values)-1")


def find_duplicate_sorted(values: Sequence[int]) -> int:
    """Find a repeated value by sorting and scanning neighbours."""
    ordered = sorted(values)
    for a, b in zip(ordered, ordered[1:]):
        if a == b:
            return a
    raise ValueError("no duplicate value")


def find_duplicate_counting(values: Sequence[int]) -> int:
    """Find the smallest repeated value from a frequency count."""
    repeated = [value for value, count in Counter(values).items() if count > 1]
    if not repeated:
        raise ValueError("no duplicate value")
    return min(repeated)


def find_duplicate(values: Sequence[int]) -> int:
    """Find the repeated value with Floyd's cycle detection.

    Every value must lie in 1..len(values)-1.
    """
    _check_duplicate_input(values)
    slow = fast = values[0]
    while True:
        slow = values[slow]
        fast = values[values[fast]]
        if slow == fast:
            break
    fast = values[0]
    while slow != fast:
        slow = values[slow]
        fast = values[fast]
    return slow


def leaders_naive(values: Sequence[int]) -> list[int]:
    """Values with nothing strictly greater to their right, left to right."""
    return [v for i, v in enumerate(values) if all(v >= later for later in values[i + 1:])]


def leaders(values: Sequence[int]) -> list[int]:
    """Values greater than everything to their right, reported right to left."""
    if not values:
        return []
    highest = values[-1]
    found = [highest]
    for v in reversed(values[:-1]):
        if v > highest:
            found.append(v)
            highest = v
    return found


def missing_number_counting(values: Sequence[int]) -> int:
    """The value of 1..len(values)+1 absent from ``values``, by counting."""
    present = set(values)
    for candidate in range(1, len(values) + 2):
        if candidate not in present:
            return candidate
    raise ValueError("no value is missing")


def missing_number_sum(values: Sequence[int]) -> int:
    """The value of 1..len(values)+1 absent from ``values``, by summation."""
    n = len(values)
    return (n + 1) * (n + 2) // 2 - sum(values)


def missing_number_xor(values: Sequence[int]) -> int:
    """The value of 1..len(values)+1 absent from ``values``, by XOR."""
    return reduce(xor, values, 0) ^ reduce(xor, range(1, len(values) + 2), 0)


def reverse_in_groups(values: Sequence[int], k: int) -> list[int]:
    """Reverse each consecutive group of ``k`` items."""
    if k <= 0:
        raise ValueError("group size must be positive")
    items = list(values)
    return [x for start in range(0, len(items), k) for x in reversed(items[start:start + k])]


def _check_colors(values: Sequence[int]) -> None:
    for v in values:
        if v not in (0, 1, 2):
            raise ValueError(f"value {v!r} is not 0, 1 or 2")


def sort_colors_counting(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting each."""
    _check_colors(values)
    counts = Counter(values)
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def sort_colors(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s with the Dutch national flag partition."""
    result = list(values)
    low = mid = 0
    high = len(result) - 1
    while mid <= high:
        v = result[mid]
        if v == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif v == 1:
            mid += 1
        elif v == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            raise ValueError(f"value {v!r} is not 0, 1 or 2")
    return result


def trapped_water_naive(heights: Sequence[int]) -> int:
    """Rain water held between bars, scanning both sides of every bar."""
    total = 0
    for i, h in enumerate(heights):
        left = max(heights[:i + 1])
        right = max(heights[i:])
        total += abs(h - min(left, right))
    return total


def trapped_water_prefix(heights: Sequence[int]) -> int:
    """Rain water held between bars, using prefix and suffix maxima."""
    if not heights:
        return 0
    left = accumulate(heights, max)
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(min(l, r) - h for l, r, h in zip(left, right, heights))


def trapped_water(heights: Sequence[int]) -> int:
    """Rain water held between bars, with two converging pointers."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    total = 0
    while left <= right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                total += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                total += right_max - heights[right]
            right -= 1
    return total


def single_number(values: Sequence[int]) -> int:
    """The one value not paired with an equal one; 0 for an empty sequence."""
    return reduce(xor, values, 0)