"""Knapsack-style optimisation problems solved with dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from math import inf

__all__ = [
    "knapsack",
    "knapsack_recursive",
    "unbounded_knapsack",
    "rod_cutting",
    "coin_change_ways",
    "min_coins",
]


def _check_items(weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")


def _check_coins(coins: Sequence[int], amount: int) -> None:
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items that fit in ``capacity``, each item used at most once."""
    _check_items(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def knapsack_recursive(
    weights: Sequence[int],
    values: Sequence[int],
    capacity: int,
    memoize: bool = True,
) -> int:
    """0/1 knapsack by recursion over the last item, optionally memoised."""
    _check_items(weights, values, capacity)

    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        skip = best(count - 1, room)
        if weight <= room:
            return max(value + best(count - 1, room - weight), skip)
        return skip

    if memoize:
        best = lru_cache(maxsize=None)(best)
    return best(len(weights), capacity)


def unbounded_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items that fit in ``capacity``, each item usable any number of times."""
    _check_items(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def rod_cutting(lengths: Sequence[int], prices: Sequence[int], rod_length: int) -> int:
    """Highest price obtainable by cutting a rod into pieces of the given lengths."""
    return unbounded_knapsack(lengths, prices, rod_length)


def coin_change_ways(coins: Sequence[int], amount: int) -> int:
    """Number of coin combinations (order ignored) that add up to ``amount``."""
    _check_coins(coins, amount)
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_coins(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins adding up to ``amount``, or ``None`` when it cannot be made."""
    _check_coins(coins, amount)
    fewest: list[float] = [0] + [inf] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    result = fewest[amount]
    return None if result == inf else int(result)