"""Subset-sum family of problems over lists of non-negative integers."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "subset_sum_exists",
    "can_partition_equally",
    "count_subsets_with_sum",
    "count_subset_pairs_with_difference",
    "target_sum_ways",
    "min_subset_sum_difference",
]


def _check(values: Sequence[int]) -> None:
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")


def _reachable(values: Sequence[int], limit: int) -> list[bool]:
    reachable = [True] + [False] * limit
    for value in values:
        for total in range(limit, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable


def subset_sum_exists(values: Sequence[int], target: int) -> bool:
    """Whether some subset of ``values`` adds up to ``target``."""
    _check(values)
    if target < 0:
        return False
    return _reachable(values, target)[target]


def can_partition_equally(values: Sequence[int]) -> bool:
    """Whether ``values`` splits into two subsets of equal sum."""
    _check(values)
    total = sum(values)
    if total % 2:
        return False
    return subset_sum_exists(values, total // 2)


def count_subsets_with_sum(values: Sequence[int], target: int) -> int:
    """Number of subsets (by position) of ``values`` that add up to ``target``."""
    _check(values)
    if target < 0:
        return 0
    counts = [1] + [0] * target
    for value in values:
        for total in range(target, value - 1, -1):
            counts[total] += counts[total - value]
    return counts[target]


def count_subset_pairs_with_difference(values: Sequence[int], difference: int) -> int:
    """Number of ways to split ``values`` into two subsets whose sums differ by ``difference``."""
    _check(values)
    twice_smaller = sum(values) - difference
    if twice_smaller < 0 or twice_smaller % 2:
        return 0
    return count_subsets_with_sum(values, twice_smaller // 2)


def target_sum_ways(values: Sequence[int], target: int) -> int:
    """Number of ways to sign each value with + or - so that the total is ``target``."""
    return count_subset_pairs_with_difference(values, target)


def min_subset_sum_difference(values: Sequence[int]) -> int:
    """Smallest possible difference between the sums of a two-way split of ``values``."""
    _check(values)
    total = sum(values)
    reachable = _reachable(values, total // 2)
    best = max(total for total, ok in enumerate(reachable) if ok)
    return total - 2 * best