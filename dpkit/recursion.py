"""Classic recursion exercises: factorial, Hanoi, tree height, Josephus and more."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from functools import lru_cache

__all__ = [
    "Node",
    "factorial",
    "hanoi_moves",
    "tree_height",
    "josephus_survivor",
    "kth_symbol",
    "count_up",
    "first_player_can_win",
]


@dataclass
class Node:
    """Binary tree node."""

    key: int
    left: Node | None = None
    right: Node | None = None


def factorial(n: int) -> int:
    """``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def hanoi_moves(
    n: int, source: int = 1, target: int = 2, spare: int = 3
) -> Iterator[tuple[int, int]]:
    """Moves ``(from_peg, to_peg)`` that carry ``n`` plates from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("number of plates must not be negative")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, source, spare, target)
    yield (source, target)
    yield from hanoi_moves(n - 1, spare, target, source)


def tree_height(node: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if node is None:
        return 0
    return 1 + max(tree_height(node.left), tree_height(node.right))


def josephus_survivor(n: int, k: int) -> int:
    """Last person standing when every ``k``-th of ``1..n`` in a circle is removed."""
    if n < 1:
        raise ValueError("there must be at least one person")
    if k < 1:
        raise ValueError("step must be positive")
    people = list(range(1, n + 1))
    position = 0
    while len(people) > 1:
        position = (position + k - 1) % len(people)
        del people[position]
    return people[0]


def kth_symbol(n: int, k: int) -> int:
    """The ``k``-th symbol (1-based) of row ``n`` in the grammar 0 -> 01, 1 -> 10."""
    if n < 1:
        raise ValueError("row must be at least 1")
    if not 1 <= k <= 2 ** (n - 1):
        raise ValueError(f"position must be in 1..{2 ** (n - 1)}")
    return bin(k - 1).count("1") % 2


def count_up(n: int) -> Iterator[int]:
    """The numbers ``1`` to ``n`` in increasing order."""
    if n < 0:
        raise ValueError("n must not be negative")
    yield from range(1, n + 1)


def first_player_can_win(values: Sequence[int]) -> bool:
    """Whether some sequence of picks lets the first player end with at least the second's total.

    Players alternately take a value from either end of ``values``; every
    choice of both players is considered.
    """
    items = tuple(values)
    size = len(items)

    @lru_cache(maxsize=None)
    def reachable(lo: int, hi: int, lead: int) -> bool:
        if lo > hi:
            return lead >= 0
        first_turn = (size - (hi - lo + 1)) % 2 == 0
        sign = 1 if first_turn else -1
        return reachable(lo + 1, hi, lead + sign * items[lo]) or reachable(
            lo, hi - 1, lead + sign * items[hi]
        )

    return reachable(0, size - 1, 0)