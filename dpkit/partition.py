"""Interval dynamic programming: matrix chains, palindrome cuts, boolean parenthesisation."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "matrix_chain_cost",
    "is_palindrome",
    "min_palindrome_cuts",
    "count_parenthesizations",
]

_OPERANDS = frozenset("TF")
_OPERATORS = frozenset("&|^")


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``i`` of the chain has shape ``dimensions[i - 1] x dimensions[i]``.
    """
    dims = tuple(dimensions)
    if len(dims) < 2:
        raise ValueError("a matrix chain needs at least two dimensions")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i >= j:
            return 0
        return min(
            cost(i, k) + dims[i - 1] * dims[k] * dims[j] + cost(k + 1, j)
            for k in range(i, j)
        )

    return cost(1, len(dims) - 1)


def is_palindrome(s: str) -> bool:
    """Whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def min_palindrome_cuts(s: str) -> int:
    """Fewest cuts that split ``s`` into pieces that are all palindromes."""

    @lru_cache(maxsize=None)
    def cuts(i: int, j: int) -> int:
        if i >= j or is_palindrome(s[i : j + 1]):
            return 0
        return min(cuts(i, k) + 1 + cuts(k + 1, j) for k in range(i, j))

    return cuts(0, len(s) - 1)


def _check_expression(expression: str) -> None:
    if not expression:
        return
    if len(expression) % 2 == 0:
        raise ValueError("expression must alternate operands and operators")
    for position, symbol in enumerate(expression):
        allowed = _OPERANDS if position % 2 == 0 else _OPERATORS
        if symbol not in allowed:
            raise ValueError(f"unexpected {symbol!r} at position {position}")


def count_parenthesizations(expression: str, value: bool = True) -> int:
    """Number of ways to parenthesise a T/F expression over &, | and ^ so it yields ``value``."""
    _check_expression(expression)
    if not expression:
        return 0

    @lru_cache(maxsize=None)
    def counts(i: int, j: int) -> tuple[int, int]:
        if i == j:
            return int(expression[i] == "T"), int(expression[i] == "F")
        true_ways = false_ways = 0
        for k in range(i + 1, j, 2):
            lt, lf = counts(i, k - 1)
            rt, rf = counts(k + 1, j)
            operator = expression[k]
            if operator == "&":
                true_ways += lt * rt
                false_ways += lf * rt + lf * rf + lt * rf
            elif operator == "|":
                true_ways += lt * rt + lt * rf + lf * rt
                false_ways += lf * rf
            else:
                true_ways += lt * rf + lf * rt
                false_ways += lt * rt + lf * rf
        return true_ways, false_ways

    true_ways, false_ways = counts(0, len(expression) - 1)
    return true_ways if value else false_ways