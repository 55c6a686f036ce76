"""Recursive generators of strings: binary strings, brackets, case variants, subsequences."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product

__all__ = [
    "prefix_dominant_binary_strings",
    "balanced_parentheses",
    "case_permutations",
    "letter_case_permutations",
    "subsequences",
    "unique_subsequences",
]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("size must not be negative")


def prefix_dominant_binary_strings(n: int) -> Iterator[str]:
    """Binary strings of length ``n`` in which no prefix has more 0s than 1s."""
    _check_size(n)

    def build(prefix: str, remaining: int, ones: int, zeros: int) -> Iterator[str]:
        if remaining == 0:
            yield prefix
            return
        yield from build(prefix + "1", remaining - 1, ones + 1, zeros)
        if ones > zeros:
            yield from build(prefix + "0", remaining - 1, ones, zeros + 1)

    return build("", n, 0, 0)


def balanced_parentheses(n: int) -> Iterator[str]:
    """Every well-formed string of ``n`` pairs of parentheses, '(' tried before ')'."""
    _check_size(n)

    def build(prefix: str, open_left: int, close_left: int) -> Iterator[str]:
        if open_left == 0 and close_left == 0:
            yield prefix
            return
        if open_left:
            yield from build(prefix + "(", open_left - 1, close_left)
        if close_left > open_left:
            yield from build(prefix + ")", open_left, close_left - 1)

    return build("", n, n)


def case_permutations(s: str) -> Iterator[str]:
    """Every string made by keeping or swapping the case of each character.

    Characters without case give the same choice twice, so results may repeat.
    """
    for choice in product(*((c, c.swapcase()) for c in s)):
        yield "".join(choice)


def letter_case_permutations(s: str) -> Iterator[str]:
    """Case variants of ``s`` where decimal digits are kept once rather than doubled."""
    options = ((c,) if "0" <= c <= "9" else (c, c.swapcase()) for c in s)
    for choice in product(*options):
        yield "".join(choice)


def subsequences(s: str) -> Iterator[str]:
    """All ``2 ** len(s)`` subsequences of ``s``, each character left out before kept."""
    for choice in product(*(("", c) for c in s)):
        yield "".join(choice)


def unique_subsequences(s: str) -> list[str]:
    """Distinct subsequences of ``s`` in sorted order."""
    return sorted(set(subsequences(s)))