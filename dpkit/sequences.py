"""Longest-common-subsequence based string problems."""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

__all__ = [
    "EditOperations",
    "lcs_length",
    "lcs_length_recursive",
    "longest_common_subsequence",
    "longest_common_substring_length",
    "shortest_supersequence_length",
    "shortest_supersequence",
    "edit_operations",
    "longest_palindromic_subsequence_length",
    "min_deletions_to_palindrome",
    "min_insertions_to_palindrome",
    "is_subsequence",
    "longest_repeating_subsequence_length",
]


class EditOperations(NamedTuple):
    """Deletions and insertions needed to turn one string into another."""

    deletions: int
    insertions: int


def _lcs_table(x: str, y: str) -> list[list[int]]:
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, a in enumerate(x, 1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(y, 1):
            if a == b:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def lcs_length(x: str, y: str) -> int:
    """Length of the longest common subsequence of ``x`` and ``y``."""
    return _lcs_table(x, y)[len(x)][len(y)]


def lcs_length_recursive(x: str, y: str) -> int:
    """Length of the longest common subsequence, by memoised recursion on prefixes."""

    @lru_cache(maxsize=None)
    def solve(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return 0
        if x[i - 1] == y[j - 1]:
            return 1 + solve(i - 1, j - 1)
        return max(solve(i - 1, j), solve(i, j - 1))

    return solve(len(x), len(y))


def longest_common_subsequence(x: str, y: str) -> str:
    """One longest common subsequence of ``x`` and ``y``."""
    table = _lcs_table(x, y)
    i, j = len(x), len(y)
    picked: list[str] = []
    while i and j:
        if x[i - 1] == y[j - 1]:
            picked.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def longest_common_substring_length(x: str, y: str) -> int:
    """Length of the longest contiguous run shared by ``x`` and ``y``."""
    best = 0
    previous = [0] * (len(y) + 1)
    for a in x:
        current = [0] * (len(y) + 1)
        for j, b in enumerate(y, 1):
            if a == b:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def shortest_supersequence_length(x: str, y: str) -> int:
    """Length of the shortest string having both ``x`` and ``y`` as subsequences."""
    return len(x) + len(y) - lcs_length(x, y)


def shortest_supersequence(x: str, y: str) -> str:
    """One shortest string having both ``x`` and ``y`` as subsequences."""
    table = _lcs_table(x, y)
    i, j = len(x), len(y)
    built: list[str] = []
    while i and j:
        if x[i - 1] == y[j - 1]:
            built.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            built.append(x[i - 1])
            i -= 1
        else:
            built.append(y[j - 1])
            j -= 1
    built.extend(reversed(x[:i]))
    built.extend(reversed(y[:j]))
    return "".join(reversed(built))


def edit_operations(source: str, target: str) -> EditOperations:
    """Fewest deletions and insertions that turn ``source`` into ``target``."""
    common = lcs_length(source, target)
    return EditOperations(len(source) - common, len(target) - common)


def longest_palindromic_subsequence_length(s: str) -> int:
    """Length of the longest subsequence of ``s`` that reads the same both ways."""
    return lcs_length(s, s[::-1])


def min_deletions_to_palindrome(s: str) -> int:
    """Fewest characters to delete from ``s`` to leave a palindrome."""
    return len(s) - longest_palindromic_subsequence_length(s)


def min_insertions_to_palindrome(s: str) -> int:
    """Fewest characters to insert into ``s`` to make a palindrome."""
    return len(s) - longest_palindromic_subsequence_length(s)


def is_subsequence(pattern: str, text: str) -> bool:
    """Whether ``pattern`` occurs in ``text`` as a subsequence."""
    return lcs_length(pattern, text) == len(pattern)


def longest_repeating_subsequence_length(s: str) -> int:
    """Length of the longest subsequence occurring twice in ``s`` at distinct positions."""
    n = len(s)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if s[i - 1] == s[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table[n][n]