"""Longest common subsequence, by plain recursion and with memoisation."""

from __future__ import annotations

from functools import lru_cache


def lcs_brute(s1: str, s2: str) -> int:
    """Length of the longest common subsequence by exhaustive recursion.

    Exponential time; meant for short inputs.
    """

    def solve(i: int, j: int) -> int:
        if i < 0 or j < 0:
            return 0
        if s1[i] == s2[j]:
            return 1 + solve(i - 1, j - 1)
        return max(solve(i - 1, j), solve(i, j - 1))

    return solve(len(s1) - 1, len(s2) - 1)


def lcs_memo(s1: str, s2: str) -> int:
    """Length of the longest common subsequence by memoised recursion."""

    @lru_cache(maxsize=None)
    def solve(i: int, j: int) -> int:
        if i < 0 or j < 0:
            return 0
        if s1[i] == s2[j]:
            return 1 + solve(i - 1, j - 1)
        return max(solve(i - 1, j), solve(i, j - 1))

    return solve(len(s1) - 1, len(s2) - 1)