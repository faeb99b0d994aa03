"""Dynamic programming over grids, bitmasks, digits and strings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache

MOD = 10**9 + 7

_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def find_paths(m: int, n: int, max_move: int, start_row: int, start_column: int) -> int:
    """Count move sequences of at most ``max_move`` steps that leave an ``m`` x ``n`` board.

    The count is taken modulo ``MOD``. A start outside the board counts as one path.
    """

    @lru_cache(maxsize=None)
    def count(r: int, c: int, moves: int) -> int:
        if not (0 <= r < m and 0 <= c < n):
            return 1
        if moves == max_move:
            return 0
        return sum(count(r + dr, c + dc, moves + 1) for dr, dc in _DIRECTIONS) % MOD

    return count(start_row, start_column, 0)


def max_coins(nums: Sequence[int]) -> int:
    """Maximum coins from bursting every balloon (burst-balloons problem).

    Bursting balloon ``i`` earns the product of its value and its nearest
    remaining neighbours, with missing neighbours counting as 1.
    """
    k = len(nums)
    if k == 0:
        return 0

    def nearest(mask: int, indices: Iterable[int]) -> int:
        return next((nums[j] for j in indices if mask >> j & 1), 1)

    @lru_cache(maxsize=None)
    def solve(mask: int) -> int:
        if mask == 0:
            return 0
        best = 0
        for i, value in enumerate(nums):
            if not mask >> i & 1:
                continue
            left = nearest(mask, range(i - 1, -1, -1))
            right = nearest(mask, range(i + 1, k))
            best = max(best, value * left * right + solve(mask ^ (1 << i)))
        return best

    return solve((1 << k) - 1)


def find_integers(n: int) -> int:
    """Count the integers in ``[0, n]`` whose binary form has no two adjacent ones."""
    bits = [int(b) for b in bin(n)[2:]] if n > 0 else []
    length = len(bits)

    @lru_cache(maxsize=None)
    def solve(i: int, tight: bool, prev_one: bool) -> int:
        if i == length:
            return 1
        limit = bits[i] if tight else 1
        total = 0
        for digit in range(limit + 1):
            if digit == 1 and prev_one:
                continue
            total += solve(i + 1, tight and digit == limit, digit == 1)
        return total

    return solve(0, True, False)


def min_distance(word1: str, word2: str) -> int:
    """Minimum number of insertions, deletions and replacements turning ``word1`` into ``word2``."""
    previous = list(range(len(word1) + 1))
    for j, b in enumerate(word2, 1):
        current = [j]
        for i, a in enumerate(word1, 1):
            current.append(
                min(previous[i - 1] + (a != b), previous[i] + 1, current[i - 1] + 1)
            )
        previous = current
    return previous[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from the top-left to the bottom-right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("min_path_sum requires a non-empty grid")
    rows, cols = len(grid), len(grid[0])
    below = [math.inf] * (cols + 1)
    for r in reversed(range(rows)):
        row = [math.inf] * (cols + 1)
        for c in reversed(range(cols)):
            if r == rows - 1 and c == cols - 1:
                row[c] = grid[r][c]
            else:
                row[c] = min(below[c], row[c + 1]) + grid[r][c]
        below = row
    return int(below[0])


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Whether ``s`` can be split into a sequence of words from ``word_dict``."""
    words = set(word_dict)
    longest = max((len(w) for w in words), default=0)
    n = len(s)
    can_finish = [False] * n + [True]
    for start in reversed(range(n)):
        can_finish[start] = any(
            s[start:end] in words and can_finish[end]
            for end in range(start + 1, min(n, start + longest) + 1)
        )
    return can_finish[0]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths from the top-left to the bottom-right avoiding cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("unique_paths_with_obstacles requires a non-empty grid")
    rows, cols = len(grid), len(grid[0])
    below = [0] * (cols + 1)
    for r in reversed(range(rows)):
        row = [0] * (cols + 1)
        for c in reversed(range(cols)):
            if grid[r][c] == 1:
                row[c] = 0
            elif r == rows - 1 and c == cols - 1:
                row[c] = 1
            else:
                row[c] = below[c] + row[c + 1]
        below = row
    return below[0]