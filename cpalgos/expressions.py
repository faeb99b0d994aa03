"""All results of an arithmetic expression under every parenthesisation."""

from __future__ import annotations

import operator
from collections.abc import Callable
from functools import lru_cache

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def parse_expression(expr: str) -> tuple[list[int], list[str]]:
    """Split ``expr`` into its non-negative integer operands and its operator characters."""
    nums: list[int] = []
    ops: list[str] = []
    current: int | None = None
    for ch in expr:
        if ch.isdigit():
            current = (current or 0) * 10 + int(ch)
        else:
            if current is not None:
                nums.append(current)
                current = None
            ops.append(ch)
    if current is not None:
        nums.append(current)
    return nums, ops


def diff_ways_to_compute(expression: str) -> list[int]:
    """Every value obtainable by parenthesising ``expression`` in all possible ways.

    Raises ValueError for an operator other than ``+``, ``-`` or ``*``.
    """
    nums, ops = parse_expression(expression)

    @lru_cache(maxsize=None)
    def results(left: int, right: int) -> tuple[int, ...]:
        if left == right:
            return (nums[left],)
        values: list[int] = []
        for split in range(left, right):
            symbol = ops[split]
            apply = _OPERATORS.get(symbol)
            if apply is None:
                raise ValueError(f"unsupported operator {symbol!r}")
            for lv in results(left, split):
                for rv in results(split + 1, right):
                    values.append(apply(lv, rv))
        return tuple(values)

    return list(results(0, len(nums) - 1))