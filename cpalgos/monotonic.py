"""Monotonic stack helpers for next/previous greater or smaller queries."""

from __future__ import annotations

from collections.abc import Sequence


def next_greater_right(values: Sequence[int]) -> list[int]:
    """Index of the next strictly greater element to the right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i, x in enumerate(values):
        while stack and x > values[stack[-1]]:
            result[stack.pop()] = i
        stack.append(i)
    return result


def prev_greater_left(values: Sequence[int]) -> list[int]:
    """Index of the previous strictly greater element to the left, or -1."""
    result = []
    stack: list[int] = []
    for i, x in enumerate(values):
        while stack and values[stack[-1]] <= x:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def next_smaller_right(values: Sequence[int]) -> list[int]:
    """Index of the next strictly smaller element to the right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i, x in enumerate(values):
        while stack and x < values[stack[-1]]:
            result[stack.pop()] = i
        stack.append(i)
    return result


def prev_smaller_left(values: Sequence[int]) -> list[int]:
    """Index of the previous strictly smaller element to the left, or -1."""
    result = []
    stack: list[int] = []
    for i, x in enumerate(values):
        while stack and values[stack[-1]] >= x:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def days_to_warmer(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a strictly warmer temperature, or 0 if none comes."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for i, t in enumerate(temperatures):
        while stack and t > temperatures[stack[-1]]:
            j = stack.pop()
            result[j] = i - j
        stack.append(i)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Largest rectangle in a histogram, using a single sentinel pass."""
    stack: list[int] = []
    best = 0
    n = len(heights)
    for i in range(n + 1):
        current = heights[i] if i < n else 0
        while stack and current < heights[stack[-1]]:
            h = heights[stack.pop()]
            left = stack[-1] + 1 if stack else 0
            best = max(best, h * (i - left))
        stack.append(i)
    return best


def largest_rectangle_area_bounds(heights: Sequence[int]) -> int:
    """Largest rectangle in a histogram, from each bar's left and right bounds."""
    n = len(heights)
    left = [-1] * n
    right = [n] * n
    stack: list[int] = []
    for i, h in enumerate(heights):
        while stack and h < heights[stack[-1]]:
            right[stack.pop()] = i
        left[i] = stack[-1] if stack else -1
        stack.append(i)
    return max(
        (h * (r - l - 1) for h, l, r in zip(heights, left, right)),
        default=0,
    )


def next_greater_values(values: Sequence[int]) -> list[int]:
    """Value of the next strictly greater element to the right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i, x in enumerate(values):
        while stack and x > values[stack[-1]]:
            result[stack.pop()] = x
        stack.append(i)
    return result


def span_greater_equal_left(values: Sequence[int]) -> list[int]:
    """Length of the run ending at each index whose elements are all no greater."""
    result = []
    stack: list[int] = []
    for i, x in enumerate(values):
        while stack and values[stack[-1]] <= x:
            stack.pop()
        result.append(i - stack[-1] if stack else i + 1)
        stack.append(i)
    return result