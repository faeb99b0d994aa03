"""Searching and selection over arrays."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

_SQUARE_EPS = 1e-9
_SEARCH_TOLERANCE = 1e-6


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the sorted ``arr``, or -1 if absent."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        value = arr[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _area_balance(line: float, squares: Sequence[Sequence[int]]) -> int:
    """Compare the area above ``line`` with the area below it.

    Returns 0 when they are equal within tolerance, 1 when more lies above
    and -1 when more lies below.
    """
    above = 0.0
    below = 0.0
    for _, y, length in squares:
        area = float(length) * length
        if y >= line:
            above += area
        elif y + length <= line:
            below += area
        else:
            below += (line - y) * length
            above += (y + length - line) * length
    diff = above - below
    if abs(diff) <= _SQUARE_EPS:
        return 0
    return 1 if diff > 0 else -1


def separate_squares(squares: Sequence[Sequence[int]]) -> float:
    """Find the lowest horizontal line splitting the squares' total area in half.

    Each square is given as ``(x, y, side)`` with ``(x, y)`` its bottom-left corner.
    """
    low = 0.0
    high = max((float(y) + length for _, y, length in squares), default=0.0)
    while high - low > _SEARCH_TOLERANCE:
        mid = low + (high - low) / 2
        if _area_balance(mid, squares) > 0:
            low = mid
        else:
            high = mid
    return high


def partition(nums: MutableSequence[int], left: int, right: int) -> int:
    """Partition ``nums[left:right + 1]`` around its last element in place.

    Afterwards every element before the returned index is no greater than the
    pivot and every element after it is greater. Returns the pivot's index.
    """
    pivot = nums[right]
    i = left
    for j in range(left, right):
        if nums[j] <= pivot:
            nums[i], nums[j] = nums[j], nums[i]
            i += 1
    nums[i], nums[right] = nums[right], nums[i]
    return i


def quick_select(nums: MutableSequence[int], left: int, right: int, k: int) -> int:
    """Return the value that belongs at index ``k`` once ``nums[left:right + 1]`` is sorted.

    The list is rearranged in place.
    """
    if not left <= k <= right:
        raise IndexError(f"k={k} lies outside [{left}, {right}]")
    while left != right:
        pivot_index = partition(nums, left, right)
        if k == pivot_index:
            return nums[k]
        if k < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1
    return nums[left]


def construct_transformed_array(nums: Sequence[int]) -> list[int]:
    """For each index, return the value reached by moving ``nums[i]`` steps circularly."""
    n = len(nums)
    return [nums[(step + i) % n] for i, step in enumerate(nums)]