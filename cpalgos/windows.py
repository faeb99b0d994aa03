"""Sliding-window techniques over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from sortedcontainers import SortedList


class SmallestKSumWindow:
    """A multiset that keeps the sum of its ``k`` smallest elements up to date.

    Elements are split between a low part holding the ``k`` smallest and a
    high part holding the rest, so additions and removals stay logarithmic.
    """

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("k must be non-negative")
        self.k = k
        self._low: SortedList = SortedList()
        self._high: SortedList = SortedList()
        self._low_sum = 0

    def __len__(self) -> int:
        return len(self._low) + len(self._high)

    def _rebalance(self) -> None:
        need = min(self.k, len(self))
        while len(self._low) > need:
            x = self._low.pop()
            self._low_sum -= x
            self._high.add(x)
        while len(self._low) < need and self._high:
            x = self._high.pop(0)
            self._low.add(x)
            self._low_sum += x

    def add(self, x: int) -> None:
        """Put ``x`` into the window."""
        if not self._low or x <= self._low[-1]:
            self._low.add(x)
            self._low_sum += x
        else:
            self._high.add(x)
        self._rebalance()

    def remove(self, x: int) -> None:
        """Take one copy of ``x`` out of the window; a missing value is ignored."""
        if x in self._low:
            self._low.remove(x)
            self._low_sum -= x
        elif x in self._high:
            self._high.remove(x)
        self._rebalance()

    def query(self) -> int:
        """Sum of the ``k`` smallest elements (all of them if fewer are held)."""
        return self._low_sum


def count_good_subarrays(nums: Sequence[int], k: int) -> int:
    """Count subarrays holding at least ``k`` pairs ``i < j`` with equal values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts: Counter[int] = Counter()
    remaining = k
    left = 0
    total = 0
    for x in nums:
        remaining -= counts[x]
        counts[x] += 1
        while remaining <= 0:
            counts[nums[left]] -= 1
            remaining += counts[nums[left]]
            left += 1
        total += left
    return total


def at_most_k_distinct(nums: Sequence[int], k: int) -> int:
    """Count subarrays with no more than ``k`` distinct values."""
    counts: Counter[int] = Counter()
    distinct = 0
    left = 0
    total = 0
    for right, x in enumerate(nums):
        if counts[x] == 0:
            distinct += 1
        counts[x] += 1
        while distinct > k and left <= right:
            counts[nums[left]] -= 1
            if counts[nums[left]] == 0:
                distinct -= 1
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Count subarrays with exactly ``k`` distinct values."""
    return at_most_k_distinct(nums, k) - at_most_k_distinct(nums, k - 1)


def minimum_card_pickup(cards: Sequence[int]) -> int:
    """Length of the shortest subarray holding two equal cards, or -1 if none does."""
    counts: Counter[int] = Counter()
    left = 0
    best: int | None = None
    for right, card in enumerate(cards):
        counts[card] += 1
        while counts[card] > 1:
            length = right - left + 1
            best = length if best is None else min(best, length)
            counts[cards[left]] -= 1
            left += 1
    return -1 if best is None else best