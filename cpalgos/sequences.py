"""Classic sequence problems: maximum subarray, meeting rooms, LIS."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class Interval:
    """A half-open meeting time span."""

    start: int
    end: int


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_sub_array requires at least one element")
    best = current = nums[0]
    for x in nums[1:]:
        current = x if x > current + x else current + x
        best = max(best, current)
    return best


def min_meeting_rooms(intervals: Iterable[Interval]) -> int:
    """Return the number of rooms needed so that no two meetings overlap."""
    events = sorted(
        event
        for interval in intervals
        for event in ((interval.start, 1), (interval.end, -1))
    )
    return max(accumulate(delta for _, delta in events), default=0)


def length_of_lis(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for x in nums:
        if not tails or tails[-1] < x:
            tails.append(x)
        else:
            tails[bisect_left(tails, x)] = x
    return len(tails)