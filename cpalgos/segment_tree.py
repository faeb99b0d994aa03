"""A segment tree answering range-minimum queries with point updates."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class MinSegmentTree:
    """Range minimum over a fixed-length sequence, with point updates."""

    def __init__(self, values: Iterable[Any]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(items)
        leaves = 1 << (self._n - 1).bit_length()
        self._tree: list[Any] = [None] * (2 * leaves - 1)
        self._build(items, 0, self._n - 1, 0)

    def _build(self, items: list[Any], lo: int, hi: int, pos: int) -> None:
        if lo == hi:
            self._tree[pos] = items[lo]
            return
        mid = lo + (hi - lo) // 2
        self._build(items, lo, mid, 2 * pos + 1)
        self._build(items, mid + 1, hi, 2 * pos + 2)
        self._tree[pos] = min(self._tree[2 * pos + 1], self._tree[2 * pos + 2])

    def query(self, left: int, right: int) -> Any:
        """Minimum of the values at positions ``left`` through ``right`` inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] is outside 0..{self._n - 1}")
        return self._query(left, right, 0, self._n - 1, 0)

    def _query(self, ql: int, qr: int, lo: int, hi: int, pos: int) -> Any:
        if ql <= lo and hi <= qr:
            return self._tree[pos]
        mid = lo + (hi - lo) // 2
        if qr <= mid:
            return self._query(ql, qr, lo, mid, 2 * pos + 1)
        if ql > mid:
            return self._query(ql, qr, mid + 1, hi, 2 * pos + 2)
        return min(
            self._query(ql, qr, lo, mid, 2 * pos + 1),
            self._query(ql, qr, mid + 1, hi, 2 * pos + 2),
        )

    def update(self, index: int, value: Any) -> None:
        """Set the value at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is outside 0..{self._n - 1}")
        self._update(index, value, 0, self._n - 1, 0)

    def _update(self, index: int, value: Any, lo: int, hi: int, pos: int) -> None:
        if lo == hi:
            self._tree[pos] = value
            return
        mid = lo + (hi - lo) // 2
        if index <= mid:
            self._update(index, value, lo, mid, 2 * pos + 1)
        else:
            self._update(index, value, mid + 1, hi, 2 * pos + 2)
        self._tree[pos] = min(self._tree[2 * pos + 1], self._tree[2 * pos + 2])

    def levels(self) -> list[list[Any]]:
        """The stored nodes level by level; unused slots hold None."""
        rows: list[list[Any]] = []
        start, width = 0, 1
        while start < len(self._tree):
            rows.append(self._tree[start:start + width])
            start += width
            width *= 2
        return rows