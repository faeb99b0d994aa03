"""Recovering an alphabet order from a sorted list of names (Kahn's algorithm)."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Sequence

ALPHABET = string.ascii_lowercase
IMPOSSIBLE = "IMPOSSIBLE"


def fox_and_names(names: Sequence[str]) -> str:
    """Return an ordering of the 26 lowercase letters under which ``names`` are sorted.

    Each adjacent pair of names contributes one constraint, taken from their
    first differing letter. Returns ``IMPOSSIBLE`` when the constraints form a
    cycle. Letters are emitted in a breadth-first topological order, ties
    broken alphabetically. Raises ValueError for a non-lowercase letter.
    """
    for name in names:
        if any(ch not in ALPHABET for ch in name):
            raise ValueError(f"name {name!r} holds a character outside a-z")

    successors: dict[str, list[str]] = {ch: [] for ch in ALPHABET}
    in_degree = dict.fromkeys(ALPHABET, 0)
    for earlier, later in zip(names, names[1:]):
        for first, second in zip(earlier, later):
            if first != second:
                successors[first].append(second)
                in_degree[second] += 1
                break

    queue = deque(ch for ch in ALPHABET if in_degree[ch] == 0)
    order: list[str] = []
    while queue:
        ch = queue.popleft()
        order.append(ch)
        for nxt in successors[ch]:
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                queue.append(nxt)

    if len(order) < len(ALPHABET):
        return IMPOSSIBLE
    return "".join(order)