"""Singly linked lists: building, cycle detection and reversal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Values of the list from ``head`` onward. Raises ValueError on a cycle."""
    values: list[int] = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def has_cycle(head: Optional[ListNode]) -> bool:
    """Whether following ``next`` from ``head`` loops forever (Floyd's method)."""
    if head is None:
        return False
    slow: Optional[ListNode] = head
    fast = head.next
    while fast is not None and fast.next is not None:
        if slow is fast:
            return True
        fast = fast.next.next
        slow = slow.next
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev