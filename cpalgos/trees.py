"""Binary tree traversal and a prefix trie."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def bfs_order(root: Optional[TreeNode]) -> list[TreeNode]:
    """Nodes of the tree in breadth-first (level) order."""
    if root is None:
        return []
    order: list[TreeNode] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return order


class _TrieNode:
    __slots__ = ("children", "end")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.end = False


class Trie:
    """A set of words supporting prefix lookups."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = _TrieNode()
            node = child
        node.end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.end

    def shortest_prefix(self, word: str) -> str:
        """Shortest inserted word that is a prefix of ``word``, or ``word`` if none is."""
        node = self._root
        for length, ch in enumerate(word, 1):
            node = node.children.get(ch)
            if node is None:
                break
            if node.end:
                return word[:length]
        return word