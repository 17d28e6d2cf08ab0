"""A binary search tree ordered by a user-supplied comparison function."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any

Compare = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BST:
    """A binary search tree that allows duplicate keys.

    ``compare(a, b)`` must return a negative number, zero or a positive
    number as ``a`` is less than, equal to or greater than ``b``.
    """

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _levels(self) -> Iterable[list[_Node]]:
        level = [self._root] if self._root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path (0 if empty)."""
        return max(sum(1 for _ in self._levels()) - 1, 0)

    def average_node_depth(self) -> float:
        """Return the mean depth of the nodes, the root having depth 0."""
        if self._size == 0:
            return 0.0
        total = sum(depth * len(level) for depth, level in enumerate(self._levels()))
        return total / self._size

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; equal keys go to the left subtree."""
        new = _Node(key, value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if self._compare(key, node.key) <= 0:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def search(self, key: Any) -> Any | None:
        """Return a value stored under ``key``, or None if the key is absent."""
        node = self._root
        while node is not None:
            cmp = self._compare(key, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node.value
        return None

    def range_search(self, key_min: Any, key_max: Any) -> list[Any]:
        """Return values whose keys lie in ``[key_min, key_max]``, in key order."""
        compare = self._compare
        result: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left if compare(node.key, key_min) >= 0 else None
            node = stack.pop()
            above_min = compare(node.key, key_min) >= 0
            below_max = compare(node.key, key_max) <= 0
            if above_min and below_max:
                result.append(node.value)
            node = node.right if below_max else None
        return result

    @classmethod
    def optimal_build(
        cls, keys: Iterable[Any], values: Iterable[Any], compare: Compare
    ) -> BST:
        """Build a minimum-height tree from parallel sequences of keys and values."""
        keys = list(keys)
        values = list(values)
        if len(keys) != len(values):
            raise ValueError("keys and values must have the same length")
        pairs = sorted(
            zip(keys, values),
            key=cmp_to_key(lambda a, b: compare(a[0], b[0])),
        )

        def build(start: int, stop: int) -> _Node | None:
            if start >= stop:
                return None
            middle = start + (stop - start) // 2
            node = _Node(*pairs[middle])
            node.left = build(start, middle)
            node.right = build(middle + 1, stop)
            return node

        tree = cls(compare)
        tree._root = build(0, len(pairs))
        tree._size = len(pairs)
        return tree