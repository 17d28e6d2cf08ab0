"""A point dictionary backed by a balanced 2-d tree (k-d tree with k = 2)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .point import Point
from .pointdict import PointDict


@dataclass
class _Node:
    point: Point
    value: Any
    depth: int
    left: _Node | None = None
    right: _Node | None = None

    def split(self, point: Point) -> tuple[float, float]:
        """Return this node's and ``point``'s coordinates on the splitting axis."""
        if self.depth % 2:
            return self.point.y, point.y
        return self.point.x, point.x


@dataclass(frozen=True)
class _Entry:
    index: int
    point: Point
    value: Any


def _build(split: list[_Entry], other: list[_Entry], depth: int) -> _Node:
    """Build a subtree from entries sorted on this depth's axis (``split``)
    and on the other axis (``other``)."""
    size = len(split)
    if size == 1:
        return _Node(split[0].point, split[0].value, depth)
    if size == 2:
        node = _Node(split[1].point, split[1].value, depth)
        node.left = _Node(split[0].point, split[0].value, depth + 1)
        return node
    if size == 3:
        node = _Node(split[1].point, split[1].value, depth)
        node.left = _Node(split[0].point, split[0].value, depth + 1)
        node.right = _Node(split[2].point, split[2].value, depth + 1)
        return node

    middle = size // 2
    left_split = split[:middle]
    right_split = split[middle + 1:]
    left_ids = {entry.index for entry in left_split}
    right_ids = {entry.index for entry in right_split}
    left_other = [entry for entry in other if entry.index in left_ids]
    right_other = [entry for entry in other if entry.index in right_ids]

    median = split[middle]
    node = _Node(median.point, median.value, depth)
    # The axis alternates: the other-axis lists become the split lists below.
    node.left = _build(left_other, left_split, depth + 1)
    node.right = _build(right_other, right_split, depth + 1)
    return node


class KDPointDict(PointDict):
    """A point dictionary stored in a 2-d tree built by median splits.

    Even depths split on x, odd depths on y.  An exact search compares
    only the splitting coordinate of each node on its path and returns
    the value of the first node whose coordinate matches.
    """

    def __init__(self, points: Iterable[Point], values: Iterable[Any]) -> None:
        points = list(points)
        values = list(values)
        if not points:
            raise ValueError("cannot build a dictionary from no points")
        if len(points) != len(values):
            raise ValueError("points and values must have the same length")
        entries = [_Entry(i, p, v) for i, (p, v) in enumerate(zip(points, values))]
        by_x = sorted(entries, key=lambda e: e.point.x)
        by_y = sorted(entries, key=lambda e: e.point.y)
        self._root = _build(by_x, by_y, 0)
        self._size = len(entries)

    def _nodes(self) -> Iterator[_Node]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in (node.right, node.left) if child is not None)

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        return max(node.depth for node in self._nodes())

    def average_node_depth(self) -> int:
        return sum(node.depth for node in self._nodes()) // self._size

    def exact_search(self, point: Point) -> Any | None:
        node: _Node | None = self._root
        while node is not None:
            stored, wanted = node.split(point)
            if wanted < stored:
                node = node.left
            elif wanted > stored:
                node = node.right
            else:
                return node.value
        return None

    def ball_search(self, point: Point, radius: float) -> list[Any]:
        limit = radius * radius
        result: list[Any] = []
        stack: list[_Node] = [self._root]
        while stack:
            node = stack.pop()
            if node.point.sqr_distance(point) <= limit:
                result.append(node.value)
            stored, wanted = node.split(point)
            # Push right first so the left subtree is visited first.
            if wanted + radius >= stored and node.right is not None:
                stack.append(node.right)
            if wanted - radius < stored and node.left is not None:
                stack.append(node.left)
        return result