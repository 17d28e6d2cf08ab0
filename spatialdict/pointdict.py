"""Dictionaries keyed by points, supporting exact and ball searches."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from .point import Point


class PointDict(ABC):
    """A read-only mapping from points to values.

    Points and values are held by reference and never copied.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored points."""

    @abstractmethod
    def height(self) -> int:
        """Return the height of the underlying tree, or 0 if there is none."""

    @abstractmethod
    def average_node_depth(self) -> int:
        """Return the truncated average node depth, or 0 if there is no tree."""

    @abstractmethod
    def exact_search(self, point: Point) -> Any | None:
        """Return a value stored at ``point``, or None if there is none."""

    @abstractmethod
    def ball_search(self, point: Point, radius: float) -> list[Any]:
        """Return the values whose points lie within ``radius`` of ``point``."""


class ListPointDict(PointDict):
    """A point dictionary backed by parallel sequences, searched linearly."""

    def __init__(self, points: Iterable[Point], values: Iterable[Any]) -> None:
        self._points = list(points)
        self._values = list(values)
        if len(self._points) != len(self._values):
            raise ValueError("points and values must have the same length")

    def __len__(self) -> int:
        return len(self._points)

    def height(self) -> int:
        return 0

    def average_node_depth(self) -> int:
        return 0

    def exact_search(self, point: Point) -> Any | None:
        return next(
            (
                value
                for stored, value in zip(self._points, self._values)
                if stored.compare(point) == 0
            ),
            None,
        )

    def ball_search(self, point: Point, radius: float) -> list[Any]:
        limit = radius * radius
        return [
            value
            for stored, value in zip(self._points, self._values)
            if stored.sqr_distance(point) <= limit
        ]