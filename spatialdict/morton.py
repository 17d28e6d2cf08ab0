"""A point dictionary that orders points along a Morton (Z-order) curve."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .bst import BST
from .point import Point
from .pointdict import PointDict

_U8_MAX = 0xFF
_U32_MAX = 0xFFFFFFFF
_U64_MASK = (1 << 64) - 1


def _spread(byte: int) -> int:
    """Spread the bits of ``byte`` apart with 64-bit wrapping multiplications."""
    return ((byte * 0x0101010101010101 & 0x8040201008040201) * 0x0102040810204081) & _U64_MASK


def interleave8(m: int, n: int) -> int:
    """Interleave two bytes: bits of ``m`` go to even positions, bits of ``n`` to odd ones."""
    for byte in (m, n):
        if not 0 <= byte <= _U8_MAX:
            raise ValueError(f"byte out of range: {byte}")
    return ((_spread(m) >> 49) & 0x5555) | ((_spread(n) >> 48) & 0xAAAA)


def z_encode(x: int, y: int) -> int:
    """Return the 64-bit Morton code of two unsigned 32-bit coordinates."""
    for coordinate in (x, y):
        if not 0 <= coordinate <= _U32_MAX:
            raise ValueError(f"coordinate out of range: {coordinate}")
    code = 0
    for byte in range(4):
        shift = byte * 8
        code |= interleave8((x >> shift) & _U8_MAX, (y >> shift) & _U8_MAX) << (byte * 16)
    return code


def _quantize(value: float, low: float, high: float) -> int:
    """Map ``value`` from ``[low, high]`` onto the unsigned 32-bit range, clamping."""
    if high == low:
        return 0
    norm = (value - low) / (high - low)
    norm = min(max(norm, 0.0), 1.0)
    return int(norm * float(_U32_MAX))


def _compare_codes(a: int, b: int) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class _Entry:
    point: Point
    value: Any


class MortonPointDict(PointDict):
    """A point dictionary backed by a balanced tree keyed by Morton codes.

    Coordinates are normalised to the bounding box of the stored points
    before encoding, so neighbouring points get neighbouring keys.
    """

    def __init__(self, points: Iterable[Point], values: Iterable[Any]) -> None:
        points = list(points)
        values = list(values)
        if not points:
            raise ValueError("cannot build a dictionary from no points")
        if len(points) != len(values):
            raise ValueError("points and values must have the same length")

        self._xmin = min(p.x for p in points)
        self._xmax = max(p.x for p in points)
        self._ymin = min(p.y for p in points)
        self._ymax = max(p.y for p in points)

        keys = [self._code(p.x, p.y) for p in points]
        entries = [_Entry(p, v) for p, v in zip(points, values)]
        self._tree = BST.optimal_build(keys, entries, _compare_codes)

    def _code(self, x: float, y: float) -> int:
        return z_encode(
            _quantize(x, self._xmin, self._xmax),
            _quantize(y, self._ymin, self._ymax),
        )

    def _outside(self, xmin: float, xmax: float, ymin: float, ymax: float) -> bool:
        return xmax < self._xmin or xmin > self._xmax or ymax < self._ymin or ymin > self._ymax

    def __len__(self) -> int:
        return len(self._tree)

    def height(self) -> int:
        return self._tree.height()

    def average_node_depth(self) -> int:
        return int(self._tree.average_node_depth())

    def exact_search(self, point: Point) -> Any | None:
        if self._outside(point.x, point.x, point.y, point.y):
            return None
        code = self._code(point.x, point.y)
        return next(
            (
                entry.value
                for entry in self._tree.range_search(code, code)
                if entry.point.compare(point) == 0
            ),
            None,
        )

    def ball_search(self, point: Point, radius: float) -> list[Any]:
        if radius < 0:
            raise ValueError("radius must not be negative")
        xmin, xmax = point.x - radius, point.x + radius
        ymin, ymax = point.y - radius, point.y + radius
        if self._outside(xmin, xmax, ymin, ymax):
            return []
        low = self._code(xmin, ymin)
        high = self._code(xmax, ymax)
        limit = radius * radius
        return [
            entry.value
            for entry in self._tree.range_search(low, high)
            if entry.point.sqr_distance(point) <= limit
        ]