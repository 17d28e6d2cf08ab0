"""Planar points with helpers for longitude/latitude projection."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
REFERENCE_LONGITUDE = -8.6291
REFERENCE_LATITUDE = 41.1579

_KM_PER_DEGREE = EARTH_RADIUS_KM * math.pi / 180
_LONGITUDE_SCALE = math.cos(REFERENCE_LATITUDE / 180 * math.pi)


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane, in kilometres when built from geographic coordinates.

    Points order lexicographically: first by x, then by y.
    """

    x: float
    y: float

    @classmethod
    def from_lonlat(cls, longitude: float, latitude: float) -> Point:
        """Project (longitude, latitude) in degrees to planar kilometres."""
        return cls(
            _KM_PER_DEGREE * longitude * _LONGITUDE_SCALE,
            _KM_PER_DEGREE * latitude,
        )

    @property
    def longitude(self) -> float:
        """The longitude in degrees that this point projects from."""
        return self.x / _KM_PER_DEGREE / _LONGITUDE_SCALE

    @property
    def latitude(self) -> float:
        """The latitude in degrees that this point projects from."""
        return self.y / _KM_PER_DEGREE

    def sqr_distance(self, other: Point) -> float:
        """Return the squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def compare(self, other: Point) -> int:
        """Return -1, 0 or 1 as this point is below, equal to or above ``other``."""
        if self.x < other.x:
            return -1
        if self.x > other.x:
            return 1
        if self.y < other.y:
            return -1
        if self.y > other.y:
            return 1
        return 0

    def format_xy(self) -> str:
        """Format the planar coordinates as ``(x,y)``."""
        return f"({self.x:f},{self.y:f})"

    def format_lonlat(self) -> str:
        """Format the geographic coordinates as ``(longitude,latitude)``."""
        return f"({self.longitude:f},{self.latitude:f})"