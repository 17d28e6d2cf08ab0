"""Ball search over taxi trip start positions read from a CSV file."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from .point import Point
from .pointdict import ListPointDict

DEFAULT_CSV = "taxitripsporto.csv"
MAX_SHOWN = 10

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def _leading_float(text: str) -> float:
    """Parse the float at the start of ``text``, or 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass(frozen=True)
class Trip:
    """A taxi trip and the geographic position where it started."""

    trip_id: str
    taxi_id: str
    date: str
    longitude: float
    latitude: float

    def format(self) -> str:
        """Format the trip as ``(longitude, latitude) trip taxi date``."""
        return (
            f"({self.longitude:f}, {self.latitude:f}) "
            f"{self.trip_id} {self.taxi_id} {self.date}"
        )


def parse_csv(path: str | PathLike[str]) -> list[Trip]:
    """Read trips from a ``;``-separated file without header.

    Columns: trip id, taxi id, date-time, longitude and latitude in degrees.
    """
    trips = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            fields = line.split(";", 4)
            if len(fields) < 5:
                raise ValueError(f"line {number}: expected five ';'-separated fields")
            trip_id, taxi_id, date, longitude, latitude = fields
            trips.append(
                Trip(
                    trip_id,
                    taxi_id,
                    date,
                    _leading_float(longitude),
                    _leading_float(latitude),
                )
            )
    return trips


def main(argv: Sequence[str] | None = None) -> int:
    """Find the trips that started within a radius (km) of a position."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Usage: taxi longitude latitude radius")
        print("(longitude and latitude in degrees, radius in km.)")
        print("Example: taxi -8.6291 41.1579 0.05")
        return 1

    longitude, latitude, radius = (_leading_float(arg) for arg in args)
    print(f"Testing long={longitude:f}, lat={latitude:f}, radius={radius:f}")
    query = Point.from_lonlat(longitude, latitude)
    print(f"In km: {query.x:f}, {query.y:f}")

    print(f"Loading file {DEFAULT_CSV}", end="", flush=True)
    try:
        trips = parse_csv(DEFAULT_CSV)
    except OSError:
        print()
        print(f"Could not open file '{DEFAULT_CSV}'. Exiting...", file=sys.stderr)
        return 1
    except ValueError as error:
        print()
        print(f"Malformed file '{DEFAULT_CSV}': {error}", file=sys.stderr)
        return 1
    print(f" Done (read {len(trips)} trips)")

    print("Creating points...", end="")
    points = [Point.from_lonlat(trip.longitude, trip.latitude) for trip in trips]
    print("Done")

    print("Creating dictionary...", end="")
    start = time.process_time()
    pd = ListPointDict(points, trips)
    print(f"Done in {time.process_time() - start:f}s")

    print("Searching...", end="")
    start = time.process_time()
    found = pd.ball_search(query, radius)
    print(f"Done in {time.process_time() - start:f}s")
    print(f"{len(found)} trips found at the position")

    if len(found) > MAX_SHOWN:
        print(f"First {MAX_SHOWN} trips:")
    for trip in found[:MAX_SHOWN]:
        print(f"  {trip.format()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())