"""CPU-time benchmark of point dictionary implementations on random points."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from .kdtree import KDPointDict
from .morton import MortonPointDict
from .point import Point
from .pointdict import ListPointDict, PointDict

DEFAULT_POINTS = 1000
DEFAULT_SEARCHES = 1000
DEFAULT_RADIUS = 0.1

Factory = Callable[[Iterable[Point], Iterable[Any]], PointDict]

IMPLEMENTATIONS: dict[str, Factory] = {
    "list": ListPointDict,
    "bst": MortonPointDict,
    "bst2d": KDPointDict,
}

_T = TypeVar("_T")


@dataclass(frozen=True)
class _Data:
    point: Point


@dataclass(frozen=True)
class BenchmarkResult:
    """Measurements gathered by one benchmark run; times are CPU seconds."""

    npoints: int
    nsearch: int
    radius: float
    size: int
    height: int
    average_node_depth: int
    build_time: float
    positive_time: float
    positive_error: str | None
    negative_time: float
    negative_errors: int
    ball_time: float
    average_ball_size: float

    def report(self) -> str:
        """Render the measurements as a human-readable report."""
        lines = [
            "Preparation:",
            f"   Generating {self.npoints + self.nsearch} points...Done",
            f"   Creation of the dictionary ({self.npoints} points)..."
            f"Done in {self.build_time:f}s",
            f"   (Size:{self.size}, height={self.height}, "
            f"average node depth={self.average_node_depth})",
            "",
            "Testing exact searches:",
            f"   {self.nsearch} positive searches...Done in {self.positive_time:f}s",
        ]
        if self.positive_error is not None:
            lines.append(f"  Error: {self.positive_error}")
            lines.append("   Warning: there were some errors")
        lines.append(
            f"   {self.nsearch} negative searches...Done in {self.negative_time:f}s"
        )
        if self.negative_errors:
            lines.extend(
                "  Error: one negative point was found"
                for _ in range(self.negative_errors)
            )
            lines.append("   Warning: there were some errors")
        lines.extend(
            [
                "",
                "Testing ball searches:",
                f"   {self.nsearch} ball searches of radius {self.radius:f}..."
                f"Done in {self.ball_time:f}s",
                f"   Average list size: {self.average_ball_size:f}",
            ]
        )
        return "\n".join(lines)


def _timed(action: Callable[[], _T]) -> tuple[_T, float]:
    start = time.process_time()
    result = action()
    return result, time.process_time() - start


def run_benchmark(
    factory: Factory,
    npoints: int = DEFAULT_POINTS,
    nsearch: int = DEFAULT_SEARCHES,
    radius: float = DEFAULT_RADIUS,
    seed: int = 42,
) -> BenchmarkResult:
    """Build a dictionary of random points and time exact and ball searches.

    ``npoints`` points in the unit square are stored; ``nsearch`` more serve
    as ball-search centres.
    """
    if npoints < 1:
        raise ValueError("npoints must be at least 1")
    if nsearch < 0:
        raise ValueError("nsearch must not be negative")

    rng = random.Random(seed)
    points = [Point(rng.random(), rng.random()) for _ in range(npoints + nsearch)]
    data = [_Data(p) for p in points]

    pd, build_time = _timed(lambda: factory(points[:npoints], data[:npoints]))

    def positive() -> str | None:
        for _ in range(nsearch):
            index = rng.randrange(npoints)
            found = pd.exact_search(points[index])
            if found is None:
                return "one positive point was not found"
            if found is not data[index]:
                return "associated data is wrong"
        return None

    positive_error, positive_time = _timed(positive)

    def negative() -> int:
        errors = 0
        for _ in range(nsearch):
            probe = Point(-1.0 + rng.random(), 1.0 + rng.random())
            if pd.exact_search(probe) is not None:
                errors += 1
        return errors

    negative_errors, negative_time = _timed(negative)

    def balls() -> float:
        return sum(
            len(pd.ball_search(centre, radius)) / nsearch
            for centre in points[npoints:]
        )

    average_ball_size, ball_time = _timed(balls)

    return BenchmarkResult(
        npoints=npoints,
        nsearch=nsearch,
        radius=radius,
        size=len(pd),
        height=pd.height(),
        average_node_depth=pd.average_node_depth(),
        build_time=build_time,
        positive_time=positive_time,
        positive_error=positive_error,
        negative_time=negative_time,
        negative_errors=negative_errors,
        ball_time=ball_time,
        average_ball_size=average_ball_size,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line."""
    parser = argparse.ArgumentParser(
        description="Time a point dictionary on random points."
    )
    parser.add_argument("npoints", nargs="?", type=int, default=DEFAULT_POINTS)
    parser.add_argument("nsearch", nargs="?", type=int, default=DEFAULT_SEARCHES)
    parser.add_argument("radius", nargs="?", type=float, default=DEFAULT_RADIUS)
    parser.add_argument(
        "--structure", choices=sorted(IMPLEMENTATIONS), default="list"
    )
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    try:
        result = run_benchmark(
            IMPLEMENTATIONS[args.structure],
            args.npoints,
            args.nsearch,
            args.radius,
            args.seed,
        )
    except ValueError as error:
        parser.error(str(error))
    print(result.report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())