# spatialdict

Dictionaries keyed by 2-d points, supporting two kinds of query:

- **exact search**: a value stored under a given point, or `None`;
- **ball search**: the values of all points within a radius of a query point.

Three interchangeable implementations share the abstract `PointDict`
interface from `spatialdict.pointdict`:

| Class | Structure | Module |
|-------|-----------|--------|
| `ListPointDict` | linear scan over the points | `spatialdict.pointdict` |
| `MortonPointDict` | balanced BST over Morton (Z-order) codes | `spatialdict.morton` |
| `KDPointDict` | balanced 2-d tree, even depths split on x, odd on y | `spatialdict.kdtree` |

Each is built from two parallel iterables, points and values, and reports
its size (`len`), `height()` and `average_node_depth()` (truncated to an
integer; both are 0 for `ListPointDict`). Points and values are held by
reference. Mismatched lengths raise `ValueError`, as does an empty point
list for the two tree implementations and a negative radius for
`MortonPointDict.ball_search`.

`KDPointDict.exact_search` compares only the splitting coordinate of each
node along its path, so it returns the value of the first node whose
coordinate on that axis matches the query.

## Installation

```
pip install .
```

## Usage

```python
from spatialdict.point import Point
from spatialdict.kdtree import KDPointDict

points = [Point(0.0, 0.0), Point(1.0, 0.5), Point(0.2, 0.1)]
values = ["a", "b", "c"]
pd = KDPointDict(points, values)

pd.exact_search(Point(1.0, 0.5))          # "b"
pd.ball_search(Point(0.0, 0.0), 0.3)      # ["c", "a"]
```

`Point` is a frozen dataclass with `x` and `y`, ordered first by x and then
by y. `Point.compare(other)` returns -1, 0 or 1, `sqr_distance(other)` the
squared Euclidean distance, and `format_xy()` / `format_lonlat()` render it
as text. `Point.from_lonlat(longitude, latitude)` projects geographic
coordinates in degrees onto a plane in kilometres; the `longitude` and
`latitude` properties convert back.

The generic `BST` in `spatialdict.bst` is usable on its own: it takes a
comparison function `compare(a, b)`, allows duplicate keys, and offers
`insert`, `search`, an inclusive `range_search(key_min, key_max)` returning
values in key order, `height()`, `average_node_depth()` and a balanced
`BST.optimal_build(keys, values, compare)`. The Morton helpers
`interleave8(m, n)` and `z_encode(x, y)` in `spatialdict.morton` are public
too.

## Command-line tools

Time the construction, exact searches and ball searches on random points
in the unit square:

```
spatialdict-benchmark [npoints [nsearch [radius]]] [--structure {bst,bst2d,list}] [--seed SEED]
```

Defaults are 1000 points, 1000 searches, radius 0.1, structure `list`
(`bst` is `MortonPointDict`, `bst2d` is `KDPointDict`) and seed 42.

Search taxi trip start points in a `;`-separated CSV file
(`tripID;taxiID;date;longitude;latitude`, no header) named
`taxitripsporto.csv` in the current directory:

```
spatialdict-taxi longitude latitude radius
```

Longitude and latitude are in degrees and the radius in kilometres, e.g.
`spatialdict-taxi -8.6291 41.1579 0.05`. The number of matching trips and
the first ten of them are printed. `spatialdict.taxi.parse_csv(path)` reads
such a file into a list of `Trip` records.

## What it does not do

The dictionaries are built once from their inputs: there is no insertion or
removal after construction, and nothing is saved to disk. The taxi command
always reads `taxitripsporto.csv` from the current directory and always
uses `ListPointDict`; no data file is included.

## Tests

```
pip install .[test]
pytest
```