# duckworks

Readers for rubber duck sighting reports and a few small numerical
kernels. Pure Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Reading sightings

Every reader adds what it parses to a `RubberDuckData` container from
`duckworks.records`. The container keeps coordinates (`Coordinate`
objects with `latitude` and `longitude`), dates (`datetime.date`, or
`None` when a date could not be read) and descriptions in matching order.
`coordinates()`, `dates()` and `descriptions()` return copies of those
lists, and `len(data)` gives the number of observations.

```python
from duckworks.records import RubberDuckData
from duckworks.csv_reader import CSVReader

data = RubberDuckData()
CSVReader().read_view(
    data,
    "date, latitude, longitude, description\n"
    "2024-09-10, 51.5074, -0.1278, A rubber ducky floating in London.\n",
)
print(data.coordinates()[0], data.dates()[0])
```

All readers derive from `duckworks.file_reader.FileReader` and provide
`read_file(data, path)` and `supported_file_extension()`.

- `duckworks.csv_reader.CSVReader` handles `csv`. `read_view(data, text)`
  parses CSV text. The header must name the columns `date`, `latitude`
  and `longitude`, in any order; `description` is optional. A header
  missing a required column, or a latitude or longitude that is not a
  number, raises `ValueError`. Blank rows are skipped. Dates are read as
  `YYYY-MM-DD`.
- `duckworks.json_reader.JSONReader` handles `json`.
  `read_stream(data, stream)` reads a JSON array of objects with
  numeric `latitude` and `longitude`, a string `date` and an optional
  string `description`. Entries that do not fit are skipped with a
  warning in the log; a document that is not an array adds nothing.
- `duckworks.free_reader.FreeTextReader` handles `txt`.
  `read_stream(data, stream)` splits the text into entries at blank
  lines. An entry is kept only if it contains both a valid date and a
  valid position; its whole text becomes the description. Dates may be
  ISO (`2024-06-10` or `2024/06/10`), `21 April 2025` or `April 21 2025`
  (full or three-letter month names, two-digit days). Positions may be
  decimal degrees (`51.5074, -0.1278`) or degrees, minutes and seconds
  (`51° 30' 26" N, 0° 7' 39" W`). The functions `parse_date(text)` and
  `parse_coord(text)` are available on their own; each returns `None`
  when nothing valid is found.

Files that cannot be opened are reported as a warning in the log and add
nothing.

`duckworks.registry.get_readers()` returns a new dictionary mapping each
extension (`"csv"`, `"json"`, `"txt"`) to a reader for it.

## Numerical kernels

- `duckworks.matrix`: `MatrixView` is a two-dimensional view onto a
  flat mutable sequence in row- or column-major order (`MatrixOrder`),
  indexed as `view[i, j]`. `Matrix` owns zero-initialised storage and
  has `fill(value)`. `matrix_max_abs_difference(lhs, rhs)` returns the
  largest element-wise absolute difference, or infinity when the shapes
  differ.
- `duckworks.gemm`: `dgemm_basic(a, b, c, alpha, beta)` and
  `dgemm_blocked(a, b, c, alpha, beta, block_size)` both compute
  `c = beta * c + alpha * (a @ b)` in place. Mismatched shapes raise
  `ValueError`; `block_size` must be a positive power of two.
- `duckworks.kernels`: `clamp_min(x)` and `clamp_conditional(x)` cap
  every value at 255 in place; `saxpy(a, x, y)` and
  `saxpy_chunked(a, x, y)` compute `y += a * x` in place and raise
  `ValueError` when the lengths differ.
- `duckworks.nearest_neighbor`: `Point2D`, `distance(p1, p2)`,
  `nearest_neighbor_distance_seq(points)` and
  `nearest_neighbor_distance_parallel(points, workers=None)`, which
  spreads the work over worker processes. Both return infinity for
  fewer than two points.

## Commands

```
duckies [options] file1 file2 ...
```

Options:

- `-h`, `--help`: show help and exit.
- `--version`: print the version and exit.
- `-v`, `--verbose`: log at info level to stderr (warnings only otherwise).
- `-j N`, `--jobs N`: set the maximum number of worker threads (at least 1).

The same settings can be given as environment variables when not given
on the command line: `DUCKIES_HELP`, `DUCKIES_VERSION`,
`DUCKIES_VERBOSE`, `DUCKIES_JOBS` and `DUCKIES_PATHS` (a single path).
Without any path the command prints its usage and exits with status 1.
A first Ctrl-C is recorded; a second one exits at once.

```
duckworks-nearest [-n COUNT] [--seed SEED] [-j WORKERS]
```

This generates `COUNT` random points in the square from -1 to 1
(100000 by default) and prints the smallest distance between any two of
them, computed in worker processes. The work grows with the square of
the count, so the default takes a long time.

## What it does not do

The `duckies` command does not yet read the files it is given and does
no clustering analysis: after checking its options it prints a fixed
list of five coordinates, one `latitude longitude` pair per line. To
load sightings, use the readers from Python as shown above.