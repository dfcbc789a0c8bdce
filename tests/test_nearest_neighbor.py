import math
import random

import pytest

from duckworks.nearest_neighbor import (
    Point2D,
    distance,
    main,
    nearest_neighbor_distance_parallel,
    nearest_neighbor_distance_seq,
)


def _random_points(count, seed):
    rng = random.Random(seed)
    return [Point2D(rng.uniform(-1, 1), rng.uniform(-1, 1)) for _ in range(count)]


def test_distance_pythagorean():
    assert distance(Point2D(0.0, 0.0), Point2D(3.0, 4.0)) == 5.0


def test_distance_is_symmetric():
    p, q = Point2D(0.25, -0.5), Point2D(-0.75, 0.125)
    assert distance(p, q) == distance(q, p)


@pytest.mark.parametrize("points", [[], [Point2D(0.5, 0.5)]])
def test_sequential_fewer_than_two_points_is_infinite(points):
    assert nearest_neighbor_distance_seq(points) == math.inf


def test_sequential_duplicate_gives_zero():
    points = _random_points(20, 4) + [Point2D(0.1, 0.2), Point2D(0.1, 0.2)]
    assert nearest_neighbor_distance_seq(points) == 0.0


def test_sequential_bounded_by_any_pair():
    points = _random_points(40, 8)
    best = nearest_neighbor_distance_seq(points)
    assert best <= distance(points[0], points[1])
    assert best <= distance(points[-1], points[7])


@pytest.mark.parametrize("workers", [1, 2, 3])
def test_parallel_matches_sequential(workers):
    points = _random_points(60, workers)
    assert nearest_neighbor_distance_parallel(points, workers) == (
        nearest_neighbor_distance_seq(points)
    )


def test_parallel_few_points_is_infinite():
    assert nearest_neighbor_distance_parallel([Point2D(0.0, 0.0)], 2) == math.inf


def test_parallel_rejects_zero_workers():
    with pytest.raises(ValueError):
        nearest_neighbor_distance_parallel(_random_points(5, 1), 0)


def test_main_reports_minimum(capsys):
    assert main(["--count", "30", "--seed", "1", "--workers", "2"]) == 0
    out = capsys.readouterr().out.strip()
    prefix = "Minimum distance "
    assert out.startswith(prefix)
    value = float(out[len(prefix):])
    assert 0.0 <= value < math.inf


def test_main_single_point_reports_infinity(capsys):
    assert main(["--count", "1", "--seed", "2", "--workers", "1"]) == 0
    assert capsys.readouterr().out.strip() == "Minimum distance inf"


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit):
        main(["--count", "-3"])