"""Smallest pairwise distance among a set of 2-D points."""

from __future__ import annotations

import argparse
import itertools
import math
import os
import random
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


def distance(p1: Point2D, p2: Point2D) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def nearest_neighbor_distance_seq(points: Iterable[Point2D]) -> float:
    """Minimum distance over all pairs; infinity with fewer than two points."""
    return min(
        (distance(p, q) for p, q in itertools.combinations(points, 2)),
        default=math.inf,
    )


def _min_distance_from_rows(points: Sequence[Point2D], rows: range) -> float:
    best = math.inf
    for i in rows:
        p = points[i]
        for q in itertools.islice(points, i + 1, None):
            d = distance(p, q)
            if d < best:
                best = d
    return best


def nearest_neighbor_distance_parallel(
    points: Iterable[Point2D], workers: int | None = None
) -> float:
    """Minimum pairwise distance, spreading the work over worker processes.

    ``workers`` defaults to the number of CPUs.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    pts = tuple(points)
    n = len(pts)
    if n < 2:
        return math.inf
    workers = min(workers, n - 1)
    # Strided row assignment balances the shrinking inner loops.
    row_sets = [range(w, n, workers) for w in range(workers)]
    with ProcessPoolExecutor(max_workers=workers) as pool:
        results = pool.map(_min_distance_from_rows, itertools.repeat(pts), row_sets)
        return min(results, default=math.inf)


def main(argv: Sequence[str] | None = None) -> int:
    """Report the nearest-neighbour distance of uniformly random points."""
    parser = argparse.ArgumentParser(
        description="Minimum pairwise distance of random points in [-1, 1]^2."
    )
    parser.add_argument("-n", "--count", type=int, default=100_000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-j", "--workers", type=int, default=None)
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must be non-negative")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    rng = random.Random(args.seed)
    points = [
        Point2D(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
        for _ in range(args.count)
    ]
    result = nearest_neighbor_distance_parallel(points, args.workers)
    print(f"Minimum distance {result:g}")
    return 0