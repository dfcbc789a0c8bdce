"""General matrix multiplication: ``C = beta * C + alpha * (A @ B)``."""

from __future__ import annotations

from operator import mul

from .matrix import MatrixView


def _check_dimensions(a: MatrixView, b: MatrixView, c: MatrixView) -> None:
    if a.cols != b.rows:
        raise ValueError("Invalid dimensions: inner dimensions must match")
    if c.rows != a.rows or c.cols != b.cols:
        raise ValueError("Invalid dimensions: output dimensions must match")


def _rows(view: MatrixView) -> list[list[float]]:
    return [[view[i, j] for j in range(view.cols)] for i in range(view.rows)]


def _columns(view: MatrixView) -> list[list[float]]:
    return [[view[i, j] for i in range(view.rows)] for j in range(view.cols)]


def dgemm_basic(
    a: MatrixView, b: MatrixView, c: MatrixView, alpha: float, beta: float
) -> None:
    """Multiply ``a`` by ``b`` straightforwardly, accumulating into ``c``."""
    _check_dimensions(a, b, c)
    a_rows = _rows(a)
    b_cols = _columns(b)
    for i, a_row in enumerate(a_rows):
        for j, b_col in enumerate(b_cols):
            total = sum(map(mul, a_row, b_col))
            c[i, j] = beta * c[i, j] + alpha * total


def dgemm_blocked(
    a: MatrixView,
    b: MatrixView,
    c: MatrixView,
    alpha: float,
    beta: float,
    block_size: int,
) -> None:
    """Multiply tile by tile; ``block_size`` must be a positive power of two."""
    _check_dimensions(a, b, c)
    if block_size <= 0 or block_size & (block_size - 1):
        raise ValueError("block size must be a positive power of two")

    a_rows = _rows(a)
    b_cols = _columns(b)
    inner = a.cols

    for i0 in range(0, c.rows, block_size):
        i1 = min(i0 + block_size, c.rows)
        for j0 in range(0, c.cols, block_size):
            j1 = min(j0 + block_size, c.cols)
            tile = [[0.0] * (j1 - j0) for _ in range(i1 - i0)]

            for k0 in range(0, inner, block_size):
                k1 = min(k0 + block_size, inner)
                col_parts = [col[k0:k1] for col in b_cols[j0:j1]]
                for tile_row, a_row in zip(tile, a_rows[i0:i1]):
                    a_part = a_row[k0:k1]
                    for jj, b_part in enumerate(col_parts):
                        tile_row[jj] += sum(map(mul, a_part, b_part))

            for i, tile_row in zip(range(i0, i1), tile):
                for j, value in zip(range(j0, j1), tile_row):
                    c[i, j] = beta * c[i, j] + alpha * value