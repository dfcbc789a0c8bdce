"""Dense two-dimensional matrices stored in flat row- or column-major order."""

from __future__ import annotations

import enum
import itertools
import math
from collections.abc import MutableSequence


class MatrixOrder(enum.Enum):
    """Memory layout of the elements of a matrix."""

    ROW_MAJOR = "row_major"
    COL_MAJOR = "col_major"


class MatrixView:
    """A non-owning two-dimensional view onto a flat mutable sequence.

    Elements are addressed as ``view[i, j]``; writes go straight through to
    the underlying sequence, which may be shared with other views.
    """

    ROW_MAJOR = MatrixOrder.ROW_MAJOR
    COL_MAJOR = MatrixOrder.COL_MAJOR

    def __init__(
        self,
        data: MutableSequence,
        rows: int,
        cols: int,
        order: MatrixOrder = MatrixOrder.ROW_MAJOR,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        if len(data) < rows * cols:
            raise ValueError(
                f"storage holds {len(data)} elements, {rows * cols} required"
            )
        self.data = data
        self.rows = rows
        self.cols = cols
        self.order = MatrixOrder(order)

    def is_row_major(self) -> bool:
        return self.order is MatrixOrder.ROW_MAJOR

    def is_col_major(self) -> bool:
        return self.order is MatrixOrder.COL_MAJOR

    def stride(self) -> int:
        """Distance in the flat storage between consecutive rows (or columns)."""
        return self.cols if self.is_row_major() else self.rows

    def size(self) -> int:
        return self.rows * self.cols

    def reset(self, new_data: MutableSequence | None = None) -> None:
        """Point the view at new storage; with no storage the view becomes empty."""
        if new_data is None:
            self.data = []
            self.rows = 0
            self.cols = 0
            self.order = MatrixOrder.ROW_MAJOR
        else:
            if len(new_data) < self.size():
                raise ValueError("new storage is too small for this view")
            self.data = new_data

    def swap(self, other: MatrixView) -> None:
        """Exchange storage, shape and order with another view."""
        self.data, other.data = other.data, self.data
        self.rows, other.rows = other.rows, self.rows
        self.cols, other.cols = other.cols, self.cols
        self.order, other.order = other.order, self.order

    def to_list(self) -> list:
        """Copy of the elements in storage order."""
        return list(self.data[: self.size()])

    def _offset(self, index) -> int:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("matrix indices must be a pair (row, col)")
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix"
            )
        if self.is_row_major():
            return i * self.stride() + j
        return j * self.stride() + i

    def __getitem__(self, index):
        return self.data[self._offset(index)]

    def __setitem__(self, index, value) -> None:
        self.data[self._offset(index)] = value

    def _positions(self):
        return itertools.product(range(self.rows), range(self.cols))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixView):
            return NotImplemented
        if self.rows != other.rows or self.cols != other.cols:
            return False
        if self.order is other.order:
            return self.to_list() == other.to_list()
        return all(self[pos] == other[pos] for pos in self._positions())

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, "
            f"order={self.order.name})"
        )


class Matrix(MatrixView):
    """A matrix that owns its storage, initialised to zeros."""

    def __init__(
        self, rows: int, cols: int, order: MatrixOrder = MatrixOrder.ROW_MAJOR
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        super().__init__([0.0] * (rows * cols), rows, cols, order)

    def fill(self, value) -> None:
        """Set every element to ``value``."""
        self.data[: self.size()] = [value] * self.size()


def matrix_max_abs_difference(lhs: MatrixView, rhs: MatrixView) -> float:
    """Largest element-wise absolute difference between two matrices.

    Returns infinity when the shapes differ and negative infinity for
    empty matrices.
    """
    if lhs.rows != rhs.rows or lhs.cols != rhs.cols:
        return math.inf
    return max(
        (abs(lhs[pos] - rhs[pos]) for pos in lhs._positions()),
        default=-math.inf,
    )