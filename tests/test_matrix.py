import math

import pytest

from duckworks.matrix import Matrix, MatrixOrder, MatrixView, matrix_max_abs_difference


def _data():
    return [float(v) for v in range(1, 7)]


def test_row_major_indexing_reads_flat_storage():
    data = _data()
    view = MatrixView(data, 2, 3)
    assert view[0, 1] == data[1]
    assert view[1, 2] == data[5]
    assert view.is_row_major()
    assert not view.is_col_major()


def test_col_major_indexing_reads_flat_storage():
    data = _data()
    view = MatrixView(data, 2, 3, MatrixOrder.COL_MAJOR)
    assert view[1, 0] == data[1]
    assert view[0, 1] == data[2]
    assert view.is_col_major()


def test_stride_depends_on_order():
    assert MatrixView(_data(), 2, 3).stride() == 3
    assert MatrixView(_data(), 2, 3, MatrixOrder.COL_MAJOR).stride() == 2


def test_size_is_rows_times_cols():
    assert MatrixView(_data(), 3, 2).size() == 6


def test_setitem_writes_through_to_storage():
    data = _data()
    view = MatrixView(data, 2, 3)
    view[1, 1] = 42.0
    assert data[4] == 42.0


def test_index_out_of_range():
    view = MatrixView(_data(), 2, 3)
    with pytest.raises(IndexError):
        view[2, 0]
    with pytest.raises(IndexError):
        view[0, 3] = 1.0
    assert view.to_list() == _data()
    assert view[1, 2] == 6.0


def test_storage_too_small():
    with pytest.raises(ValueError):
        MatrixView([1.0, 2.0], 2, 3)


def test_equality_across_orders():
    row = MatrixView([1, 2, 3, 4, 5, 6], 2, 3)
    col = MatrixView([1, 4, 2, 5, 3, 6], 2, 3, MatrixOrder.COL_MAJOR)
    assert row == col


def test_inequality_on_shape_and_values():
    base = MatrixView(_data(), 2, 3)
    assert not (base == MatrixView(_data(), 3, 2))
    changed = _data()
    changed[3] = -1.0
    assert not (base == MatrixView(changed, 2, 3))


def test_to_list_is_a_copy():
    data = _data()
    view = MatrixView(data, 2, 3)
    copy = view.to_list()
    copy[0] = 99.0
    assert view.to_list() == data


def test_reset_to_nothing_empties_view():
    view = MatrixView(_data(), 2, 3, MatrixOrder.COL_MAJOR)
    view.reset()
    assert view.size() == 0
    assert view.rows == 0 and view.cols == 0
    assert view.is_row_major()


def test_reset_to_new_storage_keeps_shape():
    view = MatrixView(_data(), 2, 3)
    replacement = [float(v) for v in range(10, 16)]
    view.reset(replacement)
    assert (view.rows, view.cols) == (2, 3)
    assert view[0, 0] == replacement[0]


def test_swap_exchanges_everything():
    first = MatrixView(_data(), 2, 3)
    other_data = [7.0, 8.0]
    second = MatrixView(other_data, 1, 2, MatrixOrder.COL_MAJOR)
    first.swap(second)
    assert first.data is other_data
    assert (first.rows, first.cols, first.order) == (1, 2, MatrixOrder.COL_MAJOR)
    assert (second.rows, second.cols) == (2, 3)
    assert second.is_row_major()


def test_matrix_is_zero_initialised():
    m = Matrix(4, 5)
    values = m.to_list()
    assert len(values) == m.rows * m.cols
    assert all(v == 0.0 for v in values)


def test_matrix_fill():
    m = Matrix(3, 3, MatrixOrder.COL_MAJOR)
    m.fill(1.5)
    assert all(m[i, j] == 1.5 for i in range(3) for j in range(3))


def test_matrix_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Matrix(-1, 3)


def test_max_abs_difference_shape_mismatch_is_infinite():
    assert matrix_max_abs_difference(Matrix(2, 3), Matrix(3, 2)) == math.inf


def test_max_abs_difference_of_identical_is_zero():
    view = MatrixView(_data(), 2, 3)
    assert matrix_max_abs_difference(view, MatrixView(_data(), 2, 3)) == 0.0


def test_max_abs_difference_finds_largest_and_is_symmetric():
    lhs = MatrixView([1.0, 2.0, 3.0, 4.0], 2, 2)
    rhs = MatrixView([1.0, 2.0, 3.0, 4.5], 2, 2)
    assert matrix_max_abs_difference(lhs, rhs) == 0.5
    assert matrix_max_abs_difference(rhs, lhs) == matrix_max_abs_difference(lhs, rhs)


def test_max_abs_difference_of_empty_is_negative_infinity():
    assert matrix_max_abs_difference(Matrix(0, 0), Matrix(0, 0)) == -math.inf