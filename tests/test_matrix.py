import random

import pytest

from tinynet.matrix import Matrix, rand_float, sigmoid


def test_rand_float_in_unit_interval_and_reproducible():
    a = [rand_float(random.Random(7)) for _ in range(3)]
    b = [rand_float(random.Random(7)) for _ in range(3)]
    assert a == b
    assert all(0.0 <= x < 1.0 for x in a)


def test_sigmoid_midpoint():
    assert sigmoid(0.0) == 0.5


def test_sigmoid_extremes_do_not_overflow():
    assert 0.0 <= sigmoid(-1000.0) < 1e-10
    assert 1.0 - sigmoid(1000.0) < 1e-10


def test_sigmoid_symmetry():
    for x in (0.3, 1.7, 5.0):
        assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)


def test_from_rows_round_trip():
    rows = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    m = Matrix.from_rows(rows)
    assert (m.rows, m.cols) == (2, 3)
    assert m.tolist() == rows
    assert m[1, 2] == 6.0


def test_from_rows_rejects_ragged():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_new_matrix_is_zero():
    assert Matrix(2, 2).tolist() == [[0.0, 0.0], [0.0, 0.0]]


def test_index_out_of_range():
    m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, -1] = 9.0
    with pytest.raises(IndexError):
        m[0, 2] = 9.0
    assert m.tolist() == [[1.0, 2.0], [3.0, 4.0]]
    assert m[1, 1] == 4.0


def test_invalid_shape_and_buffer():
    with pytest.raises(ValueError):
        Matrix(-1, 2)
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        Matrix(2, 3, stride=2)


def test_strided_views_over_table():
    table = [0, 0, 0, 0, 1, 1, 1, 0, 1, 1, 1, 0]
    inputs = Matrix(4, 2, table, stride=3)
    outputs = Matrix(4, 1, table, stride=3, offset=2)
    assert inputs.tolist() == [[0, 0], [0, 1], [1, 0], [1, 1]]
    assert outputs.tolist() == [[0], [1], [1], [0]]


def test_row_view_shares_buffer():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    r = m.row(1)
    assert r.tolist() == [[3.0, 4.0]]
    r[0, 0] = 9.0
    assert m[1, 0] == 9.0
    with pytest.raises(IndexError):
        m.row(2)


def test_fill_and_iter():
    m = Matrix(2, 3)
    m.fill(7)
    assert list(m) == [[7.0] * 3, [7.0] * 3]


def test_fill_on_view_leaves_rest_untouched():
    table = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    view = Matrix(2, 1, table, stride=3, offset=2)
    view.fill(0.0)
    assert table == [1.0, 2.0, 0.0, 4.0, 5.0, 0.0]


def test_randomize_bounds_and_seed():
    a = Matrix(3, 3)
    b = Matrix(3, 3)
    a.randomize(-2.0, 3.0, random.Random(1))
    b.randomize(-2.0, 3.0, random.Random(1))
    assert a.tolist() == b.tolist()
    assert all(-2.0 <= x < 3.0 for row in a for x in row)


def test_copy_from():
    src = Matrix.from_rows([[1, 2], [3, 4]])
    dst = Matrix(2, 2)
    dst.copy_from(src)
    assert dst.tolist() == src.tolist()
    with pytest.raises(ValueError):
        Matrix(2, 3).copy_from(src)


def test_dot_identity_and_permutation():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    identity = Matrix.from_rows([[1, 0], [0, 1]])
    swap = Matrix.from_rows([[0, 1], [1, 0]])
    dst = Matrix(2, 2)
    dst.dot(a, identity)
    assert dst.tolist() == a.tolist()
    dst.dot(a, swap)
    assert dst.tolist() == [[2.0, 1.0], [4.0, 3.0]]


def test_dot_shape_errors():
    a = Matrix(2, 3)
    b = Matrix(2, 2)
    with pytest.raises(ValueError):
        Matrix(2, 2).dot(a, b)
    with pytest.raises(ValueError):
        Matrix(3, 3).dot(Matrix(2, 2), b)


def test_add_negation_gives_zero():
    a = Matrix.from_rows([[1.5, -2.0], [3.25, 4.0]])
    neg = Matrix.from_rows([[-x for x in row] for row in a])
    a.add(neg)
    assert a.tolist() == [[0.0, 0.0], [0.0, 0.0]]
    with pytest.raises(ValueError):
        a.add(Matrix(1, 2))


def test_apply_sigmoid_matches_function():
    values = [[-1.0, 0.0, 2.5]]
    m = Matrix.from_rows(values)
    m.apply_sigmoid()
    assert m.tolist() == [[sigmoid(x) for x in values[0]]]


def test_append_col():
    src = Matrix.from_rows([[1, 2], [3, 4]])
    column = Matrix.from_rows([[5], [6]])
    dst = Matrix(2, 3)
    dst.append_col(src, column)
    assert dst.tolist() == [[1.0, 2.0, 5.0], [3.0, 4.0, 6.0]]
    with pytest.raises(ValueError):
        Matrix(2, 2).append_col(src, column)


def test_append_row():
    src = Matrix.from_rows([[1, 2], [3, 4]])
    row = Matrix.from_rows([[5, 6]])
    dst = Matrix(3, 2)
    dst.append_row(src, row)
    assert dst.tolist() == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    with pytest.raises(ValueError):
        dst.append_row(src, Matrix(2, 2))


def test_format_layout():
    m = Matrix.from_rows([[1, 2]])
    assert m.format("m") == "m = [\n    1.000000 2.000000 \n]\n"


def test_format_padding_prefixes_every_line():
    text = Matrix.from_rows([[1], [2]]).format("x", 4)
    assert all(line.startswith("    ") for line in text.splitlines())
    assert text.splitlines()[0].strip() == "x = ["