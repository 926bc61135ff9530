import pytest

from zerozen.matrix import Matrix


def assert_matrix_approx_eq(m1, m2, epsilon=1e-9):
    assert m1.rows == m2.rows
    assert m1.cols == m2.cols
    for a, b in zip(m1.data, m2.data):
        assert abs(a - b) < epsilon


def test_new():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert m.rows == 2
    assert m.cols == 2
    assert m.data == [1.0, 2.0, 3.0, 4.0]
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0, 2.0, 3.0])


def test_from_rows():
    m = Matrix.from_rows([[0, 0], [1, 0], [0, 1], [1, 1]])
    assert m.shape() == (4, 2)
    assert m.data == [0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0]
    single = Matrix.from_rows([[1, 2, 3]])
    assert single.shape() == (1, 3)


def test_from_rows_ragged():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1.0, 2.0], [3.0]])
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_get_set():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert m.get(0, 0) == 1.0
    assert m.get(1, 1) == 4.0
    m.set(0, 0, 10.0)
    assert m.get(0, 0) == 10.0
    with pytest.raises(IndexError):
        m.get(2, 0)
    with pytest.raises(IndexError):
        m.set(0, 2, 5.0)


def test_shape():
    assert Matrix(3, 2, [1.0] * 6).shape() == (3, 2)


def test_zeros():
    m = Matrix.zeros(2, 3)
    assert (m.rows, m.cols) == (2, 3)
    assert m.data == [0.0] * 6


def test_ones():
    m = Matrix.ones(2, 3)
    assert (m.rows, m.cols) == (2, 3)
    assert m.data == [1.0] * 6


def test_fill():
    m = Matrix.fill(2, 2, 7.0)
    assert (m.rows, m.cols) == (2, 2)
    assert m.data == [7.0, 7.0, 7.0, 7.0]


def test_identity():
    m = Matrix.identity(3)
    assert (m.rows, m.cols) == (3, 3)
    assert m.data == [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_random():
    m = Matrix.random(2, 2, 0.0, 1.0)
    assert (m.rows, m.cols) == (2, 2)
    assert len(m.data) == 4
    assert all(0.0 <= v < 1.0 for v in m.data)


def test_random_invalid_range():
    with pytest.raises(ValueError):
        Matrix.random(2, 2, 1.0, 1.0)


def test_map():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert m.map(lambda x: x * 2.0).data == [2.0, 4.0, 6.0, 8.0]


def test_add():
    m1 = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    m2 = Matrix(2, 2, [5.0, 6.0, 7.0, 8.0])
    assert m1.add(m2).data == [6.0, 8.0, 10.0, 12.0]
    with pytest.raises(ValueError):
        m1.add(Matrix(2, 1, [1.0, 2.0]))


def test_sub():
    m1 = Matrix(2, 2, [5.0, 6.0, 7.0, 8.0])
    m2 = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert m1.sub(m2).data == [4.0, 4.0, 4.0, 4.0]
    with pytest.raises(ValueError):
        m1.sub(Matrix(1, 2, [1.0, 2.0]))


def test_hadamard():
    m1 = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    m2 = Matrix(2, 2, [5.0, 6.0, 7.0, 8.0])
    assert m1.hadamard(m2).data == [5.0, 12.0, 21.0, 32.0]
    with pytest.raises(ValueError):
        m1.hadamard(Matrix(2, 1, [1.0, 2.0]))


def test_mul():
    m1 = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    m2 = Matrix(3, 2, [7.0, 8.0, 9.0, 10.0, 11.0, 12.0])
    result = m1.mul(m2)
    assert (result.rows, result.cols) == (2, 2)
    assert_matrix_approx_eq(result, Matrix(2, 2, [58.0, 64.0, 139.0, 154.0]))
    with pytest.raises(ValueError):
        m1.mul(Matrix(2, 2, [1.0, 2.0, 3.0, 4.0]))


def test_mul_identity():
    m = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert m.mul(Matrix.identity(3)) == m
    assert Matrix.identity(2).mul(m) == m


def test_dot():
    row = Matrix(1, 3, [1.0, 2.0, 3.0])
    col = Matrix(3, 1, [4.0, 5.0, 6.0])
    assert row.dot(col) == 32.0
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0] * 4).dot(row)
    with pytest.raises(ValueError):
        row.dot(Matrix(1, 2, [1.0, 2.0]))


def test_transpose():
    m = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    t = m.transpose()
    assert (t.rows, t.cols) == (3, 2)
    assert t.data == [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]
    sq = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0]).transpose()
    assert (sq.rows, sq.cols) == (2, 2)
    assert sq.data == [1.0, 3.0, 2.0, 4.0]


def test_transpose_twice_is_identity():
    m = Matrix(3, 2, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert m.transpose().transpose() == m


def test_split_column():
    m = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    column, rest = m.split_column(1)
    assert column == Matrix(2, 1, [2.0, 5.0])
    assert rest == Matrix(2, 2, [1.0, 3.0, 4.0, 6.0])
    with pytest.raises(IndexError):
        m.split_column(3)


def test_scale():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert m.scale(2.0).data == [2.0, 4.0, 6.0, 8.0]


def test_add_scalar():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert m.add_scalar(10.0).data == [11.0, 12.0, 13.0, 14.0]


def test_sub_scalar():
    m = Matrix(2, 2, [10.0, 11.0, 12.0, 13.0])
    assert m.sub_scalar(5.0).data == [5.0, 6.0, 7.0, 8.0]


def test_div_scalar():
    m = Matrix(2, 2, [10.0, 20.0, 30.0, 40.0])
    assert m.div_scalar(10.0).data == [1.0, 2.0, 3.0, 4.0]
    with pytest.raises(ZeroDivisionError):
        Matrix(1, 1, [1.0]).div_scalar(0.0)


def test_sum_rows():
    m = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    s = m.sum_rows()
    assert (s.rows, s.cols) == (2, 1)
    assert s.data == [6.0, 15.0]


def test_sum_cols():
    m = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    s = m.sum_cols()
    assert (s.rows, s.cols) == (1, 3)
    assert s.data == [5.0, 7.0, 9.0]


def test_sum_all():
    assert Matrix(2, 2, [1.0, 2.0, 3.0, 4.0]).sum_all() == 10.0


def test_add_bias_vector():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    bias = Matrix(1, 2, [10.0, 20.0])
    assert m.add_bias_vector(bias).data == [11.0, 22.0, 13.0, 24.0]
    with pytest.raises(ValueError):
        m.add_bias_vector(Matrix(2, 1, [1.0, 2.0]))
    with pytest.raises(ValueError):
        m.add_bias_vector(Matrix(1, 3, [1.0, 2.0, 3.0]))


def test_str():
    m = Matrix(2, 2, [1.0, 2.5, -3.0, 0.1234])
    assert str(m) == "[\n   1.000    2.500 \n  -3.000    0.123 \n]"


def test_eq():
    assert Matrix(1, 2, [1.0, 2.0]) == Matrix(1, 2, [1.0, 2.0])
    assert not Matrix(1, 2, [1.0, 2.0]) == Matrix(2, 1, [1.0, 2.0])
    assert not Matrix(1, 2, [1.0, 2.0]) == Matrix(1, 2, [1.0, 3.0])