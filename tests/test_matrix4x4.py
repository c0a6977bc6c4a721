import pytest
from hypothesis import given, strategies as st

from cgl.matrix4x4 import Matrix4x4, outer
from cgl.vector4d import Vector4D, dot

DATA = [
    4.0, 1.0, 0.0, 2.0,
    -1.0, 5.0, 1.0, 0.0,
    0.5, 0.0, 3.0, -1.0,
    2.0, 1.0, 0.0, 6.0,
]
IDENTITY_ENTRIES = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]

small = st.integers(min_value=-9, max_value=9).map(float)
sixteen = st.lists(small, min_size=16, max_size=16)
four = st.tuples(small, small, small, small).map(lambda t: Vector4D(*t))


def _entries(m):
    return [m[i, j] for i in range(4) for j in range(4)]


def test_default_is_zero():
    m = Matrix4x4()
    assert m.norm() == 0.0
    assert m != Matrix4x4.identity()


def test_identity_entries_and_det():
    m = Matrix4x4.identity()
    assert all(m[i, j] == (1.0 if i == j else 0.0) for i in range(4) for j in range(4))
    assert m.det() == 1.0


def test_row_major_construction():
    m = Matrix4x4(DATA)
    assert all(m[i, j] == DATA[i * 4 + j] for i in range(4) for j in range(4))
    assert Matrix4x4(*DATA) == m


def test_column_access():
    m = Matrix4x4(DATA)
    assert m.column(1) == Vector4D(DATA[1], DATA[5], DATA[9], DATA[13])
    assert m[3] == m.column(3)


def test_wrong_arity():
    with pytest.raises(TypeError):
        Matrix4x4(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Matrix4x4([1.0] * 9)


def test_setitem():
    m = Matrix4x4()
    m[2, 1] = 3.5
    assert m[2, 1] == 3.5
    m[0] = Vector4D(1.0, 2.0, 3.0, 4.0)
    assert m.column(0) == Vector4D(1.0, 2.0, 3.0, 4.0)


def test_zero_fills():
    m = Matrix4x4(DATA)
    m.zero(2.0)
    assert all(m[i, j] == 2.0 for i in range(4) for j in range(4))
    m.zero()
    assert m == Matrix4x4()


def test_str_format():
    assert str(Matrix4x4.identity()) == (
        "[ 1 0 0 0 ]\n[ 0 1 0 0 ]\n[ 0 0 1 0 ]\n[ 0 0 0 1 ]\n"
    )


def test_inverse_round_trip():
    m = Matrix4x4(DATA)
    inverse = m.inv()
    left = inverse * m
    right = m * inverse
    assert _entries(left) == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)
    assert _entries(right) == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)


def test_singular_inverse_raises():
    m = Matrix4x4([1.0, 2.0, 3.0, 4.0] * 4)
    with pytest.raises(ZeroDivisionError):
        m.inv()


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4x4.identity() / 0.0


def test_vector_product_selects_column():
    m = Matrix4x4(DATA)
    assert m * Vector4D(0.0, 0.0, 1.0, 0.0) == m.column(2)


def test_identity_is_neutral():
    m = Matrix4x4(DATA)
    assert Matrix4x4.identity() * m == m
    assert m * Matrix4x4.identity() == m


@given(four, four, four)
def test_outer_product(u, v, w):
    r = outer(u, v) * w
    d = dot(v, w)
    assert [r[k] for k in range(4)] == pytest.approx([u[k] * d for k in range(4)])


@given(sixteen)
def test_transpose_involution_and_det(data):
    m = Matrix4x4(data)
    assert m.transpose().transpose() == m
    assert m.transpose().det() == pytest.approx(m.det())
    assert all(m.transpose()[i, j] == m[j, i] for i in range(4) for j in range(4))


@given(sixteen, sixteen)
def test_det_multiplicative(a, b):
    ma, mb = Matrix4x4(a), Matrix4x4(b)
    assert (ma * mb).det() == pytest.approx(ma.det() * mb.det(), rel=1e-9, abs=1e-6)


@given(sixteen, sixteen)
def test_product_matches_column_action(a, b):
    ma, mb = Matrix4x4(a), Matrix4x4(b)
    assert all((ma * mb).column(j) == ma * mb.column(j) for j in range(4))


@given(sixteen, sixteen)
def test_add_sub_neg(a, b):
    ma, mb = Matrix4x4(a), Matrix4x4(b)
    assert (ma + mb) - mb == ma
    assert ma - ma == ma + (-ma)
    assert (ma + mb)[1, 2] == ma[1, 2] + mb[1, 2]


@given(sixteen, small)
def test_scalar_mul_both_sides(a, c):
    m = Matrix4x4(a)
    assert c * m == m * c
    assert all((m * c)[i, j] == m[i, j] * c for i in range(4) for j in range(4))


@given(sixteen)
def test_norm_matches_entries(a):
    assert Matrix4x4(a).norm() == pytest.approx(sum(v * v for v in a) ** 0.5)