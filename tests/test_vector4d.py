import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from cgl.vector4d import Vector4D, dot

comp = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)
vectors = st.builds(Vector4D, comp, comp, comp, comp)
quads = st.tuples(comp, comp, comp, comp)


def test_three_components_leave_w_zero():
    v = Vector4D(1, 2, 3)
    assert v.w == 0


def test_filled():
    assert Vector4D.filled(2.5) == Vector4D(2.5, 2.5, 2.5, 2.5)


def test_getitem_and_setitem():
    v = Vector4D(1, 2, 3, 4)
    assert [v[i] for i in range(4)] == [1, 2, 3, 4]
    v[3] = 9.0
    assert v.w == 9.0
    with pytest.raises(IndexError):
        v[4]
    with pytest.raises(IndexError):
        v[4] = 0.0


@given(vectors, vectors)
def test_add_sub(a, b):
    assert a + b == Vector4D(a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w)
    assert a - b == Vector4D(a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w)


@given(quads)
def test_negation(t):
    v = Vector4D(*t)
    assert -(-v) == v
    assert (-v).w == -t[3]


@given(quads, comp)
def test_scalar_multiplication_commutes(t, c):
    v = Vector4D(*t)
    assert c * v == v * c


@given(quads, comp)
def test_division_inverts_multiplication(t, c):
    assume(abs(c) > 1e-2)
    v = Vector4D(*t)
    back = (v * c) / c
    for k in range(4):
        assert back[k] == pytest.approx(t[k], rel=1e-9, abs=1e-9)


def test_rcp_of_zero_is_infinite():
    r = Vector4D(0.0, -0.0, 2.0, 4.0).rcp()
    assert r.x == math.inf
    assert r.y == -math.inf
    assert r.z == 1 / 2.0


@given(vectors)
def test_norm2_is_self_dot(v):
    assert v.norm2() == pytest.approx(dot(v, v))
    assert v.norm() == pytest.approx(math.sqrt(dot(v, v)))


@given(vectors)
def test_normalize_gives_unit_length(v):
    assume(v.norm() > 1e-3)
    original = Vector4D(v.x, v.y, v.z, v.w)
    v.normalize()
    assert v.norm() == pytest.approx(1.0)
    assert dot(v, original) == pytest.approx(original.norm())


@given(quads)
def test_unit_drops_w_and_scales_by_4d_length(t):
    v = Vector4D(*t)
    length = v.norm()
    assume(length > 1e-3)
    u = v.unit()
    assert u.w == 0
    for k in range(3):
        assert u[k] == pytest.approx(t[k] / length)


def test_unit_of_pure_w_is_zero():
    assert Vector4D(0, 0, 0, 2).unit() == Vector4D()


def test_dot_of_filled():
    assert dot(Vector4D.filled(1.0), Vector4D(1, 2, 3, 4)) == 1 + 2 + 3 + 4