import pytest

from enginemath.vector2 import Vector2
from enginemath.vector3 import Vector3


def test_from_vector2_defaults_z_to_zero():
    assert Vector3.from_vector2(Vector2(1, 2)) == Vector3(1, 2, 0)
    assert Vector3.from_vector2(Vector2(1, 2), 5) == Vector3(1, 2, 5)


def test_indexing():
    v = Vector3(4, 5, 6)
    assert [v[0], v[1], v[2]] == [4, 5, 6]
    with pytest.raises(IndexError):
        v[3]


def test_add_subtract_round_trip():
    a, b = Vector3(1, -2, 3), Vector3(0.5, 8, -1)
    assert (a + b) - b == a


def test_multiply_divide_round_trip():
    a = Vector3(2, -6, 10)
    assert (a * 2) / 2 == a


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 2, 3) / 0


def test_negation():
    v = Vector3(1, -2, 3)
    assert -v == Vector3(-1, 2, -3)
    assert v + (-v) == Vector3.ZERO


def test_length_and_unit():
    v = Vector3(2, 3, 6)
    assert v.length_squared() == v.dot(v)
    assert v.unit().length() == pytest.approx(1.0)
    assert Vector3.ZERO.unit() == Vector3.ZERO


def test_cross_of_axes():
    assert Vector3.UNIT_X.cross(Vector3.UNIT_Y) == Vector3.UNIT_Z


def test_cross_is_orthogonal_to_inputs():
    a, b = Vector3(1, 2, 3), Vector3(-4, 0, 5)
    c = a.cross(b)
    assert c.dot(a) == 0
    assert c.dot(b) == 0


def test_lerp_endpoints():
    a, b = Vector3(1, 2, 3), Vector3(-3, 7, 0)
    assert a.lerp(b, 0) == a
    assert a.lerp(b, 1) == b


def test_reflect_and_project():
    assert Vector3(1, -1, 2).reflect(Vector3.UNIT_Y) == Vector3(1, 1, 2)
    assert Vector3(3, 4, 5).project_onto(Vector3(0, 0, 2)) == Vector3(0, 0, 5)
    assert Vector3(3, 4, 5).project_onto(Vector3.ZERO) == Vector3.ZERO


def test_parallel_and_orthogonal():
    v = Vector3(1, 2, 3)
    assert v.parallel(v * 3)
    assert not v.parallel(Vector3.UNIT_X)
    assert Vector3.UNIT_X.orthogonal(Vector3.UNIT_Z)
    assert not v.orthogonal(v)