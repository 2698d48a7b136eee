import math

import pytest

from enginemath.quaternion import Quaternion
from enginemath.transform import Transform
from enginemath.vector3 import Vector3


def _close(a, b):
    assert tuple(a) == pytest.approx(tuple(b), abs=1e-9)


def _close_rows(a, b):
    for row_a, row_b in zip(a.rows, b.rows):
        assert row_a == pytest.approx(row_b, abs=1e-9)


def test_identity_leaves_point_unchanged():
    p = Vector3(1, -2, 3)
    assert Transform().transform_point(p) == p


def test_getitem_reads_entries():
    t = Transform()
    assert t[0, 0] == 1.0 and t[0, 1] == 0.0 and t[3, 3] == 1.0


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Transform(((1, 0), (0, 1)))


def test_translation_round_trip():
    v = Vector3(4, 5, 6)
    assert Transform().with_translation(v).translation == v


def test_add_and_sub_translation():
    v = Vector3(1, 2, 3)
    t = Transform() + v
    assert t.transform_point(Vector3.ZERO) == v
    assert (t - v).translation == Vector3.ZERO


def test_transform_vector_ignores_translation():
    t = Transform() + Vector3(9, 9, 9)
    assert t.transform_vector(Vector3.UNIT_X) == Vector3.UNIT_X


def test_scale_round_trip():
    s = Vector3(2, 3, 4)
    assert Transform().with_scale(s).scale == s


def test_rotation_round_trip():
    q = Quaternion.from_axis_angle(Vector3(1, 2, 3).unit(), 0.8)
    _close(Transform().with_rotation(q).rotation, q)


def test_rotation_matches_quaternion_rotate():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Y, 1.1)
    v = Vector3(1, 2, 3)
    _close(Transform().with_rotation(q).transform_point(v), q.rotate(v))


def test_inverse_round_trip():
    q = Quaternion.from_axis_angle(Vector3(0, 1, 1).unit(), 0.5)
    t = Transform().with_rotation(q).with_translation(Vector3(3, -1, 2))
    p = Vector3(7, 8, 9)
    _close(t.inverse().transform_point(t.transform_point(p)), p)
    _close_rows(t * t.inverse(), Transform())


def test_inverse_of_singular_raises():
    with pytest.raises(ValueError):
        Transform().with_scale(Vector3(0, 1, 1)).inverse()


def test_inverse_of_projective_raises():
    with pytest.raises(ValueError):
        Transform.perspective_projection(math.pi / 2, 1.0, 0.1, 100.0).inverse()


def test_composition_applies_left_first():
    a = Transform() + Vector3(1, 0, 0)
    b = Transform().with_scale(Vector3(2, 2, 2))
    p = Vector3(1, 1, 1)
    _close((a * b).transform_point(p), b.transform_point(a.transform_point(p)))
    _close((b * a).transform_point(p), a.transform_point(b.transform_point(p)))


def test_scalar_multiplication():
    t = Transform() * 3
    assert t[0, 0] == 3 and t[3, 3] == 3 and t[0, 1] == 0


def test_lerp_endpoints():
    a = Transform()
    b = Transform().with_scale(Vector3(2, 3, 4)) + Vector3(1, 1, 1)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_orthographic_maps_corner():
    t = Transform.orthographic_projection(-2, 2, -1, 1, 0.5, 10)
    _close(t.transform_point(Vector3(2, 1, -0.5)), Vector3(1, 1, -1))


def test_perspective_bottom_row():
    t = Transform.perspective_projection(math.pi / 3, 1.5, 0.1, 100.0)
    assert t.rows[3] == (0.0, 0.0, -1.0, 0.0)


def test_symmetric_offcenter_matches_perspective():
    near, far = 0.5, 50.0
    persp = Transform.perspective_projection(math.pi / 2, 1.0, near, far)
    off = Transform.offcenter_perspective_projection(-near, near, -near, near, near, far)
    _close_rows(off, persp)