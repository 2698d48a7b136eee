import pytest

from enginemath.spline import Spline, SplinePoint
from enginemath.vector2 import Vector2
from enginemath.vector3 import Vector3


def _line():
    d = Vector3(1, 0, 0)
    return Spline([SplinePoint(Vector3(0, 0, 0), d, d), SplinePoint(Vector3(1, 0, 0), d, d)])


def test_empty_spline():
    s = Spline()
    assert s.sample(0.5) == Vector3(0, 0, 0)
    assert s.estimate_arc_length() == 0.0
    assert s.exact_arc_length() == 0.0


def test_sample_clamps_to_ends():
    s = _line()
    assert s.sample(-1.0) == Vector3(0, 0, 0)
    assert s.sample(0.0) == Vector3(0, 0, 0)
    assert s.sample(2.0) == Vector3(1, 0, 0)


def test_single_point_spline():
    s = Spline([SplinePoint(Vector3(2, 2, 2))])
    assert s.sample(0.5) == Vector3(2, 2, 2)
    assert s.exact_arc_length() == 0.0


def test_straight_line_is_linear():
    s = _line()
    for t in (0.1, 0.25, 0.5, 0.9):
        p = s.sample(t)
        assert p.x == pytest.approx(t)
        assert p.y == pytest.approx(0.0)
    assert s[0.5].x == pytest.approx(0.5)


def test_passes_through_interior_points():
    z = Vector2(0, 0)
    pts = [SplinePoint(Vector2(0, 0), z, z), SplinePoint(Vector2(1, 2), z, z), SplinePoint(Vector2(3, 1), z, z)]
    s = Spline(pts)
    mid = s.sample(0.5)
    assert mid.x == pytest.approx(1.0)
    assert mid.y == pytest.approx(2.0)


def test_arc_lengths_of_straight_line():
    s = _line()
    assert s.exact_arc_length() == pytest.approx(1.0, abs=1e-6)
    assert s.estimate_arc_length() == pytest.approx(1.0, abs=1e-9)


def test_curved_lengths_agree_and_exceed_chord():
    pts = [
        SplinePoint(Vector3(0, 0, 0), Vector3(0, 2, 0), Vector3(0, 2, 0)),
        SplinePoint(Vector3(2, 0, 0), Vector3(0, -2, 0), Vector3(0, -2, 0)),
    ]
    s = Spline(pts)
    exact = s.exact_arc_length()
    estimate = s.estimate_arc_length(200)
    assert exact > 2.0
    assert estimate == pytest.approx(exact, rel=1e-3)
    assert s.estimate_arc_length(5) <= estimate + 1e-12