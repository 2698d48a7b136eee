from enginemath.rect import Rect
from enginemath.vector2 import Vector2


def test_from_min_max_matches_properties():
    r = Rect.from_min_max(Vector2(1, 2), Vector2(5, 8))
    assert r == Rect(1, 2, 5, 8)
    assert r.min == Vector2(1, 2)
    assert r.max == Vector2(5, 8)


def test_contains_is_inclusive():
    r = Rect(0, 0, 10, 10)
    assert r.contains(Vector2(0, 0))
    assert r.contains(Vector2(10, 10))
    assert not r.contains(Vector2(10.5, 5))


def test_intersects_touching_and_disjoint():
    r = Rect(0, 0, 10, 10)
    assert r.intersects(Rect(10, 10, 20, 20))
    assert not r.intersects(Rect(11, 0, 20, 10))


def test_area_equals_size_product():
    r = Rect(1, 2, 4, 9)
    size = r.size()
    assert r.area() == size.x * size.y
    assert size == Vector2(3, 7)


def test_from_center_size_round_trip():
    center, size = Vector2(5, -3), Vector2(4, 6)
    r = Rect.from_center_size(center, size)
    assert r.center() == center
    assert r.size() == size


def test_containing_two_rects():
    a, b = Rect(0, 0, 2, 2), Rect(-1, 1, 1, 5)
    union = Rect.containing(a, b)
    assert union == Rect(-1, 0, 2, 5)
    assert union.contains(a.min) and union.contains(b.max)


def test_containing_points():
    points = [Vector2(3, -1), Vector2(-2, 4), Vector2(0, 0)]
    r = Rect.containing_points(points)
    assert r == Rect(-2, -1, 3, 4)
    assert all(r.contains(p) for p in points)
    assert Rect.containing_points([]) == Rect(0, 0, 0, 0)