from enginemath.ray import Ray
from enginemath.vector3 import Vector3


def test_default_ray():
    ray = Ray()
    assert ray.origin == Vector3.ZERO
    assert ray.direction == Vector3.UNIT_Z


def test_direction_is_normalised():
    assert Ray(Vector3.ZERO, Vector3(0, 0, 5)).direction == Vector3.UNIT_Z


def test_get_point_moves_along_direction():
    ray = Ray(Vector3(1, 2, 3), Vector3(0, 2, 0))
    assert ray.get_point(4) == Vector3(1, 6, 3)
    assert ray.get_point(0) == ray.origin


def test_zero_direction_stays_at_origin():
    ray = Ray(Vector3(1, 1, 1), Vector3.ZERO)
    assert ray.get_point(10) == Vector3(1, 1, 1)