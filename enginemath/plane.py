"""Infinite planes in 3D."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from enginemath.ray import Ray
from enginemath.vector3 import Vector3


@dataclass(frozen=True)
class Plane:
    """A plane through ``point`` with a unit ``normal`` (normalised on construction)."""

    point: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    normal: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", self.normal.unit())

    @staticmethod
    def from_points(a: Vector3, b: Vector3, c: Vector3) -> Plane:
        """The plane through three points, its normal following the winding a, b, c."""
        return Plane(a, (b - a).cross(c - a))

    def distance_to_point(self, p: Vector3) -> float:
        """Signed distance, positive on the side the normal points to."""
        return self.normal.dot(p - self.point)

    def intersect_ray(self, ray: Ray) -> Optional[float]:
        """Distance along the ray to the plane, or None if parallel or behind."""
        denom = self.normal.dot(ray.direction)
        if abs(denom) > 1e-6:
            t = (self.point - ray.origin).dot(self.normal) / denom
            return t if t >= 0 else None
        return None

    def intersection(self, other: Plane) -> Optional[Ray]:
        """The line shared with another plane, or None if they are parallel."""
        direction = self.normal.cross(other.normal)
        denom = direction.length_squared()
        if denom < 1e-6:
            return None
        d1 = -self.normal.dot(self.point)
        d2 = -other.normal.dot(other.point)
        point = (other.normal * d1 - self.normal * d2).cross(direction) / denom
        return Ray(point, direction.unit())

    def flipped(self) -> Plane:
        return Plane(self.point, -self.normal)

    @staticmethod
    def xy() -> Plane:
        return Plane(Vector3(0, 0, 0), Vector3(0, 0, 1))

    @staticmethod
    def yz() -> Plane:
        return Plane(Vector3(0, 0, 0), Vector3(1, 0, 0))

    @staticmethod
    def zx() -> Plane:
        return Plane(Vector3(0, 0, 0), Vector3(0, 1, 0))

    @staticmethod
    def x_negative_y() -> Plane:
        return Plane(Vector3(0, 0, 0), Vector3(0, 0, -1))

    @staticmethod
    def y_negative_z() -> Plane:
        return Plane(Vector3(0, 0, 0), Vector3(-1, 0, 0))

    @staticmethod
    def z_negative_x() -> Plane:
        return Plane(Vector3(0, 0, 0), Vector3(0, -1, 0))