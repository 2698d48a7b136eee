"""Oriented boxes placed by a transform."""

from __future__ import annotations

from dataclasses import dataclass, field

from enginemath.transform import Transform
from enginemath.vector3 import Vector3


@dataclass(frozen=True)
class Cuboid:
    """A box of ``size`` centred on the origin of its ``transform``."""

    transform: Transform = field(default_factory=Transform)
    size: Vector3 = field(default_factory=lambda: Vector3(1, 1, 1))

    def min_corner(self) -> Vector3:
        half = self.size * 0.5
        return self.transform.transform_point(-half)

    def max_corner(self) -> Vector3:
        half = self.size * 0.5
        return self.transform.transform_point(half)

    def contains_point(self, point: Vector3) -> bool:
        local = self.transform.inverse().transform_point(point)
        half = self.size * 0.5
        return (
            -half.x <= local.x <= half.x
            and -half.y <= local.y <= half.y
            and -half.z <= local.z <= half.z
        )