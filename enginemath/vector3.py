"""Three-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from enginemath.vector2 import Vector2


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    UNIT_X: ClassVar[Vector3]
    UNIT_Y: ClassVar[Vector3]
    UNIT_Z: ClassVar[Vector3]

    @staticmethod
    def from_vector2(xy: Vector2, z: float = 0.0) -> Vector3:
        return Vector3(xy.x, xy.y, z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit(self) -> Vector3:
        """The vector scaled to length 1, or zero for the zero vector."""
        length = self.length()
        if length == 0:
            return Vector3(0, 0, 0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def lerp(self, other: Vector3, t: float) -> Vector3:
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def reflect(self, normal: Vector3) -> Vector3:
        return self - normal * (2 * self.dot(normal))

    def project_onto(self, other: Vector3) -> Vector3:
        other_sq = other.length_squared()
        if other_sq == 0:
            return Vector3(0, 0, 0)
        return other * (self.dot(other) / other_sq)

    def parallel(self, other: Vector3, tolerance: float = 1e-6) -> bool:
        return self.cross(other).length_squared() <= tolerance * tolerance

    def orthogonal(self, other: Vector3, tolerance: float = 1e-6) -> bool:
        return abs(self.dot(other)) <= tolerance


Vector3.ZERO = Vector3(0, 0, 0)
Vector3.ONE = Vector3(1, 1, 1)
Vector3.UNIT_X = Vector3(1, 0, 0)
Vector3.UNIT_Y = Vector3(0, 1, 0)
Vector3.UNIT_Z = Vector3(0, 0, 1)