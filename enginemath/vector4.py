"""Four-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from enginemath.vector2 import Vector2
from enginemath.vector3 import Vector3


@dataclass(frozen=True)
class Vector4:
    """An immutable 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    ZERO: ClassVar[Vector4]
    ONE: ClassVar[Vector4]
    UNIT_X: ClassVar[Vector4]
    UNIT_Y: ClassVar[Vector4]
    UNIT_Z: ClassVar[Vector4]
    UNIT_W: ClassVar[Vector4]

    @staticmethod
    def from_vector3(vec3: Vector3, w: float) -> Vector4:
        return Vector4(vec3.x, vec3.y, vec3.z, w)

    @staticmethod
    def from_vector2s(first: Vector2, second: Vector2) -> Vector4:
        return Vector4(first.x, first.y, second.x, second.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 4:
            raise IndexError("Vector4 index out of range")
        return (self.x, self.y, self.z, self.w)[index]

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vector4:
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector4:
        if scalar == 0:
            raise ZeroDivisionError("Division by zero in Vector4")
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def unit(self) -> Vector4:
        """The vector scaled to length 1; the zero vector raises ValueError."""
        length = self.length()
        if length == 0:
            raise ValueError("Cannot normalize zero-length vector")
        return self / length

    def dot(self, other: Vector4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def lerp(self, other: Vector4, t: float) -> Vector4:
        return self + (other - self) * t

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)


Vector4.ZERO = Vector4(0, 0, 0, 0)
Vector4.ONE = Vector4(1, 1, 1, 1)
Vector4.UNIT_X = Vector4(1, 0, 0, 0)
Vector4.UNIT_Y = Vector4(0, 1, 0, 0)
Vector4.UNIT_Z = Vector4(0, 0, 1, 0)
Vector4.UNIT_W = Vector4(0, 0, 0, 1)