"""Two-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def perpendicular(self) -> Vector2:
        """The vector rotated a quarter turn counter-clockwise."""
        return Vector2(-self.y, self.x)

    def cross(self, other: Vector2) -> Vector2:
        z = self.x * other.y - self.y * other.x
        return Vector2(z, self.y * other.x - self.x * other.y)

    def reflect(self, normal: Vector2) -> Vector2:
        return self - normal * (2 * self.dot(normal))

    def project_onto(self, other: Vector2) -> Vector2:
        other_sq = other.dot(other)
        if other_sq == 0:
            return Vector2(0, 0)
        return other * (self.dot(other) / other_sq)

    def lerp(self, other: Vector2, t: float) -> Vector2:
        return Vector2(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def intersection(self, other: Vector2) -> tuple[Vector2, float]:
        """Return the intersection point and its distance parameter.

        Parallel directions give the zero vector and a distance of 0.
        """
        denom = self.x * other.y - self.y * other.x
        if denom == 0:
            return Vector2(0, 0), 0
        t = (other.x * self.y - other.y * self.x) / denom
        return Vector2(self.x * t, self.y * t), t

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def unit(self) -> Vector2:
        """The vector scaled to length 1, or zero for the zero vector."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2(0, 0)
        return Vector2(self.x / mag, self.y / mag)