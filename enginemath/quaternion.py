"""Quaternions for representing 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from enginemath.vector3 import Vector3


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """The multiplicative inverse; a zero quaternion raises ValueError."""
        norm_sq = self.length_squared()
        if norm_sq == 0:
            raise ValueError("Cannot invert a zero-length quaternion")
        return self.conjugate() / norm_sq

    def normalize(self) -> Quaternion:
        """The quaternion scaled to length 1, or the identity for zero length."""
        length = self.length()
        if length == 0:
            return Quaternion(0, 0, 0, 1)
        return Quaternion(self.x / length, self.y / length, self.z / length, self.w / length)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def __mul__(self, other: Union[Quaternion, float]) -> Quaternion:
        if isinstance(other, Quaternion):
            return Quaternion(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)

    def __rmul__(self, scalar: float) -> Quaternion:
        return Quaternion(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __truediv__(self, scalar: float) -> Quaternion:
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return Quaternion(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate a vector by this quaternion."""
        result = self * Quaternion(v.x, v.y, v.z, 0) * self.inverse()
        return Vector3(result.x, result.y, result.z)

    def slerp(self, other: Quaternion, t: float) -> Quaternion:
        """Spherical interpolation towards ``other``."""
        cos_half = self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z
        if cos_half < 0:
            cos_half = -cos_half
        if abs(cos_half) >= 1.0:
            return Quaternion(self.x, self.y, self.z, self.w)
        half_theta = math.acos(cos_half)
        sin_half = math.sqrt(1.0 - cos_half * cos_half)
        if abs(sin_half) < 0.001:
            return Quaternion(
                self.x * 0.5 + other.x * 0.5,
                self.y * 0.5 + other.y * 0.5,
                self.z * 0.5 + other.z * 0.5,
                self.w * 0.5 + other.w * 0.5,
            ).normalize()
        ratio_a = math.sin((1 - t) * half_theta) / sin_half
        ratio_b = math.sin(t * half_theta) / sin_half
        return Quaternion(
            self.x * ratio_a + other.x * ratio_b,
            self.y * ratio_a + other.y * ratio_b,
            self.z * ratio_a + other.z * ratio_b,
            self.w * ratio_a + other.w * ratio_b,
        ).normalize()

    def lerp(self, other: Quaternion, t: float) -> Quaternion:
        """Component-wise interpolation, normalised."""
        return Quaternion(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
            self.w + (other.w - self.w) * t,
        ).normalize()

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(axis.x * s, axis.y * s, axis.z * s, math.cos(half)).normalize()

    @staticmethod
    def from_euler_angles(pitch: float, yaw: float, roll: float) -> Quaternion:
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return Quaternion(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        ).normalize()

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion(0, 0, 0, 1)