"""Axis-aligned bounding boxes in 3D."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Union

from enginemath.vector3 import Vector3


@dataclass
class AABB:
    """A box spanning ``minimum`` to ``maximum``; mutable in place."""

    minimum: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    maximum: Vector3 = field(default_factory=lambda: Vector3.ZERO)

    def contains(self, other: Union[Vector3, AABB]) -> bool:
        """Whether a point, or a whole other box, lies inside (borders included)."""
        if isinstance(other, AABB):
            lo, hi = self.minimum, self.maximum
            return (
                other.minimum.x >= lo.x and other.maximum.x <= hi.x
                and other.minimum.y >= lo.y and other.maximum.y <= hi.y
                and other.minimum.z >= lo.z and other.maximum.z <= hi.z
            )
        return (
            self.minimum.x <= other.x <= self.maximum.x
            and self.minimum.y <= other.y <= self.maximum.y
            and self.minimum.z <= other.z <= self.maximum.z
        )

    def is_contained_by(self, other: AABB) -> bool:
        return other.contains(self)

    def intersects(self, other: AABB) -> bool:
        return (
            self.minimum.x <= other.maximum.x and self.maximum.x >= other.minimum.x
            and self.minimum.y <= other.maximum.y and self.maximum.y >= other.minimum.y
            and self.minimum.z <= other.maximum.z and self.maximum.z >= other.minimum.z
        )

    def union(self, other: AABB) -> AABB:
        return AABB(
            Vector3(*(min(a, b) for a, b in zip(self.minimum, other.minimum))),
            Vector3(*(max(a, b) for a, b in zip(self.maximum, other.maximum))),
        )

    def intersection(self, other: AABB) -> AABB:
        """The overlapping box, or a zero box when they do not touch."""
        if not self.intersects(other):
            return AABB.zero_box()
        return AABB(
            Vector3(*(max(a, b) for a, b in zip(self.minimum, other.minimum))),
            Vector3(*(min(a, b) for a, b in zip(self.maximum, other.maximum))),
        )

    def volume(self) -> float:
        size = self.size()
        return size.x * size.y * size.z

    def center(self) -> Vector3:
        return (self.minimum + self.maximum) / 2

    def size(self) -> Vector3:
        return self.maximum - self.minimum

    def expand(self, amount: Vector3) -> None:
        self.minimum = self.minimum - amount
        self.maximum = self.maximum + amount

    def translate(self, offset: Vector3) -> None:
        self.minimum = self.minimum + offset
        self.maximum = self.maximum + offset

    def scale(self, factor: float) -> None:
        """Scale the box about its centre."""
        center = self.center()
        half = self.size() * (factor / 2)
        self.minimum = center - half
        self.maximum = center + half

    def expand_to_fit(self, point: Vector3) -> None:
        self.minimum = Vector3(*(min(a, b) for a, b in zip(self.minimum, point)))
        self.maximum = Vector3(*(max(a, b) for a, b in zip(self.maximum, point)))

    @staticmethod
    def from_points(points: Iterable[Vector3]) -> AABB:
        """The tightest box around the points; no points give a zero box."""
        points = list(points)
        if not points:
            return AABB.zero_box()
        return AABB(
            Vector3(*(min(p[i] for p in points) for i in range(3))),
            Vector3(*(max(p[i] for p in points) for i in range(3))),
        )

    @staticmethod
    def infinite() -> AABB:
        """An inverted box (min at +inf, max at -inf) that any expansion overrides."""
        inf = math.inf
        return AABB(Vector3(inf, inf, inf), Vector3(-inf, -inf, -inf))

    @staticmethod
    def zero_box() -> AABB:
        return AABB(Vector3.ZERO, Vector3.ZERO)

    @staticmethod
    def unit_box() -> AABB:
        return AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))

    @staticmethod
    def from_center_size(center: Vector3, size: Vector3) -> AABB:
        half = size * 0.5
        return AABB(center - half, center + half)

    def quantize(self, grid_size: float) -> AABB:
        """The smallest grid-aligned box enclosing this one."""
        return AABB(
            Vector3(*(math.floor(v / grid_size) * grid_size for v in self.minimum)),
            Vector3(*(math.ceil(v / grid_size) * grid_size for v in self.maximum)),
        )