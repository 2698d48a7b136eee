"""Axis-aligned 2D rectangles given by their edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from enginemath.vector2 import Vector2


@dataclass(frozen=True)
class Rect:
    """A rectangle from (left, top) to (right, bottom), y growing downward."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @staticmethod
    def from_min_max(minimum: Vector2, maximum: Vector2) -> Rect:
        return Rect(minimum.x, minimum.y, maximum.x, maximum.y)

    @property
    def min(self) -> Vector2:
        return Vector2(self.left, self.top)

    @property
    def max(self) -> Vector2:
        return Vector2(self.right, self.bottom)

    def contains(self, point: Vector2) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def intersects(self, other: Rect) -> bool:
        return not (
            other.left > self.right
            or other.right < self.left
            or other.top > self.bottom
            or other.bottom < self.top
        )

    def area(self) -> float:
        return (self.right - self.left) * (self.bottom - self.top)

    def size(self) -> Vector2:
        return Vector2(self.right - self.left, self.bottom - self.top)

    def center(self) -> Vector2:
        return Vector2((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    @staticmethod
    def from_center_size(center: Vector2, size: Vector2) -> Rect:
        half_x, half_y = size.x / 2, size.y / 2
        return Rect(center.x - half_x, center.y - half_y, center.x + half_x, center.y + half_y)

    @staticmethod
    def containing(first: Rect, second: Rect) -> Rect:
        """The smallest rectangle enclosing both rectangles."""
        return Rect(
            min(first.left, second.left),
            min(first.top, second.top),
            max(first.right, second.right),
            max(first.bottom, second.bottom),
        )

    @staticmethod
    def containing_points(points: Iterable[Vector2]) -> Rect:
        """The smallest rectangle enclosing the points; empty input gives a zero rect."""
        points = list(points)
        if not points:
            return Rect(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return Rect(min(xs), min(ys), max(xs), max(ys))