"""Simple 2D polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from enginemath.rect import Rect
from enginemath.vector2 import Vector2


@dataclass
class Polygon:
    """A closed polygon given by its vertices; mutable in place."""

    vertices: list[Vector2] = field(default_factory=list)

    def _edges(self):
        n = len(self.vertices)
        for i, v in enumerate(self.vertices):
            yield v, self.vertices[(i + 1) % n]

    def area(self) -> float:
        """Signed area; positive for counter-clockwise winding with y up."""
        return sum(a.x * b.y - b.x * a.y for a, b in self._edges()) * 0.5

    def perimeter(self) -> float:
        return sum((b - a).magnitude() for a, b in self._edges())

    def is_convex(self) -> bool:
        n = len(self.vertices)
        if n < 4:
            return True
        sign: Optional[bool] = None
        for i in range(n):
            v1, v2, v3 = self.vertices[i], self.vertices[(i + 1) % n], self.vertices[(i + 2) % n]
            cross = (v2.x - v1.x) * (v3.y - v2.y) - (v2.y - v1.y) * (v3.x - v2.x)
            if sign is None:
                sign = cross > 0
            elif (cross > 0) != sign:
                return False
        return True

    def contains_point(self, point: Vector2) -> bool:
        """Even-odd ray-casting test."""
        inside = False
        for vj, vi in zip(self.vertices[-1:] + self.vertices[:-1], self.vertices):
            if (vi.y > point.y) != (vj.y > point.y) and point.x < (
                (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
            ):
                inside = not inside
        return inside

    def ensure_clockwise(self) -> None:
        """Reverse the winding if the signed area is negative."""
        if self.area() < 0:
            self.vertices.reverse()

    def intersects(self, other: Polygon) -> bool:
        """Whether a vertex of either polygon lies inside the other."""
        return any(other.contains_point(v) for v in self.vertices) or any(
            self.contains_point(v) for v in other.vertices
        )

    def bounding_box(self) -> Rect:
        return Rect.containing_points(self.vertices)

    def centroid(self) -> Vector2:
        """Area centroid; a polygon of zero area raises ZeroDivisionError."""
        area = self.area()
        cx = cy = 0.0
        for a, b in self._edges():
            factor = a.x * b.y - b.x * a.y
            cx += (a.x + b.x) * factor
            cy += (a.y + b.y) * factor
        return Vector2(cx / (6 * area), cy / (6 * area))

    def translate(self, offset: Vector2) -> None:
        self.vertices = [v + offset for v in self.vertices]

    def rotate(self, angle: float, origin: Vector2 = Vector2(0, 0)) -> None:
        """Rotate counter-clockwise by ``angle`` radians about ``origin``."""
        cos_t, sin_t = math.cos(angle), math.sin(angle)
        rotated = []
        for v in self.vertices:
            x, y = v.x - origin.x, v.y - origin.y
            rotated.append(Vector2(origin.x + x * cos_t - y * sin_t, origin.y + x * sin_t + y * cos_t))
        self.vertices = rotated

    def rotate_around_centroid(self, angle: float) -> None:
        self.rotate(angle, self.centroid())

    @staticmethod
    def from_rect(rect: Rect) -> Polygon:
        return Polygon(
            [
                Vector2(rect.left, rect.top),
                Vector2(rect.right, rect.top),
                Vector2(rect.right, rect.bottom),
                Vector2(rect.left, rect.bottom),
            ]
        )

    @staticmethod
    def regular_polygon(sides: int, radius: float, center: Vector2 = Vector2(0, 0)) -> Polygon:
        """Vertices evenly spaced on a circle; fewer than 3 sides give an empty polygon."""
        if sides < 3:
            return Polygon()
        step = 2 * math.pi / sides
        return Polygon(
            [
                Vector2(center.x + radius * math.cos(i * step), center.y + radius * math.sin(i * step))
                for i in range(sides)
            ]
        )

    @staticmethod
    def star(
        points: int, inner_radius: float, outer_radius: float, center: Vector2 = Vector2(0, 0)
    ) -> Polygon:
        """A star alternating outer and inner vertices; fewer than 2 points give an empty polygon."""
        if points < 2:
            return Polygon()
        step = math.pi / points
        vertices = []
        for i in range(points * 2):
            r = outer_radius if i % 2 == 0 else inner_radius
            vertices.append(Vector2(center.x + r * math.cos(i * step), center.y + r * math.sin(i * step)))
        return Polygon(vertices)