"""Spheres in 3D."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from enginemath.aabb import AABB
from enginemath.plane import Plane
from enginemath.vector3 import Vector3


@dataclass
class Sphere:
    """A sphere given by centre and radius; mutable in place."""

    center: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    radius: float = 1.0

    def contains(self, other: Union[Vector3, Sphere, AABB]) -> bool:
        """Whether a point, sphere or box lies wholly inside (surface included)."""
        if isinstance(other, Sphere):
            radius_diff = self.radius - other.radius
            dist_sq = (other.center - self.center).length_squared()
            return radius_diff >= 0 and dist_sq <= radius_diff * radius_diff
        if isinstance(other, AABB):
            lo, hi = other.minimum, other.maximum
            return all(
                self.contains(Vector3(cx, cy, cz))
                for cx in (lo.x, hi.x)
                for cy in (lo.y, hi.y)
                for cz in (lo.z, hi.z)
            )
        return (other - self.center).length_squared() <= self.radius * self.radius

    def is_contained_by(self, other: Union[Sphere, AABB]) -> bool:
        if isinstance(other, AABB):
            r = self.radius
            shrunken = AABB(
                other.minimum + Vector3(r, r, r),
                other.maximum - Vector3(r, r, r),
            )
            return shrunken.contains(self.center)
        return other.contains(self)

    def intersects(self, other: Sphere) -> bool:
        radius_sum = self.radius + other.radius
        return (other.center - self.center).length_squared() <= radius_sum * radius_sum

    def volume(self) -> float:
        return (4.0 / 3.0) * math.pi * self.radius ** 3

    def surface_area(self) -> float:
        return 4.0 * math.pi * self.radius * self.radius

    @staticmethod
    def lerp(a: Sphere, b: Sphere, t: float) -> Sphere:
        return Sphere(a.center.lerp(b.center, t), a.radius + (b.radius - a.radius) * t)

    @staticmethod
    def union(a: Sphere, b: Sphere) -> Sphere:
        """The smallest sphere enclosing both spheres."""
        diff = b.center - a.center
        dist_sq = diff.length_squared()
        radius_diff = b.radius - a.radius
        if radius_diff * radius_diff >= dist_sq:
            larger = a if a.radius > b.radius else b
            return Sphere(larger.center, larger.radius)
        dist = math.sqrt(dist_sq)
        new_radius = (dist + a.radius + b.radius) * 0.5
        if dist > 0:
            new_center = a.center + diff * ((new_radius - a.radius) / dist)
        else:
            new_center = a.center
        return Sphere(new_center, new_radius)

    def expand_to_fit(self, point: Vector3) -> None:
        """Grow and shift just enough to reach ``point``."""
        diff = point - self.center
        dist_sq = diff.length_squared()
        if dist_sq > self.radius * self.radius:
            dist = math.sqrt(dist_sq)
            new_radius = (self.radius + dist) * 0.5
            self.center = self.center + diff * ((new_radius - self.radius) / dist)
            self.radius = new_radius

    @staticmethod
    def from_points(points: Iterable[Vector3]) -> Sphere:
        """A bounding sphere grown point by point; no points give the unit sphere."""
        points = list(points)
        if not points:
            return Sphere(Vector3(0, 0, 0), 1.0)
        sphere = Sphere(points[0], 0.0)
        for point in points:
            diff = point - sphere.center
            dist_sq = diff.length_squared()
            if dist_sq > sphere.radius * sphere.radius:
                dist = math.sqrt(dist_sq)
                new_radius = (sphere.radius + dist) * 0.5
                if dist > 0:
                    sphere.center = sphere.center + diff * ((new_radius - sphere.radius) / dist)
                sphere.radius = new_radius
        return sphere

    def expand_to_touch(self, other: Sphere) -> None:
        """Grow and shift until this sphere reaches ``other``'s far side."""
        diff = other.center - self.center
        dist_sq = diff.length_squared()
        radius_sum = self.radius + other.radius
        if dist_sq > radius_sum * radius_sum:
            dist = math.sqrt(dist_sq)
            new_radius = (self.radius + dist + other.radius) * 0.5
            if dist > 0:
                self.center = self.center + diff * ((new_radius - self.radius) / dist)
            self.radius = new_radius

    def translate(self, translation: Vector3) -> None:
        self.center = self.center + translation

    def scale(self, factor: float) -> None:
        """Multiply the radius; non-positive factors are ignored."""
        if factor > 0:
            self.radius *= factor

    def tangent_plane(self, direction: Vector3) -> Plane:
        """The plane touching the sphere on the side ``direction`` points to."""
        unit = direction.unit()
        return Plane(self.center + unit * self.radius, unit)

    def intersection_plane(self, other: Sphere) -> Optional[Plane]:
        """The plane holding the circle where the spheres meet, or None if apart."""
        diff = other.center - self.center
        dist_sq = diff.length_squared()
        radius_sum = self.radius + other.radius
        if dist_sq > radius_sum * radius_sum:
            return None
        dist = math.sqrt(dist_sq)
        if dist == 0:
            return Plane(Vector3(self.radius, 0, 0), Vector3(1, 0, 0))
        d = (self.radius * self.radius - other.radius * other.radius + dist_sq) / (2 * dist)
        circle_center = self.center + diff * (d / dist)
        return Plane(circle_center, diff.unit())