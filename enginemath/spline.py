"""Cubic Hermite splines through points with tangents."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from enginemath.vector3 import Vector3

# Five-point Gauss-Legendre abscissae and weights on [-1, 1].
_GAUSS_LEGENDRE = (
    (0.0, 0.5688889),
    (-0.5384693, 0.47862867),
    (0.5384693, 0.47862867),
    (-0.90617985, 0.23692688),
    (0.90617985, 0.23692688),
)


def _norm(v: Any) -> float:
    return math.sqrt(v.dot(v))


@dataclass(frozen=True)
class SplinePoint:
    """A control point with incoming and outgoing tangents (Vector2 or Vector3)."""

    position: Any = field(default_factory=Vector3)
    tangent_in: Any = field(default_factory=Vector3)
    tangent_out: Any = field(default_factory=Vector3)


@dataclass
class Spline:
    """A piecewise Hermite curve over its points, parameterised on [0, 1]."""

    points: list[SplinePoint] = field(default_factory=list)

    def sample(self, t: float) -> Any:
        """The position at ``t``, clamped to the ends; the zero 3D vector if empty."""
        if not self.points:
            return Vector3()
        if t <= 0.0:
            return self.points[0].position
        if t >= 1.0 or len(self.points) == 1:
            return self.points[-1].position
        scaled = t * (len(self.points) - 1)
        segment = int(scaled)
        u = scaled - segment
        p0, p1 = self.points[segment], self.points[segment + 1]
        u2, u3 = u * u, u * u * u
        h00 = 2 * u3 - 3 * u2 + 1
        h10 = u3 - 2 * u2 + u
        h01 = -2 * u3 + 3 * u2
        h11 = u3 - u2
        return p0.position * h00 + p0.tangent_out * h10 + p1.position * h01 + p1.tangent_in * h11

    def __getitem__(self, t: float) -> Any:
        return self.sample(t)

    def estimate_arc_length(self, samples_per_segment: int = 10) -> float:
        """Length of the polyline through evenly spaced samples of each segment."""
        if len(self.points) < 2:
            return 0.0
        segments = len(self.points) - 1
        length = 0.0
        for i in range(segments):
            previous = self.points[i].position
            for j in range(1, samples_per_segment + 1):
                current = self.sample((i + j / samples_per_segment) / segments)
                length += _norm(current - previous)
                previous = current
        return length

    def exact_arc_length(self) -> float:
        """Length by Gauss-Legendre quadrature of each segment's speed."""
        if len(self.points) < 2:
            return 0.0
        return sum(_segment_length(a, b) for a, b in zip(self.points, self.points[1:]))


def _segment_length(a: SplinePoint, b: SplinePoint) -> float:
    c0 = a.tangent_out
    c1 = (b.position - a.position) * 6.0 - a.tangent_out * 4.0 - b.tangent_in * 2.0
    c2 = (a.position - b.position) * 6.0 + (a.tangent_out + b.tangent_in) * 3.0
    total = 0.0
    for abscissa, weight in _GAUSS_LEGENDRE:
        t = 0.5 * (1.0 + abscissa)
        total += _norm(c0 + (c1 + c2 * t) * t) * weight
    return 0.5 * total