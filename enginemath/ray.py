"""A ray with an origin and a unit direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from enginemath.vector3 import Vector3


@dataclass(frozen=True)
class Ray:
    """A half-line; the direction is normalised on construction."""

    origin: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    direction: Vector3 = field(default_factory=lambda: Vector3.UNIT_Z)

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.unit())

    def get_point(self, distance: float) -> Vector3:
        return self.origin + self.direction.unit() * distance