"""Dimensions made of a scale of the parent size plus an offset."""

from __future__ import annotations

from dataclasses import dataclass, field

from enginemath.vector2 import Vector2


@dataclass(frozen=True)
class UDim:
    """A one-dimensional size: ``scale * parent + offset``."""

    scale: float = 0.0
    offset: float = 0.0

    def resolve(self, parent_size: float) -> float:
        return self.scale * parent_size + self.offset

    def __add__(self, other: UDim) -> UDim:
        return UDim(self.scale + other.scale, self.offset + other.offset)

    def __sub__(self, other: UDim) -> UDim:
        return UDim(self.scale - other.scale, self.offset - other.offset)

    def __mul__(self, scalar: float) -> UDim:
        return UDim(self.scale * scalar, self.offset * scalar)

    def __truediv__(self, scalar: float) -> UDim:
        return UDim(self.scale / scalar, self.offset / scalar)


@dataclass(frozen=True)
class UDim2:
    """A two-dimensional size or position built from two UDims."""

    x: UDim = field(default_factory=UDim)
    y: UDim = field(default_factory=UDim)

    @staticmethod
    def from_components(x_scale: float, x_offset: float, y_scale: float, y_offset: float) -> UDim2:
        return UDim2(UDim(x_scale, x_offset), UDim(y_scale, y_offset))

    def resolve(self, parent_size: Vector2) -> Vector2:
        return Vector2(self.x.resolve(parent_size.x), self.y.resolve(parent_size.y))

    def __add__(self, other: UDim2) -> UDim2:
        return UDim2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: UDim2) -> UDim2:
        return UDim2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> UDim2:
        return UDim2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> UDim2:
        return UDim2(self.x / scalar, self.y / scalar)