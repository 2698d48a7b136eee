"""RGBA colours with float channels in the 0..1 range."""

from __future__ import annotations

import math
from dataclasses import dataclass

from enginemath.vector4 import Vector4


def _channel_byte(value: float) -> int:
    return int(value * 255.0) & 0xFF


@dataclass(frozen=True)
class Color:
    """An RGBA colour; defaults to opaque white."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @staticmethod
    def white() -> Color:
        return Color(1.0, 1.0, 1.0)

    @staticmethod
    def black() -> Color:
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def red() -> Color:
        return Color(1.0, 0.0, 0.0)

    @staticmethod
    def green() -> Color:
        return Color(0.0, 1.0, 0.0)

    @staticmethod
    def blue() -> Color:
        return Color(0.0, 0.0, 1.0)

    @staticmethod
    def transparent() -> Color:
        return Color(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_hex(hex_value: int) -> Color:
        """Build an opaque colour from a 0xRRGGBB value."""
        return Color(
            ((hex_value >> 16) & 0xFF) / 255.0,
            ((hex_value >> 8) & 0xFF) / 255.0,
            (hex_value & 0xFF) / 255.0,
            1.0,
        )

    @staticmethod
    def from_vector4(vec: Vector4) -> Color:
        return Color(vec.x, vec.y, vec.z, vec.w)

    def to_hex(self) -> int:
        """Pack as 0xRRGGBB, truncating each channel."""
        return (_channel_byte(self.r) << 16) | (_channel_byte(self.g) << 8) | _channel_byte(self.b)

    def to_abgr(self) -> int:
        """Pack as 0xAABBGGRR, truncating each channel."""
        return (
            (_channel_byte(self.a) << 24)
            | (_channel_byte(self.b) << 16)
            | (_channel_byte(self.g) << 8)
            | _channel_byte(self.r)
        )

    @staticmethod
    def from_hsv(hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
        """Build a colour from hue in degrees and saturation/value in 0..1."""
        h6 = hue / 360.0 * 6.0
        c = value * saturation
        x = c * (1.0 - abs(math.fmod(h6, 2.0) - 1.0))
        m = value - c
        if 0 <= h6 < 1:
            r, g, b = c, x, 0.0
        elif 1 <= h6 < 2:
            r, g, b = x, c, 0.0
        elif 2 <= h6 < 3:
            r, g, b = 0.0, c, x
        elif 3 <= h6 < 4:
            r, g, b = 0.0, x, c
        elif 4 <= h6 < 5:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x
        return Color(r + m, g + m, b + m, alpha)

    def to_vector4(self) -> Vector4:
        return Vector4(self.r, self.g, self.b, self.a)

    @staticmethod
    def lerp(a: Color, b: Color, t: float) -> Color:
        return Color(
            a.r + (b.r - a.r) * t,
            a.g + (b.g - a.g) * t,
            a.b + (b.b - a.b) * t,
            a.a + (b.a - a.a) * t,
        )