"""Vector, quaternion, transform, colour and geometry primitives for games and simulations."""

__version__ = "0.1.0"