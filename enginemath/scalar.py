"""Scalar helpers over sequences of numbers."""

from __future__ import annotations

from typing import Iterable


def max_abs_index(values: Iterable[float]) -> int:
    """Index of the value with the largest magnitude, or -1 if empty."""
    index, best = -1, float("-inf")
    for i, value in enumerate(values):
        magnitude = abs(value)
        if magnitude > best:
            index, best = i, magnitude
    return index


def min_abs_index(values: Iterable[float]) -> int:
    """Index of the value with the smallest magnitude, or -1 if empty."""
    index, best = -1, float("inf")
    for i, value in enumerate(values):
        magnitude = abs(value)
        if magnitude < best:
            index, best = i, magnitude
    return index