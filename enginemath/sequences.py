"""Keyframed colour and number sequences sampled by time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from enginemath.color import Color


class _Keyed(Protocol):
    time: float


def _locate(keypoints: Sequence[_Keyed], time: float) -> Optional[tuple[int, float]]:
    """Index of the segment holding ``time`` and the fraction along it."""
    for index, (first, second) in enumerate(zip(keypoints, keypoints[1:])):
        if first.time <= time <= second.time:
            span = second.time - first.time
            return index, (0.0 if span == 0 else (time - first.time) / span)
    return None


@dataclass(frozen=True)
class ColorSequenceKeypoint:
    """A colour pinned to a point in time."""

    time: float = 0.0
    value: Color = field(default_factory=Color)


@dataclass
class ColorSequence:
    """Colours interpolated linearly between keypoints sorted by time."""

    keypoints: list[ColorSequenceKeypoint] = field(default_factory=list)

    def value_at(self, time: float) -> Color:
        """The colour at ``time``; opaque black when there are no keypoints."""
        kps = self.keypoints
        if not kps:
            return Color(0, 0, 0, 1)
        if time <= kps[0].time:
            return kps[0].value
        if time >= kps[-1].time:
            return kps[-1].value
        found = _locate(kps, time)
        if found is None:
            return Color(0, 0, 0, 1)
        index, t = found
        return Color.lerp(kps[index].value, kps[index + 1].value, t)


@dataclass(frozen=True)
class NumberSequenceKeypoint:
    """A number pinned to a point in time, with an envelope."""

    time: float = 0.0
    value: float = 0.0
    envelope: float = 0.0


@dataclass
class NumberSequence:
    """Numbers interpolated linearly between keypoints sorted by time."""

    keypoints: list[NumberSequenceKeypoint] = field(default_factory=list)

    def value_at(self, time: float) -> float:
        """The value at ``time``; 0 when there are no keypoints."""
        kps = self.keypoints
        if not kps:
            return 0.0
        if time <= kps[0].time:
            return kps[0].value
        if time >= kps[-1].time:
            return kps[-1].value
        found = _locate(kps, time)
        if found is None:
            return 0.0
        index, t = found
        first, second = kps[index], kps[index + 1]
        return first.value + t * (second.value - first.value)