import pytest

from enginemath.color import Color
from enginemath.sequences import (
    ColorSequence,
    ColorSequenceKeypoint,
    NumberSequence,
    NumberSequenceKeypoint,
)


def _colors():
    return ColorSequence(
        [
            ColorSequenceKeypoint(0.0, Color.red()),
            ColorSequenceKeypoint(1.0, Color.blue()),
            ColorSequenceKeypoint(2.0, Color.green()),
        ]
    )


def test_empty_color_sequence_is_opaque_black():
    assert ColorSequence().value_at(0.5) == Color(0, 0, 0, 1)


def test_color_clamps_before_and_after():
    seq = _colors()
    assert seq.value_at(-3.0) == Color.red()
    assert seq.value_at(10.0) == Color.green()


def test_color_exact_keypoint():
    assert _colors().value_at(1.0) == Color.blue()


def test_color_interpolates_within_segment():
    seq = _colors()
    assert seq.value_at(1.25) == Color.lerp(Color.blue(), Color.green(), 0.25)
    assert seq.value_at(0.5) == Color.lerp(Color.red(), Color.blue(), 0.5)


def test_number_sequence_empty_is_zero():
    assert NumberSequence().value_at(3.0) == 0.0


def test_number_sequence_clamps_and_hits_keypoints():
    seq = NumberSequence(
        [NumberSequenceKeypoint(0.0, 2.0), NumberSequenceKeypoint(4.0, 10.0)]
    )
    assert seq.value_at(-1.0) == 2.0
    assert seq.value_at(9.0) == 10.0
    assert seq.value_at(0.0) == 2.0


def test_number_sequence_midpoint_is_average():
    seq = NumberSequence(
        [NumberSequenceKeypoint(0.0, 2.0), NumberSequenceKeypoint(4.0, 10.0)]
    )
    assert seq.value_at(2.0) == pytest.approx((2.0 + 10.0) / 2)


def test_number_sequence_is_monotonic_between_rising_keypoints():
    seq = NumberSequence(
        [
            NumberSequenceKeypoint(0.0, 0.0),
            NumberSequenceKeypoint(1.0, 5.0),
            NumberSequenceKeypoint(3.0, 7.0),
        ]
    )
    samples = [seq.value_at(t / 10) for t in range(31)]
    assert samples == sorted(samples)


def test_keypoint_envelope_default():
    assert NumberSequenceKeypoint(1.0, 2.0).envelope == 0.0