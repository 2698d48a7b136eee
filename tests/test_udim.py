import pytest

from enginemath.udim import UDim, UDim2
from enginemath.vector2 import Vector2


def test_udim_defaults_are_zero():
    assert UDim() == UDim(0, 0)
    assert UDim().resolve(500) == 0


def test_udim_resolve_pure_offset_and_pure_scale():
    assert UDim(0, 12).resolve(999) == 12
    assert UDim(1, 0).resolve(640) == 640


def test_udim_add_subtract_round_trip():
    a, b = UDim(0.25, 10), UDim(0.5, -3)
    assert (a + b) - b == a


def test_udim_multiply_divide_round_trip():
    a = UDim(0.5, 8)
    assert (a * 4) / 4 == a


def test_udim_augmented_assignment():
    a = UDim(1, 1)
    a += UDim(1, 1)
    assert a == UDim(1, 1) * 2


def test_udim_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        UDim(1, 1) / 0


def test_udim2_from_components():
    u = UDim2.from_components(0.1, 2, 0.3, 4)
    assert u.x == UDim(0.1, 2)
    assert u.y == UDim(0.3, 4)


def test_udim2_resolve():
    u = UDim2.from_components(1, 0, 0, 5)
    assert u.resolve(Vector2(80, 60)) == Vector2(80, 5)


def test_udim2_arithmetic_round_trips():
    a = UDim2.from_components(0.5, 10, 0.25, -4)
    b = UDim2.from_components(0.5, 1, 0.5, 2)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert a != b