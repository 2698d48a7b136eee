import pytest

from enginemath.color import Color
from enginemath.vector4 import Vector4


def _approx(color):
    return pytest.approx((color.r, color.g, color.b, color.a), abs=1e-9)


def _channels(color):
    return (color.r, color.g, color.b, color.a)


def test_default_is_white():
    assert Color() == Color.white()


def test_transparent_has_zero_alpha():
    assert Color.transparent().a == 0.0
    assert Color.black().a == 1.0


def test_from_hex_primaries():
    assert Color.from_hex(0xFF0000) == Color.red()
    assert Color.from_hex(0x00FF00) == Color.green()
    assert Color.from_hex(0x0000FF) == Color.blue()


def test_hex_round_trip():
    for value in (0xFF00FF, 0x00FFFF, 0xFFFFFF, 0x000000):
        assert Color.from_hex(value).to_hex() == value


def test_to_abgr_byte_order():
    assert Color.red().to_abgr() == 0xFF0000FF
    assert Color.transparent().to_abgr() == 0


def test_to_hex_ignores_alpha():
    assert Color(1.0, 0.0, 0.0, 0.0).to_hex() == Color.red().to_hex()


def test_from_hsv_primaries():
    assert _channels(Color.from_hsv(0, 1, 1)) == _approx(Color.red())
    assert _channels(Color.from_hsv(120, 1, 1)) == _approx(Color.green())
    assert _channels(Color.from_hsv(240, 1, 1)) == _approx(Color.blue())


def test_from_hsv_zero_saturation_is_grey_and_keeps_alpha():
    c = Color.from_hsv(200, 0, 0.5, 0.25)
    assert c == Color(0.5, 0.5, 0.5, 0.25)


def test_vector4_round_trip():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert Color.from_vector4(c.to_vector4()) == c
    assert c.to_vector4() == Vector4(0.1, 0.2, 0.3, 0.4)


def test_lerp_endpoints():
    a, b = Color.red(), Color.transparent()
    assert Color.lerp(a, b, 0) == a
    assert Color.lerp(a, b, 1) == b