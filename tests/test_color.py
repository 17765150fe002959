"""Tests for the Color value and its serializations."""

import pytest

from color_fallback.color import Color, round_half_up


def test_to_hex_zero_pads_channels():
    assert Color(red=5, green=10, blue=255).to_hex() == "050aff"
    assert Color(red=0, green=0, blue=0).to_css_hex() == "#000000"


def test_to_hex_is_lowercase():
    assert Color(red=171, green=205, blue=239).to_hex() == "abcdef"


def test_argb_hex_prepends_alpha_byte():
    assert Color(red=255, green=127, blue=127, alpha=0.5).to_argb_hex() == "#80ff7f7f"
    assert Color(red=0, green=0, blue=0, alpha=0.0).to_argb_hex() == "#00000000"


def test_clamped_forces_fields_into_range():
    c = Color.clamped(300, -5, 12, 2.5)
    assert (c.red, c.green, c.blue, c.alpha) == (255, 0, 12, 1.0)


def test_out_of_range_construction_rejected():
    with pytest.raises(ValueError):
        Color(red=256, green=0, blue=0)
    with pytest.raises(ValueError):
        Color(red=0, green=0, blue=0, alpha=1.5)


def test_color_is_immutable():
    c = Color(red=1, green=2, blue=3)
    with pytest.raises(ValueError):
        c.red = 4


@pytest.mark.parametrize("x, expected", [(127.5, 128), (127.49, 127), (0.5, 1), (102.0, 102)])
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected
