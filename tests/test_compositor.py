"""Tests for source-over compositing."""

import pytest

from color_fallback.color import Color
from color_fallback.compositor import blend_channel, composite

BACKGROUNDS = [
    Color(red=255, green=255, blue=255),
    Color(red=0, green=0, blue=0),
    Color(red=12, green=200, blue=99),
]


@pytest.mark.parametrize("background", BACKGROUNDS)
@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (1, 128, 254), (77, 3, 190)])
def test_opaque_foreground_is_unchanged(background, rgb):
    fg = Color(red=rgb[0], green=rgb[1], blue=rgb[2], alpha=1.0)
    out = composite(fg, background)
    assert (out.red, out.green, out.blue) == rgb


@pytest.mark.parametrize("background", BACKGROUNDS)
def test_transparent_foreground_yields_background(background):
    fg = Color(red=90, green=10, blue=250, alpha=0.0)
    out = composite(fg, background)
    assert out == background


def test_half_red_over_white_floors():
    out = composite(Color(red=255, green=0, blue=0, alpha=0.5), Color(red=255, green=255, blue=255))
    assert out.to_css_hex() == "#ff7f7f"


def test_output_is_opaque():
    out = composite(Color(red=10, green=20, blue=30, alpha=0.3), Color(red=0, green=0, blue=0))
    assert out.alpha == 1.0


def test_blend_channel_caps_at_255():
    assert blend_channel(255, 255, 0.7) == 255
    assert blend_channel(0, 255, 0.4) == 153
