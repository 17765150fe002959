"""
Source-over alpha compositing of a translucent color onto an opaque background.
"""

import math

from .color import Color


def blend_channel(fg: int, bg: int, alpha: float) -> int:
    """Floor of the alpha-weighted mix, capped at 255."""
    return min(255, int(math.floor((1 - alpha) * bg + alpha * fg)))


def composite(foreground: Color, background: Color) -> Color:
    """Blend foreground over background using the foreground's own alpha."""
    a = foreground.alpha
    return Color(
        red=blend_channel(foreground.red, background.red, a),
        green=blend_channel(foreground.green, background.green, a),
        blue=blend_channel(foreground.blue, background.blue, a),
        alpha=1.0,
    )
