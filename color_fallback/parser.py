"""
Color string parsing for the formats the fallback engine understands:
rgb/rgba (comma separated), 3 or 6 digit hex, and hsl/hsla.

The format is picked structurally from the string's keywords, then a
format-specific decoder builds a Color.
"""

import re
import enum
import logging
from typing import Callable, Dict, List

from .color import Color, ParseError, clamp, round_half_up

log = logging.getLogger(__name__)


class ColorFormat(str, enum.Enum):
    RGBA = "rgba"
    HEX = "hex"
    HSLA = "hsla"


# Keyword checks in precedence order: alpha-bearing names before their base names.
_KEYWORDS = (
    ("rgba", ColorFormat.RGBA),
    ("rgb", ColorFormat.RGBA),
    ("hsla", ColorFormat.HSLA),
    ("hsl", ColorFormat.HSLA),
)

# Regular expression patterns
FUNC_RE = re.compile(r"^\s*(rgba?|hsla?)\s*\((.*)\)\s*$", re.IGNORECASE | re.DOTALL)
INT_RE = re.compile(r"^\s*([+-]?\d+)")
FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)", re.IGNORECASE)
HEX_DIGITS_RE = re.compile(r"^[0-9a-f]+$", re.IGNORECASE)


def classify(text: str) -> ColorFormat:
    """Return the color format for the given string."""
    lowered = text.lower()
    for keyword, fmt in _KEYWORDS:
        if keyword in lowered:
            return fmt
    return ColorFormat.HEX


# Component helpers ------------------------------------------------

def _arguments(text: str) -> List[str]:
    """Strip the functional wrapper and split the comma separated arguments."""
    m = FUNC_RE.match(text)
    if not m:
        raise ParseError(text, "malformed color function")
    return m.group(2).split(",")


def _int_component(token: str, text: str) -> int:
    m = INT_RE.match(token)
    if not m:
        raise ParseError(text, f"invalid numeric component {token.strip()!r}")
    try:
        return int(m.group(1))
    except ValueError as e:
        # digit runs past the interpreter's int conversion limit
        raise ParseError(text, "numeric component too long") from e


def _alpha_component(args: List[str]) -> float:
    """Optional fourth argument; absent, unparsable or zero alpha means opaque."""
    if len(args) < 4:
        return 1.0
    m = FLOAT_RE.match(args[3])
    if not m:
        return 1.0
    return float(m.group(1)) or 1.0


# RGB -------------------------------------------------------------

def parse_rgba(text: str) -> Color:
    """Parse an rgb()/rgba() string."""
    args = _arguments(text)
    if len(args) < 3:
        raise ParseError(text, "expected at least three components")
    r, g, b = (_int_component(t, text) for t in args[:3])
    return Color.clamped(r, g, b, _alpha_component(args))


# HEX -------------------------------------------------------------

def parse_hex(text: str) -> Color:
    """Parse a 3 or 6 digit hex string, with or without the leading '#'."""
    h = text.strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) not in (3, 6) or not HEX_DIGITS_RE.match(h):
        raise ParseError(text, "invalid hex color")
    if len(h) == 3:
        pairs = [c + c for c in h]
    else:
        pairs = [h[i:i + 2] for i in range(0, 6, 2)]
    r, g, b = (int(p, 16) for p in pairs)
    return Color(red=r, green=g, blue=b, alpha=1.0)


# HSL -------------------------------------------------------------

def hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise hue helper; t is folded into [0, 1) first."""
    if t < 0:
        t += 1
    if t >= 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple:
    """Convert HSL to RGB. h in [0,1), s and l in [0,1]."""
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def parse_hsla(text: str) -> Color:
    """Parse an hsl()/hsla() string."""
    args = _arguments(text)
    if len(args) < 3:
        raise ParseError(text, "expected at least three components")
    h = (_int_component(args[0], text) % 360) / 360
    s = clamp(_int_component(args[1], text) / 100, 0, 1)
    l = clamp(_int_component(args[2], text) / 100, 0, 1)
    r, g, b = hsl_to_rgb(h, s, l)
    return Color.clamped(r, g, b, _alpha_component(args))


# Top-level parse --------------------------------------------------

PARSERS: Dict[ColorFormat, Callable[[str], Color]] = {
    ColorFormat.RGBA: parse_rgba,
    ColorFormat.HEX: parse_hex,
    ColorFormat.HSLA: parse_hsla,
}


def parse_color(text: str) -> Color:
    """Parse any supported color string into a Color, raising ParseError."""
    fmt = classify(text)
    color = PARSERS[fmt](text)
    log.debug("Parsed %r as %s -> %s", text, fmt.value, color)
    return color

