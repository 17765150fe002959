"""
Canonical RGBA color value and its string serializations.
"""

import math
import logging

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a color string cannot be decoded."""

    def __init__(self, text: str, reason: str = "unsupported color format"):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(x + 0.5))


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def clamped(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "Color":
        """Build a Color from arbitrary numbers, clamping out-of-range fields."""
        channels = []
        for v in (red, green, blue):
            c = int(clamp(v, 0, 255))
            if c != v:
                log.debug("Channel %r clamped to %d", v, c)
            channels.append(c)
        a = clamp(float(alpha), 0.0, 1.0)
        if a != alpha:
            log.debug("Alpha %r clamped to %s", alpha, a)
        return cls(red=channels[0], green=channels[1], blue=channels[2], alpha=a)

    def to_hex(self) -> str:
        """Six lowercase hex digits, no leading '#'."""
        def h(n: int) -> str:
            return format(int(clamp(n, 0, 255)), "02x")

        return f"{h(self.red)}{h(self.green)}{h(self.blue)}"

    def to_css_hex(self) -> str:
        return "#" + self.to_hex()

    def to_argb_hex(self) -> str:
        """Alpha byte followed by the opaque channels, '#' prefixed."""
        a = round_half_up(clamp(self.alpha, 0, 1) * 255)
        return "#" + format(a, "02x") + self.to_hex()

