"""Color conversion between HSV, RGB and hex strings."""

import math
import re
from typing import NamedTuple

HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


class InvalidFormat(ValueError):
    """Raised when a string is not a '#RRGGBB' hex color."""


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSV(NamedTuple):
    h: float
    s: float
    v: float


def _clamp(x: float) -> float:
    return max(0.0, min(1.0, x))


def _round_channel(x: float) -> int:
    # Halves round up, never to even.
    return math.floor(x * 255 + 0.5)


def is_hex_color(value) -> bool:
    """True if *value* is a '#RRGGBB' string (either case)."""
    return isinstance(value, str) and HEX_PATTERN.fullmatch(value) is not None


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """(H, S, V) -> (R, G, B).

    Hue wraps modulo 360 and S, V are clamped to [0, 1], so any real input
    gives a defined color. Each channel is rounded independently.
    """
    h = h % 360
    s = _clamp(s)
    v = _clamp(v)

    def f(n):
        k = (n + h / 60) % 6
        return v - v * s * max(min(k, 4 - k, 1), 0)

    return RGB(_round_channel(f(5)), _round_channel(f(3)), _round_channel(f(1)))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """(R, G, B) -> '#rrggbb'."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """(H, S, V) -> '#rrggbb'."""
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hex_to_rgb(hex_str: str) -> RGB:
    """'#RRGGBB' -> (R, G, B). Raises InvalidFormat on anything else."""
    if not is_hex_color(hex_str):
        raise InvalidFormat(f"not a #RRGGBB color: {hex_str!r}")
    return RGB(int(hex_str[1:3], 16), int(hex_str[3:5], 16), int(hex_str[5:7], 16))


def hex_to_hsv(hex_str: str) -> HSV:
    """'#RRGGBB' -> (H, S, V) with H in degrees.

    Grays (max == min) get hue 0. The sector formula already lands in
    [0, 360) for 8-bit input, so no further wrapping is applied.
    """
    r, g, b = (c / 255 for c in hex_to_rgb(hex_str))
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn
    s = 0.0 if mx == 0 else d / mx

    if mx == mn:
        h = 0.0
    elif mx == r:
        h = ((g - b) / d + (6 if g < b else 0)) * 60
    elif mx == g:
        h = ((b - r) / d + 2) * 60
    else:
        h = ((r - g) / d + 4) * 60

    return HSV(h, s, mx)


def color_swatch_html(hex_str: str, size: int = 30, border: str = "1px solid #888") -> str:
    """Return an HTML span showing a color swatch."""
    return (
        f'<span style="display:inline-block;width:{size}px;height:{size}px;'
        f'background:{hex_str};border:{border};border-radius:4px;'
        f'vertical-align:middle;margin-right:6px;"></span>'
    )
