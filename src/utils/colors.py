"""
Color conversion utilities

Pure functions for hex color parsing and alpha handling used by the
background simulators and the frame compositor.
"""

import re
from typing import Tuple

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: str) -> bool:
    """True for '#rgb' / '#rrggbb' strings (leading '#' optional)."""
    return bool(_HEX_RE.match(value or ""))


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """
    Convert '#rrggbb' (or '#rgb') to an (r, g, b) tuple

    Example:
        hex_to_rgb("#9b5de5")  # (155, 93, 229)
        hex_to_rgb("#fff")     # (255, 255, 255)
    """
    match = _HEX_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def with_alpha(value: str, opacity: float) -> Tuple[int, int, int, int]:
    """
    Hex color plus opacity (0.0-1.0) as an RGBA tuple for ImageDraw

    Opacity is clamped so callers can pass computed fades directly.
    """
    r, g, b = hex_to_rgb(value)
    alpha = int(max(0.0, min(1.0, opacity)) * 255)
    return (r, g, b, alpha)
