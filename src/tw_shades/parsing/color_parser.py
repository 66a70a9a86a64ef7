"""Color string parsing into RGB channel triples.

Supported notations (dispatch is by prefix, case-sensitive):
  #rgb / #rrggbb                      hex, digits case-insensitive
  rgb(r, g, b) / rgb(r,g,b) / rgb(r g b)
  hsl(h, s%, l%)

Public API:
    parse_color(color: str) -> (r,g,b)
    parse_hex(color: str) -> (r,g,b)
    parse_rgb(color: str) -> (r,g,b)
    parse_hsl(color: str) -> (r,g,b)
    hsl_to_rgb(h, s, l) -> (r,g,b)
    validate_color(rgb) -> None
    round_half_up(value: float) -> int

Parsers only check syntax; channel ranges are enforced by ``validate_color``
which ``parse_color`` applies to every result.
"""

from __future__ import annotations

import math
import re
from typing import Tuple

from .errors import (
    InvalidHexColorError,
    InvalidHSLColorError,
    InvalidRGBColorError,
    UnsupportedFormatError,
)

__all__ = [
    "ChannelTriple",
    "parse_color",
    "parse_hex",
    "parse_rgb",
    "parse_hsl",
    "hsl_to_rgb",
    "validate_color",
    "round_half_up",
]

ChannelTriple = Tuple[int, int, int]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_RGB_RE = re.compile(
    r"rgb\s*\(\s*([0-9]{1,3})\s*[, ]\s*([0-9]{1,3})\s*[, ]\s*([0-9]{1,3})\s*\)"
)
_HSL_RE = re.compile(r"hsl\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})%\s*,\s*([0-9]{1,3})%\s*\)")


def round_half_up(value: float) -> int:
    """Round to nearest integer with ties going toward +infinity."""
    return int(math.floor(value + 0.5))


def parse_color(color: str) -> ChannelTriple:
    """Parse ``color`` into a validated (r,g,b) triple.

    Raises a ``ColorParseError`` subclass describing the failure.
    """
    if color.startswith("#"):
        rgb = parse_hex(color)
    elif color.startswith("rgb("):
        rgb = parse_rgb(color)
    elif color.startswith("hsl("):
        rgb = parse_hsl(color)
    else:
        raise UnsupportedFormatError(
            f"Unsupported color format: {color}", context={"value": color}
        )
    validate_color(rgb)
    return rgb


def validate_color(rgb: ChannelTriple) -> None:
    if any(v < 0 or v > 255 for v in rgb):
        joined = ",".join(str(v) for v in rgb)
        raise InvalidRGBColorError(
            f"Invalid RGB color: {joined}", context={"value": tuple(rgb), "reason": "range"}
        )


def parse_hex(color: str) -> ChannelTriple:
    digits = color[1:] if color.startswith("#") else color
    if len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
        raise InvalidHexColorError(
            f"Invalid hex color provided: {color}", context={"value": color}
        )
    if len(digits) == 3:  # rgb -> rrggbb
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def parse_rgb(color: str) -> ChannelTriple:
    match = _RGB_RE.fullmatch(color)
    if match is None:
        raise InvalidRGBColorError(
            f"Invalid RGB color provided: {color}",
            context={"value": color, "reason": "pattern"},
        )
    r, g, b = (int(v) for v in match.groups())
    return r, g, b


def parse_hsl(color: str) -> ChannelTriple:
    """Parse an ``hsl(h, s%, l%)`` literal and convert it to RGB.

    Component ranges are not checked here: hue above 360 or percentages
    above 100 are converted as given, and out-of-gamut channels are left
    for ``validate_color`` to reject.
    """
    match = _HSL_RE.fullmatch(color)
    if match is None:
        raise InvalidHSLColorError(
            f"Invalid HSL color provided: {color}", context={"value": color}
        )
    h, s, l = (int(v) for v in match.groups())
    return hsl_to_rgb(h / 360, s / 100, l / 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> ChannelTriple:
    """Convert normalized HSL (each nominally 0-1) to 0-255 channels."""
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)
