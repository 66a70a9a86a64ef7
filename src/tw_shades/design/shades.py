"""Tailwind shade scale derivation.

Given a single base color (hex, rgb() or hsl() string) produces the fixed
shade scale 50-950 used by Tailwind color tokens:

  50 .. 400   base blended toward white (50 is closest to white)
  500         base color, unmodified
  600 .. 950  base blended toward black (950 is closest to black)

Every scale entry is formatted ``rgb(R, G, B)``.

Extended mode adds two single-string outputs meant for Tailwind's opacity
modifiers:

  shades_of("--brand")                 -> "rgb(var(--brand) / <alpha-value>)"
  shades_of("#fff", make_shades=False) -> "rgb(255 255 255 / <alpha-value>)"

Public API:
- ShadeOptions
- generate_shades(color, options) -> dict[int,str] | str
- shades_of(color, make_shades=True) -> dict[int,str] | str
- shade_scale(color) -> dict[int,str]
- mix_channels(percentage, start, end) -> (r,g,b)
- format_rgb / format_alpha_template / format_variable_reference
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Union, cast

from ..config.settings import (
    ALPHA_PLACEHOLDER,
    BASE_SHADE,
    BLACK,
    SHADE_SPAN,
    SHADE_STEPS,
    VARIABLE_PREFIX,
    WHITE,
)
from ..parsing.color_parser import ChannelTriple, parse_color, round_half_up

__all__ = [
    "ShadeOptions",
    "generate_shades",
    "shades_of",
    "shade_scale",
    "mix_channels",
    "format_rgb",
    "format_alpha_template",
    "format_variable_reference",
]

_logger = logging.getLogger(__name__)

ShadeMap = Dict[int, str]


@dataclass(frozen=True)
class ShadeOptions:
    allow_variable_reference: bool = True
    make_shades: bool = True


def format_rgb(rgb: ChannelTriple) -> str:
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"


def format_alpha_template(rgb: ChannelTriple) -> str:
    return f"rgb({rgb[0]} {rgb[1]} {rgb[2]} / {ALPHA_PLACEHOLDER})"


def format_variable_reference(name: str) -> str:
    return f"rgb(var({name}) / {ALPHA_PLACEHOLDER})"


def mix_channels(percentage: float, start: ChannelTriple, end: ChannelTriple) -> ChannelTriple:
    """Blend from ``end`` toward ``start`` by ``percentage`` (0-1).

    percentage=0 yields ``end``; percentage=1 yields ``start``.
    """
    r, g, b = (
        round_half_up(e + percentage * (s - e)) for s, e in zip(start, end)
    )
    return r, g, b


def _shade_color(base: ChannelTriple, shade: int) -> ChannelTriple:
    if shade == BASE_SHADE:
        return base
    is_dark = shade > BASE_SHADE
    percentage = (shade - BASE_SHADE if is_dark else shade) / SHADE_SPAN
    if is_dark:
        return mix_channels(percentage, BLACK, base)
    return mix_channels(percentage, base, WHITE)


def _build_scale(base: ChannelTriple) -> ShadeMap:
    return {shade: format_rgb(_shade_color(base, shade)) for shade in SHADE_STEPS}


def generate_shades(color: str, options: ShadeOptions = ShadeOptions()) -> Union[ShadeMap, str]:
    """Produce the shade scale (or a single templated color) for ``color``.

    Parameters
    ----------
    color: str
        Hex, rgb() or hsl() color. When ``options.allow_variable_reference``
        is set, a ``--name`` CSS variable is also accepted.
    options: ShadeOptions
        ``make_shades=False`` returns a single ``rgb(R G B / <alpha-value>)``
        string instead of the scale.

    Raises
    ------
    ColorParseError
        For unsupported or malformed input.
    """
    if options.allow_variable_reference and color.startswith(VARIABLE_PREFIX):
        _logger.debug("Variable reference %s passed through", color)
        return format_variable_reference(color)

    base = parse_color(color)
    if not options.make_shades:
        return format_alpha_template(base)

    _logger.debug("Generating %d shades for %s -> %s", len(SHADE_STEPS), color, base)
    return _build_scale(base)


def shades_of(color: str, make_shades: bool = True) -> Union[ShadeMap, str]:
    return generate_shades(
        color, ShadeOptions(allow_variable_reference=True, make_shades=make_shades)
    )


def shade_scale(color: str) -> ShadeMap:
    """Return the 11-entry shade mapping; CSS variables are not accepted."""
    result = generate_shades(
        color, ShadeOptions(allow_variable_reference=False, make_shades=True)
    )
    return cast(ShadeMap, result)
