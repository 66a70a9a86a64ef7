"""Generate Tailwind-compatible shade scales from a single color.

Usage:
    from tw_shades import shades_of
    shades_of("#3498db")[950]   # 'rgb(5, 15, 22)'
"""

from .config.settings import SHADE_STEPS  # noqa: F401
from .design.shades import ShadeOptions, generate_shades, shades_of, shade_scale  # noqa: F401
from .parsing.color_parser import parse_color  # noqa: F401
from .parsing.errors import (  # noqa: F401
    ColorParseError,
    UnsupportedFormatError,
    InvalidHexColorError,
    InvalidRGBColorError,
    InvalidHSLColorError,
)

__version__ = "1.0.0"
