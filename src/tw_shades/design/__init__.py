"""Shade scale derivation for Tailwind color tokens."""

from .shades import (  # noqa: F401
    ShadeOptions,
    generate_shades,
    shades_of,
    shade_scale,
    mix_channels,
    format_rgb,
    format_alpha_template,
    format_variable_reference,
)
