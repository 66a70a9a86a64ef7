"""Structured parsing/validation errors for color input."""

from __future__ import annotations
from typing import Any


class ColorParseError(ValueError):
    """Base class for color parsing issues.

    ``context`` always carries the offending input under ``value``.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class UnsupportedFormatError(ColorParseError):
    """Raised when the input matches none of the recognized notations."""


class InvalidHexColorError(ColorParseError):
    """Raised when a hex color does not have 3 or 6 hex digits."""


class InvalidRGBColorError(ColorParseError):
    """Raised for malformed rgb() literals and out-of-range channels.

    ``context["reason"]`` is ``"pattern"`` or ``"range"``.
    """


class InvalidHSLColorError(ColorParseError):
    """Raised when an hsl() literal cannot be matched."""
