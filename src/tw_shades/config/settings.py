"""Global configuration and constants for shade generation."""

from __future__ import annotations

import os
from typing import Final, Tuple

# Tailwind shade identifiers, lightest to darkest
SHADE_STEPS: Final[Tuple[int, ...]] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
BASE_SHADE: Final = 500
SHADE_SPAN: Final = 500  # distance from BASE_SHADE that maps to a full blend

BLACK: Final[Tuple[int, int, int]] = (0, 0, 0)
WHITE: Final[Tuple[int, int, int]] = (255, 255, 255)

VARIABLE_PREFIX: Final = "--"
ALPHA_PLACEHOLDER: Final = "<alpha-value>"

DEFAULT_LOG_LEVEL: Final = os.environ.get("TW_SHADES_LOG_LEVEL", "WARNING")
