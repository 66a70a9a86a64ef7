"""Command line entrypoint for shade generation."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Sequence

from .config.settings import DEFAULT_LOG_LEVEL
from .design.shades import shades_of
from .parsing.errors import ColorParseError

_logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate Tailwind shades from a single color")
    p.add_argument("color", help="#hex, rgb(...), hsl(...) or a --css-variable")
    p.add_argument(
        "--single",
        action="store_true",
        help="Emit one rgb(R G B / <alpha-value>) color instead of the scale",
    )
    p.add_argument("--json", action="store_true", help="Output JSON")
    p.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level name")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    try:
        result = shades_of(args.color, make_shades=not args.single)
    except ColorParseError as exc:
        _logger.debug("Rejected %r: %s", args.color, exc.context)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(result, indent=2))
    elif isinstance(result, str):
        print(result)
    else:
        for shade, value in result.items():
            print(f"{shade:>4}: {value}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
