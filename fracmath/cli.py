"""Command line interface for fracmath."""

from __future__ import annotations

import argparse
import sys

from .core.config import get_settings
from .core.errors import FractionError
from .core.logging import get_logger, setup_logging
from .expression import evaluate_line

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fracmath",
        description="Evaluate one fraction expression such as '? 2_3/8 + 9/8'.",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression tokens; defaults to the configured DEFAULT_EXPRESSION.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging("ERROR" if args.quiet else args.log_level)

    line = " ".join(args.expression) if args.expression else get_settings().DEFAULT_EXPRESSION

    try:
        result = evaluate_line(line)
    except FractionError as exc:
        logger.error("Evaluation failed: %s", exc.message)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    if result is not None:
        print(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
