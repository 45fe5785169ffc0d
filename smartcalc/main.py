"""Command-line entry point for the smart calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import load_settings
from .repl import Calculator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="Integer calculator with variables.",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        default=None,
        help="File used for persistent input history",
    )
    parser.add_argument(
        "--no-history",
        action="store_false",
        dest="history_enabled",
        default=None,
        help="Keep input history in memory only",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Script files handled like /read before the prompt starts",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings({
            "history_file": args.history_file,
            "history_enabled": args.history_enabled,
            "log_level": args.log_level,
        })
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    calc = Calculator(settings)
    for path in args.files:
        out = calc.handle_line(f"/read {path}")
        if out is not None:
            print(out)
    calc.run()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
