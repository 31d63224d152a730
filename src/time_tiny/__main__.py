"""Command line front end: ``python -m time_tiny {now,parse,datetime}``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .datetime_adapter import to_datetime
from .exceptions import TimeTinyError
from .logging_config import setup_logging
from .time_value import TimeValue

logger = logging.getLogger(__name__)

EXIT_USAGE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="time_tiny", description="Print and validate hh:mm:ss times")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default from TIME_TINY_LOG_LEVEL)")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("now", help="Print the current local time")

    parse_cmd = commands.add_parser("parse", help="Validate an hh:mm:ss string and echo it")
    parse_cmd.add_argument("text", help="Time in hh:mm:ss form")

    datetime_cmd = commands.add_parser("datetime", help="Print the ISO datetime for an hh:mm:ss string")
    datetime_cmd.add_argument("text", help="Time in hh:mm:ss form")
    datetime_cmd.add_argument("--time-zone", type=str, default="floating", help="IANA zone name or 'floating' (default)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        if args.command == "now":
            print(TimeValue.now())
        elif args.command == "parse":
            print(TimeValue.from_string(args.text))
        else:
            value = TimeValue.from_string(args.text)
            print(to_datetime(value, time_zone=args.time_zone).isoformat())
    except TimeTinyError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"time_tiny: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
