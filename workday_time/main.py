from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

if __package__ in (None, ""):
    # Allow both:
    # - python -m workday_time.main ...
    # - python workday_time/main.py ...
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from workday_time.render import render_json, render_text, to_data, write_json
from workday_time.time_value import InvalidInput, Time

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "WORKDAY_TIME_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="workday-time",
        description="Normalize a time of day and print it as HH:MM and total minutes.",
    )

    p.add_argument("--selftest", action="store_true", help="run built-in sanity checks")

    source = p.add_mutually_exclusive_group(required=False)
    source.add_argument("--time", help="loose time text: 18:00, 13:25:59, 9 AM")
    source.add_argument("--strict", help="strict HH:MM time text")
    source.add_argument("--minutes", type=int, help="total minutes past midnight")
    source.add_argument(
        "--hm",
        nargs=2,
        type=int,
        metavar=("HOURS", "MINUTES"),
        help="raw hour and minute (minutes past 59 roll into hours)",
    )
    source.add_argument("--now", action="store_true", help="current local time")

    p.add_argument("--format", choices=["text", "json"], default="text")
    p.add_argument("--json", dest="json_path", help="write result to JSON file")
    p.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )

    return p


def resolve_time(args: argparse.Namespace) -> Optional[Time]:
    if args.time is not None:
        logger.debug("parsing loose time %r", args.time)
        return Time.from_loose_string(args.time)
    if args.strict is not None:
        logger.debug("parsing strict time %r", args.strict)
        return Time.from_string(args.strict)
    if args.minutes is not None:
        logger.debug("converting %d total minutes", args.minutes)
        return Time.from_integer(args.minutes)
    if args.hm is not None:
        logger.debug("normalizing raw pair %s", args.hm)
        return Time.create(*args.hm)
    if args.now:
        logger.debug("reading current local time")
        return Time.now()
    return None


def run_selftest() -> int:
    assert str(Time(14, 65)) == "15:05"
    assert str(Time(5, 256)) == "09:16"
    assert Time.from_integer(1440).to_integer() == 1440
    assert str(Time.from_integer(1440)) == "24:00"
    assert str(Time.from_string("25:65")) == "26:05"
    assert str(Time.from_loose_string("13:25:59")) == "13:25"
    assert str(Time.from_loose_string("9 AM")) == "09:00"

    for bad in ("a:90", "13:b", "aa:bb", "test", ""):
        try:
            Time.from_string(bad)
        except InvalidInput:
            continue
        raise AssertionError(f"accepted invalid time {bad!r}")

    sys.stdout.buffer.write(b"SELFTEST OK\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.selftest:
        return run_selftest()

    try:
        time = resolve_time(args)
    except InvalidInput as exc:
        logger.debug("invalid input: %s", exc)
        parser.error(str(exc))

    if time is None:
        parser.error("one of --time, --strict, --minutes, --hm or --now is required (unless --selftest)")

    logger.info("resolved %s (%d minutes)", time, time.to_integer())

    data = to_data(time)
    if args.format == "json":
        out = render_json(data)
    else:
        out = render_text(data)
    sys.stdout.write(out)

    if args.json_path:
        write_json(data, args.json_path)
        logger.info("wrote %s", args.json_path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
