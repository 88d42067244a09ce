"""Command line interface for bluetime.

Examples:
    bluetime --tz UTC show --epoch 1770126169
    bluetime --tz UTC show --fields 15 0 0 24 9 2011 --format "%d/%m/%Y"
    bluetime diff 1770126169 now --unit days --mode relative

Instants on the ``diff`` command are written as ``now``, an epoch integer,
or six comma-separated fields ``hour,minute,second,day,month,year``.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from zoneinfo import ZoneInfoNotFoundError

from bluetime.config import Settings, check_log_level
from bluetime.difference import MODES, ROUNDINGS
from bluetime.errors import ErrorKind, InvalidArgumentError, InvalidTimeFormat
from bluetime.instant import Instant
from bluetime.provider import CalendarProvider, SystemCalendar
from bluetime.util import SCALES

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bluetime", description="Inspect instants and compare them."
    )
    parser.add_argument(
        "--tz", default=settings.tz, help="IANA time zone (default: host local time)"
    )
    parser.add_argument(
        "--loglevel", default=settings.log_level, help="Set logging level."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Render a single instant.")
    source = show.add_mutually_exclusive_group()
    source.add_argument("--epoch", type=int, help="Unix timestamp in seconds.")
    source.add_argument(
        "--fields",
        type=int,
        nargs=6,
        metavar=("HOUR", "MINUTE", "SECOND", "DAY", "MONTH", "YEAR"),
        help="Wall-clock fields.",
    )
    show.add_argument("--format", help="strftime directives, e.g. %%d/%%m/%%Y")

    diff = commands.add_parser("diff", help="Difference from LEFT to RIGHT.")
    diff.add_argument("left", help="now, epoch seconds, or h,m,s,d,m,y")
    diff.add_argument("right", help="now, epoch seconds, or h,m,s,d,m,y")
    diff.add_argument("--unit", choices=list(SCALES), help="Single unit (default all).")
    diff.add_argument("--mode", choices=MODES, default=settings.mode)
    diff.add_argument("--rounding", choices=ROUNDINGS, default=settings.rounding)
    return parser


def parse_instant(text: str, calendar: CalendarProvider) -> Instant | InvalidTimeFormat:
    """Parse ``now``, an epoch integer, or comma-separated time fields."""
    text = text.strip()
    if text == "now":
        return Instant.now(calendar)
    if "," in text:
        try:
            values = [int(part) for part in text.split(",")]
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Time fields must be integers, got {text!r}"
            ) from exc
        return Instant.from_tuple(values, calendar)
    try:
        return Instant.from_epoch(int(text), calendar)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Cannot read an instant from {text!r}.\n"
            f"Hint: use now, epoch seconds (1770126169), or "
            f"hour,minute,second,day,month,year (15,0,0,24,9,2011)"
        ) from exc


def _show(args: argparse.Namespace, calendar: CalendarProvider) -> int:
    if args.fields is not None:
        instant = Instant.from_tuple(args.fields, calendar)
    elif args.epoch is not None:
        instant = Instant.from_epoch(args.epoch, calendar)
    else:
        instant = Instant.now(calendar)

    if isinstance(instant, InvalidTimeFormat):
        return _fail(ErrorKind.INVALID_TIME_FORMAT, str(instant))

    if args.format:
        print(instant.format(args.format))
    else:
        print(instant.formatted_timestamp())
    return 0


def _diff(args: argparse.Namespace, calendar: CalendarProvider) -> int:
    left = parse_instant(args.left, calendar)
    right = parse_instant(args.right, calendar)
    if isinstance(left, InvalidTimeFormat):
        return _fail(ErrorKind.INVALID_TIME_FORMAT, str(left))
    if isinstance(right, InvalidTimeFormat):
        return _fail(ErrorKind.INVALID_TIME_FORMAT, str(right))

    result = left.difference(right, args.unit, args.mode, args.rounding)
    if isinstance(result, dict):
        for unit, value in result.items():
            print(f"{unit}: {value}")
    else:
        print(result)
    return 0


def _fail(kind: ErrorKind, message: str) -> int:
    # InvalidTimeFormat messages already lead with their kind
    prefix = "" if message.startswith(str(kind)) else f"{kind}: "
    print(f"error: {prefix}{message}", file=sys.stderr)
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
        args = build_parser(settings).parse_args(argv)
        logging.basicConfig(
            level=check_log_level(args.loglevel, "--loglevel"),
            format="%(levelname)s %(name)s: %(message)s",
        )
        calendar = SystemCalendar(tz=args.tz)
        logger.debug(f"command={args.command} calendar={calendar!r}")
        if args.command == "show":
            return _show(args, calendar)
        return _diff(args, calendar)
    except InvalidArgumentError as exc:
        return _fail(exc.kind, str(exc))
    except ZoneInfoNotFoundError as exc:
        return _fail(ErrorKind.INVALID_ARGUMENT, f"Unknown time zone: {exc}")
