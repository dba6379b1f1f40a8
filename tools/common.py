from __future__ import annotations

import argparse
import json
import sys
from datetime import date, datetime, timedelta, timezone
from typing import Tuple
from zoneinfo import ZoneInfoNotFoundError

from nongli.core.config import DEFAULT_TABLE, TableConfig
from nongli.core.timeutil import ymd_of


def add_date_args(parser: argparse.ArgumentParser) -> None:
    """--date / --start --end (inclusive) / --today, plus output switches."""
    parser.add_argument("--date", help="YYYY-MM-DD")
    parser.add_argument("--start", help="YYYY-MM-DD")
    parser.add_argument("--end", help="YYYY-MM-DD (inclusive)")
    parser.add_argument("--today", action="store_true", help="use today's date in --tz")
    parser.add_argument("--tz", default="Asia/Shanghai")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")


def _as_date(value: str) -> date:
    return date(*ymd_of(value))


def resolve_date_range(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    *,
    table: TableConfig = DEFAULT_TABLE,
) -> Tuple[date, date]:
    """
    Turn the parsed date options into a half-open [start, stop) range.

    Ranges lying entirely outside the table years end the script via skip().
    Ranges that only overlap the table are kept as given; the dates outside it
    come back from the converter as unsupported rows.
    """
    try:
        if args.today:
            start = date(*ymd_of(datetime.now(timezone.utc), tz=args.tz))
            end = start
        elif args.start and args.end:
            start, end = _as_date(args.start), _as_date(args.end)
        elif args.date:
            start = end = _as_date(args.date)
        else:
            parser.error("--date, --start/--end or --today required")
    except (ValueError, ZoneInfoNotFoundError) as e:
        parser.error(str(e))

    if end < start:
        parser.error("--end must be >= --start")
    if end.year < table.first_year or start.year > table.last_year:
        skip(f"range outside {table.first_year}..{table.last_year}: {start}..{end}")
    return start, end + timedelta(days=1)


def dump_json(obj: object) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def skip(msg: str) -> None:
    print(f"SKIP: {msg}")
    sys.exit(0)
