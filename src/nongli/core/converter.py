# src/nongli/core/converter.py
from __future__ import annotations

import logging
import os
import sys

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Tuple

from .config import DEFAULT_TABLE, TableConfig
from .solar_terms import solar_terms_in_month
from .timeutil import is_valid_ymd
from .year_info import leap_month_index, leap_month_length, month_length, year_total_days

log = logging.getLogger(__name__)


# ============================================================
# env helpers
# ============================================================

def _env_truthy(name: str) -> bool:
    v = os.environ.get(name, "")
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _debug_enabled() -> bool:
    return _env_truthy("NONGLI_DEBUG_CONVERTER")


def _debug_print(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


# ============================================================
# Public types
# ============================================================

@dataclass(frozen=True)
class LunarDate:
    """
    Lunar year/month/day of a Gregorian date.

    solar_term is the term number (1..24) when the Gregorian date is exactly
    a solar term day, else None.
    """
    year: int
    month: int
    day: int
    is_leap: bool
    solar_term: Optional[int] = None


# ============================================================
# Walks
# ============================================================

def _walk_years(offset: int, table: TableConfig) -> Tuple[int, int]:
    """
    Consume whole lunar years from a day offset counted from the epoch.
    Returns (lunar_year, remaining_offset).
    """
    y = table.first_year
    temp = 0
    while y <= table.last_year and offset > 0:
        temp = year_total_days(y)
        offset -= temp
        y += 1
    if offset < 0:
        offset += temp
        y -= 1
    return y, offset


def _walk_months(year: int, offset: int) -> Tuple[int, bool, int]:
    """
    Consume lunar months of ``year``. Returns (month, is_leap, remaining_offset).

    The leap month is visited right after regular month ``leap``; while it is
    consumed the month counter does not advance.
    """
    leap = leap_month_index(year)
    is_leap = False
    temp = 0
    m = 1
    while m < 13 and offset > 0:
        if leap > 0 and m == leap + 1 and not is_leap:
            m -= 1
            is_leap = True
            temp = leap_month_length(year)
        else:
            temp = month_length(year, m)

        # leaving the leap month: regular month leap+1 was just taken
        if is_leap and m == leap + 1:
            is_leap = False

        offset -= temp
        m += 1

    if offset == 0 and leap > 0 and m == leap + 1:
        # landed on day 1 right after regular month `leap` or after the leap month
        if is_leap:
            is_leap = False
        else:
            is_leap = True
            m -= 1
    elif offset < 0:
        offset += temp
        m -= 1

    return m, is_leap, offset


def _solar_term_for(year: int, month: int, day: int) -> Optional[int]:
    (n1, d1), (n2, d2) = solar_terms_in_month(year, month)
    if day == d1:
        return n1
    if day == d2:
        return n2
    return None


def is_supported(year: int, month: int, day: int, *, table: TableConfig = DEFAULT_TABLE) -> bool:
    """
    True if (year, month, day) is a valid Gregorian date the tables cover.
    """
    if not table.contains_year(year):
        return False
    if not is_valid_ymd(year, month, day):
        return False
    if date(int(year), int(month), int(day)) < table.epoch:
        return False
    return True


def to_lunar_date(year: int, month: int, day: int) -> Optional[LunarDate]:
    """
    Gregorian (year, month, day) -> LunarDate.

    Returns None for dates outside 1900..2100, before the table epoch
    (1900-01-31) or with an invalid month/day.
    """
    y, m, d = int(year), int(month), int(day)
    table = DEFAULT_TABLE
    if not is_supported(y, m, d, table=table):
        log.debug("no lunar data for %04d-%02d-%02d", y, m, d)
        return None

    offset = (date(y, m, d) - table.epoch).days
    lunar_year, offset = _walk_years(offset, table)
    lunar_month, is_leap, offset = _walk_months(lunar_year, offset)

    out = LunarDate(
        year=lunar_year,
        month=lunar_month,
        day=offset + 1,
        is_leap=is_leap,
        solar_term=_solar_term_for(y, m, d),
    )

    if _debug_enabled():
        _debug_print(
            f"[NONGLI_DEBUG_CONVERTER] {y:04d}-{m:02d}-{d:02d} -> "
            f"year={out.year} month={out.month:02d} day={out.day:02d} "
            f"is_leap={out.is_leap} leap_month={leap_month_index(lunar_year)} "
            f"solar_term={out.solar_term}"
        )
    return out


def lunar_dates_between(start: date, end: date) -> Iterable[Tuple[date, Optional[LunarDate]]]:
    """
    Convert each day of [start, end).
    """
    d = start
    while d < end:
        yield d, to_lunar_date(d.year, d.month, d.day)
        d += timedelta(days=1)
