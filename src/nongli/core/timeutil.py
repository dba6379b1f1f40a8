# src/nongli/core/timeutil.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo

DateLike = Union[date, datetime, str]

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """
    Gregorian leap year test for the given year.
    """
    y = int(year)
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


def days_in_month(year: int, month: int) -> int:
    m = int(month)
    if not (1 <= m <= 12):
        raise ValueError(f"month out of range: {month}")
    if m == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[m - 1]


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    if not (1 <= int(month) <= 12):
        return False
    return 1 <= int(day) <= days_in_month(year, month)


def ymd_of(value: DateLike, *, tz: Optional[str] = None) -> Tuple[int, int, int]:
    """
    Extract (year, month, day) from a date-like value.

    Parameters
    ----------
    value:
        ``date``, ``datetime`` or ISO ``YYYY-MM-DD`` string.
    tz:
        IANA zone name. Timezone-aware datetimes are converted to it before
        taking the calendar date; naive datetimes are used as-is.

    Raises
    ------
    ValueError
        If a string is not an ISO date, or the value type is unsupported.
    """
    if isinstance(value, datetime):
        dt = value
        if tz is not None and dt.tzinfo is not None:
            dt = dt.astimezone(ZoneInfo(tz))
        return dt.year, dt.month, dt.day
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        d = date.fromisoformat(value.strip())
        return d.year, d.month, d.day
    raise ValueError(f"unsupported date value: {type(value).__name__} ({value!r})")


def utc_day_number(year: int, month: int, day: int) -> int:
    """
    Whole days from 1970-01-01 (UTC calendar days, no DST involved).
    """
    return (date(year, month, day) - date(1970, 1, 1)).days
