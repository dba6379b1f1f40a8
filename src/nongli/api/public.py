from __future__ import annotations

import logging
import os
import time
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from nongli.core.config import DEFAULT_TABLE
from nongli.core.solar_terms import solar_term_days, solar_term_month
from nongli.features.config import solar_term_name
from nongli.features.lunar_data import LunarResult, convert, render_lunar_text

router = APIRouter(prefix="/api/v1", tags=["public"])

log = logging.getLogger("nongli.api.public")


# ============================================================
# Response Models
# ============================================================
class LunarInfo(BaseModel):
    year: int
    month: int
    day: int
    is_leap: bool = Field(default=False, description="true inside a leap month")
    zodiac: str
    month_label: str
    day_label: str
    gz_year: str
    gz_month: str
    gz_day: str
    solar_term: str = Field(default="", description="solar term name if the date is a term day")
    zodiac_sign: str


class DayResponse(BaseModel):
    date: date
    lunar: Optional[LunarInfo] = None
    text: str


class RangeResponse(BaseModel):
    start: date
    end: date
    days: List[DayResponse]


class SolarTermEntry(BaseModel):
    n: int
    name: str
    date: date


class SolarTermsResponse(BaseModel):
    year: int
    terms: List[SolarTermEntry]


# =========================================================
# Public JSON API (function-style, HTTP-ready)
# =========================================================
NONGLI_API_LIMIT_DAYS_ENV = "NONGLI_API_LIMIT_DAYS"
DEFAULT_LIMIT_DAYS = 370
DEFAULT_TZ = "Asia/Shanghai"


def _limit_days_default() -> int:
    v = os.environ.get(NONGLI_API_LIMIT_DAYS_ENV, "").strip()
    try:
        return int(v) if v else DEFAULT_LIMIT_DAYS
    except ValueError:
        log.warning("ignoring invalid %s=%r", NONGLI_API_LIMIT_DAYS_ENV, v)
        return DEFAULT_LIMIT_DAYS


def _parse_date_any(x: str | date) -> date:
    if isinstance(x, date):
        return x
    return _parse_iso_date(str(x))


def _lunar_info(res: LunarResult) -> LunarInfo:
    return LunarInfo(
        year=res.lunar_year,
        month=res.lunar_month,
        day=res.lunar_day,
        is_leap=res.is_leap,
        zodiac=res.zodiac,
        month_label=res.month,
        day_label=res.day,
        gz_year=res.gz_year,
        gz_month=res.gz_month,
        gz_day=res.gz_day,
        solar_term=res.solar_term,
        zodiac_sign=res.zodiac_sign,
    )


def _day_response(d: date) -> DayResponse:
    res = convert(d.year, d.month, d.day)
    return DayResponse(
        date=d,
        lunar=None if res is None else _lunar_info(res),
        text=render_lunar_text(res),
    )


def _days_between(s: date, e: date) -> List[DayResponse]:
    days: List[DayResponse] = []
    cur = s
    while True:
        days.append(_day_response(cur))
        if cur == e:
            return days
        cur = cur + timedelta(days=1)


def _check_range(s: date, e: date, limit_days: int) -> int:
    if e < s:
        raise HTTPException(status_code=422, detail="end must be >= start")
    days_count = (e - s).days + 1
    if days_count > limit_days:
        raise HTTPException(status_code=422, detail=f"range too large: {days_count} days (limit_days={limit_days})")
    return days_count


def get_lunar_day(date_: str | date) -> dict:
    d = _parse_date_any(date_)
    return _day_response(d).model_dump(mode="json")


def get_lunar_range(
    start: str | date,
    end: str | date,
    *,
    limit_days: Optional[int] = None,
) -> dict:
    s = _parse_date_any(start)
    e = _parse_date_any(end)
    _check_range(s, e, _limit_days_default() if limit_days is None else int(limit_days))

    return RangeResponse(start=s, end=e, days=_days_between(s, e)).model_dump(mode="json")


def get_solar_terms(year: int) -> dict:
    y = int(year)
    if not DEFAULT_TABLE.contains_year(y):
        raise HTTPException(
            status_code=422,
            detail=f"year out of supported range: {y} ({DEFAULT_TABLE.first_year}..{DEFAULT_TABLE.last_year})",
        )
    terms = [
        SolarTermEntry(n=n, name=solar_term_name(n), date=date(y, solar_term_month(n), day))
        for n, day in enumerate(solar_term_days(y), start=1)
    ]
    return SolarTermsResponse(year=y, terms=terms).model_dump(mode="json")


# ============================================================
# Helpers: parsing & tz
# ============================================================
def _parse_iso_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {s} (expected YYYY-MM-DD)") from e


def _get_tzinfo(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except ZoneInfoNotFoundError as e:
        raise HTTPException(status_code=422, detail=f"Unknown timezone: {tz}") from e


# ============================================================
# Endpoints
# ============================================================
@router.get("/lunar/day", response_model=DayResponse)
def get_day(
    date_str: str = Query(..., alias="date", description="YYYY-MM-DD"),
    timing: bool = Query(False, description="log timing"),
) -> DayResponse:
    d = _parse_iso_date(date_str)

    t0 = time.perf_counter()
    out = _day_response(d)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /lunar/day date=%s total=%.6fs", d, t1 - t0)
    return out


@router.get("/lunar/today", response_model=DayResponse)
def get_today(
    tz: str = Query(DEFAULT_TZ),
) -> DayResponse:
    tzinfo = _get_tzinfo(tz)
    return _day_response(datetime.now(tzinfo).date())


@router.get("/lunar/range", response_model=RangeResponse)
def get_range(
    start_str: str = Query(..., alias="start", description="YYYY-MM-DD"),
    end_str: str = Query(..., alias="end", description="YYYY-MM-DD"),
    limit_days: Optional[int] = Query(None, ge=1, le=5000, description="max days per request"),
    timing: bool = Query(False, description="log timing"),
) -> RangeResponse:
    start = _parse_iso_date(start_str)
    end = _parse_iso_date(end_str)
    days_count = _check_range(start, end, _limit_days_default() if limit_days is None else limit_days)

    t0 = time.perf_counter()
    days = _days_between(start, end)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /lunar/range start=%s end=%s days=%d total=%.6fs", start, end, days_count, t1 - t0)

    return RangeResponse(start=start, end=end, days=days)


@router.get("/solar-terms")
def get_solar_terms_endpoint(
    year: int = Query(..., description="Gregorian year"),
) -> Dict[str, Any]:
    return get_solar_terms(year)
