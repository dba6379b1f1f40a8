# src/nongli/features/lunar_data.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from nongli.core.config import DEFAULT_LABELS, LabelConfig
from nongli.core.converter import LunarDate, to_lunar_date
from nongli.core.timeutil import DateLike, ymd_of
from nongli.features.config import lunar_day_name, lunar_month_display_name, solar_term_name
from nongli.features.ganzhi import (
    day_ganzhi,
    month_ganzhi,
    year_ganzhi,
    zodiac_animal,
    zodiac_sign,
)


@dataclass(frozen=True)
class LunarResult:
    """
    Rendered lunar data for one Gregorian date.

    The numeric fields mirror LunarDate; the rest are display labels.
    solar_term is "" unless the date is exactly a solar term day.
    """
    lunar_year: int
    lunar_month: int
    lunar_day: int
    is_leap: bool
    zodiac: str
    month: str
    day: str
    gz_year: str
    gz_month: str
    gz_day: str
    solar_term: str
    zodiac_sign: str

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def format_lunar_date(
    ld: LunarDate,
    year: int,
    month: int,
    day: int,
    *,
    labels: LabelConfig = DEFAULT_LABELS,
) -> LunarResult:
    """
    Build the LunarResult for a converted date.

    (year, month, day) is the Gregorian input; the month/day stem-branch
    names, solar term and zodiac sign are Gregorian based.
    """
    term = solar_term_name(ld.solar_term) if ld.solar_term is not None else ""
    return LunarResult(
        lunar_year=ld.year,
        lunar_month=ld.month,
        lunar_day=ld.day,
        is_leap=ld.is_leap,
        zodiac=zodiac_animal(ld.year),
        month=lunar_month_display_name(ld.month, ld.is_leap, labels=labels),
        day=lunar_day_name(ld.day),
        gz_year=year_ganzhi(ld.year),
        gz_month=month_ganzhi(year, month, day),
        gz_day=day_ganzhi(year, month, day),
        solar_term=term,
        zodiac_sign=zodiac_sign(month, day),
    )


def convert(
    year: int,
    month: int,
    day: int,
    *,
    labels: LabelConfig = DEFAULT_LABELS,
) -> Optional[LunarResult]:
    """
    Gregorian (year, month, day) -> LunarResult, or None when there is no
    lunar data for the date.
    """
    ld = to_lunar_date(year, month, day)
    if ld is None:
        return None
    return format_lunar_date(ld, int(year), int(month), int(day), labels=labels)


def lunar_data_for_date(
    value: DateLike,
    *,
    tz: Optional[str] = None,
    labels: LabelConfig = DEFAULT_LABELS,
) -> Optional[LunarResult]:
    """
    convert() for a date / datetime / ISO string.
    """
    y, m, d = ymd_of(value, tz=tz)
    return convert(y, m, d, labels=labels)


def render_lunar_text(res: Optional[LunarResult], *, labels: LabelConfig = DEFAULT_LABELS) -> str:
    if res is None:
        return labels.unsupported_text
    return f"{res.gz_year}{labels.year_suffix}{res.month}{res.day}"


def to_lunar_string(
    value: DateLike,
    *,
    tz: Optional[str] = None,
    labels: LabelConfig = DEFAULT_LABELS,
) -> str:
    """
    e.g. 2026-02-17 -> "丙午年正月初一"
    """
    return render_lunar_text(lunar_data_for_date(value, tz=tz, labels=labels), labels=labels)
