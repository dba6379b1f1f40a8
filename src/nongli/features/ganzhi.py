# src/nongli/features/ganzhi.py
from __future__ import annotations

from nongli.core.solar_terms import solar_term_day
from nongli.core.timeutil import utc_day_number
from nongli.features.config import (
    BRANCHES,
    STEMS,
    ZODIAC_ANIMALS,
    ZODIAC_SIGNS,
    ZODIAC_SIGN_START_DAYS,
)

# day-cycle index of 1970-01-01 is 25577 (mod 60 -> 17, 辛巳)
DAY_CYCLE_CORRECTION = 25577


def ganzhi_from_offset(offset: int) -> str:
    """
    Name of position ``offset`` in the 60-term cycle; offset 0 is 甲子.
    """
    o = int(offset)
    return STEMS[o % 10] + BRANCHES[o % 12]


def year_ganzhi(lunar_year: int) -> str:
    """
    Stem-branch name of a lunar year.

    Uses 1-based keys k = (year - 3) mod 10 and (year - 3) mod 12, where a
    zero remainder wraps to the last entry (10 / 12); the name is
    STEMS[k - 1] + BRANCHES[k - 1]. 1984 -> 甲子.
    """
    y = int(lunar_year)
    stem_key = (y - 3) % 10
    branch_key = (y - 3) % 12
    if stem_key == 0:
        stem_key = 10
    if branch_key == 0:
        branch_key = 12
    return STEMS[stem_key - 1] + BRANCHES[branch_key - 1]


def month_ganzhi(year: int, month: int, day: int) -> str:
    """
    Stem-branch name of the solar month containing a Gregorian date.

    The month changes on the first solar term of each Gregorian month
    (立春 for February, 惊蛰 for March, ...).
    """
    first_term = solar_term_day(year, int(month) * 2 - 1)
    base = (int(year) - 1900) * 12 + int(month)
    if int(day) >= first_term:
        return ganzhi_from_offset(base + 12)
    return ganzhi_from_offset(base + 11)


def day_ganzhi(year: int, month: int, day: int) -> str:
    offset = utc_day_number(year, month, 1) + DAY_CYCLE_CORRECTION + int(day) - 1
    return ganzhi_from_offset(offset)


def zodiac_animal(lunar_year: int) -> str:
    return ZODIAC_ANIMALS[(int(lunar_year) - 4) % 12]


def zodiac_sign(month: int, day: int) -> str:
    """
    Tropical zodiac sign of a Gregorian month/day.
    """
    m = int(month)
    if not (1 <= m <= 12):
        raise ValueError(f"month out of range: {month}")
    if int(day) < ZODIAC_SIGN_START_DAYS[m - 1]:
        return ZODIAC_SIGNS[m - 1]
    return ZODIAC_SIGNS[m]
