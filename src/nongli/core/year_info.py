# src/nongli/core/year_info.py
from __future__ import annotations

"""
Per-year lunar month metadata for lunar years 1900..2100.

Each year is stored as one packed 17-bit integer:

  bits 15..4  month 1..12 length (1 -> 30 days, 0 -> 29 days), month 1 at bit 15
  bits 3..0   leap month index (0 = no leap month)
  bit 16      leap month length (1 -> 30 days, 0 -> 29 days)

The packed form is decoded once at import into YearInfoEntry records.
"""

from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_TABLE

LUNAR_YEAR_INFO: Tuple[int, ...] = (
    0x04BD8, 0x04AE0, 0x0A570, 0x054D5, 0x0D260, 0x0D950, 0x16554, 0x056A0, 0x09AD0, 0x055D2,  # 1900-1909
    0x04AE0, 0x0A5B6, 0x0A4D0, 0x0D250, 0x1D255, 0x0B540, 0x0D6A0, 0x0ADA2, 0x095B0, 0x14977,  # 1910-1919
    0x04970, 0x0A4B0, 0x0B4B5, 0x06A50, 0x06D40, 0x1AB54, 0x02B60, 0x09570, 0x052F2, 0x04970,  # 1920-1929
    0x06566, 0x0D4A0, 0x0EA50, 0x16A95, 0x05AD0, 0x02B60, 0x186E3, 0x092E0, 0x1C8D7, 0x0C950,  # 1930-1939
    0x0D4A0, 0x1D8A6, 0x0B550, 0x056A0, 0x1A5B4, 0x025D0, 0x092D0, 0x0D2B2, 0x0A950, 0x0B557,  # 1940-1949
    0x06CA0, 0x0B550, 0x15355, 0x04DA0, 0x0A5B0, 0x14573, 0x052B0, 0x0A9A8, 0x0E950, 0x06AA0,  # 1950-1959
    0x0AEA6, 0x0AB50, 0x04B60, 0x0AAE4, 0x0A570, 0x05260, 0x0F263, 0x0D950, 0x05B57, 0x056A0,  # 1960-1969
    0x096D0, 0x04DD5, 0x04AD0, 0x0A4D0, 0x0D4D4, 0x0D250, 0x0D558, 0x0B540, 0x0B6A0, 0x195A6,  # 1970-1979
    0x095B0, 0x049B0, 0x0A974, 0x0A4B0, 0x0B27A, 0x06A50, 0x06D40, 0x0AF46, 0x0AB60, 0x09570,  # 1980-1989
    0x04AF5, 0x04970, 0x064B0, 0x074A3, 0x0EA50, 0x06B58, 0x05AC0, 0x0AB60, 0x096D5, 0x092E0,  # 1990-1999
    0x0C960, 0x0D954, 0x0D4A0, 0x0DA50, 0x07552, 0x056A0, 0x0ABB7, 0x025D0, 0x092D0, 0x0CAB5,  # 2000-2009
    0x0A950, 0x0B4A0, 0x0BAA4, 0x0AD50, 0x055D9, 0x04BA0, 0x0A5B0, 0x15176, 0x052B0, 0x0A930,  # 2010-2019
    0x07954, 0x06AA0, 0x0AD50, 0x05B52, 0x04B60, 0x0A6E6, 0x0A4E0, 0x0D260, 0x0EA65, 0x0D530,  # 2020-2029
    0x05AA0, 0x076A3, 0x096D0, 0x04AFB, 0x04AD0, 0x0A4D0, 0x1D0B6, 0x0D250, 0x0D520, 0x0DD45,  # 2030-2039
    0x0B5A0, 0x056D0, 0x055B2, 0x049B0, 0x0A577, 0x0A4B0, 0x0AA50, 0x1B255, 0x06D20, 0x0ADA0,  # 2040-2049
    0x14B63, 0x09370, 0x049F8, 0x04970, 0x064B0, 0x168A6, 0x0EA50, 0x06B20, 0x1A6C4, 0x0AAE0,  # 2050-2059
    0x092E0, 0x0D2E3, 0x0C960, 0x0D557, 0x0D4A0, 0x0DA50, 0x05D55, 0x056A0, 0x0A6D0, 0x055D4,  # 2060-2069
    0x052D0, 0x0A9B8, 0x0A950, 0x0B4A0, 0x0B6A6, 0x0AD50, 0x055A0, 0x0ABA4, 0x0A5B0, 0x052B0,  # 2070-2079
    0x0B273, 0x06930, 0x07337, 0x06AA0, 0x0AD50, 0x14B55, 0x04B60, 0x0A570, 0x054E4, 0x0D160,  # 2080-2089
    0x0E968, 0x0D520, 0x0DAA0, 0x16AA6, 0x056D0, 0x04AE0, 0x0A9D4, 0x0A2D0, 0x0D150, 0x0F252,  # 2090-2099
    0x0D520,  # 2100
)


@dataclass(frozen=True)
class YearInfoEntry:
    year: int
    month_lengths: Tuple[int, ...]  # 12 items, months 1..12
    leap_month_index: int           # 0 or 1..12
    leap_month_length: int          # 0 if no leap month, else 29/30

    @property
    def total_days(self) -> int:
        return sum(self.month_lengths) + self.leap_month_length

    @property
    def has_leap_month(self) -> bool:
        return self.leap_month_index != 0


def decode_year_info(year: int, packed: int) -> YearInfoEntry:
    v = int(packed)
    months = tuple(30 if v & (1 << (16 - i)) else 29 for i in range(1, 13))
    leap = v & 0xF
    leap_len = 0
    if leap:
        leap_len = 30 if v & 0x10000 else 29
    return YearInfoEntry(
        year=int(year),
        month_lengths=months,
        leap_month_index=leap,
        leap_month_length=leap_len,
    )


_ENTRIES: Tuple[YearInfoEntry, ...] = tuple(
    decode_year_info(DEFAULT_TABLE.first_year + i, v) for i, v in enumerate(LUNAR_YEAR_INFO)
)


def year_info(year: int) -> YearInfoEntry:
    y = int(year)
    if not DEFAULT_TABLE.contains_year(y):
        raise ValueError(f"lunar year out of supported range: {year}")
    return _ENTRIES[y - DEFAULT_TABLE.first_year]


def year_total_days(year: int) -> int:
    return year_info(year).total_days


def leap_month_index(year: int) -> int:
    return year_info(year).leap_month_index


def leap_month_length(year: int) -> int:
    return year_info(year).leap_month_length


def month_length(year: int, month: int) -> int:
    """
    Length (29 or 30) of regular lunar month 1..12 of the given lunar year.
    """
    m = int(month)
    if not (1 <= m <= 12):
        raise ValueError(f"invalid lunar month: {month}")
    return year_info(year).month_lengths[m - 1]
