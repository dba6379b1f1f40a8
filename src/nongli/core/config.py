# src/nongli/core/config.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TableConfig:
    """
    Range covered by the baked-in lunar tables.

    epoch is Gregorian 1900-01-31 == lunar 1900/01/01 (the first day the
    year table can count from).
    """
    first_year: int = 1900
    last_year: int = 2100
    epoch: date = date(1900, 1, 31)

    def contains_year(self, year: int) -> bool:
        return self.first_year <= int(year) <= self.last_year


@dataclass(frozen=True)
class LabelConfig:
    """
    Opaque label pieces used when rendering a conversion result.
    """
    leap_marker: str = "闰"
    month_suffix: str = "月"
    year_suffix: str = "年"

    # to_lunar_string() output for dates without lunar data
    unsupported_text: str = "无农历数据"


DEFAULT_TABLE = TableConfig()
DEFAULT_LABELS = LabelConfig()
