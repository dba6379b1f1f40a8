# src/nongli/features/config.py
from __future__ import annotations

"""
Feature-level name tables.

- 天干/地支 (10 stems, 12 branches) for the 60-term sexagesimal cycle
- 生肖 (12 zodiac animals)
- 二十四节气 (24 solar terms), term n=1..24 starting from 小寒
- 星座 (tropical zodiac signs) with per-month boundary days
- lunar month / day ordinal names
"""

from typing import Dict, List, Tuple

from nongli.core.config import DEFAULT_LABELS, LabelConfig

STEMS: Tuple[str, ...] = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")

BRANCHES: Tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")

ZODIAC_ANIMALS: Tuple[str, ...] = ("鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪")

SOLAR_TERM_NAMES: List[str] = [
    "小寒",
    "大寒",
    "立春",
    "雨水",
    "惊蛰",
    "春分",
    "清明",
    "谷雨",
    "立夏",
    "小满",
    "芒种",
    "夏至",
    "小暑",
    "大暑",
    "立秋",
    "处暑",
    "白露",
    "秋分",
    "寒露",
    "霜降",
    "立冬",
    "小雪",
    "大雪",
    "冬至",
]

# ============================================================
# 星座 (tropical zodiac signs)
#   ZODIAC_SIGNS[k] is the sign starting on ZODIAC_SIGN_START_DAYS[k-1] of
#   month k; entry 0 (and 12) is 摩羯, which spans the year boundary.
# ============================================================

ZODIAC_SIGNS: Tuple[str, ...] = (
    "摩羯",
    "水瓶",
    "双鱼",
    "白羊",
    "金牛",
    "双子",
    "巨蟹",
    "狮子",
    "处女",
    "天秤",
    "天蝎",
    "射手",
    "摩羯",
)

ZODIAC_SIGN_START_DAYS: Tuple[int, ...] = (20, 19, 21, 21, 21, 22, 23, 23, 23, 23, 22, 22)

# ============================================================
# Lunar ordinals
# ============================================================

LUNAR_MONTH_NAMES: Tuple[str, ...] = ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊")

# ones digit, index 0 unused by the compound form
DAY_ONES: Tuple[str, ...] = ("日", "一", "二", "三", "四", "五", "六", "七", "八", "九", "十")
DAY_TENS: Tuple[str, ...] = ("初", "十", "廿", "卅")

# whole tens are not compound: 初十 / 二十 / 三十
DAY_SPECIAL: Dict[int, str] = {
    10: "初十",
    20: "二十",
    30: "三十",
}


def solar_term_name(term_no: int) -> str:
    n = int(term_no)
    if not (1 <= n <= 24):
        raise ValueError(f"solar term number out of range: {term_no}")
    return SOLAR_TERM_NAMES[n - 1]


def lunar_month_name(month_no: int, *, labels: LabelConfig = DEFAULT_LABELS) -> str:
    m = int(month_no)
    if not (1 <= m <= 12):
        raise ValueError(f"invalid lunar month_no: {month_no}")
    return f"{LUNAR_MONTH_NAMES[m - 1]}{labels.month_suffix}"


def lunar_month_display_name(month_no: int, is_leap: bool, *, labels: LabelConfig = DEFAULT_LABELS) -> str:
    base = lunar_month_name(month_no, labels=labels)
    return f"{labels.leap_marker}{base}" if is_leap else base


def lunar_day_name(day: int) -> str:
    d = int(day)
    if not (1 <= d <= 30):
        raise ValueError(f"lunar day out of range: {day}")
    special = DAY_SPECIAL.get(d)
    if special is not None:
        return special
    return f"{DAY_TENS[d // 10]}{DAY_ONES[d % 10]}"
