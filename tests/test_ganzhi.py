from __future__ import annotations

from datetime import date, timedelta

import pytest

from nongli.features.config import BRANCHES, STEMS
from nongli.features.ganzhi import (
    day_ganzhi,
    ganzhi_from_offset,
    month_ganzhi,
    year_ganzhi,
    zodiac_animal,
    zodiac_sign,
)


def _cycle():
    return [ganzhi_from_offset(i) for i in range(60)]


def test_sixty_cycle():
    names = _cycle()
    assert names[0] == "甲子"
    assert names[59] == "癸亥"
    assert len(set(names)) == 60
    assert ganzhi_from_offset(60) == "甲子"
    assert ganzhi_from_offset(125) == names[5]


@pytest.mark.parametrize(
    "year,name",
    [(1900, "庚子"), (1983, "癸亥"), (1984, "甲子"), (1999, "己卯"), (2000, "庚辰"), (2026, "丙午"), (2100, "庚申")],
)
def test_year_ganzhi(year, name):
    assert year_ganzhi(year) == name


def test_year_ganzhi_wraps_and_repeats():
    for y in range(1900, 2041):
        assert year_ganzhi(y) == year_ganzhi(y + 60)
        assert year_ganzhi(y) == ganzhi_from_offset(y - 4)
        assert year_ganzhi(y)[0] in STEMS and year_ganzhi(y)[1] in BRANCHES


@pytest.mark.parametrize(
    "ymd,name",
    [
        ((2000, 1, 1), "丙子"),
        ((2000, 2, 10), "戊寅"),
        ((2026, 2, 3), "己丑"),
        ((2026, 2, 4), "庚寅"),
        ((2023, 4, 20), "丙辰"),
        ((1900, 1, 31), "丁丑"),
    ],
)
def test_month_ganzhi(ymd, name):
    assert month_ganzhi(*ymd) == name


@pytest.mark.parametrize(
    "ymd,name",
    [
        ((1900, 1, 31), "甲辰"),
        ((1949, 10, 1), "甲子"),
        ((1970, 1, 1), "辛巳"),
        ((2000, 1, 1), "戊午"),
        ((2026, 2, 17), "壬戌"),
    ],
)
def test_day_ganzhi(ymd, name):
    assert day_ganzhi(*ymd) == name


def test_day_ganzhi_advances_daily():
    names = _cycle()
    d = date(2023, 12, 25)
    first = names.index(day_ganzhi(d.year, d.month, d.day))
    for i in range(1, 130):
        cur = d + timedelta(days=i)
        assert day_ganzhi(cur.year, cur.month, cur.day) == names[(first + i) % 60]


def test_zodiac_animal():
    assert zodiac_animal(2026) == "马"
    assert zodiac_animal(1984) == "鼠"
    assert zodiac_animal(2000) == "龙"
    for y in range(1900, 2089):
        assert zodiac_animal(y) == zodiac_animal(y + 12)
    assert len({zodiac_animal(y) for y in range(2000, 2012)}) == 12


@pytest.mark.parametrize(
    "md,sign",
    [
        ((1, 1), "摩羯"),
        ((1, 19), "摩羯"),
        ((1, 20), "水瓶"),
        ((2, 18), "水瓶"),
        ((2, 19), "双鱼"),
        ((3, 20), "双鱼"),
        ((3, 21), "白羊"),
        ((7, 23), "狮子"),
        ((12, 21), "射手"),
        ((12, 22), "摩羯"),
        ((12, 31), "摩羯"),
    ],
)
def test_zodiac_sign(md, sign):
    assert zodiac_sign(*md) == sign


def test_zodiac_sign_invalid_month():
    with pytest.raises(ValueError):
        zodiac_sign(13, 1)
