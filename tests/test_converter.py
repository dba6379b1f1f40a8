from __future__ import annotations

from datetime import date, timedelta

import pytest

from nongli.core.converter import LunarDate, is_supported, lunar_dates_between, to_lunar_date
from nongli.core.year_info import leap_month_index, leap_month_length, month_length


def _ld(y, m, d):
    out = to_lunar_date(y, m, d)
    assert out is not None, (y, m, d)
    return out


def _length_of(ld: LunarDate) -> int:
    if ld.is_leap:
        return leap_month_length(ld.year)
    return month_length(ld.year, ld.month)


def test_epoch_anchor():
    assert _ld(1900, 1, 31) == LunarDate(year=1900, month=1, day=1, is_leap=False, solar_term=None)
    assert _ld(1900, 2, 1).day == 2


@pytest.mark.parametrize(
    "ymd",
    [
        (1900, 1, 30),   # before epoch anchor
        (1900, 1, 1),
        (1899, 12, 31),  # year out of range
        (2101, 1, 1),
        (2023, 2, 29),   # invalid day
        (2024, 2, 30),
        (2023, 13, 1),   # invalid month
        (2023, 0, 10),
        (2023, 5, 0),
    ],
)
def test_unsupported_dates(ymd):
    assert to_lunar_date(*ymd) is None
    assert not is_supported(*ymd)


@pytest.mark.parametrize(
    "ymd,expected",
    [
        ((2000, 1, 1), (1999, 11, 25, False)),
        ((1949, 10, 1), (1949, 8, 10, False)),
        ((1984, 2, 2), (1984, 1, 1, False)),
        ((2024, 2, 10), (2024, 1, 1, False)),
        ((2026, 2, 16), (2025, 12, 29, False)),
        ((2026, 2, 17), (2026, 1, 1, False)),
        ((2100, 12, 31), (2100, 12, 1, False)),
    ],
)
def test_known_dates(ymd, expected):
    ld = _ld(*ymd)
    assert (ld.year, ld.month, ld.day, ld.is_leap) == expected


def test_leap_month_entry_and_exit_2023():
    # 2023 has 闰二月: 2023-03-22 .. 2023-04-19
    assert _ld(2023, 3, 21) == LunarDate(2023, 2, 30, False, 6)
    assert _ld(2023, 3, 22) == LunarDate(2023, 2, 1, True, None)
    assert _ld(2023, 4, 19) == LunarDate(2023, 2, 29, True, None)
    assert _ld(2023, 4, 20) == LunarDate(2023, 3, 1, False, 8)


def test_leap_month_entry_and_exit_2020():
    # 2020 has 闰四月: 2020-05-23 .. 2020-06-20
    assert _ld(2020, 5, 22) == LunarDate(2020, 4, 30, False, None)
    assert _ld(2020, 5, 23) == LunarDate(2020, 4, 1, True, None)
    assert _ld(2020, 6, 20) == LunarDate(2020, 4, 29, True, None)
    assert _ld(2020, 6, 21) == LunarDate(2020, 5, 1, False, 12)


@pytest.mark.parametrize(
    "ymd,month,is_leap",
    [
        ((2017, 6, 24), 6, False),
        ((2017, 7, 23), 6, True),
        ((2017, 8, 22), 7, False),
        ((2033, 12, 22), 11, True),
        ((2034, 1, 20), 12, False),
    ],
)
def test_leap_month_first_days(ymd, month, is_leap):
    ld = _ld(*ymd)
    assert (ld.month, ld.day, ld.is_leap) == (month, 1, is_leap)


def test_solar_term_days():
    assert _ld(2026, 2, 4).solar_term == 3
    assert _ld(2026, 2, 18).solar_term == 4
    assert _ld(2026, 2, 17).solar_term is None
    assert _ld(2034, 1, 20).solar_term == 2


def test_day_sequence_is_consistent_with_month_lengths():
    # every supported day, 1900-01-31 .. 2100-12-31
    prev = None
    for d, ld in lunar_dates_between(date(1900, 1, 31), date(2101, 1, 1)):
        assert ld is not None, d
        if prev is not None:
            if ld.day == 1:
                assert prev.day == _length_of(prev), (d, prev)
                # next month is the leap month of the same number, or month + 1
                if ld.is_leap:
                    assert ld.month == prev.month == leap_month_index(ld.year)
                elif prev.month == 12 and not prev.is_leap:
                    assert (ld.year, ld.month) == (prev.year + 1, 1)
                else:
                    assert ld.month == prev.month + 1
            else:
                assert (ld.year, ld.month, ld.is_leap) == (prev.year, prev.month, prev.is_leap)
                assert ld.day == prev.day + 1
        prev = ld
    assert (prev.year, prev.month, prev.day, prev.is_leap) == (2100, 12, 1, False)


def test_first_of_every_month_converts():
    for y in range(1900, 2101):
        for m in range(1, 13):
            if (y, m) == (1900, 1):
                continue
            ld = _ld(y, m, 1)
            assert 1 <= ld.month <= 12
            assert 1 <= ld.day <= _length_of(ld)
            assert ld.year in (y - 1, y)


def test_lunar_dates_between_is_half_open():
    rows = list(lunar_dates_between(date(1900, 1, 29), date(1900, 2, 2)))
    assert [d for d, _ in rows] == [date(1900, 1, 29) + timedelta(days=i) for i in range(4)]
    assert rows[0][1] is None and rows[1][1] is None
    assert rows[2][1].day == 1


def test_debug_trace(monkeypatch, capsys):
    monkeypatch.setenv("NONGLI_DEBUG_CONVERTER", "1")
    _ld(2023, 3, 22)
    err = capsys.readouterr().err
    assert "[NONGLI_DEBUG_CONVERTER] 2023-03-22" in err
    assert "is_leap=True" in err
