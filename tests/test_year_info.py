from __future__ import annotations

import pytest

from nongli.core.year_info import (
    LUNAR_YEAR_INFO,
    decode_year_info,
    leap_month_index,
    leap_month_length,
    month_length,
    year_info,
    year_total_days,
)


def _years():
    return range(1900, 2101)


def test_table_covers_201_years():
    assert len(LUNAR_YEAR_INFO) == 201


def test_month_lengths_sum_to_year_total():
    for y in _years():
        total = sum(month_length(y, m) for m in range(1, 13)) + leap_month_length(y)
        assert total == year_total_days(y), y
        assert 353 <= total <= 385, (y, total)


def test_no_leap_month_means_zero_leap_length():
    for y in _years():
        if leap_month_index(y) == 0:
            assert leap_month_length(y) == 0, y
        else:
            assert 1 <= leap_month_index(y) <= 12
            assert leap_month_length(y) in (29, 30), y


def test_decode_1900():
    e = decode_year_info(1900, 0x04BD8)
    assert e.month_lengths == (29, 30, 29, 29, 30, 29, 30, 30, 30, 30, 29, 30)
    assert e.leap_month_index == 8
    assert e.leap_month_length == 29
    assert e.total_days == 384
    assert e.has_leap_month


def test_decode_leap_length_bit():
    # bit 16 set -> 30-day leap month
    assert decode_year_info(1906, 0x16554).leap_month_length == 30
    # leap bit without a leap month index is ignored
    assert decode_year_info(1999, 0x10000).leap_month_length == 0


@pytest.mark.parametrize(
    "year,leap",
    [(2017, 6), (2020, 4), (2023, 2), (2025, 6), (2033, 11), (2024, 0), (2026, 0)],
)
def test_known_leap_months(year, leap):
    assert leap_month_index(year) == leap


def test_year_info_is_shared_entry():
    assert year_info(2000) is year_info(2000)
    assert year_info(2000).year == 2000


@pytest.mark.parametrize("year", [1899, 2101])
def test_year_out_of_range(year):
    with pytest.raises(ValueError):
        year_total_days(year)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month):
    with pytest.raises(ValueError):
        month_length(2000, month)
