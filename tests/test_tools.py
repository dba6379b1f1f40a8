from __future__ import annotations

import argparse
import json
import sys
from datetime import date

import pytest

from tools import lunar_check, solar_term_check
from tools.common import add_date_args, resolve_date_range


def _run(monkeypatch, module, argv):
    monkeypatch.setattr(sys, "argv", [module.__name__, *argv])
    module.main()


def _resolve(argv):
    parser = argparse.ArgumentParser()
    add_date_args(parser)
    return resolve_date_range(parser, parser.parse_args(argv))


def test_lunar_check_text(monkeypatch, capsys):
    _run(monkeypatch, lunar_check, ["--start", "2026-02-16", "--end", "2026-02-17"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "2026-02-16  乙巳年腊月廿九"
    assert out[-1] == "2026-02-17  丙午年正月初一"


def test_lunar_check_json(monkeypatch, capsys):
    _run(monkeypatch, lunar_check, ["--date", "1900-01-30", "--json"])
    rows = json.loads(capsys.readouterr().out)["rows"]
    assert rows == [{"date": "1900-01-30", "lunar": None, "text": "无农历数据"}]


def test_lunar_check_partial_overlap_reports_unsupported(monkeypatch, capsys):
    _run(monkeypatch, lunar_check, ["--start", "1900-01-30", "--end", "1900-01-31", "--json"])
    rows = json.loads(capsys.readouterr().out)["rows"]
    assert [r["lunar"] is None for r in rows] == [True, False]
    assert rows[1]["lunar"]["lunar_year"] == 1900


def test_lunar_check_skips_outside_table(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, lunar_check, ["--date", "2101-01-01"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("SKIP:")


def test_resolve_date_range_is_half_open():
    assert _resolve(["--start", "2026-02-16", "--end", "2026-02-17"]) == (date(2026, 2, 16), date(2026, 2, 18))
    assert _resolve(["--date", "2026-02-17"]) == (date(2026, 2, 17), date(2026, 2, 18))


def test_resolve_date_range_today():
    start, stop = _resolve(["--today", "--tz", "UTC"])
    assert (stop - start).days == 1


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--start", "2026-02-17", "--end", "2026-02-16"],
        ["--date", "2026-02-30"],
        ["--today", "--tz", "Nowhere/Invalid"],
    ],
)
def test_resolve_date_range_rejects(argv):
    with pytest.raises(SystemExit) as exc:
        _resolve(argv)
    assert exc.value.code == 2


def test_solar_term_check_json(monkeypatch, capsys):
    _run(monkeypatch, solar_term_check, ["--year", "2026", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["year"] == 2026
    assert payload["terms"][2] == {"n": 3, "name": "立春", "date": "2026-02-04"}
