from __future__ import annotations

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from nongli.api.app import app
from nongli.api.public import get_lunar_day, get_lunar_range, get_solar_terms


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


def test_day_endpoint(client):
    r = client.get("/api/v1/lunar/day", params={"date": "2026-02-17"})
    assert r.status_code == 200
    body = r.json()
    assert body["date"] == "2026-02-17"
    assert body["text"] == "丙午年正月初一"
    lunar = body["lunar"]
    assert lunar["year"] == 2026
    assert lunar["month_label"] == "正月"
    assert lunar["day_label"] == "初一"
    assert lunar["gz_day"] == "壬戌"
    assert lunar["is_leap"] is False


def test_day_endpoint_unsupported_date(client):
    r = client.get("/api/v1/lunar/day", params={"date": "1899-12-31"})
    assert r.status_code == 200
    assert r.json()["lunar"] is None
    assert r.json()["text"] == "无农历数据"


def test_day_endpoint_bad_date(client):
    r = client.get("/api/v1/lunar/day", params={"date": "2026-02-30"})
    assert r.status_code == 422


def test_today_endpoint(client):
    r = client.get("/api/v1/lunar/today", params={"tz": "Asia/Shanghai"})
    assert r.status_code == 200
    assert r.json()["lunar"] is not None

    r = client.get("/api/v1/lunar/today", params={"tz": "Nowhere/Zone"})
    assert r.status_code == 422


def test_range_endpoint(client):
    r = client.get("/api/v1/lunar/range", params={"start": "2023-03-21", "end": "2023-03-23"})
    assert r.status_code == 200
    days = r.json()["days"]
    assert [d["date"] for d in days] == ["2023-03-21", "2023-03-22", "2023-03-23"]
    assert [d["lunar"]["is_leap"] for d in days] == [False, True, True]
    assert days[0]["lunar"]["solar_term"] == "春分"


def test_range_endpoint_limits(client):
    r = client.get("/api/v1/lunar/range", params={"start": "2023-03-23", "end": "2023-03-21"})
    assert r.status_code == 422
    r = client.get("/api/v1/lunar/range", params={"start": "2023-03-21", "end": "2023-03-23", "limit_days": 2})
    assert r.status_code == 422


def test_solar_terms_endpoint(client):
    r = client.get("/api/v1/solar-terms", params={"year": 2026})
    assert r.status_code == 200
    terms = r.json()["terms"]
    assert len(terms) == 24
    assert terms[3] == {"n": 4, "name": "雨水", "date": "2026-02-18"}
    assert terms[-1]["date"] == "2026-12-22"

    assert client.get("/api/v1/solar-terms", params={"year": 2101}).status_code == 422


def test_function_style():
    d = get_lunar_day("2000-01-01")
    assert d["lunar"]["gz_day"] == "戊午"
    assert d["lunar"]["month_label"] == "冬月"

    rng = get_lunar_range("2020-05-22", "2020-05-23")
    assert [x["lunar"]["is_leap"] for x in rng["days"]] == [False, True]

    assert get_solar_terms(1900)["terms"][0]["date"] == "1900-01-06"


def test_function_style_env_limit(monkeypatch):
    monkeypatch.setenv("NONGLI_API_LIMIT_DAYS", "2")
    with pytest.raises(HTTPException):
        get_lunar_range("2020-05-21", "2020-05-23")
    assert len(get_lunar_range("2020-05-21", "2020-05-23", limit_days=3)["days"]) == 3


def test_range_endpoint_at_max_date(client):
    r = client.get("/api/v1/lunar/range", params={"start": "9999-12-30", "end": "9999-12-31"})
    assert r.status_code == 200
    days = r.json()["days"]
    assert [d["date"] for d in days] == ["9999-12-30", "9999-12-31"]
    assert all(d["lunar"] is None for d in days)


def test_today_endpoint_default_tz(client):
    r = client.get("/api/v1/lunar/today")
    assert r.status_code == 200
    assert r.json()["text"] != "无农历数据"
