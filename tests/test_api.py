"""
HTTP surface with the session and transport swapped out.
"""
from __future__ import annotations

import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from config import settings
from core.errors import USER_FACING_PLAN_ERROR
from core.session import NutritionSession
from main import app
from services.gemini import generate_content
from services.state import get_session, get_transport

PROFILE = {
    "name": "Ana",
    "age": 30,
    "height_cm": 175,
    "weight_kg": 70,
    "activity_level": "sedentary",
    "dietary_preference": "vegetarian",
    "health_goal": "weight-loss",
}
PLAN = {
    "meals": {"Breakfast": "Oats", "Lunch": "Dal", "Dinner": "Curry", "Snack": "Nuts"},
    "macros": {"protein": 25, "carbs": 50, "fats": 25},
}


def envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeTransport:
    def __init__(self) -> None:
        self.response: object = envelope(json.dumps(PLAN))

    async def __call__(self, payload: dict) -> object:
        return self.response


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport):
    session = NutritionSession(today=lambda: date(2026, 10, 17))

    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_transport] = lambda: transport
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _plan(client):
    r = client.post("/api/v1/plans", json=PROFILE)
    assert r.status_code == 201, r.text
    return r.json()


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_metrics(client):
    r = client.post("/api/v1/metrics", json=PROFILE)
    assert r.status_code == 200
    assert r.json() == {"bmi": 22.9, "calories": 1479}


def test_unknown_activity_rejected(client):
    r = client.post("/api/v1/metrics", json=dict(PROFILE, activity_level="couch"))
    assert r.status_code == 422


def test_create_plan_starts_session(client):
    body = _plan(client)
    assert body["metrics"]["calories"] == 1479
    assert list(body["plan"]["meals"]) == ["Breakfast", "Lunch", "Dinner", "Snack"]
    assert body["anomalies"] == []

    s = client.get("/api/v1/session").json()
    assert s["profile"]["name"] == "Ana"
    assert s["highlights"] == {"calories": 1479, "bmi": 22.9, "protein": 25, "carbs": 50}
    assert s["weights"] == [{"date": "2026-10-17", "display_date": "10/17/2026", "weight": 70.0}]


def test_failed_plan_hides_raw_text(client, transport):
    transport.response = envelope("SECRET internal model chatter")
    r = client.post("/api/v1/plans", json=PROFILE)
    assert r.status_code == 502
    assert r.json()["detail"] == USER_FACING_PLAN_ERROR
    assert "SECRET" not in r.text
    assert client.get("/api/v1/session").json()["profile"] is None


def test_log_meals(client):
    _plan(client)
    r = client.post("/api/v1/session/meals", json={"meals": []})
    assert r.status_code == 422
    assert r.json()["detail"] == "Please check at least one meal to log your day."

    r = client.post("/api/v1/session/meals", json={"meals": ["Breakfast", "Lunch"]})
    assert r.status_code == 201
    assert r.json()["meals"] == ["Breakfast", "Lunch"]
    assert len(client.get("/api/v1/session").json()["meal_log"]) == 1


def test_record_weight(client):
    _plan(client)
    assert client.post("/api/v1/session/weights", json={"weight": -5}).status_code == 422
    assert client.post("/api/v1/session/weights", json={"weight": 69.5}).status_code == 201

    progress = client.get("/api/v1/session/progress").json()
    assert progress["weights"]["series"] == [70.0, 69.5]
    assert progress["macros"] == {"protein": 25.0, "carbs": 50.0, "fats": 25.0}


def test_pro_and_logout(client):
    _plan(client)
    assert client.post("/api/v1/session/pro").json() == {"is_pro": True}
    assert client.post("/api/v1/session/logout").status_code == 204

    s = client.get("/api/v1/session").json()
    assert s["profile"] is None and s["plan"] is None
    assert s["weights"] == [] and not s["is_pro"]


@pytest.mark.parametrize(
    "field, value",
    [
        ("weight_kg", 1e308),
        ("height_cm", 1e308),
        ("age", 10**9),
    ],
)
def test_out_of_range_profile_rejected(client, field, value):
    bad = dict(PROFILE, **{field: value})
    assert client.post("/api/v1/metrics", json=bad).status_code == 422

    assert client.post("/api/v1/plans", json=bad).status_code == 422
    assert client.get("/api/v1/session").json()["profile"] is None


def test_infinite_weight_rejected(client):
    body = json.dumps(PROFILE).replace("70", "Infinity")
    r = client.post(
        "/api/v1/metrics", content=body, headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 422


def test_missing_api_key_gives_generic_error(client, monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    app.dependency_overrides[get_transport] = lambda: generate_content

    r = client.post("/api/v1/plans", json=PROFILE)
    assert r.status_code == 502
    assert r.json()["detail"] == USER_FACING_PLAN_ERROR
    assert client.get("/api/v1/session").json()["profile"] is None
