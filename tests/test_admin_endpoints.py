"""Tests for maintenance endpoints."""

from fastapi.testclient import TestClient

from meal_vault.api.app import create_app


def test_export_includes_all_records(container) -> None:
    client = TestClient(create_app(container))
    client.post("/meals", json={"name": "Lunch", "calories": 600})
    client.put("/settings", json={"daily_calorie_goal": 1800})

    data = client.get("/admin/export").json()

    assert [log["date"] for log in data["daily_logs"]] == ["2024-03-05"]
    assert data["saved_recipes"] == []
    assert data["history_entries"] == []
    assert data["user_settings"] == {"dailyCalorieGoal": 1800}


def test_clear_wipes_history_too(container, storage) -> None:
    client = TestClient(create_app(container))
    client.post("/meals", json={"name": "Lunch", "calories": 600})
    client.post("/vault")

    response = client.post("/admin/clear")

    assert response.status_code == 200
    assert storage.entries == {}
    assert client.get("/history").json() == {"entries": []}


def test_clear_failure_returns_retry_prompt(container, storage) -> None:
    client = TestClient(create_app(container))
    storage.fail_writes = True

    response = client.post("/admin/clear")

    assert response.status_code == 503
