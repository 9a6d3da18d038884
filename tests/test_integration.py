"""
End-to-end scenario against a real PostgreSQL.

Destroys and recreates the tables in the target database, so it only runs
when ``TEST_DATABASE_URL`` points at a disposable database.
"""

import os

import pytest
from fastapi.testclient import TestClient

import main
import scripts.migrate as migrate

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"),
]


@pytest.fixture
def live_client(monkeypatch):
    assert migrate.main(["--database-url", TEST_DATABASE_URL, "--reset", "--yes", "--seed"]) == 0
    monkeypatch.setattr(main, "DATABASE_URL", TEST_DATABASE_URL)
    with TestClient(main.create_app()) as client:
        yield client


def test_seeded_directory_scenario(live_client):
    departments = live_client.get("/api/departments").json()
    assert departments == [
        {"id": 1, "name": "HTML"},
        {"id": 2, "name": "CSS"},
        {"id": 3, "name": "Javascript"},
    ]

    employees = live_client.get("/api/employees").json()
    assert [e["name"] for e in employees] == ["Employee 1", "Employee 2", "Employee 3", "Employee 4"]
    assert [e["department_id"] for e in employees] == [1, 2, 3, 3]

    created = live_client.post("/api/employees", json={"name": "Employee 5", "department_id": 1})
    assert created.status_code == 200
    assert created.json()["id"] == 5
    assert created.json()["created_at"] == created.json()["updated_at"]

    assert len(live_client.get("/api/employees").json()) == 5


def test_update_and_delete_round_trip(live_client):
    before = live_client.get("/api/employees").json()[0]

    updated = live_client.put("/api/employees/1", json={"name": "Renamed", "department_id": 2})
    assert updated.status_code == 200
    assert updated.json()["created_at"] == before["created_at"]
    assert updated.json()["updated_at"] > before["updated_at"]

    assert live_client.put("/api/employees/999", json={"name": "X", "department_id": 1}).status_code == 404

    assert live_client.delete("/api/employees/1").status_code == 204
    assert live_client.delete("/api/employees/1").json() == {"error": "Employee not found!"}
    assert 1 not in [e["id"] for e in live_client.get("/api/employees").json()]


def test_foreign_key_violation_is_500(live_client):
    response = live_client.post("/api/employees", json={"name": "Ghost", "department_id": 999})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert len(live_client.get("/api/employees").json()) == 4


def test_health_ping(live_client):
    assert live_client.get("/api/health/ping").json()["database"] == "ok"
