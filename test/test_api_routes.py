from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.main import app


@pytest.fixture
def client(engine):
    app.dependency_overrides = {deps.task_engine: lambda: engine}
    yield TestClient(app)
    app.dependency_overrides = {}


def _create(client, **body):
    response = client.post("/api/tasks", json={"title": "Write report", **body})
    assert response.status_code == 201
    return response.json()


def test_create_and_get(client):
    created = _create(client, description="Quarterly")

    assert created["id"] == 1
    assert created["status"] == "TODO"
    assert created["created_at"] == created["updated_at"]

    response = client.get(f"/api/tasks/{created['id']}")
    assert response.status_code == 200
    assert response.json()["description"] == "Quarterly"


def test_create_with_blank_title_is_bad_request(client, repo):
    response = client.post("/api/tasks", json={"title": "  "})

    assert response.status_code == 400
    assert repo.writes == 0


def test_get_missing_task_is_404(client):
    assert client.get("/api/tasks/999").status_code == 404


def test_list_search_and_filter(client):
    _create(client, title="Spring Boot Basics")
    _create(client, title="Groceries", status="IN_PROGRESS")

    assert len(client.get("/api/tasks").json()) == 2

    found = client.get("/api/tasks/search", params={"keyword": "spring"}).json()
    assert [t["title"] for t in found] == ["Spring Boot Basics"]

    doing = client.get("/api/tasks/status/IN_PROGRESS").json()
    assert [t["title"] for t in doing] == ["Groceries"]


def test_filter_with_unknown_status_is_rejected(client):
    assert client.get("/api/tasks/status/ARCHIVED").status_code == 422


def test_update_replaces_task(client):
    created = _create(client, description="old")

    response = client.put(
        f"/api/tasks/{created['id']}", json={"title": "New", "status": "DONE"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "New"
    assert body["status"] == "DONE"
    assert body["description"] is None


def test_update_missing_task_is_404(client):
    response = client.put("/api/tasks/999", json={"title": "x"})

    assert response.status_code == 404


def test_delete(client):
    created = _create(client)

    assert client.delete(f"/api/tasks/{created['id']}").status_code == 204
    assert client.delete(f"/api/tasks/{created['id']}").status_code == 404


def test_complete_is_idempotent(client):
    created = _create(client)

    first = client.patch(f"/api/tasks/{created['id']}/complete")
    second = client.patch(f"/api/tasks/{created['id']}/complete")

    assert first.status_code == second.status_code == 200
    assert second.json()["status"] == "DONE"
    assert client.patch("/api/tasks/999/complete").status_code == 404


def test_home_page(client):
    body = client.get("/").json()

    assert body["tasks"] == "/api/tasks"


def test_writes_go_through_the_engine(engine):
    spy = MagicMock(wraps=engine)
    app.dependency_overrides = {deps.task_engine: lambda: spy}
    try:
        client = TestClient(app)
        created = client.post("/api/tasks", json={"title": "Via engine"}).json()
        client.patch(f"/api/tasks/{created['id']}/complete")
        client.delete(f"/api/tasks/{created['id']}")
    finally:
        app.dependency_overrides = {}

    spy.create.assert_called_once()
    spy.mark_complete.assert_called_once_with(created["id"])
    spy.delete.assert_called_once_with(created["id"])
    assert engine.list_all() == []
