"""API tests for toast endpoints."""

from __future__ import annotations

import time
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from toaster.core.config import Settings, ToastConfig
from toaster.web.app import create_app


@pytest.fixture
def client() -> Iterator[TestClient]:
    # The context manager keeps one event loop alive, so removal timers fire.
    app = create_app(settings=Settings(toast=ToastConfig(limit=3, remove_delay_ms=10)))
    with TestClient(app) as test_client:
        yield test_client


class TestToastAPI:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_enqueue_and_list(self, client: TestClient) -> None:
        resp = client.post("/api/toasts", json={"title": "Profile updated"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["open"] is True
        assert data["variant"] == "default"

        listed = client.get("/api/toasts").json()
        assert [t["id"] for t in listed] == [data["id"]]

    def test_enqueue_from_template(self, client: TestClient) -> None:
        resp = client.post(
            "/api/toasts",
            json={"template_id": "invalid_file", "context": {"file_name": "a.txt"}},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["variant"] == "destructive"
        assert "a.txt" in data["description"]

    def test_invalid_variant_rejected(self, client: TestClient) -> None:
        resp = client.post("/api/toasts", json={"title": "x", "variant": "neon"})
        assert resp.status_code == 422

    def test_capacity(self, client: TestClient) -> None:
        ids = [client.post("/api/toasts", json={"title": str(i)}).json()["id"] for i in range(4)]
        listed = [t["id"] for t in client.get("/api/toasts").json()]
        assert listed == list(reversed(ids))[:3]

    def test_update(self, client: TestClient) -> None:
        toast_id = client.post("/api/toasts", json={"title": "Converting"}).json()["id"]
        resp = client.patch(f"/api/toasts/{toast_id}", json={"title": "Done"})
        assert resp.status_code == 200
        assert resp.json()["title"] == "Done"
        assert resp.json()["open"] is True

    def test_update_ignores_null_open_and_variant(self, client: TestClient) -> None:
        toast_id = client.post(
            "/api/toasts", json={"title": "x", "variant": "destructive"}
        ).json()["id"]
        resp = client.patch(f"/api/toasts/{toast_id}", json={"open": None, "variant": None})
        assert resp.status_code == 200
        assert resp.json()["open"] is True
        assert resp.json()["variant"] == "destructive"

    def test_update_clears_nullable_fields(self, client: TestClient) -> None:
        toast_id = client.post(
            "/api/toasts", json={"title": "x", "description": "y"}
        ).json()["id"]
        resp = client.patch(f"/api/toasts/{toast_id}", json={"description": None})
        assert resp.status_code == 200
        assert resp.json()["description"] is None

    def test_update_wrong_type_rejected(self, client: TestClient) -> None:
        toast_id = client.post("/api/toasts", json={"title": "x"}).json()["id"]
        resp = client.patch(f"/api/toasts/{toast_id}", json={"open": "nope"})
        assert resp.status_code == 422

    def test_update_not_found(self, client: TestClient) -> None:
        resp = client.patch("/api/toasts/nonexistent", json={"title": "x"})
        assert resp.status_code == 404

    def test_dismiss(self, client: TestClient) -> None:
        toast_id = client.post("/api/toasts", json={"title": "x"}).json()["id"]
        resp = client.post(f"/api/toasts/{toast_id}/dismiss")
        assert resp.status_code == 200
        assert resp.json()["open"] is False

    def test_dismiss_then_removed(self, client: TestClient) -> None:
        toast_id = client.post("/api/toasts", json={"title": "bye"}).json()["id"]
        client.post(f"/api/toasts/{toast_id}/dismiss")

        time.sleep(0.2)

        listed = [t["id"] for t in client.get("/api/toasts").json()]
        assert toast_id not in listed
        assert client.app.state.toast_service.scheduler.pending == []

    def test_dismiss_not_found(self, client: TestClient) -> None:
        resp = client.post("/api/toasts/nonexistent/dismiss")
        assert resp.status_code == 404

    def test_dismiss_all(self, client: TestClient) -> None:
        client.post("/api/toasts", json={"title": "a"})
        client.post("/api/toasts", json={"title": "b"})
        resp = client.post("/api/toasts/dismiss")
        assert resp.status_code == 200
        assert len(resp.json()["dismissed"]) == 2
        assert all(not t["open"] for t in client.get("/api/toasts").json())

    def test_shutdown_clears_toasts(self) -> None:
        app = create_app()
        with TestClient(app) as client:
            client.post("/api/toasts", json={"title": "a"})
            assert len(client.get("/api/toasts").json()) == 1
        assert app.state.toast_service.toasts == ()

    def test_dismiss_all_reports_only_newly_closed(self) -> None:
        # Long delay so the first dismissed toast is still present.
        app = create_app(settings=Settings(toast=ToastConfig(remove_delay_ms=60_000)))
        with TestClient(app) as client:
            first = client.post("/api/toasts", json={"title": "a"}).json()["id"]
            second = client.post("/api/toasts", json={"title": "b"}).json()["id"]
            client.post(f"/api/toasts/{first}/dismiss")

            resp = client.post("/api/toasts/dismiss")

            assert resp.json()["dismissed"] == [second]
