"""Tests for /healthz and /ready observability endpoints."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from email_polisher.health import register_health_routes
from email_polisher.llm.client import MockGenerationClient

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_app(services: dict | None = None) -> FastAPI:
    """Create a minimal FastAPI app with health routes and given services."""
    app = FastAPI()
    app.state.services = services or {}
    register_health_routes(app)
    return app


# ---------------------------------------------------------------------------
# /healthz (liveness)
# ---------------------------------------------------------------------------


class TestHealthzEndpoint:
    def test_healthz_returns_ok(self) -> None:
        response = TestClient(_make_app()).get("/healthz")

        assert response.status_code == 200
        assert response.json() == {"ok": True}


# ---------------------------------------------------------------------------
# /ready (readiness)
# ---------------------------------------------------------------------------


class TestReadyEndpoint:
    """GET /ready readiness probe."""

    def test_ready_when_services_loaded(self, resources) -> None:
        app = _make_app({"resources": resources, "generation_client": MockGenerationClient()})

        response = TestClient(app).get("/ready")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "checks": {"resources": "ok", "generation_client": "ok"},
        }

    def test_not_ready_without_client(self, resources) -> None:
        app = _make_app({"resources": resources, "generation_client": None})

        response = TestClient(app).get("/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not_ready"
        assert body["checks"]["generation_client"] == "fail"
        assert body["checks"]["resources"] == "ok"

    def test_not_ready_when_empty(self) -> None:
        response = TestClient(_make_app()).get("/ready")

        assert response.status_code == 503
        assert response.json()["checks"] == {"resources": "fail", "generation_client": "fail"}
