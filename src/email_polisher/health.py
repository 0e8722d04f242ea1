"""Health and readiness endpoints for container orchestration.

Provides two top-level routes:

- ``GET /healthz`` -- Liveness probe.  Returns 200 if the process is alive.
- ``GET /ready``   -- Readiness probe.  Returns 200 only when the resource
  bundle is loaded **and** a generation client is configured.  Returns 503
  with per-check details otherwise.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


def register_health_routes(app: FastAPI) -> None:
    """Register ``/healthz`` and ``/ready`` endpoints on *app*.

    Args:
        app: The FastAPI application instance.
    """

    @app.get("/healthz")
    async def healthz() -> dict[str, bool]:
        """Liveness probe -- always returns 200 if the process is running."""
        return {"ok": True}

    @app.get("/ready")
    async def ready(request: Request) -> JSONResponse:
        """Readiness probe -- checks resources and the generation client."""
        services: dict[str, Any] = request.app.state.services
        checks = {
            "resources": "ok" if services.get("resources") is not None else "fail",
            "generation_client": "ok" if services.get("generation_client") is not None else "fail",
        }

        all_ok = all(v == "ok" for v in checks.values())
        status = "ready" if all_ok else "not_ready"
        code = 200 if all_ok else 503

        return JSONResponse(content={"status": status, "checks": checks}, status_code=code)
