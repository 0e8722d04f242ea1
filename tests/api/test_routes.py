"""Tests for the /draft and /refine HTTP routes.

The app is built with the mock generation client, so no network calls are
made.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from email_polisher.app import create_app, initialize_services
from email_polisher.config import Settings
from email_polisher.llm.refine import SERVICE_FAILED

THANK_YOU_TEXT = "Thank you so much for taking the time to interview me yesterday."

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def services() -> dict[str, Any]:
    return initialize_services(Settings(_env_file=None, production=False))  # type: ignore[call-arg]


@pytest.fixture()
def client(services: dict[str, Any]) -> TestClient:
    return TestClient(create_app(services))


def _tone(**overrides: Any) -> dict[str, Any]:
    tone = {"formality": 3, "confidence": 3, "seniority": "student", "length": "short"}
    return {**tone, **overrides}


class _ExplodingStrategy:
    name = "exploding"

    def build(self, draft_input, category):
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# POST /draft
# ---------------------------------------------------------------------------


class TestDraftRoute:
    def test_returns_processed_draft(self, client: TestClient) -> None:
        response = client.post("/draft", json={"text": THANK_YOU_TEXT})

        assert response.status_code == 200
        body = response.json()
        assert body["meta"]["category"] == "thankyou"
        assert body["draft"]["subject"] == "Thank You"
        assert body["checks"]["completeness"] is True
        assert response.headers["X-Request-ID"]

    def test_accepts_tone(self, client: TestClient) -> None:
        tone = {"formality": 5, "confidence": 3, "seniority": "student", "length": "medium"}
        response = client.post("/draft", json={"text": THANK_YOU_TEXT, "tone": tone})

        assert response.status_code == 200
        assert response.json()["draft"]["greeting"] == "Dear [Recipient Name],"

    def test_missing_text_is_400(self, client: TestClient) -> None:
        response = client.post("/draft", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["details"][0]["loc"] == ["body", "text"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"text": ""},
            {"text": "hi", "tone": _tone(formality=9)},
            {"text": "hi", "tone": _tone(seniority="intern")},
            {"text": "hi", "tone": _tone(formality="3")},
            {"text": "hi", "tone": _tone(formality=3.0)},
            {"text": "hi", "tone": _tone(formality=True)},
            {"text": "hi", "tone": _tone(confidence="2")},
        ],
    )
    def test_invalid_payload_is_400(self, client: TestClient, payload: dict) -> None:
        assert client.post("/draft", json=payload).status_code == 400

    def test_unexpected_error_is_500(self, services: dict[str, Any]) -> None:
        services["strategy"] = _ExplodingStrategy()
        client = TestClient(create_app(services), raise_server_exceptions=False)

        response = client.post("/draft", json={"text": THANK_YOU_TEXT})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


# ---------------------------------------------------------------------------
# POST /refine
# ---------------------------------------------------------------------------


class TestRefineRoute:
    """Baseline always; refinement only when requested."""

    def test_without_llm_omits_refinement(self, client: TestClient) -> None:
        response = client.post("/refine", json={"text": THANK_YOU_TEXT})

        assert response.status_code == 200
        assert set(response.json()) == {"baseline", "checks_before"}

    def test_with_llm(self, client: TestClient) -> None:
        response = client.post("/refine", json={"text": THANK_YOU_TEXT, "useLLM": True})

        assert response.status_code == 200
        body = response.json()
        assert body["refined"]["subject"] == "Re: Your inquiry"
        assert body["refine_warnings"] == []
        assert body["checks_after"]["ethical"] is True
        assert 0 <= body["eval_after"]["overall_score"] <= 100
        assert body["baseline"]["subject"] == "Thank You"

    def test_field_name_accepted(self, client: TestClient) -> None:
        response = client.post("/refine", json={"text": THANK_YOU_TEXT, "use_llm": True})
        assert "refined" in response.json()

    def test_client_failure_falls_back(self, services: dict[str, Any]) -> None:
        failing = AsyncMock()
        failing.complete.side_effect = ConnectionError("unreachable")
        services["generation_client"] = failing
        client = TestClient(create_app(services))

        response = client.post("/refine", json={"text": THANK_YOU_TEXT, "useLLM": True})

        assert response.status_code == 200
        body = response.json()
        assert body["refine_warnings"] == [SERVICE_FAILED]
        assert body["refined"] == body["baseline"]
        assert body["checks_after"] == body["checks_before"]
