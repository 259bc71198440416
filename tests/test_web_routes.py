"""Tests for the HTTP surface (FastAPI TestClient)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from faqbot.app import create_app
from faqbot.config.settings import Settings
from faqbot.web.main import create_web_app


class _FirstChoice:
    def choice(self, seq: Sequence[str]) -> str:
        return seq[0]


def _client(static_dir: Path) -> TestClient:
    settings = Settings(THINKING_DELAY_ENABLED=False, STATIC_DIR=str(static_dir))
    app = create_app(settings, rng=_FirstChoice())  # type: ignore[arg-type]
    return TestClient(create_web_app(app))


@pytest.fixture
def client(tmp_path: Path) -> TestClient:
    return _client(tmp_path / "missing")


def test_get_response_matches_intent(client: TestClient) -> None:
    resp = client.post("/get-response", json={"message": "How do I register?"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["intent"] == "register"
    assert body["followup"] is None
    assert "/register" in body["reply"]


def test_get_response_services_close_call(client: TestClient) -> None:
    body = client.post("/get-response", json={"message": "support"}).json()
    assert body["intent"] == "services"
    assert body["followup"] == "Are you interested in Consulting or Recruitment?"


@pytest.mark.parametrize("payload", [{}, {"message": None}, {"message": 42}, ["register"], "register"])
def test_get_response_treats_bad_message_as_empty(client: TestClient, payload: object) -> None:
    resp = client.post("/get-response", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["intent"] == "fallback"
    assert "You said: “”" in body["reply"]


def test_get_response_accepts_unparseable_body(client: TestClient) -> None:
    resp = client.post(
        "/get-response",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    assert resp.json()["intent"] == "fallback"


def test_services_detail(client: TestClient) -> None:
    body = client.post("/services-detail", json={"message": "recruitment please"}).json()
    assert body == {
        "reply": body["reply"],
        "intent": "recruitment",
        "followup": None,
    }

    body = client.post("/services-detail", json={"message": "dunno"}).json()
    assert body["intent"] == "services_followup"
    assert body["reply"] == "Are you interested in Consulting or Recruitment?"


def test_health_version_and_suggest(client: TestClient) -> None:
    assert client.get("/health").json() == {"ok": True}
    assert client.get("/version").json() == {"version": "phase-3-final-1.1.0"}

    suggestions = client.get("/suggest").json()
    assert suggestions
    assert all(set(item) == {"label", "message"} for item in suggestions)


def test_cors_headers(client: TestClient) -> None:
    resp = client.get("/health", headers={"Origin": "https://stimulus.org.in"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_static_assets_are_served_behind_api_routes(tmp_path: Path) -> None:
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>chat</h1>", encoding="utf-8")
    client = _client(public)

    assert client.get("/").text == "<h1>chat</h1>"
    assert client.get("/health").json() == {"ok": True}
    assert client.post("/get-response", json={"message": "hire"}).json()["intent"] == "recruitment"


def test_unknown_path_without_static_dir_is_404(client: TestClient) -> None:
    assert client.get("/nope").status_code == 404


def test_request_log_records_crashing_requests(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    settings = Settings(THINKING_DELAY_ENABLED=False, STATIC_DIR=str(tmp_path / "missing"))
    web = create_web_app(create_app(settings))

    async def _boom() -> None:
        raise RuntimeError("boom")

    web.add_api_route("/boom", _boom)
    client = TestClient(web, raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger="faqbot.web.main"):
        assert client.get("/boom").status_code == 500
        assert client.get("/health").status_code == 200

    messages = [record.getMessage() for record in caplog.records if record.name == "faqbot.web.main"]
    assert any(m.startswith("request failed method=GET path=/boom") for m in messages)
    assert any(m.startswith("request method=GET path=/health status=200") for m in messages)
