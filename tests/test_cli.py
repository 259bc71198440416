"""Tests for the terminal matching tool."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator

import pytest

from faqbot.cli import ask, main


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SITE_BASE_URL", raising=False)
    yield
    # `load_dotenv` writes into os.environ directly.
    os.environ.pop("SITE_BASE_URL", None)


def test_ask_matches_message() -> None:
    result = ask("How do I register?", seed=7)
    assert result.intent == "register"


def test_ask_followup_uses_disambiguator() -> None:
    assert ask("consulting", followup=True).intent == "consulting"
    assert ask("no idea", followup=True).intent == "services_followup"


def test_ask_reads_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text("SITE_BASE_URL=https://staging.example\n", encoding="utf-8")
    result = ask("signup", seed=1)
    assert "https://staging.example/register" in result.reply


def test_main_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    main(["hire"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["intent"] == "recruitment"
    assert payload["followup"] is None
