"""
Tests for the server launcher.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from src.api.deps import get_settings
from src.app_shell import cli


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[dict[str, Any]]:
    """Capture uvicorn.run instead of starting a server."""
    calls: dict[str, Any] = {}

    def fake_run(app: str, **kwargs: Any) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DTCALC_CONFIG", raising=False)
    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    get_settings.cache_clear()
    yield calls
    get_settings.cache_clear()


def test_defaults(captured: dict[str, Any]) -> None:
    cli.main([])
    assert captured["app"] == "src.api.main:app"
    assert captured["port"] == 3005
    assert captured["host"] == "0.0.0.0"
    assert captured["log_level"] == "info"
    assert captured["reload"] is False


def test_port_from_environment(captured: dict[str, Any], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "4000")
    get_settings.cache_clear()
    cli.main([])
    assert captured["port"] == 4000


def test_arguments_override_settings(
    captured: dict[str, Any], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PORT", "4000")
    get_settings.cache_clear()
    cli.main(["--port", "5001", "--host", "127.0.0.1", "--log-level", "warning"])
    assert captured["port"] == 5001
    assert captured["host"] == "127.0.0.1"
    assert captured["log_level"] == "warning"
