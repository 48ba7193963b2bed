"""Tests for the console entry point."""
from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from bus_stops import cli
from bus_stops.domain.entities import TflCredentials


def test_credentials_default_to_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TFL_APP_ID", raising=False)
    monkeypatch.delenv("TFL_APP_KEY", raising=False)
    assert cli.load_credentials() == TflCredentials(app_id="", app_key="")


def test_credentials_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TFL_APP_ID", "abc")
    monkeypatch.setenv("TFL_APP_KEY", "secret")
    assert cli.load_credentials() == TflCredentials(app_id="abc", app_key="secret")


def test_main_runs_console_with_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TFL_APP_ID", "abc")
    monkeypatch.setenv("TFL_APP_KEY", "secret")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    run_console = AsyncMock()
    monkeypatch.setattr(cli, "run_console", run_console)

    cli.main()

    run_console.assert_awaited_once_with(TflCredentials(app_id="abc", app_key="secret"))
