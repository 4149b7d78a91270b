"""Shared pytest fixtures for datefmt tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

FIXED_NOW = datetime(2026, 10, 19, 15, 45, 30, tzinfo=UTC)

_ENV_VARS = (
    "DATE_FORMAT",
    "TIME_FORMAT",
    "DATETIME_FORMAT",
    "DATEFMT_CONFIG",
    "DATEFMT_QUIET",
    "DATEFMT_JSON_OUTPUT",
    "DATEFMT_VERBOSE",
    "DATEFMT_LOG_JSON",
    "DATEFMT_LOCALE__DEFAULT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without format overrides or DATEFMT_* settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the clock read by the current-date formatters to FIXED_NOW."""
    monkeypatch.setattr("datefmt.services.current._now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def process_locale(monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Force the process locale seen by Babel to en_US."""
    monkeypatch.delenv("LANGUAGE", raising=False)
    monkeypatch.delenv("LC_TIME", raising=False)
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")
    yield "en_US"


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray datefmt.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
