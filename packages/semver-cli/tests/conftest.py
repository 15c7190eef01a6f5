# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from typing import Generator

import pytest
import structlog
from click.testing import CliRunner

from semver_cli.config import LOG_LEVEL_ENV, OUTPUT_ENV


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from the caller's SEMVER_* variables and logging setup."""
    monkeypatch.delenv(OUTPUT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield
    # The CLI binds structlog to the runner's stderr, which is closed afterwards
    structlog.reset_defaults()
