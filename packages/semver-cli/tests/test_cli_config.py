# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

import logging

import pytest

from semver_cli.config import CLIConfig, ConfigError, load_config


class TestCLIConfig:
    """Tests for CLIConfig.from_env."""

    def test_defaults(self) -> None:
        """Test defaults when no variables are set."""
        config = CLIConfig.from_env()

        assert config.output_format == "text"
        assert config.log_level == "WARNING"
        assert config.log_level_number == logging.WARNING

    def test_output_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test SEMVER_OUTPUT is read case-insensitively."""
        monkeypatch.setenv("SEMVER_OUTPUT", "JSON")

        assert load_config().output_format == "json"

    def test_invalid_output_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unknown output formats are rejected."""
        monkeypatch.setenv("SEMVER_OUTPUT", "yaml")

        with pytest.raises(ConfigError, match="SEMVER_OUTPUT"):
            CLIConfig.from_env()

    def test_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test SEMVER_LOG_LEVEL is read case-insensitively."""
        monkeypatch.setenv("SEMVER_LOG_LEVEL", "debug")
        config = CLIConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unknown log levels are rejected."""
        monkeypatch.setenv("SEMVER_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigError, match="SEMVER_LOG_LEVEL"):
            CLIConfig.from_env()
