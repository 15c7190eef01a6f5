# SPDX-License-Identifier: MIT
"""CLI configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")

OUTPUT_ENV = "SEMVER_OUTPUT"
LOG_LEVEL_ENV = "SEMVER_LOG_LEVEL"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration.

    Attributes:
        output_format: Default output format for ``semver parse`` ("text" or "json")
        log_level: Name of the minimum log level emitted (e.g. "WARNING", "DEBUG")
    """

    output_format: str = "text"
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        """Return the numeric logging level."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> "CLIConfig":
        """Create configuration from environment variables.

        Raises:
            ConfigError: If a variable holds an unsupported value
        """
        config = cls()

        if output_format := os.getenv(OUTPUT_ENV):
            output_format = output_format.lower()
            if output_format not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"{OUTPUT_ENV} must be one of {', '.join(OUTPUT_FORMATS)}, got '{output_format}'"
                )
            config.output_format = output_format

        if log_level := os.getenv(LOG_LEVEL_ENV):
            log_level = log_level.upper()
            if not isinstance(logging.getLevelName(log_level), int):
                raise ConfigError(f"{LOG_LEVEL_ENV} is not a log level: '{log_level}'")
            config.log_level = log_level

        return config


def load_config() -> CLIConfig:
    """Load CLI configuration from the environment."""
    return CLIConfig.from_env()
