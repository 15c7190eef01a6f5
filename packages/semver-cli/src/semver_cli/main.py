# SPDX-License-Identifier: MIT
"""CLI entry point for semver command."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, Optional

import click
import structlog

from semver_core import SemverError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config()
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def configure_logging(level: int) -> None:
    """Send structlog events at or above ``level`` to stderr."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def fail(error: SemverError) -> NoReturn:
    """Report a version error and exit with status 1."""
    echo_error(error.message)
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version tool.

    Parse, compare, sort and decode MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
    versions.

    \b
    Examples:
        semver parse 1.2.3-rc.1+exp
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 1.0.0-rc.1 0.9.0
        echo '{"semver": "2.1.0"}' | semver decode
    """
    ctx.verbose = verbose
    config = ctx.load_config()
    configure_logging(logging.DEBUG if verbose else config.log_level_number)


# Import and register commands
from .commands import parse, compare, sort, decode

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(decode.decode)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
