# SPDX-License-Identifier: MIT
"""Parse a version string and show its fields."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import SemverError, parse_version, to_json

from ..config import OUTPUT_FORMATS
from ..main import Context, echo_info, fail, pass_context


@click.command()
@click.argument("version")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to SEMVER_OUTPUT or text).",
)
@pass_context
def parse(ctx: Context, version: str, output_format: Optional[str]) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semver parse 1.2.3-rc.1+exp
        semver parse 1.2.3 --format json
    """
    output_format = output_format or ctx.load_config().output_format

    try:
        parsed = parse_version(version)
    except SemverError as e:
        fail(e)

    if output_format == "json":
        echo_info(to_json(parsed, indent=2))
        return

    echo_info(f"major:      {parsed.major}")
    echo_info(f"minor:      {parsed.minor}")
    echo_info(f"patch:      {parsed.patch}")
    echo_info(f"prerelease: {parsed.prerelease or ''}")
    echo_info(f"build:      {parsed.build or ''}")
