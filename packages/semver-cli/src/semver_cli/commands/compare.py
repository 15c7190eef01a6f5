# SPDX-License-Identifier: MIT
"""Compare the precedence of two versions."""

from __future__ import annotations

import click

from semver_core import SemverError, compare_versions

from ..main import echo_info, fail


@click.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 sorts before, level with, or after VERSION2.

    Build metadata is ignored.

    \b
    Examples:
        semver compare 1.0.0-alpha 1.0.0     # -1
        semver compare 1.0.0+a 1.0.0+b       # 0
    """
    try:
        result = compare_versions(version1, version2)
    except SemverError as e:
        fail(e)

    echo_info(str(result))
