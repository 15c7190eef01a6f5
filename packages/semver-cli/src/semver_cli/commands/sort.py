# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from semver_core import SemverError, parse_version

from ..main import echo_info, fail


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest precedence first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS one per line, lowest precedence first.

    Versions of equal precedence keep their input order.

    \b
    Examples:
        semver sort 1.0.0 1.0.0-rc.1 0.9.0
        semver sort --reverse 2.0.0 10.0.0
    """
    try:
        parsed = [parse_version(v) for v in versions]
    except SemverError as e:
        fail(e)

    for version in sorted(parsed, reverse=reverse):
        echo_info(str(version))
