# SPDX-License-Identifier: MIT
"""Decode a version document."""

from __future__ import annotations

import json
from typing import Optional

import click
import structlog

from semver_core import SemverError, from_json, to_json

from ..config import OUTPUT_FORMATS
from ..main import Context, echo_error, echo_info, fail, pass_context

log = structlog.get_logger(__name__)


@click.command()
@click.argument("document", required=False)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to SEMVER_OUTPUT or text).",
)
@pass_context
def decode(ctx: Context, document: Optional[str], output_format: Optional[str]) -> None:
    """Decode a JSON version DOCUMENT and print its canonical text.

    Reads the document from standard input when it is not given. With
    --format json the full document is printed instead.

    \b
    Examples:
        semver decode '{"semver": "1.2.3-beta"}'
        echo '{"semver": "2.1.0", "major": 2, "minor": 1}' | semver decode -f json
    """
    output_format = output_format or ctx.load_config().output_format

    if document is None:
        document = click.get_text_stream("stdin").read()

    try:
        version = from_json(document)
    except json.JSONDecodeError as e:
        log.debug("document_rejected", reason="json", error=str(e))
        echo_error(f"Invalid JSON syntax: {e}")
        raise SystemExit(1)
    except SemverError as e:
        log.debug("document_rejected", reason=type(e).__name__, error=e.message)
        fail(e)

    log.debug("document_decoded", semver=version.semver)

    if output_format == "json":
        echo_info(to_json(version, indent=2))
        return
    echo_info(str(version))
