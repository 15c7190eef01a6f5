# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, sort, decode

__all__ = ["parse", "compare", "sort", "decode"]
