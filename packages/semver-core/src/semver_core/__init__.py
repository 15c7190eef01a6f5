# SPDX-License-Identifier: MIT
"""Semantic version values: parsing, formatting, precedence and documents.

Example:
    >>> from semver_core import parse_version, compare_versions, from_document
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0-1", "1.0.0-alpha")
    -1
    >>>
    >>> str(from_document({"semver": "2.1.0-rc.1+exp"}))
    '2.1.0-rc.1+exp'
"""

__version__ = "0.1.0"

from .errors import (
    SemverError,
    InvalidFormatError,
    InvalidVersionError,
    NegativeComponentError,
    InvalidFieldTypeError,
    MissingSemverError,
    InconsistentFieldsError,
)
from .semver import (
    Version,
    parse_version,
    format_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
from .codec import (
    to_document,
    from_document,
    to_json,
    from_json,
)

__all__ = [
    # Errors
    "SemverError",
    "InvalidFormatError",
    "InvalidVersionError",
    "NegativeComponentError",
    "InvalidFieldTypeError",
    "MissingSemverError",
    "InconsistentFieldsError",
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    # Documents
    "to_document",
    "from_document",
    "to_json",
    "from_json",
]
