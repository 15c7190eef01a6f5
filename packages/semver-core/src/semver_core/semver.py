# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7, -x-y-z
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import InconsistentFieldsError, InvalidFormatError, NegativeComponentError, SemverError

# Numeric components are plain digit runs; leading zeros match here but fail the
# canonical-text check. Pre-release identifiers may be numeric with leading zeros.
SEMVER_PATTERN = re.compile(
    r"(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<buildmetadata>[0-9A-Za-z.-]+))?"
)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Instances are immutable. ``semver`` always equals the formatted form of the
    other fields: it is derived when omitted and checked when given.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifier (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")
        semver: Canonical text of the version

    Raises:
        InconsistentFieldsError: If ``semver`` is given and does not match the fields
        NegativeComponentError: If major, minor or patch is negative
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None
    semver: str = field(default="", repr=False, compare=False)

    def __post_init__(self) -> None:
        # Empty suffixes mean "absent".
        if self.prerelease == "":
            object.__setattr__(self, "prerelease", None)
        if self.build == "":
            object.__setattr__(self, "build", None)

        formatted = format_version(self)
        if not self.semver:
            object.__setattr__(self, "semver", formatted)
        elif self.semver != formatted:
            raise InconsistentFieldsError(self.semver, formatted)

        self.validate()

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self.semver

    def validate(self) -> None:
        """Check that major, minor and patch are non-negative.

        Raises:
            NegativeComponentError: If any numeric component is negative
        """
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise NegativeComponentError(self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def cmp(self, other: Version) -> int:
        """Compare precedence with another version.

        Returns:
            -1, 0 or 1 as this version sorts before, level with, or after ``other``.
            Build metadata is ignored.
        """
        from .compare import compare_versions

        return compare_versions(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.cmp(other) >= 0

    def to_document(self) -> dict[str, Any]:
        """Return the structured document form of this version."""
        from .codec import to_document

        return to_document(self)

    @classmethod
    def from_document(cls, document: Any) -> Version:
        """Build a version from a structured document (see ``codec.from_document``)."""
        from .codec import from_document

        return from_document(document)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let pydantic models declare ``Version`` fields.

        Accepts a Version, a version string or a document mapping, and
        serializes to the document form.
        """
        from .codec import coerce_version, to_document

        return core_schema.no_info_plain_validator_function(
            coerce_version,
            serialization=core_schema.plain_serializer_function_ser_schema(to_document),
        )


def format_version(version: Version) -> str:
    """Format the fields of a version as MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]."""
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        text += f"-{version.prerelease}"
    if version.build:
        text += f"+{version.build}"
    return text


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The input is matched as a whole, without trimming, and becomes the
    version's canonical text.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidFormatError: If the string does not follow the grammar or is
            not in canonical form (e.g. "01.2.3")

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidFormatError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidFormatError(version_string)

    try:
        major = int(match.group("major"))
        minor = int(match.group("minor"))
        patch = int(match.group("patch"))
    except ValueError as e:
        # int() refuses digit runs longer than sys.get_int_max_str_digits()
        raise InvalidFormatError(
            version_string, f"Version number out of range: {version_string}"
        ) from e

    try:
        return Version(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=match.group("prerelease"),
            build=match.group("buildmetadata"),
            semver=version_string,
        )
    except InconsistentFieldsError as e:
        raise InvalidFormatError(
            version_string,
            f"Version is not in canonical form: {version_string} (expected {e.formatted})",
        ) from e


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except SemverError:
        return False
    return True
