# SPDX-License-Identifier: MIT
"""Exceptions raised when building version values.

Every error derives from ``SemverError``, which is a ``ValueError`` so that
pydantic reports failures as validation errors.
"""

from __future__ import annotations

from typing import Any


class SemverError(ValueError):
    """Base class for all version construction failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidFormatError(SemverError):
    """Raised when a string does not follow the version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        super().__init__(message or f"Invalid semantic version: {version}")


class NegativeComponentError(SemverError):
    """Raised when major, minor or patch is negative."""

    def __init__(self, major: int, minor: int, patch: int):
        self.major = major
        self.minor = minor
        self.patch = patch
        super().__init__(
            "Major, minor and patch version numbers must be non-negative, "
            f"got {major}.{minor}.{patch}"
        )


class InvalidFieldTypeError(SemverError):
    """Raised when a document field cannot be converted to its expected type."""

    def __init__(self, field: str, value: Any, expected: str, message: str = ""):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            message
            or f"Field '{field}' must be {expected}, got {type(value).__name__}: {value!r}"
        )


class MissingSemverError(SemverError):
    """Raised when a document has no non-empty ``semver`` field."""

    def __init__(self) -> None:
        super().__init__("semver must not be empty")


class InconsistentFieldsError(SemverError):
    """Raised when the version fields disagree with the canonical text."""

    def __init__(self, semver: str, formatted: str, message: str = ""):
        self.semver = semver
        self.formatted = formatted
        super().__init__(message or f"semver '{semver}' must match parsed version '{formatted}'")


# Older name kept for callers that catch parse failures by it.
InvalidVersionError = InvalidFormatError
