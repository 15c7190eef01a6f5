# SPDX-License-Identifier: MIT
"""Structured document form of a version.

A version serializes to a mapping with the stable field names ``semver``,
``major``, ``minor``, ``patch``, ``prerelease`` and ``build``, the last two
omitted when empty:

    >>> to_document(parse_version("2.1.0-rc.1+exp"))
    {'semver': '2.1.0-rc.1+exp', 'major': 2, 'minor': 1, 'patch': 0, 'prerelease': 'rc.1', 'build': 'exp'}

Decoding accepts any mapping, such as one produced by ``json.loads``, and
checks every supplied field against the canonical ``semver`` text.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from .errors import InconsistentFieldsError, InvalidFieldTypeError, MissingSemverError
from .semver import Version, parse_version

_NUMERAL_PATTERN = re.compile(r"[+-]?[0-9]+")

# Keys are matched after upper-casing their first letter, so "major" and
# "Major" both land on the same field.
_INT_FIELDS = {"Major": "major", "Minor": "minor", "Patch": "patch"}


def _field_name(key: str) -> str:
    return key[:1].upper() + key[1:]


def _to_int(field: str, value: Any) -> int:
    """Convert a numeric document value, accepting numeral strings."""
    if isinstance(value, bool):
        raise InvalidFieldTypeError(field, value, "an integer")
    if isinstance(value, int):
        try:
            str(value)
        except ValueError as e:
            # Wider than sys.get_int_max_str_digits(); it could never be formatted
            raise InvalidFieldTypeError(
                field, value, "an integer", f"Field '{field}' is too large to format"
            ) from e
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise InvalidFieldTypeError(field, value, "an integer")
    if isinstance(value, str) and _NUMERAL_PATTERN.fullmatch(value):
        try:
            return int(value)
        except ValueError as e:
            raise InvalidFieldTypeError(field, value, "an integer") from e
    raise InvalidFieldTypeError(field, value, "an integer or a numeral string")


def _to_str(field: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    raise InvalidFieldTypeError(field, value, "a string")


def to_document(version: Version) -> dict[str, Any]:
    """Serialize a version to its document form."""
    document: dict[str, Any] = {
        "semver": version.semver,
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
    }
    if version.prerelease:
        document["prerelease"] = version.prerelease
    if version.build:
        document["build"] = version.build
    return document


def from_document(document: Mapping[str, Any]) -> Version:
    """Build a version from a document.

    Recognized keys are assigned field by field; unknown keys are ignored and
    ``None`` values count as absent. When ``semver`` is present and major,
    minor and patch are all zero, the whole value is re-derived by parsing
    ``semver``, so ``{"semver": "1.2.3-beta"}`` is a complete document. This
    also happens for a genuine ``0.0.0``, which parses back to itself.

    Raises:
        InvalidFieldTypeError: If a field holds a value of the wrong type
        MissingSemverError: If ``semver`` is absent or empty
        InconsistentFieldsError: If the fields do not format to ``semver``, or
            split it differently than parsing does
        NegativeComponentError: If major, minor or patch is negative
        InvalidFormatError: If ``semver`` does not follow the grammar
    """
    if not isinstance(document, Mapping):
        raise InvalidFieldTypeError("document", document, "a mapping")

    semver = ""
    numbers = {"major": 0, "minor": 0, "patch": 0}
    prerelease: Optional[str] = None
    build: Optional[str] = None

    for key, value in document.items():
        if not isinstance(key, str) or value is None:
            continue
        name = _field_name(key)
        if name in _INT_FIELDS:
            numbers[_INT_FIELDS[name]] = _to_int(key, value)
        elif name == "Semver":
            semver = _to_str(key, value)
        elif name == "Prerelease":
            prerelease = _to_str(key, value)
        elif name == "Build":
            build = _to_str(key, value)

    if semver and not any(numbers.values()):
        return parse_version(semver)

    if not semver:
        raise MissingSemverError()

    # Version checks the fields against semver, then validates them.
    version = Version(semver=semver, prerelease=prerelease, build=build, **numbers)

    # Fields that format to semver may still split it differently from the
    # grammar, e.g. prerelease "a+b" for "1.0.0-a+b".
    parsed = parse_version(semver)
    if parsed != version:
        raise InconsistentFieldsError(
            semver,
            str(version),
            f"semver '{semver}' parses to prerelease {parsed.prerelease!r} and "
            f"build {parsed.build!r}, not {version.prerelease!r} and {version.build!r}",
        )
    return version


def to_json(version: Version, indent: Optional[int] = None) -> str:
    """Encode a version document as JSON."""
    return json.dumps(to_document(version), indent=indent)


def from_json(data: Union[str, bytes]) -> Version:
    """Decode a version from a JSON object.

    Raises:
        json.JSONDecodeError: If the data is not valid JSON
        InvalidFieldTypeError: If the top-level value is not an object
    """
    return from_document(json.loads(data))


def coerce_version(value: Any) -> Version:
    """Accept a Version, a version string or a document mapping."""
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse_version(value)
    if isinstance(value, Mapping):
        return from_document(value)
    raise InvalidFieldTypeError("version", value, "a version string or document")
