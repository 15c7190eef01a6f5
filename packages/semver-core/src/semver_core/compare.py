# SPDX-License-Identifier: MIT
"""Version precedence.

Precedence is decided by major, minor, patch, then pre-release:
- A pre-release sorts before the release it precedes (1.0.0-alpha < 1.0.0)
- Pre-release identifiers are compared left to right
- Numeric identifiers compare by value and sort before alphanumeric ones
- Alphanumeric identifiers compare in ASCII order
- A shorter identifier list sorts first when all shared identifiers are equal

Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Optional, Union

from .semver import Version, parse_version


def _cmp(a: Union[int, str], b: Union[int, str]) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _numeric_identifier(part: str) -> Optional[int]:
    """Return the integer value of a numeric identifier, or None.

    Digit runs that int() refuses to convert count as alphanumeric.
    """
    if not (part.isascii() and part.isdigit()):
        return None
    try:
        return int(part)
    except ValueError:
        return None


def _compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        n1 = _numeric_identifier(p1)
        n2 = _numeric_identifier(p2)

        if n1 is not None and n2 is not None:
            result = _cmp(n1, n2)
        elif n1 is not None:
            return -1
        elif n2 is not None:
            return 1
        else:
            result = _cmp(p1, p2)

        if result:
            return result

    return _cmp(len(parts1), len(parts2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare the precedence of two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-1", "1.0.0-alpha")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key that orders versions the same way as compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases get (1,) so they sort after every (0, ...) pre-release key
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            number = _numeric_identifier(part)
            if number is not None:
                parts.append((0, number, ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
