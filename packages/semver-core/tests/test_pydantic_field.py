# SPDX-License-Identifier: MIT
"""Tests for using Version as a pydantic model field."""

from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from semver_core import Version, parse_version


class Release(BaseModel):
    """Model with a version field, as a registry record would declare it."""

    name: str
    version: Version
    previous: Optional[Version] = None


class TestVersionField:
    """Tests for validating and serializing Version fields."""

    def test_from_string(self):
        """Test that a version string is parsed."""
        release = Release(name="pkg", version="1.2.3-rc.1")
        assert isinstance(release.version, Version)
        assert release.version.prerelease == "rc.1"

    def test_from_document(self):
        """Test that a document mapping is decoded."""
        release = Release(name="pkg", version={"semver": "2.0.0+exp"})
        assert release.version.build == "exp"

    def test_from_instance(self):
        """Test that Version instances pass through unchanged."""
        v = parse_version("1.0.0")
        assert Release(name="pkg", version=v).version is v

    def test_optional_field(self):
        """Test that optional version fields accept None."""
        assert Release(name="pkg", version="1.0.0").previous is None

    def test_invalid_string(self):
        """Test that invalid versions raise ValidationError."""
        with pytest.raises(ValidationError):
            Release(name="pkg", version="1.2")

    def test_inconsistent_document(self):
        """Test that inconsistent documents raise ValidationError."""
        with pytest.raises(ValidationError):
            Release(name="pkg", version={"semver": "1.0.0", "major": 2})

    def test_unsupported_type(self):
        """Test that other input types raise ValidationError."""
        with pytest.raises(ValidationError):
            Release(name="pkg", version=1.0)

    def test_model_dump(self):
        """Test that versions serialize to their document form."""
        dumped = Release(name="pkg", version="1.2.3-beta").model_dump()
        assert dumped["version"] == {
            "semver": "1.2.3-beta",
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": "beta",
        }

    def test_json_round_trip(self):
        """Test dumping to JSON and validating it back."""
        release = Release(name="pkg", version="3.1.4+build.9", previous="3.1.3")
        restored = Release.model_validate_json(release.model_dump_json())
        assert restored == release
