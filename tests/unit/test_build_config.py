"""Unit tests for reading version metadata from build scripts."""

import pytest
from pathlib import Path
from unittest.mock import patch

from apk_renamer.core.exceptions import ValidationError
from apk_renamer.services.build_config import resolve_version_metadata
from apk_renamer.services.build_config.service import parse_build_script

KOTLIN_SCRIPT = """
plugins {
    id("com.android.application")
}

android {
    namespace = "com.example.app"
    compileSdk = 34

    defaultConfig {
        applicationId = "com.example.app"
        minSdk = 24
        targetSdk = 34
        // versionCode = 1
        versionCode = 7
        versionName = "1.2.0"
    }
}
"""

GROOVY_SCRIPT = """
android {
    defaultConfig {
        applicationId 'org.sample.tracker'
        versionCode 31
        versionName "3.1"
    }
}
"""


class TestParseBuildScript:
    """Tests for extracting fields from script text."""

    def test_kotlin_dsl(self):
        """Test Kotlin DSL assignments are recognized."""
        values = parse_build_script(KOTLIN_SCRIPT)
        assert values == {
            "application_id": "com.example.app",
            "version_name": "1.2.0",
            "version_code": 7,
        }

    def test_groovy_dsl(self):
        """Test Groovy DSL method-call style is recognized."""
        values = parse_build_script(GROOVY_SCRIPT)
        assert values == {
            "application_id": "org.sample.tracker",
            "version_name": "3.1",
            "version_code": 31,
        }

    def test_commented_values_ignored(self):
        """Test commented-out lines do not shadow real values."""
        script = '// applicationId = "old.id"\napplicationId = "new.id"\n'
        assert parse_build_script(script)["application_id"] == "new.id"

    def test_missing_fields(self):
        """Test absent fields are simply left out."""
        assert parse_build_script("android { }") == {}


class TestReadVersionMetadata:
    """Tests for reading metadata from a script file."""

    def test_reads_script(self, temp_dir):
        """Test a complete script produces metadata."""
        script = temp_dir / "build.gradle.kts"
        script.write_text(KOTLIN_SCRIPT)

        meta = resolve_version_metadata(script)

        assert meta.application_id == "com.example.app"
        assert meta.version_name == "1.2.0"
        assert meta.version_code == 7

    def test_falls_back_to_groovy_script(self, temp_dir):
        """Test build.gradle is used when build.gradle.kts is absent."""
        (temp_dir / "build.gradle").write_text(GROOVY_SCRIPT)

        meta = resolve_version_metadata(temp_dir / "build.gradle.kts")

        assert meta.application_id == "org.sample.tracker"

    def test_missing_script(self, temp_dir):
        """Test a missing script is a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            resolve_version_metadata(temp_dir / "build.gradle.kts")
        assert exc_info.value.field_name == "build_script"

    def test_undecodable_script(self, temp_dir):
        """Test a script that is not UTF-8 is a validation error."""
        script = temp_dir / "build.gradle.kts"
        script.write_bytes(b'applicationId = "caf\xe9"\n')

        with pytest.raises(ValidationError) as exc_info:
            resolve_version_metadata(script)

        assert exc_info.value.field_name == "build_script"
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_unreadable_script(self, temp_dir):
        """Test an OS error while reading is a validation error."""
        script = temp_dir / "build.gradle.kts"
        script.write_text(KOTLIN_SCRIPT)

        with patch.object(Path, "read_text", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(ValidationError) as exc_info:
                resolve_version_metadata(script)

        assert isinstance(exc_info.value.cause, PermissionError)

    def test_incomplete_script(self, temp_dir):
        """Test a script without versionCode is rejected."""
        script = temp_dir / "build.gradle.kts"
        script.write_text('applicationId = "a.b"\nversionName = "1.0"\n')

        with pytest.raises(ValidationError) as exc_info:
            resolve_version_metadata(script)
        assert exc_info.value.field_name == "version_code"


class TestResolveVersionMetadata:
    """Tests for combining explicit values with the script."""

    def test_explicit_values_skip_script(self, temp_dir):
        """Test the script is not needed when every value is given."""
        meta = resolve_version_metadata(
            temp_dir / "missing.gradle.kts",
            application_id="com.example.app",
            version_name="1.2.0",
            version_code=7,
        )
        assert meta.package_slug == "com_example_app"

    def test_explicit_values_override_script(self, temp_dir):
        """Test explicit values win over parsed ones."""
        script = temp_dir / "build.gradle.kts"
        script.write_text(KOTLIN_SCRIPT)

        meta = resolve_version_metadata(script, version_name="1.2.0-rc1")

        assert meta.version_name == "1.2.0-rc1"
        assert meta.version_code == 7

    def test_no_script_and_incomplete_values(self):
        """Test missing values without a script are rejected."""
        with pytest.raises(ValidationError):
            resolve_version_metadata(None, application_id="a.b")
