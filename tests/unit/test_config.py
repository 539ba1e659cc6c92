"""Unit tests for configuration."""

import pytest
from pathlib import Path

from pydantic import ValidationError

from apk_renamer.core.config import Config, RenameConfig


class TestConfig:
    """Tests for configuration loading."""

    def test_defaults(self, monkeypatch):
        """Test defaults match a standard Android module layout."""
        for name in ("APK_RENAMER_BUILD_TYPES", "APK_RENAMER_BUILD_DIR", "APK_RENAMER_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = Config.from_env()

        assert config.rename.build_types == ["debug", "release"]
        assert config.rename.modified_dir_name == "modified"
        assert config.rename.unknown_branch == "unknown"
        assert config.paths.build_dir == Path("app/build")
        assert config.tools.git_executable == "git"
        assert config.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        """Test APK_RENAMER_* variables are honored."""
        monkeypatch.setenv("APK_RENAMER_BUILD_TYPES", "release, staging")
        monkeypatch.setenv("APK_RENAMER_BUILD_DIR", "mobile/build")
        monkeypatch.setenv("APK_RENAMER_MODIFIED_DIR", "archive")
        monkeypatch.setenv("APK_RENAMER_LOG_LEVEL", "debug")

        config = Config.from_env()

        assert config.rename.build_types == ["release", "staging"]
        assert config.paths.build_dir == Path("mobile/build")
        assert config.rename.modified_dir_name == "archive"
        assert config.log_level == "DEBUG"

    def test_empty_build_types_rejected(self):
        """Test at least one build type must remain."""
        with pytest.raises(ValidationError):
            RenameConfig(build_types=[" ", ""])

    def test_log_format_defaults_to_console(self, monkeypatch):
        """Test JSON output is opt-in."""
        monkeypatch.delenv("APK_RENAMER_LOG_FORMAT", raising=False)
        assert Config.from_env().log_format == "console"

        monkeypatch.setenv("APK_RENAMER_LOG_FORMAT", "JSON")
        assert Config.from_env().log_format == "json"
