"""
Configuration management for APK Renamer.

Provides centralized, type-safe configuration with environment variable overrides
and defaults matching a standard single-module Android Gradle project.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()

DEFAULT_BUILD_TYPES = ["debug", "release"]


class PathsConfig(BaseModel):
    """Locations inside the Android project."""

    project_dir: Path = Field(default=Path("."), description="Gradle project root")
    build_dir: Path = Field(
        default=Path("app/build"), description="Module build directory holding outputs/apk"
    )
    build_script: Path = Field(
        default=Path("app/build.gradle.kts"),
        description="Module build script supplying applicationId and version",
    )


class RenameConfig(BaseModel):
    """Renaming behavior."""

    build_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BUILD_TYPES),
        description="Build types processed, in order",
    )
    modified_dir_name: str = Field(default="modified", description="Archival subfolder name")
    apk_suffix: str = Field(default=".apk", description="Case-sensitive package file suffix")
    unknown_branch: str = Field(
        default="unknown", description="Branch placeholder when git cannot be queried"
    )

    @field_validator("build_types")
    @classmethod
    def _require_build_types(cls, value: list[str]) -> list[str]:
        cleaned = [v.strip() for v in value if v.strip()]
        if not cleaned:
            raise ValueError("at least one build type is required")
        return cleaned


class ToolsConfig(BaseModel):
    """External tools configuration."""

    git_executable: str = Field(default="git", description="git binary name or path")
    gradle_wrapper: Path = Field(
        default=Path("./gradlew"), description="Gradle wrapper, relative to the project root"
    )


class Config(BaseModel):
    """Root configuration for APK Renamer."""

    project_name: str = Field(default="apk-renamer", description="Project identifier")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["console", "json"] = Field(
        default="console", description="Progress line format"
    )
    paths: PathsConfig = Field(default_factory=PathsConfig)
    rename: RenameConfig = Field(default_factory=RenameConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        build_types = os.environ.get("APK_RENAMER_BUILD_TYPES")
        return cls(
            log_level=os.environ.get("APK_RENAMER_LOG_LEVEL", "INFO").upper(),  # type: ignore
            log_format=os.environ.get("APK_RENAMER_LOG_FORMAT", "console").lower(),  # type: ignore
            paths=PathsConfig(
                project_dir=Path(os.environ.get("APK_RENAMER_PROJECT_DIR", ".")),
                build_dir=Path(os.environ.get("APK_RENAMER_BUILD_DIR", "app/build")),
                build_script=Path(
                    os.environ.get("APK_RENAMER_BUILD_SCRIPT", "app/build.gradle.kts")
                ),
            ),
            rename=RenameConfig(
                build_types=build_types.split(",") if build_types else list(DEFAULT_BUILD_TYPES),
                modified_dir_name=os.environ.get("APK_RENAMER_MODIFIED_DIR", "modified"),
            ),
            tools=ToolsConfig(
                git_executable=os.environ.get("APK_RENAMER_GIT", "git"),
                gradle_wrapper=Path(os.environ.get("APK_RENAMER_GRADLEW", "./gradlew")),
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
