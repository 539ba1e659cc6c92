"""
Build-related data models.

These models describe the version metadata read from the Gradle build and the
outcome of one renaming run. The archival filename template lives here so it
can be checked without touching the filesystem.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class VersionMetadata(BaseModel):
    """Application identity read from the module's defaultConfig."""

    application_id: str = Field(description="Application id (e.g., com.example.app)")
    version_name: str = Field(description="User-visible version string")
    version_code: int = Field(description="Integer version code")

    @property
    def package_slug(self) -> str:
        """Get the application id with dots replaced by underscores.

        Returns:
            str: The filename-safe application id
                (e.g., 'com_example_app' from 'com.example.app').
        """
        return self.application_id.replace(".", "_")


def sanitize_branch(branch: str) -> str:
    """Make a git branch name safe to embed in a filename.

    Args:
        branch: Raw branch name as printed by git.

    Returns:
        The trimmed branch name with every '/' replaced by '_'.
    """
    return branch.strip().replace("/", "_")


def format_timestamp(moment: datetime) -> str:
    """Format a moment as ``yyyyMMdd_HHmmss``."""
    return moment.strftime(TIMESTAMP_FORMAT)


def build_apk_name(
    metadata: VersionMetadata,
    branch: str,
    build_type: str,
    moment: datetime,
    suffix: str = ".apk",
) -> str:
    """Compute the archival filename for one package.

    The fields are joined with underscores in a fixed order:
    application id, branch, build type, version name, timestamp, version code.

    Args:
        metadata: Version metadata of the build.
        branch: Already sanitized branch name.
        build_type: Build type label (e.g., 'release').
        moment: Local time the package is processed at.
        suffix: File suffix to append.

    Returns:
        The destination filename, without any directory.
    """
    return (
        f"{metadata.package_slug}_{branch}_{build_type}_{metadata.version_name}_"
        f"{format_timestamp(moment)}_{metadata.version_code}{suffix}"
    )


class RenamedCopy(BaseModel):
    """One package copied into the archival folder."""

    source: Path = Field(description="Original package file")
    destination: Path = Field(description="Renamed copy inside the modified folder")


class BuildTypeResult(BaseModel):
    """Outcome of processing one build type."""

    build_type: str = Field(description="Build type label")
    apk_dir: Path = Field(description="outputs/apk/<build type> directory")
    present: bool = Field(default=False, description="Whether apk_dir existed")
    purged: list[Path] = Field(default_factory=list, description="Stale copies deleted")
    copies: list[RenamedCopy] = Field(default_factory=list)


class RenameReport(BaseModel):
    """Result of a complete renaming run."""

    branch: str = Field(description="Sanitized branch used for every build type")
    started_at: datetime = Field(default_factory=datetime.now)
    results: list[BuildTypeResult] = Field(default_factory=list)

    @property
    def total_copies(self) -> int:
        """Get the number of copies written across all build types."""
        return sum(len(r.copies) for r in self.results)

    @property
    def skipped_build_types(self) -> list[str]:
        """Get build types whose output directory did not exist."""
        return [r.build_type for r in self.results if not r.present]
