"""Data models for APK Renamer."""

from .build import (
    BuildTypeResult,
    RenamedCopy,
    RenameReport,
    VersionMetadata,
    build_apk_name,
    format_timestamp,
    sanitize_branch,
)

__all__ = [
    "BuildTypeResult",
    "RenamedCopy",
    "RenameReport",
    "VersionMetadata",
    "build_apk_name",
    "format_timestamp",
    "sanitize_branch",
]
