"""Services package for APK Renamer."""

from .build_config import resolve_version_metadata
from .git import GitService
from .gradle import GradleService
from .renamer import RenamerService

__all__ = [
    "GitService",
    "GradleService",
    "RenamerService",
    "resolve_version_metadata",
]
