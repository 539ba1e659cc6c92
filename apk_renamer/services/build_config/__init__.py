"""Version metadata from Gradle build scripts."""

from .service import resolve_version_metadata

__all__ = ["resolve_version_metadata"]
