"""Gradle assemble hook."""

from .service import GradleService

__all__ = ["GradleService"]
