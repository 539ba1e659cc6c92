"""Git branch resolution."""

from .service import GitService

__all__ = ["GitService"]
