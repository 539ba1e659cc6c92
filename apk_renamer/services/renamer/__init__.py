"""Package renaming."""

from .service import RenamerService

__all__ = ["RenamerService"]
