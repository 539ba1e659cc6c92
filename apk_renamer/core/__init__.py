"""Core infrastructure components for APK Renamer."""

from .config import Config, get_config
from .exceptions import (
    ApkRenamerError,
    BuildFailedError,
    ServiceError,
    ToolNotFoundError,
    ValidationError,
)
from .logging import get_logger, setup_logging
from .types import ServiceResult

__all__ = [
    "Config",
    "get_config",
    "ApkRenamerError",
    "BuildFailedError",
    "ServiceError",
    "ToolNotFoundError",
    "ValidationError",
    "get_logger",
    "setup_logging",
    "ServiceResult",
]
