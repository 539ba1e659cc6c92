"""
Custom exception hierarchy for APK Renamer.

All exceptions inherit from ApkRenamerError so the CLI can report any failure
the same way. Each exception type carries context for debugging and logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApkRenamerError(Exception):
    """Base exception for all APK Renamer errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ValidationError(ApkRenamerError):
    """Raised when input validation fails."""

    field_name: str | None = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Validation failed for '{self.field_name}': {base}"
        return f"Validation failed: {base}"


@dataclass
class ServiceError(ApkRenamerError):
    """Raised when a service operation fails."""

    service_name: str = ""
    operation: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"[{self.service_name}.{self.operation}]: {base}"


@dataclass
class ToolNotFoundError(ApkRenamerError):
    """Raised when a required external tool is not available."""

    tool_name: str = ""
    expected_path: str = ""
    install_hint: str = ""

    def __str__(self) -> str:
        hint = f" Install hint: {self.install_hint}" if self.install_hint else ""
        return f"Tool '{self.tool_name}' not found at '{self.expected_path}'.{hint}"


@dataclass
class BuildFailedError(ServiceError):
    """Raised when the external Gradle build exits non-zero."""

    exit_code: int = 1

    def __post_init__(self) -> None:
        self.service_name = "gradle"
