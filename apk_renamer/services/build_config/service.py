"""
Build Configuration Reader.

Extracts applicationId, versionName and versionCode from a module build
script. Both the Groovy DSL (``versionCode 7``) and the Kotlin DSL
(``versionCode = 7``) forms are recognized.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import ValidationError
from ...core.logging import get_logger
from ...models.build import VersionMetadata

logger = get_logger(__name__)

_APPLICATION_ID_RE = re.compile(r"""\bapplicationId\s*=?\s*["']([^"']+)["']""")
_VERSION_NAME_RE = re.compile(r"""\bversionName\s*=?\s*["']([^"']+)["']""")
_VERSION_CODE_RE = re.compile(r"""\bversionCode\s*=?\s*(\d+)\b""")

# Line comments are dropped so commented-out values are never picked up
_LINE_COMMENT_RE = re.compile(r"^\s*//.*$", re.MULTILINE)


def parse_build_script(content: str) -> dict[str, Any]:
    """Pull the version fields out of build script text.

    Args:
        content: Text of a build.gradle or build.gradle.kts file.

    Returns:
        A dictionary with whichever of application_id, version_name and
        version_code were found.
    """
    content = _LINE_COMMENT_RE.sub("", content)
    values: dict[str, Any] = {}

    if match := _APPLICATION_ID_RE.search(content):
        values["application_id"] = match.group(1)
    if match := _VERSION_NAME_RE.search(content):
        values["version_name"] = match.group(1)
    if match := _VERSION_CODE_RE.search(content):
        values["version_code"] = int(match.group(1))

    return values


def resolve_version_metadata(
    build_script: Path | None,
    application_id: str | None = None,
    version_name: str | None = None,
    version_code: int | None = None,
) -> VersionMetadata:
    """Combine explicit values with those parsed from a build script.

    Explicit values win. The script is only read when at least one value is
    still missing. If the configured ``.kts`` script does not exist, the
    Groovy ``build.gradle`` next to it is tried.

    Raises:
        ValidationError: If the script is missing or unreadable, or a field is
            still missing or has an invalid value.
    """
    values: dict[str, Any] = {}
    explicit = {
        "application_id": application_id,
        "version_name": version_name,
        "version_code": version_code,
    }

    if any(v is None for v in explicit.values()):
        if build_script is None:
            raise ValidationError(
                message="No build script configured and version metadata is incomplete",
                field_name="build_script",
            )
        script = _locate_script(build_script)
        logger.debug("Reading version metadata", build_script=str(script))
        try:
            content = script.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValidationError(
                message=f"Build script could not be read: {script}",
                field_name="build_script",
                cause=e,
            ) from e
        values.update(parse_build_script(content))

    values.update({k: v for k, v in explicit.items() if v is not None})

    missing = [name for name in explicit if name not in values]
    if missing:
        raise ValidationError(
            message=f"Version metadata is missing: {', '.join(missing)}",
            context={"build_script": str(build_script)},
            field_name=missing[0],
        )

    try:
        return VersionMetadata(**values)
    except PydanticValidationError as e:
        raise ValidationError(
            message="Invalid version metadata",
            context=values,
            cause=e,
        )


def _locate_script(build_script: Path) -> Path:
    """Find the build script, falling back from Kotlin DSL to Groovy."""
    if build_script.is_file():
        return build_script
    if build_script.suffix == ".kts":
        groovy = build_script.with_suffix("")
        if groovy.is_file():
            return groovy
    raise ValidationError(
        message=f"Build script not found: {build_script}",
        field_name="build_script",
    )
