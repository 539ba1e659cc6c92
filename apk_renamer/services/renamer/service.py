"""
Renamer Service.

Copies freshly assembled APKs into a ``modified`` folder under descriptive
archival names, after clearing the copies left by the previous run.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ...core.config import DEFAULT_BUILD_TYPES
from ...core.exceptions import ServiceError
from ...core.logging import get_logger
from ...core.types import ServiceResult
from ...models.build import (
    BuildTypeResult,
    RenamedCopy,
    RenameReport,
    VersionMetadata,
    build_apk_name,
)
from ..git import GitService

logger = get_logger(__name__)


class RenamerService:
    """Service producing renamed archival copies of built packages.

    For each configured build type this service:
    1. Skips the type if outputs/apk/<type> does not exist
    2. Deletes the files directly inside outputs/apk/<type>/modified
    3. Copies every *.apk under its archival name into that folder
    """

    def __init__(
        self,
        build_dir: Path,
        git: GitService | None = None,
        build_types: list[str] | None = None,
        modified_dir_name: str = "modified",
        apk_suffix: str = ".apk",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the renamer service.

        Args:
            build_dir: Module build directory containing outputs/apk
            git: Service used to resolve the branch name
            build_types: Build types to process, in order
            modified_dir_name: Name of the archival subfolder
            apk_suffix: Case-sensitive suffix identifying packages
            clock: Source of the local time embedded in each filename
        """
        self.build_dir = build_dir
        self.git = git or GitService()
        self.build_types = list(build_types) if build_types else list(DEFAULT_BUILD_TYPES)
        self.modified_dir_name = modified_dir_name
        self.apk_suffix = apk_suffix
        self.clock = clock

    def apk_dir(self, build_type: str) -> Path:
        """Get the output directory for a build type."""
        return self.build_dir / "outputs" / "apk" / build_type

    def _find_packages(self, apk_dir: Path) -> list[Path]:
        """List the packages directly inside an output directory.

        Args:
            apk_dir: Build output directory to scan.

        Returns:
            Files whose name ends with the package suffix, sorted by name.
        """
        return sorted(
            p for p in apk_dir.iterdir() if p.name.endswith(self.apk_suffix) and p.is_file()
        )

    def _prepare_modified_dir(self, modified_dir: Path) -> list[Path]:
        """Empty the archival folder of files, creating it if needed.

        Only regular files directly inside the folder are removed; nested
        directories are left as they are.

        Args:
            modified_dir: The archival folder.

        Returns:
            The files that were deleted.
        """
        purged: list[Path] = []
        if modified_dir.exists():
            for child in sorted(modified_dir.iterdir()):
                if child.is_file():
                    child.unlink()
                    purged.append(child)
            if purged:
                logger.debug("Purged previous copies", directory=str(modified_dir), count=len(purged))
        else:
            modified_dir.mkdir(parents=True)
        return purged

    def process_build_type(
        self,
        build_type: str,
        branch: str,
        metadata: VersionMetadata,
    ) -> BuildTypeResult:
        """Produce archival copies for one build type.

        Args:
            build_type: Build type label (e.g., 'debug')
            branch: Sanitized branch name shared by the whole run
            metadata: Version metadata of the build

        Returns:
            BuildTypeResult describing what was purged and copied

        Raises:
            OSError: If deleting, creating or copying fails
        """
        apk_dir = self.apk_dir(build_type)
        result = BuildTypeResult(build_type=build_type, apk_dir=apk_dir)

        if not apk_dir.exists():
            logger.info(
                "APK directory for build type does not exist",
                build_type=build_type,
                apk_dir=str(apk_dir.absolute()),
            )
            return result

        result.present = True
        modified_dir = apk_dir / self.modified_dir_name
        result.purged = self._prepare_modified_dir(modified_dir)

        for apk_file in self._find_packages(apk_dir):
            new_name = build_apk_name(
                metadata, branch, build_type, self.clock(), suffix=self.apk_suffix
            )
            new_file = modified_dir / new_name
            shutil.copyfile(apk_file, new_file)
            result.copies.append(RenamedCopy(source=apk_file, destination=new_file))
            logger.info("Copied APK", source=apk_file.name, destination=str(new_file.absolute()))

        return result

    def run(self, metadata: VersionMetadata) -> ServiceResult[RenameReport]:
        """Resolve the branch once, then process every build type in order.

        Args:
            metadata: Version metadata of the build

        Returns:
            ServiceResult containing the RenameReport; skipped build types and
            an unresolved branch are reported as warnings

        Raises:
            ServiceError: If any filesystem operation fails
        """
        start_time = time.perf_counter()

        branch_result = self.git.resolve_branch()
        branch = branch_result.data
        report = RenameReport(branch=branch, started_at=self.clock())

        for build_type in self.build_types:
            try:
                report.results.append(self.process_build_type(build_type, branch, metadata))
            except OSError as e:
                logger.error("Renaming failed", build_type=build_type, error=str(e))
                raise ServiceError(
                    message=f"Renaming failed for build type '{build_type}': {e}",
                    context={"apk_dir": str(self.apk_dir(build_type))},
                    cause=e,
                    service_name="renamer",
                    operation="process_build_type",
                ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "APK renaming completed",
            branch=branch,
            copies=report.total_copies,
            duration_ms=round(duration_ms, 1),
        )

        warnings = list(branch_result.warnings)
        warnings += [
            f"APK directory for build type '{t}' does not exist" for t in report.skipped_build_types
        ]

        if warnings:
            return ServiceResult.with_warnings(report, warnings, duration_ms=duration_ms)
        return ServiceResult.ok(report, duration_ms=duration_ms)
