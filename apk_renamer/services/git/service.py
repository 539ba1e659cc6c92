"""
Git Service.

Resolves the current branch of the working tree. The query is optional: a
failure is reported through the result and never aborts a renaming run.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from ...core.logging import get_logger
from ...core.types import ServiceResult
from ...models.build import sanitize_branch

logger = get_logger(__name__)

UNKNOWN_BRANCH = "unknown"


class GitService:
    """Service for querying the version-control state of the project."""

    def __init__(
        self,
        executable: str = "git",
        working_dir: Path | None = None,
        fallback: str = UNKNOWN_BRANCH,
    ) -> None:
        """Initialize the git service.

        Args:
            executable: git binary name or path
            working_dir: Directory the query runs in; None uses the process cwd
            fallback: Branch name substituted when the query fails
        """
        self.executable = executable
        self.working_dir = working_dir
        self.fallback = fallback

    def current_branch(self) -> ServiceResult[str]:
        """Query the short name of the checked-out branch.

        Output is decoded leniently so an oddly encoded branch name still
        yields a usable value.

        Returns:
            ServiceResult with the sanitized branch name, or a failure carrying
            the reason the query could not be answered.
        """
        try:
            result = subprocess.run(
                [self.executable, "rev-parse", "--abbrev-ref", "HEAD"],
                cwd=self.working_dir,
                capture_output=True,
                check=True,
            )
        except FileNotFoundError as e:
            return ServiceResult.fail(f"git executable not found: {e}")
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            return ServiceResult.fail(
                f"git exited with status {e.returncode}: {stderr}",
                returncode=e.returncode,
            )
        except (OSError, ValueError) as e:
            return ServiceResult.fail(f"git could not be run: {e}")

        stdout = result.stdout.decode("utf-8", errors="replace")
        return ServiceResult.ok(sanitize_branch(stdout))

    def resolve_branch(self) -> ServiceResult[str]:
        """Resolve the branch used in archival filenames.

        Never fails: when git cannot be queried the fallback value is
        returned as data, with the reason recorded as a warning.

        Returns:
            ServiceResult with the sanitized branch name or the fallback.
        """
        result = self.current_branch()
        if result.success:
            branch = result.data
            logger.info("Git branch resolved", branch=branch)
            return ServiceResult.ok(branch)

        logger.warning("Failed to retrieve Git branch", error=result.error)
        logger.info("Git branch resolved", branch=self.fallback)
        return ServiceResult.with_warnings(
            self.fallback,
            [f"Git branch could not be resolved, using '{self.fallback}': {result.error}"],
        )
