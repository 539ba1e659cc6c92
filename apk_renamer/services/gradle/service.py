"""
Gradle Service.

Runs Gradle tasks through the project's wrapper so the renamer can act as a
finalizer for ``assemble*`` tasks.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from ...core.exceptions import BuildFailedError, ToolNotFoundError
from ...core.logging import get_logger

logger = get_logger(__name__)

ASSEMBLE_PREFIX = "assemble"


class GradleService:
    """Service for invoking the Gradle wrapper of an Android project."""

    def __init__(self, project_dir: Path, wrapper: Path = Path("./gradlew")) -> None:
        """Initialize the Gradle service.

        Args:
            project_dir: Gradle project root
            wrapper: Wrapper script, relative to project_dir unless absolute
        """
        self.project_dir = project_dir
        self.wrapper = wrapper if wrapper.is_absolute() else project_dir / wrapper

    @staticmethod
    def is_assemble_task(task: str) -> bool:
        """Check whether a task path names an assemble task.

        ``:app:assembleRelease`` and ``assembleDebug`` qualify; options such
        as ``--info`` never do.
        """
        if task.startswith("-"):
            return False
        return task.rsplit(":", 1)[-1].startswith(ASSEMBLE_PREFIX)

    @classmethod
    def has_assemble_task(cls, tasks: list[str]) -> bool:
        """Check whether any requested task is an assemble task."""
        return any(cls.is_assemble_task(t) for t in tasks)

    def run_tasks(self, tasks: list[str]) -> None:
        """Run Gradle tasks and wait for them to finish.

        Output is streamed straight to the terminal.

        Args:
            tasks: Task names and Gradle options, passed through unchanged

        Raises:
            ToolNotFoundError: If the wrapper does not exist
            BuildFailedError: If Gradle exits with a non-zero status
        """
        if not self.wrapper.is_file():
            raise ToolNotFoundError(
                message="Gradle wrapper not found",
                tool_name="gradlew",
                expected_path=str(self.wrapper),
                install_hint="run 'gradle wrapper' in the project root",
            )

        command = [str(self.wrapper), *tasks]
        logger.info("Running Gradle", command=" ".join(command))

        try:
            completed = subprocess.run(command, cwd=self.project_dir, check=False)
        except PermissionError as e:
            raise ToolNotFoundError(
                message="Gradle wrapper is not executable",
                cause=e,
                tool_name="gradlew",
                expected_path=str(self.wrapper),
                install_hint=f"chmod +x {os.fspath(self.wrapper)}",
            ) from e

        if completed.returncode != 0:
            logger.error("Gradle build failed", returncode=completed.returncode)
            raise BuildFailedError(
                message=f"Gradle exited with status {completed.returncode}",
                operation="run_tasks",
                exit_code=completed.returncode,
            )
        logger.info("Gradle build succeeded", tasks=tasks)
