"""
APK Renamer CLI.

Command-line interface for producing renamed archival copies of built APKs,
either directly or as a finalizer of Gradle ``assemble*`` tasks.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.config import Config, get_config
from .core.exceptions import ApkRenamerError, BuildFailedError
from .core.logging import setup_logging
from .models.build import RenameReport

app = typer.Typer(
    name="apk-renamer",
    help="Copy assembled APKs into a 'modified' folder under descriptive, timestamped names",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"apk-renamer v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """APK Renamer: archival copies of assembled Android packages."""
    pass


ProjectDirOption = typer.Option(
    None, "--project-dir", "-C", help="Gradle project root (default: configured value)"
)
BuildDirOption = typer.Option(
    None, "--build-dir", "-b", help="Module build directory containing outputs/apk"
)
BuildScriptOption = typer.Option(
    None, "--build-script", "-s", help="Module build script to read version metadata from"
)
ApplicationIdOption = typer.Option(None, "--application-id", help="Override applicationId")
VersionNameOption = typer.Option(None, "--version-name", help="Override versionName")
VersionCodeOption = typer.Option(None, "--version-code", help="Override versionCode")
BuildTypeOption = typer.Option(
    None, "--build-type", "-t", help="Build type to process (repeatable, default: debug, release)"
)
VerboseOption = typer.Option(False, "--verbose", help="Enable verbose logging")


def _load_config(verbose: bool) -> Config:
    """Get configuration and set up logging for a command."""
    config = get_config()
    if verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    setup_logging(config)
    return config


def _rename(
    config: Config,
    project_dir: Optional[Path],
    build_dir: Optional[Path],
    build_script: Optional[Path],
    application_id: Optional[str],
    version_name: Optional[str],
    version_code: Optional[int],
    build_types: Optional[List[str]],
) -> RenameReport:
    """Resolve inputs from options and configuration, then run the renamer."""
    from .services.build_config import resolve_version_metadata
    from .services.git import GitService
    from .services.renamer import RenamerService

    root = project_dir or config.paths.project_dir
    metadata = resolve_version_metadata(
        root / (build_script or config.paths.build_script),
        application_id=application_id,
        version_name=version_name,
        version_code=version_code,
    )

    git = GitService(
        executable=config.tools.git_executable,
        working_dir=root,
        fallback=config.rename.unknown_branch,
    )
    service = RenamerService(
        build_dir=root / (build_dir or config.paths.build_dir),
        git=git,
        build_types=build_types or config.rename.build_types,
        modified_dir_name=config.rename.modified_dir_name,
        apk_suffix=config.rename.apk_suffix,
    )

    result = service.run(metadata)
    for warning in result.warnings:
        console.print(f"[yellow]! {warning}[/yellow]")
    return result.data


def _print_report(report: RenameReport) -> None:
    """Display the copies made by a run."""
    table = Table(title=f"Renamed APKs (branch: {report.branch})")
    table.add_column("Build Type", style="cyan")
    table.add_column("Source")
    table.add_column("Copy", style="green")

    for result in report.results:
        if not result.present:
            table.add_row(result.build_type, "[dim]missing[/dim]", "")
            continue
        if not result.copies:
            table.add_row(result.build_type, "[dim]no APKs[/dim]", "")
        for copy in result.copies:
            table.add_row(result.build_type, escape(copy.source.name), escape(str(copy.destination)))

    console.print(table)
    console.print(f"\n[bold green]✓ {report.total_copies} APK(s) copied[/bold green]")


@app.command()
def run(
    project_dir: Optional[Path] = ProjectDirOption,
    build_dir: Optional[Path] = BuildDirOption,
    build_script: Optional[Path] = BuildScriptOption,
    application_id: Optional[str] = ApplicationIdOption,
    version_name: Optional[str] = VersionNameOption,
    version_code: Optional[int] = VersionCodeOption,
    build_type: Optional[List[str]] = BuildTypeOption,
    verbose: bool = VerboseOption,
) -> None:
    """Copy built APKs into each build type's 'modified' folder under new names.

    Copies left by the previous run are deleted first.
    """
    config = _load_config(verbose)

    try:
        report = _rename(
            config,
            project_dir,
            build_dir,
            build_script,
            application_id,
            version_name,
            version_code,
            build_type,
        )
    except ApkRenamerError as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        raise typer.Exit(1)

    _print_report(report)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def assemble(
    tasks: List[str] = typer.Argument(..., help="Gradle tasks and options, e.g. assembleRelease"),
    project_dir: Optional[Path] = ProjectDirOption,
    build_dir: Optional[Path] = BuildDirOption,
    build_script: Optional[Path] = BuildScriptOption,
    application_id: Optional[str] = ApplicationIdOption,
    version_name: Optional[str] = VersionNameOption,
    version_code: Optional[int] = VersionCodeOption,
    build_type: Optional[List[str]] = BuildTypeOption,
    verbose: bool = VerboseOption,
) -> None:
    """Run Gradle tasks, then rename the APKs if an assemble task succeeded.

    A failed build exits with Gradle's own status and renames nothing.
    """
    from .services.gradle import GradleService

    config = _load_config(verbose)
    gradle = GradleService(
        project_dir=project_dir or config.paths.project_dir,
        wrapper=config.tools.gradle_wrapper,
    )

    try:
        gradle.run_tasks(tasks)
    except BuildFailedError as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        raise typer.Exit(e.exit_code)
    except ApkRenamerError as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        raise typer.Exit(1)

    if not GradleService.has_assemble_task(tasks):
        console.print("[dim]No assemble task requested, nothing to rename[/dim]")
        return

    try:
        report = _rename(
            config,
            project_dir,
            build_dir,
            build_script,
            application_id,
            version_name,
            version_code,
            build_type,
        )
    except ApkRenamerError as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        raise typer.Exit(1)

    _print_report(report)


@app.command()
def config() -> None:
    """Show the effective configuration."""
    cfg = get_config()

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("Log Format", cfg.log_format)
    table.add_row("Project Dir", str(cfg.paths.project_dir))
    table.add_row("Build Dir", str(cfg.paths.build_dir))
    table.add_row("Build Script", str(cfg.paths.build_script))
    table.add_row("Build Types", ", ".join(cfg.rename.build_types))
    table.add_row("Modified Folder", cfg.rename.modified_dir_name)
    table.add_row("Git", cfg.tools.git_executable)
    table.add_row("Gradle Wrapper", str(cfg.tools.gradle_wrapper))

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  APK_RENAMER_LOG_LEVEL, APK_RENAMER_LOG_FORMAT, APK_RENAMER_PROJECT_DIR")
    console.print("  APK_RENAMER_BUILD_DIR, APK_RENAMER_BUILD_SCRIPT, APK_RENAMER_BUILD_TYPES")
    console.print("  APK_RENAMER_MODIFIED_DIR, APK_RENAMER_GIT, APK_RENAMER_GRADLEW")


def run_cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()
