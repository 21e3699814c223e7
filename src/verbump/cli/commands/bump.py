"""Implementation of the 'bump' command.

Prints nothing but the new version on stdout so CI steps can capture it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from verbump.config import load_config
from verbump.core.version import BumpType, next_version
from verbump.exceptions import VerbumpError
from verbump.project.manifest import (
    find_manifest,
    get_manifest_version,
    update_manifest_version,
    update_version_file,
)

if TYPE_CHECKING:
    from rich.console import Console

    from verbump.config.models import VerbumpConfig

logger = logging.getLogger(__name__)


def resolve_manifest(project_path: Path, config: VerbumpConfig) -> Path:
    """Return the configured manifest, or auto-detect one."""
    if config.version.manifest is not None:
        return project_path / config.version.manifest
    return find_manifest(project_path)


def run_bump(
    path: Path | None,
    bump_type: str | None,
    dry_run: bool,
    err_console: Console,
) -> None:
    """Run the bump command.

    Args:
        path: Optional path to project directory
        bump_type: major, minor or patch; None uses the configured default
        dry_run: Only print the new version
        err_console: Console for error output
    """
    project_path = path or Path.cwd()

    try:
        config = load_config(project_path)
    except VerbumpError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        kind = BumpType.parse(bump_type) if bump_type else config.version.default_bump
        manifest = resolve_manifest(project_path, config)
        current = get_manifest_version(manifest)
        new_version = next_version(current, kind)
    except VerbumpError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    logger.debug("Bumping %s: %s -> %s (%s)", manifest, current, new_version, kind)

    if dry_run:
        err_console.print(f"[yellow]Dry run:[/] {escape(str(manifest))} left unchanged")
    else:
        try:
            update_manifest_version(manifest, str(new_version))
            for version_file in config.version.version_files:
                update_version_file(project_path / version_file, str(new_version))
        except VerbumpError as e:
            err_console.print(f"[red]Error writing version:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    click.echo(str(new_version))
