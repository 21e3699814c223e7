"""Implementation of the 'update' command.

The update command is the release step run after a change is merged:
it bumps the version and records the change in the changelog locally.
Committing, tagging and pushing are left to the caller.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from verbump.cli.commands.bump import resolve_manifest
from verbump.config import load_config
from verbump.core.changelog import format_changelog_entry, update_changelog_file
from verbump.core.commits import (
    CommitInfo,
    detect_bump_type,
    release_commit_message,
    should_skip_release,
)
from verbump.core.version import BumpType, Version
from verbump.exceptions import VerbumpError
from verbump.project.manifest import (
    get_manifest_version,
    update_manifest_version,
    update_version_file,
)

if TYPE_CHECKING:
    from rich.console import Console


def run_update(
    path: Path | None,
    *,
    sha: str,
    author: str,
    message: str,
    title: str | None,
    bump_override: str | None,
    repository: str | None,
    execute: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the update command.

    Args:
        path: Optional path to project directory
        sha: Full SHA of the merged commit
        author: Author credited in the changelog
        message: Commit message
        title: Pull request title, used for bump detection and the entry
        bump_override: Explicit bump type, skips title detection
        repository: GitHub owner/repo, None uses the configured one
        execute: Whether to actually apply changes
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = path or Path.cwd()
    title = title or message

    # Load configuration
    try:
        config = load_config(project_path)
    except VerbumpError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    # Release commits and opted-out changes never produce a release
    if should_skip_release(message, config.commits.skip_patterns) or should_skip_release(
        title, config.commits.skip_patterns
    ):
        console.print("[yellow]Commit is marked to skip the changelog. Nothing to do.[/]")
        return

    # Determine the bump and the next version
    try:
        if bump_override:
            bump_type = BumpType.parse(bump_override)
        else:
            bump_type = detect_bump_type(
                title,
                minor_marker=config.version.minor_marker,
                default=config.version.default_bump,
            )
        manifest = resolve_manifest(project_path, config)
        current_version = Version.parse(get_manifest_version(manifest))
        next_version = current_version.bump(bump_type)
        entry = format_changelog_entry(
            next_version,
            CommitInfo(sha=sha, author=author, message=title),
            datetime.now(UTC),
            repository=repository or config.changelog.repository,
        )
    except VerbumpError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    mode_str = "[green]EXECUTING[/]" if execute else "[yellow]DRY-RUN[/]"
    console.print(
        f"\n{mode_str} - {bump_type} bump from [cyan]{current_version}[/] "
        f"to [green]{next_version}[/]\n"
    )

    if not execute:
        changes = [f"  • Update version in [cyan]{escape(manifest.name)}[/]"]
        changes.extend(
            f"  • Update version in [cyan]{escape(str(f))}[/]" for f in config.version.version_files
        )
        if config.changelog.enabled:
            changes.append(f"  • Add entry to [cyan]{escape(str(config.changelog.path))}[/]")
        console.print(
            Panel(
                "[bold]Would make the following changes:[/]\n\n" + "\n".join(changes),
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        if config.changelog.enabled:
            console.print(Panel(escape(entry.rstrip()), title="Changelog entry", border_style="dim"))
        console.print("\n[dim]Run with [cyan]--execute[/] to apply these changes.[/]")
        return

    # Actually apply changes
    try:
        update_manifest_version(manifest, str(next_version))
        console.print(f"  [green]✓[/] Updated version in {escape(manifest.name)}")
    except VerbumpError as e:
        err_console.print(f"[red]Error updating {escape(manifest.name)}:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    # Update additional version files
    for version_file in config.version.version_files:
        version_file_path = project_path / version_file
        try:
            update_version_file(version_file_path, str(next_version))
            console.print(f"  [green]✓[/] Updated version in {escape(str(version_file))}")
        except VerbumpError as e:
            err_console.print(f"[red]Error updating {escape(str(version_file))}:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    if config.changelog.enabled:
        try:
            update_changelog_file(
                project_path / config.changelog.path,
                entry,
                header_lines=config.changelog.header_lines,
                header=config.changelog.header,
            )
            console.print(f"  [green]✓[/] Updated {escape(str(config.changelog.path))}")
        except VerbumpError as e:
            err_console.print(f"[red]Error updating changelog:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    console.print(
        Panel(
            f"[green]Successfully updated to version {next_version}![/]\n\n"
            "Next steps:\n"
            "  1. Review the changes\n"
            f"  2. Commit: [cyan]git commit -am "
            f"'{escape(release_commit_message(next_version))}'[/]",
            title="[green]Update Complete[/]",
            border_style="green",
        )
    )
