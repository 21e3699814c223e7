"""Implementation of the 'changelog' command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from verbump.config import load_config
from verbump.core.changelog import format_changelog_entry, update_changelog_file
from verbump.core.commits import CommitInfo
from verbump.core.version import Version
from verbump.exceptions import VerbumpError

if TYPE_CHECKING:
    from rich.console import Console


def run_changelog(
    path: Path | None,
    *,
    version: str,
    sha: str,
    author: str,
    message: str,
    repository: str | None,
    print_only: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the changelog command.

    Args:
        path: Optional path to project directory
        version: Version the entry is for
        sha: Full commit SHA
        author: Release author
        message: Commit message or pull request title
        repository: GitHub owner/repo, None uses the configured one
        print_only: Print the entry to stdout instead of writing the file
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = path or Path.cwd()

    try:
        config = load_config(project_path)
    except VerbumpError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        entry = format_changelog_entry(
            Version.parse(version),
            CommitInfo(sha=sha, author=author, message=message),
            repository=repository or config.changelog.repository,
        )
    except VerbumpError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if print_only:
        click.echo(entry, nl=False)
        return

    changelog_path = project_path / config.changelog.path
    try:
        update_changelog_file(
            changelog_path,
            entry,
            header_lines=config.changelog.header_lines,
            header=config.changelog.header,
        )
    except VerbumpError as e:
        err_console.print(f"[red]Error updating changelog:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(f"  [green]✓[/] Added {escape(version)} to {escape(str(config.changelog.path))}")
