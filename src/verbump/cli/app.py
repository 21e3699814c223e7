"""Command line interface for verbump."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from verbump import __version__
from verbump.core.version import next_version
from verbump.exceptions import VerbumpError

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

_path_option = click.option(
    "--path",
    "-p",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (defaults to the current directory).",
)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("verbump")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_path=False, show_time=False)
        )


@click.group()
@click.version_option(__version__, prog_name="verbump")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
def cli(verbose: bool) -> None:
    """Bump project versions and keep the changelog in step."""
    _configure_logging(verbose)


@cli.command()
@click.argument("bump_type", required=False, metavar="[major|minor|patch]")
@click.option("--dry-run", is_flag=True, help="Print the new version without writing it.")
@_path_option
def bump(bump_type: str | None, dry_run: bool, path: Path | None) -> None:
    """Bump the version in the project manifest and print it."""
    from verbump.cli.commands.bump import run_bump

    run_bump(path, bump_type, dry_run, err_console)


@cli.command(name="next")
@click.argument("version")
@click.argument("bump_type", required=False, default="patch", metavar="[major|minor|patch]")
def next_(version: str, bump_type: str) -> None:
    """Print the version that follows VERSION."""
    try:
        click.echo(str(next_version(version, bump_type)))
    except VerbumpError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e


@cli.command()
@click.argument("version")
@click.option("--sha", required=True, envvar="GITHUB_SHA", help="Full commit SHA.")
@click.option("--author", required=True, help="Release author.")
@click.option("--message", "-m", required=True, help="Commit message or PR title.")
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    default=None,
    help="GitHub owner/repo for the commit link.",
)
@click.option("--print", "print_only", is_flag=True, help="Print the entry instead of writing it.")
@_path_option
def changelog(
    version: str,
    sha: str,
    author: str,
    message: str,
    repository: str | None,
    print_only: bool,
    path: Path | None,
) -> None:
    """Add a changelog entry for VERSION."""
    from verbump.cli.commands.changelog import run_changelog

    run_changelog(
        path,
        version=version,
        sha=sha,
        author=author,
        message=message,
        repository=repository,
        print_only=print_only,
        console=console,
        err_console=err_console,
    )


@cli.command()
@click.option("--sha", required=True, envvar="GITHUB_SHA", help="Full commit SHA.")
@click.option("--author", required=True, help="Release author.")
@click.option("--message", "-m", required=True, help="Commit message.")
@click.option("--title", default=None, help="Pull request title (defaults to the message).")
@click.option(
    "--bump",
    "bump_override",
    default=None,
    help="Force major, minor or patch instead of detecting it from the title.",
)
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    default=None,
    help="GitHub owner/repo for the commit link.",
)
@click.option("--execute", is_flag=True, help="Apply the changes (default is a dry run).")
@_path_option
def update(
    sha: str,
    author: str,
    message: str,
    title: str | None,
    bump_override: str | None,
    repository: str | None,
    execute: bool,
    path: Path | None,
) -> None:
    """Bump the version and add the changelog entry for a merged change."""
    from verbump.cli.commands.update import run_update

    run_update(
        path,
        sha=sha,
        author=author,
        message=message,
        title=title,
        bump_override=bump_override,
        repository=repository,
        execute=execute,
        console=console,
        err_console=err_console,
    )


def main() -> None:
    """Entry point for the ``verbump`` script."""
    cli()
