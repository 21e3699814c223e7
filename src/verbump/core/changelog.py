"""Changelog entry generation and insertion.

One release produces one entry. Entries are inserted right below the
fixed changelog header, so the newest release is always listed first.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from verbump.core.commits import short_sha
from verbump.exceptions import ChangelogError

if TYPE_CHECKING:
    from pathlib import Path

    from verbump.core.commits import CommitInfo
    from verbump.core.version import Version

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORY = "owner/repo"

DEFAULT_HEADER = (
    "# Changelog\n"
    "\n"
    "All notable changes to this project will be documented in this file.\n"
    "\n"
)

DEFAULT_HEADER_LINES = 4

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def count_lines(text: str) -> int:
    """Number of lines in text. Only newline characters end a line."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS UTC``.

    Naive datetimes are taken to be in UTC already.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


def commit_url(sha: str, repository: str = DEFAULT_REPOSITORY) -> str:
    """GitHub URL of a commit in ``owner/repo``."""
    return f"https://github.com/{repository}/commit/{sha}"


def format_changelog_entry(
    version: Version | str,
    commit: CommitInfo,
    timestamp: datetime | None = None,
    *,
    repository: str = DEFAULT_REPOSITORY,
) -> str:
    """Format the changelog block for one release.

    Author and message are copied verbatim. The link label is the short
    SHA, the link target uses the full SHA. The block ends with a blank
    line that separates it from the next entry.

    Args:
        version: Version being released
        commit: Commit the release is cut from
        timestamp: Release time, defaults to now
        repository: GitHub ``owner/repo`` used in the commit link

    Returns:
        Formatted entry

    Raises:
        InvalidCommitShaError: If the commit SHA cannot be shortened
    """
    if timestamp is None:
        timestamp = datetime.now(UTC)

    lines = [
        f"## [{version}] - {format_timestamp(timestamp)}",
        "",
        f"**Author:** {commit.author}",
        f"**Commit:** [{short_sha(commit.sha)}]({commit_url(commit.sha, repository)})",
        f"**Message:** {commit.message}",
        "",
    ]
    return "\n".join(lines) + "\n"


def insert_changelog_entry(
    content: str,
    entry: str,
    *,
    header_lines: int = DEFAULT_HEADER_LINES,
    header: str = DEFAULT_HEADER,
) -> str:
    """Insert an entry directly below the changelog header.

    The header is the first ``header_lines`` lines of the document. All
    existing content is kept as is. An empty document is replaced by
    ``header`` first; a document shorter than the header gets the entry
    appended at its end.

    Args:
        content: Current changelog text
        entry: Entry produced by format_changelog_entry()
        header_lines: Number of leading lines that form the header
        header: Header used when the document is empty

    Returns:
        Updated changelog text
    """
    if header_lines < 0:
        raise ValueError("header_lines must be non-negative")

    if not content:
        content = header

    # Lines end at "\n" only, like sed's line addressing
    end = 0
    for _ in range(header_lines):
        newline = content.find("\n", end)
        if newline == -1:
            end = len(content)
            break
        end = newline + 1
    head, rest = content[:end], content[end:]

    if head and not head.endswith("\n"):
        head += "\n"

    return head + entry + rest


def update_changelog_file(
    path: Path,
    entry: str,
    *,
    header_lines: int = DEFAULT_HEADER_LINES,
    header: str = DEFAULT_HEADER,
) -> Path:
    """Insert an entry into a changelog file, creating the file if needed.

    Args:
        path: Changelog file
        entry: Entry to insert
        header_lines: Number of leading lines that form the header
        header: Header written into a new changelog

    Returns:
        Path of the updated changelog

    Raises:
        ChangelogError: If the file cannot be read or written
    """
    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
    except OSError as e:
        raise ChangelogError(f"Failed to read changelog {path}: {e}") from e

    if not existing:
        logger.debug("Creating new changelog at %s", path)

    updated = insert_changelog_entry(
        existing,
        entry,
        header_lines=header_lines,
        header=header,
    )

    try:
        path.write_text(updated, encoding="utf-8")
    except OSError as e:
        raise ChangelogError(f"Failed to update changelog {path}: {e}") from e

    logger.debug("Inserted %d characters into %s", len(entry), path)
    return path
