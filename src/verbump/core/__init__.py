"""Core business logic for verbump.

This module contains the fundamental building blocks:
- Version parsing and bumping with the hundred-based patch cycle
- Release decisions derived from commit and pull request text
- Changelog entry formatting and insertion
"""

from __future__ import annotations

from verbump.core.changelog import (
    format_changelog_entry,
    insert_changelog_entry,
    update_changelog_file,
)
from verbump.core.commits import (
    CommitInfo,
    detect_bump_type,
    release_commit_message,
    short_sha,
    should_skip_release,
)
from verbump.core.version import BumpType, Version, next_version, parse_version

__all__ = [
    # Version
    "BumpType",
    # Commits
    "CommitInfo",
    "Version",
    "detect_bump_type",
    # Changelog
    "format_changelog_entry",
    "insert_changelog_entry",
    "next_version",
    "parse_version",
    "release_commit_message",
    "short_sha",
    "should_skip_release",
    "update_changelog_file",
]
