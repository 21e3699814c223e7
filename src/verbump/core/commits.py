"""Commit metadata and release decisions derived from commit text.

A release is driven by one merged commit (or pull request). Its title
selects the bump type and its message can opt out of a release entirely.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from verbump.core.version import BumpType
from verbump.exceptions import InvalidCommitShaError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from verbump.core.version import Version

SHORT_SHA_LENGTH = 7

DEFAULT_MINOR_MARKER = "[minor-upgrade]"

RELEASE_COMMIT_PREFIX = "chore: update version and changelog to "
SKIP_CHANGELOG_MARKER = "[skip-changelog]"

DEFAULT_SKIP_PATTERNS = [
    SKIP_CHANGELOG_MARKER,
    "chore: update version and changelog",
]

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def short_sha(sha: str) -> str:
    """Return the 7 character abbreviation of a commit SHA.

    Raises:
        InvalidCommitShaError: If sha is shorter than 7 characters or not hex
    """
    if len(sha) < SHORT_SHA_LENGTH or not _HEX_RE.fullmatch(sha):
        raise InvalidCommitShaError(sha)
    return sha[:SHORT_SHA_LENGTH]


@dataclass(frozen=True, slots=True)
class CommitInfo:
    """The commit a release is cut from."""

    sha: str
    author: str
    message: str

    @property
    def short_sha(self) -> str:
        return short_sha(self.sha)


def detect_bump_type(
    title: str,
    *,
    minor_marker: str = DEFAULT_MINOR_MARKER,
    default: BumpType = BumpType.PATCH,
) -> BumpType:
    """Pick the bump type from a pull request title.

    Titles containing the minor marker produce a minor release; anything
    else falls back to ``default``.

    Args:
        title: Pull request title or commit subject
        minor_marker: Literal text that requests a minor release
        default: Bump type used when the marker is absent

    Returns:
        The bump type to apply
    """
    if minor_marker and minor_marker in title:
        return BumpType.MINOR
    return default


def should_skip_release(message: str, patterns: Sequence[str]) -> bool:
    """Check whether a commit message opts out of a release.

    Matching is case-insensitive and looks at the whole message,
    including the body.
    """
    lowered = message.lower()
    return any(pattern.lower() in lowered for pattern in patterns if pattern)


def release_commit_message(version: Version | str) -> str:
    """Message for the commit that records a version bump.

    It carries the skip marker so the release commit never triggers
    another release.
    """
    return f"{RELEASE_COMMIT_PREFIX}{version} {SKIP_CHANGELOG_MARKER}"
