"""Semantic version parsing and bumping.

Versions are plain ``major.minor.patch`` triplets. Patch numbers follow a
three-digit convention: the first patch release after a major or minor bump
is ``X.Y.100`` instead of ``X.Y.1``, and every later patch adds one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from verbump.exceptions import InvalidBumpTypeError, InvalidVersionFormatError

# First patch number of a patch cycle (X.Y.0 -> X.Y.100)
PATCH_CYCLE_START = 100

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


class BumpType(StrEnum):
    """Which version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @classmethod
    def parse(cls, value: str) -> BumpType:
        """Convert a user-supplied name into a BumpType.

        Raises:
            InvalidBumpTypeError: If value is not major, minor or patch
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidBumpTypeError(value) from e


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """An immutable ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string.

        The whole string must be three dot-separated decimal numbers.
        Whitespace, prefixes such as ``v`` and pre-release suffixes are
        rejected rather than stripped.

        Args:
            text: Version string, e.g. "1.2.100"

        Returns:
            Parsed Version

        Raises:
            InvalidVersionFormatError: If text is not a numeric triplet
        """
        match = _VERSION_RE.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidVersionFormatError(str(text))
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next version for the given bump type.

        Args:
            bump_type: Component to increment

        Returns:
            New Version instance
        """
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            if self.patch == 0:
                return Version(self.major, self.minor, PATCH_CYCLE_START)
            return Version(self.major, self.minor, self.patch + 1)
        raise InvalidBumpTypeError(str(bump_type))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> Version:
    """Parse a version string. Shortcut for Version.parse()."""
    return Version.parse(text)


def next_version(
    current: Version | str,
    bump_type: BumpType | str = BumpType.PATCH,
) -> Version:
    """Calculate the version that follows ``current``.

    Args:
        current: Current version, as a Version or a string
        bump_type: Component to increment, as a BumpType or its name

    Returns:
        The bumped version

    Raises:
        InvalidVersionFormatError: If current is not a numeric triplet
        InvalidBumpTypeError: If bump_type is not a known name
    """
    if not isinstance(bump_type, BumpType):
        bump_type = BumpType.parse(bump_type)
    if not isinstance(current, Version):
        current = Version.parse(current)
    return current.bump(bump_type)
