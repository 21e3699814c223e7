"""Exception hierarchy for verbump.

Every error raised by the library derives from VerbumpError so the
command line can report it uniformly and exit with a non-zero status.
"""

from __future__ import annotations


class VerbumpError(Exception):
    """Base class for all verbump errors."""


# Version errors


class VersionError(VerbumpError):
    """Base class for version calculation errors."""


class InvalidVersionFormatError(VersionError):
    """The version string is not a plain ``major.minor.patch`` triplet."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid version format: {version}")


class InvalidBumpTypeError(VersionError):
    """The increment kind is not one of major, minor or patch."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid version bump type: {value!r}. Use major, minor, or patch."
        )


# Changelog errors


class ChangelogError(VerbumpError):
    """Changelog formatting or update failed."""


class InvalidCommitShaError(ChangelogError):
    """The commit SHA cannot be shortened to a 7 character identifier."""

    def __init__(self, sha: str) -> None:
        self.sha = sha
        super().__init__(
            f"Invalid commit SHA: {sha!r}. Expected at least 7 hexadecimal characters."
        )


# Configuration errors


class ConfigError(VerbumpError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """A configuration file that was explicitly requested does not exist."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


# Project errors


class ProjectError(VerbumpError):
    """Reading or writing project files failed."""


class VersionNotFoundError(ProjectError):
    """No version could be located in a project file."""
