"""Configuration models for verbump.

Configuration lives in ``[tool.verbump]`` of pyproject.toml or in a
standalone verbump.toml. Every field has a default, so a project
without any configuration works out of the box.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from verbump.core.changelog import (
    DEFAULT_HEADER,
    DEFAULT_HEADER_LINES,
    DEFAULT_REPOSITORY,
    count_lines,
)
from verbump.core.commits import DEFAULT_MINOR_MARKER, DEFAULT_SKIP_PATTERNS
from verbump.core.version import BumpType

_REPOSITORY_RE = re.compile(r"[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+")


class VersionConfig(BaseModel):
    """Where the version lives and how it is bumped."""

    model_config = ConfigDict(extra="forbid")

    manifest: Path | None = Field(
        default=None,
        description="Manifest holding the version. Auto-detected when unset.",
    )
    default_bump: BumpType = BumpType.PATCH
    minor_marker: str = DEFAULT_MINOR_MARKER
    version_files: list[Path] = Field(
        default_factory=list,
        description='Extra files with a __version__ = "..." line to keep in sync.',
    )


class ChangelogConfig(BaseModel):
    """Changelog file and entry settings.

    When only ``header`` is given, ``header_lines`` follows its line count.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    path: Path = Path("CHANGELOG.md")
    repository: str = DEFAULT_REPOSITORY
    header_lines: int = Field(default=DEFAULT_HEADER_LINES, ge=0)
    header: str = DEFAULT_HEADER

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        if not _REPOSITORY_RE.fullmatch(value):
            raise ValueError(f"repository must look like 'owner/repo', got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_header_size(self) -> ChangelogConfig:
        lines = count_lines(self.header)
        if "header_lines" not in self.model_fields_set:
            if self.header_lines != lines:
                self.header_lines = lines
        elif "header" in self.model_fields_set and self.header_lines != lines:
            raise ValueError(
                f"header has {lines} lines but header_lines is {self.header_lines}"
            )
        return self


class CommitsConfig(BaseModel):
    """Commit message handling."""

    model_config = ConfigDict(extra="forbid")

    skip_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_PATTERNS))


class VerbumpConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    version: VersionConfig = Field(default_factory=VersionConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
    commits: CommitsConfig = Field(default_factory=CommitsConfig)
