"""Shared pytest fixtures."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from verbump.core.commits import CommitInfo

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_commit() -> CommitInfo:
    """The commit most tests release from."""
    return CommitInfo(
        sha="abc123def456789",
        author="Test Author",
        message="feat: add new feature for testing",
    )


@pytest.fixture
def release_time() -> datetime:
    """A fixed release timestamp."""
    return datetime(2024, 7, 4, 14, 30, 25, tzinfo=UTC)


@pytest.fixture
def node_project(tmp_path: Path) -> Path:
    """A project directory with a package.json at version 1.2.0."""
    package_json = {
        "name": "test-package",
        "version": "1.2.0",
        "description": "Test package for workflow testing",
    }
    (tmp_path / "package.json").write_text(json.dumps(package_json, indent=2) + "\n")
    return tmp_path


@pytest.fixture
def python_project(tmp_path: Path) -> Path:
    """A project directory with a pyproject.toml at version 1.0.0."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
dependencies = ["click>=8"]
# keep this comment
version = "1.0.0"

[tool.other]
version = "9.9.9"
"""
    )
    return tmp_path
