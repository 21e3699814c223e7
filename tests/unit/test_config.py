"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from verbump.config.loader import (
    extract_verbump_config,
    find_pyproject_toml,
    load_config,
    load_toml,
)
from verbump.config.models import (
    ChangelogConfig,
    CommitsConfig,
    VerbumpConfig,
    VersionConfig,
)
from verbump.core.changelog import DEFAULT_HEADER
from verbump.core.version import BumpType
from verbump.exceptions import ConfigNotFoundError, ConfigValidationError


class TestVerbumpConfig:
    """Tests for VerbumpConfig model."""

    def test_nested_defaults(self):
        """Nested configurations have defaults."""
        config = VerbumpConfig()

        assert config.version.default_bump == BumpType.PATCH
        assert config.version.minor_marker == "[minor-upgrade]"
        assert config.version.manifest is None
        assert config.changelog.path == Path("CHANGELOG.md")
        assert config.changelog.header_lines == 4
        assert config.changelog.header == DEFAULT_HEADER
        assert "[skip-changelog]" in config.commits.skip_patterns

    def test_unknown_keys_rejected(self):
        """Typos in config keys are reported."""
        with pytest.raises(ValueError):
            VerbumpConfig.model_validate({"changelg": {}})


class TestVersionConfig:
    """Tests for VersionConfig model."""

    def test_bump_from_string(self):
        """default_bump accepts the plain names."""
        assert VersionConfig(default_bump="minor").default_bump == BumpType.MINOR

    def test_invalid_bump(self):
        """Unknown bump names are rejected."""
        with pytest.raises(ValueError):
            VersionConfig(default_bump="prerelease")

    def test_version_files(self):
        """version_files are converted to paths."""
        config = VersionConfig(version_files=["src/pkg/__init__.py"])
        assert config.version_files == [Path("src/pkg/__init__.py")]


class TestChangelogConfig:
    """Tests for ChangelogConfig model."""

    def test_defaults(self):
        """Default changelog configuration."""
        config = ChangelogConfig()

        assert config.enabled is True
        assert config.repository == "owner/repo"

    def test_repository_format(self):
        """repository must be owner/repo."""
        assert ChangelogConfig(repository="acme/shop-app").repository == "acme/shop-app"
        with pytest.raises(ValueError, match="owner/repo"):
            ChangelogConfig(repository="https://github.com/acme/shop")

    def test_negative_header_lines(self):
        """header_lines cannot be negative."""
        with pytest.raises(ValueError):
            ChangelogConfig(header_lines=-1)

    def test_header_lines_follow_custom_header(self):
        """A custom header sets header_lines to its own line count."""
        config = ChangelogConfig(header="# Releases\n\n")
        assert config.header_lines == 2

    def test_default_header_lines(self):
        """The default header is four lines long."""
        assert ChangelogConfig().header_lines == 4

    def test_header_lines_alone_kept(self):
        """header_lines without a header is taken as given."""
        assert ChangelogConfig(header_lines=6).header_lines == 6

    def test_mismatched_header_size(self):
        """header_lines must match the line count of a custom header."""
        with pytest.raises(ValueError, match="header has 2 lines but header_lines is 4"):
            ChangelogConfig(header="# Releases\n\n", header_lines=4)

    def test_matching_header_size(self):
        """A consistent header and header_lines are accepted."""
        config = ChangelogConfig(header="# Log\n\nNotes\n\n", header_lines=4)
        assert config.header_lines == 4


class TestCommitsConfig:
    """Tests for CommitsConfig model."""

    def test_custom_skip_patterns(self):
        """Custom skip patterns replace the defaults."""
        config = CommitsConfig(skip_patterns=["[skip ci]"])
        assert config.skip_patterns == ["[skip ci]"]

    def test_defaults_not_shared(self):
        """Each instance gets its own pattern list."""
        first = CommitsConfig()
        first.skip_patterns.append("[wip]")
        assert "[wip]" not in CommitsConfig().skip_patterns


class TestLoadToml:
    """Tests for load_toml()."""

    def test_load_valid_toml(self, python_project: Path):
        """Load a valid pyproject.toml."""
        data = load_toml(python_project / "pyproject.toml")
        assert data["project"]["name"] == "test-project"

    def test_load_nonexistent_raises(self, tmp_path: Path):
        """Loading nonexistent file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        """Broken TOML raises ConfigValidationError."""
        path = tmp_path / "verbump.toml"
        path.write_text("[changelog\npath = ")
        with pytest.raises(ConfigValidationError, match="Invalid TOML"):
            load_toml(path)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml()."""

    def test_find_in_current_dir(self, python_project: Path):
        """Find pyproject.toml in current directory."""
        assert find_pyproject_toml(python_project).name == "pyproject.toml"

    def test_find_in_parent_dir(self, python_project: Path):
        """Find pyproject.toml in parent directory."""
        subdir = python_project / "src" / "package"
        subdir.mkdir(parents=True)

        found = find_pyproject_toml(subdir)
        assert found == (python_project / "pyproject.toml").resolve()


class TestExtractVerbumpConfig:
    """Tests for extract_verbump_config()."""

    def test_extract_existing_config(self):
        """Extract the [tool.verbump] table."""
        pyproject = {"tool": {"verbump": {"changelog": {"path": "HISTORY.md"}}}}
        assert extract_verbump_config(pyproject) == {"changelog": {"path": "HISTORY.md"}}

    def test_extract_missing_config(self):
        """Extract returns empty dict when config missing."""
        assert extract_verbump_config({"project": {"name": "test"}}) == {}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_without_config(self, node_project: Path, monkeypatch: pytest.MonkeyPatch):
        """A project with no configuration uses defaults."""
        monkeypatch.setattr(
            "verbump.config.loader.find_pyproject_toml",
            _raise_not_found,
        )
        assert load_config(node_project) == VerbumpConfig()

    def test_from_pyproject(self, python_project: Path):
        """[tool.verbump] in pyproject.toml is loaded."""
        pyproject = python_project / "pyproject.toml"
        pyproject.write_text(
            pyproject.read_text()
            + '\n[tool.verbump.changelog]\npath = "HISTORY.md"\nrepository = "acme/shop"\n'
        )

        config = load_config(python_project)

        assert config.changelog.path == Path("HISTORY.md")
        assert config.changelog.repository == "acme/shop"

    def test_standalone_file_wins(self, python_project: Path):
        """verbump.toml takes precedence over pyproject.toml."""
        (python_project / "verbump.toml").write_text('[version]\ndefault_bump = "minor"\n')

        config = load_config(python_project)

        assert config.version.default_bump == BumpType.MINOR

    def test_invalid_values_raise(self, tmp_path: Path):
        """Invalid values raise ConfigValidationError naming the file."""
        (tmp_path / "verbump.toml").write_text('[changelog]\nheader_lines = "many"\n')

        with pytest.raises(ConfigValidationError, match="verbump.toml"):
            load_config(tmp_path)


def _raise_not_found(start: Path | None = None) -> Path:
    raise ConfigNotFoundError("not found")
