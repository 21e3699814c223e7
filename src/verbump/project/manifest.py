"""Reading and writing the project version.

Supported manifests are package.json and pyproject.toml. pyproject.toml
is edited with targeted regex replacements so formatting and comments
survive; package.json is rewritten with two-space indentation, keeping
all other fields and their order.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from verbump.exceptions import ProjectError, VersionNotFoundError

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
PYPROJECT_TOML = "pyproject.toml"

# Lookup order when auto-detecting the manifest
MANIFEST_NAMES = (PACKAGE_JSON, PYPROJECT_TOML)

_VERSION_LINE = r'^(version\s*=\s*)["\'][^"\']+["\']'


def find_manifest(directory: Path) -> Path:
    """Find the version manifest in a project directory.

    Raises:
        ProjectError: If no supported manifest exists
    """
    for name in MANIFEST_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise ProjectError(
        f"No version manifest found in {directory}. Expected one of: {', '.join(MANIFEST_NAMES)}."
    )


def _resolve(path: Path) -> Path:
    return find_manifest(path) if path.is_dir() else path


def get_manifest_version(path: Path) -> str:
    """Read the version from a manifest file or a project directory.

    Raises:
        ProjectError: If the file is missing or unsupported
        VersionNotFoundError: If the manifest has no version
    """
    manifest = _resolve(path)
    if manifest.name == PACKAGE_JSON:
        return get_package_json_version(manifest)
    if manifest.name == PYPROJECT_TOML:
        return get_pyproject_version(manifest)
    raise ProjectError(f"Unsupported manifest: {manifest}")


def update_manifest_version(path: Path, new_version: str) -> Path:
    """Write the version into a manifest file or a project directory.

    Returns:
        Path of the updated manifest
    """
    manifest = _resolve(path)
    if manifest.name == PACKAGE_JSON:
        return update_package_json_version(manifest, new_version)
    if manifest.name == PYPROJECT_TOML:
        return update_pyproject_version(manifest, new_version)
    raise ProjectError(f"Unsupported manifest: {manifest}")


# package.json


def _load_package_json(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ProjectError(f"Failed to read version from {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ProjectError(f"Failed to read version from {path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ProjectError(f"Failed to read version from {path}: expected a JSON object")
    return data


def get_package_json_version(path: Path) -> str:
    """Get the ``version`` field from package.json."""
    data = _load_package_json(path)
    version = data.get("version")
    if not isinstance(version, str):
        raise VersionNotFoundError(f"Could not find version in {path}")
    return version


def update_package_json_version(path: Path, new_version: str) -> Path:
    """Set the ``version`` field in package.json."""
    data = _load_package_json(path)
    data["version"] = new_version
    try:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Failed to update version in {path}: {e}") from e
    logger.debug("Set version %s in %s", new_version, path)
    return path


# pyproject.toml


_SECTIONS = (r"\[project\]", r"\[tool\.poetry\]")


def _section_pattern(section: str) -> str:
    # The table header up to the next table header or EOF
    return rf"^{section}[ \t]*$.*?(?=^\[|\Z)"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Failed to read {path}: {e}") from e


def get_pyproject_version(path: Path) -> str:
    """Get the version from pyproject.toml.

    Looks at ``[project]`` first, then ``[tool.poetry]``.

    Raises:
        VersionNotFoundError: If version cannot be found
    """
    content = _read_text(path)

    for section in _SECTIONS:
        section_match = re.search(_section_pattern(section), content, re.MULTILINE | re.DOTALL)
        if section_match is None:
            continue
        match = re.search(
            r'^version\s*=\s*["\']([^"\']+)["\']',
            section_match.group(0),
            re.MULTILINE,
        )
        if match:
            return match.group(1)

    raise VersionNotFoundError(
        f"Could not find version in {path}. Expected [project].version or [tool.poetry].version."
    )


def update_pyproject_version(path: Path, new_version: str) -> Path:
    """Update the version in pyproject.toml.

    Only the first ``version = "..."`` line inside ``[project]`` (or
    ``[tool.poetry]`` when there is none) is touched.

    Raises:
        VersionNotFoundError: If version cannot be found
    """
    content = _read_text(path)

    def replace_version(match: re.Match[str]) -> str:
        return re.sub(
            _VERSION_LINE,
            rf'\g<1>"{new_version}"',
            match.group(0),
            count=1,
            flags=re.MULTILINE,
        )

    for section in _SECTIONS:
        section_pattern = _section_pattern(section)
        section_match = re.search(section_pattern, content, re.MULTILINE | re.DOTALL)
        if section_match is None or not re.search(
            _VERSION_LINE, section_match.group(0), re.MULTILINE
        ):
            continue

        new_content = re.sub(
            section_pattern,
            replace_version,
            content,
            count=1,
            flags=re.MULTILINE | re.DOTALL,
        )
        try:
            path.write_text(new_content, encoding="utf-8")
        except OSError as e:
            raise ProjectError(f"Failed to update version in {path}: {e}") from e
        logger.debug("Set version %s in %s", new_version, path)
        return path

    raise VersionNotFoundError(
        f"Could not find version to update in {path}. "
        "Expected [project].version or [tool.poetry].version."
    )


# Python version files

_DUNDER_VERSION = r'^(__version__\s*=\s*)["\'][^"\']+["\']'


def update_version_file(file_path: Path, new_version: str) -> Path:
    """Rewrite the ``__version__ = "..."`` line of a Python module.

    Raises:
        ProjectError: If the file is missing or cannot be written
        VersionNotFoundError: If the file has no ``__version__`` line
    """
    if not file_path.is_file():
        raise ProjectError(f"Version file not found: {file_path}")

    new_content, count = re.subn(
        _DUNDER_VERSION,
        rf'\g<1>"{new_version}"',
        _read_text(file_path),
        count=1,
        flags=re.MULTILINE,
    )
    if count == 0:
        raise VersionNotFoundError(f"No __version__ assignment in {file_path}")

    try:
        file_path.write_text(new_content, encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Failed to update version in {file_path}: {e}") from e
    logger.debug("Set version %s in %s", new_version, file_path)
    return file_path
