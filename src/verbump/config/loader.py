"""Configuration loading.

Lookup order for a project directory:

1. ``verbump.toml`` in the directory (the whole file is the config)
2. ``[tool.verbump]`` in the nearest pyproject.toml, searching upwards
3. Built-in defaults
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from verbump.config.models import VerbumpConfig
from verbump.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "verbump.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_SECTION = "verbump"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find the nearest pyproject.toml, searching from start upwards.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the filesystem root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_FILENAME
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No {PYPROJECT_FILENAME} found in {current} or its parents")


def load_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_verbump_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.verbump]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def parse_config(data: dict[str, Any], source: Path | None = None) -> VerbumpConfig:
    """Validate raw configuration data.

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        return VerbumpConfig.model_validate(data)
    except ValidationError as e:
        where = f" in {source}" if source else ""
        raise ConfigValidationError(f"Invalid configuration{where}:\n{e}") from e


def load_config(path: Path | None = None) -> VerbumpConfig:
    """Load the configuration for a project directory.

    Args:
        path: Project directory, defaults to the current directory

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If a configuration file is invalid
    """
    project_path = path or Path.cwd()

    standalone = project_path / CONFIG_FILENAME
    if standalone.is_file():
        logger.debug("Loading configuration from %s", standalone)
        return parse_config(load_toml(standalone), standalone)

    try:
        pyproject_path = find_pyproject_toml(project_path)
    except ConfigNotFoundError:
        logger.debug("No configuration found for %s, using defaults", project_path)
        return VerbumpConfig()

    logger.debug("Loading configuration from %s", pyproject_path)
    data = extract_verbump_config(load_toml(pyproject_path))
    return parse_config(data, pyproject_path)
