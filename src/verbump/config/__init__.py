"""Configuration management for verbump."""

from __future__ import annotations

from verbump.config.loader import load_config
from verbump.config.models import (
    ChangelogConfig,
    CommitsConfig,
    VerbumpConfig,
    VersionConfig,
)

__all__ = [
    "ChangelogConfig",
    "CommitsConfig",
    "VerbumpConfig",
    "VersionConfig",
    "load_config",
]
