"""Project file handling: version manifests and version files."""

from __future__ import annotations

from verbump.project.manifest import (
    find_manifest,
    get_manifest_version,
    update_manifest_version,
    update_version_file,
)

__all__ = [
    "find_manifest",
    "get_manifest_version",
    "update_manifest_version",
    "update_version_file",
]
