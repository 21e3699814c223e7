"""verbump - version bumps with a hundred-based patch cycle and changelog entries."""

from __future__ import annotations

__version__ = "0.1.0"
