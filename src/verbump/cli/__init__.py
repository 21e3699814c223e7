"""Command line interface."""

from __future__ import annotations

from verbump.cli.app import cli, main

__all__ = ["cli", "main"]
