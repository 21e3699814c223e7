"""Implementations of the verbump commands."""
