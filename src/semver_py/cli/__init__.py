"""Command-line interface for semver-py."""

from __future__ import annotations

from semver_py.cli.app import app

__all__ = ["app"]
