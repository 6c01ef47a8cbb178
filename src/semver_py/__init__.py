"""semver-py: next semantic version from a conventional commit comment."""

from __future__ import annotations

__version__ = "0.1.0"
