"""Configuration management for semver-py."""

from __future__ import annotations

from semver_py.config.loader import load_config
from semver_py.config.models import SemVerPyConfig

__all__ = [
    "SemVerPyConfig",
    "load_config",
]
