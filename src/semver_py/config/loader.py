"""Locate and load configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from semver_py.config.models import SemVerPyConfig
from semver_py.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_SECTION = "semver-py"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in start or one of its parents.

    Args:
        start: Directory to search from (defaults to the current directory)

    Returns:
        Path to the nearest pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the filesystem root
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {directory} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_semver_py_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the [tool.semver-py] table, or an empty dict when absent.

    Raises:
        ConfigValidationError: If the top-level tool key is not a table
    """
    tool = pyproject.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigValidationError("[tool] in pyproject.toml must be a table")
    return tool.get(TOOL_SECTION, {})


def load_config(path: Path | None = None) -> SemVerPyConfig:
    """Load configuration for the project at path.

    Defaults are returned when there is no pyproject.toml or it has no
    [tool.semver-py] section.

    Raises:
        ConfigValidationError: If the section contains invalid values
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        return SemVerPyConfig()

    raw = extract_semver_py_config(load_pyproject_toml(pyproject_path))
    try:
        return SemVerPyConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_SECTION}] in {pyproject_path}:\n{e}") from e
