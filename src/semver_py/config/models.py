"""Pydantic models for the [tool.semver-py] configuration section."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SemVerPyConfig(BaseModel):
    """Settings read from ``[tool.semver-py]`` in pyproject.toml.

    Example:
        [tool.semver-py]
        output_json = true
        json_indent = 2
        log_level = "info"
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_json: bool = Field(
        default=False,
        description="Print classifications as JSON instead of their debug representation",
    )
    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="Indentation for JSON output; None prints a single line",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the command-line interface",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        """The log level as a `logging` module constant."""
        return logging.getLevelNamesMapping()[self.log_level]
