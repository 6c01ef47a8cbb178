"""Exception hierarchy for semver-py.

Everything the package raises derives from SemVerError, so callers can
catch the whole family in one place:

    SemVerError
    ├── ParseError
    │   ├── InvalidCommentFormatError
    │   ├── UnexpectedSemanticTypeError
    │   ├── InvalidVersionFormatError
    │   ├── VersionNumberConversionError
    │   └── SerializationError
    └── ConfigError
        ├── ConfigNotFoundError
        └── ConfigValidationError
"""

from __future__ import annotations


class SemVerError(Exception):
    """Base exception for semver-py."""


# =============================================================================
# Parsing
# =============================================================================


class ParseError(SemVerError):
    """A comment, version or classification could not be parsed."""


class InvalidCommentFormatError(ParseError):
    """The comment does not start with a `<type>:` or `<type>!` prefix."""

    def __init__(self, comment: str) -> None:
        self.comment = comment
        super().__init__(
            f"The format provided is invalid: {comment!r}. "
            "Expected '<type>: description' or '<type>! description'."
        )


class UnexpectedSemanticTypeError(ParseError):
    """The comment prefix is not one of the supported semantic types."""

    def __init__(self, semantic_type: str) -> None:
        self.semantic_type = semantic_type
        super().__init__(
            f"Unexpected semantic type {semantic_type!r}. Expected one of: feat, fix, refact."
        )


class InvalidVersionFormatError(ParseError):
    """The version string does not match `v<major>.<minor>.<patch>`."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid version format {version!r}. Expected 'v<major>.<minor>.<patch>'.")


class VersionNumberConversionError(ParseError):
    """A version component is not a valid unsigned 32-bit integer."""


class SerializationError(ParseError):
    """A classification could not be converted to or from JSON."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(SemVerError):
    """Base for configuration problems."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml could not be found or read."""


class ConfigValidationError(ConfigError):
    """The [tool.semver-py] section failed validation."""
