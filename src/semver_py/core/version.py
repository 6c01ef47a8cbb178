"""Semantic version parsing and manipulation.

Versions use the ``v<major>.<minor>.<patch>`` form, e.g. ``v1.2.3``.
Pre-release and build metadata suffixes are not supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from semver_py.exceptions import InvalidVersionFormatError, VersionNumberConversionError

# Components are unsigned 32-bit numbers.
MAX_COMPONENT = 2**32 - 1

VERSION_PATTERN = re.compile(r"v([0-9]+)\.([0-9]+)\.([0-9]+)", re.ASCII)


class BumpType(StrEnum):
    """Which version component a change increments."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def _to_component(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise VersionNumberConversionError(f"error when converting version number {raw!r}") from e
    _check_component(value)
    return value


def _check_component(value: int) -> None:
    if not 0 <= value <= MAX_COMPONENT:
        raise VersionNumberConversionError(
            f"version number {value} is outside the range 0..{MAX_COMPONENT}"
        )


@dataclass(frozen=True, slots=True, order=True)
class SemanticVersion:
    """A ``v<major>.<minor>.<patch>`` version.

    Example:
        >>> v = SemanticVersion.parse("v1.2.3")
        >>> str(v.bump(BumpType.MINOR))
        'v1.3.0'
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for value in (self.major, self.minor, self.patch):
            _check_component(value)

    @classmethod
    def parse(cls, version_str: str) -> SemanticVersion:
        """Parse a version string.

        Args:
            version_str: Version string (e.g., "v1.2.3")

        Returns:
            Parsed SemanticVersion

        Raises:
            InvalidVersionFormatError: If the string is not ``v<int>.<int>.<int>``
            VersionNumberConversionError: If a component does not fit in 32 bits
        """
        match = VERSION_PATTERN.fullmatch(version_str)
        if match is None:
            raise InvalidVersionFormatError(version_str)

        major, minor, patch = (_to_component(group) for group in match.groups())
        return cls(major, minor, patch)

    def bump(self, bump_type: BumpType) -> SemanticVersion:
        """Return the version incremented by the given bump type.

        Incrementing a component resets every less significant component to 0.

        Raises:
            VersionNumberConversionError: If the incremented component overflows
        """
        match bump_type:
            case BumpType.MAJOR:
                return SemanticVersion(self.major + 1, 0, 0)
            case BumpType.MINOR:
                return SemanticVersion(self.major, self.minor + 1, 0)
            case BumpType.PATCH:
                return SemanticVersion(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"


def parse_version(version_str: str) -> SemanticVersion:
    """Parse a version string. See SemanticVersion.parse()."""
    return SemanticVersion.parse(version_str)
