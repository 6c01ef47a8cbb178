"""Core business logic for semver-py.

This module contains the fundamental building blocks:
- Semantic commit comment parsing
- Version parsing and formatting
- Next-version calculation
"""

from __future__ import annotations

from semver_py.core.commits import ChangeKind, SemanticComment, SemanticType, parse_comment
from semver_py.core.version import BumpType, SemanticVersion, parse_version
from semver_py.core.versioner import bump_type_for, calculate_version, next_version

__all__ = [
    # Version
    "BumpType",
    # Commits
    "ChangeKind",
    "SemanticComment",
    "SemanticType",
    "SemanticVersion",
    "bump_type_for",
    # Versioner
    "calculate_version",
    "next_version",
    "parse_comment",
    "parse_version",
]
