"""Next-version calculation from a classified comment.

Rules:
    fix     non-breaking  ->  patch
    refact  non-breaking  ->  patch
    feat    non-breaking  ->  minor
    any     breaking      ->  major

Given ``v1.2.3``: ``fix:`` gives ``v1.2.4``, ``feat:`` gives ``v1.3.0`` and
``fix!`` / ``refact!`` / ``feat!`` give ``v2.0.0``.
"""

from __future__ import annotations

from typing import assert_never

from semver_py.core.commits import ChangeKind, SemanticComment, SemanticType
from semver_py.core.version import BumpType, SemanticVersion


def bump_type_for(semantic_type: SemanticType) -> BumpType:
    """Select the bump for a change kind and breaking flag."""
    match semantic_type:
        case SemanticType(is_breaking=True):
            return BumpType.MAJOR
        case SemanticType(kind=ChangeKind.FEATURE):
            return BumpType.MINOR
        case SemanticType(kind=ChangeKind.FIX | ChangeKind.REFACTORING):
            return BumpType.PATCH
    assert_never(semantic_type)


def calculate_version(current_version: str, semantic_comment: SemanticComment) -> str:
    """Calculate the version that follows current_version for a classified comment.

    Args:
        current_version: Version string in ``v<major>.<minor>.<patch>`` form
        semantic_comment: Classification of the incoming commit comment

    Returns:
        The next version string

    Raises:
        InvalidVersionFormatError: If current_version is malformed
        VersionNumberConversionError: If a component does not fit in 32 bits
    """
    version = SemanticVersion.parse(current_version)
    return str(version.bump(bump_type_for(semantic_comment.semantic_type)))


def next_version(current_version: str, comment: str) -> str:
    """Classify comment and calculate the version that follows current_version.

    Raises:
        ParseError: If either the comment or the version cannot be parsed
    """
    return calculate_version(current_version, SemanticComment.parse(comment))
