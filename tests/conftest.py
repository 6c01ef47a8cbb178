"""Shared fixtures for semver-py tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from semver_py.core.commits import SemanticComment, SemanticType

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def fix_comment() -> SemanticComment:
    """Non-breaking fix."""
    return SemanticComment("handle empty input", SemanticType.fix())


@pytest.fixture
def feat_comment() -> SemanticComment:
    """Non-breaking feature."""
    return SemanticComment("add json output", SemanticType.feature())


@pytest.fixture
def refact_comment() -> SemanticComment:
    """Non-breaking refactoring."""
    return SemanticComment("split parser module", SemanticType.refactoring())


@pytest.fixture
def project_with_config(tmp_path: Path) -> Path:
    """Project directory whose pyproject.toml carries a [tool.semver-py] section."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.semver-py]
output_json = true
json_indent = 2
log_level = "info"
"""
    )
    return tmp_path


@pytest.fixture
def project_without_config(tmp_path: Path) -> Path:
    """Project directory whose pyproject.toml has no [tool.semver-py] section."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "test-project"\n')
    return tmp_path
