"""Implementation of the 'next' command.

The next command computes the version that follows the current one
for a given commit comment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.markup import escape

from semver_py.core.commits import SemanticComment
from semver_py.core.versioner import calculate_version
from semver_py.exceptions import ParseError

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


def run_next(
    version: str,
    comment: str,
    console: Console,
    err_console: Console,
) -> None:
    """Run the next command.

    Args:
        version: Current version (e.g., "v1.2.3")
        comment: Commit comment driving the bump
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        semantic_comment = SemanticComment.parse(comment)
    except ParseError as e:
        err_console.print(f"[red]Error parsing comment:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        next_version = calculate_version(version, semantic_comment)
    except ParseError as e:
        err_console.print(f"[red]Error calculating version:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    logger.debug(
        "%s (breaking=%s): %s -> %s",
        semantic_comment.semantic_type.kind.value,
        semantic_comment.is_breaking,
        version,
        next_version,
    )
    console.print(next_version, markup=False, highlight=False, soft_wrap=True)
