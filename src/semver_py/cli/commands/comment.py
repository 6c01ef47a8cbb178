"""Implementation of the 'comment' command.

The comment command classifies a commit comment and prints the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.markup import escape

from semver_py.core.commits import parse_comment
from semver_py.exceptions import ParseError, SerializationError

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


def run_comment(
    comment: str,
    output_json: bool,
    json_indent: int | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the comment command.

    Args:
        comment: Commit comment to classify (e.g., "feat! new config format")
        output_json: Print JSON instead of the debug representation
        json_indent: Indentation for JSON output
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        semantic_comment = parse_comment(comment)
    except ParseError as e:
        err_console.print(f"[red]Error parsing comment:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    logger.debug(
        "Classified comment as %s (breaking=%s)",
        semantic_comment.semantic_type.kind.value,
        semantic_comment.is_breaking,
    )

    if output_json:
        try:
            output = semantic_comment.as_json_string(indent=json_indent)
        except SerializationError as e:
            err_console.print(f"[red]Error serializing comment:[/] {escape(str(e))}")
            raise SystemExit(1) from e
    else:
        output = repr(semantic_comment)

    console.print(output, markup=False, highlight=False, soft_wrap=True)
