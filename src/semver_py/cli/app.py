"""Typer application for semver-py.

    semver-py comment --comment "feat! new config format" --output-json
    semver-py next --version v1.2.3 --comment "fix: handle empty input"
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from semver_py import __version__
from semver_py.cli.commands.comment import run_comment
from semver_py.cli.commands.next import run_next
from semver_py.config import SemVerPyConfig, load_config
from semver_py.exceptions import ConfigError
from semver_py.log import configure_logging

app = typer.Typer(
    name="semver-py",
    help="Classify commit comments and compute the next semantic version.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _print_version(value: bool) -> None:
    if value:
        console.print(f"semver-py {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    path: str | None = typer.Option(
        None, "--path", "-p", help="Project directory to load configuration from"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr"),
    version_info: bool = typer.Option(
        False,
        "--version-info",
        callback=_print_version,
        is_eager=True,
        help="Show the semver-py version and exit",
    ),
) -> None:
    """Classify commit comments and compute the next semantic version."""
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    configure_logging(logging.DEBUG if verbose else config.logging_level)
    ctx.obj = config


@app.command()
def comment(
    ctx: typer.Context,
    comment: str = typer.Option(..., "--comment", "-c", help="Comment from your VCS"),
    output_json: bool | None = typer.Option(
        None,
        "--output-json/--no-output-json",
        "-o",
        help="Print the classification as JSON",
    ),
) -> None:
    """Classify a commit comment.

    Expected format: '<type>: description' (non-breaking) or
    '<type>! description' (breaking), where <type> is feat, fix or refact.
    """
    config: SemVerPyConfig = ctx.obj
    run_comment(
        comment=comment,
        output_json=config.output_json if output_json is None else output_json,
        json_indent=config.json_indent,
        console=console,
        err_console=err_console,
    )


@app.command("next")
def next_(
    version: str = typer.Option(..., "--version", "-v", help="Current version, e.g. v1.2.3"),
    comment: str = typer.Option(..., "--comment", "-c", help="Comment from your VCS"),
) -> None:
    """Compute the next version for a commit comment."""
    run_next(
        version=version,
        comment=comment,
        console=console,
        err_console=err_console,
    )


if __name__ == "__main__":
    app()
