"""Moho CLI Main Entry Point

Moho - compile text templates into standalone sh scripts.

Usage:
    moho init                              # scaffold .moho/
    moho create NAME [DEFAULT_PATH]        # write a template in $EDITOR
    moho create NAME -s file.txt           # start from an existing file
    moho edit NAME                         # edit a template and its defaults
    moho list                              # list templates
    moho delete NAME                       # remove a template
    .moho/NAME.mh --var value --name out   # run a generated template
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import (
    create_command,
    delete_command,
    edit_command,
    init_command,
    list_command,
)
from .commands.utils import setup_logging

typer_app = typer.Typer(no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"moho {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Compile text templates into standalone sh scripts."""
    setup_logging(verbose)


@typer_app.command()
def init() -> None:
    """Create the .moho directory in the current project."""
    init_command()


@typer_app.command()
def create(
    name: str = typer.Argument(..., help="Name for the template."),
    default_path: Optional[str] = typer.Argument(
        None,
        help=(
            "Output path for generated files, ending in name.ext. "
            "With /path/to/name.rs and --name hi the file is /path/to/hi.rs. "
            "Defaults to ./NAME."
        ),
    ),
    source: Optional[Path] = typer.Option(
        None,
        "-s",
        "--source",
        exists=True,
        dir_okay=False,
        help="File to seed the editor with.",
    ),
    retry: bool = typer.Option(
        True, "--retry/--no-retry", help="Re-open the editor on parse errors."
    ),
) -> None:
    """Create a template script at .moho/NAME.mh."""
    create_command(name, default_path, source, retry=retry)


@typer_app.command()
def edit(
    name: str = typer.Argument(..., help="Template to edit."),
    retry: bool = typer.Option(
        True, "--retry/--no-retry", help="Re-open the editor on parse errors."
    ),
) -> None:
    """Edit an existing template."""
    edit_command(name, retry=retry)


@typer_app.command("list")
def list_() -> None:
    """List templates."""
    list_command()


@typer_app.command()
def delete(name: str = typer.Argument(..., help="Template to delete.")) -> None:
    """Delete a template."""
    delete_command(name)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
