"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from moho.ast.parser import parse_template
from moho.ast.spec import Template
from moho.compiler import Compiler, FilterLibrary
from moho.exceptions import ParseError
from moho.lib.config import MohoConfig, get_config_path, get_moho_dir, load_config
from moho.lib.errors import err_console, report
from moho.lib.prompt import Editor
from moho.lib.store import TemplateStore

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the moho CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows saved/deleted templates
    - Debug (MOHO_DEBUG=1): DEBUG level - shows everything
    """
    if os.environ.get("MOHO_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=bool(os.environ.get("MOHO_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("moho")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def get_store(cwd: Optional[Path] = None) -> TemplateStore:
    return TemplateStore(get_moho_dir(cwd))


def get_config(cwd: Optional[Path] = None) -> MohoConfig:
    return load_config(get_config_path(cwd))


def get_compiler(config: MohoConfig) -> Compiler:
    return Compiler(FilterLibrary(config.filters))


def edit_until_valid(editor: Editor, seed: str, retry: bool = True) -> Template:
    """Open the editor until the text parses.

    On a parse error the user is asked whether to fix the text; declining
    (or ``retry=False``) re-raises the error.
    """
    text = seed
    while True:
        text = editor.edit(text)
        try:
            return parse_template(text)
        except ParseError as e:
            if not retry:
                raise
            report(e)
            if not typer.confirm("Edit the template again?", default=True):
                raise
