"""Error reporting for the moho CLI.

Known failures (``MohoError``) print a single ``Error: ...`` line on stderr
and exit with the error's own code. Anything else is reported as unexpected;
its traceback is only logged at debug level (``MOHO_DEBUG=1``).
"""

import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from moho.exceptions import MohoError

log = logging.getLogger(__name__)

err_console = Console(stderr=True)


def report(error: MohoError) -> None:
    """Print a known error without exiting."""
    err_console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)


def handle_error(error: Exception) -> NoReturn:
    """Report an error raised by a command and exit.

    Click's own control flow (``Abort`` on Ctrl-C, ``Exit``) passes through
    untouched.
    """
    if isinstance(error, (typer.Abort, typer.Exit)):
        raise error

    if isinstance(error, MohoError):
        report(error)
        raise typer.Exit(code=error.exit_code) from error

    log.debug("Unexpected error", exc_info=error)
    err_console.print(
        f"[red]Unexpected error:[/red] {escape(str(error))}", soft_wrap=True
    )
    raise typer.Exit(code=1) from error
