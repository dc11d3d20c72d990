"""Init command for moho."""

from pathlib import Path
from typing import Optional

from moho.lib.errors import handle_error
from moho.lib.init import scaffold

from .utils import console


def init_command(cwd: Optional[Path] = None) -> None:
    """Initialize moho in the current directory."""
    try:
        created = scaffold(cwd)
    except Exception as e:
        handle_error(e)

    if created:
        console.print("Initialized moho in current directory")
    else:
        console.print("[yellow]moho is already initialized[/yellow]")
