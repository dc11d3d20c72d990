"""List command - list all templates"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.table import Table

from moho.lib.errors import handle_error

from .utils import console, get_store


def list_command(cwd: Optional[Path] = None) -> None:
    """List all templates."""
    try:
        store = get_store(cwd)
        names = store.names()
    except Exception as e:
        handle_error(e)

    if not names:
        console.print("[yellow]No templates found[/yellow]")
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="dim")

    for name in names:
        table.add_row(name, str(store.path_for(name)))

    console.print(table)
