"""Delete command - remove a template"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from moho.lib.errors import handle_error

from .utils import console, get_store


def delete_command(name: str, cwd: Optional[Path] = None) -> None:
    """Delete template NAME."""
    try:
        get_store(cwd).delete(name)
    except Exception as e:
        handle_error(e)

    console.print(f"Deleted template {name}")
