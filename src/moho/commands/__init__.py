"""CLI commands"""

from .create import create_command
from .delete import delete_command
from .edit import edit_command
from .init import init_command
from .list import list_command

__all__ = [
    "create_command",
    "delete_command",
    "edit_command",
    "init_command",
    "list_command",
]
