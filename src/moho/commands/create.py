"""Create command - write a new template script."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from moho.lib.errors import handle_error
from moho.lib.prompt import (
    Editor,
    Prompter,
    TyperEditor,
    TyperPrompter,
    collect_defaults_and_descriptions,
)

from .utils import console, edit_until_valid, get_compiler, get_config, get_store


def create_command(
    name: str,
    default_path: Optional[str] = None,
    source: Optional[Path] = None,
    retry: bool = True,
    editor: Optional[Editor] = None,
    prompter: Optional[Prompter] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """Create template NAME from text written in the editor."""
    try:
        config = get_config(cwd)
        store = get_store(cwd)
        store.path_for(name)

        seed = source.read_text() if source is not None else ""

        template = edit_until_valid(editor or TyperEditor(config.editor), seed, retry)
        collect_defaults_and_descriptions(template, prompter or TyperPrompter())

        script = get_compiler(config).compile(name, template, default_path)
        path = store.save(name, script)
    except Exception as e:
        handle_error(e)

    console.print(f"[green]Created template[/green] {name} [dim]({path})[/dim]")
    return path
