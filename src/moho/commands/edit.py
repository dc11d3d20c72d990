"""Edit command - re-open an existing template for editing."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from moho.lib.errors import handle_error
from moho.lib.prompt import (
    Editor,
    Prompter,
    TyperEditor,
    TyperPrompter,
    ask_default_path,
    collect_defaults_and_descriptions,
)

from .utils import console, edit_until_valid, get_compiler, get_config, get_store


def edit_command(
    name: str,
    retry: bool = True,
    editor: Optional[Editor] = None,
    prompter: Optional[Prompter] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """Edit template NAME, keeping its previous defaults as suggestions."""
    try:
        config = get_config(cwd)
        store = get_store(cwd)

        old_source = store.read_template(name)
        previous = store.read_vars(name)

        template = edit_until_valid(
            editor or TyperEditor(config.editor), old_source, retry
        )

        prompter = prompter or TyperPrompter()
        default_path = ask_default_path(prompter, previous.default_path)
        collect_defaults_and_descriptions(template, prompter, previous)

        script = get_compiler(config).compile(name, template, default_path)
        path = store.save(name, script)
    except Exception as e:
        handle_error(e)

    console.print(f"[green]Updated template[/green] {name} [dim]({path})[/dim]")
    return path
