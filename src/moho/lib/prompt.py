"""Interactive collection of template metadata.

Prompting and editing are passed in as capabilities so that the
collection logic can run against scripted answers in tests.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import typer

from moho.ast.escape import shell_escape
from moho.ast.spec import NAME_VARIABLE, Template
from moho.compiler.vars import TemplateVars
from moho.exceptions import EditAborted

log = logging.getLogger(__name__)

# Answer that removes a previously saved value.
CLEAR_ANSWER = "-"


class Prompter(Protocol):
    def ask(self, label: str, default: Optional[str] = None) -> str:
        """Ask a question, returning the trimmed answer ("" for none)."""
        ...


class Editor(Protocol):
    def edit(self, seed: str) -> str:
        """Open the seed text for editing and return the result."""
        ...


class TyperPrompter:
    """Prompts on the terminal, offering any previous value as the default.

    Pressing Enter keeps the previous value; answering '-' clears it.
    """

    def ask(self, label: str, default: Optional[str] = None) -> str:
        if default is not None:
            label = f"{label} ('{CLEAR_ANSWER}' to clear)"
        answer = typer.prompt(
            label,
            default=default if default is not None else "",
            show_default=default is not None,
            prompt_suffix=": ",
        )
        return str(answer).strip()


class TyperEditor:
    """Opens $EDITOR (or a configured command) through click."""

    def __init__(self, editor: Optional[str] = None, extension: str = ".txt"):
        self.editor = editor
        self.extension = extension

    def edit(self, seed: str) -> str:
        # None when the editor exits without saving.
        result = typer.edit(
            seed, editor=self.editor, extension=self.extension, require_save=True
        )
        if result is None:
            raise EditAborted()
        return result


def ask_default_path(
    prompter: Prompter, previous: Optional[str] = None
) -> Optional[str]:
    answer = prompter.ask("default path (leave empty for no default path)", previous)
    return _value(answer)


def _value(answer: str) -> Optional[str]:
    if not answer or answer == CLEAR_ANSWER:
        return None
    return answer


def collect_defaults_and_descriptions(
    template: Template,
    prompter: Prompter,
    previous: Optional[TemplateVars] = None,
) -> Template:
    """Fill in defaults and descriptions for every variable except ``name``.

    Answers are shell-escaped before being stored on the template.
    ``previous`` seeds each question with the value from an earlier version;
    answering ``CLEAR_ANSWER`` drops it.
    """
    defaults = previous.defaults if previous else {}
    descriptions = previous.descriptions if previous else {}

    for v in template.variables:
        if v.name == NAME_VARIABLE:
            continue

        default = prompter.ask(
            f"default value for {v.name} (leave empty for no default)",
            defaults.get(v.name),
        )
        default = _value(default)
        if default is not None:
            v.default = shell_escape(default)

        description = prompter.ask(
            f"description value for {v.name} (leave empty for no description)",
            descriptions.get(v.name),
        )
        description = _value(description)
        if description is not None:
            v.description = shell_escape(description)

    log.debug("Collected metadata for %s", template.variable_names)
    return template
