"""Output path derivation for generated scripts.

A default path like ``./folder/name.rs`` keeps its directory and
extension; only the basename is swapped for the file name placeholder.
"""

from __future__ import annotations

import os
import posixpath
from typing import Optional, Union

PathArg = Union[str, "os.PathLike[str]"]

HELP_PLACEHOLDER = "NAME"
SHELL_PLACEHOLDER = "${name}"


def _split(default_path: PathArg) -> tuple[str, str]:
    """Return (parent, extension) of a default path."""
    p = os.fspath(default_path)
    if len(p) > 1:
        p = p.rstrip("/")
    parent, basename = posixpath.split(p)
    _, ext = posixpath.splitext(basename)
    return parent, ext


def substitute_name(default_path: Optional[PathArg], placeholder: str) -> str:
    """Swap the basename of ``default_path`` for ``placeholder``.

    Examples:
        >>> substitute_name("./folder/name.rs", "NAME")
        './folder/NAME.rs'
        >>> substitute_name(None, "${name}")
        './${name}'
    """
    if default_path is None:
        return f"./{placeholder}"

    parent, ext = _split(default_path)
    return posixpath.join(parent, placeholder + ext)


def help_path(default_path: Optional[PathArg]) -> str:
    return substitute_name(default_path, HELP_PLACEHOLDER)


def output_path(default_path: Optional[PathArg]) -> str:
    return substitute_name(default_path, SHELL_PLACEHOLDER)


def output_dir(default_path: Optional[PathArg]) -> Optional[str]:
    """Directory that must exist before writing, or None if there is none."""
    if default_path is None:
        return None
    parent, _ = _split(default_path)
    return parent or None
