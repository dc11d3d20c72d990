"""Round-trip payload for the ``get-vars`` subcommand.

A generated script echoes a small TOML document describing its default
path and per-variable defaults and descriptions, e.g.::

    default_path="./folder/name.rs"

    [defaults]
    hi="meooow"

    [descriptions]
    hi="this is a description"

Values are written as TOML basic strings. Apart from ``\\"`` every escape
uses the ``\\uXXXX`` form, which ``echo`` in dash and bash alike passes
through untouched.
"""

from __future__ import annotations

import os
from typing import Dict, List, Optional, Union

import msgspec

from moho.ast.escape import shell_unescape
from moho.ast.spec import Template
from moho.exceptions import InvalidVarsError


class TemplateVars(msgspec.Struct):
    """Default path, defaults and descriptions read back from a script.

    All values are raw (not shell-escaped).
    """

    default_path: Optional[str] = None
    defaults: Dict[str, str] = msgspec.field(default_factory=dict)
    descriptions: Dict[str, str] = msgspec.field(default_factory=dict)


def toml_string(value: str) -> str:
    """Quote ``value`` as a TOML basic string."""
    out = ['"']
    for c in value:
        if c == '"':
            out.append('\\"')
        elif c == "\\" or ord(c) < 0x20 or ord(c) == 0x7F:
            out.append(f"\\u{ord(c):04X}")
        else:
            out.append(c)
    out.append('"')
    return "".join(out)


def encode_vars(
    template: Template, default_path: Optional[Union[str, "os.PathLike[str]"]] = None
) -> str:
    """Build the get-vars payload for a template (before shell escaping)."""
    lines: List[str] = ["\n"]

    if default_path is not None:
        lines.append(f"default_path={toml_string(os.fspath(default_path))}\n")

    lines.append("\n[defaults]\n")
    for v in template.variables:
        if v.default is not None:
            lines.append(f"{v.name}={toml_string(shell_unescape(v.default))}\n")

    lines.append("\n[descriptions]\n")
    for v in template.variables:
        if v.description is not None:
            lines.append(f"{v.name}={toml_string(shell_unescape(v.description))}\n")

    lines.append("\n")
    return "".join(lines)


def decode_vars(payload: Union[str, bytes]) -> TemplateVars:
    """Parse a get-vars payload.

    Raises:
        InvalidVarsError: if the payload isn't valid TOML of the right shape.
    """
    try:
        return msgspec.toml.decode(payload, type=TemplateVars)
    except msgspec.MsgspecError as e:
        raise InvalidVarsError(str(e)) from e
