"""Template DSL - identifiers, escaping, IR and parser."""

from moho.ast.escape import shell_escape, shell_unescape
from moho.ast.ident import is_valid_ident, validate_ident
from moho.ast.parser import parse_template
from moho.ast.spec import NAME_VARIABLE, FilteredVariable, Template, Variable

__all__ = [
    "NAME_VARIABLE",
    "FilteredVariable",
    "Template",
    "Variable",
    "is_valid_ident",
    "parse_template",
    "shell_escape",
    "shell_unescape",
    "validate_ident",
]
