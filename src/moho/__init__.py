"""moho - compile text templates into standalone sh scripts.

A template is plain text with ``{{ variable }}`` and
``{{ variable | filter }}`` placeholders. The compiled script takes each
variable as a ``--flag``, applies defaults and filters, and writes the
result to a file (or stdout when piped).
"""

from moho._version import __version__
from moho.ast import Template, Variable, FilteredVariable, parse_template
from moho.compiler import Compiler, FilterLibrary, generate_script
from moho.exceptions import MohoError, ParseError

__all__ = [
    "__version__",
    "Compiler",
    "FilterLibrary",
    "FilteredVariable",
    "MohoError",
    "ParseError",
    "Template",
    "Variable",
    "generate_script",
    "parse_template",
]
