"""Moho compiler - transforms parsed templates to sh scripts."""

from moho.compiler.compiler import Compiler, generate_script
from moho.compiler.filters import BUILTIN_FILTERS, FilterLibrary
from moho.compiler.vars import TemplateVars, decode_vars, encode_vars

__all__ = [
    "BUILTIN_FILTERS",
    "Compiler",
    "FilterLibrary",
    "TemplateVars",
    "decode_vars",
    "encode_vars",
    "generate_script",
]
