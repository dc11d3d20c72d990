"""Compiler - turns a parsed Template into a standalone POSIX sh script."""

from __future__ import annotations

import logging
from typing import List, Optional

from moho.ast.escape import shell_escape
from moho.ast.spec import NAME_VARIABLE, Template
from moho.compiler.filters import FilterLibrary
from moho.compiler.paths import PathArg, help_path, output_dir, output_path
from moho.compiler.vars import encode_vars

log = logging.getLogger(__name__)


PREAMBLE = "#!/bin/sh\nset -e\n\n"

GUARD_OPEN = """if [ ! "$1" = "get-template" ] && [ ! "$1" = "get-vars" ]; then

# normal template-outputing block
"""

GUARD_CLOSE = """
# end normal block
fi
"""

HELP_FLAG = "-h, --help"
NAME_FLAG = "--name NAME"


class Compiler:
    """Compiles Template IR into sh script text.

    Every section is rendered by its own method and the results are
    concatenated in order; each returns complete lines.
    """

    def __init__(self, filters: Optional[FilterLibrary] = None):
        self.filters = filters or FilterLibrary()

    def compile(
        self,
        template_name: str,
        template: Template,
        default_path: Optional[PathArg] = None,
    ) -> str:
        """Generate the script for a template.

        Args:
            template_name: Shown in the generated help text.
            template: Parsed (and possibly annotated) template.
            default_path: Where the output goes; its basename is replaced by
                the ``--name`` value. Defaults to ``./<name>``.

        Returns:
            Complete script text.
        """
        parts = [
            PREAMBLE,
            GUARD_OPEN,
            self._render_declarations(template),
            self._render_arguments(template_name, template, default_path),
            self._render_defaults(template),
            self._render_checks(template),
            self._render_filters(template),
            self._render_output(template, default_path),
            GUARD_CLOSE,
            self._render_editing(template, default_path),
        ]
        script = "".join(parts)
        log.debug("Compiled template %s (%d bytes)", template_name, len(script))
        return script

    def _render_declarations(self, t: Template) -> str:
        lines = ["\n# variable declarations\n"]
        for v in t.variables:
            lines.append(f"{v.name}=''\n")
        return "".join(lines)

    def _render_arguments(
        self, template_name: str, t: Template, default_path: Optional[PathArg]
    ) -> str:
        lines = [
            "\n# parse arguments\n",
            "while test $# -gt 0; do\n",
            '  case "$1" in\n',
        ]
        for v in t.variables:
            lines.append(
                f"    --{v.name})\n"
                "      shift\n"
                f'      {v.name}="$1"\n'
                "      shift\n"
                "      ;;\n"
            )
        lines.append(self._render_help(template_name, t, default_path))
        lines.append("  esac\ndone\n")
        return "".join(lines)

    def _render_help(
        self, template_name: str, t: Template, default_path: Optional[PathArg]
    ) -> str:
        # +3 for the two dashes and the space in "--var VAR"
        widest = max((len(v.name) * 2 + 3 for v in t.variables), default=0)
        column = max(widest, len(HELP_FLAG), len(NAME_FLAG)) + 5

        def pad(used: int) -> str:
            return " " * (column - used)

        lines = [
            "    *)\n",
            f'      echo "{shell_escape(template_name)}:"\n',
            f'      echo "generates file at {help_path(default_path)}"\n',
            '      echo ""\n',
            '      echo "options:"\n',
            f'      echo "{HELP_FLAG}{pad(len(HELP_FLAG))}show brief help"\n',
            f'      echo "{NAME_FLAG}{pad(len(NAME_FLAG))}filename (without extension)"\n',
        ]
        for v in t.variables:
            if v.name == NAME_VARIABLE:
                continue
            flag = f"--{v.name} {v.name.upper()}"
            if v.description is not None:
                flag += pad(len(flag)) + v.description
            lines.append(f'      echo "{flag}"\n')
        lines.append("      exit 0\n      ;;\n")
        return "".join(lines)

    def _render_defaults(self, t: Template) -> str:
        defaulted = [v for v in t.variables if v.default is not None]
        if not defaulted:
            return ""

        lines = ["\n# set variable defaults\n"]
        for v in defaulted:
            lines.append(f'{v.name}=${{{v.name}:-"{v.default}"}}\n')
        return "".join(lines)

    def _render_checks(self, t: Template) -> str:
        lines = ["\n# check that all variables have values\n"]
        for v in t.variables:
            if v.name == NAME_VARIABLE:
                continue
            lines.append(self._render_check(v.name))

        # an implicit name is only needed when writing to a file
        condition = "" if t.is_name_used else " && [ -t 1 ]"
        lines.append(self._render_check(NAME_VARIABLE, condition))
        return "".join(lines)

    @staticmethod
    def _render_check(name: str, condition: str = "") -> str:
        return (
            f'if [ -z "${name}" ]{condition}; then\n'
            f'  echo "Error: No value provided for {name}"\n'
            "  exit 1\n"
            "fi\n"
        )

    def _render_filters(self, t: Template) -> str:
        if not t.filtered:
            return ""

        lines = ["\n# filters\n", self.filters.render(t.used_filters)]
        lines.append("\n# filtered variables\n")
        for fv in t.filtered:
            # first filter innermost
            expr = f'"${fv.variable}"'
            for f in fv.filters:
                expr = f"$({f} {expr})"
            lines.append(f"{fv.name}={expr}\n")
        return "".join(lines)

    def _render_output(self, t: Template, default_path: Optional[PathArg]) -> str:
        path = output_path(default_path)
        directory = output_dir(default_path)
        mkdir = f'  mkdir -p "{directory}"\n' if directory else ""

        lines: List[str] = [
            f'\nout="{t.generated}"\n',
            "if [ -t 1 ] ; then\n",
            mkdir,
            "\n",
            "  # check if file exists\n",
            f'  if [ -f "{path}" ] ; then\n',
            '     read -r -p "File already exists, overwrite? [y/N] " response\n',
            '     case "$response" in\n',
            "       [yY][eE][sS]|[yY])\n",
            "         ;;\n",
            "       *)\n",
            '         echo "Stopping"\n',
            "         exit 1\n",
            "         ;;\n",
            "     esac\n",
            "  fi\n",
            "\n",
            f'  echo "$out" > "{path}"\n',
            f'  echo "created file at {path}";\n',
            "else\n",
            '  echo "$out"\n',
            "fi\n",
        ]
        return "".join(lines)

    def _render_editing(self, t: Template, default_path: Optional[PathArg]) -> str:
        payload = encode_vars(t, default_path)
        return (
            "\n# template editing section\n"
            "\n"
            'if [ "$1" = "get-template" ]; then\n'
            f'echo "{shell_escape(t.original)}"\n'
            "fi\n"
            "\n"
            'if [ "$1" = "get-vars" ]; then\n'
            f'echo "{shell_escape(payload)}"\n'
            "fi\n"
        )


def generate_script(
    template_name: str,
    template: Template,
    default_path: Optional[PathArg] = None,
    filters: Optional[FilterLibrary] = None,
) -> str:
    """Compile ``template`` with a one-off Compiler."""
    return Compiler(filters).compile(template_name, template, default_path)
