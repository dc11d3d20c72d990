"""Filter library - shell functions used by ``{{ var | filter }}`` chains."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

log = logging.getLogger(__name__)


BUILTIN_FILTERS: Dict[str, str] = {
    "upper": """echo $(echo "$1" | tr '[:lower:]' '[:upper:]')""",
    "lower": """echo $(echo "$1" | tr '[:upper:]' '[:lower:]')""",
    "capitalize": """echo $(echo "$1" | awk '{ print toupper(substr($0, 1, 1)) substr($0, 2) }')""",
    "snake": r"""echo $(echo "$1" | sed -e 's/\([a-z0-9]\)\([A-Z]\)/\1_\2/g' -e 's/[ -]/_/g' | tr '[:upper:]' '[:lower:]')""",
    "kebab": r"""echo $(echo "$1" | sed -e 's/\([a-z0-9]\)\([A-Z]\)/\1-\2/g' -e 's/[ _]/-/g' | tr '[:upper:]' '[:lower:]')""",
}


class FilterLibrary:
    """Known filter bodies, built-ins plus any project-defined ones.

    Project filters override built-ins with the same name. Names that are
    not known still compile into calls; they just get no definition.
    """

    def __init__(self, extra: Optional[Mapping[str, str]] = None):
        self._bodies: Dict[str, str] = dict(BUILTIN_FILTERS)
        if extra:
            self._bodies.update(extra)

    def __contains__(self, name: object) -> bool:
        return name in self._bodies

    def names(self) -> List[str]:
        return sorted(self._bodies)

    def render_function(self, name: str) -> str:
        """Render one filter as a sh function definition."""
        body = self._bodies[name].strip("\n")
        indented = "\n".join(
            f"  {line}" if line.strip() else "" for line in body.split("\n")
        )
        return f"{name}() {{\n{indented}\n}}\n"

    def render(self, names: Iterable[str]) -> str:
        """Render definitions for ``names``, each once, skipping unknown ones."""
        parts: List[str] = []
        seen: set[str] = set()
        for name in names:
            if name in seen:
                continue
            seen.add(name)
            if name not in self._bodies:
                log.debug("No definition for filter %r, emitting call only", name)
                continue
            parts.append(self.render_function(name))
        return "".join(parts)
