"""Template IR spec - what the parser produces and the compiler consumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


NAME_VARIABLE = "name"


@dataclass
class Variable:
    """A placeholder name declared by the template.

    ``default`` and ``description`` are stored already shell-escaped so the
    compiler can splice them straight into double-quoted strings.
    """

    name: str
    default: Optional[str] = None
    description: Optional[str] = None


@dataclass
class FilteredVariable:
    """A placeholder piped through filters, e.g. ``{{ hey | upper }}``."""

    variable: str  # underlying Variable name
    filters: List[str]  # in written order, first filter is applied first
    name: str  # derived identifier, e.g. "hey_upper"

    @property
    def key(self) -> tuple[str, tuple[str, ...]]:
        return (self.variable, tuple(self.filters))


class VariableSet:
    """Ordered variables with a parallel membership index."""

    def __init__(self) -> None:
        self._items: List[Variable] = []
        self._names: set[str] = set()

    def add(self, name: str) -> bool:
        """Register ``name`` unless it is already present. Returns True if added."""
        if name in self._names:
            return False
        self._names.add(name)
        self._items.append(Variable(name))
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def to_list(self) -> List[Variable]:
        return list(self._items)


class FilteredSet:
    """Ordered filtered variables, unique by (variable, filters)."""

    def __init__(self) -> None:
        self._items: List[FilteredVariable] = []
        self._keys: set[tuple[str, tuple[str, ...]]] = set()

    def add(self, fv: FilteredVariable) -> bool:
        if fv.key in self._keys:
            return False
        self._keys.add(fv.key)
        self._items.append(fv)
        return True

    def to_list(self) -> List[FilteredVariable]:
        return list(self._items)


@dataclass
class Template:
    """Parsed template.

    Attributes:
        original: Verbatim source text, re-emitted by ``get-template``.
        generated: Escaped skeleton with ``${...}`` splices.
        variables: First-seen order; ``name`` is appended last when implicit.
        filtered: Filter chains in first-seen order.
        is_name_used: True if the source references ``{{ name }}`` itself.
    """

    original: str
    generated: str
    variables: List[Variable] = field(default_factory=list)
    filtered: List[FilteredVariable] = field(default_factory=list)
    is_name_used: bool = False

    @property
    def variable_names(self) -> List[str]:
        return [v.name for v in self.variables]

    @property
    def used_filters(self) -> List[str]:
        """Every filter referenced, deduplicated, in first-use order."""
        seen: List[str] = []
        for fv in self.filtered:
            for f in fv.filters:
                if f not in seen:
                    seen.append(f)
        return seen
