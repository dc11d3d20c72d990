"""Template parser - scans DSL source into a Template IR.

The scan is a single left-to-right pass with one character of lookback.
Literal characters are emitted one step late so that the two-character
``{{`` and ``}}`` tokens can be recognised before anything is written.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from moho.ast.escape import needs_escape
from moho.ast.ident import validate_ident
from moho.ast.spec import (
    NAME_VARIABLE,
    FilteredSet,
    FilteredVariable,
    Template,
    Variable,
    VariableSet,
)
from moho.exceptions import (
    ConflictingVariableError,
    EmptyFilterChainError,
    NestedVariableError,
    UnfinishedVariableError,
)

log = logging.getLogger(__name__)


def parse_template(source: str) -> Template:
    """Parse template source text.

    Args:
        source: Template text with ``{{ var }}`` / ``{{ var | f }}`` placeholders.

    Returns:
        The parsed Template.

    Raises:
        NestedVariableError: ``{{`` seen inside an open placeholder.
        UnfinishedVariableError: source ended inside a placeholder.
        InvalidIdentifierError: a variable or filter name is not an identifier.
        ConflictingVariableError: a filtered placeholder's derived name equals
            a variable or another filter chain.
    """
    generated: List[str] = []
    variables = VariableSet()
    filtered = FilteredSet()

    last_char: Optional[str] = None
    start: Optional[int] = None

    def emit(c: str) -> None:
        if needs_escape(c):
            generated.append("\\")
        generated.append(c)

    for i, c in enumerate(source):
        # starting variable
        if last_char == "{" and c == "{":
            if start is not None:
                raise NestedVariableError()
            last_char = None
            start = i + 1
            continue

        # ending variable
        if last_char == "}" and c == "}" and start is not None:
            body = source[start : i - 1].strip()
            start = None

            if "|" in body:
                fv = parse_filtered_variable(body)
                generated.append("${" + fv.name + "}")
                variables.add(fv.variable)
                filtered.add(fv)
            else:
                validate_ident(body)
                generated.append("${" + body + "}")
                variables.add(body)

            last_char = None
            continue

        if start is None and last_char is not None:
            emit(last_char)

        last_char = c

    if start is not None:
        raise UnfinishedVariableError()

    if last_char is not None:
        emit(last_char)

    check_derived_names(variables, filtered.to_list())

    # insert `name` variable if not exists
    is_name_used = NAME_VARIABLE in variables
    var_list = variables.to_list()
    if not is_name_used:
        var_list.append(Variable(NAME_VARIABLE))

    log.debug(
        "Parsed template: %d variables, %d filtered",
        len(var_list),
        len(filtered.to_list()),
    )

    return Template(
        original=source,
        generated="".join(generated),
        variables=var_list,
        filtered=filtered.to_list(),
        is_name_used=is_name_used,
    )


def parse_filtered_variable(body: str) -> FilteredVariable:
    """Parse ``var | f1 | f2`` into a FilteredVariable named ``var_f1_f2``."""
    parts = [p.strip() for p in body.split("|")]
    if not parts:
        raise EmptyFilterChainError(body)

    for part in parts:
        validate_ident(part)

    return FilteredVariable(
        variable=parts[0],
        filters=parts[1:],
        name="_".join(parts),
    )


def check_derived_names(
    variables: VariableSet, filtered: List[FilteredVariable]
) -> None:
    """Each derived name becomes a shell variable, so it must not shadow another."""
    seen = {}
    for fv in filtered:
        if fv.name in variables:
            raise ConflictingVariableError(fv.name, f"variable {fv.name}")
        other = seen.setdefault(fv.name, fv)
        if other is not fv:
            chain = " | ".join([other.variable, *other.filters])
            raise ConflictingVariableError(fv.name, "{{ " + chain + " }}")
