"""Identifier rules for variable and filter names."""

from __future__ import annotations

import string

from moho.exceptions import InvalidIdentifierError

_LEADING = frozenset(string.ascii_letters + "_")
_TRAILING = frozenset(string.ascii_letters + string.digits + "_")


def validate_ident(token: str) -> None:
    """Check that ``token`` can be used as a shell variable name.

    Rules, in order:
    1. ``""`` and ``"_"`` are rejected.
    2. The first character must be an ASCII letter or ``_``.
    3. Every other character must be ASCII alphanumeric or ``_``.

    Raises:
        InvalidIdentifierError: naming the token and the rule it broke.
    """
    if token == "" or token == "_":
        raise InvalidIdentifierError(
            token, "identifiers can't be empty or a single underscore"
        )

    if token[0] not in _LEADING:
        raise InvalidIdentifierError(
            token, f"identifier {token} has to start with a letter or an underscore"
        )

    if not all(c in _TRAILING for c in token):
        raise InvalidIdentifierError(
            token, f"identifier {token} contains invalid characters"
        )


def is_valid_ident(token: str) -> bool:
    try:
        validate_ident(token)
    except InvalidIdentifierError:
        return False
    return True
