"""Escaping for text spliced into double-quoted sh strings."""

from __future__ import annotations

# Characters that keep a special meaning inside "..." in POSIX sh
SPECIAL = frozenset('"$`\\')


def needs_escape(c: str) -> bool:
    return c in SPECIAL


def shell_escape(text: str) -> str:
    """Prefix every ``"``, ``$``, backtick and backslash with a backslash.

    Example:
        >>> shell_escape('say "$hi"')
        'say \\\\"\\\\$hi\\\\"'
    """
    return "".join("\\" + c if c in SPECIAL else c for c in text)


def shell_unescape(text: str) -> str:
    """Inverse of :func:`shell_escape`."""
    out: list[str] = []
    chars = iter(text)
    for c in chars:
        if c == "\\":
            nxt = next(chars, None)
            if nxt is None:
                out.append(c)
            elif nxt in SPECIAL:
                out.append(nxt)
            else:
                out.append(c)
                out.append(nxt)
        else:
            out.append(c)
    return "".join(out)
