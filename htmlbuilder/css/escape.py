"""Escaping primitives for CSS statements."""

from __future__ import annotations


def escape_string(value: str) -> str:
    """Return ``value`` as a single-quoted CSS string literal.

    Backslashes and apostrophes are backslash-escaped; nothing else is touched.
    """
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


__all__ = ["escape_string"]
