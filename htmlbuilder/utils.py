"""Small shared helpers."""

from __future__ import annotations

from numbers import Real


def format_number(value: Real) -> str:
    """Return the shortest string form of a number.

    Integral values drop their fractional part so that a density of ``2.0``
    renders the same as ``2``.

    Example:
        >>> format_number(2.0), format_number(1.5)
        ('2', '1.5')
    """
    if isinstance(value, int):
        return str(value)
    f = float(value)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def stringify(value: object) -> str:
    """Convert a scalar or renderable attribute value to text.

    ``True`` becomes ``"1"`` and ``False``/``None`` the empty string, so boolean
    values kept by custom attributes stay machine readable.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, Real):
        return format_number(value)
    return str(value)


__all__ = ["format_number", "stringify"]
