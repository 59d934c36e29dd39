"""
Escaping primitives for HTML documents.

- escape / unescape: HTML5 entity escaping suitable for text and
  double- or single-quoted attribute values
- escape_json: a JSON literal made safe for an HTML attribute value
- escape_js_value: a JSON literal made safe for an inline <script>
"""

from __future__ import annotations

import html
import json
import re
from typing import Any

from ..exceptions import JsonEncodingError

_ENTITIES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)

# Code points not allowed in an HTML5 document: C0/C1 controls other than
# whitespace, surrogates and the Unicode noncharacters.
_DISALLOWED = re.compile(
    "[\x00-\x08\x0b\x0e-\x1f\x7f-\x9f\ud800-\udfff\ufdd0-\ufdef"
    + "".join(chr(plane << 16 | 0xFFFE) + chr(plane << 16 | 0xFFFF) for plane in range(17))
    + "]"
)

REPLACEMENT_CHARACTER = "\ufffd"


def escape(value: str) -> str:
    """Return the safe representation of ``value`` for use in an HTML document.

    Example:
        >>> escape("<b>Tom & Jerry</b>")
        '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    """
    return _DISALLOWED.sub(REPLACEMENT_CHARACTER, value).translate(_ENTITIES)


def unescape(value: str) -> str:
    """Return the raw representation of an escaped HTML string."""
    return html.unescape(value)


def _to_json(value: Any, pretty: bool) -> str:
    try:
        if pretty:
            return json.dumps(value, ensure_ascii=False, allow_nan=False, indent=4)
        return json.dumps(
            value, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        )
    except (TypeError, ValueError) as e:
        raise JsonEncodingError(f"Failed converting JSON: {e}") from e


def escape_json(value: Any, *, pretty: bool = False) -> str:
    """Encode ``value`` as JSON and escape it for an HTML attribute value.

    Example:
        >>> escape_json(["a", "b"])
        '[&quot;a&quot;,&quot;b&quot;]'
    """
    return escape(_to_json(value, pretty))


def escape_js_value(value: Any, *, pretty: bool = False) -> str:
    """Encode ``value`` as a JavaScript literal for an inline script.

    Only angle brackets are replaced, so the literal cannot close the
    surrounding <script> element while staying valid JavaScript.
    """
    return _to_json(value, pretty).replace("<", "&lt;").replace(">", "&gt;")


__all__ = ["escape", "unescape", "escape_json", "escape_js_value"]
