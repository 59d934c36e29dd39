"""
Builder configuration for htmlbuilder HTML output.

Centralizes the tables and defaults the HTML builder consults so callers can
tune them without touching core logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# https://www.w3.org/TR/2011/WD-html5-20110525/syntax.html#attributes-0
INVALID_ATTR_NAME_CHARS: Tuple[str, ...] = (
    " ",
    "\t",
    "\n",
    "\x0c",  # form feed
    "\r",
    "\x00",
    '"',
    "'",
    ">",
    "/",
    "=",
    # Technically allowed but breaks some parsers
    "<",
)

PRELOAD_TYPES: Tuple[str, ...] = (
    "audio",
    "document",
    "embed",
    "fetch",
    "font",
    "image",
    "object",
    "script",
    "style",
    "track",
    "video",
    "worker",
)

# Attributes that contain or reference an element ID
ID_ATTRIBUTES: Tuple[str, ...] = ("id", "for", "aria-labelledby", "aria-describedby")


@dataclass(frozen=True)
class BuilderConfig:
    invalid_attr_name_chars: Tuple[str, ...] = INVALID_ATTR_NAME_CHARS
    preload_types: Tuple[str, ...] = PRELOAD_TYPES
    id_attributes: Tuple[str, ...] = ID_ATTRIBUTES

    # Default paragraph wrapper for wrap_paragraphs
    paragraph_tag: str = "<p>"

    # Prefix of the temporary file written for MIME inference
    mime_tempfile_prefix: str = "mime"

    def attr_name_is_valid(self, name: str) -> bool:
        return not any(ch in name for ch in self.invalid_attr_name_chars)

    def is_preload_type(self, preload_type: str) -> bool:
        return preload_type in self.preload_types
