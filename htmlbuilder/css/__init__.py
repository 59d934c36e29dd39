"""CSS utilities subpackage: property declarations, url() and image-set()."""

from htmlbuilder.css.builder import CssBuilder, ImageSetEntry, build_image_set
from htmlbuilder.css.escape import escape_string

__all__ = [
    "CssBuilder",
    "ImageSetEntry",
    "build_image_set",
    "escape_string",
]
