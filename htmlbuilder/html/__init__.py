"""
HTML utilities subpackage.

Contains:
- escape: HTML/JSON/JS escaping primitives
- builder: HtmlBuilder (attributes, resource tags, text wrapping, data URIs)
- mime: MimeTypeGuesser seam and the default content-sniffing guesser
- options: BuilderConfig
"""

from htmlbuilder.html.builder import HtmlBuilder, add_classes, build_attrs, build_classes
from htmlbuilder.html.escape import escape, escape_js_value, escape_json, unescape
from htmlbuilder.html.mime import MimeTypeGuesser, SignatureMimeTypeGuesser, infer_mime_type
from htmlbuilder.html.options import BuilderConfig

__all__ = [
    # builder
    "HtmlBuilder",
    "build_attrs",
    "build_classes",
    "add_classes",
    # escape
    "escape",
    "unescape",
    "escape_json",
    "escape_js_value",
    # mime
    "MimeTypeGuesser",
    "SignatureMimeTypeGuesser",
    "infer_mime_type",
    # options
    "BuilderConfig",
]
