"""
htmlbuilder - Safe HTML and CSS fragment builders.

This package is organized into focused subpackages:

- html/     HTML fragments
            - builder: HtmlBuilder, build_attrs, build_classes, add_classes
            - escape: escape, unescape, escape_json, escape_js_value
            - mime: MimeTypeGuesser, SignatureMimeTypeGuesser

- css/      CSS fragments
            - builder: CssBuilder, build_image_set
            - escape: escape_string

- media/    Image sources for image-set()
            - sources: MediaFormatsSource, MediaDensitiesSource, ExplicitEntries,
              FormatsSource, DensitiesSource
            - models: MediaManifest (pydantic)

- cli/      Command line interface (typer)

Usage:
    from htmlbuilder import HtmlBuilder, CssBuilder, DensitiesSource
    HtmlBuilder().build_attrs({"class": "btn"}, {"class": "primary", "disabled": True})
"""

__version__ = "0.1.0"

from htmlbuilder.css import CssBuilder, build_image_set, escape_string
from htmlbuilder.exceptions import (
    EmptyInput,
    HtmlBuilderError,
    InvalidAttributeName,
    InvalidCall,
    InvalidDensity,
    InvalidPreloadType,
    JsonEncodingError,
    MimeTypeInferenceError,
)
from htmlbuilder.html import (
    BuilderConfig,
    HtmlBuilder,
    add_classes,
    build_attrs,
    build_classes,
    escape,
    escape_js_value,
    escape_json,
    unescape,
)
from htmlbuilder.media import (
    DensitiesSource,
    Density,
    ExplicitEntries,
    FormatsSource,
    MediaDensitiesSource,
    MediaFormatsSource,
    MediaManifest,
)
from htmlbuilder.models import PreloadResource

__all__ = [
    "__version__",
    # html
    "HtmlBuilder",
    "BuilderConfig",
    "build_attrs",
    "build_classes",
    "add_classes",
    "escape",
    "unescape",
    "escape_json",
    "escape_js_value",
    # css
    "CssBuilder",
    "build_image_set",
    "escape_string",
    # media
    "Density",
    "MediaFormatsSource",
    "MediaDensitiesSource",
    "ExplicitEntries",
    "FormatsSource",
    "DensitiesSource",
    "MediaManifest",
    # models
    "PreloadResource",
    # exceptions
    "HtmlBuilderError",
    "InvalidAttributeName",
    "InvalidCall",
    "InvalidDensity",
    "EmptyInput",
    "InvalidPreloadType",
    "MimeTypeInferenceError",
    "JsonEncodingError",
]
