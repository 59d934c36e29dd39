"""
Pure HTML fragment builder.

Turns structured input into HTML attribute strings, resource tags and wrapped
text. No I/O, except for the temporary file `generate_data_uri` writes when it
has to infer a MIME type.

Attribute formatting rules (checked in this order):
  - `aria-*`: always `name="value"`; booleans become "true"/"false"
  - any other name containing a hyphen: always `name="value"`
  - standard attributes: False/None omit the attribute, True renders the
    bare name, anything else renders `name="value"`
"""

from __future__ import annotations

import base64
import logging
import re
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)
from urllib.parse import quote

from ..exceptions import InvalidAttributeName, InvalidPreloadType, MimeTypeInferenceError
from ..models import PreloadResource
from ..utils import stringify
from .escape import escape, unescape
from .mime import MimeTypeGuesser, SignatureMimeTypeGuesser, infer_mime_type
from .options import BuilderConfig

LOGGER = logging.getLogger(__name__)

# Scalars, None, or any object with a meaningful __str__
AttrValue = object
AttributeSet = Union[Mapping[Union[str, int], AttrValue], Iterable[Union[str, Tuple[str, AttrValue]]]]
PreloadEntry = Union[str, Mapping[str, Optional[str]], PreloadResource]

_TAG_SHORTHAND = re.compile(r"^<([\w-]+)(?:\s.+)?>$")
_PARAGRAPH_BREAK = re.compile(r"(?:\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]){2,}")
_WORD = re.compile(r"\S+")


def _iter_pairs(attr_set: AttributeSet) -> Iterator[Tuple[str, AttrValue]]:
    """Yield (name, value) pairs; value-less entries become boolean flags."""
    if isinstance(attr_set, Mapping):
        for name, value in attr_set.items():
            if isinstance(name, int):
                # Positional entry: the value is the name
                yield stringify(value), True
            else:
                yield name, value
        return
    for entry in attr_set:
        if isinstance(entry, tuple):
            name, value = entry
            yield name, value
        else:
            yield str(entry), True


def _parse_html_tag(tag: str) -> Tuple[str, str]:
    m = _TAG_SHORTHAND.match(tag)
    if m:
        # Opening tag shorthand, e.g. '<p class="lead">'
        return tag, f"</{m.group(1)}>"
    name = escape(tag)
    return f"<{name}>", f"</{name}>"


class HtmlBuilder:
    """Builds HTML attribute strings, resource tags and wrapped text."""

    def __init__(
        self,
        mime_type_guesser: Optional[MimeTypeGuesser] = None,
        config: Optional[BuilderConfig] = None,
    ):
        self.mime_type_guesser = mime_type_guesser or SignatureMimeTypeGuesser()
        self.config = config or BuilderConfig()

    # ------------------------------ Attributes -------------------------------

    def merge_attrs(self, *attrs: AttributeSet) -> Dict[str, AttrValue]:
        """Merge attribute sets; later sets win, except `class` which accumulates."""
        merged: Dict[str, AttrValue] = {}
        for attr_set in attrs:
            for name, value in _iter_pairs(attr_set):
                if name not in merged:
                    merged[name] = value
                elif name == "class":
                    merged[name] = self.add_classes(stringify(merged[name]), stringify(value))
                else:
                    merged[name] = value
        return merged

    def build_attrs(self, *attrs: AttributeSet) -> str:
        """
        Format one or more attribute sets as an HTML attribute string.

        Sets are merged first (see `merge_attrs`). A set may be a mapping, a
        list of bare attribute names, or a mapping with integer keys whose
        values are bare names: ``["disabled"]`` equals ``{"disabled": True}``.

        Raises:
            InvalidAttributeName: a merged name contains a forbidden character.

        Example:
            >>> HtmlBuilder().build_attrs({"hidden": True, "disabled": False, "id": "x"})
            'hidden id="x"'
        """
        merged = self.merge_attrs(*attrs)
        for name in merged:
            if not self.config.attr_name_is_valid(name):
                LOGGER.debug("htmlbuilder.attrs invalid name=%r", name)
                raise InvalidAttributeName(name)

        pairs: List[str] = []
        for name, value in merged.items():
            formatted = self._format_attr(name, value)
            if formatted is not None:
                pairs.append(formatted)
        LOGGER.debug("htmlbuilder.attrs merged=%d rendered=%d", len(merged), len(pairs))
        return " ".join(pairs)

    @staticmethod
    def _format_attr(name: str, value: AttrValue) -> Optional[str]:
        def with_name(v: AttrValue) -> str:
            return f'{name}="{escape(stringify(v))}"'

        if name.startswith("aria-"):
            if value is True:
                return with_name("true")
            if value is False:
                return with_name("false")
            return with_name(value)

        if "-" in name:
            # Custom/data attribute
            return with_name(value)

        if value is False or value is None:
            return None
        if value is True:
            return name
        return with_name(value)

    def build_classes(self, classes: Mapping[str, bool]) -> str:
        """Return an HTML-safe class list of the names whose flag is set."""
        return escape(" ".join(name for name, enabled in classes.items() if enabled))

    @staticmethod
    def add_classes(class_list: str, *additional_classes: str) -> str:
        """Append class names to a space-separated class list."""
        class_list = class_list.strip()
        for additional in additional_classes:
            if class_list != "":
                class_list += " "
            class_list += additional
        return class_list

    # ---------------------------- Resource tags ------------------------------

    def build_stylesheet(
        self,
        url: str,
        media: Optional[str] = None,
        integrity: Optional[str] = None,
        crossorigin: Optional[str] = None,
    ) -> str:
        """Return a `<link>` tag loading the stylesheet at ``url``."""
        attrs = {
            "rel": "stylesheet",
            "href": url,
            "media": media,
            "integrity": integrity,
            "crossorigin": crossorigin,
        }
        return "<link " + self.build_attrs(attrs) + "/>"

    def build_script(
        self,
        url: str,
        type_: Optional[str] = None,
        async_: bool = False,
        integrity: Optional[str] = None,
        crossorigin: Optional[str] = None,
    ) -> str:
        """Return a `<script>` tag loading the script at ``url``."""
        attrs = {
            "src": url,
            "type": type_,
            "async": async_,
            "integrity": integrity,
            "crossorigin": crossorigin,
        }
        return "<script " + self.build_attrs(attrs) + "></script>"

    def build_preload_links(
        self,
        preloads: Mapping[str, Union[PreloadEntry, Sequence[PreloadEntry]]],
        preconnect_hosts: Iterable[str] = (),
    ) -> str:
        """
        Return `<link>` tags preloading resources and preconnecting to hosts.

        ``preloads`` maps a destination type ("script", "style", "font", ...)
        to one or more entries; an entry is a URL, a dict with ``url`` and
        optional ``integrity``/``crossorigin`` keys, or a PreloadResource.

        Raises:
            InvalidPreloadType: a key is not a known preload destination.
        """
        out: List[str] = []
        for preload_type, entries in preloads.items():
            if not self.config.is_preload_type(preload_type):
                raise InvalidPreloadType(preload_type)
            if isinstance(entries, (str, Mapping, PreloadResource)):
                entries = [entries]
            for entry in entries:
                resource = self._preload_resource(entry)
                out.append(
                    "<link "
                    + self.build_attrs(
                        {
                            "rel": "preload",
                            "href": resource.url,
                            "as": preload_type,
                            "integrity": resource.integrity,
                            "crossorigin": resource.crossorigin,
                        }
                    )
                    + "/>"
                )
        for host in preconnect_hosts:
            out.append("<link " + self.build_attrs({"rel": "preconnect", "href": host}) + "/>")
        return "".join(out)

    @staticmethod
    def _preload_resource(entry: PreloadEntry) -> PreloadResource:
        if isinstance(entry, PreloadResource):
            return entry
        if isinstance(entry, str):
            return PreloadResource(url=entry)
        return PreloadResource.model_validate(dict(entry))

    def build_src_set(self, entries: Mapping[str, str]) -> str:
        """
        Return an HTML-safe `srcset` value.

        ``entries`` maps URLs to a `srcset` descriptor such as "2x" or "500w".
        See https://developer.mozilla.org/en-US/docs/Web/HTML/Responsive_images
        """
        return escape(", ".join(f"{url} {size}" for url, size in entries.items()))

    # -------------------------------- Text -----------------------------------

    def wrap_paragraphs(self, text: str, wrapping_tag: Optional[str] = None) -> str:
        """
        Wrap each paragraph of plain text in an HTML element.

        Paragraphs are separated by two or more line breaks. Whitespace around
        every line is trimmed and empty paragraphs are dropped.

        Args:
            text: Plain text.
            wrapping_tag: A tag name ("p") or a full opening tag ('<p class="x">').
        """
        if wrapping_tag is None:
            wrapping_tag = self.config.paragraph_tag
        tag_open, tag_close = _parse_html_tag(wrapping_tag)
        paragraphs = (
            "\n".join(line.strip() for line in p.splitlines())
            for p in _PARAGRAPH_BREAK.split(text.strip())
        )
        return "".join(f"{tag_open}{escape(p)}{tag_close}" for p in paragraphs if p)

    def wrap_words(self, text: str, wrapping_tag: str) -> str:
        """Wrap each word in an HTML element, leaving whitespace untouched."""
        tag_open, tag_close = _parse_html_tag(wrapping_tag)
        return _WORD.sub(lambda m: f"{tag_open}{escape(m.group(0))}{tag_close}", text)

    # ------------------------------ Data URIs --------------------------------

    def generate_data_uri(
        self,
        data: Union[bytes, str],
        mime: Optional[str] = None,
        parameters: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        Return a `data:` URI embedding ``data``.

        Text types are percent-encoded, everything else is base64-encoded.
        Without ``mime`` the type is inferred from the content.

        Raises:
            MimeTypeInferenceError: ``mime`` was omitted and could not be inferred.
        """
        if mime is None:
            mime = infer_mime_type(
                data, self.mime_type_guesser, prefix=self.config.mime_tempfile_prefix
            )
            if not mime:
                raise MimeTypeInferenceError()

        uri = "data:" + mime
        for key, value in (parameters or {}).items():
            uri += f";{key}={quote(value, safe='')}"
        if mime.startswith("text/"):
            return uri + "," + quote(data, safe="")
        raw = data.encode("utf-8") if isinstance(data, str) else data
        return uri + ";base64," + base64.b64encode(raw).decode("ascii")

    # ----------------------------- ID rewriting ------------------------------

    def map_html_ids(
        self,
        html: str,
        transformer: Callable[[str, str], str],
        additional_attributes: Iterable[str] = (),
    ) -> str:
        """
        Rewrite ID and ID-referencing attribute values within an HTML fragment.

        ``transformer(value, attribute_name)`` receives each unescaped value and
        returns its replacement. `id`, `for`, `aria-labelledby` and
        `aria-describedby` are always processed.

        Note this matches attributes with a regular expression rather than
        parsing the document, so text that merely looks like an attribute
        (or a suffix such as `data-id`) is rewritten too.
        """
        names = list(self.config.id_attributes) + list(additional_attributes)
        pattern = re.compile(
            r"\b(" + "|".join(re.escape(n) for n in names) + r""")=(["'])(.*?)\2""",
            re.IGNORECASE,
        )

        def _replace(m: "re.Match[str]") -> str:
            name, q, value = m.group(1), m.group(2), m.group(3)
            new_value = transformer(unescape(value), name)
            return f"{escape(name)}={q}{escape(new_value)}{q}"

        return pattern.sub(_replace, html)


_DEFAULT = HtmlBuilder()


def build_attrs(*attrs: AttributeSet) -> str:
    return _DEFAULT.build_attrs(*attrs)


def build_classes(classes: Mapping[str, bool]) -> str:
    return _DEFAULT.build_classes(classes)


def add_classes(class_list: str, *additional_classes: str) -> str:
    return HtmlBuilder.add_classes(class_list, *additional_classes)


__all__ = [
    "HtmlBuilder",
    "AttrValue",
    "AttributeSet",
    "build_attrs",
    "build_classes",
    "add_classes",
]
