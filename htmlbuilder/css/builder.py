"""
Pure CSS fragment builder.

Builds property declarations, `url()` tokens and `image-set()` values. The
image-set source is one of three explicit shapes (see media.sources):

  - ExplicitEntries: URLs mapped to literal descriptors
  - FormatsSource: one URL per format, each tagged with `type()`
  - DensitiesSource: (density, URL) pairs per format; `type()` is only
    emitted when more than one format takes part
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import EmptyInput, InvalidCall, InvalidDensity
from ..media.sources import (
    DensitiesSource,
    ExplicitEntries,
    FormatsSource,
    ImageSetSource,
    MediaDensitiesSource,
    MediaFormatsSource,
)
from ..utils import format_number
from .escape import escape_string

LOGGER = logging.getLogger(__name__)

PropertyValues = Union[str, Sequence[str]]


@dataclass(frozen=True)
class ImageSetEntry:
    url: str
    resolution: Optional[str] = None
    format: Optional[str] = None

    def render(self) -> str:
        parts = [f"url({escape_string(self.url)})"]
        if self.format is not None:
            parts.append(f"type({escape_string(self.format)})")
        if self.resolution is not None:
            parts.append(self.resolution)
        return " ".join(parts)


def _read_density(entry: object) -> Tuple[object, str]:
    # Density tuple, {"density": ..., "url": ...} record or an object with
    # density/url attributes
    if isinstance(entry, Mapping):
        return entry["density"], entry["url"]
    if isinstance(entry, tuple):
        density, url = entry
        return density, url
    return entry.density, entry.url


def _resolution(density: object, url: str) -> str:
    if (
        isinstance(density, bool)
        or not isinstance(density, Real)
        or not math.isfinite(density)
        or density <= 0
    ):
        raise InvalidDensity(density, url)
    return format_number(density) + "x"


def _density_entries(
    media: MediaDensitiesSource, selected_format: Optional[str]
) -> List[ImageSetEntry]:
    formats = list(media.formats()) if selected_format is None else [selected_format]
    with_formats = len(formats) > 1
    entries: List[ImageSetEntry] = []
    for fmt in formats:
        for entry in media.densities_for(fmt):
            density, url = _read_density(entry)
            entries.append(
                ImageSetEntry(
                    url,
                    resolution=_resolution(density, url),
                    format=fmt if with_formats else None,
                )
            )
    return entries


def _format_entries(media: MediaFormatsSource) -> List[ImageSetEntry]:
    return [ImageSetEntry(media.url_for(fmt), format=fmt) for fmt in media.formats()]


def _explicit_entries(source: ExplicitEntries) -> List[ImageSetEntry]:
    return [ImageSetEntry(url, resolution=size) for url, size in source.entries]


class CssBuilder:
    """Builds CSS declarations and values."""

    def build_url(self, url: str) -> str:
        """Return a CSS `url()` token for ``url``.

        Example:
            >>> CssBuilder().build_url("hello-world.jpg")
            "url('hello-world.jpg')"
        """
        return "url(" + escape_string(url) + ")"

    def build_property(self, name: str, values: PropertyValues) -> str:
        """
        Return declarations for one property.

        A list of values repeats the property once per value, so later values
        act as fallbacks for engines that reject earlier ones.

        Example:
            >>> CssBuilder().build_property("height", ["100%", "100vh"])
            'height:100%;height:100vh'
        """
        if isinstance(values, str):
            values = [values]
        return ";".join(f"{name}:{value}" for value in values)

    def build_properties(self, properties: Mapping[str, PropertyValues]) -> str:
        """Return declarations for every property, in mapping order."""
        return ";".join(
            self.build_property(name, values) for name, values in properties.items()
        )

    def build_image_set(
        self,
        source: Union[ImageSetSource, Mapping[str, str], Iterable[Tuple[str, str]]],
        format: Optional[str] = None,
    ) -> str:
        """
        Return a CSS `image-set()` value.

        Args:
            source: A DensitiesSource, FormatsSource or ExplicitEntries. A plain
                mapping (or iterable of pairs) of URL to descriptor is taken as
                ExplicitEntries.
            format: Restrict a DensitiesSource to this single format. Not
                supported by the other shapes.

        Raises:
            InvalidCall: ``format`` was given for a shape that cannot select one,
                or ``source`` is neither a wrapper nor a mapping/list of pairs.
            InvalidDensity: a density is not a finite positive number.
            EmptyInput: no entries were produced.
        """
        if not isinstance(source, (DensitiesSource, FormatsSource, ExplicitEntries)):
            source = ExplicitEntries.of(source)

        if isinstance(source, DensitiesSource):
            entries = _density_entries(source.media, format)
        elif isinstance(source, FormatsSource):
            if format is not None:
                raise InvalidCall("An image format cannot be specified with a formats source.")
            entries = _format_entries(source.media)
        else:
            if format is not None:
                raise InvalidCall("An image format cannot be specified with explicit entries.")
            entries = _explicit_entries(source)

        if not entries:
            raise EmptyInput("At least one entry must be provided.")
        LOGGER.debug(
            "htmlbuilder.image_set shape=%s entries=%d", type(source).__name__, len(entries)
        )
        return "image-set(" + ", ".join(e.render() for e in entries) + ")"


_DEFAULT = CssBuilder()


def build_image_set(
    source: Union[ImageSetSource, Mapping[str, str], Iterable[Tuple[str, str]]],
    format: Optional[str] = None,
) -> str:
    return _DEFAULT.build_image_set(source, format)


__all__ = ["CssBuilder", "ImageSetEntry", "build_image_set"]
