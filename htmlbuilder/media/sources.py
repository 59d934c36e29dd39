"""
Media source capabilities consumed by the CSS image-set builder.

Two capability Protocols describe what a media object can answer:
  - MediaFormatsSource: its formats (MIME types) and one URL per format
  - MediaDensitiesSource: additionally, (density, URL) pairs per format

The builder never probes an object for these capabilities. Callers state the
shape explicitly by wrapping their input in one of the ImageSetSource
variants (ExplicitEntries, FormatsSource, DensitiesSource).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, NamedTuple, Protocol, Sequence, Tuple, Union

from ..exceptions import InvalidCall


class Density(NamedTuple):
    density: float
    url: str


class MediaFormatsSource(Protocol):
    """A resource available in one or more formats."""

    def formats(self) -> Iterable[str]: ...

    def url_for(self, format: str) -> str: ...


class MediaDensitiesSource(MediaFormatsSource, Protocol):
    """A resource available in one or more formats, each at several densities.

    Each density entry is a Density or a {"density": ..., "url": ...} mapping.
    """

    def densities_for(self, format: str) -> Iterable[Density]: ...


@dataclass(frozen=True)
class ExplicitEntries:
    """URLs mapped to a `srcset`-style descriptor (e.g. "2x" or "500w")."""

    entries: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def of(
        cls, entries: Union[Mapping[str, str], Sequence[Tuple[str, str]]]
    ) -> "ExplicitEntries":
        """Build from a mapping, or a list/tuple of (url, descriptor) pairs.

        Raises:
            InvalidCall: ``entries`` is any other object, e.g. an unwrapped
                media source.
        """
        if isinstance(entries, Mapping):
            pairs = list(entries.items())
        elif isinstance(entries, (list, tuple)):
            pairs = list(entries)
        else:
            raise InvalidCall(
                f"Unsupported image-set source {type(entries).__name__}; wrap media "
                "objects in DensitiesSource or FormatsSource."
            )
        for pair in pairs:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise InvalidCall(f"Expected a (url, descriptor) pair, got {pair!r}.")
        return cls(tuple((str(url), str(size)) for url, size in pairs))


@dataclass(frozen=True)
class FormatsSource:
    media: MediaFormatsSource


@dataclass(frozen=True)
class DensitiesSource:
    media: MediaDensitiesSource


ImageSetSource = Union[ExplicitEntries, FormatsSource, DensitiesSource]

__all__ = [
    "Density",
    "MediaFormatsSource",
    "MediaDensitiesSource",
    "ExplicitEntries",
    "FormatsSource",
    "DensitiesSource",
    "ImageSetSource",
]
