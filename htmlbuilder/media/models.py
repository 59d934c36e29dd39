"""
Pydantic models describing a responsive image on disk or in a JSON manifest.

A manifest looks like:

    {
      "formats": [
        {"type": "image/webp", "url": "hero.webp",
         "densities": [{"density": 1, "url": "hero.webp"},
                       {"density": 2, "url": "hero@2x.webp"}]},
        {"type": "image/jpeg", "url": "hero.jpg"}
      ]
    }

MediaManifest implements both media capabilities, so it can be handed to the
image-set builder wrapped in FormatsSource or DensitiesSource.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from ..models import BuilderModel
from .sources import DensitiesSource, Density, FormatsSource, ImageSetSource

LOGGER = logging.getLogger(__name__)


class DensityModel(BuilderModel):
    density: float = Field(..., gt=0)
    url: str = Field(..., min_length=1)

    @field_validator("density", mode="before")
    @classmethod
    def _strip_suffix(cls, v):
        # Accept "2x" as well as 2
        if isinstance(v, str) and v.endswith("x"):
            return v[:-1]
        return v


class MediaFormat(BuilderModel):
    type: str = Field(..., min_length=1)
    """MIME type, e.g. "image/webp"."""

    url: Optional[str] = None
    """URL of the format's default rendition."""

    densities: List[DensityModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _has_some_url(self) -> "MediaFormat":
        if not self.url and not self.densities:
            raise ValueError(f"format {self.type!r} needs a url or densities")
        return self

    def default_url(self) -> str:
        if self.url:
            return self.url
        # Prefer the 1x rendition, else the first listed
        for d in self.densities:
            if d.density == 1:
                return d.url
        return self.densities[0].url


class MediaManifest(BuilderModel):
    model_config = BuilderModel.model_config | ConfigDict(populate_by_name=True)

    entries: List[MediaFormat] = Field(default_factory=list, alias="formats")

    # MediaFormatsSource
    def formats(self) -> List[str]:
        return [f.type for f in self.entries]

    def url_for(self, format: str) -> str:
        return self._find(format).default_url()

    # MediaDensitiesSource
    def densities_for(self, format: str) -> List[Density]:
        f = self._find(format)
        if not f.densities:
            # A lone rendition is its own 1x density
            return [Density(1, f.default_url())]
        return [Density(d.density, d.url) for d in f.densities]

    @property
    def has_densities(self) -> bool:
        return any(f.densities for f in self.entries)

    def as_image_set_source(self) -> ImageSetSource:
        """Wrap the manifest in the richest source variant its data supports."""
        if self.has_densities:
            return DensitiesSource(self)
        return FormatsSource(self)

    def _find(self, format: str) -> MediaFormat:
        for f in self.entries:
            if f.type == format:
                return f
        LOGGER.debug("htmlbuilder.media unknown format=%s", format)
        raise KeyError(f"Unknown media format: {format}")


__all__ = ["DensityModel", "MediaFormat", "MediaManifest"]
