"""Media source capabilities and manifest models for image-set building."""

from htmlbuilder.media.models import DensityModel, MediaFormat, MediaManifest
from htmlbuilder.media.sources import (
    DensitiesSource,
    Density,
    ExplicitEntries,
    FormatsSource,
    ImageSetSource,
    MediaDensitiesSource,
    MediaFormatsSource,
)

__all__ = [
    "Density",
    "MediaFormatsSource",
    "MediaDensitiesSource",
    "ExplicitEntries",
    "FormatsSource",
    "DensitiesSource",
    "ImageSetSource",
    "DensityModel",
    "MediaFormat",
    "MediaManifest",
]
