"""Library exceptions for htmlbuilder."""

from __future__ import annotations

from typing import Optional


class HtmlBuilderError(Exception):
    """Base htmlbuilder error."""


class InvalidAttributeName(HtmlBuilderError, ValueError):
    """An attribute name contains a character HTML does not allow."""

    def __init__(self, name: str):
        super().__init__(f"Invalid attribute name: {name}")
        self.name = name


class InvalidCall(HtmlBuilderError, TypeError):
    """An argument was passed that the chosen input shape does not support."""


class EmptyInput(HtmlBuilderError, ValueError):
    """A builder produced no entries where at least one is required."""


class InvalidDensity(HtmlBuilderError, ValueError):
    """A media source yielded a density that is not a finite positive number."""

    def __init__(self, density: object, url: str):
        super().__init__(
            f"Invalid density {density!r} for {url!r}; expected a finite positive number."
        )
        self.density = density
        self.url = url


class InvalidPreloadType(HtmlBuilderError, LookupError):
    """Unknown `as` destination for a preload link."""

    def __init__(self, preload_type: str):
        super().__init__(f'Invalid preload type "{preload_type}".')
        self.preload_type = preload_type


class MimeTypeInferenceError(HtmlBuilderError):
    """The MIME type of some data could not be determined."""

    def __init__(self, message: str = "Failed inferring MIME type.", path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class JsonEncodingError(HtmlBuilderError, ValueError):
    """A value could not be converted to JSON."""


__all__ = [
    "HtmlBuilderError",
    "InvalidAttributeName",
    "InvalidCall",
    "EmptyInput",
    "InvalidDensity",
    "InvalidPreloadType",
    "MimeTypeInferenceError",
    "JsonEncodingError",
]
