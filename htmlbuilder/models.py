"""
Pydantic models for JSON-facing htmlbuilder inputs.

The `extra` policy of every model is read once, at import time, from the
environment:

    HTMLBUILDER_MODEL_EXTRA=allow|forbid|ignore

Convenience booleans are accepted too: "true/1/on/strict" -> forbid,
"false/0/off/lenient" -> allow.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def _env_extra_mode(default: str = "forbid") -> str:
    raw = (os.getenv("HTMLBUILDER_MODEL_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw
    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"
    return default


_EXTRA = _env_extra_mode()


class BuilderModel(BaseModel):
    """Project-wide base model (frozen, extra policy from the environment)."""

    model_config = ConfigDict(extra=_EXTRA, frozen=True)


class PreloadResource(BuilderModel):
    """A resource to preload, optionally with subresource integrity."""

    url: str = Field(..., min_length=1)
    """Relative or absolute URL of the resource."""

    integrity: Optional[str] = None
    """Subresource integrity hash."""

    crossorigin: Optional[str] = None
    """CORS mode, usually "anonymous" or "use-credentials"."""


__all__ = ["BuilderModel", "PreloadResource"]
