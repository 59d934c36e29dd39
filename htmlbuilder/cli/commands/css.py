"""CSS commands for the htmlbuilder CLI."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from htmlbuilder.cli.utils import emit, fail, load_json
from htmlbuilder.css import CssBuilder, escape_string
from htmlbuilder.exceptions import HtmlBuilderError
from htmlbuilder.media import ExplicitEntries, MediaManifest

app = typer.Typer(help="CSS fragment commands")

logger = logging.getLogger(__name__)


@app.command("properties")
def build_properties(
    properties: str = typer.Argument(
        ..., help='JSON object, e.g. {"height": ["100%", "100vh"]}'
    ),
):
    """Print CSS declarations; list values become fallbacks."""
    data = load_json(properties)
    if not isinstance(data, dict):
        fail("Expected a JSON object")
    emit(CssBuilder().build_properties(data))


@app.command("url")
def build_url(url: str = typer.Argument(..., help="URL to wrap")):
    """Print a CSS url() token."""
    emit(CssBuilder().build_url(url))


@app.command("string")
def quote_string(text: str = typer.Argument(..., help="Text to quote")):
    """Print text as a quoted CSS string literal."""
    emit(escape_string(text))


@app.command("image-set")
def build_image_set(
    manifest: Path = typer.Argument(..., help="JSON media manifest"),
    format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Only use this format (density manifests only)"
    ),
    explicit: bool = typer.Option(
        False,
        "--explicit",
        help="Treat the file as a plain object of URL to descriptor",
    ),
):
    """Print the image-set() value for a manifest file."""
    data = load_json(f"@{manifest}")
    try:
        if explicit:
            if not isinstance(data, dict):
                fail("Expected a JSON object of URL to descriptor")
            source = ExplicitEntries.of({str(k): str(v) for k, v in data.items()})
        else:
            source = MediaManifest.model_validate(data).as_image_set_source()
        logger.debug("image-set source=%s", type(source).__name__)
        emit(CssBuilder().build_image_set(source, format))
    except ValidationError as e:
        fail(f"Invalid manifest: {e}")
    except KeyError as e:
        fail(e.args[0] if e.args else e)
    except HtmlBuilderError as e:
        fail(e)
