"""HTML commands for the htmlbuilder CLI."""

from pathlib import Path
from typing import Dict, List, Optional

import typer

from htmlbuilder.cli.utils import emit, fail, load_json
from htmlbuilder.exceptions import HtmlBuilderError
from htmlbuilder.html import HtmlBuilder
from htmlbuilder.html import escape as html_escape
from htmlbuilder.html import unescape as html_unescape

app = typer.Typer(help="HTML fragment commands")


@app.command("attrs")
def build_attrs(
    sets: List[str] = typer.Argument(
        ...,
        help="JSON objects or arrays of bare names (@file reads one); later sets win",
    ),
):
    """Merge attribute sets and print the HTML attribute string."""
    attr_sets = []
    for arg in sets:
        data = load_json(arg)
        if not isinstance(data, (dict, list)):
            fail(f"Expected a JSON object or array, got {type(data).__name__}")
        attr_sets.append(data)

    try:
        emit(HtmlBuilder().build_attrs(*attr_sets))
    except HtmlBuilderError as e:
        fail(e)


@app.command("classes")
def build_classes(
    flags: str = typer.Argument(..., help='JSON object, e.g. {"active": true}'),
):
    """Print the class names whose flag is true."""
    data = load_json(flags)
    if not isinstance(data, dict):
        fail("Expected a JSON object")
    emit(HtmlBuilder().build_classes(data))


@app.command("srcset")
def build_src_set(
    entries: str = typer.Argument(
        ..., help='JSON object of URL to descriptor, e.g. {"a@2x.jpg": "2x"}'
    ),
):
    """Print an escaped srcset value."""
    data = load_json(entries)
    if not isinstance(data, dict):
        fail("Expected a JSON object")
    emit(HtmlBuilder().build_src_set({str(k): str(v) for k, v in data.items()}))


def _parse_params(params: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for p in params:
        key, sep, value = p.partition("=")
        if not sep or not key:
            fail(f"Invalid parameter {p!r}, expected key=value")
        out[key] = value
    return out


@app.command("data-uri")
def generate_data_uri(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to embed"),
    mime: Optional[str] = typer.Option(
        None, "--mime", "-m", help="MIME type (inferred from content if omitted)"
    ),
    param: List[str] = typer.Option(
        [], "--param", "-p", help="Extra MIME parameter as key=value (repeatable)"
    ),
):
    """Print a data: URI embedding a file."""
    parameters = _parse_params(param)
    data = path.read_bytes()
    try:
        emit(HtmlBuilder().generate_data_uri(data, mime, parameters))
    except HtmlBuilderError as e:
        fail(e)


@app.command("escape")
def escape_text(
    text: str = typer.Argument(..., help="Text to escape"),
    unescape: bool = typer.Option(
        False, "--unescape", "-u", help="Decode HTML entities instead"
    ),
):
    """Print text escaped (or unescaped) for an HTML document."""
    emit(html_unescape(text) if unescape else html_escape(text))
