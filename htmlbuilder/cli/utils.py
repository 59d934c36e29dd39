"""Shared helpers for the htmlbuilder CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape as escape_markup

console = Console()


def load_json(arg: str) -> Any:
    """Parse a JSON argument; ``@path`` reads the JSON from a file instead."""
    try:
        if arg.startswith("@"):
            return json.loads(Path(arg[1:]).read_text(encoding="utf-8"))
        return json.loads(arg)
    except (OSError, json.JSONDecodeError) as e:
        fail(f"Could not read JSON from {arg!r}: {e}")


def emit(text: str) -> None:
    """Print a generated fragment verbatim."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def fail(message: object) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape_markup(str(message))}")
    raise typer.Exit(1)
