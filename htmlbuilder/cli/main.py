#!/usr/bin/env python
"""Command line interface for htmlbuilder."""

import logging

import typer
from rich.logging import RichHandler

from htmlbuilder.cli.commands import css, html

app = typer.Typer(help="Build safe HTML and CSS fragments")

# Add command groups
app.add_typer(html.app, name="html")
app.add_typer(css.app, name="css")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Build safe HTML attribute strings, CSS values and data URIs."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
