"""Command modules for the htmlbuilder CLI."""

from htmlbuilder.cli.commands import css, html

__all__ = ["css", "html"]
