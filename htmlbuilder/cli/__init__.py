"""Command line interface for htmlbuilder."""
