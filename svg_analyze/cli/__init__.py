"""Command-line interface for svg-analyze."""

from svg_analyze.cli.main import cli, main

__all__ = ["cli", "main"]
