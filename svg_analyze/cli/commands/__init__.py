"""CLI commands for svg-analyze."""

from svg_analyze.cli.commands.analyze import analyze

__all__ = ["analyze"]
