"""Exception hierarchy for svg-analyze.

Every fatal per-file condition derives from SVGAnalyzeError so that batch
mode can turn it into an error-carrying result and move on to the next file.
"""

from __future__ import annotations

from pathlib import Path


class SVGAnalyzeError(Exception):
    """Base class for all svg-analyze errors."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class SVGReadError(SVGAnalyzeError):
    """The SVG file could not be read."""


class SVGParseError(SVGAnalyzeError):
    """The markup is not well-formed (or uses forbidden XML constructs)."""


class ViewBoxError(SVGAnalyzeError):
    """No usable coordinate frame could be resolved."""


class NoContentError(SVGAnalyzeError):
    """The document has no geometry to measure."""


class ConfigError(SVGAnalyzeError):
    """The configuration file is invalid."""
