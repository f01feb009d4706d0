"""High-level API for svg-analyze.

Example:
    >>> from svg_analyze import SVGAnalyzer
    >>> analyzer = SVGAnalyzer()
    >>> result = analyzer.analyze_file("icon.svg")
    >>> result.assessment
    'OK'
"""

from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from svg_analyze.centering import assess
from svg_analyze.config import Config
from svg_analyze.exceptions import SVGAnalyzeError, SVGReadError
from svg_analyze.geometry.bbox import BoundingBox, ViewBox
from svg_analyze.geometry.shapes import content_bounds
from svg_analyze.svg.parser import parse_svg_string, read_svg_text
from svg_analyze.viewbox import resolve_viewbox

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


@dataclass
class AnalysisResult:
    """Outcome of analysing one SVG file.

    Error entries (batch mode) carry only ``file_path``, ``assessment``,
    ``error`` and ``has_issues=True``; their geometry fields stay unset.
    """

    file_path: str
    viewbox: ViewBox | None = None
    content_box: BoundingBox = field(default_factory=BoundingBox)
    center_offset_x: float = 0.0
    center_offset_y: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    assessment: str = ""
    suggested_viewbox: str = ""
    has_issues: bool = False
    error: str | None = None

    @classmethod
    def from_error(cls, file_path: str | Path, error: SVGAnalyzeError) -> AnalysisResult:
        return cls(
            file_path=str(file_path),
            assessment=f"Error: {error}",
            has_issues=True,
            error=str(error),
        )

    @property
    def ok(self) -> bool:
        return not self.has_issues

    @property
    def name(self) -> str:
        return Path(self.file_path).name

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "file": self.file_path,
            "assessment": self.assessment,
            "has_issues": self.has_issues,
        }
        if self.error is not None:
            data["error"] = self.error
            return data
        if self.viewbox is not None:
            data["viewbox"] = {
                "x": self.viewbox.x,
                "y": self.viewbox.y,
                "width": self.viewbox.width,
                "height": self.viewbox.height,
            }
        box = self.content_box
        if box.is_valid():
            data["content_box"] = {
                "min_x": box.min_x,
                "min_y": box.min_y,
                "max_x": box.max_x,
                "max_y": box.max_y,
            }
        data["center_offset"] = {"x": self.center_offset_x, "y": self.center_offset_y}
        data["padding"] = {
            "left": self.padding_left,
            "right": self.padding_right,
            "top": self.padding_top,
            "bottom": self.padding_bottom,
        }
        data["suggested_viewbox"] = self.suggested_viewbox
        return data


def any_issues(results: list[AnalysisResult]) -> bool:
    """Aggregate failure signal: true if any result has issues."""
    return any(r.has_issues for r in results)


class SVGAnalyzer:
    """Analyses SVG files for content centering and padding."""

    def __init__(self, config: Config | None = None, log_level: str | None = None) -> None:
        self.config = config or Config()
        if log_level:
            logging.getLogger("svg_analyze").setLevel(log_level.upper())

    def analyze_string(self, markup: str, name: str = "<string>") -> AnalysisResult:
        """Analyse in-memory SVG markup.

        Raises:
            SVGAnalyzeError: If the markup cannot be parsed, has no usable
                viewBox, or has no measurable content.
        """
        try:
            root = parse_svg_string(markup, name)
            viewbox = resolve_viewbox(root)
            content = content_bounds(root)
            report = assess(content, viewbox, self.config)
        except SVGAnalyzeError as e:
            if e.path is None:
                e.path = name
            raise

        logger.debug("%s: content=%s viewBox=%s", name, content.as_tuple(), viewbox)
        return AnalysisResult(
            file_path=name,
            viewbox=viewbox,
            content_box=content,
            center_offset_x=report.center_offset_x,
            center_offset_y=report.center_offset_y,
            padding_left=report.padding_left,
            padding_right=report.padding_right,
            padding_top=report.padding_top,
            padding_bottom=report.padding_bottom,
            assessment=report.assessment,
            suggested_viewbox=str(report.suggested_viewbox),
            has_issues=report.has_issues,
        )

    def analyze_file(self, path: str | Path) -> AnalysisResult:
        """Analyse one SVG file. Errors propagate as SVGAnalyzeError."""
        return self.analyze_string(read_svg_text(path), str(path))

    def _analyze_isolated(self, path: Path) -> AnalysisResult:
        try:
            return self.analyze_file(path)
        except SVGAnalyzeError as e:
            logger.warning("Skipping %s", e)
            return AnalysisResult.from_error(path, e)

    def list_svg_files(self, directory: str | Path) -> list[Path]:
        """Immediate non-directory ``*.svg`` entries (case-insensitive), sorted by name."""
        directory = Path(directory)
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise SVGReadError(f"failed to read directory: {e}", directory) from e
        return [p for p in entries if p.suffix.lower() == SVG_SUFFIX and not p.is_dir()]

    def analyze_directory(self, directory: str | Path) -> list[AnalysisResult]:
        """Analyse every SVG file directly inside ``directory``.

        A failing file becomes an error entry and never stops the batch.
        Results follow the sorted listing order, also when ``config.jobs``
        runs files in parallel.
        """
        files = self.list_svg_files(directory)
        if self.config.jobs > 1 and len(files) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.config.jobs) as executor:
                return list(executor.map(self._analyze_isolated, files))
        return [self._analyze_isolated(p) for p in files]

    def analyze_path(self, path: str | Path) -> list[AnalysisResult]:
        """Analyse a file or a directory; always returns a list."""
        path = Path(path)
        if path.is_dir():
            return self.analyze_directory(path)
        return [self.analyze_file(path)]
