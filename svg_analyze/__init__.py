"""svg-analyze: Check that SVG content is centered and evenly padded.

This library provides:
- Path data parsing and bounding-box evaluation
- Whole-document content bounds (masks, clip paths and defs excluded)
- Centering/padding assessment against the declared viewBox
- Suggested viewBox synthesis with even padding

Example:
    >>> from svg_analyze import SVGAnalyzer
    >>> analyzer = SVGAnalyzer()
    >>> for result in analyzer.analyze_directory("icons/"):
    ...     print(result.name, result.assessment)
"""

from svg_analyze.api import AnalysisResult, SVGAnalyzer, any_issues
from svg_analyze.config import Config
from svg_analyze.exceptions import (
    ConfigError,
    NoContentError,
    SVGAnalyzeError,
    SVGParseError,
    SVGReadError,
    ViewBoxError,
)
from svg_analyze.geometry import BoundingBox, ViewBox

__version__ = "0.1.0"

__all__ = [
    # Main API
    "SVGAnalyzer",
    "AnalysisResult",
    "any_issues",
    "Config",
    # Geometry
    "BoundingBox",
    "ViewBox",
    # Exceptions
    "SVGAnalyzeError",
    "SVGReadError",
    "SVGParseError",
    "ViewBoxError",
    "NoContentError",
    "ConfigError",
    # Metadata
    "__version__",
]
