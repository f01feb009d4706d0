"""Geometry for svg-analyze.

This subpackage provides:
- BoundingBox / ViewBox value types
- Path data tokenizing and path extent evaluation
- Per-shape and whole-document bounds
"""

from svg_analyze.geometry.bbox import BoundingBox, ViewBox
from svg_analyze.geometry.path import PathCommand, parse_numbers, parse_path, path_bounds
from svg_analyze.geometry.shapes import (
    NON_RENDERED,
    content_bounds,
    element_bounds,
    is_non_rendered,
    parse_points,
    shape_bounds,
)

__all__ = [
    "BoundingBox",
    "ViewBox",
    "PathCommand",
    "parse_numbers",
    "parse_path",
    "path_bounds",
    "NON_RENDERED",
    "content_bounds",
    "element_bounds",
    "is_non_rendered",
    "parse_points",
    "shape_bounds",
]
