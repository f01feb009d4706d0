"""Bounding boxes of SVG shape elements and whole documents."""

from __future__ import annotations

import logging

from svg_analyze.geometry.bbox import BoundingBox
from svg_analyze.geometry.path import parse_numbers, path_bounds
from svg_analyze.svg.parser import SVGElement

logger = logging.getLogger(__name__)

# Subtrees that define masks, clip regions or reusable resources rather
# than rendered content.
NON_RENDERED = frozenset({"mask", "clipPath", "defs"})


def is_non_rendered(element: SVGElement) -> bool:
    return element.name in NON_RENDERED


def parse_points(points: str) -> BoundingBox:
    """Bounding box of a polygon/polyline ``points`` list.

    Numbers are paired in order; an odd trailing number is ignored.
    """
    values = parse_numbers(points)
    return BoundingBox.from_points(zip(values[0::2], values[1::2]))


def shape_bounds(element: SVGElement) -> BoundingBox:
    """Bounds of the element's own geometry, ignoring its children."""
    name = element.name
    f = element.get_float
    box = BoundingBox()

    if name == "path":
        d = element.get("d")
        if d:
            box.merge(path_bounds(d))
    elif name == "circle":
        cx, cy, r = f("cx"), f("cy"), f("r")
        box.expand(cx - r, cy - r)
        box.expand(cx + r, cy + r)
    elif name == "ellipse":
        cx, cy, rx, ry = f("cx"), f("cy"), f("rx"), f("ry")
        box.expand(cx - rx, cy - ry)
        box.expand(cx + rx, cy + ry)
    elif name == "rect":
        x, y = f("x"), f("y")
        box.expand(x, y)
        box.expand(x + f("width"), y + f("height"))
    elif name == "line":
        box.expand(f("x1"), f("y1"))
        box.expand(f("x2"), f("y2"))
    elif name in ("polygon", "polyline"):
        points = element.get("points")
        if points:
            box.merge(parse_points(points))
    return box


def rendered_children(element: SVGElement) -> list[SVGElement]:
    return [child for child in element.children if not is_non_rendered(child)]


def element_bounds(element: SVGElement) -> BoundingBox:
    """Bounds of an element and all of its rendered descendants."""
    box = shape_bounds(element)
    for child in rendered_children(element):
        box.merge(element_bounds(child))
    return box


def content_bounds(root: SVGElement) -> BoundingBox:
    """Content box of a document: every rendered child of the root.

    The root itself contributes no geometry.
    """
    box = BoundingBox()
    for child in rendered_children(root):
        box.merge(element_bounds(child))
    return box
