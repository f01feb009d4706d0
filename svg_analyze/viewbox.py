"""Resolve the declared coordinate frame of an SVG document."""

from __future__ import annotations

import logging

from svg_analyze.exceptions import ViewBoxError
from svg_analyze.geometry.bbox import ViewBox
from svg_analyze.svg.parser import SVGElement

logger = logging.getLogger(__name__)


def parse_viewbox(value: str) -> ViewBox:
    """Parse ``"x y width height"``.

    Commas are accepted as separators alongside whitespace.

    Raises:
        ViewBoxError: If there are not exactly four numeric fields.
    """
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        raise ViewBoxError(f"invalid viewBox format: {value}")
    try:
        x, y, width, height = (float(p) for p in parts)
    except ValueError as e:
        raise ViewBoxError(f"invalid viewBox number in {value!r}") from e
    return ViewBox(x, y, width, height)


def resolve_viewbox(root: SVGElement) -> ViewBox:
    """The root's viewBox, else ``0 0 width height`` from its size attributes.

    Raises:
        ViewBoxError: If the viewBox is malformed or no positive frame exists.
    """
    raw = root.get("viewBox")
    if raw is not None:
        viewbox = parse_viewbox(raw)
        if not viewbox.is_usable():
            raise ViewBoxError(f"viewBox has non-positive size: {raw}")
        logger.debug("viewBox from attribute: %s", viewbox)
        return viewbox

    width = root.get_float("width", 0.0)
    height = root.get_float("height", 0.0)
    if width > 0 and height > 0:
        viewbox = ViewBox(0.0, 0.0, width, height)
        logger.debug("viewBox from width/height: %s", viewbox)
        return viewbox
    raise ViewBoxError("no viewBox or width/height found")
