"""Centering and padding assessment.

Compares the content box with the viewBox, names what is wrong in a fixed
order, and proposes a viewBox that centers the content with even padding.
"""

from __future__ import annotations

from dataclasses import dataclass

from svg_analyze.config import Config
from svg_analyze.exceptions import NoContentError, ViewBoxError
from svg_analyze.geometry.bbox import BoundingBox, ViewBox

OK = "OK"


@dataclass(frozen=True)
class CenteringReport:
    center_offset_x: float
    center_offset_y: float
    padding_left: float
    padding_right: float
    padding_top: float
    padding_bottom: float
    issues: tuple[str, ...]
    suggested_viewbox: ViewBox

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    @property
    def assessment(self) -> str:
        return "; ".join(self.issues) if self.issues else OK


def suggest_viewbox(content: BoundingBox, config: Config | None = None) -> ViewBox:
    """A viewBox giving ``target_padding`` on every side of the content.

    Near-square results are made exactly square using the larger side.
    """
    config = config or Config()
    scale = 1 - 2 * config.target_padding
    width = content.width / scale
    height = content.height / scale

    if width > 0 and height > 0:
        aspect = width / height
        if 1 - config.square_tolerance < aspect < 1 + config.square_tolerance:
            width = height = max(width, height)

    x = content.min_x - (width - content.width) / 2
    y = content.min_y - (height - content.height) / 2
    return ViewBox(x, y, width, height)


def _offset_issue(offset: float, size: float, threshold: float, names: tuple[str, str]) -> str | None:
    if abs(offset) <= size * threshold:
        return None
    positive, negative = names
    if offset > 0:
        return f"content shifted {positive} by {offset / size * 100:.1f}%"
    return f"content shifted {negative} by {-offset / size * 100:.1f}%"


def assess(content: BoundingBox, viewbox: ViewBox, config: Config | None = None) -> CenteringReport:
    """Measure offsets and padding of ``content`` inside ``viewbox``.

    Raises:
        NoContentError: If the content box is empty.
        ViewBoxError: If the viewBox has no positive size.
    """
    config = config or Config()
    if not content.is_valid():
        raise NoContentError("no parseable content found")
    if not viewbox.is_usable():
        raise ViewBoxError(f"viewBox has non-positive size: {viewbox}")

    offset_x = content.center_x - viewbox.center_x
    offset_y = content.center_y - viewbox.center_y

    left = (content.min_x - viewbox.x) / viewbox.width * 100
    right = (viewbox.x + viewbox.width - content.max_x) / viewbox.width * 100
    top = (content.min_y - viewbox.y) / viewbox.height * 100
    bottom = (viewbox.y + viewbox.height - content.max_y) / viewbox.height * 100

    # Issues are reported in this fixed order.
    candidates = [
        _offset_issue(offset_x, viewbox.width, config.center_threshold, ("RIGHT", "LEFT")),
        _offset_issue(offset_y, viewbox.height, config.center_threshold, ("DOWN", "UP")),
    ]
    max_padding = max(left, right, top, bottom)
    if max_padding > config.max_padding:
        candidates.append(f"excessive padding (max {max_padding:.1f}%)")
    if abs(left - right) > config.uneven_padding:
        candidates.append(f"uneven horizontal padding (L:{left:.1f}% R:{right:.1f}%)")
    if abs(top - bottom) > config.uneven_padding:
        candidates.append(f"uneven vertical padding (T:{top:.1f}% B:{bottom:.1f}%)")

    return CenteringReport(
        center_offset_x=offset_x,
        center_offset_y=offset_y,
        padding_left=left,
        padding_right=right,
        padding_top=top,
        padding_bottom=bottom,
        issues=tuple(issue for issue in candidates if issue),
        suggested_viewbox=suggest_viewbox(content, config),
    )
