"""Axis-aligned boxes: the content accumulator and the declared viewBox."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class BoundingBox:
    """Mutable extremal-point tracker.

    A new box is empty: its minimums sit at +inf and its maximums at -inf, so
    the first expanded point becomes both corners. Width, height and centers
    are only meaningful once ``is_valid()`` is true.
    """

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @classmethod
    def from_points(cls, points) -> BoundingBox:
        box = cls()
        for x, y in points:
            box.expand(x, y)
        return box

    def is_valid(self) -> bool:
        return self.min_x != math.inf and self.max_x != -math.inf

    def expand(self, x: float, y: float) -> None:
        """Grow the box to include the point (x, y)."""
        if x < self.min_x:
            self.min_x = x
        if x > self.max_x:
            self.max_x = x
        if y < self.min_y:
            self.min_y = y
        if y > self.max_y:
            self.max_y = y

    def merge(self, other: BoundingBox) -> None:
        """Grow the box to include another one. Empty boxes are ignored."""
        if not other.is_valid():
            return
        self.expand(other.min_x, other.min_y)
        self.expand(other.max_x, other.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class ViewBox:
    """The declared coordinate frame ``x y width height``."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def is_usable(self) -> bool:
        return self.width > 0 and self.height > 0

    def __str__(self) -> str:
        return f"{self.x:.1f} {self.y:.1f} {self.width:.1f} {self.height:.1f}"
