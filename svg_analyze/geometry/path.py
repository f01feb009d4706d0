"""Path data interpretation.

``parse_path`` splits a ``d`` attribute into (command, params) pairs and
``path_bounds`` replays them to find the extent of the drawing.

Curves are measured by their control points and end points, and arcs by
their end points only. This is an approximation of the true extent, and the
assessment thresholds in :mod:`svg_analyze.centering` are tuned against it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from svg_analyze.geometry.bbox import BoundingBox

logger = logging.getLogger(__name__)

COMMAND_LETTERS = "MmLlHhVvCcSsQqTtAaZz"

_COMMAND_RE = re.compile(rf"([{COMMAND_LETTERS}])([^{COMMAND_LETTERS}]*)")

# Sign, digits with optional fraction or a bare leading fraction, exponent.
# Adjacent numbers need no separator when the next one starts with - or .
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class PathCommand:
    command: str
    params: list[float] = field(default_factory=list)

    @property
    def is_relative(self) -> bool:
        return self.command.islower()


def parse_numbers(text: str) -> list[float]:
    """Extract every number from a run of SVG number syntax.

    Tokens that match the number pattern but still fail float conversion
    are skipped.
    """
    values: list[float] = []
    for token in NUMBER_RE.findall(text):
        try:
            values.append(float(token))
        except ValueError:
            continue
    return values


def parse_path(d: str) -> list[PathCommand]:
    """Tokenize path data into commands with their numeric parameters.

    Text before the first command letter is ignored.

    >>> parse_path("M0,0 l10-5z")
    [PathCommand(command='M', params=[0.0, 0.0]), PathCommand(command='l', params=[10.0, -5.0]), PathCommand(command='z', params=[])]
    """
    return [
        PathCommand(match.group(1), parse_numbers(match.group(2)))
        for match in _COMMAND_RE.finditer(d)
    ]


def _groups(params: list[float], size: int):
    # Incomplete trailing groups are dropped.
    for i in range(0, len(params) - size + 1, size):
        yield params[i : i + size]


class _PathWalker:
    """Current point / subpath start state for one path."""

    def __init__(self) -> None:
        self.box = BoundingBox()
        self.cur_x = 0.0
        self.cur_y = 0.0
        self.start_x = 0.0
        self.start_y = 0.0

    def move_to(self, x: float, y: float) -> None:
        self.cur_x, self.cur_y = x, y
        self.box.expand(x, y)

    def point(self, rel: bool, x: float, y: float) -> tuple[float, float]:
        if rel:
            return self.cur_x + x, self.cur_y + y
        return x, y

    def run(self, cmd: PathCommand) -> None:
        letter = cmd.command.upper()
        rel = cmd.is_relative
        params = cmd.params

        if letter == "M":
            for i, (x, y) in enumerate(_groups(params, 2)):
                self.move_to(*self.point(rel, x, y))
                if i == 0:
                    self.start_x, self.start_y = self.cur_x, self.cur_y
        elif letter in ("L", "T"):
            for x, y in _groups(params, 2):
                self.move_to(*self.point(rel, x, y))
        elif letter == "H":
            for x in params:
                self.move_to(self.cur_x + x if rel else x, self.cur_y)
        elif letter == "V":
            for y in params:
                self.move_to(self.cur_x, self.cur_y + y if rel else y)
        elif letter == "C":
            for x1, y1, x2, y2, x, y in _groups(params, 6):
                self.box.expand(*self.point(rel, x1, y1))
                self.box.expand(*self.point(rel, x2, y2))
                self.move_to(*self.point(rel, x, y))
        elif letter in ("S", "Q"):
            for x1, y1, x, y in _groups(params, 4):
                self.box.expand(*self.point(rel, x1, y1))
                self.move_to(*self.point(rel, x, y))
        elif letter == "A":
            for group in _groups(params, 7):
                self.move_to(*self.point(rel, group[5], group[6]))
        elif letter == "Z":
            self.cur_x, self.cur_y = self.start_x, self.start_y


def path_bounds(d: str) -> BoundingBox:
    """Return the bounding box of a path's ``d`` attribute.

    The box is empty when the data contains no drawable coordinates.
    """
    commands = parse_path(d)
    walker = _PathWalker()
    for cmd in commands:
        walker.run(cmd)
    logger.debug("path: %d commands, box=%s", len(commands), walker.box.as_tuple())
    return walker.box
