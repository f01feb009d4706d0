"""SVG loading for svg-analyze.

Markup is parsed with defusedxml (no external entities, no entity
expansion bombs) and exposed through :class:`SVGElement`, a small read-only
view with namespace-free names and typed attribute accessors.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from svg_analyze.exceptions import SVGParseError, SVGReadError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

# Number followed by an optional unit; "%" is deliberately not accepted.
_LENGTH_RE = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px|pt|pc|mm|cm|in|em|ex|rem)?\s*$"
)

_VIEWBOX_ATTR_RE = re.compile(r"""(\sviewBox\s*=\s*)(["'])(.*?)\2""", re.DOTALL)
_SVG_OPEN_RE = re.compile(r"<(?:[\w.-]+:)?svg\b")
# BOM, whitespace, processing instructions, comments and DOCTYPE before the root.
_PROLOG_RE = re.compile(
    r"(?:\ufeff|\s+|<\?.*?\?>|<!--.*?-->|<!DOCTYPE(?:[^\[>]|\[.*?\])*>)*", re.DOTALL
)


def local_name(tag: str) -> str:
    """Strip an ``{namespace}`` or ``prefix:`` qualifier from a tag."""
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    if ":" in tag:
        tag = tag.rsplit(":", 1)[1]
    return tag


def parse_length(value: str | None, default: float = 0.0) -> float:
    """Parse a numeric attribute, dropping a trailing absolute unit.

    Missing, empty, percentage and otherwise unparseable values give
    ``default``.
    """
    if not value:
        return default
    match = _LENGTH_RE.match(value)
    if not match:
        return default
    return float(match.group(1))


class SVGElement:
    """Read-only view of one element in a parsed SVG tree."""

    __slots__ = ("_element", "name")

    def __init__(self, element: Element) -> None:
        self._element = element
        self.name = local_name(element.tag) if isinstance(element.tag, str) else ""

    def __repr__(self) -> str:
        return f"SVGElement({self.name!r})"

    @property
    def attributes(self) -> dict[str, str]:
        return {local_name(k): v for k, v in self._element.attrib.items()}

    def get(self, name: str, default: str | None = None) -> str | None:
        value = self._element.get(name)
        if value is None:
            return self.attributes.get(name, default)
        return value

    def get_float(self, name: str, default: float = 0.0) -> float:
        return parse_length(self.get(name), default)

    @property
    def children(self) -> list[SVGElement]:
        # Comments and processing instructions have non-string tags.
        return [SVGElement(child) for child in self._element if isinstance(child.tag, str)]

    def iter(self) -> Iterator[SVGElement]:
        yield self
        for child in self.children:
            yield from child.iter()


def parse_svg_string(markup: str, source: str | Path | None = None) -> SVGElement:
    """Parse SVG markup text and return its root element.

    Raises:
        SVGParseError: If the markup is not well-formed XML or uses
            forbidden constructs (DTD entities, external references).
    """
    try:
        root = ET.fromstring(markup)
    except DefusedXmlException as e:
        raise SVGParseError(f"failed to parse SVG: forbidden XML construct ({e})", source) from e
    except ET.ParseError as e:
        raise SVGParseError(f"failed to parse SVG: {e}", source) from e
    return SVGElement(root)


def read_svg_text(path: str | Path) -> str:
    """Read raw UTF-8 markup from disk (a leading BOM is dropped)."""
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise SVGReadError("failed to open file: no such file", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SVGReadError(f"failed to open file: {e}", path) from e


def parse_svg(path: str | Path) -> SVGElement:
    """Read and parse an SVG file."""
    return parse_svg_string(read_svg_text(path), path)


def replace_viewbox(markup: str, viewbox: str) -> str:
    """Return markup with the root ``viewBox`` set to ``viewbox``.

    Only the root ``<svg>`` start tag is touched; if it has no viewBox one
    is inserted right after the tag name. Markup inside the prolog
    (comments, processing instructions, DOCTYPE) is never rewritten.
    """
    opening = _SVG_OPEN_RE.match(markup, _PROLOG_RE.match(markup).end())
    if opening is None:
        raise SVGParseError("no <svg> root element found")
    tag_end = markup.find(">", opening.end())
    if tag_end == -1:
        raise SVGParseError("unterminated <svg> start tag")

    start_tag = markup[opening.start() : tag_end]
    match = _VIEWBOX_ATTR_RE.search(start_tag)
    if match:
        new_tag = (
            start_tag[: match.start(3)] + viewbox + start_tag[match.end(3) :]
        )
    else:
        insert_at = opening.end() - opening.start()
        new_tag = f'{start_tag[:insert_at]} viewBox="{viewbox}"{start_tag[insert_at:]}'
    return markup[: opening.start()] + new_tag + markup[tag_end:]
