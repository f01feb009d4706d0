"""SVG parsing for svg-analyze.

This subpackage provides:
- Safe SVG parsing with XXE protection (defusedxml)
- A namespace-free element view with typed attribute accessors
- In-place viewBox rewriting of SVG markup
"""

from svg_analyze.svg.parser import (
    SVGElement,
    local_name,
    parse_length,
    parse_svg,
    parse_svg_string,
    read_svg_text,
    replace_viewbox,
)

__all__ = [
    "SVGElement",
    "local_name",
    "parse_length",
    "parse_svg",
    "parse_svg_string",
    "read_svg_text",
    "replace_viewbox",
]
