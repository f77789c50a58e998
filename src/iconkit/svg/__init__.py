"""SVG transforms: path data, document optimization, symbols."""

from iconkit.svg.optimize import optimize_svg
from iconkit.svg.path import add_floats, optimize_path, tokenize
from iconkit.svg.symbols import build_icons_object, create_svg_symbol, get_svg_contents, icon_nodes

__all__ = [
    "add_floats",
    "build_icons_object",
    "create_svg_symbol",
    "get_svg_contents",
    "icon_nodes",
    "optimize_path",
    "optimize_svg",
    "tokenize",
]
