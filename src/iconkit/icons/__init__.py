"""Icon sources: loading, naming, aliases."""

from iconkit.icons.loader import (
    SvgParseError,
    read_aliases,
    read_svg,
    read_svg_directory,
    read_svgs,
)
from iconkit.icons.models import Icon
from iconkit.icons.naming import get_svg_name, to_camel_case, to_pascal_case

__all__ = [
    "Icon",
    "SvgParseError",
    "get_svg_name",
    "read_aliases",
    "read_svg",
    "read_svg_directory",
    "read_svgs",
    "to_camel_case",
    "to_pascal_case",
]
