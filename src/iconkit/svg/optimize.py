"""SVG document optimizer (scour) with a fixed option set."""

from __future__ import annotations

from scour import scour

# Scour has no path-merging pass, so every <path> survives as its own element.
SCOUR_ARGS = [
    "--enable-comment-stripping",
    "--remove-metadata",
    "--strip-xml-prolog",
    "--keep-unreferenced-defs",
    "--indent=space",
    "--nindent=2",
    "--quiet",
]


def scour_options():
    """Parsed scour options for SCOUR_ARGS."""
    return scour.parse_args(list(SCOUR_ARGS))


def optimize_svg(data: str) -> str:
    """Optimize an SVG document and pretty-print it with 2-space indentation."""
    return scour.scourString(data, scour_options())
