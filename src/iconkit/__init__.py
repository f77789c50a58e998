"""Build helpers for an SVG icon set."""

__version__ = "0.3.0"
