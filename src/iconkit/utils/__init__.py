"""Shared utilities: name exclusion patterns."""

from iconkit.utils.ignore import build_spec, filter_names, is_excluded

__all__ = [
    "build_spec",
    "filter_names",
    "is_excluded",
]
