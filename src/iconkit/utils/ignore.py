"""Name patterns (gitignore syntax via pathspec) for excluding icons by name."""

from __future__ import annotations

from typing import Iterable

from pathspec import PathSpec


def build_spec(patterns: Iterable[str]) -> PathSpec:
    """Build a PathSpec from pattern strings (gitignore-style)."""
    return PathSpec.from_lines("gitignore", patterns)


def is_excluded(name: str, spec: PathSpec) -> bool:
    """True if the icon name matches the spec. Plain names match only themselves."""
    return spec.match_file(name)


def filter_names(names: Iterable[str], patterns: Iterable[str]) -> list[str]:
    """Names that match none of the patterns, order preserved."""
    spec = build_spec(patterns)
    return [n for n in names if not is_excluded(n, spec)]
