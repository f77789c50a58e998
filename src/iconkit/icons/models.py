"""Data models for loaded icons."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lxml import etree


@dataclass(frozen=True)
class Icon:
    """One SVG source file, loaded and parsed."""

    name: str  # File basename without .svg, e.g. "arrow-up"
    pascal_name: str  # e.g. "IconArrowUp"
    contents: str  # Raw file text, whitespace-trimmed
    document: etree._Element  # Parsed root, background marker removed
    path: Path  # Absolute source path
