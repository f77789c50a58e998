"""Grid layout for sprite sheets: canvas size and per-icon placement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

ICON_SIZE = 24
# Gap between neighbouring icons; the trailing edge gets none
PADDING = 20
CELL = ICON_SIZE + PADDING


@dataclass(frozen=True)
class GridLayout:
    """Canvas dimensions for a sprite sheet."""

    columns: int
    rows: int
    width: int
    height: int


@dataclass(frozen=True)
class SpriteEntry:
    """One placed icon: the symbol it references and its cell rectangle."""

    symbol_id: str
    x: int
    y: int
    width: int = ICON_SIZE
    height: int = ICON_SIZE


def compute_layout(count: int, columns_count: int = 19, padding_outer: int = 7) -> GridLayout:
    """
    Canvas for `count` icons in rows of `columns_count`.

    Width always spans the full column count, even for a single short row.
    """
    if count < 1:
        raise ValueError("Cannot lay out a sprite sheet with no icons")
    if columns_count < 1:
        raise ValueError(f"columns_count must be at least 1, got {columns_count}")
    rows = math.ceil(count / columns_count)
    return GridLayout(
        columns=columns_count,
        rows=rows,
        width=columns_count * CELL + 2 * padding_outer - PADDING,
        height=rows * CELL + 2 * padding_outer - PADDING,
    )


def place_icons(
    symbol_ids: Sequence[str],
    columns_count: int = 19,
    padding_outer: int = 7,
) -> list[SpriteEntry]:
    """Place symbols left-to-right, top-to-bottom, wrapping after columns_count."""
    if columns_count < 1:
        raise ValueError(f"columns_count must be at least 1, got {columns_count}")
    entries = []
    for i, symbol_id in enumerate(symbol_ids):
        row, col = divmod(i, columns_count)
        entries.append(
            SpriteEntry(
                symbol_id=symbol_id,
                x=padding_outer + col * CELL,
                y=padding_outer + row * CELL,
            )
        )
    return entries
