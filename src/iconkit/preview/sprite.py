"""Sprite sheet / preview builder: combine icon SVGs into one document of symbols and placements."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from iconkit.icons.naming import get_svg_name
from iconkit.preview.layout import GridLayout, SpriteEntry, compute_layout, place_icons
from iconkit.preview.raster import DEFAULT_CONVERTER, create_screenshot
from iconkit.svg.symbols import create_svg_symbol

logger = logging.getLogger(__name__)


def symbol_id_for(file: Path | str) -> str:
    """
    Symbol id from the last two path segments: "outline/home.svg" -> "outline-home".

    Keeps same-named icons from different style directories apart.
    """
    path = Path(file)
    name = get_svg_name(path)
    parent = path.parent.name
    return f"{parent}-{name}" if parent else name


def build_preview_document(
    symbols: Sequence[str],
    entries: Sequence[SpriteEntry],
    layout: GridLayout,
    color: str = "#354052",
    background: str = "#fff",
) -> str:
    """Assemble the combined SVG: background rect, symbol definitions, then <use> placements."""
    width, height = layout.width, layout.height
    symbol_content = "".join(f"\t{symbol}\n" for symbol in symbols)
    icon_content = "".join(
        f'\t<use xlink:href="#{e.symbol_id}" x="{e.x}" y="{e.y}" width="{e.width}" height="{e.height}" />\n'
        for e in entries
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        f'viewBox="0 0 {width} {height}" width="{width}" height="{height}" style="color: {color}">'
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="{background}"></rect>\n'
        f"{symbol_content}\n{icon_content}\n</svg>"
    )


def generate_icons_preview(
    files: Sequence[Path | str],
    dest_file: Path | str,
    *,
    columns_count: int = 19,
    padding_outer: int = 7,
    color: str = "#354052",
    background: str = "#fff",
    png: bool = True,
    stroke: str | int | float = 2,
    retina: bool = True,
    converter: str = DEFAULT_CONVERTER,
) -> list[SpriteEntry]:
    """
    Write a sprite sheet of `files` to dest_file and optionally rasterize it.

    Icons are placed in input order. The destination path is printed to stdout.
    Raster failures raise ExternalToolError after the SVG has been written.
    """
    dest_file = Path(dest_file)
    layout = compute_layout(len(files), columns_count, padding_outer)

    symbols: list[str] = []
    symbol_ids: list[str] = []
    for file in files:
        symbol_id = symbol_id_for(file)
        svg = Path(file).read_text(encoding="utf-8")
        symbols.append(create_svg_symbol(svg, symbol_id, stroke))
        symbol_ids.append(symbol_id)

    entries = place_icons(symbol_ids, columns_count, padding_outer)
    document = build_preview_document(symbols, entries, layout, color=color, background=background)

    print(dest_file)
    dest_file.write_text(document, encoding="utf-8")
    logger.debug(
        "Wrote %d icons in %dx%d grid (%dx%d px) to %s",
        len(entries),
        layout.columns,
        layout.rows,
        layout.width,
        layout.height,
        dest_file,
    )

    if png:
        create_screenshot(dest_file, retina=retina, converter=converter)
    return entries
