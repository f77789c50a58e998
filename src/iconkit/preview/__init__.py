"""Sprite sheet previews: grid layout, combined SVG, raster output."""

from iconkit.preview.layout import GridLayout, SpriteEntry, compute_layout, place_icons
from iconkit.preview.raster import ExternalToolError, create_screenshot
from iconkit.preview.sprite import build_preview_document, generate_icons_preview, symbol_id_for

__all__ = [
    "ExternalToolError",
    "GridLayout",
    "SpriteEntry",
    "build_preview_document",
    "compute_layout",
    "create_screenshot",
    "generate_icons_preview",
    "place_icons",
    "symbol_id_for",
]
