"""Build a sprite sheet preview of the project's icons."""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path
from typing import Any

from iconkit.config import (
    ICON_TYPES,
    compile_options_path,
    get_project_root,
    icons_dir,
    icons_limit,
    load_config,
    tags_path,
)
from iconkit.icons.loader import read_svg_directory
from iconkit.icons.naming import get_svg_name
from iconkit.options import get_compile_options
from iconkit.preview import generate_icons_preview

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "preview.svg"


def collect_icon_files(
    icons_root: Path,
    include: list[str] | None = None,
    limit: int | None = None,
) -> list[Path]:
    """
    Source files for a preview, sorted by name.

    Style subdirectories (outline/, filled/) are used when present, otherwise the
    icons directory itself. include restricts to those icon names when non-empty;
    limit caps the total number of files returned.
    """
    type_dirs = [icons_root / t for t in ICON_TYPES if (icons_root / t).is_dir()]
    sources = type_dirs or [icons_root]
    wanted = set(include or [])
    files: list[Path] = []
    for directory in sources:
        names = sorted(read_svg_directory(directory), key=get_svg_name)
        if wanted:
            names = [n for n in names if get_svg_name(n) in wanted]
        files.extend(directory / n for n in names)
    if limit is not None:
        files = files[:limit]
    return files


def _pick(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def run(args: Namespace) -> None:
    """Run the preview command."""
    path: Path = getattr(args, "path", Path("."))
    project_root = get_project_root(path)
    config = load_config(project_root)
    preview_cfg = config.get("preview") or {}

    options = get_compile_options(
        compile_options_path(project_root, config),
        tags_path=tags_path(project_root, config),
    )
    files = collect_icon_files(
        icons_dir(project_root, config),
        include=options.include_icons,
        limit=icons_limit(),
    )
    if not files:
        logger.info("No icons to preview under %s", icons_dir(project_root, config))
        return

    output = getattr(args, "output", None) or project_root / DEFAULT_OUTPUT
    stroke = _pick(getattr(args, "stroke", None), _pick(options.stroke_width, preview_cfg.get("stroke", 2)))
    logger.info("Building preview of %d icons", len(files))
    if getattr(args, "dry_run", False):
        print(f"Would write {output} ({len(files)} icons)")
        return

    generate_icons_preview(
        files,
        output,
        columns_count=_pick(getattr(args, "columns", None), preview_cfg.get("columns", 19)),
        padding_outer=_pick(getattr(args, "padding", None), preview_cfg.get("padding_outer", 7)),
        color=_pick(getattr(args, "color", None), preview_cfg.get("color", "#354052")),
        background=_pick(getattr(args, "background", None), preview_cfg.get("background", "#fff")),
        png=_pick(getattr(args, "png", None), preview_cfg.get("png", True)),
        stroke=stroke,
        retina=_pick(getattr(args, "retina", None), preview_cfg.get("retina", True)),
        converter=preview_cfg.get("converter", "rsvg-convert"),
    )
