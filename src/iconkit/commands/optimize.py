"""Optimize icon SVG sources in place."""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from iconkit.config import get_project_root, icons_dir, icons_limit, load_config
from iconkit.icons.loader import read_svgs
from iconkit.svg.optimize import optimize_svg

logger = logging.getLogger(__name__)


def run(args: Namespace) -> None:
    """Run the optimize command: rewrite every icon whose optimized form differs."""
    path: Path = getattr(args, "path", Path("."))
    dry_run = getattr(args, "dry_run", False)
    project_root = get_project_root(path)
    config = load_config(project_root)

    # Parsing every file first aborts before any write if one is malformed
    icons = read_svgs(icons_dir(project_root, config), limit=icons_limit())
    changed = 0
    for i, icon in enumerate(icons, start=1):
        optimized = optimize_svg(icon.contents)
        if optimized.strip() == icon.contents:
            logger.debug("[%d/%d] unchanged: %s", i, len(icons), icon.name)
            continue
        changed += 1
        if dry_run:
            print(f"Would optimize {icon.path}")
        else:
            icon.path.write_text(optimized, encoding="utf-8")
            print(f"Optimized {icon.path}")
    logger.info("%d of %d icons %s", changed, len(icons), "would change" if dry_run else "changed")
