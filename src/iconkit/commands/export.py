"""Export icons as JSON: inner markup per icon, or [tag, attributes] nodes."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path

from iconkit.config import (
    compile_options_path,
    get_project_root,
    icons_dir,
    icons_limit,
    load_config,
    tags_path,
)
from iconkit.icons.loader import read_svg, read_svgs
from iconkit.options import get_compile_options
from iconkit.svg.symbols import build_icons_object, icon_nodes


def run(args: Namespace) -> None:
    """Run the export command."""
    path: Path = getattr(args, "path", Path("."))
    project_root = get_project_root(path)
    config = load_config(project_root)
    source_dir = icons_dir(project_root, config)
    options = get_compile_options(
        compile_options_path(project_root, config),
        tags_path=tags_path(project_root, config),
    )
    wanted = set(options.include_icons)

    icons = sorted(read_svgs(source_dir, limit=icons_limit()), key=lambda icon: icon.name)
    if wanted:
        icons = [icon for icon in icons if icon.name in wanted]

    if getattr(args, "nodes", False):
        data = {icon.name: icon_nodes(icon.document) for icon in icons}
    else:
        data = build_icons_object(
            [icon.path.name for icon in icons],
            lambda file_name: read_svg(file_name, source_dir),
        )
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")
