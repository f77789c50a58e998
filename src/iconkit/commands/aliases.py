"""Show the alias map restricted to existing icons."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path

from iconkit.config import aliases_path, get_project_root, icons_dir, icons_limit, load_config
from iconkit.icons.loader import read_aliases, read_svgs


def run(args: Namespace) -> None:
    """Run the aliases command: targets are the icons the loader yields (ICONS_LIMIT applies)."""
    path: Path = getattr(args, "path", Path("."))
    project_root = get_project_root(path)
    config = load_config(project_root)
    strict = getattr(args, "strict", None)
    if strict is None:
        strict = bool((config.get("aliases") or {}).get("strict", False))

    icons = read_svgs(icons_dir(project_root, config), limit=icons_limit())
    aliases = read_aliases(aliases_path(project_root, config), [icon.name for icon in icons], strict=strict)
    json.dump(aliases, sys.stdout, indent=2)
    sys.stdout.write("\n")
