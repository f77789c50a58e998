"""Show resolved compile options."""

from __future__ import annotations

import dataclasses
import json
import sys
from argparse import Namespace
from pathlib import Path

from iconkit.config import compile_options_path, get_project_root, load_config, tags_path
from iconkit.options import get_compile_options


def run(args: Namespace) -> None:
    """Run the options command."""
    path: Path = getattr(args, "path", Path("."))
    project_root = get_project_root(path)
    config = load_config(project_root)
    source = compile_options_path(project_root, config)
    options = get_compile_options(source, tags_path=tags_path(project_root, config))
    note = source.as_posix() if source.is_file() else "defaults"
    print(f"# Compile options: {note}")
    json.dump(dataclasses.asdict(options), sys.stdout, indent=2)
    sys.stdout.write("\n")
