"""Show, query or edit configuration (CLI command)."""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from iconkit.config import (
    get_project_root,
    global_config_path,
    load_config,
    lookup,
    project_config_path,
    update_config_file,
)

logger = logging.getLogger(__name__)


def _decode(raw: str):
    # Numbers, booleans, null and quoted strings decode as JSON; anything else is a bare string
    raw = raw.strip()
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def run(args: Namespace) -> None:
    """Run the config command: --show, --get KEY or --set KEY=VALUE [--global]."""
    project_root = get_project_root(Path(getattr(args, "path", Path("."))))
    show = getattr(args, "show", False)
    get_key = getattr(args, "get_key", None)
    assignment = getattr(args, "set_key", None)

    if not (show or get_key or assignment):
        _fail("specify --show, --get KEY or --set KEY=VALUE.")

    if assignment:
        key, sep, raw = assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            _fail("--set requires KEY=VALUE (e.g. preview.columns=12).")
        value = _decode(raw)
        if getattr(args, "global_", False):
            target, scope = global_config_path(), "global"
        else:
            target, scope = project_config_path(project_root), f"project ({project_root.as_posix()})"
        update_config_file(target, key, value)
        logger.debug("Updated %s", target)
        print(f"Set {key} = {json.dumps(value)} in {scope} config.")

    config = load_config(project_root)
    if get_key:
        try:
            print(json.dumps(lookup(config, get_key)))
        except KeyError:
            _fail(f"unknown config key: {get_key}")
    if show:
        print(f"# Config: defaults + global + project ({project_root.as_posix()})")
        print(json.dumps(config, indent=2))
