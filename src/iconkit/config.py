"""Configuration: project file layout, defaults, and config loading (global + project overrides)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
PROJECT_CONFIG_FILENAME = "iconkit.json"

# Environment override capping how many source icons are processed
ICONS_LIMIT_ENV = "ICONS_LIMIT"

# Full-canvas background rectangle that icon sources carry for editors
BACKGROUND_MARKER = '<path stroke="none" d="M0 0h24v24H0z" fill="none"/>'

# Style variants laid out as subdirectories of the icons directory
ICON_TYPES = ("outline", "filled")


def _global_config_dir() -> Path:
    return Path.home() / ".iconkit"


def global_config_path() -> Path:
    """Path to global config file (~/.iconkit/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "icons_dir": "icons",
        "aliases_file": "aliases.json",
        "compile_options_file": "compile-options.json",
        "tags_file": "tags.json",
        "preview": {
            "columns": 19,
            "padding_outer": 7,
            "color": "#354052",
            "background": "#fff",
            "png": True,
            "stroke": 2,
            "retina": True,
            "converter": "rsvg-convert",
        },
        "aliases": {
            "strict": False,
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        logger.warning("Ignoring unreadable config file %s", path)
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.iconkit/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/iconkit.json)."""
    return project_root / PROJECT_CONFIG_FILENAME


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.iconkit/config.json) + project overrides.

    If project_root is None, only global config (and defaults) are used.
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config dict as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def lookup(config: dict[str, Any], dotted_key: str) -> Any:
    """Value at a dotted key such as "preview.columns"; KeyError if any part is missing."""
    node: Any = config
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            raise KeyError(dotted_key)
        node = node[part]
    return node


def update_config_file(path: Path, dotted_key: str, value: Any) -> None:
    """
    Set one dotted key in the JSON file at path, keeping its other settings.

    A missing or unreadable file starts from an empty object. Non-object values
    along the key are replaced by objects.
    """
    data = _load_json(path) or {}
    *parents, leaf = dotted_key.split(".")
    node = data
    for part in parents:
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    node[leaf] = value
    save_config(path, data)


def get_project_root(path: Path) -> Path:
    """Resolve path to absolute. If it is a file, use its parent."""
    resolved = path.resolve()
    if resolved.is_file():
        return resolved.parent
    return resolved


def resolve_path(path: Path) -> Path:
    """Resolve path to absolute, normalized."""
    return path.resolve()


def icons_dir(project_root: Path, config: dict[str, Any]) -> Path:
    return project_root / config.get("icons_dir", "icons")


def aliases_path(project_root: Path, config: dict[str, Any]) -> Path:
    return project_root / config.get("aliases_file", "aliases.json")


def compile_options_path(project_root: Path, config: dict[str, Any]) -> Path:
    return project_root / config.get("compile_options_file", "compile-options.json")


def tags_path(project_root: Path, config: dict[str, Any]) -> Path:
    return project_root / config.get("tags_file", "tags.json")


def icons_limit(environ: dict[str, str] | None = None) -> int | None:
    """
    Icon-count cap from ICONS_LIMIT, or None when unset.

    Values that are not non-negative integers are ignored with a warning.
    """
    env = os.environ if environ is None else environ
    raw = (env.get(ICONS_LIMIT_ENV) or "").strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", ICONS_LIMIT_ENV, raw)
        return None
    if limit < 0:
        logger.warning("Ignoring %s=%r: negative", ICONS_LIMIT_ENV, raw)
        return None
    return limit
