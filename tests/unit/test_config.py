"""Unit tests for config (defaults, merging, project paths, ICONS_LIMIT)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from iconkit.config import (
    ICONS_LIMIT_ENV,
    aliases_path,
    compile_options_path,
    default_config,
    get_project_root,
    global_config_path,
    icons_dir,
    icons_limit,
    load_config,
    lookup,
    project_config_path,
    resolve_path,
    save_config,
    tags_path,
    update_config_file,
)


def test_default_config() -> None:
    cfg = default_config()
    assert cfg["icons_dir"] == "icons"
    assert cfg["preview"]["columns"] == 19
    assert cfg["preview"]["padding_outer"] == 7
    assert cfg["preview"]["color"] == "#354052"
    assert cfg["aliases"]["strict"] is False


def test_resolve_path(tmp_path: Path) -> None:
    p = tmp_path / "sub" / ".." / "sub"
    assert resolve_path(p) == (tmp_path / "sub").resolve()


def test_get_project_root_file(tmp_path: Path) -> None:
    f = tmp_path / "icons.txt"
    f.write_text("x")
    assert get_project_root(f) == tmp_path.resolve()


def test_get_project_root_dir(tmp_path: Path) -> None:
    d = tmp_path / "dir"
    d.mkdir()
    assert get_project_root(d) == d.resolve()


def test_project_paths(tmp_path: Path) -> None:
    cfg = default_config()
    assert project_config_path(tmp_path) == tmp_path / "iconkit.json"
    assert icons_dir(tmp_path, cfg) == tmp_path / "icons"
    assert aliases_path(tmp_path, cfg) == tmp_path / "aliases.json"
    assert compile_options_path(tmp_path, cfg) == tmp_path / "compile-options.json"
    assert tags_path(tmp_path, cfg) == tmp_path / "tags.json"


def test_load_config_project_overrides_global(tmp_path: Path) -> None:
    """Project values win over global ones; untouched defaults survive the merge."""
    save_config(global_config_path(), {"preview": {"columns": 10, "color": "#000"}})
    project = tmp_path / "project"
    project.mkdir()
    save_config(project_config_path(project), {"preview": {"columns": 12}, "icons_dir": "src/icons"})
    cfg = load_config(project)
    assert cfg["preview"]["columns"] == 12
    assert cfg["preview"]["color"] == "#000"
    assert cfg["preview"]["padding_outer"] == 7
    assert cfg["icons_dir"] == "src/icons"


def test_load_config_without_project_uses_global_only(tmp_path: Path) -> None:
    save_config(global_config_path(), {"icons_dir": "svg"})
    assert load_config(None)["icons_dir"] == "svg"


def test_load_config_invalid_project_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    project_config_path(tmp_path).write_text("{oops", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="iconkit.config"):
        cfg = load_config(tmp_path)
    assert cfg == default_config()
    assert "iconkit.json" in caplog.text


def test_save_config_creates_parents(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "config.json"
    save_config(path, {"k": 1})
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": 1}


# --- icons_limit ---


def test_icons_limit_unset() -> None:
    assert icons_limit({}) is None
    assert icons_limit({ICONS_LIMIT_ENV: "  "}) is None


def test_icons_limit_value() -> None:
    assert icons_limit({ICONS_LIMIT_ENV: "25"}) == 25
    assert icons_limit({ICONS_LIMIT_ENV: "0"}) == 0


@pytest.mark.parametrize("raw", ["ten", "-3", "1.5"])
def test_icons_limit_invalid_ignored(raw: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="iconkit.config"):
        assert icons_limit({ICONS_LIMIT_ENV: raw}) is None
    assert ICONS_LIMIT_ENV in caplog.text


def test_icons_limit_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ICONS_LIMIT_ENV, "3")
    assert icons_limit() == 3


# --- lookup / update_config_file ---


def test_lookup() -> None:
    cfg = default_config()
    assert lookup(cfg, "preview.columns") == 19
    assert lookup(cfg, "aliases") == {"strict": False}
    with pytest.raises(KeyError):
        lookup(cfg, "preview.columns.extra")
    with pytest.raises(KeyError):
        lookup(cfg, "nope")


def test_update_config_file_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "iconkit.json"
    save_config(path, {"icons_dir": "svg", "preview": {"color": "#000"}})
    update_config_file(path, "preview.columns", 12)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "icons_dir": "svg",
        "preview": {"color": "#000", "columns": 12},
    }


def test_update_config_file_replaces_scalar_parent(tmp_path: Path) -> None:
    path = tmp_path / "iconkit.json"
    save_config(path, {"preview": 3})
    update_config_file(path, "preview.png", False)
    assert json.loads(path.read_text(encoding="utf-8")) == {"preview": {"png": False}}


def test_update_config_file_creates_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    update_config_file(path, "logging.level", "DEBUG")
    assert json.loads(path.read_text(encoding="utf-8")) == {"logging": {"level": "DEBUG"}}
