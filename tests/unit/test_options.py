"""Unit tests for compile options (schema validation, category and exclusion resolution)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from iconkit.options import (
    CompileOptions,
    ConfigurationError,
    get_compile_options,
    parse_compile_options,
)


@pytest.fixture
def tags_file(tmp_path: Path) -> Path:
    path = tmp_path / "tags.json"
    path.write_text(
        json.dumps(
            {
                "home": {"category": "Buildings"},
                "building": {"category": "Buildings"},
                "user": {"category": "System"},
                "user-off": {"category": "System"},
                "misc": {"tags": ["no category"]},
            }
        ),
        encoding="utf-8",
    )
    return path


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "compile-options.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# --- get_compile_options ---


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    options = get_compile_options(tmp_path / "compile-options.json")
    assert options == CompileOptions()
    assert options.include_icons == []
    assert options.stroke_width is None
    assert options.font_forge == "fontforge"


def test_include_icons_and_overrides(tmp_path: Path) -> None:
    path = _write(tmp_path, {"includeIcons": ["home", "user"], "strokeWidth": "1.5", "fontForge": "/opt/ff"})
    options = get_compile_options(path)
    assert options.include_icons == ["home", "user"]
    assert options.stroke_width == "1.5"
    assert options.font_forge == "/opt/ff"


def test_include_icons_deduplicated(tmp_path: Path) -> None:
    path = _write(tmp_path, {"includeIcons": ["home", "user", "home"]})
    assert get_compile_options(path).include_icons == ["home", "user"]


def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "compile-options.json"
    path.write_text('{"includeIcons": [', encoding="utf-8")
    with pytest.raises(ConfigurationError, match="^Error reading compile-options.json: "):
        get_compile_options(path)


def test_unknown_keys_ignored(tmp_path: Path) -> None:
    path = _write(tmp_path, {"somethingElse": 1, "includeIcons": ["home"]})
    assert get_compile_options(path).include_icons == ["home"]


# --- parse_compile_options ---


def test_not_an_object() -> None:
    with pytest.raises(ConfigurationError, match="does not contain a JSON object"):
        parse_compile_options(["home"])


def test_include_icons_wrong_type() -> None:
    with pytest.raises(ConfigurationError, match="property includeIcons"):
        parse_compile_options({"includeIcons": "home"})


@pytest.mark.parametrize(("value", "expected"), [(1, "1"), (1.5, "1.5"), (2.0, "2"), ("1.75", "1.75"), (None, None)])
def test_stroke_width_values(value: object, expected: str | None) -> None:
    assert parse_compile_options({"strokeWidth": value}).stroke_width == expected


@pytest.mark.parametrize("value", [True, [1], {"w": 1}])
def test_stroke_width_wrong_type(value: object) -> None:
    with pytest.raises(ConfigurationError, match="property strokeWidth"):
        parse_compile_options({"strokeWidth": value})


def test_exclude_off_icons() -> None:
    options = parse_compile_options({"includeIcons": ["user", "user-off", "offset"], "excludeOffIcons": True})
    assert options.include_icons == ["user", "offset"]


def test_exclude_icons_patterns() -> None:
    options = parse_compile_options(
        {"includeIcons": ["home", "user", "user-off", "arrow-up"], "excludeIcons": ["user*", "arrow-up"]}
    )
    assert options.include_icons == ["home"]


def test_include_categories_from_tags(tags_file: Path) -> None:
    """Categories are capitalized and appended in tags order after explicit icons."""
    options = parse_compile_options(
        {"includeIcons": ["user"], "includeCategories": ["buildings", "system"]},
        tags_path=tags_file,
    )
    assert options.include_icons == ["user", "home", "building", "user-off"]


def test_include_categories_string(tags_file: Path) -> None:
    options = parse_compile_options({"includeCategories": "System"}, tags_path=tags_file)
    assert options.include_icons == ["user", "user-off"]


def test_categories_then_exclusions(tags_file: Path) -> None:
    options = parse_compile_options(
        {"includeCategories": ["System", "Buildings"], "excludeIcons": ["building"], "excludeOffIcons": True},
        tags_path=tags_file,
    )
    assert options.include_icons == ["user", "home"]


def test_include_categories_without_tags(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="includeCategories"):
        parse_compile_options({"includeCategories": ["System"]}, tags_path=tmp_path / "tags.json")


@pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
def test_exclude_off_icons_requires_boolean(value: object) -> None:
    with pytest.raises(ConfigurationError, match="property excludeOffIcons"):
        parse_compile_options({"includeIcons": ["user-off"], "excludeOffIcons": value})


@pytest.mark.parametrize("key", ["includeIcons", "includeCategories", "excludeIcons", "fontForge"])
def test_null_is_a_type_error(key: str) -> None:
    with pytest.raises(ConfigurationError, match=f"property {key}"):
        parse_compile_options({key: None})


def test_stroke_width_null_means_unset() -> None:
    assert parse_compile_options({"strokeWidth": None}).stroke_width is None
