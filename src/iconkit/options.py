"""Compile options: typed schema for compile-options.json, merged with defaults."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from iconkit.utils.ignore import filter_names

logger = logging.getLogger(__name__)

DEFAULT_FONT_FORGE = "fontforge"
OFF_SUFFIX = "-off"


class ConfigurationError(Exception):
    """Raised when a JSON input file (compile options, aliases) has the wrong type or shape."""


@dataclass(frozen=True)
class CompileOptions:
    """Resolved compile options."""

    include_icons: list[str] = field(default_factory=list)
    stroke_width: Optional[str] = None
    font_forge: str = DEFAULT_FONT_FORGE


class CompileOptionsFile(BaseModel):
    """Shape of compile-options.json. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # null is a type error for every key but strokeWidth
    include_icons: list[str] = Field(default_factory=list, alias="includeIcons")
    include_categories: list[str] = Field(default_factory=list, alias="includeCategories")
    exclude_icons: list[str] = Field(default_factory=list, alias="excludeIcons")
    exclude_off_icons: StrictBool = Field(default=False, alias="excludeOffIcons")
    stroke_width: Optional[str] = Field(default=None, alias="strokeWidth")
    font_forge: str = Field(default=DEFAULT_FONT_FORGE, alias="fontForge")

    @field_validator("include_categories", mode="before")
    @classmethod
    def split_categories(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("stroke_width", mode="before")
    @classmethod
    def stringify_stroke_width(cls, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValueError("must be a string or number")
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)


def _describe_validation_error(error: ValidationError) -> str:
    """One line per offending property, e.g. "property includeIcons: Input should be a valid list"."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "(root)"
        parts.append(f"property {loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _load_tags(tags_path: Path | None, source: str) -> dict[str, Any]:
    if tags_path is None or not tags_path.is_file():
        raise ConfigurationError(
            f"Error reading {source}: property includeCategories requires a tags file"
            + (f" ({tags_path})" if tags_path is not None else "")
        )
    try:
        tags = json.loads(tags_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error reading {source}: cannot read {tags_path.name}: {e}") from e
    if not isinstance(tags, dict):
        raise ConfigurationError(f"Error reading {source}: {tags_path.name} is not a JSON object")
    return tags


def parse_compile_options(
    data: Any,
    source: str = "compile-options.json",
    tags_path: Path | None = None,
) -> CompileOptions:
    """
    Validate a decoded compile-options object and resolve it against the defaults.

    Order of application: includeIcons, includeCategories (icons from tags.json
    whose category matches, appended), excludeIcons (name patterns),
    excludeOffIcons (drops names ending in "-off").
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Error reading {source}: file does not contain a JSON object")
    try:
        parsed = CompileOptionsFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Error reading {source}: {_describe_validation_error(e)}") from e

    include = list(dict.fromkeys(parsed.include_icons))

    if parsed.include_categories:
        tags = _load_tags(tags_path, source)
        for category in parsed.include_categories:
            category = category[:1].upper() + category[1:]
            for icon, info in tags.items():
                if isinstance(info, dict) and info.get("category") == category and icon not in include:
                    include.append(icon)

    if parsed.exclude_icons:
        include = filter_names(include, parsed.exclude_icons)

    if parsed.exclude_off_icons:
        include = [icon for icon in include if not icon.endswith(OFF_SUFFIX)]

    return CompileOptions(
        include_icons=include,
        stroke_width=parsed.stroke_width,
        font_forge=parsed.font_forge,
    )


def get_compile_options(path: Path, tags_path: Path | None = None) -> CompileOptions:
    """
    Load compile options from path, or defaults when the file does not exist.

    Raises ConfigurationError ("Error reading <file>: ...") on unreadable or
    malformed JSON and on any property of the wrong type.
    """
    if not path.is_file():
        logger.debug("No compile options at %s; using defaults", path)
        return CompileOptions()
    source = path.name
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error reading {source}: {e}") from e
    return parse_compile_options(data, source=source, tags_path=tags_path)
