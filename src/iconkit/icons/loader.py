"""Icon loader: read a directory of SVG sources into Icon records; resolve aliases."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from lxml import etree

from iconkit.config import BACKGROUND_MARKER
from iconkit.icons.models import Icon
from iconkit.icons.naming import SVG_SUFFIX, get_svg_name, to_pascal_case
from iconkit.options import ConfigurationError

logger = logging.getLogger(__name__)


class SvgParseError(ValueError):
    """Raised when an SVG source file is not well-formed XML."""


def read_svg_directory(directory: Path | str) -> list[str]:
    """
    File names with a .svg suffix, in directory listing order (not sorted).

    Raises FileNotFoundError if the directory does not exist.
    """
    return [p.name for p in Path(directory).iterdir() if p.suffix == SVG_SUFFIX]


def read_svg(file_name: str, directory: Path | str) -> str:
    """Read one SVG source as UTF-8 text."""
    return (Path(directory) / file_name).read_text(encoding="utf-8")


def parse_svg(contents: str, source: Path | str = "<string>") -> etree._Element:
    """Parse SVG markup into an element tree root; raise SvgParseError if malformed."""
    try:
        return etree.fromstring(contents.encode("utf-8"))
    except etree.XMLSyntaxError as e:
        raise SvgParseError(f"Malformed SVG {source}: {e}") from e


def read_svgs(directory: Path | str, limit: int | None = None) -> list[Icon]:
    """
    Load every .svg in directory as an Icon, in listing order.

    limit caps the number of files processed (ICONS_LIMIT). A malformed file
    aborts the whole batch with SvgParseError.
    """
    directory = Path(directory).resolve()
    svg_files = read_svg_directory(directory)
    if limit is not None:
        svg_files = svg_files[:limit]

    icons: list[Icon] = []
    for svg_file in svg_files:
        name = get_svg_name(svg_file)
        path = directory / svg_file
        contents = read_svg(svg_file, directory).strip()
        document = parse_svg(contents.replace(BACKGROUND_MARKER, "", 1), path)
        icons.append(
            Icon(
                name=name,
                pascal_name=to_pascal_case(f"icon {name}"),
                contents=contents,
                document=document,
                path=path,
            )
        )
    logger.debug("Loaded %d icons from %s", len(icons), directory)
    return icons


def read_aliases(
    aliases_path: Path,
    icon_names: Iterable[str],
    strict: bool = False,
) -> dict[str, str]:
    """
    Load alias -> canonical name mapping, keeping only aliases whose target is a known icon.

    Dropped aliases are logged as warnings; with strict=True they raise ConfigurationError.
    Raises FileNotFoundError if the aliases file is missing.
    """
    text = aliases_path.read_text(encoding="utf-8")
    try:
        all_aliases = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error reading {aliases_path.name}: {e}") from e
    if not isinstance(all_aliases, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in all_aliases.items()
    ):
        raise ConfigurationError(
            f"Error reading {aliases_path.name}: expected an object mapping alias names to icon names"
        )

    known = set(icon_names)
    aliases: dict[str, str] = {}
    dropped: list[str] = []
    for alias, target in all_aliases.items():
        if target in known:
            aliases[alias] = target
        else:
            dropped.append(alias)
            logger.warning("Dropping alias %r: target icon %r not found", alias, target)

    if dropped and strict:
        raise ConfigurationError(
            f"Error reading {aliases_path.name}: unresolved aliases: {', '.join(dropped)}"
        )
    return aliases
