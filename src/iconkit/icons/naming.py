"""Icon naming: file basenames, camelCase and PascalCase identifiers."""

from __future__ import annotations

import re
from pathlib import Path

SVG_SUFFIX = ".svg"

_CAMEL_RE = re.compile(r"^([A-Z])|[\s\-_]+(\w)")
_TOKEN_SPLIT_RE = re.compile(r"[\s\-_]+")


def get_svg_name(file_name: str | Path) -> str:
    """Basename without the .svg suffix."""
    name = Path(file_name).name
    if name.endswith(SVG_SUFFIX):
        return name[: -len(SVG_SUFFIX)]
    return name


def to_camel_case(text: str) -> str:
    """'icon arrow-up' -> 'iconArrowUp'. Characters other than token starts keep their case."""

    def _replace(match: re.Match[str]) -> str:
        if match.group(2):
            return match.group(2).upper()
        return match.group(1).lower()

    return _CAMEL_RE.sub(_replace, text)


def to_pascal_case(text: str) -> str:
    """
    'icon home screen' -> 'IconHomeScreen'.

    Splits on whitespace, hyphens and underscores; each token gets an upper-case
    first letter and a lower-cased remainder.
    """
    tokens = [t for t in _TOKEN_SPLIT_RE.split(text) if t]
    return "".join(t[:1].upper() + t[1:].lower() for t in tokens)
