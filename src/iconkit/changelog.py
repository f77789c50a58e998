"""Changelog text for a release: new, fixed and renamed icons."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO


def _inline_list(names: Sequence[str]) -> str:
    return ", ".join(f"`{name}`" for name in names)


def _bullets(names: Sequence[str]) -> list[str]:
    return [f"- `{name}`" for name in names]


def format_changelog(
    new_icons: Sequence[str],
    modified_icons: Sequence[str],
    renamed_icons: Sequence[tuple[str, str]],
    pretty: bool = False,
) -> str:
    """
    Render the changelog block.

    Compact mode puts new and fixed icons on one backtick-quoted, comma-separated
    line each; pretty mode gives them a Markdown heading and one bullet per icon.
    Renamed icons are always one bullet per (old, new) pair. Empty sections are
    omitted.
    """
    lines: list[str] = []

    if new_icons:
        if pretty:
            lines += [f"### {len(new_icons)} new icons:", ""]
            lines += _bullets(new_icons)
        else:
            lines.append(f"{len(new_icons)} new icons: {_inline_list(new_icons)}")
        lines.append("")

    if modified_icons:
        if pretty:
            lines += [f"### {len(modified_icons)} fixed icons:", ""]
            lines += _bullets(modified_icons)
        else:
            lines.append(f"Fixed icons: {_inline_list(modified_icons)}")
        lines.append("")

    if renamed_icons:
        lines.append("Renamed icons:")
        lines += [f"- `{old}` renamed to `{new}`" for old, new in renamed_icons]

    return "\n".join(lines)


def print_changelog(
    new_icons: Sequence[str],
    modified_icons: Sequence[str],
    renamed_icons: Sequence[tuple[str, str]],
    pretty: bool = False,
    file: TextIO | None = None,
) -> None:
    """Write the changelog to file (stdout by default)."""
    text = format_changelog(new_icons, modified_icons, renamed_icons, pretty=pretty)
    if text:
        print(text, file=file or sys.stdout)
