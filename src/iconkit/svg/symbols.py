"""Symbol rewriting and inner-markup extraction for embedding icons."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Iterable

from lxml import etree

from iconkit.icons.naming import get_svg_name
from iconkit.svg.path import optimize_path

_COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL | re.IGNORECASE)
_INDENT_RE = re.compile(r"\n\s*")
_BETWEEN_TAGS_RE = re.compile(r">\s+<")
_WHITESPACE_RE = re.compile(r"\s+")


def create_svg_symbol(svg: str, name: str, stroke: str | int | float) -> str:
    """
    Rewrite a standalone 24x24 icon into a single-line <symbol id="name">.

    Drops the explicit size, swaps the default stroke-width for `stroke`,
    strips comments and collapses indentation.
    """
    # Collapse first so multi-line openers match the attribute replacements
    symbol = _INDENT_RE.sub(" ", svg)
    symbol = (
        symbol.replace("<svg", f'<symbol id="{name}"', 1)
        .replace(' width="24" height="24"', "", 1)
        .replace(' stroke-width="2"', f' stroke-width="{stroke}"', 1)
        .replace("</svg>", "</symbol>", 1)
    )
    symbol = _COMMENT_RE.sub("", symbol)
    return symbol.strip()


def _strip_namespaces(root: etree._Element) -> None:
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = etree.QName(element).localname
    etree.cleanup_namespaces(root)


def get_svg_contents(svg: str) -> str:
    """Inner markup of the <svg> root, without comments, whitespace collapsed."""
    parser = etree.XMLParser(remove_comments=True)
    root = etree.fromstring(svg.encode("utf-8"), parser)
    _strip_namespaces(root)
    inner = (root.text or "") + "".join(
        etree.tostring(child, encoding="unicode") for child in root
    )
    inner = _BETWEEN_TAGS_RE.sub("><", inner)
    return _WHITESPACE_RE.sub(" ", inner).strip()


def build_icons_object(
    svg_files: Iterable[str | Path],
    get_svg: Callable[[str | Path], str],
) -> dict[str, str]:
    """Map icon name to the inner markup of its SVG, in input order."""
    icons: dict[str, str] = {}
    for svg_file in svg_files:
        name = get_svg_name(svg_file)
        icons[name] = get_svg_contents(get_svg(svg_file))
    return icons


def icon_nodes(document: etree._Element) -> list[list]:
    """
    Top-level drawing elements of a parsed icon as [tag, attributes] pairs.

    Path data is canonicalized with optimize_path. Comments and other
    non-element children are skipped.
    """
    nodes: list[list] = []
    for child in document:
        if not isinstance(child.tag, str):
            continue
        attrs = dict(child.attrib)
        if "d" in attrs:
            attrs["d"] = optimize_path(attrs["d"])
        nodes.append([etree.QName(child).localname, attrs])
    return nodes
