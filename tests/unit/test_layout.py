"""Unit tests for sprite sheet grid layout."""

from __future__ import annotations

import pytest

from iconkit.preview.layout import GridLayout, SpriteEntry, compute_layout, place_icons


def test_single_icon_spans_full_column_width() -> None:
    layout = compute_layout(1)
    assert layout == GridLayout(columns=19, rows=1, width=830, height=38)


def test_partial_last_row() -> None:
    layout = compute_layout(3, columns_count=2, padding_outer=7)
    assert (layout.rows, layout.width, layout.height) == (2, 82, 82)


def test_exact_rows() -> None:
    assert compute_layout(38).rows == 2
    assert compute_layout(39).rows == 3


def test_zero_padding() -> None:
    layout = compute_layout(4, columns_count=4, padding_outer=0)
    assert (layout.width, layout.height) == (156, 24)


@pytest.mark.parametrize(("count", "columns"), [(0, 19), (3, 0)])
def test_invalid_layout(count: int, columns: int) -> None:
    with pytest.raises(ValueError):
        compute_layout(count, columns)


def test_place_icons_wraps_rows() -> None:
    entries = place_icons(["a", "b", "c"], columns_count=2, padding_outer=7)
    assert entries == [
        SpriteEntry("a", 7, 7),
        SpriteEntry("b", 51, 7),
        SpriteEntry("c", 7, 51),
    ]
    assert all(e.width == 24 and e.height == 24 for e in entries)


def test_place_icons_fit_inside_canvas() -> None:
    ids = [f"icon-{i}" for i in range(45)]
    layout = compute_layout(len(ids), 19, 7)
    for e in place_icons(ids, 19, 7):
        assert e.x + e.width + 7 <= layout.width
        assert e.y + e.height + 7 <= layout.height


def test_place_icons_empty() -> None:
    assert place_icons([]) == []
