"""Tests for the ContentBox component."""

from __future__ import annotations

import pytest

from pi.textfit import ContentBox, Grid, OutOfBoundsError


class TestContentBox:
    """Paragraphs stacked top to bottom."""

    def test_paragraphs_render_in_order(self) -> None:
        box = ContentBox([["First paragraph"], ["Second one"]])
        assert box.render(20) == [
            "First paragraph     ",
            "Second one          ",
        ]

    def test_paragraph_sentences_are_indented(self) -> None:
        box = ContentBox([["aaaa bbbb", "cccc dddd"]])
        assert box.render(10) == [
            "aaaa bbbb ",
            "   cccc   ",
            "   dddd   ",
        ]

    def test_empty_box(self) -> None:
        assert ContentBox().render(10) == []
        assert ContentBox([["  "]]).render(10) == []

    def test_add_paragraph_and_clear(self) -> None:
        box = ContentBox()
        box.add_paragraph("Hello")
        box.add_paragraph("World")
        assert box.render(5) == ["Hello", "World"]
        box.clear()
        assert box.render(5) == []

    def test_blank_paragraphs_are_skipped(self) -> None:
        box = ContentBox([["Hello"], ["   "], ["World"]])
        assert box.render(5) == ["Hello", "World"]

    def test_draw_drops_paragraphs_below_region(self) -> None:
        grid = Grid(20, 1)
        ContentBox([["First paragraph"], ["Second one"]]).draw(grid, 0, 0)
        assert grid.lines() == ["First paragraph     "]

    def test_draw_at_offset(self) -> None:
        grid = Grid(8, 3)
        ContentBox([["ab"], ["cd"]]).draw(grid, 1, 1)
        assert grid.lines() == [" " * 8, " ab     ", " cd     "]

    def test_empty_region_raises_in_strict_mode(self) -> None:
        grid = Grid(4, 2)
        with pytest.raises(OutOfBoundsError):
            ContentBox([["ab"]]).draw(grid, 4, 0, strict=True)
        ContentBox([["ab"]]).draw(grid, 4, 0)
        assert grid.lines() == ["    ", "    "]
