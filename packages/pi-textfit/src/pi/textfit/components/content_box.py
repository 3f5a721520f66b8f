"""ContentBox component - several paragraphs stacked in one region."""

from __future__ import annotations

from typing import Sequence

from pi.textfit.compositor import (
    RenderedLine,
    compose_paragraphs,
    draw_lines,
    paragraph_from_sentences,
)
from pi.textfit.config import LayoutConfig, get_config
from pi.textfit.errors import OutOfBoundsError
from pi.textfit.grid import Grid


class ContentBox:
    """ContentBox component - several paragraphs stacked in one region.

    Each paragraph is a list of sentences. Paragraphs that start below the
    bottom of the region are not drawn.
    """

    def __init__(
        self,
        paragraphs: Sequence[Sequence[str]] = (),
        style: object | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self._paragraphs = [list(p) for p in paragraphs]
        self._style = style
        self._config = config

    def add_paragraph(self, *sentences: str) -> None:
        self._paragraphs.append(list(sentences))

    def clear(self) -> None:
        self._paragraphs = []

    def invalidate(self) -> None:
        pass

    def compose(self, width: int, height: int) -> list[RenderedLine]:
        config = self._config if self._config is not None else get_config()
        paragraphs = [paragraph_from_sentences(p) for p in self._paragraphs]
        return compose_paragraphs(
            [p for p in paragraphs if p],
            width,
            height,
            config.indent,
            ellipsis=config.ellipsis,
        )

    def render(self, width: int) -> list[str]:
        words = sum(len(s.split()) for p in self._paragraphs for s in p)
        if words == 0:
            return []
        return [line.padded(width) for line in self.compose(width, words)]

    def draw(self, grid: Grid, x: int, y: int, strict: bool = False) -> None:
        width = grid.width - x
        height = grid.height - y
        if width <= 0 or height <= 0:
            if strict:
                raise OutOfBoundsError(x, y, 0, grid.width, grid.height)
            return

        draw_lines(grid, x, y, self.compose(width, height), self._style, strict=strict)
