"""MultiLineText component - one paragraph laid out with balanced lines."""

from __future__ import annotations

from pi.textfit.compositor import (
    RenderedLine,
    compose_paragraph,
    draw_lines,
    paragraph_from_sentences,
)
from pi.textfit.config import LayoutConfig, get_config
from pi.textfit.errors import OutOfBoundsError
from pi.textfit.grid import Grid


class MultiLineText:
    """MultiLineText component - one paragraph laid out with balanced lines.

    The first sentence starts at the left edge; each following sentence is an
    indented continuation.
    """

    def __init__(
        self,
        *sentences: str,
        style: object | None = None,
        max_height: int | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self._sentences = list(sentences)
        self._style = style
        self._max_height = max_height
        self._config = config

        # Cache
        self._cached_width: int | None = None
        self._cached_lines: list[str] | None = None

    @property
    def sentences(self) -> list[str]:
        return list(self._sentences)

    def append_sentence(self, text: str) -> None:
        self._sentences.append(text)
        self.invalidate()

    def invalidate(self) -> None:
        self._cached_width = None
        self._cached_lines = None

    def _layout_config(self) -> LayoutConfig:
        return self._config if self._config is not None else get_config()

    def compose(self, width: int, height: int) -> list[RenderedLine]:
        config = self._layout_config()
        return compose_paragraph(
            paragraph_from_sentences(self._sentences),
            width,
            height,
            config.indent,
            ellipsis=config.ellipsis,
        )

    def render(self, width: int) -> list[str]:
        if self._cached_lines is not None and self._cached_width == width:
            return list(self._cached_lines)

        paragraph = paragraph_from_sentences(self._sentences)
        if not paragraph:
            result: list[str] = []
        else:
            # Without a height limit every word may get its own line.
            height = self._max_height
            if height is None:
                height = sum(len(fields) for fields in paragraph)
            result = [line.padded(width) for line in self.compose(width, height)]

        self._cached_width = width
        self._cached_lines = result
        return list(result)

    def draw(self, grid: Grid, x: int, y: int, strict: bool = False) -> None:
        """Lay the text out in the region right of *x* and below *y*."""
        width = grid.width - x
        height = grid.height - y
        if self._max_height is not None:
            height = min(height, self._max_height)

        if width <= 0 or height <= 0:
            if strict:
                raise OutOfBoundsError(x, y, 0, grid.width, grid.height)
            return

        draw_lines(grid, x, y, self.compose(width, height), self._style, strict=strict)
