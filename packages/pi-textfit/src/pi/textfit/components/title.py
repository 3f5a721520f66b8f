"""Title component - centred, decorated heading that wraps into balanced lines."""

from __future__ import annotations

from pi.textfit.compositor import split_fields, truncate_with_suffix
from pi.textfit.config import LayoutConfig, get_config
from pi.textfit.errors import (
    InvalidWidthError,
    OutOfBoundsError,
    TooManyLinesError,
    WordTooLongError,
)
from pi.textfit.estimate import estimate_line_count
from pi.textfit.grid import Grid
from pi.textfit.optimizer import wrap


class Title:
    """Title component - centred, decorated heading.

    Every line is framed as ``*** text ***``. A title too long for the width
    is cut to a single line ending in the ellipsis.
    """

    def __init__(
        self,
        title: str,
        subtitle: str = "",
        style: object | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self._title = title
        self._subtitle = subtitle
        self._style = style
        self._config = config

    @property
    def title(self) -> str:
        return self._title

    @property
    def subtitle(self) -> str:
        return self._subtitle

    def set_subtitle(self, subtitle: str) -> None:
        """Set the subtitle (an empty string removes it)."""
        self._subtitle = subtitle

    def invalidate(self) -> None:
        pass

    def full_title(self) -> str:
        if not self._subtitle:
            return self._title
        return f"{self._title} - {self._subtitle}"

    def fit_lines(self, width: int) -> list[str]:
        """Return the decorated lines for a region *width* columns wide."""
        config = self._config if self._config is not None else get_config()
        decoration = config.title_decoration
        inner_width = width - 2 * (len(decoration) + 1)

        full_title = self.full_title()
        words = split_fields(full_title)
        try:
            count = estimate_line_count(words, inner_width)
            lines = wrap(words, inner_width, count).render()
        except (InvalidWidthError, TooManyLinesError, WordTooLongError):
            lines = [truncate_with_suffix(" ".join(words), inner_width, config.ellipsis)]

        return [f"{decoration} {line} {decoration}" for line in lines]

    def render(self, width: int) -> list[str]:
        result: list[str] = []
        for line in self.fit_lines(width):
            left = (width - len(line)) // 2
            result.append(" " * left + line + " " * (width - left - len(line)))
        return result

    def draw(self, grid: Grid, x: int, y: int, strict: bool = False) -> None:
        """Draw the title centred in the region right of *x*, starting at row *y*."""
        width = grid.width - x
        lines = self.fit_lines(width)

        if strict and y + len(lines) > grid.height:
            raise OutOfBoundsError(x, y, len(lines), grid.width, grid.height)

        for i, line in enumerate(lines):
            start = x + (width - len(line)) // 2
            grid.write_line(start, y + i, line, self._style, strict=strict)
