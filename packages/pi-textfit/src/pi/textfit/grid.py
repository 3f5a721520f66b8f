"""Bounded 2D buffer of styled characters.

A :class:`Grid` owns a ``width x height`` matrix of :class:`StyledCell`.
Writes are either strict (anything outside the geometry raises
:class:`~pi.textfit.errors.OutOfBoundsError` and nothing is written) or forced
(the input is clipped to the visible portion and the call never fails).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

import wcwidth as _wcwidth

from pi.textfit.errors import InvalidDimensionsError, OutOfBoundsError

S = TypeVar("S")


# ---------------------------------------------------------------------------
# StyledCell
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StyledCell(Generic[S]):
    """One code point plus an opaque style tag.

    The style is never inspected by the layout engine; it is only handed back
    to the caller through :meth:`Grid.render`.
    """

    char: str
    style: S | None = None

    def __post_init__(self) -> None:
        if len(self.char) > 1:
            raise ValueError(f"a cell holds one code point, got {self.char!r}")

    def __str__(self) -> str:
        return self.char


# Cells with no character are transparent: writing one leaves the target
# untouched whatever its style.
EMPTY_CELL: StyledCell = StyledCell("")


def _printable(ch: str) -> str:
    """Replace characters the terminal would interpret (controls) with a space."""
    if _wcwidth.wcwidth(ch) < 0:
        return " "
    return ch


def cells_from_text(text: str, style: S | None = None) -> list[StyledCell[S]]:
    """Expand *text* into one cell per code point, all sharing *style*."""
    return [StyledCell(_printable(ch), style) for ch in text]


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


class Grid(Generic[S]):
    """Fixed-size rectangular buffer that widgets render into."""

    def __init__(self, width: int, height: int, fill_style: S | None = None) -> None:
        if width < 0:
            raise InvalidDimensionsError("width", width)
        if height < 0:
            raise InvalidDimensionsError("height", height)

        self._width = width
        self._height = height
        self._fill_style = fill_style
        self._cells: list[list[StyledCell[S]]] = []
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        """Reset every cell to a blank space in the fill style."""
        blank = StyledCell(" ", self._fill_style)
        self._cells = [[blank] * self._width for _ in range(self._height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> StyledCell[S]:
        """Return the cell at ``(x, y)``."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, 1, self._width, self._height)
        return self._cells[y][x]

    # -- writes --------------------------------------------------------------

    def write(
        self,
        x: int,
        y: int,
        cells: Sequence[StyledCell[S]],
        strict: bool = False,
    ) -> None:
        """Write *cells* horizontally starting at ``(x, y)``.

        In strict mode the whole sequence must fit, otherwise
        :class:`OutOfBoundsError` is raised before anything is written. In
        force mode the sequence is clipped to the visible columns of row *y*
        (a row outside the grid writes nothing).

        Cells without a character (such as :data:`EMPTY_CELL`) are skipped,
        leaving the underlying content visible.
        """
        if not cells:
            return

        if strict:
            if x < 0 or y < 0 or y >= self._height or x + len(cells) > self._width:
                raise OutOfBoundsError(x, y, len(cells), self._width, self._height)
            start, end = 0, len(cells)
        else:
            if y < 0 or y >= self._height:
                return
            start = max(0, -x)
            end = min(len(cells), self._width - x)
            if start >= end:
                return

        row = self._cells[y]
        for i in range(start, end):
            cell = cells[i]
            if not cell.char:
                continue
            row[x + i] = cell

    def write_vertical(
        self,
        x: int,
        y: int,
        cells: Sequence[StyledCell[S]],
        strict: bool = False,
    ) -> None:
        """Write *cells* downwards starting at ``(x, y)``.

        Same strict/force semantics as :meth:`write`, with the roles of the
        axes swapped.
        """
        if not cells:
            return

        if strict:
            if y < 0 or x < 0 or x >= self._width or y + len(cells) > self._height:
                raise OutOfBoundsError(x, y, len(cells), self._width, self._height)
            start, end = 0, len(cells)
        else:
            if x < 0 or x >= self._width:
                return
            start = max(0, -y)
            end = min(len(cells), self._height - y)
            if start >= end:
                return

        for i in range(start, end):
            cell = cells[i]
            if not cell.char:
                continue
            self._cells[y + i][x] = cell

    def write_line(
        self,
        x: int,
        y: int,
        text: str,
        style: S | None = None,
        strict: bool = False,
    ) -> None:
        """Write *text* at ``(x, y)``, one cell per code point."""
        self.write(x, y, cells_from_text(text, style), strict=strict)

    # -- reads ---------------------------------------------------------------

    def lines(self) -> list[str]:
        """Return the plain text of every row, exactly ``width`` chars each."""
        return ["".join(cell.char for cell in row) for row in self._cells]

    def render(self, style_fn: Callable[[str, S | None], str] | None = None) -> list[str]:
        """Return one string per row.

        Consecutive cells sharing a style are grouped into a run and passed to
        ``style_fn(text, style)``, which returns the terminal representation of
        that run (typically the text wrapped in SGR codes). Without a
        ``style_fn`` this is the same as :meth:`lines`.
        """
        if style_fn is None:
            return self.lines()

        result: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            run: list[str] = []
            run_style: S | None = None
            for cell in row:
                if run and cell.style != run_style:
                    parts.append(style_fn("".join(run), run_style))
                    run = []
                if not run:
                    run_style = cell.style
                run.append(cell.char)
            if run:
                parts.append(style_fn("".join(run), run_style))
            result.append("".join(parts))
        return result

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
