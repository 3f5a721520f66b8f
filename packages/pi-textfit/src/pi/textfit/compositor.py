"""Paragraph composition: fields -> balanced lines -> grid rows.

A paragraph is a list of fields (sentences), each field a list of words. The
first field is laid out against the full width; the following fields are
indented continuation lines. Text that cannot fit degrades to an ellipsis
instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pi.textfit.config import get_config
from pi.textfit.errors import (
    InvalidDimensionsError,
    InvalidWidthError,
    SuffixTooLongError,
    TextFitError,
    TooManyLinesError,
    WordTooLongError,
)
from pi.textfit.estimate import estimate_line_count
from pi.textfit.grid import Grid
from pi.textfit.optimizer import wrap

logger = logging.getLogger(__name__)

Field = Sequence[str]
Paragraph = Sequence[Field]


@dataclass(frozen=True)
class RenderedLine:
    """One output row: its text and the number of leading spaces."""

    text: str
    indent: int = 0

    @property
    def width(self) -> int:
        return self.indent + len(self.text)

    def padded(self, edge: int) -> str:
        """Return the indented text right-padded with spaces up to *edge*."""
        line = " " * self.indent + self.text
        return line + " " * max(0, edge - len(line))


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def split_fields(text: str) -> list[str]:
    """Split *text* into words on any run of whitespace."""
    return text.split()


def paragraph_from_sentences(sentences: Sequence[str]) -> list[list[str]]:
    """Turn sentences into a paragraph, dropping the ones without words."""
    return [fields for fields in (split_fields(s) for s in sentences) if fields]


def truncate_with_suffix(text: str, budget: int, suffix: str | None = None) -> str:
    """Cut *text* to *budget* characters, ending it with *suffix* when cut.

    Text that already fits is returned unchanged. Raises
    :class:`SuffixTooLongError` when the suffix alone exceeds the budget.
    """
    if suffix is None:
        suffix = get_config().ellipsis
    if budget < len(suffix):
        raise SuffixTooLongError(suffix, budget)
    if len(text) <= budget:
        return text
    return text[: budget - len(suffix)] + suffix


def rendered_right_edge(lines: Sequence[RenderedLine]) -> int:
    """Width of the widest rendered line (0 when there are none)."""
    return max((line.width for line in lines), default=0)


# ---------------------------------------------------------------------------
# Field layout
# ---------------------------------------------------------------------------


def _truncate_field(words: Field, width: int, lines_left: int, ellipsis: str) -> list[str]:
    """Fill *lines_left* lines first-fit; the last one ends with the ellipsis."""
    if width < len(ellipsis):
        raise SuffixTooLongError(ellipsis, width)

    result: list[str] = []
    i = 0
    while len(result) < lines_left - 1 and i < len(words):
        if len(words[i]) > width:
            break
        j = i + 1
        length = len(words[i])
        while j < len(words) and length + 1 + len(words[j]) <= width:
            length += 1 + len(words[j])
            j += 1
        result.append(" ".join(words[i:j]))
        i = j

    if i < len(words):
        result.append(truncate_with_suffix(" ".join(words[i:]), width, ellipsis))
    return result


def _layout_field(words: Field, width: int, lines_left: int, ellipsis: str) -> list[str]:
    """Lay out one field in at most *lines_left* lines of *width*."""
    try:
        count = estimate_line_count(words, width)
    except (InvalidWidthError, TooManyLinesError) as exc:
        logger.debug("truncating field: %s", exc)
        return _truncate_field(words, width, lines_left, ellipsis)

    if count > lines_left:
        logger.debug(
            "truncating field: needs %d line(s), %d left", count, lines_left
        )
        return _truncate_field(words, width, lines_left, ellipsis)

    try:
        line_set = wrap(words, width, count)
    except WordTooLongError as exc:
        logger.debug("truncating field: %s", exc)
        return _truncate_field(words, width, lines_left, ellipsis)

    return line_set.render()


def _mark_cut(
    lines: list[RenderedLine],
    rest: Sequence[Field],
    width: int,
    ellipsis: str,
) -> None:
    """Re-truncate the last line so that it shows the text goes on."""
    if not lines:
        return
    last = lines[-1]
    text = " ".join([last.text, *(word for field in rest for word in field)])
    lines[-1] = RenderedLine(
        truncate_with_suffix(text, width - last.indent, ellipsis), last.indent
    )


def _equalize(lines: list[RenderedLine], width: int, height: int, indent: int) -> list[RenderedLine]:
    """Balance line lengths across field boundaries.

    Every rendered line becomes an unbreakable unit and the units are wrapped
    again at the continuation width. A merged line keeps the indent of its
    first unit. When this is not possible the lines are returned unchanged.
    """
    if len(lines) < 2:
        return lines

    units = [line.text for line in lines]
    try:
        line_set = wrap(units, width - indent)
    except TextFitError as exc:
        logger.debug("keeping unbalanced layout: %s", exc)
        return lines

    if line_set.height > height:
        return lines

    result: list[RenderedLine] = []
    position = 0
    for builder in line_set.lines:
        result.append(RenderedLine(builder.render(), lines[position].indent))
        position += len(builder)
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compose_paragraph(
    paragraph: Paragraph,
    width: int,
    height: int,
    indent: int | None = None,
    *,
    ellipsis: str | None = None,
) -> list[RenderedLine]:
    """Lay out one paragraph in a ``width x height`` region.

    Raises :class:`SuffixTooLongError` when even the ellipsis does not fit;
    every other overflow is resolved by truncating.
    """
    config = get_config()
    if indent is None:
        indent = config.indent
    if ellipsis is None:
        ellipsis = config.ellipsis

    if width < 0:
        raise InvalidDimensionsError("width", width)
    if height < 0:
        raise InvalidDimensionsError("height", height)
    if indent < 0:
        raise InvalidDimensionsError("indent", indent)

    fields_list = [list(fields) for fields in paragraph if fields]
    result: list[RenderedLine] = []

    for n, fields in enumerate(fields_list):
        line_indent = 0 if n == 0 else indent
        lines_left = height - len(result)
        if lines_left <= 0:
            logger.debug("no room left for %d field(s)", len(fields_list) - n)
            _mark_cut(result, fields_list[n:], width, ellipsis)
            break

        for text in _layout_field(fields, width - line_indent, lines_left, ellipsis):
            result.append(RenderedLine(text, line_indent))

    return _equalize(result, width, height, indent)


def compose_paragraphs(
    paragraphs: Sequence[Paragraph],
    width: int,
    height: int,
    indent: int | None = None,
    *,
    ellipsis: str | None = None,
) -> list[RenderedLine]:
    """Lay out *paragraphs* top to bottom, sharing a ``width x height`` region.

    Paragraphs that start below the last available row are dropped.
    """
    result: list[RenderedLine] = []
    for n, paragraph in enumerate(paragraphs):
        lines_left = height - len(result)
        if lines_left <= 0:
            logger.debug("dropping %d paragraph(s) that do not fit", len(paragraphs) - n)
            break
        result.extend(
            compose_paragraph(paragraph, width, lines_left, indent, ellipsis=ellipsis)
        )
    return result


def draw_lines(
    grid: Grid,
    x: int,
    y: int,
    lines: Sequence[RenderedLine],
    style: object | None = None,
    strict: bool = False,
) -> None:
    """Write *lines* into *grid*, one row each, starting at ``(x, y)``.

    Rows are padded with spaces up to the furthest right edge so stale cells
    underneath are blanked.
    """
    edge = rendered_right_edge(lines)
    for i, line in enumerate(lines):
        grid.write_line(x, y + i, line.padded(edge), style, strict=strict)
