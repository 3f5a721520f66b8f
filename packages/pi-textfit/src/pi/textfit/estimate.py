"""Closed-form estimate of the number of lines a text needs."""

from __future__ import annotations

from typing import Sequence

from pi.textfit.errors import InvalidWidthError, TooManyLinesError


def total_length(words: Sequence[str]) -> int:
    """Length of *words* joined by single spaces."""
    if not words:
        return 0
    return sum(len(word) for word in words) + len(words) - 1


def estimate_line_count(words: Sequence[str], width: int) -> int:
    """Estimate the minimum number of lines needed to fit *words* in *width*.

    With ``Tl`` the length of the joined text and ``x`` the number of line
    breaks, every break removes one separator, so the text fits when

        (Tl - x) / (x + 1) <= width

    which solves to ``x >= ceil((Tl - width) / (width + 1))``. The line count
    is ``x + 1``.

    For ``"Hello World, this is a test"`` (``Tl = 27``) at width 12 this gives
    ``ceil(15 / 13) + 1 = 3`` lines.

    Raises :class:`InvalidWidthError` for ``width <= 0`` and
    :class:`TooManyLinesError` when the estimate exceeds the number of words
    (a line cannot hold a fraction of a word). The error carries the estimate.
    """
    if width <= 0:
        raise InvalidWidthError(width)
    if not words:
        return 0

    tl = total_length(words)
    # ceil division on integers
    breaks = -((width - tl) // (width + 1))
    line_count = breaks + 1

    if line_count > len(words):
        raise TooManyLinesError(line_count, len(words))
    return line_count
