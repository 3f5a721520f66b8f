"""Line balancing by local search over "shift up" moves.

The greedy packer in :mod:`pi.textfit.line_set` favours the last line, so
``"Hi You They"`` at width 8 comes out as::

    Hi
    You They

while ``Hi You`` / ``They`` is visually better. Starting from the greedy
layout, the optimizer explores layouts reachable by moving the first word of
a line to the end of the line above, and keeps the one whose line lengths
have the lowest SQM (sum of squared deviations from the mean).

Only layouts that improve on the layout they were derived from are explored
further, and at most ``height * len(words)`` layouts are expanded, so a
search visits ``O(height**2 * len(words))`` layouts at most.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Sequence

from pi.textfit.errors import (
    InvalidDimensionsError,
    InvalidWidthError,
    NoCandidateFoundError,
    WordTooLongError,
)
from pi.textfit.estimate import estimate_line_count
from pi.textfit.line_set import LineSet

logger = logging.getLogger(__name__)


def _sqm_key(lengths: Sequence[int]) -> int:
    """``n`` times the SQM, computed exactly on integers."""
    n = len(lengths)
    if n == 0:
        return 0
    total = sum(lengths)
    return n * sum(x * x for x in lengths) - total * total


def sqm(lengths: Sequence[int]) -> float:
    """Sum of squared deviations of *lengths* from their mean.

    ``sqm([2, 8]) == 18.0`` and ``sqm([6, 4]) == 2.0``. Zero means every line
    has the same length.
    """
    if not lengths:
        return 0.0
    return _sqm_key(lengths) / len(lengths)


@dataclass
class WrapCandidate:
    """A layout under consideration, tagged with its score."""

    line_set: LineSet
    score: float
    key: int

    @classmethod
    def of(cls, line_set: LineSet) -> WrapCandidate:
        lengths = line_set.line_lengths()
        return cls(line_set=line_set, score=sqm(lengths), key=_sqm_key(lengths))


class WrapOptimizer:
    """Splits words into a fixed number of balanced lines of at most ``width``.

    The height is either set explicitly with :meth:`set_height` or estimated
    from the text on each call to :meth:`split`. Ties between equally scored
    layouts are broken in favour of the first one discovered; the search is
    breadth-first, so that is the layout needing the fewest moves from the
    greedy baseline (then the lowest line index).
    """

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise InvalidWidthError(width)
        self._width = width
        self._height: int | None = None
        self._candidates: list[WrapCandidate] = []

    @property
    def width(self) -> int:
        return self._width

    def set_height(self, height: int | None) -> None:
        """Fix the number of lines (``None`` to estimate it from the text)."""
        if height is not None and height < 1:
            raise InvalidDimensionsError("height", height, minimum=1)
        self._height = height

    def split(self, words: Sequence[str]) -> LineSet:
        """Lay out *words* and return the best-balanced layout."""
        height = self._height
        if height is None:
            height = estimate_line_count(words, self._width)

        baseline = LineSet(self._width, height)
        for word in words:
            if not baseline.insert_word(word):
                raise WordTooLongError(word, self._width, height)

        if baseline.height <= 1:
            self._candidates = [WrapCandidate.of(baseline)]
            return baseline

        self._candidates = self._explore(baseline, baseline.height * len(words))
        return self.solution

    @property
    def candidates(self) -> list[WrapCandidate]:
        """Every layout visited by the last :meth:`split`, in discovery order."""
        return list(self._candidates)

    @property
    def solution(self) -> LineSet:
        """The best layout found by the last :meth:`split`."""
        if not self._candidates:
            raise NoCandidateFoundError()

        best = self._candidates[0]
        for candidate in self._candidates[1:]:
            if candidate.key < best.key:
                best = candidate
        return best.line_set

    def _explore(self, baseline: LineSet, max_expansions: int) -> list[WrapCandidate]:
        """Breadth-first descent from *baseline*.

        Every layout one shift away from an expanded layout is scored, but it
        is only expanded in turn when it scores strictly better than its
        parent, and no more than *max_expansions* layouts are expanded.
        """
        first = WrapCandidate.of(baseline)
        seen = {baseline.signature()}
        visited = [first]
        queue: deque[WrapCandidate] = deque([first])
        expansions = 0

        while queue and expansions < max_expansions:
            parent = queue.popleft()
            current = parent.line_set
            expansions += 1
            for j in range(1, current.height):
                if not current.can_shift_up(j):
                    continue

                branch = current.clone()
                branch.shift_up(j)
                signature = branch.signature()
                if signature in seen:
                    continue

                seen.add(signature)
                candidate = WrapCandidate.of(branch)
                visited.append(candidate)
                if candidate.key < parent.key:
                    queue.append(candidate)

        logger.debug(
            "explored %d layout(s) in %d expansion(s) for %d line(s) at width %d",
            len(visited),
            expansions,
            baseline.height,
            self._width,
        )
        return visited


def wrap(words: Sequence[str], width: int, height: int | None = None) -> LineSet:
    """Wrap *words* into balanced lines no longer than *width*.

    *height* fixes the number of lines; when omitted it is estimated with
    :func:`~pi.textfit.estimate.estimate_line_count`.

    Raises :class:`InvalidWidthError`, :class:`InvalidDimensionsError`,
    :class:`TooManyLinesError` (from the estimate) or
    :class:`WordTooLongError` when the words cannot be packed.
    """
    optimizer = WrapOptimizer(width)
    if not words:
        return LineSet(width, height or 0)

    optimizer.set_height(height)
    return optimizer.split(words)
