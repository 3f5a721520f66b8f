"""Greedy word packing into a fixed number of lines.

A :class:`LineSet` holds up to ``max_height`` :class:`LineBuilder` objects,
each no longer than ``max_width`` code points. Words are appended to the last
line; when the last line is full its first word is pushed up to the line
above, cascading upwards one line at a time.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pi.textfit.errors import InvalidDimensionsError


# ---------------------------------------------------------------------------
# LineBuilder
# ---------------------------------------------------------------------------


class LineBuilder:
    """An in-progress output line: ordered words plus their rendered length.

    ``length`` is the sum of the word lengths plus one separator between each
    pair of words. It is kept up to date incrementally.
    """

    __slots__ = ("_words", "_length")

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: list[str] = []
        self._length = 0
        for word in words:
            self.append(word)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return len(self._words)

    def append(self, word: str) -> None:
        """Add *word* to the end of the line."""
        if self._words:
            self._length += len(word) + 1
        else:
            self._length = len(word)
        self._words.append(word)

    def pop_first(self) -> str:
        """Remove and return the first word of the line."""
        word = self._words.pop(0)
        if self._words:
            self._length -= len(word) + 1
        else:
            self._length = 0
        return word

    def first_word(self) -> str:
        return self._words[0]

    def clone(self) -> LineBuilder:
        """Return an independent copy with its own word list."""
        copy = LineBuilder.__new__(LineBuilder)
        copy._words = list(self._words)
        copy._length = sum(len(w) for w in copy._words) + max(0, len(copy._words) - 1)
        return copy

    def render(self) -> str:
        return " ".join(self._words)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LineBuilder({self._words!r})"


# ---------------------------------------------------------------------------
# LineSet
# ---------------------------------------------------------------------------


class LineSet:
    """A bounded collection of lines representing one wrap solution."""

    def __init__(self, max_width: int, max_height: int) -> None:
        if max_width < 0:
            raise InvalidDimensionsError("max_width", max_width)
        if max_height < 0:
            raise InvalidDimensionsError("max_height", max_height)

        self._max_width = max_width
        self._max_height = max_height
        self._lines: list[LineBuilder] = []

    @property
    def max_width(self) -> int:
        return self._max_width

    @property
    def max_height(self) -> int:
        return self._max_height

    @property
    def lines(self) -> tuple[LineBuilder, ...]:
        return tuple(self._lines)

    @property
    def height(self) -> int:
        """Number of lines currently in use."""
        return len(self._lines)

    @property
    def first_line(self) -> LineBuilder | None:
        return self._lines[0] if self._lines else None

    def line_lengths(self) -> list[int]:
        return [line.length for line in self._lines]

    def words(self) -> list[str]:
        """All words in reading order."""
        return [word for line in self._lines for word in line.words]

    # -- insertion -------------------------------------------------------------

    def can_insert_word_at(self, word: str, index: int) -> bool:
        """Return ``True`` if *word* can end line *index* without overflowing."""
        if index < 0 or index >= len(self._lines):
            return False
        return self._lines[index].length + len(word) + 1 <= self._max_width

    def insert_word(self, word: str) -> bool:
        """Insert *word* at the end of the text.

        Returns ``False`` (leaving the set unchanged) when the word cannot be
        placed: it is wider than a line, or pushing words upwards ran out of
        lines.
        """
        if len(self._lines) < self._max_height:
            if len(word) > self._max_width:
                return False
            self._lines.append(LineBuilder((word,)))
            return True

        # The cascade works on copies of the lines it touches so that a failed
        # insertion leaves the set as it was.
        touched: dict[int, LineBuilder] = {}
        index = self._max_height - 1

        while index >= 0 and not self._fits(touched, word, index):
            line = touched.get(index)
            if line is None:
                line = self._lines[index].clone()
                touched[index] = line

            carried = line.pop_first()
            line.append(word)
            if line.length > self._max_width:
                return False

            word = carried
            index -= 1

        if index < 0:
            return False

        line = touched.get(index)
        if line is None:
            line = self._lines[index].clone()
            touched[index] = line
        line.append(word)

        for i, line in touched.items():
            self._lines[i] = line
        return True

    def _fits(self, touched: dict[int, LineBuilder], word: str, index: int) -> bool:
        line = touched.get(index, self._lines[index])
        return line.length + len(word) + 1 <= self._max_width

    def insert_words(self, words: Sequence[str]) -> int:
        """Insert *words* in order.

        Returns the index of the first word that could not be inserted, or -1
        when all of them were placed.
        """
        for i, word in enumerate(words):
            if not self.insert_word(word):
                return i
        return -1

    # -- shifting --------------------------------------------------------------

    def can_shift_up(self, index: int) -> bool:
        """Return ``True`` if the first word of line *index* can end line *index - 1*.

        A line holding a single word never shifts, so no line is left empty.
        """
        if index <= 0 or index >= len(self._lines):
            return False
        line = self._lines[index]
        if len(line) < 2:
            return False
        return self.can_insert_word_at(line.first_word(), index - 1)

    def shift_up(self, index: int) -> None:
        """Move the first word of line *index* onto the end of line *index - 1*."""
        self._lines[index - 1].append(self._lines[index].pop_first())

    # -- copies and views ------------------------------------------------------

    def clone(self) -> LineSet:
        """Deep copy: every line gets fresh storage."""
        copy = LineSet(self._max_width, self._max_height)
        copy._lines = [line.clone() for line in self._lines]
        return copy

    def signature(self) -> tuple[int, ...]:
        """Word count per line; two sets over the same words are equal iff their
        signatures are equal."""
        return tuple(len(line) for line in self._lines)

    def furthest_right_edge(self) -> int:
        """Length of the longest line (``max_width`` when there are no lines)."""
        if not self._lines:
            return self._max_width
        return max(line.length for line in self._lines)

    def render(self) -> list[str]:
        return [line.render() for line in self._lines]

    def __repr__(self) -> str:
        return (
            f"LineSet(max_width={self._max_width}, max_height={self._max_height}, "
            f"lines={self.render()!r})"
        )


def render_line_set(line_set: LineSet) -> list[str]:
    """Return the rendered text of every line in *line_set*."""
    return line_set.render()


def furthest_right_edge(line_set: LineSet) -> int:
    """Return the length of the longest line in *line_set*, for padding."""
    return line_set.furthest_right_edge()
