"""Exceptions raised by the layout engine.

Every error derives from :class:`TextFitError`. Geometry errors also derive
from the matching built-in (``ValueError`` / ``IndexError``) so callers that
only know the standard library can still catch them.
"""

from __future__ import annotations


class TextFitError(Exception):
    """Base class for all layout errors."""


class InvalidDimensionsError(TextFitError, ValueError):
    """A width or height outside the accepted range was supplied."""

    def __init__(self, name: str, value: int, minimum: int = 0) -> None:
        self.name = name
        self.value = value
        self.minimum = minimum
        super().__init__(f"{name} must be >= {minimum}, got {value}")


class InvalidWidthError(TextFitError, ValueError):
    """Line-count estimation was asked for a non-positive width."""

    def __init__(self, width: int) -> None:
        self.width = width
        super().__init__(f"width must be > 0, got {width}")


class OutOfBoundsError(TextFitError, IndexError):
    """A strict grid access fell outside the grid geometry."""

    def __init__(self, x: int, y: int, length: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.length = length
        self.width = width
        self.height = height
        super().__init__(
            f"cannot write {length} cell(s) at ({x}, {y}) "
            f"in a {width}x{height} grid"
        )


class WordTooLongError(TextFitError):
    """A word could not be placed.

    Either the word is wider than a line, or the words before it already fill
    ``height`` lines. ``word`` is the word that failed.
    """

    def __init__(self, word: str, width: int, height: int | None = None) -> None:
        self.word = word
        self.width = width
        self.height = height
        if height is None or len(word) > width:
            message = f"word {word!r} ({len(word)} chars) does not fit in width {width}"
        else:
            message = (
                f"words cannot be packed into {height} line(s) of width {width} "
                f"(stopped at {word!r})"
            )
        super().__init__(message)


class TooManyLinesError(TextFitError):
    """The estimated number of lines exceeds the number of words.

    ``line_count`` carries the computed estimate so the caller can decide on a
    fallback.
    """

    def __init__(self, line_count: int, word_count: int) -> None:
        self.line_count = line_count
        self.word_count = word_count
        super().__init__(
            f"number of lines ({line_count}) is greater than "
            f"the number of words ({word_count})"
        )


class SuffixTooLongError(TextFitError):
    """The truncation suffix does not fit in the remaining budget."""

    def __init__(self, suffix: str, budget: int) -> None:
        self.suffix = suffix
        self.budget = budget
        super().__init__(
            f"suffix {suffix!r} does not fit in a budget of {budget} chars"
        )


class NoCandidateFoundError(TextFitError, RuntimeError):
    """The optimizer finished without a layout (internal invariant violated)."""

    def __init__(self) -> None:
        super().__init__("no candidate found")
