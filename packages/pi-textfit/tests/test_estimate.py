"""Tests for pi.textfit.estimate -- the closed-form line count estimate."""

from __future__ import annotations

import pytest

from pi.textfit.errors import InvalidWidthError, TooManyLinesError
from pi.textfit.estimate import estimate_line_count, total_length


class TestTotalLength:
    def test_joined_length(self) -> None:
        assert total_length(["Hello", "World"]) == 11

    def test_empty(self) -> None:
        assert total_length([]) == 0


class TestEstimateLineCount:
    """Minimum line count from the total joined length."""

    def test_sentence_at_width_12(self) -> None:
        words = "Hello world, this is a test".split()
        assert estimate_line_count(words, 12) == 3

    def test_sentence_at_width_11(self) -> None:
        words = "Hello world, this is a test".split()
        assert estimate_line_count(words, 11) == 3

    def test_text_fits_on_one_line(self) -> None:
        assert estimate_line_count(["Hello", "World"], 18) == 1

    def test_exact_fit_is_one_line(self) -> None:
        assert estimate_line_count(["ab", "cd"], 5) == 1
        assert estimate_line_count(["ab", "cd"], 4) == 2

    def test_no_words_need_no_lines(self) -> None:
        assert estimate_line_count([], 10) == 0

    def test_zero_width_raises(self) -> None:
        with pytest.raises(InvalidWidthError):
            estimate_line_count(["a"], 0)

    def test_negative_width_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            estimate_line_count(["a"], -3)

    def test_more_lines_than_words_raises(self) -> None:
        with pytest.raises(TooManyLinesError) as excinfo:
            estimate_line_count(["Thisisaverylongtitle"], 5)
        assert excinfo.value.line_count == 4
        assert excinfo.value.word_count == 1
        assert "greater than the number of words" in str(excinfo.value)

    def test_non_increasing_in_width(self) -> None:
        words = "the quick brown fox jumps over the lazy dog".split()
        previous = None
        for width in range(5, 60):
            count = estimate_line_count(words, width)
            if previous is not None:
                assert count <= previous
            previous = count

    def test_estimated_lines_hold_the_text(self) -> None:
        # Each line break replaces one separator.
        words = "the quick brown fox jumps over the lazy dog".split()
        for width in range(5, 50):
            count = estimate_line_count(words, width)
            assert total_length(words) - (count - 1) <= count * width
