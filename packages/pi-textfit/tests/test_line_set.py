"""Tests for pi.textfit.line_set -- LineBuilder and the greedy LineSet packer."""

from __future__ import annotations

import pytest

from pi.textfit.errors import InvalidDimensionsError
from pi.textfit.line_set import LineBuilder, LineSet, furthest_right_edge, render_line_set


def _packed(words: list[str], width: int, height: int) -> LineSet:
    line_set = LineSet(width, height)
    for word in words:
        assert line_set.insert_word(word)
    return line_set


# ---------------------------------------------------------------------------
# LineBuilder
# ---------------------------------------------------------------------------


class TestLineBuilder:
    """Word accumulation with an incrementally maintained length."""

    def test_length_counts_separators(self) -> None:
        line = LineBuilder(["Hello", "World"])
        assert line.length == 11

    def test_empty_builder_has_zero_length(self) -> None:
        assert LineBuilder().length == 0

    def test_pop_first_updates_length(self) -> None:
        line = LineBuilder(["Hello", "World"])
        assert line.pop_first() == "Hello"
        assert line.length == 5
        assert line.pop_first() == "World"
        assert line.length == 0

    def test_append_after_emptying(self) -> None:
        line = LineBuilder(["a"])
        line.pop_first()
        line.append("abc")
        assert line.length == 3
        assert line.render() == "abc"

    def test_clone_has_independent_storage(self) -> None:
        line = LineBuilder(["a", "b"])
        copy = line.clone()
        copy.append("c")
        copy.pop_first()
        assert line.words == ("a", "b")
        assert line.length == 3
        assert copy.words == ("b", "c")


# ---------------------------------------------------------------------------
# LineSet.insert_word
# ---------------------------------------------------------------------------


class TestInsertWord:
    """Greedy insertion with upward cascading."""

    def test_word_longer_than_width_into_empty_set_fails(self) -> None:
        line_set = LineSet(5, 2)
        assert line_set.insert_word("toolong") is False
        assert line_set.height == 0

    def test_first_words_get_their_own_lines(self) -> None:
        line_set = _packed(["a", "b"], 5, 3)
        assert line_set.render() == ["a", "b"]

    def test_words_fill_last_line_at_capacity(self) -> None:
        line_set = _packed(["Hi", "You", "They"], 8, 2)
        assert line_set.render() == ["Hi", "You They"]

    def test_overflow_cascades_upwards(self) -> None:
        words = "Hello world, this is a test".split()
        line_set = _packed(words, 11, 3)
        assert line_set.render() == ["Hello", "world, this", "is a test"]

    def test_cascade_through_many_lines(self) -> None:
        words = "This is a very long title".split()
        line_set = _packed(words, 5, 5)
        assert line_set.render() == ["This", "is a", "very", "long", "title"]

    def test_failed_cascade_leaves_set_unchanged(self) -> None:
        line_set = _packed(["ab"], 3, 1)
        assert line_set.insert_word("cd") is False
        assert line_set.render() == ["ab"]

    def test_cascade_never_overflows_a_line(self) -> None:
        line_set = _packed(["ab", "cd"], 5, 1)
        assert line_set.render() == ["ab cd"]
        assert line_set.insert_word("xyzw") is False
        assert line_set.render() == ["ab cd"]

    def test_zero_height_accepts_nothing(self) -> None:
        line_set = LineSet(10, 0)
        assert line_set.insert_word("a") is False

    def test_insert_words_reports_first_failure(self) -> None:
        line_set = LineSet(4, 2)
        assert line_set.insert_words(["ab", "cd", "toolong", "ef"]) == 2
        assert LineSet(4, 2).insert_words(["ab", "cd"]) == -1

    def test_every_line_within_width(self) -> None:
        words = "the quick brown fox jumps over the lazy dog".split()
        line_set = LineSet(10, 5)
        line_set.insert_words(words)
        assert all(length <= 10 for length in line_set.line_lengths())

    def test_words_round_trip(self) -> None:
        words = "the quick brown fox jumps over the lazy dog".split()
        line_set = _packed(words, 12, 4)
        assert line_set.words() == words

    def test_negative_dimensions_raise(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            LineSet(-1, 2)
        with pytest.raises(InvalidDimensionsError):
            LineSet(2, -1)


# ---------------------------------------------------------------------------
# Shifting
# ---------------------------------------------------------------------------


class TestShiftUp:
    """Moving the first word of a line onto the line above."""

    def test_can_shift_when_word_fits_above(self) -> None:
        line_set = _packed(["Hi", "You", "They"], 8, 2)
        assert line_set.can_shift_up(1) is True

    def test_shift_moves_one_word(self) -> None:
        line_set = _packed(["Hi", "You", "They"], 8, 2)
        line_set.shift_up(1)
        assert line_set.render() == ["Hi You", "They"]
        assert line_set.line_lengths() == [6, 4]

    def test_first_line_cannot_shift(self) -> None:
        line_set = _packed(["Hi", "You", "They"], 8, 2)
        assert line_set.can_shift_up(0) is False

    def test_single_word_line_cannot_shift(self) -> None:
        line_set = _packed(["Hi", "You"], 8, 2)
        assert line_set.can_shift_up(1) is False

    def test_cannot_shift_when_line_above_is_full(self) -> None:
        line_set = _packed(["Hello", "is", "it"], 7, 2)
        assert line_set.render() == ["Hello", "is it"]
        assert line_set.can_shift_up(1) is False


# ---------------------------------------------------------------------------
# Copies and views
# ---------------------------------------------------------------------------


class TestLineSetViews:
    """Cloning, signatures and rendering helpers."""

    def test_clone_is_deep(self) -> None:
        original = _packed(["Hi", "You", "They"], 8, 2)
        branch = original.clone()
        branch.shift_up(1)
        assert original.render() == ["Hi", "You They"]
        assert branch.render() == ["Hi You", "They"]

    def test_signature_is_words_per_line(self) -> None:
        line_set = _packed(["Hi", "You", "They"], 8, 2)
        assert line_set.signature() == (1, 2)

    def test_furthest_right_edge_of_empty_set_is_width(self) -> None:
        assert furthest_right_edge(LineSet(7, 2)) == 7

    def test_furthest_right_edge_is_longest_line(self) -> None:
        line_set = _packed(["Hi", "You", "They"], 8, 2)
        assert furthest_right_edge(line_set) == 8

    def test_render_line_set(self) -> None:
        line_set = _packed(["Hello", "World"], 18, 1)
        assert render_line_set(line_set) == ["Hello World"]

    def test_first_line(self) -> None:
        assert LineSet(5, 1).first_line is None
        line_set = _packed(["a", "b"], 5, 2)
        assert line_set.first_line is not None
        assert line_set.first_line.render() == "a"
