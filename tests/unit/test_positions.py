"""Unit tests for patlint.matching.positions — offset_to_position and
LineIndex across all three line-terminator styles.
"""
from __future__ import annotations

import pytest

from patlint.matching.positions import LineIndex, Position, offset_to_position

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_SAMPLES = [
    "",
    "abc",
    "foo\nbar baz\n",
    "a\rb\r",
    "a\r\nb\r\n",
    "mixed\r\nline\rend\nx",
    "\n\n",
    "\r\r\n\n",
    "no terminator at end\r\nlast",
]


def _line_starts(text: str) -> list[int]:
    """Walk the text by hand, treating \\r\\n as one terminator."""
    starts = [0]
    i = 0
    while i < len(text):
        if text[i] == "\r" and i + 1 < len(text) and text[i + 1] == "\n":
            i += 2
            starts.append(i)
        elif text[i] in "\r\n":
            i += 1
            starts.append(i)
        else:
            i += 1
    return starts


# ===========================================================================
# offset_to_position
# ===========================================================================


class TestOffsetToPosition:
    def test_offset_zero_is_line_one_column_one(self) -> None:
        assert offset_to_position("anything", 0) == Position(1, 1)

    def test_empty_text_offset_zero(self) -> None:
        assert offset_to_position("", 0) == Position(1, 1)

    def test_lf_second_line(self) -> None:
        text = "foo\nbar baz\n"
        assert offset_to_position(text, 4) == Position(2, 1)
        assert offset_to_position(text, 7) == Position(2, 4)

    def test_offset_at_text_length_after_final_terminator(self) -> None:
        text = "foo\nbar baz\n"
        assert offset_to_position(text, len(text)) == Position(3, 1)

    def test_offset_at_text_length_without_final_terminator(self) -> None:
        assert offset_to_position("ab\ncd", 5) == Position(2, 3)

    def test_crlf_counts_as_one_terminator(self) -> None:
        assert offset_to_position("xx\r\nyy", 4) == Position(2, 1)

    def test_offset_between_cr_and_lf_stays_on_first_line(self) -> None:
        assert offset_to_position("xx\r\nyy", 3) == Position(1, 4)

    def test_bare_cr_is_a_terminator(self) -> None:
        assert offset_to_position("a\rb", 2) == Position(2, 1)

    def test_lf_followed_by_cr_is_two_terminators(self) -> None:
        assert offset_to_position("a\n\rb", 3) == Position(3, 1)

    def test_consecutive_crlf(self) -> None:
        text = "\r\n\r\n"
        assert offset_to_position(text, 2) == Position(2, 1)
        assert offset_to_position(text, 4) == Position(3, 1)

    def test_position_fields_are_named(self) -> None:
        position = offset_to_position("a\nb", 2)
        assert position.line == 2
        assert position.column == 1

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_out_of_range_raises_value_error(self, offset: int) -> None:
        with pytest.raises(ValueError):
            offset_to_position("abc", offset)

    @pytest.mark.parametrize("text", _SAMPLES)
    def test_every_offset_reconstructs(self, text: str) -> None:
        starts = _line_starts(text)
        for offset in range(len(text) + 1):
            line, column = offset_to_position(text, offset)
            assert starts[line - 1] + column - 1 == offset


# ===========================================================================
# LineIndex
# ===========================================================================


class TestLineIndex:
    @pytest.mark.parametrize("text", _SAMPLES)
    def test_agrees_with_offset_to_position(self, text: str) -> None:
        index = LineIndex(text)
        for offset in range(len(text) + 1):
            assert index.position(offset) == offset_to_position(text, offset)

    def test_end_of_text_after_final_terminator_is_new_line(self) -> None:
        assert LineIndex("a\nb\n").position(4) == Position(3, 1)

    def test_single_line(self) -> None:
        assert LineIndex("abc").position(3) == Position(1, 4)

    def test_mixed_terminators(self) -> None:
        index = LineIndex("a\r\nb\rc\nd")
        assert [index.position(o).line for o in (0, 3, 5, 7)] == [1, 2, 3, 4]

    def test_out_of_range_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            LineIndex("abc").position(10)
