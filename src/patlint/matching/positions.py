"""Character offset to 1-based (line, column) translation.

A line terminator is ``\\r\\n``, a bare ``\\r`` or a bare ``\\n``, tried in
that order so ``\\r\\n`` counts once.  ``line`` is one plus the number of
terminators that end at or before the offset; ``column`` is one plus the
number of characters between the start of that line and the offset.

An offset that falls between the ``\\r`` and ``\\n`` of a ``\\r\\n`` pair is
still on the earlier line because the terminator is not fully consumed.

``offset_to_position`` rescans the text on every call.  ``LineIndex``
gives identical answers from a precomputed table and is what the engine
uses when a file has many matches.
"""
from __future__ import annotations

import re
from bisect import bisect_right
from typing import NamedTuple

_TERMINATOR = re.compile(r"\r\n|\r|\n")


class Position(NamedTuple):
    """A 1-based line/column location."""

    line: int
    column: int


def _check_offset(text: str, offset: int) -> None:
    if not 0 <= offset <= len(text):
        raise ValueError(f"offset {offset} is outside the text (length {len(text)})")


def offset_to_position(text: str, offset: int) -> Position:
    """Return the 1-based position of ``offset`` within ``text``.

    Parameters
    ----------
    text:
        The full file text.
    offset:
        A character offset, ``0 <= offset <= len(text)``.

    Raises
    ------
    ValueError
        If ``offset`` is outside the text.
    """
    _check_offset(text, offset)
    line = 1
    line_start = 0
    for terminator in _TERMINATOR.finditer(text):
        if terminator.end() > offset:
            break
        line += 1
        line_start = terminator.end()
    return Position(line, offset - line_start + 1)


class LineIndex:
    """Precomputed line starts for one text.

    Parameters
    ----------
    text:
        The full file text to index.
    """

    __slots__ = ("_text", "_starts")

    def __init__(self, text: str) -> None:
        self._text = text
        self._starts: list[int] = [0]
        self._starts.extend(m.end() for m in _TERMINATOR.finditer(text))

    def position(self, offset: int) -> Position:
        """Return the 1-based position of ``offset``; see ``offset_to_position``."""
        _check_offset(self._text, offset)
        index = bisect_right(self._starts, offset) - 1
        return Position(index + 1, offset - self._starts[index] + 1)
