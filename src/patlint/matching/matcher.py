"""Whole-file pattern matching.

A rule's compiled pattern is searched against the complete text of a file
rather than line by line, so a pattern may span line terminators.  The
scan finds every non-overlapping match from left to right; after a
zero-length match the scan position moves one character further so the
loop always terminates.
"""
from __future__ import annotations

from dataclasses import dataclass

from patlint.ruleset.models import Rule


@dataclass(frozen=True)
class Match:
    """One occurrence of a rule's pattern inside a file.

    Parameters
    ----------
    rule:
        The rule whose pattern matched.
    start:
        Offset of the first matched character.
    end:
        Offset just past the last matched character.
    text:
        The matched text, ``file_text[start:end]``.
    """

    rule: Rule
    start: int
    end: int
    text: str

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


def find_matches(text: str, rule: Rule) -> list[Match]:
    """Return every non-overlapping match of ``rule`` in ``text``, in order.

    The result is a fresh list on every call.
    """
    pattern = rule.compiled
    matches: list[Match] = []
    pos = 0
    while pos <= len(text):
        found = pattern.search(text, pos)
        if found is None:
            break
        match = Match(rule=rule, start=found.start(), end=found.end(), text=found.group(0))
        matches.append(match)
        pos = match.end + 1 if match.is_empty else match.end
    return matches
