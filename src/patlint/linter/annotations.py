"""Annotation records produced by the lint engine.

An ``Annotation`` is one finding anchored to a file span.  Positions are
1-based; the end column points just past the last matched character, so
a three-character match at the start of a line spans columns 1 to 4.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from patlint.matching.matcher import Match
from patlint.matching.positions import Position
from patlint.ruleset.models import Rule, Severity

TITLE_PREFIX = "Pattern lint violation"


@dataclass(frozen=True)
class Annotation:
    """A single lint finding.

    Parameters
    ----------
    title:
        Short heading, ``"<TITLE_PREFIX>: <rule name>"``.
    file:
        Repository-relative path of the file.
    start_line, start_column:
        Position of the first matched character.
    end_line, end_column:
        Position just past the last matched character.
    message:
        Rule name, matched text and documentation on separate lines.
    severity:
        Severity inherited from the rule.
    rule:
        Name of the rule that produced this annotation.
    """

    title: str
    file: str
    start_line: int
    end_line: int
    start_column: int
    end_column: int
    message: str
    severity: Severity
    rule: str = ""

    def __str__(self) -> str:
        loc = f"{self.file}:{self.start_line}:{self.start_column}"
        return f"{loc}: {self.severity.value}: [{self.rule}] {self.message.splitlines()[0]}"

    @property
    def is_error(self) -> bool:
        """Return True if this annotation makes the verdict fail."""
        return self.severity == Severity.ERROR

    @property
    def is_multiline(self) -> bool:
        return self.end_line > self.start_line

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "file": self.file,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "start_column": self.start_column,
            "end_column": self.end_column,
            "message": self.message,
            "severity": self.severity.value,
            "rule": self.rule,
        }


def build_message(rule: Rule, matched_text: str) -> str:
    """Join rule name, matched text and documentation as message lines."""
    lines = [rule.name, f"Matched: {matched_text}"]
    if rule.documentation:
        lines.append(rule.documentation)
    return "\n".join(lines)


def build_annotation(
    path: str,
    rule: Rule,
    match: Match,
    start: Position,
    end: Position,
) -> Annotation:
    """Combine a match, its resolved positions and rule metadata."""
    return Annotation(
        title=f"{TITLE_PREFIX}: {rule.name}",
        file=path,
        start_line=start.line,
        end_line=end.line,
        start_column=start.column,
        end_column=end.column,
        message=build_message(rule, match.text),
        severity=rule.severity,
        rule=rule.name,
    )
