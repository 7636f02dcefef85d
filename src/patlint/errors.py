"""Error types for patlint.

Errors fall into two classes:

Malfunction
    ``ConfigurationError``: the rule-set document itself is unusable.
    Raised before any file is scanned.

Data quality
    ``DroppedRuleError`` subclasses and ``FileAccessError``: a single rule
    entry or a single file cannot be used.  These are normally recorded
    alongside the lint results rather than raised.

A lint run that finds ``error``-severity matches is *not* an error; it is
a successful run with a failing verdict.
"""
from __future__ import annotations

from dataclasses import dataclass, field


class PatlintError(Exception):
    """Base class for every exception raised by patlint."""


class ConfigurationError(PatlintError, ValueError):
    """The rule-set document is unusable as a whole.

    Only top-level problems raise this: a document that is not a mapping,
    a missing or non-list ``rules`` entry, or malformed global settings.
    A malformed rule entry is dropped instead (see ``InvalidRuleError``).

    Parameters
    ----------
    message:
        Summary of what went wrong.
    problems:
        Every individual problem found while validating the document,
        so callers can report all of them at once.
    """

    def __init__(self, message: str, problems: list[str] | None = None) -> None:
        self.problems: list[str] = list(problems or [])
        text = message
        if self.problems:
            text += "\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(text)


class DroppedRuleError(PatlintError):
    """A single rule was left out of the rule set; the other rules still run."""

    rule_name: str


class RuleCompilationError(DroppedRuleError):
    """A rule's pattern could not be compiled.

    Parameters
    ----------
    rule_name:
        Name of the rule that was dropped.
    pattern:
        The pattern source as written in the rule set.
    reason:
        The regular-expression engine's error message.
    """

    def __init__(self, rule_name: str, pattern: str, reason: str) -> None:
        super().__init__(f"Rule {rule_name!r} dropped: invalid pattern {pattern!r} ({reason})")
        self.rule_name = rule_name
        self.pattern = pattern
        self.reason = reason


class InvalidRuleError(DroppedRuleError):
    """A rule entry is malformed and was dropped.

    Parameters
    ----------
    index:
        Position of the entry in the ``rules`` list.
    rule_name:
        The entry's name, or ``None`` when the name itself is invalid; the
        ``rule_name`` attribute then falls back to ``"rules[<index>]"``.
    problems:
        Every problem found in the entry.
    """

    def __init__(self, index: int, rule_name: str | None, problems: list[str]) -> None:
        where = f"rules[{index}]" if rule_name is None else f"rules[{index}] ({rule_name})"
        super().__init__(f"Rule entry {where} dropped: {'; '.join(problems)}")
        self.index = index
        self.rule_name = rule_name if rule_name is not None else f"rules[{index}]"
        self.problems = list(problems)


class FileAccessError(PatlintError):
    """A file to be linted could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class FileAccessErrorGroup(PatlintError):
    """Aggregates every ``FileAccessError`` from a single lint run.

    Raised only when unreadable files are treated as fatal; all other
    files have finished evaluating by the time this is raised.

    Parameters
    ----------
    errors:
        The read failures, in input file order.
    """

    errors: list[FileAccessError] = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))

    def __str__(self) -> str:
        if not self.errors:
            return "FileAccessErrorGroup (no errors)"
        lines = [f"FileAccessErrorGroup ({len(self.errors)} unreadable file(s)):"]
        for err in self.errors:
            lines.append(f"  {err}")
        return "\n".join(lines)
