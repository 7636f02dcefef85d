"""Typed model of a patlint rule set.

Every object here is a frozen dataclass: a ``RuleSet`` is built once per
run by ``parse_rule_set`` and shared read-only by every concurrent file
evaluation.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """How a match of a rule affects the run's verdict."""

    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Return the severity named by ``value`` (case-insensitive).

        Raises
        ------
        ValueError
            If ``value`` names no severity.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"unknown severity {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class Rule:
    """One named pattern-plus-metadata lint check.

    Parameters
    ----------
    name:
        Identifier used in titles and messages.
    pattern:
        The pattern source exactly as authored.
    compiled:
        ``pattern`` compiled in multi-line mode (escaped first when
        ``literal`` is set).
    documentation:
        Optional free text appended to every message.
    severity:
        Severity of every annotation this rule produces.
    include_paths:
        Per-rule include globs.  ``None`` means unset; when set, the global
        include list is ignored for this rule.
    exclude_paths:
        Per-rule exclude globs, replacing the global exclude list when set.
    literal:
        Whether ``pattern`` is a plain string rather than a regex.
    ignore_case:
        Whether matching is case-insensitive.
    """

    name: str
    pattern: str
    compiled: re.Pattern[str] = field(compare=False, repr=False)
    documentation: str | None = None
    severity: Severity = Severity.ERROR
    include_paths: tuple[str, ...] | None = None
    exclude_paths: tuple[str, ...] | None = None
    literal: bool = False
    ignore_case: bool = False

    @classmethod
    def create(
        cls,
        name: str,
        pattern: str,
        *,
        documentation: str | None = None,
        severity: Severity = Severity.ERROR,
        include_paths: tuple[str, ...] | None = None,
        exclude_paths: tuple[str, ...] | None = None,
        literal: bool = False,
        ignore_case: bool = False,
    ) -> "Rule":
        """Compile ``pattern`` and build a ``Rule``.

        Raises
        ------
        re.error
            If the pattern does not compile.
        """
        return cls(
            name=name,
            pattern=pattern,
            compiled=compile_pattern(pattern, literal=literal, ignore_case=ignore_case),
            documentation=documentation,
            severity=severity,
            include_paths=include_paths,
            exclude_paths=exclude_paths,
            literal=literal,
            ignore_case=ignore_case,
        )

    @property
    def has_scope_override(self) -> bool:
        """Return True if this rule carries its own include or exclude list."""
        return self.include_paths is not None or self.exclude_paths is not None


@dataclass(frozen=True)
class RuleSet:
    """The full lint configuration: global path scope plus ordered rules."""

    rules: tuple[Rule, ...] = ()
    global_include_paths: tuple[str, ...] | None = None
    global_exclude_paths: tuple[str, ...] | None = None

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def rule_names(self) -> list[str]:
        """Return rule names in rule-set order."""
        return [rule.name for rule in self.rules]


def compile_pattern(pattern: str, *, literal: bool = False, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile a rule pattern the way the matcher expects it."""
    flags = re.MULTILINE
    if ignore_case:
        flags |= re.IGNORECASE
    source = re.escape(pattern) if literal else pattern
    return re.compile(source, flags)
