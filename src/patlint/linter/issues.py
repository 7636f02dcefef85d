"""Non-fatal problems reported next to lint results.

Dropped rules and unreadable files do not stop a run.  They are returned
as ``LintIssue`` records so the caller decides how to surface them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from patlint.errors import DroppedRuleError, FileAccessError, InvalidRuleError


class IssueKind(Enum):
    DROPPED_RULE = "dropped-rule"
    INVALID_RULE = "invalid-rule"
    UNREADABLE_FILE = "unreadable-file"


@dataclass(frozen=True)
class LintIssue:
    """One non-fatal problem.

    Parameters
    ----------
    kind:
        What went wrong.
    subject:
        The rule name (``rules[<index>]`` for an unnamed entry) or file path
        concerned.
    message:
        Human-readable description.
    """

    kind: IssueKind
    subject: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    @classmethod
    def from_error(cls, error: DroppedRuleError | FileAccessError) -> "LintIssue":
        if isinstance(error, InvalidRuleError):
            return cls(kind=IssueKind.INVALID_RULE, subject=error.rule_name, message=str(error))
        if isinstance(error, DroppedRuleError):
            return cls(kind=IssueKind.DROPPED_RULE, subject=error.rule_name, message=str(error))
        return cls(kind=IssueKind.UNREADABLE_FILE, subject=error.path, message=str(error))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "subject": self.subject, "message": self.message}
