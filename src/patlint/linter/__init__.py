"""patlint linter module.

Exports the ``LintEngine`` class, the ``lint`` convenience function and
the records a lint run produces.
"""
from __future__ import annotations

from patlint.linter.annotations import TITLE_PREFIX, Annotation, build_annotation, build_message
from patlint.linter.engine import LintEngine, LintResult, Verdict, lint
from patlint.linter.issues import IssueKind, LintIssue

__all__ = [
    "LintEngine",
    "LintResult",
    "Verdict",
    "lint",
    "Annotation",
    "TITLE_PREFIX",
    "build_annotation",
    "build_message",
    "IssueKind",
    "LintIssue",
]
