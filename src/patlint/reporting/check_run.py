"""Check-run payload for a version-control host's checks API.

The payload has the shape accepted when creating or updating a check
run::

    {
      "name": "patlint",
      "status": "completed",
      "conclusion": "failure",
      "output": {
        "title": "...",
        "summary": "2 error(s) found",
        "text": "...",
        "annotations": [{"path": ..., "start_line": ..., ...}]
      }
    }

Publishing it is left to the caller.  The API accepts at most 50
annotations per request, so extra annotations are counted in ``text``
rather than included.  Column fields are only valid when an annotation
starts and ends on the same line, so they are omitted otherwise.
"""
from __future__ import annotations

import json
from typing import Any

from patlint.linter.annotations import Annotation
from patlint.linter.engine import LintResult
from patlint.reporting.base import Reporter, reporter_registry
from patlint.ruleset.models import Severity

MAX_ANNOTATIONS = 50
DEFAULT_CHECK_NAME = "patlint"

_LEVELS = {
    Severity.ERROR: "failure",
    Severity.WARNING: "warning",
}


def annotation_to_check(annotation: Annotation) -> dict[str, Any]:
    """Convert one annotation to a checks-API annotation object."""
    payload: dict[str, Any] = {
        "path": annotation.file,
        "start_line": annotation.start_line,
        "end_line": annotation.end_line,
        "annotation_level": _LEVELS[annotation.severity],
        "title": annotation.title,
        "message": annotation.message,
    }
    if annotation.start_line == annotation.end_line:
        payload["start_column"] = annotation.start_column
        payload["end_column"] = annotation.end_column
    return payload


def conclusion_for(result: LintResult) -> str:
    if not result.passed:
        return "failure"
    if result.annotations:
        return "neutral"
    return "success"


def build_check_run(result: LintResult, name: str = DEFAULT_CHECK_NAME) -> dict[str, Any]:
    """Return the complete check-run payload for ``result``."""
    shown = result.annotations[:MAX_ANNOTATIONS]
    text_lines = [
        f"{result.error_count} error(s) and {result.warning_count} warning(s) "
        f"in {result.files_scanned} file(s)."
    ]
    hidden = len(result.annotations) - len(shown)
    if hidden > 0:
        text_lines.append(f"{hidden} more annotation(s) not shown.")
    text_lines.extend(str(issue) for issue in result.issues)

    return {
        "name": name,
        "status": "completed",
        "conclusion": conclusion_for(result),
        "output": {
            "title": name,
            "summary": f"{result.error_count} error(s) found",
            "text": "\n".join(text_lines),
            "annotations": [annotation_to_check(a) for a in shown],
        },
    }


@reporter_registry.register("check-run")
class CheckRunReporter(Reporter):
    def __init__(self, name: str = DEFAULT_CHECK_NAME) -> None:
        self._name = name

    def render(self, result: LintResult) -> str:
        return json.dumps(build_check_run(result, self._name), indent=2, ensure_ascii=False)
