"""Machine-readable JSON report."""
from __future__ import annotations

import json
from typing import Any

from patlint.linter.engine import LintResult
from patlint.reporting.base import Reporter, reporter_registry


def result_to_dict(result: LintResult) -> dict[str, Any]:
    """Return a JSON-compatible dict describing ``result``."""
    return {
        "verdict": result.verdict.value,
        "summary": {
            "files_scanned": result.files_scanned,
            "errors": result.error_count,
            "warnings": result.warning_count,
        },
        "annotations": [a.to_dict() for a in result.annotations],
        "issues": [i.to_dict() for i in result.issues],
    }


@reporter_registry.register("json")
class JsonReporter(Reporter):
    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def render(self, result: LintResult) -> str:
        return json.dumps(result_to_dict(result), indent=self._indent, ensure_ascii=False)
