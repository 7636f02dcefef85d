"""GitHub Actions workflow-command output.

Each annotation becomes one line such as::

    ::error file=src/app.py,line=3,endLine=3,col=5,endColumn=9,title=...::message

which the Actions runner turns into an inline annotation.  Message data
and property values are escaped as the runner expects.
"""
from __future__ import annotations

from patlint.linter.annotations import Annotation
from patlint.linter.engine import LintResult
from patlint.reporting.base import Reporter, reporter_registry


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def workflow_command(annotation: Annotation) -> str:
    """Format ``annotation`` as an ``::error`` / ``::warning`` command."""
    properties = [
        ("file", annotation.file),
        ("line", str(annotation.start_line)),
        ("endLine", str(annotation.end_line)),
    ]
    if annotation.start_line == annotation.end_line:
        properties.append(("col", str(annotation.start_column)))
        properties.append(("endColumn", str(annotation.end_column)))
    properties.append(("title", annotation.title))
    props = ",".join(f"{key}={escape_property(value)}" for key, value in properties)
    return f"::{annotation.severity.value} {props}::{escape_data(annotation.message)}"


@reporter_registry.register("github")
class GithubActionsReporter(Reporter):
    def render(self, result: LintResult) -> str:
        lines = [f"::warning::{escape_data(issue.message)}" for issue in result.issues]
        lines.extend(workflow_command(a) for a in result.annotations)
        return "\n".join(lines)
