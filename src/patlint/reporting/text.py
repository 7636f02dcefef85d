"""Human-readable report rendered with rich."""
from __future__ import annotations

import io

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from patlint.linter.annotations import Annotation
from patlint.linter.engine import LintResult
from patlint.reporting.base import Reporter, reporter_registry

_SEVERITY_COLORS = {
    "error": "red",
    "warning": "yellow",
}


def _location(annotation: Annotation) -> str:
    start = f"{annotation.start_line}:{annotation.start_column}"
    if annotation.is_multiline:
        return f"{start}-{annotation.end_line}:{annotation.end_column}"
    return start


@reporter_registry.register("text")
class TextReporter(Reporter):
    """Table of annotations followed by issues and a one-line summary."""

    def write(self, result: LintResult, console: Console) -> None:
        for issue in result.issues:
            console.print(f"[yellow]Warning:[/yellow] {escape(issue.message)}", highlight=False)

        if result.annotations:
            table = Table(title="Lint results", show_lines=True)
            table.add_column("Severity", style="bold", min_width=8)
            table.add_column("File")
            table.add_column("Location", min_width=8)
            table.add_column("Rule")
            table.add_column("Message")
            for annotation in result.annotations:
                color = _SEVERITY_COLORS.get(annotation.severity.value, "white")
                table.add_row(
                    f"[{color}]{annotation.severity.value.upper()}[/{color}]",
                    Text(annotation.file),
                    _location(annotation),
                    Text(annotation.rule),
                    Text(annotation.message),
                )
            console.print(table)

        status = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
        console.print(
            f"\n[bold]Summary:[/bold] {result.error_count} error(s), "
            f"{result.warning_count} warning(s) in {result.files_scanned} file(s) - {status}"
        )

    def render(self, result: LintResult) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None, force_terminal=False)
        self.write(result, console)
        return buffer.getvalue()
