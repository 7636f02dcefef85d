"""CLI entry point for patlint.

Invoked as::

    patlint [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m patlint.cli.main

Commands
--------
lint         Lint files against a rule set
check-rules  Validate a rule-set file
schema       Print the rule-set JSON Schema
reporters    List available output formats
version      Show version information

Exit codes: 0 when the verdict is passing, 1 when it is failing (or, for
``check-rules``, when a rule was dropped), 2 when the rule set or the
command line is unusable.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from patlint.errors import DroppedRuleError
    from patlint.ruleset import RuleSet

console = Console()
err_console = Console(stderr=True)

_SKIP_DIRS = frozenset({".git", ".hg", ".svn"})


def _configure_logging(verbose: bool) -> None:
    """Route patlint's log records through rich on stderr."""
    package_logger = logging.getLogger("patlint")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    # warnings are shown by the reporters; only surface them as logs in verbose mode
    package_logger.setLevel(logging.DEBUG if verbose else logging.ERROR)


def _collect_files(paths: tuple[str, ...], root: Path) -> list[Path]:
    """Expand directories recursively; keep input order and drop duplicates."""
    collected: dict[Path, None] = {}
    for raw in paths:
        path = Path(raw)
        full = path if path.is_absolute() else root / path
        if full.is_dir():
            for child in sorted(full.rglob("*")):
                if child.is_file() and not _SKIP_DIRS.intersection(child.relative_to(full).parts):
                    collected.setdefault(child, None)
        else:
            collected.setdefault(full, None)
    return list(collected)


def _load_rules_or_exit(rules_path: str) -> "tuple[RuleSet, tuple[DroppedRuleError, ...]]":
    """Load a rule set, printing every problem and exiting 2 on failure."""
    from patlint.errors import ConfigurationError
    from patlint.ruleset import load_rule_set

    try:
        return load_rule_set(rules_path)
    except ConfigurationError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        sys.exit(2)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="patlint")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logging")
def cli(verbose: bool) -> None:
    """Pattern-based source linter driven by a declarative rule set."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from patlint import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]patlint[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# reporters command
# ---------------------------------------------------------------------------


@cli.command(name="reporters")
def reporters_command() -> None:
    """List all output formats, including entry-point reporters."""
    from patlint.reporting import ENTRYPOINT_GROUP, reporter_registry

    reporter_registry.load_entrypoints(ENTRYPOINT_GROUP)
    console.print("[bold]Available reporters:[/bold]")
    for name in reporter_registry.list_plugins():
        console.print(Text(f"  {name}"))


# ---------------------------------------------------------------------------
# lint command
# ---------------------------------------------------------------------------


@cli.command(name="lint")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=False))
@click.option(
    "--rules",
    "-r",
    "rules_path",
    required=True,
    envvar="PATLINT_RULES",
    type=click.Path(dir_okay=False),
    help="Rule-set file (YAML or JSON); defaults to $PATLINT_RULES",
)
@click.option(
    "--format",
    "output_format",
    default="text",
    show_default=True,
    help="Output format (see `patlint reporters`)",
)
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Files linted concurrently")
@click.option("--strict", is_flag=True, default=False, help="Treat warnings as errors")
@click.option(
    "--fail-on-unreadable",
    is_flag=True,
    default=False,
    help="Abort with exit code 2 if any file cannot be read",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=None,
    help="Repository root that reported paths are relative to (default: cwd)",
)
@click.option("--output", "-o", default=None, help="Write the report to a file instead of stdout")
def lint_command(
    paths: tuple[str, ...],
    rules_path: str,
    output_format: str,
    jobs: int | None,
    strict: bool,
    fail_on_unreadable: bool,
    root: str | None,
    output: str | None,
) -> None:
    """Lint files against a rule set.

    PATHS are files or directories; directories are searched recursively.
    """
    from patlint.errors import FileAccessErrorGroup
    from patlint.linter import LintEngine, LintIssue
    from patlint.plugins import PluginNotFoundError
    from patlint.reporting import get_reporter

    try:
        reporter = get_reporter(output_format)
    except PluginNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(exc.args[0])}", highlight=False)
        sys.exit(2)

    rule_set, dropped = _load_rules_or_exit(rules_path)
    root_dir = Path(root) if root else Path.cwd()
    files = _collect_files(paths, root_dir)

    engine = LintEngine(
        rule_set,
        max_workers=jobs,
        strict=strict,
        fail_on_unreadable=fail_on_unreadable,
    )
    try:
        result = engine.run_paths(files, root=root_dir)
    except FileAccessErrorGroup as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        sys.exit(2)

    result = result.with_leading_issues(LintIssue.from_error(e) for e in dropped)

    if output:
        Path(output).write_text(reporter.render(result), encoding="utf-8")
        console.print(f"[green]Report written to[/green] {output}")
    else:
        reporter.write(result, console)

    if not result.passed:
        sys.exit(1)


# ---------------------------------------------------------------------------
# check-rules command
# ---------------------------------------------------------------------------


@cli.command(name="check-rules")
@click.argument("file", type=click.Path(exists=False, dir_okay=False))
def check_rules_command(file: str) -> None:
    """Validate a rule-set file and list its rules.

    FILE is the path to the YAML or JSON rule set.
    """
    rule_set, dropped = _load_rules_or_exit(file)

    table = Table(title=f"Rules: {file}", show_lines=True)
    table.add_column("Name", style="bold")
    table.add_column("Severity", min_width=8)
    table.add_column("Scope")
    table.add_column("Pattern")
    for rule in rule_set.rules:
        scope = "override" if rule.has_scope_override else "global"
        table.add_row(Text(rule.name), rule.severity.value, scope, Text(rule.pattern))
    console.print(table)

    for error in dropped:
        console.print(f"[red]Dropped:[/red] {escape(str(error))}", highlight=False)

    console.print(
        f"\n[bold]{len(rule_set)}[/bold] rule(s) loaded, [bold]{len(dropped)}[/bold] dropped"
    )
    if dropped:
        sys.exit(1)


# ---------------------------------------------------------------------------
# schema command
# ---------------------------------------------------------------------------


@cli.command(name="schema")
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def schema_command(output: str | None) -> None:
    """Print the JSON Schema for rule-set documents."""
    from patlint.schema import SchemaExporter

    schema_text = SchemaExporter().to_json(indent=2)
    if output:
        Path(output).write_text(schema_text, encoding="utf-8")
        console.print(f"[green]Schema written to[/green] {output}")
    else:
        console.print(Syntax(schema_text, "json"))


if __name__ == "__main__":
    cli()
