"""patlint — pattern-based source linter driven by a declarative rule set.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import patlint

    rule_set, dropped = patlint.parse_rule_set({
        "global-exclude-paths": ["vendor/**"],
        "rules": [
            {"name": "no-todo", "pattern": r"TODO", "severity": "warning"},
            {"name": "no-debugger", "pattern": r"^\\s*debugger;?$",
             "documentation": "Remove debugger statements before merging."},
        ],
    })

    result = patlint.lint(rule_set, [("src/app.js", source_text)])
    for annotation in result.annotations:
        print(annotation)
    result.passed

    patlint.offset_to_position("foo\\nbar", 4)
    Position(line=2, column=1)
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from patlint.errors import DroppedRuleError
    from patlint.linter.engine import LintResult
    from patlint.matching.positions import Position
    from patlint.ruleset.models import RuleSet


def parse_rule_set(document: object) -> "tuple[RuleSet, tuple[DroppedRuleError, ...]]":
    """Validate a deserialized rule-set document.

    Parameters
    ----------
    document:
        The document, normally a ``dict`` read from YAML or JSON.

    Returns
    -------
    tuple[RuleSet, tuple[DroppedRuleError, ...]]
        The rule set, and one error per rule entry dropped because it was
        malformed or its pattern did not compile.

    Raises
    ------
    patlint.errors.ConfigurationError
        If the document is unusable as a whole (not a mapping, no
        ``rules`` list, malformed global settings).
    """
    from patlint.ruleset.loader import parse_rule_set as _parse

    return _parse(document)


def load_rule_set(path: str | Path) -> "tuple[RuleSet, tuple[DroppedRuleError, ...]]":
    """Read and validate a YAML or JSON rule-set file.

    Raises
    ------
    patlint.errors.ConfigurationError
        If the file is missing, unparsable or unusable as a whole.
    """
    from patlint.ruleset.loader import load_rule_set as _load

    return _load(path)


def lint(
    rules: "RuleSet | Mapping[str, object]",
    files: Sequence[tuple[str, str]],
    strict: bool = False,
    max_workers: int | None = None,
) -> "LintResult":
    """Lint in-memory ``(path, text)`` pairs.

    Parameters
    ----------
    rules:
        A ``RuleSet`` or a raw rule-set document.
    files:
        The files to lint, in the order results should be reported.
    strict:
        When ``True``, warnings are promoted to errors.
    max_workers:
        Upper bound on files linted concurrently; defaults to
        ``min(32, cpu_count + 4)``.

    Returns
    -------
    LintResult
        Annotations, non-fatal issues and the verdict.
    """
    from patlint.linter.engine import lint as _lint

    return _lint(rules, files, max_workers=max_workers, strict=strict)


def lint_paths(
    rules: "RuleSet",
    paths: Sequence[str | Path],
    root: str | Path | None = None,
    strict: bool = False,
    max_workers: int | None = None,
) -> "LintResult":
    """Read files from disk and lint them.

    Unreadable files are reported as issues rather than raised.
    """
    from patlint.linter.engine import LintEngine

    return LintEngine(rules, max_workers=max_workers, strict=strict).run_paths(paths, root=root)


def offset_to_position(text: str, offset: int) -> "Position":
    """Translate a character offset into a 1-based ``(line, column)``."""
    from patlint.matching.positions import offset_to_position as _offset_to_position

    return _offset_to_position(text, offset)


__all__ = [
    "__version__",
    "parse_rule_set",
    "load_rule_set",
    "lint",
    "lint_paths",
    "offset_to_position",
]
