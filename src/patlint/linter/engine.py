"""patlint lint engine: evaluates a rule set against a batch of files.

Every file is evaluated independently on a bounded thread pool: the
worker loads the text (the only step that blocks), resolves scope for each
rule, runs the matcher over the whole text and maps matches to positions.
Per-file results are merged by input position once every worker has
finished, so output order is always

    files in input order -> rules in rule-set order -> matches left to right

regardless of which file finished first.

Usage
-----
::

    from patlint.ruleset import load_rule_set
    from patlint.linter import LintEngine

    rule_set, dropped = load_rule_set("rules.yaml")
    engine = LintEngine(rule_set)
    result = engine.run([("src/app.py", source_text)])
    if not result.passed:
        ...
"""
from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from patlint.errors import FileAccessError, FileAccessErrorGroup
from patlint.linter.annotations import Annotation, build_annotation
from patlint.linter.issues import IssueKind, LintIssue
from patlint.matching.matcher import find_matches
from patlint.matching.positions import LineIndex
from patlint.ruleset.loader import parse_rule_set
from patlint.ruleset.models import RuleSet, Severity
from patlint.scope.globs import normalize_path
from patlint.scope.resolver import in_scope, passes_global_scope

logger = logging.getLogger(__name__)

TextLoader = Callable[[], str]


class Verdict(Enum):
    PASSING = "passing"
    FAILING = "failing"


@dataclass(frozen=True)
class LintResult:
    """Outcome of one lint run.

    Parameters
    ----------
    annotations:
        Every finding, in canonical order.
    issues:
        Non-fatal problems (dropped rules, unreadable files).
    files_scanned:
        Number of files whose text was evaluated.
    """

    annotations: tuple[Annotation, ...] = ()
    issues: tuple[LintIssue, ...] = ()
    files_scanned: int = 0

    @property
    def verdict(self) -> Verdict:
        """FAILING iff at least one annotation has ``error`` severity."""
        if any(a.is_error for a in self.annotations):
            return Verdict.FAILING
        return Verdict.PASSING

    @property
    def passed(self) -> bool:
        return self.verdict == Verdict.PASSING

    @property
    def error_count(self) -> int:
        return sum(1 for a in self.annotations if a.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for a in self.annotations if a.severity == Severity.WARNING)

    def issues_of(self, kind: IssueKind) -> list[LintIssue]:
        return [issue for issue in self.issues if issue.kind == kind]

    def with_leading_issues(self, issues: Iterable[LintIssue]) -> "LintResult":
        """Return a copy with ``issues`` placed before the existing ones."""
        return replace(self, issues=(*issues, *self.issues))


@dataclass
class _FileOutcome:
    annotations: list[Annotation] = field(default_factory=list)
    error: FileAccessError | None = None


class LintEngine:
    """Evaluates a ``RuleSet`` against files.

    Parameters
    ----------
    rule_set:
        The validated rule set.  It is shared read-only by all workers.
    max_workers:
        Upper bound on concurrently evaluated files.  Defaults to
        ``min(32, cpu_count + 4)``.
    strict:
        When ``True``, warning annotations are promoted to errors.
    fail_on_unreadable:
        When ``True``, unreadable files abort the run with a
        ``FileAccessErrorGroup`` once all other files have finished.
        Otherwise they are reported as issues.
    """

    def __init__(
        self,
        rule_set: RuleSet,
        *,
        max_workers: int | None = None,
        strict: bool = False,
        fail_on_unreadable: bool = False,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._rule_set = rule_set
        self._max_workers = max_workers or min(32, (os.cpu_count() or 1) + 4)
        self._strict = strict
        self._fail_on_unreadable = fail_on_unreadable

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def lint_text(self, path: str, text: str) -> list[Annotation]:
        """Evaluate every applicable rule against one file's full text.

        Parameters
        ----------
        path:
            Repository-relative path, used for scoping and reporting.
        text:
            The complete file contents.

        Returns
        -------
        list[Annotation]
            Findings in rule-set order, then left-to-right.
        """
        path = normalize_path(path)
        global_ok = passes_global_scope(path, self._rule_set)
        index: LineIndex | None = None
        annotations: list[Annotation] = []

        for rule in self._rule_set.rules:
            if rule.has_scope_override:
                if not in_scope(path, rule.include_paths, rule.exclude_paths):
                    continue
            elif not global_ok:
                continue

            matches = find_matches(text, rule)
            if not matches:
                continue
            if index is None:
                index = LineIndex(text)
            for match in matches:
                annotation = build_annotation(
                    path, rule, match, index.position(match.start), index.position(match.end)
                )
                if self._strict and annotation.severity == Severity.WARNING:
                    annotation = replace(annotation, severity=Severity.ERROR)
                annotations.append(annotation)

        logger.debug("%s: %d annotation(s)", path, len(annotations))
        return annotations

    def run(self, files: Sequence[tuple[str, str]]) -> LintResult:
        """Lint in-memory ``(path, text)`` pairs."""
        jobs = [(path, _constant(text)) for path, text in files]
        return self._run(jobs)

    def run_paths(
        self,
        paths: Sequence[str | Path],
        root: str | Path | None = None,
    ) -> LintResult:
        """Read and lint files from disk.

        Parameters
        ----------
        paths:
            Files to lint.  Relative paths are resolved against ``root``.
        root:
            Repository root.  Reported paths are relative to it when the
            file lives underneath it.  Defaults to the working directory.

        Raises
        ------
        FileAccessErrorGroup
            Only when ``fail_on_unreadable`` is set and a file could not
            be read.
        """
        base = Path(root) if root is not None else Path.cwd()
        jobs: list[tuple[str, TextLoader]] = []
        for item in paths:
            full = Path(item)
            if not full.is_absolute():
                full = base / full
            jobs.append((_display_path(full, base), _file_loader(full)))
        return self._run(jobs)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(self, jobs: list[tuple[str, TextLoader]]) -> LintResult:
        outcomes: list[_FileOutcome] = [_FileOutcome() for _ in jobs]
        if jobs:
            with ThreadPoolExecutor(max_workers=min(self._max_workers, len(jobs))) as pool:
                futures = {
                    pool.submit(self._evaluate, path, load): position
                    for position, (path, load) in enumerate(jobs)
                }
                for future in as_completed(futures):
                    outcomes[futures[future]] = future.result()

        errors = [o.error for o in outcomes if o.error is not None]
        if errors and self._fail_on_unreadable:
            raise FileAccessErrorGroup(errors)

        annotations = tuple(a for o in outcomes for a in o.annotations)
        result = LintResult(
            annotations=annotations,
            issues=tuple(LintIssue.from_error(e) for e in errors),
            files_scanned=len(jobs) - len(errors),
        )
        logger.debug(
            "Linted %d file(s): %d error(s), %d warning(s), verdict %s",
            result.files_scanned,
            result.error_count,
            result.warning_count,
            result.verdict.value,
        )
        return result

    def _evaluate(self, path: str, load: TextLoader) -> _FileOutcome:
        try:
            text = load()
        except (OSError, UnicodeDecodeError) as exc:
            error = FileAccessError(path, str(exc))
            logger.warning("%s", error)
            return _FileOutcome(error=error)
        return _FileOutcome(annotations=self.lint_text(path, text))


def _constant(text: str) -> TextLoader:
    return lambda: text


def _file_loader(path: Path) -> TextLoader:
    def load() -> str:
        # newline="" keeps \r\n and \r intact for position mapping
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    return load


def _display_path(path: Path, root: Path) -> str:
    # lexical only: a symlink keeps the path it has inside the repository
    absolute = Path(os.path.abspath(path))
    try:
        return normalize_path(absolute.relative_to(os.path.abspath(root)))
    except ValueError:
        return normalize_path(absolute)


def lint(
    rules: RuleSet | Mapping[str, object],
    files: Sequence[tuple[str, str]],
    *,
    max_workers: int | None = None,
    strict: bool = False,
) -> LintResult:
    """Convenience function: lint in-memory files against a rule set.

    Parameters
    ----------
    rules:
        A parsed ``RuleSet`` or a raw rule-set document.  A document is
        parsed first and every dropped rule is reported as an issue.
    files:
        ``(path, text)`` pairs.
    max_workers:
        See ``LintEngine``.
    strict:
        If ``True``, warnings are promoted to errors.

    Raises
    ------
    ConfigurationError
        If ``rules`` is a document that is unusable as a whole.  Malformed
        rule entries are dropped and reported as issues instead.
    """
    dropped: tuple[LintIssue, ...] = ()
    if isinstance(rules, RuleSet):
        rule_set = rules
    else:
        rule_set, dropped_rules = parse_rule_set(rules)
        dropped = tuple(LintIssue.from_error(e) for e in dropped_rules)

    result = LintEngine(rule_set, max_workers=max_workers, strict=strict).run(files)
    return result.with_leading_issues(dropped)
