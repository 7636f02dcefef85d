"""Unit tests for patlint.linter.annotations and patlint.linter.issues."""
from __future__ import annotations

from patlint.errors import FileAccessError, InvalidRuleError, RuleCompilationError
from patlint.linter.annotations import TITLE_PREFIX, Annotation, build_annotation, build_message
from patlint.linter.issues import IssueKind, LintIssue
from patlint.matching.matcher import Match
from patlint.matching.positions import Position
from patlint.ruleset.models import Rule, Severity


def _annotation(**overrides: object) -> Annotation:
    fields: dict = dict(
        title=f"{TITLE_PREFIX}: r",
        file="src/a.py",
        start_line=3,
        end_line=3,
        start_column=5,
        end_column=9,
        message="r\nMatched: oops",
        severity=Severity.ERROR,
        rule="r",
    )
    fields.update(overrides)
    return Annotation(**fields)


class TestBuildMessage:
    def test_without_documentation(self) -> None:
        rule = Rule.create("no-bar", "bar")
        assert build_message(rule, "bar") == "no-bar\nMatched: bar"

    def test_with_documentation(self) -> None:
        rule = Rule.create("no-bar", "bar", documentation="Bars are banned.")
        assert build_message(rule, "bar").splitlines() == [
            "no-bar",
            "Matched: bar",
            "Bars are banned.",
        ]


class TestBuildAnnotation:
    def test_fields_come_from_rule_match_and_positions(self) -> None:
        rule = Rule.create("no-bar", "bar", severity=Severity.WARNING)
        match = Match(rule=rule, start=4, end=7, text="bar")
        annotation = build_annotation("a.txt", rule, match, Position(2, 1), Position(2, 4))
        assert annotation.title == "Pattern lint violation: no-bar"
        assert annotation.file == "a.txt"
        assert (annotation.start_line, annotation.start_column) == (2, 1)
        assert (annotation.end_line, annotation.end_column) == (2, 4)
        assert annotation.severity is Severity.WARNING
        assert annotation.rule == "no-bar"
        assert not annotation.is_error


class TestAnnotation:
    def test_str_uses_first_message_line(self) -> None:
        assert str(_annotation()) == "src/a.py:3:5: error: [r] r"

    def test_is_multiline(self) -> None:
        assert not _annotation().is_multiline
        assert _annotation(end_line=4).is_multiline

    def test_to_dict_serializes_severity(self) -> None:
        data = _annotation(severity=Severity.WARNING).to_dict()
        assert data["severity"] == "warning"
        assert data["end_column"] == 9
        assert set(data) == {
            "title",
            "file",
            "start_line",
            "end_line",
            "start_column",
            "end_column",
            "message",
            "severity",
            "rule",
        }


class TestLintIssue:
    def test_from_compilation_error(self) -> None:
        issue = LintIssue.from_error(RuleCompilationError("bad", "(", "missing )"))
        assert issue.kind is IssueKind.DROPPED_RULE
        assert issue.subject == "bad"
        assert str(issue).startswith("[dropped-rule] Rule 'bad' dropped")

    def test_from_invalid_entry(self) -> None:
        issue = LintIssue.from_error(InvalidRuleError(3, None, ["a", "b"]))
        assert issue.kind is IssueKind.INVALID_RULE
        assert issue.subject == "rules[3]"
        assert issue.message == "Rule entry rules[3] dropped: a; b"

    def test_from_file_error(self) -> None:
        issue = LintIssue.from_error(FileAccessError("a.txt", "No such file"))
        assert issue.kind is IssueKind.UNREADABLE_FILE
        assert issue.to_dict() == {
            "kind": "unreadable-file",
            "subject": "a.txt",
            "message": "Cannot read a.txt: No such file",
        }
