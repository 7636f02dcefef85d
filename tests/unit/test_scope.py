"""Unit tests for patlint.scope — glob matching and rule scope resolution."""
from __future__ import annotations

import pytest

from patlint.ruleset.models import Rule, RuleSet
from patlint.scope.globs import match_any, match_glob, normalize_path
from patlint.scope.resolver import applies_to, in_scope, passes_global_scope


def _rule(**kwargs: object) -> Rule:
    return Rule.create("r", "x", **kwargs)  # type: ignore[arg-type]


# ===========================================================================
# Globs
# ===========================================================================


class TestNormalizePath:
    def test_backslashes_become_forward_slashes(self) -> None:
        assert normalize_path("src\\app\\main.py") == "src/app/main.py"

    def test_leading_dot_slash_is_stripped(self) -> None:
        assert normalize_path("././src/a.py") == "src/a.py"

    def test_plain_path_unchanged(self) -> None:
        assert normalize_path("a/b.txt") == "a/b.txt"


class TestMatchGlob:
    @pytest.mark.parametrize(
        ("path", "pattern"),
        [
            ("src/app/main.py", "src/**/*.py"),
            ("src/main.py", "src/**/*.py"),
            ("docs/guide.md", "*.md"),
            ("README.md", "*.md"),
            ("vendor/lib/x.js", "vendor/**"),
            ("a/vendor/b/c.js", "**/vendor/**"),
            ("file1.txt", "file?.txt"),
            ("file1.txt", "file[0-9].txt"),
            ("./src/a.py", "src/*.py"),
            ("src\\a.py", "src/*.py"),
            ("vendor/a.js", "vendor/"),
            ("vendor/lib/x.js", "vendor//"),
            ("src/main.py", "/src/*.py"),
            ("a/vendor/b.js", "**/vendor/"),
        ],
    )
    def test_matches(self, path: str, pattern: str) -> None:
        assert match_glob(path, pattern)

    @pytest.mark.parametrize(
        ("path", "pattern"),
        [
            ("src/app/main.py", "src/*.py"),
            ("src/main.js", "src/**/*.py"),
            ("lib/vendor.js", "vendor/**"),
            ("fileA.txt", "file[0-9].txt"),
            ("file10.txt", "file?.txt"),
            ("README.MD", "*.md"),
            ("lib/vendor.js", "vendor/"),
            ("vendor.js", "vendor/"),
            ("lib/src/main.py", "/src/*.py"),
        ],
    )
    def test_non_matches(self, path: str, pattern: str) -> None:
        assert not match_glob(path, pattern)

    def test_empty_pattern_matches_nothing(self) -> None:
        assert not match_glob("a.txt", "")

    def test_bare_slash_matches_nothing(self) -> None:
        assert not match_glob("a.txt", "/")

    def test_match_any(self) -> None:
        assert match_any("a/b.py", ["*.js", "*.py"])
        assert not match_any("a/b.py", [])


# ===========================================================================
# Resolver
# ===========================================================================


class TestInScope:
    def test_unset_lists_accept_everything(self) -> None:
        assert in_scope("anything", None, None)

    def test_include_required_when_set(self) -> None:
        assert in_scope("src/a.py", ("src/**",), None)
        assert not in_scope("lib/a.py", ("src/**",), None)

    def test_exclude_rejects(self) -> None:
        assert not in_scope("vendor/a.js", None, ("vendor/**",))

    def test_exclude_wins_over_include(self) -> None:
        assert not in_scope("src/gen/a.py", ("src/**",), ("src/gen/**",))

    def test_empty_include_matches_nothing(self) -> None:
        assert not in_scope("a.txt", (), None)

    def test_empty_exclude_rejects_nothing(self) -> None:
        assert in_scope("a.txt", None, ())


class TestAppliesTo:
    def test_rule_without_override_uses_global_scope(self) -> None:
        rule_set = RuleSet(rules=(_rule(),), global_exclude_paths=("vendor/**",))
        assert not applies_to("vendor/x.js", rule_set.rules[0], rule_set)
        assert applies_to("src/x.js", rule_set.rules[0], rule_set)

    def test_override_replaces_global_scope(self) -> None:
        rule = _rule(include_paths=("vendor/**",))
        rule_set = RuleSet(rules=(rule,), global_exclude_paths=("vendor/**",))
        assert applies_to("vendor/x.js", rule, rule_set)

    def test_exclude_only_override_ignores_global_include(self) -> None:
        rule = _rule(exclude_paths=("tests/**",))
        rule_set = RuleSet(rules=(rule,), global_include_paths=("src/**",))
        assert applies_to("docs/readme.md", rule, rule_set)
        assert not applies_to("tests/test_a.py", rule, rule_set)

    def test_include_only_override_ignores_global_exclude(self) -> None:
        rule = _rule(include_paths=("*.py",))
        rule_set = RuleSet(rules=(rule,), global_exclude_paths=("*.py",))
        assert applies_to("a.py", rule, rule_set)
        assert not applies_to("a.js", rule, rule_set)

    @pytest.mark.parametrize("path", ["src/a.py", "vendor/b.py", "c.md", "x/y/z.txt"])
    def test_override_result_independent_of_globals(self, path: str) -> None:
        rule = _rule(include_paths=("**/*.py",), exclude_paths=("vendor/**",))
        plain = RuleSet(rules=(rule,))
        scoped = RuleSet(
            rules=(rule,),
            global_include_paths=("docs/**",),
            global_exclude_paths=("**",),
        )
        assert applies_to(path, rule, plain) == applies_to(path, rule, scoped)

    def test_passes_global_scope(self) -> None:
        rule_set = RuleSet(global_include_paths=("src/**",))
        assert passes_global_scope("src/a.py", rule_set)
        assert not passes_global_scope("lib/a.py", rule_set)
