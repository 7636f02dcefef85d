"""Decides whether a rule applies to a file.

Scope is two-sided: a path passes when it matches the include list (or
there is none) and matches nothing in the exclude list (or there is none).

A rule that defines either ``include_paths`` or ``exclude_paths`` is
scoped *only* by its own lists; the global lists are not consulted for it
at all, even in the direction the rule left unset.  Rules without
overrides use the rule set's global lists.

A file that falls outside a rule's scope is silently skipped for that
rule.
"""
from __future__ import annotations

from pathlib import PurePath

from patlint.ruleset.models import Rule, RuleSet
from patlint.scope.globs import match_any


def in_scope(
    path: str | PurePath,
    include: tuple[str, ...] | None,
    exclude: tuple[str, ...] | None,
) -> bool:
    """Apply one include/exclude pair to ``path``.

    ``None`` means the list is unset.  An empty tuple is a set list; an
    empty include list therefore matches nothing.
    """
    if include is not None and not match_any(path, include):
        return False
    if exclude is not None and match_any(path, exclude):
        return False
    return True


def passes_global_scope(path: str | PurePath, rule_set: RuleSet) -> bool:
    """Return True if ``path`` is inside the rule set's global scope."""
    return in_scope(path, rule_set.global_include_paths, rule_set.global_exclude_paths)


def applies_to(path: str | PurePath, rule: Rule, rule_set: RuleSet) -> bool:
    """Return True if ``rule`` should be evaluated against ``path``."""
    if rule.has_scope_override:
        return in_scope(path, rule.include_paths, rule.exclude_paths)
    return passes_global_scope(path, rule_set)
