"""Rule-set model and loading.

Exports the typed ``Rule`` / ``RuleSet`` model and the functions that
build it from a deserialized document or a YAML/JSON file.
"""
from __future__ import annotations

from patlint.ruleset.loader import load_rule_set, parse_rule_set
from patlint.ruleset.models import Rule, RuleSet, Severity, compile_pattern

__all__ = [
    "Rule",
    "RuleSet",
    "Severity",
    "compile_pattern",
    "parse_rule_set",
    "load_rule_set",
]
