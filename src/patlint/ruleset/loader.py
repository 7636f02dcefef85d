"""Rule-set document parsing and validation.

A rule-set document is a mapping (usually YAML, JSON also works) in the
following canonical shape::

    global-include-paths: ["src/**"]
    global-exclude-paths: ["**/vendor/**"]
    default-severity: error
    rules:
      - name: no-print
        pattern: "\\bprint\\("
        documentation: Use the logging module instead.
        severity: warning
        overridden-include-paths: ["*.py"]
        overridden-exclude-paths: ["tests/**"]
        literal: false
        ignore-case: false

Problems with the document as a whole (not a mapping, no ``rules`` list,
malformed global settings) are collected and raised together as one
``ConfigurationError``.  Problems with a single rule entry only drop that
rule: a malformed entry becomes an ``InvalidRuleError`` listing everything
wrong with it, and a pattern that fails to compile becomes a
``RuleCompilationError``.  Both are returned next to the parsed
``RuleSet`` and the remaining rules are kept.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from patlint.errors import (
    ConfigurationError,
    DroppedRuleError,
    InvalidRuleError,
    RuleCompilationError,
)
from patlint.ruleset.models import Rule, RuleSet, Severity

logger = logging.getLogger(__name__)

_GLOBAL_INCLUDE = "global-include-paths"
_GLOBAL_EXCLUDE = "global-exclude-paths"
_DEFAULT_SEVERITY = "default-severity"
_RULES = "rules"
_RULE_INCLUDE = "overridden-include-paths"
_RULE_EXCLUDE = "overridden-exclude-paths"


def parse_rule_set(document: object) -> tuple[RuleSet, tuple[DroppedRuleError, ...]]:
    """Validate a deserialized rule-set document and build a ``RuleSet``.

    Parameters
    ----------
    document:
        The deserialized document, normally a ``dict``.

    Returns
    -------
    tuple[RuleSet, tuple[DroppedRuleError, ...]]
        The rule set with every usable rule, and one error per rule entry
        that was dropped, in document order.

    Raises
    ------
    ConfigurationError
        If the document is not a mapping, has no ``rules`` list, or has
        malformed global settings.
    """
    if not isinstance(document, Mapping):
        raise ConfigurationError(
            f"Rule set must be a mapping at top level, got {type(document).__name__}"
        )
    raw_rules = document.get(_RULES)
    if raw_rules is None:
        raise ConfigurationError(f"Rule set is missing the {_RULES!r} list")
    if not isinstance(raw_rules, list):
        raise ConfigurationError(f"{_RULES!r} must be a list, got {type(raw_rules).__name__}")

    problems: list[str] = []
    global_include = _path_list(document, _GLOBAL_INCLUDE, _GLOBAL_INCLUDE, problems)
    global_exclude = _path_list(document, _GLOBAL_EXCLUDE, _GLOBAL_EXCLUDE, problems)

    default_severity = Severity.ERROR
    if _DEFAULT_SEVERITY in document:
        parsed = _severity(document[_DEFAULT_SEVERITY], _DEFAULT_SEVERITY, problems)
        if parsed is not None:
            default_severity = parsed

    if problems:
        raise ConfigurationError(
            f"Rule set has {len(problems)} problem(s)", problems=problems
        )

    rules: list[Rule] = []
    dropped: list[DroppedRuleError] = []
    for index, entry in enumerate(raw_rules):
        result = _parse_rule(index, entry, default_severity)
        if isinstance(result, DroppedRuleError):
            logger.warning("%s", result)
            dropped.append(result)
        else:
            rules.append(result)

    rule_set = RuleSet(
        rules=tuple(rules),
        global_include_paths=global_include,
        global_exclude_paths=global_exclude,
    )
    logger.debug("Parsed rule set: rules %s, %d dropped", rule_set.rule_names, len(dropped))
    return rule_set, tuple(dropped)


def load_rule_set(path: str | Path) -> tuple[RuleSet, tuple[DroppedRuleError, ...]]:
    """Read a YAML or JSON rule-set file and parse it.

    Raises
    ------
    ConfigurationError
        If the file cannot be read, is not valid YAML/JSON, or fails
        top-level validation.
    """
    rules_path = Path(path)
    try:
        text = rules_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigurationError(f"Rule set file not found: {rules_path}") from None
    except OSError as exc:
        raise ConfigurationError(f"Cannot read rule set {rules_path}: {exc}") from exc

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Rule set {rules_path} is not valid YAML/JSON: {exc}") from exc

    logger.debug("Loaded rule set document from %s", rules_path)
    return parse_rule_set(document)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _parse_rule(index: int, entry: object, default_severity: Severity) -> Rule | DroppedRuleError:
    """Build one rule, or the error explaining why the entry was dropped."""
    if not isinstance(entry, Mapping):
        return InvalidRuleError(index, None, [f"must be a mapping, got {type(entry).__name__}"])

    problems: list[str] = []

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        problems.append("'name' must be a non-empty string")
        name = None
    else:
        name = name.strip()

    pattern = entry.get("pattern")
    if not isinstance(pattern, str):
        problems.append(f"'pattern' must be a string, got {type(pattern).__name__}")

    documentation = entry.get("documentation")
    if documentation is not None and not isinstance(documentation, str):
        problems.append("'documentation' must be a string")

    severity = default_severity
    if entry.get("severity") is not None:
        severity = _severity(entry["severity"], "'severity'", problems) or default_severity

    include = _path_list(entry, _RULE_INCLUDE, repr(_RULE_INCLUDE), problems)
    exclude = _path_list(entry, _RULE_EXCLUDE, repr(_RULE_EXCLUDE), problems)
    literal = _flag(entry, "literal", problems)
    ignore_case = _flag(entry, "ignore-case", problems)

    if problems:
        return InvalidRuleError(index, name, problems)

    try:
        return Rule.create(
            name,
            pattern,
            documentation=documentation or None,
            severity=severity,
            include_paths=include,
            exclude_paths=exclude,
            literal=literal,
            ignore_case=ignore_case,
        )
    except re.error as exc:
        return RuleCompilationError(name, pattern, str(exc))


def _path_list(
    container: Mapping[str, Any],
    key: str,
    label: str,
    problems: list[str],
) -> tuple[str, ...] | None:
    if key not in container or container[key] is None:
        return None
    value = container[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        problems.append(f"{label} must be a list of glob strings")
        return None
    return tuple(value)


def _severity(value: object, label: str, problems: list[str]) -> Severity | None:
    if not isinstance(value, str):
        problems.append(f"{label} must be a string")
        return None
    try:
        return Severity.parse(value)
    except ValueError as exc:
        problems.append(f"{label}: {exc}")
        return None


def _flag(entry: Mapping[str, Any], key: str, problems: list[str]) -> bool:
    value = entry.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        problems.append(f"{key!r} must be true or false")
        return False
    return value
