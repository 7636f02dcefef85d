#!/usr/bin/env python3
"""Example: Reporters — patlint

Lints files from disk against examples/rules.yaml and renders the result
with every built-in reporter.

Usage:
    python examples/02_reporters.py [PATH ...]

Requirements:
    pip install patlint
"""
from __future__ import annotations

import sys
from pathlib import Path

from patlint.linter import LintEngine
from patlint.reporting import get_reporter, reporter_registry
from patlint.ruleset import load_rule_set

RULES_FILE = Path(__file__).parent / "rules.yaml"


def main(argv: list[str]) -> None:
    rule_set, _ = load_rule_set(RULES_FILE)
    paths = argv or [__file__]
    result = LintEngine(rule_set).run_paths(paths)

    for name in reporter_registry.list_plugins():
        print(f"--- {name} ---")
        print(get_reporter(name).render(result))


if __name__ == "__main__":
    main(sys.argv[1:])
