#!/usr/bin/env python3
"""Example: Quickstart — patlint

Minimal working example: build a rule set from a dict, lint a few
in-memory files and print every annotation.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install patlint
"""
from __future__ import annotations

import patlint

RULES = {
    "global-exclude-paths": ["vendor/**"],
    "rules": [
        {
            "name": "no-debugger",
            "pattern": r"^\s*debugger;?$",
            "documentation": "Remove debugger statements before merging.",
        },
        {"name": "no-todo", "pattern": "TODO", "severity": "warning"},
    ],
}

FILES = [
    ("src/app.js", "function run() {\n  debugger;\n  return 1;\n}\n"),
    ("src/util.js", "// TODO: cache this\nexport const x = 1;\n"),
    ("vendor/lib.js", "debugger;\n"),
]


def main() -> None:
    print(f"patlint version: {patlint.__version__}")

    rule_set, dropped = patlint.parse_rule_set(RULES)
    print(f"Loaded {len(rule_set)} rule(s), {len(dropped)} dropped")

    result = patlint.lint(rule_set, FILES)
    for annotation in result.annotations:
        print(f"  {annotation}")

    print(f"Verdict: {result.verdict.value}")

    # Offsets map to 1-based positions with \r\n counted as one terminator
    print(patlint.offset_to_position("xx\r\nyy", 4))


if __name__ == "__main__":
    main()
