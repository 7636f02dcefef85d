#!/usr/bin/env python3
"""Example: Schema export — patlint

Writes the rule-set JSON Schema next to this script so editors can
validate rules.yaml.

Usage:
    python examples/03_schema_export.py

Requirements:
    pip install patlint
"""
from __future__ import annotations

from pathlib import Path

from patlint.schema import SchemaExporter


def main() -> None:
    target = Path(__file__).parent / "rules.schema.json"
    target.write_text(SchemaExporter().to_json(indent=2), encoding="utf-8")
    print(f"Schema written to {target}")


if __name__ == "__main__":
    main()
