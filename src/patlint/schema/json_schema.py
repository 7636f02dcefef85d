"""JSON Schema for patlint rule-set documents.

``SchemaExporter`` produces a JSON Schema (draft 2020-12) describing the
document accepted by ``parse_rule_set``.  Editors can use it to validate
and autocomplete rule files; it is documentation-as-code, and the loader
remains the authority on what is accepted.

Usage
-----
::

    from patlint.schema import SchemaExporter

    exporter = SchemaExporter()
    print(exporter.to_json(indent=2))
"""
from __future__ import annotations

import json

from patlint.ruleset.models import Severity

Schema = dict[str, object]

SCHEMA_ID = "urn:patlint:rule-set"


def _glob_list(description: str) -> Schema:
    return {
        "type": "array",
        "items": {"type": "string"},
        "description": f"{description}. Root-relative globs; a trailing / matches a whole directory",
    }


def _severity() -> Schema:
    return {"type": "string", "enum": [s.value for s in Severity]}


def _rule_schema() -> Schema:
    return {
        "type": "object",
        "required": ["name", "pattern"],
        "properties": {
            "name": {"type": "string", "minLength": 1, "description": "Rule identifier"},
            "pattern": {
                "type": "string",
                "description": "Regular expression matched against whole files in multi-line mode",
            },
            "documentation": {"type": "string", "description": "Appended to every message"},
            "severity": {**_severity(), "description": "Defaults to default-severity"},
            "overridden-include-paths": _glob_list(
                "Replaces global-include-paths for this rule"
            ),
            "overridden-exclude-paths": _glob_list(
                "Replaces global-exclude-paths for this rule"
            ),
            "literal": {"type": "boolean", "description": "Match the pattern as plain text"},
            "ignore-case": {"type": "boolean"},
        },
    }


class SchemaExporter:
    """Builds the rule-set document schema."""

    def export(self) -> Schema:
        """Return the schema as a plain dict."""
        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "$id": SCHEMA_ID,
            "title": "patlint rule set",
            "type": "object",
            "required": ["rules"],
            "properties": {
                "global-include-paths": _glob_list("Files every rule applies to"),
                "global-exclude-paths": _glob_list("Files no rule applies to"),
                "default-severity": {**_severity(), "default": Severity.ERROR.value},
                "rules": {"type": "array", "items": {"$ref": "#/$defs/rule"}},
            },
            "$defs": {"rule": _rule_schema()},
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.export(), indent=indent)


def export_schema() -> Schema:
    """Convenience function: return the rule-set JSON Schema."""
    return SchemaExporter().export()
