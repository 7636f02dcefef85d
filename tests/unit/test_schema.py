"""Unit tests for patlint.schema — the rule-set JSON Schema."""
from __future__ import annotations

import json

from patlint.schema import SCHEMA_ID, SchemaExporter, export_schema


class TestSchemaExporter:
    def test_top_level(self) -> None:
        schema = SchemaExporter().export()
        assert schema["$id"] == SCHEMA_ID
        assert schema["type"] == "object"
        assert schema["required"] == ["rules"]
        assert set(schema["properties"]) == {
            "global-include-paths",
            "global-exclude-paths",
            "default-severity",
            "rules",
        }

    def test_rule_definition(self) -> None:
        rule = SchemaExporter().export()["$defs"]["rule"]
        assert rule["required"] == ["name", "pattern"]
        assert rule["properties"]["severity"]["enum"] == ["warning", "error"]
        assert "overridden-include-paths" in rule["properties"]
        assert "overridden-exclude-paths" in rule["properties"]

    def test_rules_reference_rule_definition(self) -> None:
        rules = export_schema()["properties"]["rules"]
        assert rules["items"] == {"$ref": "#/$defs/rule"}

    def test_to_json_round_trips(self) -> None:
        exporter = SchemaExporter()
        assert json.loads(exporter.to_json()) == exporter.export()

    def test_to_json_indent(self) -> None:
        assert "\n    " in SchemaExporter().to_json(indent=4)
