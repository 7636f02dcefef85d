"""patlint schema module.

Exports the ``SchemaExporter`` class and the ``export_schema`` convenience function.
"""
from __future__ import annotations

from patlint.schema.json_schema import SCHEMA_ID, SchemaExporter, export_schema

__all__ = ["SCHEMA_ID", "SchemaExporter", "export_schema"]
