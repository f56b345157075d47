"""JSON Schema engine adapter.

Everything that touches ``jsonschema``/``referencing`` directly lives here so
that the registry and dispatch layers only see identifiers and documents.
"""

from .compiler import CompiledSchema, SchemaCompiler

__all__ = ["CompiledSchema", "SchemaCompiler"]
