"""Identifier resolution and call-scoped schema registration."""

from .identifiers import canonical_identifier, declared_id, resolve_identifiers
from .schema_registry import SchemaRegistry, build_registry

__all__ = [
    "canonical_identifier",
    "declared_id",
    "resolve_identifiers",
    "SchemaRegistry",
    "build_registry",
]
