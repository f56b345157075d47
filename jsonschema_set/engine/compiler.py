# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON Schema engine adapter built on ``jsonschema`` and ``referencing``.

The compiler mirrors a three step contract:

* ``add_resource`` registers one document under one identifier,
* ``compile`` resolves every reference reachable from a target identifier,
  picks the validator class from the document's ``$schema`` and checks the
  schema against its meta-schema,
* ``CompiledSchema.validate`` checks an instance against the compiled target.

A compiler is meant to live for a single call. It holds its own
``referencing.Registry`` seeded with the bundled meta-schemas.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urldefrag

from jsonschema.exceptions import SchemaError, best_match
from jsonschema.validators import validator_for
from jsonschema_specifications import REGISTRY as SPECIFICATIONS
from referencing import Registry, Resource, Specification
from referencing.exceptions import Unresolvable
from referencing.jsonschema import specification_with

from ..config import ValidatorConfig, validator_config
from ..exceptions import CompileError, InstanceValidationError, ResourceError

logger = logging.getLogger(__name__)

# Keywords whose string value is resolved against the registry at compile time
REFERENCE_KEYWORDS = ("$ref", "$dynamicRef")


def _pointer(path) -> str:
    return "/" + "/".join(str(p).replace("~", "~0").replace("/", "~1") for p in path) if path else ""


def _dialect_of(document: Any, default: str) -> str:
    if isinstance(document, dict) and isinstance(document.get("$schema"), str):
        return document["$schema"]
    return default


@dataclass(frozen=True)
class CompiledSchema:
    """A fully resolved validator for one target identifier."""

    identifier: str
    validator: Any

    def validate(self, instance: Any) -> None:
        """Raise :class:`InstanceValidationError` if *instance* does not conform."""
        if self.is_valid(instance):
            return
        error = best_match(self.validator.iter_errors(instance))
        path = _pointer(error.absolute_path)
        raise InstanceValidationError(
            f"jsonschema validation failed with {self.identifier}\n- at '{path}': {error.message}",
            path=path,
        )

    def is_valid(self, instance: Any) -> bool:
        return self.validator.is_valid(instance)


class SchemaCompiler:
    """Call-scoped registry of schema documents plus the compile step."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or validator_config
        self._specification: Specification = specification_with(self.config.default_dialect)
        self._registry: Registry = SPECIFICATIONS
        self._documents: Dict[str, Any] = {}

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._documents

    def add_resource(self, identifier: str, document: Any) -> None:
        """Register *document* under *identifier*.

        Raises:
            ResourceError: duplicate identifier, or a document that is not an
                object or a boolean, or a non-string ``$schema``.
        """
        if identifier in self._documents:
            raise ResourceError(f"duplicate resource {identifier!r}", identifier)
        if not isinstance(document, (dict, bool)):
            raise ResourceError(
                f"resource {identifier!r} must be an object or a boolean, got {type(document).__name__}",
                identifier,
            )
        if isinstance(document, dict) and "$schema" in document and not isinstance(document["$schema"], str):
            raise ResourceError(f"resource {identifier!r} has a non-string $schema", identifier)

        resource = Resource.from_contents(document, default_specification=self._specification)
        self._registry = self._registry.with_resource(uri=identifier, resource=resource)
        self._documents[identifier] = document
        logger.debug("Registered schema resource: %s", identifier)

    def compile(self, identifier: str) -> CompiledSchema:
        """Compile the schema named *identifier* into a :class:`CompiledSchema`.

        Every document reached through a reference is checked against its
        own meta-schema as well.

        Raises:
            CompileError: unknown target, unresolvable reference, unsupported
                ``$schema`` or a schema that fails its meta-schema.
        """
        resolver = self._registry.resolver()
        try:
            target = resolver.lookup(identifier)
        except Unresolvable as e:
            raise CompileError(f"error loading {identifier!r}: schema not found ({e})", identifier) from e

        base, _ = urldefrag(identifier)
        root = resolver.lookup(base).contents if base else target.contents
        dialect = _dialect_of(root, self.config.default_dialect)
        validator_cls = self._check_metaschema(identifier, identifier, root, dialect)

        self._check_references(identifier, target, root, dialect)

        format_checker = validator_cls.FORMAT_CHECKER if self.config.assert_formats else None
        # an empty identifier names the validator's own root, so check the document itself
        schema = {"$ref": identifier} if identifier else target.contents
        validator = validator_cls(schema, registry=self._registry, format_checker=format_checker)
        logger.debug("Compiled schema %s with %s", identifier, validator_cls.__name__)
        return CompiledSchema(identifier=identifier, validator=validator)

    def _check_metaschema(self, identifier: str, resource: str, document: Any, dialect: str):
        """Check *document* against the meta-schema of *dialect* and return its validator class."""
        validator_cls = validator_for({"$schema": dialect}, default=None)
        if validator_cls is None:
            raise CompileError(f"unsupported draft {dialect!r} in {resource!r}", identifier)
        try:
            validator_cls.check_schema(document)
        except SchemaError as e:
            path = _pointer(e.absolute_path)
            raise CompileError(f"{resource!r} is not valid against metaschema: at '{path}': {e.message}", identifier) from e
        return validator_cls

    def _check_references(self, identifier: str, target, root: Any, dialect: str) -> None:
        """Resolve every reference reachable from *target*, following them across documents.

        The first time a reference lands in another resource, that resource
        is checked against its meta-schema.
        """
        checked = {id(root)}
        pending: List[Tuple[Any, Any, Specification, str]] = [
            (target.contents, target.resolver, specification_with(dialect), dialect)
        ]
        seen = set()
        while pending:
            contents, resolver, spec, dialect = pending.pop()
            if not isinstance(contents, dict) or id(contents) in seen:
                continue
            seen.add(id(contents))

            if isinstance(contents.get("$schema"), str):
                spec = specification_with(contents["$schema"], default=spec)
                dialect = contents["$schema"]
            resolver = resolver.in_subresource(spec.create_resource(contents))
            for keyword in REFERENCE_KEYWORDS:
                ref = contents.get(keyword)
                if not isinstance(ref, str):
                    continue
                ref_base, _ = urldefrag(ref)
                try:
                    resolved = resolver.lookup(ref)
                    owner = resolver.lookup(ref_base).contents if ref_base else None
                except Unresolvable as e:
                    raise CompileError(
                        f"error compiling {identifier!r}: cannot resolve {keyword} {ref!r} ({e})", identifier
                    ) from e

                ref_spec, ref_dialect = spec, dialect
                if owner is not None:
                    ref_dialect = _dialect_of(owner, dialect)
                    if id(owner) not in checked:
                        checked.add(id(owner))
                        self._check_metaschema(identifier, ref, owner, ref_dialect)
                    ref_spec = specification_with(ref_dialect, default=spec)
                pending.append((resolved.contents, resolved.resolver, ref_spec, ref_dialect))

            for sub in spec.subresources_of(contents):
                pending.append((sub, resolver, spec, dialect))
