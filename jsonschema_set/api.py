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

"""Single-schema and variadic entry points.

These are the pg_jsonschema-style call shapes, expressed once over plain
JSON values:

* ``schema_is_valid(schema)`` / ``schema_id_is_valid(id, *schemas)``
* ``schema_validates(instance, schema)`` / ``schema_id_validates(instance, id, *schemas)``
* ``matches_schema(schema, instance)``
"""

from typing import Any, Optional

from .config import ValidatorConfig, validator_config
from .dispatch import compiles, validate
from .registry.identifiers import declared_id


def id_for(schema: Any = None, default: Optional[str] = None) -> str:
    """Return the string ``$id`` of *schema*, else *default* or the configured sentinel."""
    sid = declared_id(schema)
    if sid is not None:
        return sid
    return default or validator_config.default_id


def schema_is_valid(schema: Any, config: Optional[ValidatorConfig] = None) -> bool:
    """Validate *schema* on its own."""
    default = (config or validator_config).default_id
    return compiles(id_for(schema, default), [schema], config=config)


def schema_id_is_valid(id: str, *schemas: Any, config: Optional[ValidatorConfig] = None) -> bool:
    """Validate the schema with the identifier *id* from *schemas*."""
    return compiles(id or (config or validator_config).default_id, list(schemas), config=config)


def schema_validates(instance: Any, schema: Any, config: Optional[ValidatorConfig] = None) -> bool:
    """Validate *instance* against *schema*."""
    default = (config or validator_config).default_id
    return validate(id_for(schema, default), [schema], instance, config=config)


def schema_id_validates(instance: Any, id: str, *schemas: Any, config: Optional[ValidatorConfig] = None) -> bool:
    """Validate *instance* against the schema with the identifier *id* in *schemas*."""
    return validate(id or (config or validator_config).default_id, list(schemas), instance, config=config)


def matches_schema(schema: Any, instance: Any, config: Optional[ValidatorConfig] = None) -> bool:
    """pg_jsonschema-compatible spelling of :func:`schema_validates`."""
    return schema_validates(instance, schema, config=config)
