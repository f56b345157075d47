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

"""Compile and validate against sets of JSON Schema documents."""

__version__ = "0.1.0"

from .exceptions import (
    SchemaSetError,
    ResourceError,
    CompileError,
    InstanceValidationError,
    SchemaLoadError,
)
from .config import ValidatorConfig, validator_config
from .registry import build_registry, resolve_identifiers
from .dispatch import compile_schema, compiles, validate
from .api import (
    id_for,
    matches_schema,
    schema_id_is_valid,
    schema_id_validates,
    schema_is_valid,
    schema_validates,
)
from .cache import CompiledSchemaCache

__all__ = [
    "SchemaSetError",
    "ResourceError",
    "CompileError",
    "InstanceValidationError",
    "SchemaLoadError",
    "ValidatorConfig",
    "validator_config",
    "build_registry",
    "resolve_identifiers",
    "compile_schema",
    "compiles",
    "validate",
    "id_for",
    "matches_schema",
    "schema_id_is_valid",
    "schema_id_validates",
    "schema_is_valid",
    "schema_validates",
    "CompiledSchemaCache",
]
