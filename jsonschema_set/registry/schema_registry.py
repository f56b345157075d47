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

from typing import Any, List, Optional, Sequence
import logging

from ..config import ValidatorConfig
from ..engine.compiler import CompiledSchema, SchemaCompiler
from ..exceptions import ResourceError
from .identifiers import resolve_identifiers

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Schema documents of one call, registered under their canonical identifiers."""

    def __init__(self, default_id: str, schemas: Sequence[Any], config: Optional[ValidatorConfig] = None):
        self.default_id = default_id
        self.identifiers: List[str] = resolve_identifiers(default_id, schemas)
        self._compiler = SchemaCompiler(config)
        self._load_schemas(schemas)

    def _load_schemas(self, schemas: Sequence[Any]) -> None:
        """Register documents in order; the first failure aborts the rest."""
        for index, (sid, schema) in enumerate(zip(self.identifiers, schemas)):
            logger.debug(f"Registering schema #{index} as: {sid}")
            if sid in self._compiler:
                raise ResourceError(
                    f"Duplicate schema identifier '{sid}' at position {index}:\n"
                    f"  Existing: position {self.identifiers.index(sid)}",
                    sid,
                )
            self._compiler.add_resource(sid, schema)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._compiler

    def compile(self, target_id: str) -> CompiledSchema:
        """Compile *target_id* against everything registered here."""
        return self._compiler.compile(target_id)


def build_registry(default_id: str, schemas: Sequence[Any], config: Optional[ValidatorConfig] = None) -> SchemaRegistry:
    """Resolve identifiers for *schemas* and register them into a fresh registry.

    Raises:
        ResourceError: a duplicate identifier or a document that is not a
            schema; no partially built registry is returned.
    """
    try:
        return SchemaRegistry(default_id, schemas, config)
    except ResourceError as e:
        logger.debug(f"Failed to register schema set for '{default_id}': {e}")
        raise
