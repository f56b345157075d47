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

"""Compile and validate dispatchers.

Both dispatchers run ``resolve -> register -> compile`` on a fresh registry
and differ in how a registration failure is reported:

==================  =====================  ======================
failure             ``compiles``           ``validate``
==================  =====================  ======================
ResourceError       ``False``              raised
CompileError        raised                 raised
instance mismatch   n/a                    ``False`` (INFO log)
==================  =====================  ======================
"""

import logging
from typing import Any, Optional, Sequence

from .config import ValidatorConfig
from .engine.compiler import CompiledSchema
from .exceptions import InstanceValidationError, ResourceError
from .registry.schema_registry import build_registry

logger = logging.getLogger(__name__)


def compile_schema(
    target_id: str,
    schemas: Sequence[Any],
    default_id: Optional[str] = None,
    config: Optional[ValidatorConfig] = None,
) -> CompiledSchema:
    """Register *schemas* and compile the one named *target_id*.

    Anonymous documents are named after *default_id*, which defaults to
    *target_id* itself.

    Raises:
        ResourceError: registration failed.
        CompileError: *target_id* could not be compiled.
    """
    registry = build_registry(default_id or target_id, schemas, config)
    return registry.compile(target_id)


def check_instance(compiled: CompiledSchema, instance: Any) -> bool:
    """Check *instance*, logging the diagnostic and returning False on mismatch."""
    try:
        compiled.validate(instance)
    except InstanceValidationError as e:
        logger.info("%s", e)
        return False
    return True


def compiles(
    target_id: str,
    schemas: Sequence[Any],
    default_id: Optional[str] = None,
    config: Optional[ValidatorConfig] = None,
) -> bool:
    """Return whether schema *target_id* in *schemas* is a valid schema.

    A registration failure (duplicate identifier, non-schema document) yields
    ``False``; a compile failure is raised as :class:`CompileError`.
    """
    try:
        registry = build_registry(default_id or target_id, schemas, config)
    except ResourceError as e:
        logger.debug("Schema set for '%s' rejected: %s", target_id, e)
        return False
    registry.compile(target_id)
    return True


def validate(
    target_id: str,
    schemas: Sequence[Any],
    instance: Any,
    default_id: Optional[str] = None,
    config: Optional[ValidatorConfig] = None,
) -> bool:
    """Return whether *instance* satisfies schema *target_id* in *schemas*.

    Registration and compile failures are raised (:class:`ResourceError`,
    :class:`CompileError`); only an instance mismatch yields ``False``.
    """
    compiled = compile_schema(target_id, schemas, default_id, config)
    return check_instance(compiled, instance)
