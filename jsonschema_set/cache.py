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

"""Opt-in cache of compiled schemas keyed by a content fingerprint.

The core dispatchers never cache. Callers that check many instances against
the same schema set can route through a :class:`CompiledSchemaCache` instead;
it keeps the dispatcher contract and only memoizes successful compiles.
"""

import hashlib
import json
import logging
from collections import OrderedDict
from typing import Any, Optional, Sequence

from .config import ValidatorConfig, validator_config
from .dispatch import check_instance, compile_schema
from .engine.compiler import CompiledSchema
from .exceptions import ResourceError

logger = logging.getLogger(__name__)


def fingerprint(target_id: str, schemas: Sequence[Any], default_id: Optional[str] = None,
                config: Optional[ValidatorConfig] = None) -> str:
    """Return a stable SHA-256 of the compile inputs."""
    config = config or validator_config
    payload = {
        "target": target_id,
        "default_id": default_id or target_id,
        "schemas": list(schemas),
        "dialect": config.default_dialect,
        "formats": config.assert_formats,
    }
    b = json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=False,
        sort_keys=True,
    ).encode("utf-8")
    return hashlib.sha256(b).hexdigest()


class CompiledSchemaCache:
    """Least-recently-used cache of :class:`CompiledSchema` objects."""

    def __init__(self, max_size: int = 128, config: Optional[ValidatorConfig] = None):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self.config = config or validator_config
        self._entries: "OrderedDict[str, CompiledSchema]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Drop every cached compile."""
        self._entries.clear()

    def get_compiled(self, target_id: str, schemas: Sequence[Any], default_id: Optional[str] = None) -> CompiledSchema:
        """Return the compiled target, compiling on a miss.

        Raises whatever :func:`compile_schema` raises; failures are not cached.
        """
        key = fingerprint(target_id, schemas, default_id, self.config)
        compiled = self._entries.get(key)
        if compiled is not None:
            self._entries.move_to_end(key)
            self.hits += 1
            return compiled

        self.misses += 1
        compiled = compile_schema(target_id, schemas, default_id, self.config)
        self._entries[key] = compiled
        if len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted compiled schema %s", evicted[:12])
        return compiled

    def compiles(self, target_id: str, schemas: Sequence[Any], default_id: Optional[str] = None) -> bool:
        """Cached counterpart of :func:`jsonschema_set.dispatch.compiles`."""
        try:
            self.get_compiled(target_id, schemas, default_id)
        except ResourceError as e:
            logger.debug("Schema set for '%s' rejected: %s", target_id, e)
            return False
        return True

    def validate(self, target_id: str, schemas: Sequence[Any], instance: Any, default_id: Optional[str] = None) -> bool:
        """Cached counterpart of :func:`jsonschema_set.dispatch.validate`."""
        return check_instance(self.get_compiled(target_id, schemas, default_id), instance)


def default_cache(config: Optional[ValidatorConfig] = None) -> Optional[CompiledSchemaCache]:
    """Return a cache sized from *config* when caching is enabled, else None."""
    config = config or validator_config
    if not config.cache_enabled:
        return None
    return CompiledSchemaCache(max_size=config.max_cache_size, config=config)
