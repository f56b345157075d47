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

"""Canonical identifiers for the documents of a schema set."""

from typing import Any, List, Optional, Sequence


def declared_id(schema: Any) -> Optional[str]:
    """Return the string ``$id`` declared at the top of *schema*, if any."""
    if isinstance(schema, dict):
        value = schema.get("$id")
        if isinstance(value, str):
            return value
    return None


def canonical_identifier(default_id: str, index: int, schema: Any) -> str:
    """Return the identifier the document at *index* is registered under.

    A string ``$id`` always wins. Otherwise the first document is named
    ``default_id`` and every later one ``f"{default_id}{index}"``; numbering
    follows the absolute position, not the count of anonymous documents.
    """
    sid = declared_id(schema)
    if sid is not None:
        return sid
    if index == 0:
        return default_id
    return f"{default_id}{index}"


def resolve_identifiers(default_id: str, schemas: Sequence[Any]) -> List[str]:
    """Resolve the canonical identifier of every document, in order.

    Duplicates are returned as-is; they are rejected at registration.
    """
    return [canonical_identifier(default_id, i, s) for i, s in enumerate(schemas)]
