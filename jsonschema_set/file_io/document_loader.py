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

"""Load schema and instance documents from JSON or YAML files."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

import yaml

from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: Union[str, Path]) -> Any:
    """Load one JSON value from *path*.

    Files ending in ``.yaml``/``.yml`` are parsed with ``yaml.safe_load``;
    anything else is parsed as JSON.

    Raises:
        SchemaLoadError: If the file is missing or cannot be parsed
    """
    path = Path(path)
    if not path.is_file():
        raise SchemaLoadError(f"Document file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                document = yaml.safe_load(f)
            else:
                document = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise SchemaLoadError(f"Failed to read {path}: {e}") from e

    logger.debug("Loaded document: %s", path)
    return document


def load_documents(paths: Iterable[Union[str, Path]]) -> List[Any]:
    """Load documents from *paths*, preserving order."""
    return [load_document(p) for p in paths]
