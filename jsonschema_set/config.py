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

"""Configuration management for schema set validation."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging

DEFAULT_SCHEMA_ID = "schema.json"
DEFAULT_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ValidatorConfig:
    """Configuration class for compiling and validating schema sets."""
    log_level: str = "INFO"
    print_level: str = "ERROR"

    # Identifier used for an anonymous first schema
    default_id: str = DEFAULT_SCHEMA_ID
    # Dialect assumed when a schema has no $schema
    default_dialect: str = DEFAULT_DIALECT
    assert_formats: bool = False

    # opt-in compiled schema cache
    cache_enabled: bool = False
    max_cache_size: int = 128

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('JSONSCHEMA_SET_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('JSONSCHEMA_SET_PRINT_LEVEL', 'ERROR'),
            default_id=os.getenv('JSONSCHEMA_SET_DEFAULT_ID', DEFAULT_SCHEMA_ID) or DEFAULT_SCHEMA_ID,
            default_dialect=os.getenv('JSONSCHEMA_SET_DEFAULT_DIALECT', DEFAULT_DIALECT) or DEFAULT_DIALECT,
            assert_formats=_env_flag('JSONSCHEMA_SET_ASSERT_FORMATS', 'false'),
            cache_enabled=_env_flag('JSONSCHEMA_SET_CACHE_ENABLED', 'false'),
            max_cache_size=int(os.getenv('JSONSCHEMA_SET_MAX_CACHE_SIZE', '128')),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('jsonschema_set')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
