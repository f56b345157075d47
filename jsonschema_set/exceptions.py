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

"""Custom exceptions for the jsonschema_set package."""


class SchemaSetError(Exception):
    """Base exception for schema set related errors."""
    pass


class ResourceError(SchemaSetError):
    """Exception raised when a schema document cannot be registered.

    Raised for a duplicate canonical identifier or for a document that is not
    a JSON Schema container (object or boolean).
    """

    def __init__(self, message: str, identifier: str = None):
        super().__init__(message)
        self.identifier = identifier


class CompileError(SchemaSetError):
    """Exception raised when a registered schema cannot be compiled."""

    def __init__(self, message: str, identifier: str = None):
        super().__init__(message)
        self.identifier = identifier


class InstanceValidationError(SchemaSetError):
    """Exception raised when an instance does not satisfy a compiled schema."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class SchemaLoadError(SchemaSetError):
    """Exception raised when a schema or instance file cannot be loaded."""
    pass
