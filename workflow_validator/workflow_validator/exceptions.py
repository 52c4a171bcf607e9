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

"""Custom exceptions for the workflow validator."""

from enum import Enum
from typing import Iterable, Tuple

from .models.error_detail import ValidationErrorDetail


class ErrorKind(str, Enum):
    """Discriminator telling schema problems apart from internal failures."""

    VALIDATION = "ValidationError"
    INTERNAL = "InternalError"


class WorkflowValidatorError(Exception):
    """Base exception for workflow-validator related errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class RegistryError(WorkflowValidatorError):
    """Exception raised when the validator registry is misconfigured."""
    pass


class ValidationError(WorkflowValidatorError):
    """Exception raised when a document does not satisfy its schema.

    Carries the ordered diagnostics in ``details`` so that callers can render
    each entry (message, docs link, action item) on their own.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Iterable[ValidationErrorDetail] = ()):
        super().__init__(message)
        self.message = message
        self.details: Tuple[ValidationErrorDetail, ...] = tuple(details)


class UnsupportedVersionError(ValidationError):
    """Exception raised when no validator is registered for a version."""

    def __init__(self, version: str, message: str, details: Iterable[ValidationErrorDetail] = ()):
        super().__init__(message, details)
        self.version = version


class ImplementationLoadError(WorkflowValidatorError):
    """Exception raised when a registered validator cannot be constructed."""

    kind = ErrorKind.INTERNAL

    def __init__(self, version: str):
        super().__init__(f"Unable to find a validator for schema version {version}")
        self.version = version
