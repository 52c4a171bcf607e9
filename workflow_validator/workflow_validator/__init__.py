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

"""Version-aware validation of workflow YAML documents.

A document declares its schema family through the top-level ``version`` field.
The :class:`~workflow_validator.validator.Validator` normalizes that value,
resolves the matching per-version implementation and forwards the call.
"""

__version__ = "0.1.0"

# Schema family used when a document does not declare a version.
DEFAULT_SCHEMA_VERSION = "1.0"

from .exceptions import (  # noqa: E402
    ErrorKind,
    ImplementationLoadError,
    RegistryError,
    UnsupportedVersionError,
    ValidationError,
    WorkflowValidatorError,
)
from .models.error_detail import ValidationErrorDetail, ValidationResult  # noqa: E402
from .registry import ValidatorRegistry  # noqa: E402
from .validator import (  # noqa: E402
    Validator,
    get_default_validator,
    get_json_schemas,
    validate,
    validate_with_context,
)

__all__ = [
    "DEFAULT_SCHEMA_VERSION",
    "ErrorKind",
    "ImplementationLoadError",
    "RegistryError",
    "UnsupportedVersionError",
    "ValidationError",
    "ValidationErrorDetail",
    "ValidationResult",
    "Validator",
    "ValidatorRegistry",
    "WorkflowValidatorError",
    "get_default_validator",
    "get_json_schemas",
    "validate",
    "validate_with_context",
]
