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
"""The validation entry point.

Determines which schema version a document declares and delegates to the
validator registered for it.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional

from .models.error_detail import ValidationResult
from .registry import ValidatorRegistry
from .utils.format_version import MISSING_VERSION, RawVersion, normalize_version

logger = logging.getLogger(__name__)


def get_document_version(document: Any) -> RawVersion:
    """Return the raw ``version`` field of *document*, or MISSING_VERSION when absent."""
    if isinstance(document, Mapping):
        return document.get("version", MISSING_VERSION)
    return MISSING_VERSION


class Validator:
    """Routes validation calls to the implementation for the document's version.

    Arguments other than the document are forwarded untouched; failures of the
    delegated call propagate unchanged.
    """

    def __init__(self, registry: Optional[ValidatorRegistry] = None):
        if registry is None:
            from .schema import create_default_registry

            registry = create_default_registry()
        self.registry = registry

    def get_validator(self, raw_version: RawVersion = MISSING_VERSION) -> Any:
        """Resolve the implementation for *raw_version*.

        Raises:
            UnsupportedVersionError: If no implementation exists for the version.
            ImplementationLoadError: If the implementation cannot be constructed.
        """
        version = normalize_version(raw_version)
        logger.debug(f"Resolved version {raw_version!r} to schema {version}")
        return self.registry.resolve(version)

    def validate(
        self,
        document: Any,
        output_format: Optional[str] = None,
        raw_text: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ValidationResult:
        """Validate a deserialized workflow document.

        Raises:
            ValidationError: containing the details of the validation failure.
        """
        implementation = self.get_validator(get_document_version(document))
        return implementation.validate(document, output_format, raw_text, options)

    def validate_with_context(
        self,
        document: Any,
        output_format: Optional[str] = None,
        raw_text: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ValidationResult:
        implementation = self.get_validator(get_document_version(document))
        return implementation.validate_with_context(document, output_format, raw_text, context, options)

    def get_json_schemas(self, raw_version: RawVersion = MISSING_VERSION) -> Dict[str, dict]:
        return self.get_validator(raw_version).get_json_schemas()


# ---- process-wide instance --------------------------------------------------

_default_validator: Optional[Validator] = None
_default_lock = threading.Lock()


def get_default_validator() -> Validator:
    """Get or create the process-wide Validator on the built-in schemas."""
    global _default_validator
    if _default_validator is None:
        with _default_lock:
            if _default_validator is None:
                _default_validator = Validator()
    return _default_validator


def validate(
    document: Any,
    output_format: Optional[str] = None,
    raw_text: Optional[str] = None,
    options: Optional[Mapping[str, Any]] = None,
) -> ValidationResult:
    """Validate *document* with the default validator (convenience function)."""
    return get_default_validator().validate(document, output_format, raw_text, options)


def validate_with_context(
    document: Any,
    output_format: Optional[str] = None,
    raw_text: Optional[str] = None,
    context: Optional[Mapping[str, Any]] = None,
    options: Optional[Mapping[str, Any]] = None,
) -> ValidationResult:
    """Validate *document* against *context* with the default validator."""
    return get_default_validator().validate_with_context(document, output_format, raw_text, context, options)


def get_json_schemas(raw_version: RawVersion = MISSING_VERSION) -> Dict[str, dict]:
    """Return the JSON Schemas of the family *raw_version* belongs to."""
    return get_default_validator().get_json_schemas(raw_version)
