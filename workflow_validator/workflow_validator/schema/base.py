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
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from ..models.error_detail import ValidationResult


class BaseSchemaValidator(ABC):
    """Capabilities every per-version validator exposes to the dispatcher."""

    @abstractmethod
    def validate(
        self,
        document: Any,
        output_format: Optional[str] = None,
        raw_text: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ValidationResult:
        """Validate *document*, raising ValidationError on failure."""

    @abstractmethod
    def validate_with_context(
        self,
        document: Any,
        output_format: Optional[str] = None,
        raw_text: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ValidationResult:
        """Like validate(), also checking references against *context*."""

    @abstractmethod
    def get_json_schemas(self) -> Dict[str, dict]:
        """Return the JSON Schema documents keyed by schema name."""
