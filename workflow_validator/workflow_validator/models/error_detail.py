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

from dataclasses import dataclass, field
from typing import Any, Dict, List


# Values of ValidationErrorDetail.level
LEVEL_WORKFLOW = "workflow"
LEVEL_STEP = "step"

DETAIL_TYPE_VALIDATION = "Validation"
DETAIL_TYPE_WARNING = "Warning"


@dataclass(frozen=True)
class ValidationErrorDetail:
    """A single structured diagnostic entry."""

    message: str
    type: str = DETAIL_TYPE_VALIDATION
    context: Dict[str, Any] = field(default_factory=dict)
    level: str = LEVEL_WORKFLOW
    docs_link: str = ""
    action_items: str = ""
    lines: int = 0  # 1-based; 0 when no source line is implicated

    @property
    def key(self) -> Any:
        return self.context.get("key")

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation consumed by upstream tooling."""
        return {
            "message": self.message,
            "type": self.type,
            "context": dict(self.context),
            "level": self.level,
            "docsLink": self.docs_link,
            "actionItems": self.action_items,
            "lines": self.lines,
        }


@dataclass
class ValidationResult:
    """Outcome of a successful validation."""

    version: str
    valid: bool = True
    warnings: List[ValidationErrorDetail] = field(default_factory=list)
