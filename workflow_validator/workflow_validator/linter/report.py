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
"""Per-file result collection for the validator CLI."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.error_detail import DETAIL_TYPE_WARNING, ValidationErrorDetail


class LintResult:
    """Container for validation results for a single file."""

    def __init__(self, file_path: Path):
        """Initialize lint result.

        Args:
            file_path: Path to the file being validated
        """
        self.file_path = file_path
        self.version: Optional[str] = None
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    def add_error(self, message: str, line: Optional[int] = None, **extra: Any):
        error = {'message': message}
        if line:
            error['line'] = line
        error.update(extra)
        self.errors.append(error)

    def add_warning(self, message: str, line: Optional[int] = None, **extra: Any):
        warning = {'message': message}
        if line:
            warning['line'] = line
        warning.update(extra)
        self.warnings.append(warning)

    def add_detail(self, detail: ValidationErrorDetail):
        """Record a structured diagnostic as an error or a warning."""
        extra = {
            'key': detail.key,
            'yaml_path': detail.context.get('path'),
            'level': detail.level,
            'actionItems': detail.action_items,
            'docsLink': detail.docs_link,
        }
        if detail.type == DETAIL_TYPE_WARNING:
            self.add_warning(detail.message, detail.lines, **extra)
        else:
            self.add_error(detail.message, detail.lines, **extra)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'version': self.version,
            'errors': self.errors,
            'warnings': self.warnings,
        }
