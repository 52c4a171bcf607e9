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
"""Rendering of validation diagnostics in the supported output formats."""

import json
from typing import Iterable, List, Optional

from ..models.error_detail import DETAIL_TYPE_WARNING


class OutputFormat:
    HUMAN = "human"
    JSON = "json"
    GITHUB_ACTIONS = "github-actions"

    @classmethod
    def get_all_formats(cls) -> List[str]:
        return [cls.HUMAN, cls.JSON, cls.GITHUB_ACTIONS]


def resolve_output_format(output_format: Optional[str]) -> str:
    """Return *output_format*, defaulting to human-readable output."""
    if output_format is None:
        return OutputFormat.HUMAN
    if output_format not in OutputFormat.get_all_formats():
        raise ValueError(
            f"Unsupported output format: '{output_format}'. "
            f"Valid formats: {OutputFormat.get_all_formats()}"
        )
    return output_format


def render_details(details: Iterable, output_format: Optional[str] = None, file_path: Optional[str] = None) -> str:
    """Render ValidationErrorDetail entries as a single message string."""
    output_format = resolve_output_format(output_format)
    details = list(details)

    if output_format == OutputFormat.JSON:
        return json.dumps([detail.to_dict() for detail in details], indent=2)

    lines = []
    if output_format == OutputFormat.GITHUB_ACTIONS:
        for detail in details:
            command = "warning" if detail.type == DETAIL_TYPE_WARNING else "error"
            location = f"file={file_path or 'workflow'},line={detail.lines or 1}"
            lines.append(f"::{command} {location}::{detail.message}")
        return "\n".join(lines)

    for detail in details:
        label = "WARNING" if detail.type == DETAIL_TYPE_WARNING else "ERROR"
        line_info = f":{detail.lines}" if detail.lines else ""
        lines.append(f"  {label}{line_info}: {detail.message}")
        if detail.action_items:
            lines.append(f"    -> {detail.action_items}")
    return "\n".join(lines)
