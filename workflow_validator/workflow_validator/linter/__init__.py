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
"""Command line validation of workflow files."""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

from ..exceptions import ValidationError
from ..models.parsing.yaml_parser import DocumentLoadError, YamlParser, yaml_parser
from ..utils.format_version import normalize_version
from ..validator import Validator, get_default_validator, get_document_version
from .report import LintResult

__all__ = ['validate_files', 'LintResult']

logger = logging.getLogger(__name__)


def validate_files(
    file_paths: List[Path],
    validator: Optional[Validator] = None,
    context: Optional[Mapping[str, Any]] = None,
    options: Optional[Mapping[str, Any]] = None,
    parser: Optional[YamlParser] = None,
) -> List[LintResult]:
    """Validate a list of workflow files.

    Args:
        file_paths: List of file paths to validate
        validator: Validator to use (default: the process-wide one)
        context: When given, references are checked against it
        options: Options forwarded to the per-version validators
        parser: YAML parser to load files with

    Returns:
        List of LintResult objects, one per file
    """
    validator = validator or get_default_validator()
    parser = parser or yaml_parser
    results = []

    for file_path in file_paths:
        result = LintResult(file_path)
        results.append(result)

        try:
            document = parser.load_document(file_path)
        except DocumentLoadError as e:
            result.add_error(str(e))
            continue

        result.version = normalize_version(get_document_version(document.data))
        try:
            if context is None:
                outcome = validator.validate(document.data, None, document.raw_text, options)
            else:
                outcome = validator.validate_with_context(document.data, None, document.raw_text, context, options)
        except ValidationError as e:
            logger.debug(f"{file_path}: {len(e.details)} issue(s)")
            for detail in e.details:
                result.add_detail(detail)
            continue

        for warning in outcome.warnings:
            result.add_detail(warning)

    return results
