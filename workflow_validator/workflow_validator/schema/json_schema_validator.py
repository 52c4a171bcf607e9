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
"""Validator implementation backed by the JSON Schema files of one version."""

from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as JsonSchemaError
from jsonschema.exceptions import best_match

from ..exceptions import ValidationError
from ..file_io.source_location import join_yaml_path, lookup_source
from ..models.error_detail import (
    DETAIL_TYPE_VALIDATION,
    DETAIL_TYPE_WARNING,
    LEVEL_STEP,
    LEVEL_WORKFLOW,
    ValidationErrorDetail,
    ValidationResult,
)
from ..models.error_factory import DOCS_LINK
from ..models.json_schema_loader import SCHEMA_ROOT, load_schemas
from ..models.parsing.yaml_parser import YamlParser
from ..utils.output_format import render_details, resolve_output_format
from .base import BaseSchemaValidator

logger = logging.getLogger(__name__)


MAIN_SCHEMA = "workflow"

DEFAULT_STEP_TYPE = "freestyle"
BUILTIN_STEP_TYPES = (
    "freestyle",
    "build",
    "push",
    "git-clone",
    "composition",
    "launch-composition",
    "deploy",
    "parallel",
    "pending-approval",
)

SourceMap = Dict[str, Dict[str, int]]


class JsonSchemaValidator(BaseSchemaValidator):
    """Validates workflow documents of one schema family.

    Structural rules come from ``schema/<version>/workflow.json``; cross-field
    rules (stage membership, context references) are checked in Python.

    Supported options:
        stop_on_first_error: report only the most relevant error.
        ignore_warnings: drop warnings from the result.
    """

    def __init__(self, version: str, schema_root: Path = SCHEMA_ROOT):
        self.version = version
        self._schemas = load_schemas(version, schema_root)
        if MAIN_SCHEMA not in self._schemas:
            raise FileNotFoundError(f"Schema '{MAIN_SCHEMA}' not found for version {version}")

        schema = self._schemas[MAIN_SCHEMA]
        Draft7Validator.check_schema(schema)
        self._validator = Draft7Validator(schema)
        logger.debug(f"Loaded schemas for version {version}: {sorted(self._schemas)}")

    # ---- public interface ----------------------------------------------------

    def validate(
        self,
        document: Any,
        output_format: Optional[str] = None,
        raw_text: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ValidationResult:
        return self._run(document, output_format, raw_text, None, options)

    def validate_with_context(
        self,
        document: Any,
        output_format: Optional[str] = None,
        raw_text: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ValidationResult:
        return self._run(document, output_format, raw_text, context or {}, options)

    def get_json_schemas(self) -> Dict[str, dict]:
        return copy.deepcopy(self._schemas)

    # ---- validation ----------------------------------------------------------

    def _run(
        self,
        document: Any,
        output_format: Optional[str],
        raw_text: Optional[str],
        context: Optional[Mapping[str, Any]],
        options: Optional[Mapping[str, Any]],
    ) -> ValidationResult:
        options = options or {}
        output_format = resolve_output_format(output_format)
        source_map = YamlParser.build_source_map(raw_text) if raw_text else {}
        stop_on_first_error = bool(options.get("stop_on_first_error"))

        if not isinstance(document, Mapping):
            details = [
                self._detail(
                    "Root must be a mapping/object",
                    key="root",
                    yaml_path="",
                    source_map=source_map,
                    action_items="Write the workflow as a YAML mapping",
                )
            ]
        else:
            details = self._schema_details(document, source_map, stop_on_first_error)
            if not (details and stop_on_first_error):
                details.extend(self._stage_details(document, source_map))
                if context is not None:
                    details.extend(self._context_details(document, context, source_map))

        if details:
            if stop_on_first_error:
                details = details[:1]
            logger.debug(f"Workflow is invalid against schema {self.version}: {len(details)} issue(s)")
            raise ValidationError(render_details(details, output_format), details)

        warnings = [] if options.get("ignore_warnings") else self._version_warnings(document, source_map)
        return ValidationResult(version=self.version, valid=True, warnings=warnings)

    def _schema_details(self, document: Mapping, source_map: SourceMap, first_only: bool) -> List[ValidationErrorDetail]:
        errors = list(self._validator.iter_errors(document))
        if not errors:
            return []
        if first_only:
            errors = [best_match(errors)]
        errors.sort(key=lambda e: [str(p) for p in e.absolute_path])
        details = []
        for error in errors:
            details.extend(self._details_from_schema_error(error, source_map))
        return details

    def _details_from_schema_error(self, error: JsonSchemaError, source_map: SourceMap) -> List[ValidationErrorDetail]:
        tokens = list(error.absolute_path)
        yaml_path = join_yaml_path(tokens)
        dotted = ".".join(str(p) for p in tokens) if tokens else "root"
        key = tokens[-1] if tokens else "root"
        message = error.message
        action_items = "Please fix the value according to the schema"

        if error.validator == "required":
            key = _missing_property(error) or key
            message = f"Missing required field '{key}'"
            action_items = f"Add the '{key}' field"
        elif error.validator == "additionalProperties":
            extras = _unexpected_properties(error)
            if extras:
                # One error covers every extra key; report each of them.
                return [
                    self._detail(
                        f"Unknown field '{name}' (at '{dotted}')",
                        key=name,
                        yaml_path=join_yaml_path(tokens + [name]),
                        source_map=source_map,
                        level=_level(tokens),
                        action_items=f"Remove the '{name}' field",
                    )
                    for name in extras
                ]
        elif error.validator == "enum":
            allowed = ", ".join(str(v) for v in error.validator_value)
            message = f"Invalid value. {error.message}"
            action_items = f"Use one of: {allowed}"
        elif error.validator == "type":
            expected = error.validator_value
            if isinstance(expected, list):
                expected = " | ".join(expected)
            message = f"Expected type '{expected}', got '{type(error.instance).__name__}'"
            action_items = f"Change the value to type '{expected}'"

        return [
            self._detail(
                f"{message} (at '{dotted}')",
                key=key,
                yaml_path=yaml_path,
                source_map=source_map,
                level=_level(tokens),
                action_items=action_items,
            )
        ]

    def _stage_details(self, document: Mapping, source_map: SourceMap) -> List[ValidationErrorDetail]:
        stages = document.get("stages")
        if not isinstance(stages, list):
            return []
        declared = {stage for stage in stages if isinstance(stage, str)}

        details = []
        for name, step, path in _iter_steps(document.get("steps")):
            stage = step.get("stage")
            if isinstance(stage, str) and stage not in declared:
                details.append(
                    self._detail(
                        f"Step '{name}' uses undeclared stage '{stage}'",
                        key="stage",
                        yaml_path=join_yaml_path(path + ["stage"]),
                        source_map=source_map,
                        level=LEVEL_STEP,
                        action_items=f"Add '{stage}' to 'stages' or move the step to a declared stage",
                    )
                )
        return details

    def _context_details(
        self, document: Mapping, context: Mapping[str, Any], source_map: SourceMap
    ) -> List[ValidationErrorDetail]:
        step_types = set(BUILTIN_STEP_TYPES) | set(context.get("step_types") or ())
        registries = context.get("registries")
        known_registries = set(registries) if registries is not None else None

        details = []
        for name, step, path in _iter_steps(document.get("steps")):
            step_type = step.get("type", DEFAULT_STEP_TYPE)
            if isinstance(step_type, str) and step_type not in step_types:
                details.append(
                    self._detail(
                        f"Step '{name}' uses unknown step type '{step_type}'",
                        key="type",
                        yaml_path=join_yaml_path(path + ["type"]),
                        source_map=source_map,
                        level=LEVEL_STEP,
                        action_items="Use a built-in step type or a step type available in this account",
                    )
                )

            registry = step.get("registry")
            if known_registries is not None and isinstance(registry, str) and registry not in known_registries:
                details.append(
                    self._detail(
                        f"Step '{name}' references unknown registry '{registry}'",
                        key="registry",
                        yaml_path=join_yaml_path(path + ["registry"]),
                        source_map=source_map,
                        level=LEVEL_STEP,
                        action_items=f"Use one of the registries: {', '.join(sorted(known_registries)) or '(none)'}",
                    )
                )
        return details

    def _version_warnings(self, document: Any, source_map: SourceMap) -> List[ValidationErrorDetail]:
        declared = document.get("version") if isinstance(document, Mapping) else None
        if declared is None or str(declared).strip() == self.version:
            return []
        return [
            self._detail(
                f"Version {declared} is validated against schema {self.version}",
                key="version",
                yaml_path="/version",
                source_map=source_map,
                detail_type=DETAIL_TYPE_WARNING,
                action_items=f"Change the version to {self.version}",
            )
        ]

    @staticmethod
    def _detail(
        message: str,
        *,
        key: Any,
        yaml_path: str,
        source_map: SourceMap,
        level: str = LEVEL_WORKFLOW,
        action_items: str = "",
        detail_type: str = DETAIL_TYPE_VALIDATION,
    ) -> ValidationErrorDetail:
        location = lookup_source(source_map, yaml_path)
        return ValidationErrorDetail(
            message=message,
            type=detail_type,
            context={"key": key, "path": yaml_path},
            level=level,
            docs_link=DOCS_LINK,
            action_items=action_items,
            lines=location.line or 0,
        )


def _level(tokens: List) -> str:
    return LEVEL_STEP if len(tokens) > 1 and tokens[0] == "steps" else LEVEL_WORKFLOW


def _missing_property(error: JsonSchemaError) -> Optional[str]:
    """Return the property this ``required`` error is about.

    jsonschema raises one error per missing property, naming it at the start of
    the message (``"'stages' is a required property"``).
    """
    if not isinstance(error.instance, Mapping):
        return None
    missing = [name for name in error.validator_value if name not in error.instance]
    for name in missing:
        if error.message.startswith(repr(name)):
            return name
    return missing[0] if missing else None


def _unexpected_properties(error: JsonSchemaError) -> List[str]:
    """Return every key not allowed by ``properties`` or ``patternProperties``."""
    if not isinstance(error.instance, Mapping):
        return []
    allowed = error.schema.get("properties", {})
    patterns = list(error.schema.get("patternProperties", {}))
    return [
        str(name)
        for name in error.instance
        if name not in allowed and not any(re.search(pattern, str(name)) for pattern in patterns)
    ]


def _iter_steps(steps: Any, path: Optional[List] = None) -> Iterator[Tuple[str, Mapping, List]]:
    """Yield (name, step, path tokens) for every step, including nested parallel steps."""
    if not isinstance(steps, Mapping):
        return
    base = path if path is not None else ["steps"]
    for name, step in steps.items():
        if not isinstance(step, Mapping):
            continue
        step_path = base + [name]
        yield str(name), step, step_path
        yield from _iter_steps(step.get("steps"), step_path + ["steps"])
