"""Shared fixtures for workflow validator tests."""

from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

from workflow_validator import ValidationResult, Validator, ValidatorRegistry


class RecordingValidator:
    """Validator implementation double that records the calls it receives."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: List[Tuple[str, tuple]] = []

    def validate(self, document, output_format, raw_text, options):
        self.calls.append(("validate", (document, output_format, raw_text, options)))
        return ValidationResult(version=self.name)

    def validate_with_context(self, document, output_format, raw_text, context, options):
        self.calls.append(("validate_with_context", (document, output_format, raw_text, context, options)))
        return ValidationResult(version=self.name)

    def get_json_schemas(self) -> Dict[str, Any]:
        return {"workflow": {"title": self.name}}


@pytest.fixture
def validator() -> Validator:
    """Return a Validator on a fresh registry of the built-in schemas."""
    return Validator()


@pytest.fixture
def recording_registry() -> ValidatorRegistry:
    """Return a registry with recording doubles for versions 1.0 and 2.0."""
    registry = ValidatorRegistry()
    registry.register("1.0", lambda: RecordingValidator("1.0"))
    registry.register("2.0", lambda: RecordingValidator("2.0"))
    return registry


@pytest.fixture
def valid_v1_document() -> Dict[str, Any]:
    return {
        "version": "1.0",
        "steps": {
            "clone": {"type": "git-clone", "title": "Clone"},
            "test": {"image": "alpine:3.19", "commands": ["make test"]},
        },
    }


@pytest.fixture
def valid_v2_document() -> Dict[str, Any]:
    return {
        "version": "2.0",
        "stages": ["build", "test"],
        "steps": {
            "build": {"type": "build", "stage": "build", "registry": "dockerhub"},
            "test": {"image": "alpine:3.19", "stage": "test", "commands": ["make test"]},
        },
    }


@pytest.fixture
def write_workflow(tmp_path: Path):
    """Return a helper writing a workflow file into tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
