"""Per-version workflow schemas and their validator implementations.

Each supported schema family lives in ``schema/<version>/`` and is registered
explicitly, so the set of supported versions is fixed at startup.
"""

from functools import partial

from ..registry import ValidatorRegistry
from .base import BaseSchemaValidator
from .json_schema_validator import JsonSchemaValidator

# Schema families shipped with the package
BUILTIN_VERSIONS = ("1.0", "2.0")


def register_builtin_validators(registry: ValidatorRegistry) -> ValidatorRegistry:
    """Register the bundled schema families on *registry*."""
    for version in BUILTIN_VERSIONS:
        registry.register(version, partial(JsonSchemaValidator, version))
    return registry


def create_default_registry() -> ValidatorRegistry:
    return register_builtin_validators(ValidatorRegistry())


__all__ = [
    "BUILTIN_VERSIONS",
    "BaseSchemaValidator",
    "JsonSchemaValidator",
    "create_default_registry",
    "register_builtin_validators",
]
