"""Lookup table from schema family key to validator implementation."""

from .validator_registry import ValidatorFactory, ValidatorRegistry

__all__ = ["ValidatorFactory", "ValidatorRegistry"]
