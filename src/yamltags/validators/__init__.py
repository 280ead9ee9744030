"""Pluggable validators, looked up by rule name."""

from yamltags.validators.builtin import (
    is_empty,
    validate_datetime,
    validate_greater_than,
    validate_required,
)
from yamltags.validators.registry import (
    Validator,
    ValidatorRegistry,
    default_registry,
    lookup_validator,
    register_validator,
)

__all__ = [
    "Validator",
    "ValidatorRegistry",
    "default_registry",
    "is_empty",
    "lookup_validator",
    "register_validator",
    "validate_datetime",
    "validate_greater_than",
    "validate_required",
]
