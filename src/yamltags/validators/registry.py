"""Validator registry: rule name -> validator function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from yamltags.models.errors import PositionedFailure
from yamltags.models.node import Node


class Validator(Protocol):
    """Checks one resolved field value against one rule.

    Returns a failure, or ``None`` when the value passes. A parameter that
    cannot be parsed is reported by raising ``RuleParameterError``.
    """

    def __call__(
        self, value: Any, field_name: str, node: Node, param: str
    ) -> PositionedFailure | None: ...


class ValidatorRegistry:
    """Registry for validator functions, keyed by rule name.

    Registration is expected to finish before validation starts; nothing
    here is synchronized.
    """

    def __init__(self, validators: dict[str, Validator] | None = None) -> None:
        self._validators: dict[str, Validator] = dict(validators or {})

    @classmethod
    def with_defaults(cls) -> ValidatorRegistry:
        """A fresh registry holding only the built-in validators."""
        from yamltags.validators import builtin

        registry = cls()
        registry.register("required", builtin.validate_required)
        registry.register("gt", builtin.validate_greater_than)
        registry.register("datetime", builtin.validate_datetime)
        return registry

    def register(self, name: str, validator: Validator) -> None:
        """Register ``validator`` under ``name``, replacing any previous entry."""
        self._validators[name] = validator

    def validator(self, name: str) -> Callable[[Validator], Validator]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: Validator) -> Validator:
            self.register(name, fn)
            return fn

        return decorator

    def lookup(self, name: str) -> tuple[Validator | None, bool]:
        validator = self._validators.get(name)
        return validator, validator is not None

    def available(self) -> list[str]:
        """List registered rule names."""
        return sorted(self._validators.keys())

    def copy(self) -> ValidatorRegistry:
        return ValidatorRegistry(self._validators)

    def reset(self) -> None:
        """Clear all registered validators (for testing)."""
        self._validators.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._validators


default_registry = ValidatorRegistry.with_defaults()


def register_validator(name: str, validator: Validator) -> None:
    """Register a validator on the process-wide default registry."""
    default_registry.register(name, validator)


def lookup_validator(name: str) -> tuple[Validator | None, bool]:
    return default_registry.lookup(name)
