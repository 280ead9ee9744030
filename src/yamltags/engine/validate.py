"""Aligns structure fields with document nodes and dispatches their rules."""

from __future__ import annotations

import logging
from typing import Any

from yamltags.engine.fields import describe, is_structure
from yamltags.models.errors import (
    FailureCode,
    OpaqueFailure,
    PositionedFailure,
    RuleParameterError,
    UnknownRuleError,
)
from yamltags.models.fields import FieldDescriptor, Tracked
from yamltags.models.node import Node, NodeKind
from yamltags.parser.tags import ValidationRule, has_rule, parse_tag
from yamltags.settings import Settings, get_settings
from yamltags.validators.registry import ValidatorRegistry, default_registry

logger = logging.getLogger("yamltags.engine")

Failures = list[PositionedFailure | OpaqueFailure]


def field_map(node: Node) -> dict[str, Node]:
    """Scalar key -> value node for a mapping; empty for anything else."""
    lookup: dict[str, Node] = {}
    for key, value in node.pairs():
        if key.kind == NodeKind.SCALAR and key.value is not None:
            lookup[key.value] = value
    return lookup


def _resolve_value(target: Any, descriptor: FieldDescriptor) -> Any:
    value = getattr(target, descriptor.name)
    # Validators see the inner value of Tracked[...] fields.
    if isinstance(value, Tracked):
        return value.value
    return value


class StructValidator:
    """Validates one structure level against its mapping node.

    All tagged fields are checked; failures are collected in field
    declaration order, then rule order within a field.
    """

    def __init__(
        self,
        registry: ValidatorRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        self._settings = settings

    def validate(self, target: Any, node: Node) -> Failures:
        failures: Failures = []
        if not is_structure(target):
            return failures

        lookup = field_map(node)
        for descriptor in describe(type(target)):
            if not descriptor.validate:
                continue
            rules = parse_tag(descriptor.validate)
            name = descriptor.key
            child = lookup.get(name)
            if child is None:
                if has_rule(descriptor.validate, "required"):
                    failures.append(
                        PositionedFailure(
                            code=FailureCode.MISSING_REQUIRED_FIELD,
                            message=f"required field '{name}' is missing",
                            line=node.line,
                            column=node.column,
                            field=name,
                            rule="required",
                        )
                    )
                continue
            value = _resolve_value(target, descriptor)
            failures.extend(self._apply_rules(rules, value, name, child))
        return failures

    def _apply_rules(
        self, rules: list[ValidationRule], value: Any, name: str, node: Node
    ) -> Failures:
        failures: Failures = []
        for rule in rules:
            validator, found = self._registry.lookup(rule.name)
            if not found or validator is None:
                failure = self._unknown_rule(rule, name)
                if failure is not None:
                    failures.append(failure)
                continue
            try:
                result = validator(value, name, node, rule.param)
            except RuleParameterError as exc:
                failures.append(
                    OpaqueFailure(
                        code=FailureCode.PARAMETER_PARSE_FAILURE,
                        message=str(exc),
                        field=name,
                        rule=rule.name,
                    )
                )
                continue
            if result is not None:
                failures.append(result)
        return failures

    def _unknown_rule(self, rule: ValidationRule, name: str) -> OpaqueFailure | None:
        settings = self._settings or get_settings()
        policy = settings.unknown_rule
        if policy == "raise":
            raise UnknownRuleError(rule.name, name, self._registry.available())
        if policy == "fail":
            return OpaqueFailure(
                code=FailureCode.UNKNOWN_RULE,
                message=f"no validator registered for rule '{rule.name}'",
                field=name,
                rule=rule.name,
            )
        logger.warning("Validator not found for rule '%s' (field '%s')", rule.name, name)
        return None


def validate_struct(
    target: Any,
    node: Node,
    *,
    registry: ValidatorRegistry | None = None,
    settings: Settings | None = None,
) -> Failures:
    """Validate the tagged fields of ``target`` against ``node``.

    Shallow: nested structures are not visited (see :func:`validate_tree`).
    """
    return StructValidator(registry, settings).validate(target, node)


def validate_tree(
    target: Any,
    node: Node,
    *,
    registry: ValidatorRegistry | None = None,
    settings: Settings | None = None,
) -> Failures:
    """Validate ``target`` and every nested structure present in the document."""
    validator = StructValidator(registry, settings)
    failures: Failures = []
    _walk(validator, target, node, failures)
    return failures


def _walk(validator: StructValidator, target: Any, node: Node, failures: Failures) -> None:
    failures.extend(validator.validate(target, node))
    lookup = field_map(node)
    for descriptor in describe(type(target)):
        child = lookup.get(descriptor.key)
        if child is None:
            continue
        value = getattr(target, descriptor.name, None)
        if is_structure(value):
            _walk(validator, value, child, failures)
        elif isinstance(value, (list, tuple)) and child.kind == NodeKind.SEQUENCE:
            for item, item_node in zip(value, child.content):
                if is_structure(item):
                    _walk(validator, item, item_node, failures)
