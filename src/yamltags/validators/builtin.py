"""Built-in validators: ``required``, ``gt`` and ``datetime``."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Sized
from datetime import date
from decimal import Decimal
from numbers import Number
from typing import Any

from pydantic import BaseModel

from yamltags.models.errors import FailureCode, PositionedFailure, RuleParameterError
from yamltags.models.node import Node
from yamltags.validators.layouts import matches_layout

_INTEGER_RE = re.compile(r"[+-]?\d+")


def is_empty(value: Any) -> bool:
    """Whether ``value`` is the zero value for its kind.

    Structures are never empty; there is no deep check of their fields.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, BaseModel) or dataclasses.is_dataclass(value):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _failure(node: Node, field_name: str, rule: str, message: str) -> PositionedFailure:
    return PositionedFailure(
        code=FailureCode.CONSTRAINT_VIOLATION,
        message=message,
        line=node.line,
        column=node.column,
        field=field_name,
        rule=rule,
    )


def validate_required(
    value: Any, field_name: str, node: Node, param: str
) -> PositionedFailure | None:
    if is_empty(value):
        return _failure(node, field_name, "required", f"field '{field_name}' is required")
    return None


def validate_greater_than(
    value: Any, field_name: str, node: Node, param: str
) -> PositionedFailure | None:
    if not _INTEGER_RE.fullmatch(param):
        raise RuleParameterError("gt", param, "expected a base-10 integer")
    threshold = int(param)
    numeric = isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
    if not numeric or value <= threshold:
        return _failure(
            node, field_name, "gt", f"field '{field_name}' must be greater than {threshold}"
        )
    return None


def validate_datetime(
    value: Any, field_name: str, node: Node, param: str
) -> PositionedFailure | None:
    # Timestamps the YAML layer already decoded need no re-parsing.
    if isinstance(value, date):
        return None
    if not matches_layout(str(value), param):
        return _failure(
            node, field_name, "datetime", f"field '{field_name}' has invalid datetime format"
        )
    return None
