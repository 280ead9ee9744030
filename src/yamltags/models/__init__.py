"""Domain models for yamltags."""

from yamltags.models.errors import (
    DocumentValidationError,
    Failure,
    FailureCode,
    OpaqueFailure,
    PositionedFailure,
    RuleParameterError,
    UnknownRuleError,
    ValidationReport,
    YAMLSafetyError,
)
from yamltags.models.fields import FieldDescriptor, Tracked
from yamltags.models.node import Node, NodeKind

__all__ = [
    "DocumentValidationError",
    "Failure",
    "FailureCode",
    "FieldDescriptor",
    "Node",
    "NodeKind",
    "OpaqueFailure",
    "PositionedFailure",
    "RuleParameterError",
    "Tracked",
    "UnknownRuleError",
    "ValidationReport",
    "YAMLSafetyError",
]
