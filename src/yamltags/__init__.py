"""yamltags: declarative, position-aware validation of decoded YAML documents."""

from yamltags.decoder import check, decode, unmarshal, unmarshal_file
from yamltags.engine import tagged, validate_struct, validate_tree
from yamltags.models import (
    DocumentValidationError,
    Node,
    NodeKind,
    OpaqueFailure,
    PositionedFailure,
    Tracked,
    ValidationReport,
)
from yamltags.parser import TrackedLoader, parse_tag
from yamltags.validators import ValidatorRegistry, default_registry, register_validator

__version__ = "0.1.0"

__all__ = [
    "DocumentValidationError",
    "Node",
    "NodeKind",
    "OpaqueFailure",
    "PositionedFailure",
    "Tracked",
    "TrackedLoader",
    "ValidationReport",
    "ValidatorRegistry",
    "__version__",
    "check",
    "decode",
    "default_registry",
    "parse_tag",
    "register_validator",
    "tagged",
    "unmarshal",
    "unmarshal_file",
    "validate_struct",
    "validate_tree",
]
