"""YAML parsing with line fidelity and the ``validate`` tag grammar."""

from yamltags.parser.loader import TrackedLoader
from yamltags.parser.tags import ValidationRule, has_rule, parse_tag

__all__ = [
    "TrackedLoader",
    "ValidationRule",
    "has_rule",
    "parse_tag",
]
