"""Field/node alignment and rule dispatch."""

from yamltags.engine.fields import describe, is_structure, tagged
from yamltags.engine.validate import StructValidator, field_map, validate_struct, validate_tree

__all__ = [
    "StructValidator",
    "describe",
    "field_map",
    "is_structure",
    "tagged",
    "validate_struct",
    "validate_tree",
]
