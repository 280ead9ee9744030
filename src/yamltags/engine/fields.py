"""Field descriptors read from dataclasses and pydantic models.

Two tag sources are understood:

- dataclasses carry ``yaml`` / ``validate`` in field metadata, usually via
  :func:`tagged`;
- pydantic models use the field alias as the document key and read
  ``validate`` (and an optional ``yaml`` override) from
  ``json_schema_extra``.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import Any

from pydantic import BaseModel

from yamltags.models.fields import FieldDescriptor, Tracked

logger = logging.getLogger("yamltags.engine")


def tagged(
    *,
    yaml: str | None = None,
    validate: str | None = None,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """A dataclass field carrying ``yaml`` and ``validate`` tags."""
    metadata: dict[str, str] = {}
    if yaml is not None:
        metadata["yaml"] = yaml
    if validate is not None:
        metadata["validate"] = validate
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata)


def is_structure(target: Any) -> bool:
    """Whether ``target`` is a dataclass or pydantic model *instance*."""
    if isinstance(target, BaseModel):
        return True
    if isinstance(target, (type, Tracked)):
        return False
    return dataclasses.is_dataclass(target)


def is_structure_type(tp: Any) -> bool:
    if not isinstance(tp, type) or tp is Tracked:
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp)


def is_tracked_type(tp: Any) -> bool:
    """Whether an annotation is ``Tracked`` or ``Tracked[...]``."""
    if tp is Tracked or typing.get_origin(tp) is Tracked:
        return True
    return isinstance(tp, str) and tp.split("[", 1)[0].strip() == "Tracked"


def type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        logger.debug("Could not resolve annotations of %s: %s", cls.__name__, exc)
        return {}


def describe(cls: type) -> list[FieldDescriptor]:
    """Field descriptors of a structure type, in declaration order."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return _describe_model(cls)
    if dataclasses.is_dataclass(cls):
        return _describe_dataclass(cls)
    return []


def _describe_dataclass(cls: type) -> list[FieldDescriptor]:
    hints = type_hints(cls)
    descriptors: list[FieldDescriptor] = []
    for f in dataclasses.fields(cls):
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                annotation=hints.get(f.name, f.type),
                yaml=f.metadata.get("yaml") or None,
                validate=f.metadata.get("validate"),
            )
        )
    return descriptors


def _describe_model(cls: type[BaseModel]) -> list[FieldDescriptor]:
    descriptors: list[FieldDescriptor] = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        yaml_key = extra.get("yaml") or info.alias or None
        validate = extra.get("validate")
        descriptors.append(
            FieldDescriptor(
                name=name,
                annotation=info.annotation,
                yaml=str(yaml_key) if yaml_key else None,
                validate=str(validate) if validate is not None else None,
            )
        )
    return descriptors
