"""Decode YAML into dataclasses / pydantic models, then validate their tags."""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from yamltags.engine.fields import describe, is_structure_type, is_tracked_type, type_hints
from yamltags.engine.validate import field_map, validate_struct, validate_tree
from yamltags.models.errors import DocumentValidationError, ValidationReport
from yamltags.models.fields import Tracked
from yamltags.models.node import Node, NodeKind
from yamltags.parser.loader import TrackedLoader
from yamltags.settings import Settings, get_settings
from yamltags.validators.registry import ValidatorRegistry

logger = logging.getLogger("yamltags.decoder")

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode(data: Any, node: Node, cls: type[T]) -> T:
    """Populate ``cls`` from decoded YAML ``data`` and its node tree.

    Fields absent from the document keep their default, or the zero value
    of their annotation when they have none. Pydantic models are built with
    ``model_validate`` and may raise ``pydantic.ValidationError``.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return cls.model_validate(_model_input(data, node, cls))  # type: ignore[return-value]
    if dataclasses.is_dataclass(cls):
        return _decode_dataclass(data, node, cls)
    raise TypeError(f"cannot decode into {cls!r}: not a dataclass or pydantic model")


def _decode_dataclass(data: Any, node: Node, cls: type[T]) -> T:
    hints = type_hints(cls)
    mapping = data if isinstance(data, dict) else {}
    lookup = field_map(node)
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):  # type: ignore[arg-type]
        if not f.init:
            continue
        key = f.metadata.get("yaml") or f.name
        annotation = hints.get(f.name, f.type)
        if key in mapping:
            kwargs[f.name] = _decode_value(mapping[key], lookup.get(key), annotation)
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            kwargs[f.name] = _zero_value(annotation)
    return cls(**kwargs)


def _model_input(data: Any, node: Node, cls: type[BaseModel]) -> dict[str, Any]:
    """Re-key ``data`` from document keys to the keys pydantic expects."""
    mapping = data if isinstance(data, dict) else {}
    lookup = field_map(node)
    prepared: dict[str, Any] = {}
    for descriptor in describe(cls):
        if descriptor.key not in mapping:
            continue
        info = cls.model_fields[descriptor.name]
        raw = mapping[descriptor.key]
        child = lookup.get(descriptor.key)
        annotation = _strip_optional(descriptor.annotation)
        if is_structure_type(annotation) and issubclass(annotation, BaseModel) and child is not None:
            raw = _model_input(raw, child, annotation)
        else:
            raw = _scalar_text(raw, child, annotation)
        prepared[info.alias or descriptor.name] = raw
    return prepared


def _decode_value(raw: Any, node: Node | None, annotation: Any) -> Any:
    if is_tracked_type(annotation):
        args = typing.get_args(annotation)
        inner = _decode_value(raw, node, args[0] if args else Any)
        if node is None:
            return Tracked(value=inner)
        return Tracked(value=inner, line=node.line, column=node.column)

    annotation = _strip_optional(annotation)
    if is_structure_type(annotation) and isinstance(raw, dict) and node is not None:
        return decode(raw, node, annotation)

    if typing.get_origin(annotation) is list and isinstance(raw, list):
        args = typing.get_args(annotation)
        item_type = args[0] if args else Any
        item_nodes: tuple[Node | None, ...] = ()
        if node is not None and node.kind == NodeKind.SEQUENCE:
            item_nodes = node.content
        return [
            _decode_value(item, item_nodes[i] if i < len(item_nodes) else None, item_type)
            for i, item in enumerate(raw)
        ]

    return _scalar_text(raw, node, annotation)


def _scalar_text(raw: Any, node: Node | None, annotation: Any) -> Any:
    """Keep the literal text for ``str`` fields the YAML layer resolved to another type."""
    if annotation is str and raw is not None and not isinstance(raw, str):
        if node is not None and node.kind == NodeKind.SCALAR and node.value is not None:
            return node.value
        return str(raw)
    return raw


def _strip_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _zero_value(annotation: Any) -> Any:
    annotation = _strip_optional(annotation)
    origin = typing.get_origin(annotation) or annotation
    if origin in (str, int, float, bool, list, dict, set, tuple):
        return origin()
    return None


# ---------------------------------------------------------------------------
# Load + decode + validate
# ---------------------------------------------------------------------------


def check(
    content: str,
    cls: type[T],
    *,
    deep: bool = False,
    registry: ValidatorRegistry | None = None,
    settings: Settings | None = None,
    filename: str = "<string>",
) -> tuple[T, ValidationReport]:
    """Load, decode and validate ``content``; failures are returned, not raised."""
    settings = settings or get_settings()
    data, node = TrackedLoader(settings).load_string(content, filename=filename)
    target = decode(data, node, cls)
    run = validate_tree if deep else validate_struct
    failures = run(target, node, registry=registry, settings=settings)
    if failures:
        logger.info("%s: %d validation failure(s)", filename, len(failures))
    return target, ValidationReport(failures=failures)


def unmarshal(
    content: str,
    cls: type[T],
    *,
    deep: bool = False,
    registry: ValidatorRegistry | None = None,
    settings: Settings | None = None,
    filename: str = "<string>",
) -> T:
    """Load, decode and validate ``content``.

    Raises ``DocumentValidationError`` carrying every failure when any tag
    rule is violated.
    """
    target, report = check(
        content, cls, deep=deep, registry=registry, settings=settings, filename=filename
    )
    if not report.valid:
        raise DocumentValidationError(report, filename=filename)
    return target


def unmarshal_file(
    path: Path,
    cls: type[T],
    *,
    deep: bool = False,
    registry: ValidatorRegistry | None = None,
    settings: Settings | None = None,
) -> T:
    """Like :func:`unmarshal`, reading the document from ``path``."""
    with path.open("r", encoding="utf-8") as handle:
        content = handle.read()
    return unmarshal(
        content, cls, deep=deep, registry=registry, settings=settings, filename=str(path)
    )
