"""Field metadata and the position-preserving scalar wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Tracked(Generic[T]):
    """A decoded scalar boxed together with the position it was read from.

    Validators never see the box: the engine hands them ``value``.
    """

    value: T
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class FieldDescriptor:
    """Per-field metadata read from a target structure type."""

    name: str
    annotation: Any
    yaml: str | None = None
    validate: str | None = None

    @property
    def key(self) -> str:
        """The document key this field is read from."""
        return self.yaml or self.name
