"""Immutable document nodes with source positions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class NodeKind(StrEnum):
    DOCUMENT = "document"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    ALIAS = "alias"


@dataclass(frozen=True)
class Node:
    """One node of a parsed YAML document.

    Positions are 1-based. Mapping nodes keep their keys and values in
    ``content`` as alternating key/value nodes, in document order.
    """

    kind: NodeKind
    line: int = 1
    column: int = 1
    tag: str | None = None
    value: str | None = None
    content: tuple[Node, ...] = field(default=())

    @classmethod
    def scalar(cls, value: str, line: int = 1, column: int = 1) -> Node:
        return cls(kind=NodeKind.SCALAR, value=value, line=line, column=column)

    @classmethod
    def mapping(cls, *content: Node, line: int = 1, column: int = 1) -> Node:
        return cls(kind=NodeKind.MAPPING, content=tuple(content), line=line, column=column)

    @classmethod
    def sequence(cls, *content: Node, line: int = 1, column: int = 1) -> Node:
        return cls(kind=NodeKind.SEQUENCE, content=tuple(content), line=line, column=column)

    def pairs(self) -> Iterator[tuple[Node, Node]]:
        """Yield (key, value) node pairs of a mapping; a dangling key is dropped."""
        if self.kind != NodeKind.MAPPING:
            return
        for i in range(0, len(self.content) - 1, 2):
            yield self.content[i], self.content[i + 1]
