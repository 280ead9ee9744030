"""YAML loader that keeps a positioned node tree alongside the decoded data."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode
from ruamel.yaml.nodes import Node as RuamelNode

from yamltags.models.errors import YAMLSafetyError
from yamltags.models.node import Node, NodeKind
from yamltags.settings import Settings, get_settings

logger = logging.getLogger("yamltags.parser")


class TrackedLoader:
    """YAML loader that tracks source positions for error reporting.

    Uses ruamel.yaml to compose the representation graph, then copies it
    into immutable :class:`Node` objects with 1-based line/column info.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._yaml = YAML(typ="safe", pure=True)

    # -- safety checks -------------------------------------------------------

    def _check_yaml_safety(self, content: str) -> None:
        """Pre-parse safety checks on raw YAML text."""
        limit = self._settings.max_document_size
        if len(content) > limit:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {limit:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def compose(self, path: Path) -> Node:
        """Compose a YAML file into a node tree."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.compose_string(content, filename=str(path))

    def compose_string(self, content: str, filename: str = "<string>") -> Node:
        """Compose YAML text into a node tree.

        An empty document yields a ``document`` node at 1:1 with no content.
        """
        self._check_yaml_safety(content)
        root = self._yaml.compose(content)
        if root is None:
            logger.debug("%s: empty document", filename)
            return Node(kind=NodeKind.DOCUMENT)
        counter = [0]
        return self._convert(root, depth=0, counter=counter)

    def load(self, path: Path) -> tuple[Any, Node]:
        """Load a YAML file and return decoded data + node tree."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> tuple[Any, Node]:
        """Load YAML from a string."""
        node = self.compose_string(content, filename=filename)
        data = self._yaml.load(content) if node.kind != NodeKind.DOCUMENT else None
        return data, node

    # -- conversion ----------------------------------------------------------

    def _convert(self, node: RuamelNode, depth: int, counter: list[int]) -> Node:
        counter[0] += 1
        if counter[0] > self._settings.max_node_count:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum node count "
                f"({self._settings.max_node_count:,})"
            )
        if depth > self._settings.max_depth:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum nesting depth "
                f"({self._settings.max_depth})"
            )

        line = node.start_mark.line + 1
        column = node.start_mark.column + 1
        if isinstance(node, MappingNode):
            content: list[Node] = []
            for key, value in node.value:
                content.append(self._convert(key, depth + 1, counter))
                content.append(self._convert(value, depth + 1, counter))
            return Node(
                kind=NodeKind.MAPPING,
                line=line,
                column=column,
                tag=node.tag,
                content=tuple(content),
            )
        if isinstance(node, SequenceNode):
            return Node(
                kind=NodeKind.SEQUENCE,
                line=line,
                column=column,
                tag=node.tag,
                content=tuple(self._convert(item, depth + 1, counter) for item in node.value),
            )
        if isinstance(node, ScalarNode):
            return Node(
                kind=NodeKind.SCALAR,
                line=line,
                column=column,
                tag=node.tag,
                value=node.value,
            )
        return Node(kind=NodeKind.ALIAS, line=line, column=column, tag=node.tag)
