"""Edges and the chainable handle returned when adding paths."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Self

import attrs

from dotgraph.graph.attributes import AttributeFormatter, default_formatter
from dotgraph.graph.node import Node


@attrs.define(eq=False)
class Edge:
    """A directed edge between two nodes."""

    source: Node
    target: Node
    attributes: dict[str, Any] = attrs.field(factory=dict)

    def copy(self) -> Edge:
        return Edge(self.source, self.target, copy.deepcopy(self.attributes))

    def statement(self, formatter: AttributeFormatter = default_formatter) -> str:
        """Render the edge statement, ``src->dst[attr=value,...];``."""
        return f"{self.source.id}->{self.target.id}{formatter.format_list(self.attributes)};"


class PathHandle:
    """Returned by ``Graph.add_path``; ``where`` patches every edge of the path."""

    def __init__(self, edges: list[Edge]) -> None:
        self.edges = edges

    def where(self, attributes: Mapping[str, Any] | None = None, **kwargs: Any) -> Self:
        """Merge attributes into all edges of the path."""
        patch = {**(attributes or {}), **kwargs}
        for edge in self.edges:
            edge.attributes.update(patch)
        return self

    def __len__(self) -> int:
        return len(self.edges)
