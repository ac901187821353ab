"""Attribute templates applied to nodes and edges when a graph is serialized."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import attrs

from dotgraph.graph.edge import Edge
from dotgraph.graph.node import Node

NodePredicate = Callable[[Any], bool]
EdgePredicate = Callable[[Any, Any], bool]


@attrs.frozen
class NodeTemplate:
    """Merge ``patch`` into every node whose represented value matches."""

    predicate: NodePredicate
    patch: Mapping[str, Any]

    def apply(self, node: Node) -> Node:
        if self.predicate(node.represents):
            node.apply_spec(self.patch)
        return node


@attrs.frozen
class EdgeTemplate:
    """Merge ``patch`` into every edge whose endpoint values match."""

    predicate: EdgePredicate
    patch: Mapping[str, Any]

    def apply(self, edge: Edge) -> Edge:
        if self.predicate(edge.source.represents, edge.target.represents):
            edge.attributes.update(self.patch)
        return edge
