"""Ranks: horizontal layers pinning nodes to the same level."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from dotgraph.graph.attributes import AttributeFormatter, default_formatter
from dotgraph.graph.node import Node

if TYPE_CHECKING:
    from dotgraph.graph.graph import Graph

INDENT = "    "


class Rank:
    """One layer of a graph, anchored by an invisible dummy node."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.index = len(graph.ranks)
        self.dummy_node = Node.from_spec(
            {
                "id": f"_dummy{self.index}",
                "rank": self.index,
                "label": self.index,
                "represents": self,
                "shape": "box",
                "invis": True,
            }
        )

    @property
    def nodes(self) -> list[Node]:
        """Registered nodes assigned to this rank, in creation order."""
        return self.members(self.graph.nodes)

    def members(self, nodes: Iterable[Node]) -> list[Node]:
        """The nodes among ``nodes`` whose rank is this one, in order."""
        return [node for node in nodes if node.rank is self or node.rank == self.index]

    def kind(self, rank_count: int) -> str:
        """The DOT rank keyword for this layer."""
        if self.index == 0:
            return "min"
        if self.index == rank_count - 1:
            return "max"
        return "same"

    def render(
        self,
        members: Iterable[Node],
        rank_count: int,
        formatter: AttributeFormatter = default_formatter,
    ) -> str:
        """Render the rank block for the given member nodes."""
        lines = [f"{INDENT}{{ rank={self.kind(rank_count)}; {self.dummy_node.definition(formatter)}"]
        lines.extend(f"{INDENT}{INDENT}{node.definition(formatter)}" for node in members)
        lines.append(f"{INDENT}}}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Rank(index={self.index})"
