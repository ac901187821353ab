"""Turning explorations into graphs."""

from __future__ import annotations

from collections.abc import Iterable

from dotgraph.explorer.explorer import Exploration
from dotgraph.graph import Graph

RELATION_COLORS = ("black", "green", "blue", "red", "pink")

# Drawn bold and heavy so the layout follows the type hierarchy.
PRIMARY_RELATION = "__class__"


def to_graph(
    exploration: Exploration,
    graph: Graph | None = None,
    skip: Iterable[str] = (),
) -> Graph:
    """Add the explored values and relation edges to ``graph``.

    Each relation gets its own colour; only its first edge carries the
    relation name as label. Edges are added in the order the explorer
    completed them, so for a newly reached value the edge follows the
    edges of that value's own subtree.
    """
    if graph is None:
        graph = Graph()
    skipped = set(skip)

    for value in exploration.nodes.values():
        graph.node(value)

    relations = [name for name in exploration.edges if name not in skipped]
    for position, name in enumerate(relations):
        color = RELATION_COLORS[position % len(RELATION_COLORS)]
        if name == PRIMARY_RELATION:
            style = {"weight": 10, "style": "bold"}
        else:
            style = {"weight": 1, "style": "solid"}
        for count, (source_id, target_id) in enumerate(exploration.edges[name].items()):
            path = graph.add_path(exploration.nodes[source_id], exploration.nodes[target_id])
            path.where(color=color, fontcolor=color, **style)
            if count == 0:
                path.where(label=name)
    return graph
