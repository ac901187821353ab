"""Graph model and DOT serialization."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

from dotgraph.graph.attributes import default_formatter, json_literal
from dotgraph.graph.edge import Edge, PathHandle
from dotgraph.graph.node import Node
from dotgraph.graph.rank import INDENT, Rank
from dotgraph.graph.registry import IdentityRegistry
from dotgraph.graph.templates import EdgePredicate, EdgeTemplate, NodePredicate, NodeTemplate
from dotgraph.render.renderer import Renderer

logger = logging.getLogger(__name__)

DEFAULT_NODE_STYLE = MappingProxyType({"fontname": "Arial", "fontsize": 12})


class DuplicateNodeError(Exception):
    """Raised when a value already has a node in the graph."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Duplicate node for {value!r}")
        self.value = value


class InvalidGraphOptionError(Exception):
    """Raised for graph options that are not known graph attributes."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid graph attribute: {name}")
        self.name = name


@dataclass
class GraphAttributes:
    """Global graph attributes, emitted in field order."""

    label: str | None = None
    fontname: str = "Arial"
    fontsize: int = 18
    labelloc: str = "t"  # top
    compound: bool = True  # allow edges between clusters
    rankdir: str = "TB"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def items(self) -> list[tuple[str, Any]]:
        return [(name, getattr(self, name)) for name in self.names()]


DEFAULT_GRAPH_ATTRIBUTES = MappingProxyType(asdict(GraphAttributes()))


class Graph:
    """A directed graph of domain values, serialized to DOT.

    Nodes are registered per represented value (by identity). Node and edge
    templates are applied to copies at serialization time, so rendering
    never changes the stored attributes.
    """

    def __init__(self, **options: Any) -> None:
        self.ranks: list[Rank] = []
        self.edges: list[Edge] = []
        self.nodes_map: IdentityRegistry[Node] = IdentityRegistry()
        self.node_templates: list[NodeTemplate] = []
        self.edge_templates: list[EdgeTemplate] = []
        self.attributes = GraphAttributes(**DEFAULT_GRAPH_ATTRIBUTES)
        self.node_style: dict[str, Any] = dict(DEFAULT_NODE_STYLE)
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        for name, value in options.items():
            self.set(name, value)

    @classmethod
    def digraph(cls, label: str = "") -> Graph:
        """Create a graph with the given label."""
        return cls(label=label)

    @classmethod
    def configured(cls, name: str, value: Any) -> Graph:
        """Create a graph with one global attribute set."""
        return cls().set(name, value)

    # Global attributes

    def get(self, name: str) -> Any:
        self._check_option(name)
        return getattr(self.attributes, name)

    def set(self, name: str, value: Any) -> Self:
        self._check_option(name)
        setattr(self.attributes, name, value)
        return self

    def _check_option(self, name: str) -> None:
        if name not in GraphAttributes.names():
            raise InvalidGraphOptionError(name)

    # Events

    def on(self, event: str, listener: Callable[..., Any]) -> Self:
        """Register a listener; ``"node"`` listeners get each new node's value."""
        self._listeners[event].append(listener)
        return self

    def off(self, event: str, listener: Callable[..., Any]) -> Self:
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)
        return self

    def emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners[event]):
            listener(*args)

    # Structure

    @property
    def nodes(self) -> list[Node]:
        """Registered nodes in creation order."""
        return list(self.nodes_map.values())

    def rank(self, index: int) -> Rank:
        """Return rank ``index``, creating it and any ranks before it."""
        if index < 0:
            msg = f"Rank index must not be negative: {index}"
            raise ValueError(msg)
        while len(self.ranks) <= index:
            self.ranks.append(Rank(self))
            logger.debug("Created rank %d", len(self.ranks) - 1)
        return self.ranks[index]

    def node_if(self, predicate: NodePredicate, patch: Mapping[str, Any]) -> Self:
        """Apply ``patch`` at serialization time to nodes whose value matches."""
        self.node_templates.append(NodeTemplate(predicate, dict(patch)))
        return self

    def edge_if(self, predicate: EdgePredicate, patch: Mapping[str, Any]) -> Self:
        """Apply ``patch`` at serialization time to edges whose endpoints match."""
        self.edge_templates.append(EdgeTemplate(predicate, dict(patch)))
        return self

    def add_node(self, spec: Mapping[str, Any] | None = None) -> Node:
        """Register a new node for ``spec["represents"]``."""
        spec = dict(spec or {})
        value = spec.get("represents")
        if self.nodes_map.has(value):
            raise DuplicateNodeError(value)
        spec["id"] = self._next_id(value)
        node = Node.from_spec(spec)
        self.nodes_map.set(value, node)
        logger.debug("Registered node %s", node.id)
        self.emit("node", value)
        return node

    def _next_id(self, value: Any) -> str:
        tag = type(value).__name__[:1].lower()
        if not (tag.isascii() and tag.isalpha()):
            tag = "x"
        return f"{tag}{len(self.nodes_map)}"

    def node(self, value: Any, spec: Mapping[str, Any] | None = None) -> Node:
        """Update the node for ``value``, creating it if needed."""
        existing = self.nodes_map.get(value)
        if existing is not None:
            return existing.apply_spec(spec or {})
        return self.add_node({**(spec or {}), "represents": value})

    def _ensure_node(self, value: Any) -> Node:
        existing = self.nodes_map.get(value)
        if existing is not None:
            return existing
        return self.add_node({"represents": value})

    def add_path(self, *values: Any) -> PathHandle:
        """Connect consecutive values with edges.

        Returns a handle whose ``where(...)`` sets attributes on the new edges.
        """
        nodes = [self._ensure_node(value) for value in values]
        edges = [Edge(source, target) for source, target in zip(nodes, nodes[1:], strict=False)]
        self.edges.extend(edges)
        return PathHandle(edges)

    def summary(self) -> dict[str, int]:
        """Counts of ranks, nodes and edges."""
        return {
            "ranks": len(self.ranks),
            "nodes": len(self.nodes_map),
            "edges": len(self.edges),
        }

    # Serialization

    def _render_nodes(self) -> dict[int, Node]:
        """Copies of the registered nodes with templates applied, keyed by original id.

        Rank references on the copies are resolved to this graph's ranks.
        """
        rendered: dict[int, Node] = {}
        for node in self.nodes_map.values():
            copy = node.copy()
            for template in self.node_templates:
                template.apply(copy)
            if copy.rank is not None:
                index = copy.rank.index if isinstance(copy.rank, Rank) else copy.rank
                copy.rank = self.rank(index)
            rendered[id(node)] = copy
        return rendered

    def serialize(self) -> str:
        """Serialize the graph to DOT."""
        formatter = default_formatter
        label = self.attributes.label
        out = ["digraph " + (json_literal(label) + " " if label else "") + "{\n"]
        for name, value in self.attributes.items():
            if value is not None:
                out.append(f"{INDENT}{formatter.format_statement(name, value)}\n")
        out.append("\n")
        out.append(f"{INDENT}node{formatter.format_list(self.node_style)};\n\n")

        rendered = self._render_nodes()
        copies = list(rendered.values())
        unranked = [node for node in copies if node.rank is None]
        rank_count = len(self.ranks)
        if rank_count:
            out.append(f"{INDENT}/* {rank_count} ranks */\n")
            out.extend(
                rank.render(rank.members(copies), rank_count, formatter) for rank in self.ranks
            )
            if rank_count > 1:
                chain = "->".join(rank.dummy_node.id for rank in self.ranks)
                out.append(f'{INDENT}{chain}[style="invis"];\n')

        if unranked:
            out.append("\n")
            out.extend(f"{INDENT}{node.definition(formatter)}\n" for node in unranked)

        out.append(f"\n{INDENT}/* {len(self.edges)} edges */\n")
        for edge in self.edges:
            copy = Edge(
                rendered[id(edge.source)],
                rendered[id(edge.target)],
                edge.copy().attributes,
            )
            for template in self.edge_templates:
                template.apply(copy)
            out.append(f"{INDENT}{copy.statement(formatter)}\n")

        out.append(
            f"\n{INDENT}/* {rank_count} ranks, "
            f"{len(self.nodes_map)} + {rank_count} nodes, "
            f"{len(self.edges)} + {max(0, rank_count - 1)} edges */\n"
        )
        out.append("}\n")
        return "".join(out)

    __str__ = serialize

    def render(
        self,
        output: str | Path,
        format: str = "svg",
        engine: str = "dot",
        show: bool = False,
    ) -> Path:
        """Render the graph with GraphViz; returns the written file."""
        return Renderer(format=format, engine=engine).render(self.serialize(), output, show=show)

    def __repr__(self) -> str:
        counts = self.summary()
        return f"Graph(ranks={counts['ranks']}, nodes={counts['nodes']}, edges={counts['edges']})"
