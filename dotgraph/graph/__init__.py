"""Graph model and DOT serialization."""

from dotgraph.graph.attributes import AttributeFormatter, escape_label, json_literal
from dotgraph.graph.edge import Edge, PathHandle
from dotgraph.graph.graph import (
    DEFAULT_GRAPH_ATTRIBUTES,
    DuplicateNodeError,
    Graph,
    GraphAttributes,
    InvalidGraphOptionError,
)
from dotgraph.graph.node import Node, autolabel
from dotgraph.graph.rank import Rank
from dotgraph.graph.registry import IdentityRegistry, identity_key

__all__ = [
    "DEFAULT_GRAPH_ATTRIBUTES",
    "AttributeFormatter",
    "DuplicateNodeError",
    "Edge",
    "Graph",
    "GraphAttributes",
    "IdentityRegistry",
    "InvalidGraphOptionError",
    "Node",
    "PathHandle",
    "Rank",
    "autolabel",
    "escape_label",
    "identity_key",
    "json_literal",
]
