"""Reflective exploration of object graphs."""

from dotgraph.explorer.convert import RELATION_COLORS, to_graph
from dotgraph.explorer.explorer import Exploration, Explorer, explore
from dotgraph.explorer.relations import (
    BASE_OF,
    BOUND_TO,
    CLASS_OF,
    DEFAULT_RELATIONS,
    NAME_OF,
    RELATIONS_BY_NAME,
    WRAPPED,
    AccessorFailure,
    Relation,
    attribute_relation,
    own_attribute_relation,
    relation,
)

__all__ = [
    "BASE_OF",
    "BOUND_TO",
    "CLASS_OF",
    "DEFAULT_RELATIONS",
    "NAME_OF",
    "RELATIONS_BY_NAME",
    "RELATION_COLORS",
    "WRAPPED",
    "AccessorFailure",
    "Exploration",
    "Explorer",
    "Relation",
    "attribute_relation",
    "explore",
    "own_attribute_relation",
    "relation",
    "to_graph",
]
