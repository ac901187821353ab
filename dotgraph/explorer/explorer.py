"""Identity-keyed exploration of object graphs."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dotgraph.explorer.relations import DEFAULT_RELATIONS, Relation
from dotgraph.graph.registry import identity_key

logger = logging.getLogger(__name__)


@dataclass
class Exploration:
    """Values reached from a root and the relation edges between them.

    ``nodes`` maps node ids (``n0``, ``n1``, ...) to values, one entry per
    distinct identity. ``edges`` maps each relation name to a mapping of
    source id to target id, in the order the edges were completed.
    """

    nodes: dict[str, Any] = field(default_factory=dict)
    edges: dict[str, dict[str, str]] = field(default_factory=dict)

    def id_of(self, value: Any) -> str | None:
        """Node id of ``value`` (by identity), or None."""
        key = identity_key(value)
        for node_id, candidate in self.nodes.items():
            if identity_key(candidate) == key:
                return node_id
        return None

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.edges.values())


@dataclass
class _Frame:
    value: Any
    node_id: str
    pending: Iterator[Relation]
    # Relation and frame that reached this value; None for the root.
    relation: str | None = None
    parent: _Frame | None = None


class Explorer:
    """Depth-first walk of the values reachable through a set of relations."""

    def __init__(self, relations: Iterable[Relation] | None = None) -> None:
        self.relations = tuple(DEFAULT_RELATIONS if relations is None else relations)
        names = [rel.name for rel in self.relations]
        if len(set(names)) != len(names):
            msg = f"Duplicate relation names: {names}"
            raise ValueError(msg)

    def explore(self, root: Any) -> Exploration:
        """Explore everything reachable from ``root``.

        Each value is expanded once; values seen before only receive edges.
        An edge to a new value is recorded once that value's own subtree is
        done. A relation failing on a value skips that edge and nothing else.
        """
        result = Exploration(edges={rel.name: {} for rel in self.relations})
        seen: dict[Hashable, str] = {}
        stack = [self._visit(root, result, seen)]

        while stack:
            frame = stack[-1]
            rel = next(frame.pending, None)
            if rel is None:
                stack.pop()
                if frame.parent is not None:
                    result.edges[frame.relation][frame.parent.node_id] = frame.node_id
                continue
            try:
                other = rel.access(frame.value)
            except Exception as e:
                logger.debug("Skipping %s on %s: %r", rel.name, frame.node_id, e)
                continue

            other_id = seen.get(identity_key(other))
            if other_id is None:
                stack.append(self._visit(other, result, seen, rel.name, frame))
            else:
                result.edges[rel.name][frame.node_id] = other_id

        logger.debug(
            "Explored %d values, %d edges", len(result.nodes), result.edge_count()
        )
        return result

    def _visit(
        self,
        value: Any,
        result: Exploration,
        seen: dict[Hashable, str],
        relation: str | None = None,
        parent: _Frame | None = None,
    ) -> _Frame:
        node_id = f"n{len(result.nodes)}"
        result.nodes[node_id] = value
        seen[identity_key(value)] = node_id
        return _Frame(value, node_id, iter(self.relations), relation, parent)


def explore(root: Any, relations: Iterable[Relation] | None = None) -> Exploration:
    """Explore ``root`` with the given relations (the defaults when omitted)."""
    return Explorer(relations).explore(root)
