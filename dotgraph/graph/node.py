"""Graph nodes and default label derivation."""

from __future__ import annotations

import copy
import inspect
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Self

from dotgraph.graph.attributes import AttributeFormatter, default_formatter

if TYPE_CHECKING:
    from dotgraph.graph.rank import Rank

PRIMITIVE_TYPES = (bool, int, float, str)

# Keys of a node spec that are stored on the node itself instead of in its attributes.
NODE_FIELDS = ("id", "rank", "represents")


def _class_name(cls: type) -> str:
    name = getattr(cls, "__name__", None)
    return name if isinstance(name, str) else repr(cls)


def _wrapped_primitive(value: Any) -> Any:
    """Return the primitive held by an instance of a primitive subclass, or None."""
    for base in PRIMITIVE_TYPES:
        if isinstance(value, base):
            return base(value)
    return None


def _label(value: Any) -> str:
    if value is None:
        return str(value)
    if isinstance(value, type):
        return f"type\n{_class_name(value)}"
    if type(value) in PRIMITIVE_TYPES:
        return f"{type(value).__name__}\n{json.dumps(value, ensure_ascii=False)}"
    if inspect.isroutine(value):
        name = getattr(value, "__name__", None)
        if isinstance(name, str) and name and name != "<lambda>":
            return f"function\n{name}"
        return "function"
    class_name = _class_name(type(value))
    primitive = _wrapped_primitive(value)
    if primitive is not None:
        return f"object\nnew {class_name}({json.dumps(primitive, ensure_ascii=False)})"
    return f"object\nnew {class_name}(...)"


def autolabel(value: Any) -> str:
    """Derive a two line label (kind, then detail) for any value.

    Never raises: values that misbehave under inspection get a degenerate
    ``object`` label instead.
    """
    try:
        return _label(value)
    except Exception:
        try:
            return f"object\n{type(value).__name__}"
        except Exception:
            return "object"


@dataclass(eq=False)
class Node:
    """A graph vertex standing for one domain value."""

    id: str | None = None
    represents: Any = None
    rank: int | Rank | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_spec(cls, spec: Mapping[str, Any] | None = None) -> Node:
        """Build a node from a spec mapping (see ``apply_spec``)."""
        node = cls()
        node.apply_spec(spec or {})
        return node

    def apply_spec(self, spec: Mapping[str, Any]) -> Self:
        """Merge a spec mapping into this node.

        ``id``, ``rank`` and ``represents`` become node fields, a truthy
        ``invis`` hides the node, everything else is an attribute. A missing
        label is filled in from the represented value.
        """
        for key, value in spec.items():
            if key in NODE_FIELDS:
                setattr(self, key, value)
            elif key == "invis":
                if value:
                    self.attributes["style"] = "invis"
            else:
                self.attributes[key] = value
        if self.attributes.get("label") is None:
            self.attributes["label"] = autolabel(self.represents)
        return self

    def copy(self) -> Node:
        """Copy with independent attributes; the represented value is shared."""
        return Node(
            id=self.id,
            represents=self.represents,
            rank=self.rank,
            attributes=copy.deepcopy(self.attributes),
        )

    def definition(self, formatter: AttributeFormatter = default_formatter) -> str:
        """Render the node statement, ``id[attr=value,...];``."""
        return f"{self.id}{formatter.format_list(self.attributes)};"

    def __str__(self) -> str:
        return str(self.id)
