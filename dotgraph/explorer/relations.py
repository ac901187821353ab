"""Accessor relations followed by the explorer.

A relation is a named, fallible function from a value to one related value.
Accessors signal "not applicable" by raising ``AccessorFailure``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import attrs

Accessor = Callable[[Any], Any]


class AccessorFailure(Exception):
    """A relation does not apply to a value."""

    def __init__(self, relation: str, value: Any) -> None:
        super().__init__(f"Relation {relation} does not apply to {type(value).__name__} value")
        self.relation = relation
        self.value = value


@attrs.frozen
class Relation:
    """A named accessor."""

    name: str
    accessor: Accessor

    def access(self, value: Any) -> Any:
        return self.accessor(value)


def relation(name: str, accessor: Accessor) -> Relation:
    return Relation(name, accessor)


def attribute_relation(name: str) -> Relation:
    """Relation following attribute ``name``, inherited or not."""

    def access(value: Any) -> Any:
        try:
            return getattr(value, name)
        except AttributeError as e:
            raise AccessorFailure(name, value) from e

    return Relation(name, access)


def own_attribute_relation(name: str) -> Relation:
    """Relation following attribute ``name`` only when the value's own ``__dict__`` holds it."""

    def access(value: Any) -> Any:
        try:
            namespace = vars(value)
        except TypeError as e:
            raise AccessorFailure(name, value) from e
        if name not in namespace:
            raise AccessorFailure(name, value)
        return namespace[name]

    return Relation(name, access)


def _base_of(value: Any) -> Any:
    if not isinstance(value, type) or value.__base__ is None:
        raise AccessorFailure("__base__", value)
    return value.__base__


def _bound_to(value: Any) -> Any:
    bound = getattr(value, "__self__", None)
    if bound is None:
        raise AccessorFailure("__self__", value)
    return bound


def _name_of(value: Any) -> Any:
    if isinstance(value, type):
        return value.__name__
    try:
        name = vars(value)["__name__"] if not callable(value) else value.__name__
    except (TypeError, KeyError, AttributeError) as e:
        raise AccessorFailure("__name__", value) from e
    return name


CLASS_OF = relation("__class__", type)
BASE_OF = relation("__base__", _base_of)
BOUND_TO = relation("__self__", _bound_to)
WRAPPED = attribute_relation("__wrapped__")
NAME_OF = relation("__name__", _name_of)

DEFAULT_RELATIONS: tuple[Relation, ...] = (CLASS_OF, BASE_OF, BOUND_TO, WRAPPED, NAME_OF)

RELATIONS_BY_NAME = {rel.name: rel for rel in DEFAULT_RELATIONS}
