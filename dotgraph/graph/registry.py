"""Mapping keyed by value identity."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from typing import Any

# Immutable scalars compared by value; everything else is compared with ``is``.
VALUE_TYPES = (type(None), bool, int, float, complex, str, bytes)


def identity_key(value: Any) -> Hashable:
    """Key under which ``value`` is deduplicated.

    Scalars of the exact types in ``VALUE_TYPES`` are keyed by type and
    value, so equal strings or numbers built at runtime share a key while
    ``1``, ``1.0`` and ``True`` stay apart. NaN matches NaN. Any other value,
    including subclass instances, is keyed by ``id()``.
    """
    kind = type(value)
    if kind in VALUE_TYPES:
        if kind is float and math.isnan(value):
            return (kind, "nan")
        return (kind, value)
    return id(value)


class IdentityRegistry[V]:
    """Maps values to entries by ``identity_key`` rather than equality.

    Works for unhashable keys and keeps ``1`` and ``True`` apart. Keys are
    held strongly so their ``id()`` cannot be reused while registered.
    Iteration follows insertion order.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, tuple[Any, V]] = {}

    def has(self, key: Any) -> bool:
        return identity_key(key) in self._entries

    __contains__ = has

    def get(self, key: Any, default: V | None = None) -> V | None:
        entry = self._entries.get(identity_key(key))
        return default if entry is None else entry[1]

    def set(self, key: Any, value: V) -> None:
        self._entries[identity_key(key)] = (key, value)

    def keys(self) -> Iterator[Any]:
        return (key for key, _ in self._entries.values())

    def values(self) -> Iterator[V]:
        return (value for _, value in self._entries.values())

    def items(self) -> Iterator[tuple[Any, V]]:
        return iter(self._entries.values())

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._entries)
