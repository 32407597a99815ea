"""
Reverse value lookup strategies for generated enums.

Both strategies return the first member, in declaration order, whose value
equals the queried value, or None when nothing matches. Native constant
groups may alias one value under several names; the first declaration wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, Protocol, TypeVar

M = TypeVar("M")


class LookupTable(Protocol[M]):
    def find(self, value: Any) -> M | None: ...


class LinearLookup(Generic[M]):
    """Ordered table scanned front to back."""

    def __init__(self, members: Iterable[M]):
        self._members = tuple(members)

    def find(self, value: Any) -> M | None:
        for member in self._members:
            if member.value == value:  # type: ignore[attr-defined]
                return member
        return None


class IndexedLookup(Generic[M]):
    """Hash index keeping the first member registered for each value."""

    def __init__(self, members: Iterable[M]):
        self._index: dict[Any, M] = {}
        for member in members:
            self._index.setdefault(member.value, member)  # type: ignore[attr-defined]

    def find(self, value: Any) -> M | None:
        try:
            return self._index.get(value)
        except TypeError:
            # unhashable values never match
            return None
