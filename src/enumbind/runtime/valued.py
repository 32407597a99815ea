"""
Base class for generated valued enums.

Generated Python bindings subclass ValuedEnum with one member per native
constant. ``find`` is the single lookup primitive; ``value_of`` turns a
missing value into UnrecognizedValueError.
"""

from __future__ import annotations

from enum import Enum, nonmember
from functools import cache
from typing import Any, Self

from .lookup import LinearLookup, LookupTable


class UnrecognizedValueError(ValueError):
    """Raised by ``value_of`` when no member carries the queried value."""

    def __init__(self, value: Any, qualified_name: str):
        self.value = value
        self.qualified_name = qualified_name
        super().__init__(f"No constant with value {value} found in {qualified_name}")


@cache
def _lookup_table(enum_cls: type[ValuedEnum]) -> LookupTable[Any]:
    return enum_cls.lookup_strategy(list(enum_cls))


class ValuedEnum(Enum):
    """
    Integer-backed enum with reverse lookup.

    Subclasses may set ``qualified_name`` (the native type name used in
    error messages) and ``lookup_strategy`` (LinearLookup or IndexedLookup),
    both wrapped in ``enum.nonmember``.
    """

    qualified_name = nonmember("")
    lookup_strategy = nonmember(LinearLookup)

    @classmethod
    def binding_name(cls) -> str:
        """Qualified name reported in lookup failures."""
        return cls.qualified_name or f"{cls.__module__}.{cls.__qualname__}"

    @classmethod
    def find(cls, value: Any) -> Self | None:
        """Return the first member whose value equals ``value``, or None."""
        return _lookup_table(cls).find(value)

    @classmethod
    def value_of(cls, value: Any) -> Self:
        """
        Return the first member whose value equals ``value``.

        Raises:
            UnrecognizedValueError: If no member carries the value
        """
        member = cls.find(value)
        if member is None:
            raise UnrecognizedValueError(value, cls.binding_name())
        return member
