"""
Query Kernel — Element Kinds

A heterogeneous sequence holds values of a few known kinds. The kind of a
value is its constructed Python type, decided when the literal or object is
created:

    3       -> INTEGER
    3.0     -> FLOAT
    "3"     -> TEXT
    True    -> not INTEGER (bool is its own kind, outside the known set)

Matching is exact: a value is of kind K only if type(value) is K's class.
Subclasses and value-convertible kinds never match.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Kind(Enum):
    """The known element kinds, each bound to its concrete Python class."""

    INTEGER = int
    TEXT = str
    FLOAT = float

    @property
    def cls(self) -> type:
        return self.value


KindLike = Kind | type

_BY_CLASS: dict[type, Kind] = {k.cls: k for k in Kind}


def kind_of(value: Any) -> Kind | None:
    """Return the exact Kind of a value, or None if it is not one of the known kinds."""
    return _BY_CLASS.get(type(value))


def resolve_kind(kind: KindLike) -> type:
    """
    Map a Kind or a Python class to the class used for exact matching.

    Raises:
        TypeError: If kind is neither a Kind nor a class
    """
    if isinstance(kind, Kind):
        return kind.cls
    if isinstance(kind, type):
        return kind
    raise TypeError(f"Expected a Kind or a type, got {kind!r}")


def is_kind(value: Any, kind: KindLike) -> bool:
    """True if value's run-time type is exactly the requested kind."""
    return type(value) is resolve_kind(kind)
