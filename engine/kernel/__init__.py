"""
Query Kernel — pure, in-memory sequence operators.

Two components:
  kinds  — run-time kind tags for heterogeneous elements (exact type matching)
  query  — lazy filtering and partitioning operators, order-preserving

No I/O, no shared state. Every call returns a fresh generator over its input.
"""

from engine.kernel.kinds import Kind, is_kind, kind_of, resolve_kind
from engine.kernel.query import (
    dump,
    filter_above,
    of_type,
    skip,
    skip_while,
    take,
    take_while,
    where,
)

__all__ = [
    "Kind",
    "kind_of",
    "is_kind",
    "resolve_kind",
    "where",
    "filter_above",
    "of_type",
    "take",
    "skip",
    "take_while",
    "skip_while",
    "dump",
]
