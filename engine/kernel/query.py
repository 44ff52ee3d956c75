"""
Query Kernel — lazy operators over in-memory sequences.

Every operator is a generator: nothing is evaluated until the result is
consumed, and the result is a one-shot iterator. Iterating it a second time
yields nothing; callers that need the result twice must materialise it first
with list(). Input order is always preserved. No operator reorders or
deduplicates.

Filtering
  where(source, predicate)       elements for which predicate is true
  filter_above(source, t)        elements strictly greater than t
  of_type(source, kind)          elements whose run-time kind is exactly kind

Partitioning
  take / skip                    first n elements / all but the first n
  take_while / skip_while        longest matching prefix / everything after it

Inspection
  dump(source, label)            materialise, log, and return a list
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from engine.kernel.kinds import KindLike, resolve_kind

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def where(source: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yield the elements of source for which predicate returns true."""
    for item in source:
        if predicate(item):
            yield item


def filter_above(source: Iterable[T], threshold: Any) -> Iterator[T]:
    """
    Yield the elements of source strictly greater than threshold.

    Ties are excluded. Elements are compared with the host ordering, so a
    non-comparable element raises TypeError when it is reached.
    """
    return where(source, lambda item: item > threshold)


def of_type(source: Iterable[Any], kind: KindLike) -> Iterator[Any]:
    """
    Yield the elements of source whose run-time type is exactly kind.

    kind may be a Kind or a Python class. of_type(xs, int) does not yield
    floats or bools.
    """
    cls = resolve_kind(kind)
    return where(source, lambda item: type(item) is cls)


# ---------------------------------------------------------------------------
# Partitioning
# ---------------------------------------------------------------------------


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")


def take(source: Iterable[T], count: int) -> Iterator[T]:
    """Yield the first count elements. A count of zero or less yields nothing."""
    _check_count(count)
    return _take(source, count)


def _take(source: Iterable[T], count: int) -> Iterator[T]:
    if count <= 0:
        return
    for i, item in enumerate(source, start=1):
        yield item
        if i >= count:
            return


def skip(source: Iterable[T], count: int) -> Iterator[T]:
    """Yield everything after the first count elements. A count of zero or less skips nothing."""
    _check_count(count)
    return _skip(source, count)


def _skip(source: Iterable[T], count: int) -> Iterator[T]:
    for i, item in enumerate(source):
        if i >= count:
            yield item


def take_while(source: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yield elements until the first one for which predicate is false."""
    for item in source:
        if not predicate(item):
            return
        yield item


def skip_while(source: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Skip elements while predicate is true, then yield the rest unconditionally."""
    iterator = iter(source)
    for item in iterator:
        if not predicate(item):
            yield item
            break
    yield from iterator


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------


def dump(source: Iterable[T], label: str | None = None) -> list[T]:
    """Materialise source, log the result at INFO, and return it."""
    items = list(source)
    if label:
        logger.info("%s: %r", label, items)
    else:
        logger.info("%r", items)
    return items
