"""
Lifting values into Seq.

Constructors for sequences over data that is already in memory. All of them
are restartable: every drive walks the same captured data from the start.
"""

from __future__ import annotations

from collections.abc import Sequence

from .._types import Yield
from ..seq import Seq, from_collection as _from_collection


def from_collection[T](items: Sequence[T]) -> Seq[T]:
    """
    Sequence over a fixed, ordered collection. No copy is made.

    Example:
        from pushseq import lift as L

        evens = L.up.from_collection([1, 2, 3, 4]).filter(lambda x: x % 2 == 0)
        evens.collect()  # [2, 4]
    """
    return _from_collection(items)


def of[T](*items: T) -> Seq[T]:
    """
    Sequence over the given arguments.

    **Grammar:** `L.up.of(1, 2, 3)` reads as "lift up a sequence of 1, 2, 3"
    """
    return _from_collection(items)


def empty[T]() -> Seq[T]:
    """Sequence that never calls its consumer."""

    def drive(yield_: Yield[T]) -> None:
        _ = yield_

    return Seq(drive)


def once[T](value: T) -> Seq[T]:
    """Single-element sequence."""

    def drive(yield_: Yield[T]) -> None:
        yield_(value)

    return Seq(drive)


def optional[T](value: T | None) -> Seq[T]:
    """
    Single-element sequence, or empty for None.

    **When to use:** dictionary/cache lookups feeding a flat_map.

    Example:
        from pushseq import lift as L

        ids.flat_map(lambda i: L.up.optional(cache.get(i)))
    """
    if value is None:
        return empty()
    return once(value)


__all__ = ("empty", "from_collection", "of", "once", "optional")
