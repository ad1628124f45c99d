"""
Slicing combinators
===================

Prefix/suffix selection by count or by predicate. Counters and flags are
created per traversal, so a sliced sequence restarts cleanly.
"""

from __future__ import annotations

from .._types import Predicate, Yield
from ..seq import Seq


def take[T](source: Seq[T], n: int) -> Seq[T]:
    """
    At most `n` elements.

    After the n-th element the source gets False, so element n + 1 is never
    produced. take(s, 0) never drives `s`.
    """
    if n < 0:
        raise ValueError(f"take(): n must be >= 0, got {n}")

    def drive(yield_: Yield[T]) -> None:
        if n == 0:
            return
        taken = 0

        def step(value: T) -> bool:
            nonlocal taken
            taken += 1
            return yield_(value) and taken < n

        source(step)

    return Seq(drive)


def skip[T](source: Seq[T], n: int) -> Seq[T]:
    """Drop the first `n` elements."""
    if n < 0:
        raise ValueError(f"skip(): n must be >= 0, got {n}")

    def drive(yield_: Yield[T]) -> None:
        skipped = 0

        def step(value: T) -> bool:
            nonlocal skipped
            if skipped < n:
                skipped += 1
                return True
            return yield_(value)

        source(step)

    return Seq(drive)


def take_while[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Elements up to (not including) the first one failing `predicate`."""

    def drive(yield_: Yield[T]) -> None:
        def step(value: T) -> bool:
            if not predicate(value):
                return False
            return yield_(value)

        source(step)

    return Seq(drive)


def drop_while[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """
    Skip the leading run satisfying `predicate`, then pass everything through.

    The predicate is not consulted again once the run has ended.
    """

    def drive(yield_: Yield[T]) -> None:
        dropping = True

        def step(value: T) -> bool:
            nonlocal dropping
            if dropping:
                if predicate(value):
                    return True
                dropping = False
            return yield_(value)

        source(step)

    return Seq(drive)


__all__ = ("drop_while", "skip", "take", "take_while")
