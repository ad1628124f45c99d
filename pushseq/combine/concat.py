"""
Concat combinators
==================

Sequential chaining. A stop inside any inner sequence ends the whole chain:
the inner sequence sees the False itself, and nothing after it is driven.
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Yield
from ..seq import Seq


def concat[T](*sources: Seq[T]) -> Seq[T]:
    """All elements of each source, source by source, in argument order."""

    def drive(yield_: Yield[T]) -> None:
        stopped = False

        def step(value: T) -> bool:
            nonlocal stopped
            if yield_(value):
                return True
            stopped = True
            return False

        for source in sources:
            source(step)
            if stopped:
                return

    return Seq(drive)


def flat_map[T, V](source: Seq[T], fn: Callable[[T], Seq[V]]) -> Seq[V]:
    """
    Concatenate the sequences `fn` builds for each element.

    A stop while an inner sequence is driving stops that inner sequence and
    then the outer source on the element that produced it.
    """

    def drive(yield_: Yield[V]) -> None:
        stopped = False

        def inner_step(value: V) -> bool:
            nonlocal stopped
            if yield_(value):
                return True
            stopped = True
            return False

        def outer_step(value: T) -> bool:
            fn(value)(inner_step)
            return not stopped

        source(outer_step)

    return Seq(drive)


__all__ = ("concat", "flat_map")
