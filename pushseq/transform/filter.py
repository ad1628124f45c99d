"""Filter combinator"""

from __future__ import annotations

from .._types import Predicate, Yield
from ..seq import Seq

def filter[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """
    Keep elements for which `predicate` holds.

    Rejected elements are dropped and the source is told to continue.
    A stop from the consumer is returned to the source at once, so no
    further predicate calls happen.
    """

    def drive(yield_: Yield[T]) -> None:
        def step(value: T) -> bool:
            if predicate(value):
                return yield_(value)
            return True

        source(step)

    return Seq(drive)

__all__ = ("filter",)
