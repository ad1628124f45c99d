"""Map combinator"""

from __future__ import annotations

from .._types import Transform, Yield
from ..seq import Seq

def map[T, V](source: Seq[T], transform: Transform[T, V]) -> Seq[V]:
    """
    Apply `transform` to every element as it is pushed.

    The consumer's answer is handed straight back to the source, so a stop
    ends the source on the same element and `transform` is never applied
    to anything after it.
    """

    def drive(yield_: Yield[V]) -> None:
        def step(value: T) -> bool:
            return yield_(transform(value))

        source(step)

    return Seq(drive)

__all__ = ("map",)
