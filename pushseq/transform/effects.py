"""Side effects combinators

Effects run for observation only (debugging, metrics, printing)
and don't change the elements or the stop signal."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Yield
from ..seq import Seq

def tap[T](source: Seq[T], effect: Callable[[T], None]) -> Seq[T]:
    """Call `effect` on each element right before the consumer sees it."""

    def drive(yield_: Yield[T]) -> None:
        def step(value: T) -> bool:
            effect(value)
            return yield_(value)

        source(step)

    return Seq(drive)

__all__ = ("tap",)
