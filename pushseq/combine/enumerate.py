"""Enumerate combinator"""

from __future__ import annotations

from typing import NamedTuple

from .._types import Yield
from ..seq import Seq


class Enumerated[T](NamedTuple):
    """An element paired with its position in the traversal."""

    index: int
    value: T


def enumerate[T](source: Seq[T]) -> Seq[Enumerated[T]]:
    """
    Pair each yielded element with a zero-based index.

    The index counts elements that reach this combinator, in yield order,
    and restarts at 0 on every drive.
    """

    def drive(yield_: Yield[Enumerated[T]]) -> None:
        index = 0

        def step(value: T) -> bool:
            nonlocal index
            item = Enumerated(index, value)
            index += 1
            return yield_(item)

        source(step)

    return Seq(drive)


__all__ = ("Enumerated", "enumerate")
