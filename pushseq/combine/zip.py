"""
Zip combinators
===============

Pairwise combination of two fixed collections under a strict
"equal length or nothing" policy.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NamedTuple

from kungfu import Error, Ok, Result

from .._errors import LengthMismatchError
from .._types import Yield
from ..seq import Seq


class Pair[A, B](NamedTuple):
    """Ordered pair produced by zip."""

    first: A
    second: B


def zip[A, B](left: Sequence[A], right: Sequence[B]) -> Seq[Pair[A, B]]:
    """
    Pairs (left[i], right[i]) in index order.

    If the lengths differ the sequence is still built, but driving it never
    calls the consumer. Nothing is truncated to the shorter side and no
    error is raised.
    """

    def drive(yield_: Yield[Pair[A, B]]) -> None:
        length = len(left)
        if length != len(right):
            return
        for i in range(length):
            if not yield_(Pair(left[i], right[i])):
                return

    return Seq(drive)


def zip_with[A, B, R](
    left: Sequence[A],
    right: Sequence[B],
    *,
    combiner: Callable[[A, B], R],
) -> Seq[R]:
    """zip, then combine each pair. Same length policy as zip."""
    return zip(left, right).map(lambda pair: combiner(pair.first, pair.second))


def zip_checked[A, B](
    left: Sequence[A],
    right: Sequence[B],
) -> Result[Seq[Pair[A, B]], LengthMismatchError]:
    """zip that reports a length mismatch as Error instead of yielding nothing."""
    if len(left) != len(right):
        return Error(LengthMismatchError(len(left), len(right)))
    return Ok(zip(left, right))


__all__ = ("Pair", "zip", "zip_checked", "zip_with")
