"""
Fold combinators
================

Left fold in yield order. `combine` may be neither commutative nor
associative, so elements are folded strictly one after another.
"""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import Driver, drive_plain, traced_driver, value_only, wrap_ok
from .._types import Combine, NoError
from ..seq import Seq
from ..writer import DEFAULT_POLICY, Event, Log, TracePolicy, WriterResult


# ============================================================================
# Generic combinator (drive + wrap pattern)
# ============================================================================


def reduceM[M, A, T, Raw](
    seq: Seq[T],
    initial: A,
    combine: Combine[A, T],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[A, Raw], M],
) -> M:
    """Generic reduce combinator."""
    acc = initial

    def step(value: T) -> bool:
        nonlocal acc
        acc = combine(acc, value)
        return True

    raw = drive(seq, step)
    return wrap(acc, raw)


# ============================================================================
# Sugar for plain values
# ============================================================================


def reduce[A, T](seq: Seq[T], initial: A, combine: Combine[A, T]) -> A:
    """Fold left from `initial`. An empty sequence returns `initial` as is."""
    return reduceM(seq, initial, combine, drive=drive_plain, wrap=value_only)


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def reduce_w[A, T](
    seq: Seq[T],
    initial: A,
    combine: Combine[A, T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[A, NoError, Log[Event[T]]]:
    """reduce with the traversal's trace."""
    return reduceM(seq, initial, combine, drive=traced_driver(policy), wrap=wrap_ok)


__all__ = ("reduce", "reduce_w", "reduceM")
