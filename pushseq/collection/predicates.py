"""
Predicate combinators
=====================

Existential and universal tests. Both stop the sequence on the first element
that decides the answer.
"""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import Driver, drive_plain, traced_driver, value_only, wrap_ok
from .._types import NoError, Predicate
from ..seq import Seq
from ..writer import DEFAULT_POLICY, Event, Log, TracePolicy, WriterResult


# ============================================================================
# Generic combinators (drive + wrap pattern)
# ============================================================================


def anyM[M, T, Raw](
    seq: Seq[T],
    predicate: Predicate[T],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[bool, Raw], M],
) -> M:
    """Generic any combinator."""
    matched = False

    def step(value: T) -> bool:
        nonlocal matched
        if predicate(value):
            matched = True
            return False
        return True

    raw = drive(seq, step)
    return wrap(matched, raw)


def allM[M, T, Raw](
    seq: Seq[T],
    predicate: Predicate[T],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[bool, Raw], M],
) -> M:
    """Generic all combinator."""
    holds = True

    def step(value: T) -> bool:
        nonlocal holds
        if predicate(value):
            return True
        holds = False
        return False

    raw = drive(seq, step)
    return wrap(holds, raw)


# ============================================================================
# Sugar for plain values
# ============================================================================


def any[T](seq: Seq[T], predicate: Predicate[T]) -> bool:
    """True on the first match (stopping there); False if none, or if empty."""
    return anyM(seq, predicate, drive=drive_plain, wrap=value_only)


def all[T](seq: Seq[T], predicate: Predicate[T]) -> bool:
    """False on the first counterexample (stopping there); True otherwise, even if empty."""
    return allM(seq, predicate, drive=drive_plain, wrap=value_only)


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def any_w[T](
    seq: Seq[T],
    predicate: Predicate[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[bool, NoError, Log[Event[T]]]:
    """any with the traversal's trace. A match shows up as Stopped."""
    return anyM(seq, predicate, drive=traced_driver(policy), wrap=wrap_ok)


def all_w[T](
    seq: Seq[T],
    predicate: Predicate[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[bool, NoError, Log[Event[T]]]:
    """all with the traversal's trace. A counterexample shows up as Stopped."""
    return allM(seq, predicate, drive=traced_driver(policy), wrap=wrap_ok)


__all__ = ("all", "any", "all_w", "any_w", "allM", "anyM")
