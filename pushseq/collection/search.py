"""
Search combinators
==================

Lookups that may come up empty. Instead of raising they return
Result: Ok(element) or Error(reason).
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import ElementNotFoundError, EmptySequenceError, IndexOutOfRangeError
from .._helpers import Driver, drive_plain, traced_driver, value_only, wrap_result
from .._types import Predicate
from ..seq import Seq
from ..writer import DEFAULT_POLICY, Event, Log, TracePolicy, WriterResult


# ============================================================================
# Generic combinators (drive + wrap pattern)
# ============================================================================


def lookupM[M, T, E, Raw](
    seq: Seq[T],
    *,
    select: Callable[[int, T], bool],
    missing: Callable[[int], E],
    drive: Driver[T, Raw],
    wrap: Callable[[Result[T, E], Raw], M],
) -> M:
    """
    Generic lookup combinator.

    Stops on the first (position, element) accepted by `select`. If none is,
    `missing` gets the number of elements seen.
    """
    hit: list[T] = []
    seen = 0

    def step(value: T) -> bool:
        nonlocal seen
        if select(seen, value):
            hit.append(value)
            return False
        seen += 1
        return True

    raw = drive(seq, step)
    result: Result[T, E] = Ok(hit[0]) if hit else Error(missing(seen))
    return wrap(result, raw)


def lastM[M, T, Raw](
    seq: Seq[T],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[Result[T, EmptySequenceError], Raw], M],
) -> M:
    """Generic last combinator. Drives to exhaustion."""
    seen_any = False
    latest: T | None = None

    def step(value: T) -> bool:
        nonlocal seen_any, latest
        seen_any = True
        latest = value
        return True

    raw = drive(seq, step)
    result: Result[T, EmptySequenceError] = (
        Ok(typing.cast(T, latest)) if seen_any else Error(EmptySequenceError())
    )
    return wrap(result, raw)


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"nth(): index must be >= 0, got {index}")


# ============================================================================
# Sugar for plain Result
# ============================================================================


def first[T](seq: Seq[T]) -> Result[T, EmptySequenceError]:
    """First element; stops the sequence right after it."""
    return lookupM(
        seq,
        select=lambda _, __: True,
        missing=lambda _: EmptySequenceError(),
        drive=drive_plain,
        wrap=value_only,
    )


def last[T](seq: Seq[T]) -> Result[T, EmptySequenceError]:
    """Last element."""
    return lastM(seq, drive=drive_plain, wrap=value_only)


def find[T](seq: Seq[T], predicate: Predicate[T]) -> Result[T, ElementNotFoundError]:
    """First element satisfying `predicate`."""
    return lookupM(
        seq,
        select=lambda _, value: predicate(value),
        missing=lambda _: ElementNotFoundError(),
        drive=drive_plain,
        wrap=value_only,
    )


def nth[T](seq: Seq[T], index: int) -> Result[T, IndexOutOfRangeError]:
    """Element at zero-based `index`; stops there."""
    _check_index(index)
    return lookupM(
        seq,
        select=lambda position, _: position == index,
        missing=lambda seen: IndexOutOfRangeError(index, seen),
        drive=drive_plain,
        wrap=value_only,
    )


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def first_w[T](
    seq: Seq[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[T, EmptySequenceError, Log[Event[T]]]:
    """first with the traversal's trace."""
    return lookupM(
        seq,
        select=lambda _, __: True,
        missing=lambda _: EmptySequenceError(),
        drive=traced_driver(policy),
        wrap=wrap_result,
    )


def last_w[T](
    seq: Seq[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[T, EmptySequenceError, Log[Event[T]]]:
    """last with the traversal's trace."""
    return lastM(seq, drive=traced_driver(policy), wrap=wrap_result)


def find_w[T](
    seq: Seq[T],
    predicate: Predicate[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[T, ElementNotFoundError, Log[Event[T]]]:
    """find with the traversal's trace."""
    return lookupM(
        seq,
        select=lambda _, value: predicate(value),
        missing=lambda _: ElementNotFoundError(),
        drive=traced_driver(policy),
        wrap=wrap_result,
    )


def nth_w[T](
    seq: Seq[T],
    index: int,
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[T, IndexOutOfRangeError, Log[Event[T]]]:
    """nth with the traversal's trace."""
    _check_index(index)
    return lookupM(
        seq,
        select=lambda position, _: position == index,
        missing=lambda seen: IndexOutOfRangeError(index, seen),
        drive=traced_driver(policy),
        wrap=wrap_result,
    )


__all__ = (
    "find",
    "first",
    "last",
    "nth",
    "find_w",
    "first_w",
    "last_w",
    "nth_w",
    "lastM",
    "lookupM",
)
