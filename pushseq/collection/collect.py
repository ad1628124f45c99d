"""
Collect combinators
===================

Terminals that always drive to exhaustion: collect, count, for_each.
"""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import Driver, drive_plain, traced_driver, value_only, wrap_ok
from .._types import NoError
from ..seq import Seq
from ..writer import DEFAULT_POLICY, Event, Log, TracePolicy, WriterResult


# ============================================================================
# Generic combinators (drive + wrap pattern)
# ============================================================================


def collectM[M, T, Raw](
    seq: Seq[T],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[list[T], Raw], M],
) -> M:
    """Generic collect combinator."""
    items: list[T] = []

    def step(value: T) -> bool:
        items.append(value)
        return True

    raw = drive(seq, step)
    return wrap(items, raw)


def countM[M, T, Raw](
    seq: Seq[T],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[int, Raw], M],
) -> M:
    """Generic count combinator. Values are not retained."""
    total = 0

    def step(value: T) -> bool:
        nonlocal total
        _ = value
        total += 1
        return True

    raw = drive(seq, step)
    return wrap(total, raw)


def for_eachM[M, T, Raw](
    seq: Seq[T],
    action: Callable[[T], None],
    *,
    drive: Driver[T, Raw],
    wrap: Callable[[None, Raw], M],
) -> M:
    """Generic for_each combinator."""

    def step(value: T) -> bool:
        action(value)
        return True

    raw = drive(seq, step)
    return wrap(None, raw)


# ============================================================================
# Sugar for plain values
# ============================================================================


def collect[T](seq: Seq[T]) -> list[T]:
    """Every element, in yield order. No length hint needed."""
    return collectM(seq, drive=drive_plain, wrap=value_only)


def count[T](seq: Seq[T]) -> int:
    """Number of elements; same as len(collect(seq)) without materializing."""
    return countM(seq, drive=drive_plain, wrap=value_only)


def for_each[T](seq: Seq[T], action: Callable[[T], None]) -> None:
    """Run `action` on every element."""
    for_eachM(seq, action, drive=drive_plain, wrap=value_only)


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def collect_w[T](
    seq: Seq[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[list[T], NoError, Log[Event[T]]]:
    """collect with the traversal's trace."""
    return collectM(seq, drive=traced_driver(policy), wrap=wrap_ok)


def count_w[T](
    seq: Seq[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[int, NoError, Log[Event[T]]]:
    """count with the traversal's trace."""
    return countM(seq, drive=traced_driver(policy), wrap=wrap_ok)


def for_each_w[T](
    seq: Seq[T],
    action: Callable[[T], None],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> WriterResult[None, NoError, Log[Event[T]]]:
    """for_each with the traversal's trace."""
    return for_eachM(seq, action, drive=traced_driver(policy), wrap=wrap_ok)


__all__ = (
    "collect",
    "count",
    "for_each",
    "collect_w",
    "count_w",
    "for_each_w",
    "collectM",
    "countM",
    "for_eachM",
)
