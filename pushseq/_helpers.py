"""Internal helpers for terminal consumers.

Every terminal is written once as a generic *M function taking
`drive` (how to run the sequence, returning a by-product) and
`wrap` (how to combine the consumer's value with that by-product).
These are the stock drive and wrap functions. Not part of the public API,
but usable for building custom terminals."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Ok, Result

from ._types import Drive, NoError, Yield
from .writer import Event, Log, TracePolicy, WriterResult, drive_traced

# Driver = (sequence, callback) -> by-product of the traversal
type Driver[T, Raw] = Callable[[Drive[T], Yield[T]], Raw]

# Drive functions
def drive_plain[T](seq: Drive[T], yield_: Yield[T]) -> None:
    """Drive without recording anything."""
    seq(yield_)

def traced_driver[T](policy: TracePolicy) -> Driver[T, Log[Event[T]]]:
    """Driver that returns the traversal's trace under `policy`."""
    def driver(seq: Drive[T], yield_: Yield[T]) -> Log[Event[T]]:
        return drive_traced(seq, yield_, policy=policy)
    return driver

# Wrap functions
def value_only[V](value: V, raw: None) -> V:
    """Discard the by-product of a plain drive."""
    _ = raw
    return value

def wrap_ok[V, T](value: V, log: Log[Event[T]]) -> WriterResult[V, NoError, Log[Event[T]]]:
    """Infallible terminal value plus its trace."""
    return WriterResult(Ok(value), log)

def wrap_result[V, E, T](
    result: Result[V, E],
    log: Log[Event[T]],
) -> WriterResult[V, E, Log[Event[T]]]:
    """Lookup result plus its trace."""
    return WriterResult(result, log)

__all__ = (
    "Driver",
    "drive_plain",
    "traced_driver",
    "value_only",
    "wrap_ok",
    "wrap_result",
)
