"""
Traced driving
==============

Drive a sequence while recording a Log of events. The trace is a by-product of
the traversal; the consumer's callback and the stop signal pass through
untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import Drive, Yield
from .events import Event, Exhausted, Stopped, Yielded
from .log import Log


@dataclass(frozen=True, slots=True)
class TracePolicy:
    """
    What the tracer records.

    `max_events` caps Yielded entries only; the terminal entry
    (Stopped or Exhausted) is always recorded.
    """

    record_values: bool = True
    max_events: int | None = None

    def __post_init__(self) -> None:
        if self.max_events is not None and self.max_events < 0:
            raise ValueError("TracePolicy.max_events must be >= 0")

    @classmethod
    def full(cls) -> TracePolicy:
        """Record every element with its value."""
        return cls()

    @classmethod
    def counts_only(cls) -> TracePolicy:
        """Record positions but not values."""
        return cls(record_values=False)

    @classmethod
    def bounded(cls, max_events: int, *, record_values: bool = True) -> TracePolicy:
        """Record at most `max_events` elements."""
        return cls(record_values=record_values, max_events=max_events)

    def admits(self, recorded: int) -> bool:
        return self.max_events is None or recorded < self.max_events


DEFAULT_POLICY = TracePolicy()


def drive_traced[T](
    drive: Drive[T],
    yield_: Yield[T],
    *,
    policy: TracePolicy = DEFAULT_POLICY,
) -> Log[Event[T]]:
    """
    Run `drive` with `yield_`, returning the trace of the traversal.

    The returned log holds Yielded entries in yield order followed by exactly
    one Stopped or Exhausted entry.
    """
    entries: Log[Event[T]] = Log()
    index = 0
    stopped = False

    def step(value: T) -> bool:
        nonlocal index, stopped
        if policy.admits(index):
            entries.append(Yielded(index, value if policy.record_values else None))
        index += 1
        if yield_(value):
            return True
        stopped = True
        return False

    drive(step)

    if stopped:
        return entries.tell(Stopped(after=index))
    return entries.tell(Exhausted(count=index))


__all__ = ("DEFAULT_POLICY", "TracePolicy", "drive_traced")
