"""Trace events recorded while a sequence is driven."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Yielded[T]:
    """An element reached the consumer at the given position."""

    index: int
    value: T | None


@dataclass(frozen=True, slots=True)
class Stopped:
    """The consumer returned False after `after` elements."""

    after: int


@dataclass(frozen=True, slots=True)
class Exhausted:
    """The source ran out after `count` elements."""

    count: int


type Event[T] = Yielded[T] | Stopped | Exhausted

__all__ = ("Event", "Exhausted", "Stopped", "Yielded")
