"""Seq - push-style lazy sequence

A sequence wraps a drive function. Driving it with a callback pushes every
element into the callback, in order, until the source is exhausted or the
callback returns False. A False must reach every upstream layer on the same
element: combinators forward the boolean they get back instead of dropping it.

Sequences are inert until driven and can be driven again; per-traversal state
(counters, flags) lives inside the drive call, never on the Seq itself."""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from kungfu import Result

from ._errors import ElementNotFoundError, EmptySequenceError, IndexOutOfRangeError
from ._types import Combine, Drive, Predicate, Transform, Yield

if typing.TYPE_CHECKING:
    from .combine.enumerate import Enumerated


class Seq[T]:
    """Lazy, single-threaded, restartable producer of T.

    Laws:
    - Stop: once the callback returns False it is never called again
      during that traversal.
    - Restart: driving twice yields the same elements if every captured
      function is pure.
    """

    __slots__ = ("_drive",)

    def __init__(self, drive: Drive[T], /) -> None:
        """Create Seq from a drive function."""
        self._drive = drive

    # Protocol methods

    def __call__(self, yield_: Yield[T], /) -> None:
        """Drive the sequence, pushing each element into `yield_`."""
        self._drive(yield_)

    def __repr__(self) -> str:
        return f"Seq({self._drive!r})"

    # Transform

    def map[V](self, transform: Transform[T, V], /) -> Seq[V]:
        from .transform.map import map
        return map(self, transform)

    def filter(self, predicate: Predicate[T], /) -> Seq[T]:
        from .transform.filter import filter
        return filter(self, predicate)

    def tap(self, effect: Callable[[T], None], /) -> Seq[T]:
        from .transform.effects import tap
        return tap(self, effect)

    def take(self, n: int, /) -> Seq[T]:
        from .transform.slicing import take
        return take(self, n)

    def skip(self, n: int, /) -> Seq[T]:
        from .transform.slicing import skip
        return skip(self, n)

    def take_while(self, predicate: Predicate[T], /) -> Seq[T]:
        from .transform.slicing import take_while
        return take_while(self, predicate)

    def drop_while(self, predicate: Predicate[T], /) -> Seq[T]:
        from .transform.slicing import drop_while
        return drop_while(self, predicate)

    # Combine

    def enumerate(self) -> Seq[Enumerated[T]]:
        from .combine.enumerate import enumerate
        return enumerate(self)

    def chain(self, *others: Seq[T]) -> Seq[T]:
        """This sequence followed by `others`, in order."""
        from .combine.concat import concat
        return concat(self, *others)

    def flat_map[V](self, fn: Callable[[T], Seq[V]], /) -> Seq[V]:
        from .combine.concat import flat_map
        return flat_map(self, fn)

    def chunk(self, size: int, /) -> Seq[tuple[T, ...]]:
        from .combine.chunk import chunk
        return chunk(self, size)

    # Terminal

    def collect(self) -> list[T]:
        from .collection.collect import collect
        return collect(self)

    def count(self) -> int:
        from .collection.collect import count
        return count(self)

    def for_each(self, action: Callable[[T], None], /) -> None:
        from .collection.collect import for_each
        for_each(self, action)

    def reduce[A](self, initial: A, combine: Combine[A, T], /) -> A:
        from .collection.fold import reduce
        return reduce(self, initial, combine)

    def any(self, predicate: Predicate[T], /) -> bool:
        from .collection.predicates import any
        return any(self, predicate)

    def all(self, predicate: Predicate[T], /) -> bool:
        from .collection.predicates import all
        return all(self, predicate)

    def first(self) -> Result[T, EmptySequenceError]:
        from .collection.search import first
        return first(self)

    def last(self) -> Result[T, EmptySequenceError]:
        from .collection.search import last
        return last(self)

    def find(self, predicate: Predicate[T], /) -> Result[T, ElementNotFoundError]:
        from .collection.search import find
        return find(self, predicate)

    def nth(self, index: int, /) -> Result[T, IndexOutOfRangeError]:
        from .collection.search import nth
        return nth(self, index)


def from_collection[T](items: Sequence[T]) -> Seq[T]:
    """
    Sequence over a fixed, ordered collection.

    The collection is captured by reference, not copied. Nothing past the
    element that received False is read.
    """

    def drive(yield_: Yield[T]) -> None:
        for item in items:
            if not yield_(item):
                return

    return Seq(drive)


__all__ = ("Seq", "from_collection")
