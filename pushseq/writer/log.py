"""
Log - monoidal trace accumulator
================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered trace of a single traversal.

    A list with monoid operations, never mutated after it is handed out:
    - empty: Log()
    - combine: concatenation

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of(Yielded(0, "a")).combine(Log.of(Exhausted(1)))
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single entry, returning a new log."""
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def select[B](self, kind: type[B], /) -> Log[B]:
        """Keep only entries of the given type, preserving order."""
        return Log[B](item for item in self if isinstance(item, kind))


__all__ = ("Log",)
