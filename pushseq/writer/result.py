"""
WriterResult - terminal value with its trace
============================================
"""

from __future__ import annotations

from kungfu import Result


class WriterResult[T, E, W]:
    """
    Outcome of a traced terminal operation.

    Combines:
    - Result[T, E]: the consumer's value (Ok) or lookup failure (Error)
    - W: the trace collected while driving the sequence
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("_result", "_log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> W:
        """The accumulated trace."""
        return self._log

    def unwrap(self) -> T:
        """Return the value, raising on Error. Drops the trace."""
        return self._result.unwrap()

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
