"""
Lowering Seq into values.

Shortcuts for the most common ways to get data out of a sequence.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import EmptySequenceError
from ..collection.collect import collect
from ..collection.search import first as _first
from ..seq import Seq


def to_list[T](seq: Seq[T]) -> list[T]:
    """
    Materialize every element.

    Example:
        from pushseq import lift as L

        L.down.to_list(L.up.of(1, 2))  # [1, 2]
    """
    return collect(seq)


def first[T](seq: Seq[T]) -> Result[T, EmptySequenceError]:
    """First element as Result. Drives only one element."""
    return _first(seq)


def unsafe[T](seq: Seq[T]) -> T:
    """
    First element, raising on an empty sequence.

    NOTE: Raises if the sequence is empty. Use only when you're certain
          it isn't, or want the exception.
    """
    return _first(seq).unwrap()


def or_else[T](seq: Seq[T], default: T) -> T:
    """
    First element, or `default` when the sequence is empty.

    **Grammar:** `L.down.or_else(seq, default)` reads as "run down or else default"
    """
    match _first(seq):
        case Ok(value):
            return value
        case Error(_):
            return default


__all__ = ("first", "or_else", "to_list", "unsafe")
