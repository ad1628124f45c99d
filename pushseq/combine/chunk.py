"""Chunk combinator"""

from __future__ import annotations

from .._types import Yield
from ..seq import Seq

def chunk[T](source: Seq[T], size: int) -> Seq[tuple[T, ...]]:
    """
    Group consecutive elements into tuples of `size`.

    At most `size` elements are buffered. The trailing partial chunk is
    emitted only when the source is exhausted, never after a stop.
    """
    if size < 1:
        raise ValueError(f"chunk(): size must be >= 1, got {size}")

    def drive(yield_: Yield[tuple[T, ...]]) -> None:
        bucket: list[T] = []
        stopped = False

        def step(value: T) -> bool:
            nonlocal bucket, stopped
            bucket.append(value)
            if len(bucket) < size:
                return True
            full, bucket = tuple(bucket), []
            if yield_(full):
                return True
            stopped = True
            return False

        source(step)
        if bucket and not stopped:
            yield_(tuple(bucket))

    return Seq(drive)

__all__ = ("chunk",)
