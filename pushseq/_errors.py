from __future__ import annotations

class EmptySequenceError(Exception):
    """Sequence yielded no elements."""

    def __init__(self) -> None:
        super().__init__("Sequence is empty")

class ElementNotFoundError(Exception):
    """No element satisfied the predicate."""

    def __init__(self) -> None:
        super().__init__("No element matched the predicate")

class IndexOutOfRangeError(Exception):
    """Sequence ended before the requested position."""

    index: int
    length: int

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for sequence of length {length}")

class LengthMismatchError(Exception):
    """Collections passed to zip_checked differ in length."""

    left: int
    right: int

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot zip collections of length {left} and {right}")

__all__ = (
    "ElementNotFoundError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
)
