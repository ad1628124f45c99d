from .effects import tap
from .filter import filter
from .map import map
from .slicing import drop_while, skip, take, take_while

__all__ = (
    "drop_while",
    "filter",
    "map",
    "skip",
    "take",
    "take_while",
    "tap",
)
