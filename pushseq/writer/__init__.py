"""
Writer
======

Traced driving for sequences:
- Log (monoidal trace accumulator)
- WriterResult (Result[T, E] + trace)
- Yielded / Stopped / Exhausted (trace events)
- TracePolicy (what gets recorded)

Terminal consumers ending in `_w` return a WriterResult built from these parts.
"""

from .events import Event, Exhausted, Stopped, Yielded
from .log import Log
from .result import WriterResult
from .trace import DEFAULT_POLICY, TracePolicy, drive_traced

__all__ = (
    "DEFAULT_POLICY",
    "Event",
    "Exhausted",
    "Log",
    "Stopped",
    "TracePolicy",
    "WriterResult",
    "Yielded",
    "drive_traced",
)
