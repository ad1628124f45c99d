"""
pushseq - push-style lazy sequences.

A sequence pushes its elements one at a time into a callback; the callback
returns False to stop. Every combinator forwards that answer upstream, so an
early stop ends the whole chain on the same element with nothing buffered.

Architecture:
- Seq / from_collection - the suspension and the collection adapter
- transform  - map, filter, tap, slicing
- combine    - enumerate, zip, concat, flat_map, chunk
- collection - terminal consumers (plain, *_w traced, *M generic)
- writer     - Log, WriterResult, trace events, TracePolicy
- lift       - L.up.* constructors and L.down.* shortcuts

Module-level `map`, `filter`, `zip`, `enumerate`, `any` and `all` mirror
builtin names; import the package as a namespace:

    import pushseq as ps

    ps.from_collection([1, 2, 3]).map(lambda x: x * 2).collect()
"""

# Core types
from ._types import Combine, Drive, NoError, Predicate, Transform, Yield
from .seq import Seq, from_collection

# Lift helpers
from . import lift

# Writer
from . import writer
from .writer import Event, Exhausted, Log, Stopped, TracePolicy, WriterResult, Yielded

# Transform
from .transform import drop_while, filter, map, skip, take, take_while, tap

# Multi-source
from .combine import (
    Enumerated,
    Pair,
    chunk,
    concat,
    enumerate,
    flat_map,
    zip,
    zip_checked,
    zip_with,
)

# Terminal consumers
from .collection import (
    # Plain values
    all,
    any,
    collect,
    count,
    find,
    first,
    for_each,
    last,
    nth,
    reduce,
    # WriterResult
    all_w,
    any_w,
    collect_w,
    count_w,
    find_w,
    first_w,
    for_each_w,
    last_w,
    nth_w,
    reduce_w,
    # Generic
    allM,
    anyM,
    collectM,
    countM,
    for_eachM,
    lastM,
    lookupM,
    reduceM,
)

# Errors
from ._errors import (
    ElementNotFoundError,
    EmptySequenceError,
    IndexOutOfRangeError,
    LengthMismatchError,
)

__all__ = (
    # Types
    "Combine",
    "Drive",
    "NoError",
    "Predicate",
    "Transform",
    "Yield",
    # Core
    "Seq",
    "from_collection",
    # Lift module (namespace import)
    "lift",
    # Writer
    "writer",
    "Event",
    "Exhausted",
    "Log",
    "Stopped",
    "TracePolicy",
    "WriterResult",
    "Yielded",
    # Transform
    "drop_while",
    "filter",
    "map",
    "skip",
    "take",
    "take_while",
    "tap",
    # Multi-source
    "Enumerated",
    "Pair",
    "chunk",
    "concat",
    "enumerate",
    "flat_map",
    "zip",
    "zip_checked",
    "zip_with",
    # Terminal - plain
    "all",
    "any",
    "collect",
    "count",
    "find",
    "first",
    "for_each",
    "last",
    "nth",
    "reduce",
    # Terminal - WriterResult
    "all_w",
    "any_w",
    "collect_w",
    "count_w",
    "find_w",
    "first_w",
    "for_each_w",
    "last_w",
    "nth_w",
    "reduce_w",
    # Terminal - Generic
    "allM",
    "anyM",
    "collectM",
    "countM",
    "for_eachM",
    "lastM",
    "lookupM",
    "reduceM",
    # Errors
    "ElementNotFoundError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
)
