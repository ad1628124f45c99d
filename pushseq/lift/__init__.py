"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from pushseq import lift as L   # Recommended
    from pushseq import lift        # Explicit

Architecture:
- L.up.*    - lift data into a Seq
- L.down.*  - lower a Seq into a value

Examples:
    from pushseq import lift as L

    seq = L.up.of(3, 1, 2)
    maybe = L.up.optional(cache.get(key))

    values = L.down.to_list(seq)
    head = L.down.or_else(seq, default=0)
"""

from __future__ import annotations

from . import down, up

# Most common functions, for short access
from .down import or_else, to_list, unsafe
from .up import empty, of, once, optional

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "empty",
    "of",
    "once",
    "optional",
    # Down
    "or_else",
    "to_list",
    "unsafe",
)
