"""
Core type definitions for pushseq.

Aliases for the push protocol and the user-supplied functions used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Push protocol
# ============================================================================

# Yield = consumer callback; returns False to stop the traversal
type Yield[T] = Callable[[T], bool]

# Drive = function that pushes every element into a callback until it says stop
type Drive[T] = Callable[[Yield[T]], None]

# ============================================================================
# User-supplied functions
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Transform = function applied to every yielded element
type Transform[T, V] = Callable[[T], V]

# Combine = left-fold step (accumulator, element) -> accumulator
type Combine[A, T] = Callable[[A, T], A]

# NoError = error type of terminals that cannot fail
type NoError = typing.Never

__all__ = (
    # Protocol
    "Yield",
    "Drive",
    # Functions
    "Predicate",
    "Transform",
    "Combine",
    "NoError",
)
