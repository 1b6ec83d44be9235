"""
Core type definitions for trying.

Aliases shared across the package.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-arg callable producing a value on demand
type Thunk[T] = Callable[[], T]

# NoError / NoWarning = "this outcome can never carry one"
# NOTE: Never (bottom type) rather than None: None is a perfectly valid
#       warning or error payload.
type NoError = typing.Never
type NoWarning = typing.Never

__all__ = (
    "Predicate",
    "Thunk",
    "NoError",
    "NoWarning",
)
