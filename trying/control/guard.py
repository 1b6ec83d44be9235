"""
Guard combinators
=================

Checks on the carried value that escalate the outcome.
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Predicate
from ..warn import Err, Ok, Warn, WarnResult


def ensure[T, E, W](
    result: WarnResult[T, E, W],
    *,
    predicate: Predicate[T],
    error: Callable[[T], E],
) -> WarnResult[T, E, W]:
    """
    Turn Ok / Warn into Err if the value FAILS the check.

    A Warn that fails loses its warning: Err dominates.
    """
    match result:
        case Ok(value) | Warn(value, _) if not predicate(value):
            return Err(error(value))
        case _:
            return result


def warn_unless[T, E, W](
    result: WarnResult[T, E, W],
    *,
    predicate: Predicate[T],
    warning: Callable[[T], W],
) -> WarnResult[T, E, W]:
    """
    Turn Ok into Warn if the value FAILS the check. Soft version of ensure().

    An existing Warn keeps its own warning and Err is left alone: the outcome
    only ever moves up in severity.
    """
    match result:
        case Ok(value) if not predicate(value):
            return Warn(value, warning(value))
        case _:
            return result


__all__ = ("ensure", "warn_unless")
