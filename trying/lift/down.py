"""
Narrowing WarnResult back out.

Leaving the tri-state world means deciding what happens to warnings, so
every exit here is named after that decision.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..protocol import Continue
from ..warn import Clean, Err, MaybeWarn, Warn, WarnResult
from ..warn import Ok as WarnOk


def discard_warnings[T, E, W](result: WarnResult[T, E, W]) -> Result[T, E]:
    """
    Narrow to a binary kungfu Result, dropping any warning.

    Example:
        from trying import lift as L

        L.down.discard_warnings(Warn(1, "w"))  # Ok(1)
    """
    return result.discard_warnings()


def strict[T, E, W](
    result: WarnResult[T, E, W],
    *,
    warning_as_error: Callable[[W], E],
) -> Result[T, E]:
    """
    Narrow to a binary kungfu Result, treating a warning as an error.

    Nothing is lost: the warning ends up as the error payload.
    """
    match result:
        case WarnOk(value):
            return Ok(value)
        case Warn(_, warning):
            return Error(warning_as_error(warning))
        case Err(error):
            return Error(error)
        case _:
            raise TypeError(f"Expected a WarnResult, got {result!r}")


def or_else[T, E, W](result: WarnResult[T, E, W], default: T) -> MaybeWarn[T, W]:
    """Continuation payload, or Clean(default) on Err."""
    match result.branch():
        case Continue(output):
            return output
        case _:
            return Clean(default)


__all__ = (
    "discard_warnings",
    "strict",
    "or_else",
)
