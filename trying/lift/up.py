"""
Lifting values into WarnResult.

Functions turning plain values, kungfu results, carriers, optionals and
exception-based code into the tri-state context.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Result

from .._types import NoError, NoWarning, Thunk
from ..warn import Err, MaybeWarn, Ok, Warn, WarnResult


def pure[T](value: T) -> WarnResult[T, NoError, NoWarning]:
    """
    Lift a plain value into an Ok.

    Example:
        from trying import lift as L

        user = L.up.pure(User(id=42))  # Ok(User(id=42))
    """
    return Ok(value)


def warn[T, W](value: T, warning: W) -> WarnResult[T, NoError, W]:
    """
    Lift a value together with a warning.

    **When to use:** The work succeeded but the caller should hear about
    something (a clamped value, a deprecated field, a fallback taken).
    """
    return Warn(value, warning)


def fail[E](error: E) -> WarnResult[Never, E, NoWarning]:
    """Create a failed outcome. Dual of pure()."""
    return Err(error)


def from_result[T, E](value: Result[T, E]) -> WarnResult[T, E, NoWarning]:
    """
    Lift a binary kungfu Result. Ok stays Ok, Error becomes Err; never Warn.

    Example:
        from trying import lift as L

        L.up.from_result(Ok(1))        # Ok(1)
        L.up.from_result(Error("x"))   # Err('x')
    """
    return WarnResult.from_result(value)


def from_maybe[T, W](value: MaybeWarn[T, W]) -> WarnResult[T, NoError, W]:
    """Clean becomes Ok, Warned becomes Warn."""
    return WarnResult.from_maybe(value)


def optional[T, E](
    value: T | None,
    *,
    error: Thunk[E],
) -> WarnResult[T, E, NoWarning]:
    """
    Convert Optional to WarnResult. None becomes Err(error()).

    NOTE: error is a thunk so the error is only built when needed.
    """
    if value is None:
        return Err(error())
    return Ok(value)


def catching[T, E](
    thunk: Thunk[T],
    *,
    on_error: Callable[[Exception], E],
) -> WarnResult[T, E, NoWarning]:
    """
    Run ``thunk``; an exception becomes Err(on_error(exc)).

    Example:
        from trying import lift as L
        import json

        L.up.catching(lambda: json.loads(raw), on_error=lambda e: str(e))

    NOTE: Catches Exception subclasses only, so propagate() inside the
          thunk still reaches the enclosing @propagating function.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Err(on_error(exc))


__all__ = (
    "pure",
    "warn",
    "fail",
    "from_result",
    "from_maybe",
    "optional",
    "catching",
)
