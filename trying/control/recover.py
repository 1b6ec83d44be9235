"""Recover combinators

Turning a failure back into a success, or into a warning."""

from __future__ import annotations

from collections.abc import Callable

from .._types import NoError
from ..warn import Err, Ok, Warn, WarnResult


def recover[T, E, W](
    result: WarnResult[T, E, W],
    *,
    default: T,
) -> WarnResult[T, NoError, W]:
    """Turn any Err into Ok(default). Ok / Warn pass through."""
    return result.or_else(lambda _: Ok(default))


def recover_with[T, E, W](
    result: WarnResult[T, E, W],
    *,
    handler: Callable[[E], T],
) -> WarnResult[T, NoError, W]:
    """Turn any Err into Ok using a recovery function."""
    return result.or_else(lambda error: Ok(handler(error)))


def downgrade[T, E, W](
    result: WarnResult[T, E, W],
    *,
    default: T,
    warning: Callable[[E], W],
) -> WarnResult[T, NoError, W]:
    """
    Turn Err(e) into Warn(default, warning(e)).

    The failure is not forgotten, only demoted: the caller still sees it.
    """
    match result:
        case Err(error):
            return Warn(default, warning(error))
        case _:
            return result


__all__ = ("recover", "recover_with", "downgrade")
