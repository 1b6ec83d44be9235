"""Internal helpers for trying.

Common functions used across several modules. Not part of the public API."""

from __future__ import annotations

import typing

from kungfu import Error, Nothing, Ok

from .warn import WarnResult


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def as_warn_result(item: typing.Any, /) -> WarnResult[typing.Any, typing.Any, typing.Any]:
    """
    Normalize one outcome to the tri-state form.

    WarnResult passes through; a binary kungfu result is lifted (never into
    Warn). Anything else is a programming error.
    """
    match item:
        case WarnResult():
            return item
        case Nothing():
            raise TypeError("Nothing is an absent value, not an outcome")
        case Ok() | Error():
            return WarnResult.from_result(item)
        case _:
            raise TypeError(f"Expected a WarnResult or kungfu Result, got {item!r}")


__all__ = ("identity", "as_warn_result")
