"""
Propagation protocol
====================

A propagable value decomposes into either "continue with an output" or
"stop with a residual". The residual of one propagable type can be lifted
into any compatible target, which is how an early exit inside a chain of
operations becomes the result of the whole chain:

    @propagating
    def load(path: str) -> WarnResult[Config, str]:
        raw = propagate(read(path))          # kungfu.Result: value or exit
        config = propagate(parse(raw))       # WarnResult: MaybeWarn or exit
        return Ok(config.discard_warnings())

Binary ``kungfu`` results take part as well: ``Ok(v)`` continues with ``v``,
``Error(e)`` stops with the ``Error`` itself as residual.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from kungfu import Error, Ok, UnwrapError

from ._errors import Propagation
from .logging import logger


@dataclass(frozen=True, slots=True)
class Continue[O]:
    """Keep going with ``value``."""

    value: O


@dataclass(frozen=True, slots=True)
class Break[R]:
    """Stop, yielding ``residual`` to the enclosing chain."""

    residual: R


type ControlFlow[R, O] = Break[R] | Continue[O]


@typing.runtime_checkable
class Propagable[O, R](typing.Protocol):
    """Anything that can be decomposed by the propagation operator."""

    def branch(self) -> ControlFlow[R, O]: ...


class FromResidual(typing.Protocol):
    """A target an early exit can return into."""

    @classmethod
    def from_residual(cls, residual: typing.Any, /) -> typing.Self: ...


def branch(value: typing.Any, /) -> ControlFlow[typing.Any, typing.Any]:
    """Decompose a propagable value (or a binary kungfu result)."""
    match value:
        case Propagable():
            return value.branch()
        case Ok(output):
            return Continue(output)
        case Error():
            return Break(value)
        case _:
            raise TypeError(f"{type(value).__name__} is not propagable")


def propagate(value: typing.Any, /) -> typing.Any:
    """
    The propagation operator.

    Returns the continuation payload of ``value``. On a residual, exits the
    enclosing @propagating function, which then returns the residual lifted
    into its target type.
    """
    match branch(value):
        case Continue(output):
            return output
        case Break(residual):
            raise Propagation(residual)


def _unwrap_residual(exc: UnwrapError[typing.Any]) -> Error[typing.Any]:
    # .unwrap() on a failure carries the failure payload as an Option
    return Error(exc.__error__.unwrap_or_none())


def _default_target() -> type[FromResidual]:
    from .warn.result import WarnResult
    return WarnResult


@typing.overload
def propagating[**P, R](func: Callable[P, R], /) -> Callable[P, R]: ...


@typing.overload
def propagating[**P, R](
    *,
    into: type[FromResidual] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def propagating(
    func: Callable[..., typing.Any] | None = None,
    /,
    *,
    into: type[FromResidual] | None = None,
) -> typing.Any:
    """
    Mark a function whose body uses propagate().

    A residual raised inside becomes the return value through
    ``into.from_residual`` (``WarnResult`` by default). ``.unwrap()`` on a
    failed kungfu or tri-state result is treated the same way, as a binary
    ``Error`` residual. Works for both plain and ``async`` functions.
    """

    def decorate(fn: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
        target = into if into is not None else _default_target()

        def short_circuit(residual: typing.Any) -> typing.Any:
            logger().debug("%s short-circuited with %r", fn.__qualname__, residual)
            return target.from_residual(residual)

        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
                try:
                    return await fn(*args, **kwargs)
                except Propagation as signal:
                    return short_circuit(signal.residual)
                except UnwrapError as exc:
                    return short_circuit(_unwrap_residual(exc))

            return async_wrapper

        @wraps(fn)
        def wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
            try:
                return fn(*args, **kwargs)
            except Propagation as signal:
                return short_circuit(signal.residual)
            except UnwrapError as exc:
                return short_circuit(_unwrap_residual(exc))

        return wrapper

    if func is not None:
        return decorate(func)
    return decorate


__all__ = (
    "Break",
    "Continue",
    "ControlFlow",
    "FromResidual",
    "Propagable",
    "branch",
    "propagate",
    "propagating",
)
