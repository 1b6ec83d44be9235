"""
WarnResult - tri-state outcome
==============================

    Ok(value)             - success
    Warn(value, warning)  - success with a diagnostic
    Err(error)            - failure

Severity is totally ordered, Err > Warn > Ok, and every combinator keeps to
it: a failure anywhere makes the combined outcome a failure, otherwise a
warning anywhere makes it a warning.

For propagation the continuation payload is a MaybeWarn (covering Ok and
Warn) and the residual is the Err itself.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Nothing, Option, Some, UnwrapError
from kungfu import Ok as BinaryOk
from kungfu import Result as BinaryResult

from .._errors import ResidualMismatchError, WrongVariantError
from ..protocol import Break, Continue, ControlFlow
from .maybe import Clean, MaybeWarn, Warned


class Severity(enum.IntEnum):
    """How bad an outcome is. Combining outcomes takes the maximum."""

    OK = 0
    WARN = 1
    ERR = 2


class WarnResult[T, E, W = E]:
    """
    Discriminated union of Ok / Warn / Err.

    Immutable: every operation returns a new value.

    Example:
        >>> Ok(2).map_val(lambda x: x * 10)
        Ok(20)
        >>> Warn(2, "rounded").map_val(lambda x: x * 10)
        Warn(20, 'rounded')
        >>> Err("boom").map_val(lambda x: x * 10)
        Err('boom')
    """

    __slots__ = ()

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_warn(self) -> bool:
        return isinstance(self, Warn)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    @property
    def severity(self) -> Severity:
        match self:
            case Ok():
                return Severity.OK
            case Warn():
                return Severity.WARN
            case _:
                return Severity.ERR

    def __bool__(self) -> bool:
        # a warning is still a success
        return not self.is_err()

    # ─────────────────────────────────────────────────────────────────
    # Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> MaybeWarn[T, W]:
        """
        Continuation payload, or raise ``kungfu.UnwrapError`` on Err.

        Inside a @propagating function the raise turns into an early return.
        """
        match self.branch():
            case Continue(output):
                return output
            case Break(residual):
                raise UnwrapError(residual.error)
            case _ as unreachable:
                assert_never(unreachable)

    def expect(self, message: str, /) -> MaybeWarn[T, W]:
        """Like unwrap(), with a custom failure message."""
        match self.branch():
            case Continue(output):
                return output
            case _:
                raise UnwrapError(message)

    def unwrap_err(self) -> E:
        match self:
            case Err(error):
                return error
            case _:
                raise WrongVariantError(f"Called unwrap_err() on {self!r}")

    def discard_warnings(self) -> BinaryResult[T, E]:
        """
        Narrow to a binary kungfu result, dropping any warning.

        The only lossy way out of a WarnResult; spelled out on purpose.
        """
        match self:
            case Ok(value) | Warn(value, _):
                return BinaryOk(value)
            case Err(error):
                return Error(error)
            case _:
                raise TypeError(f"Not a WarnResult variant: {self!r}")

    # ─────────────────────────────────────────────────────────────────
    # Functor-like mapping
    # ─────────────────────────────────────────────────────────────────

    def map_val[U](self, f: Callable[[T], U], /) -> WarnResult[U, E, W]:
        """Transform the value of Ok / Warn; the warning stays attached."""
        match self:
            case Ok(value):
                return Ok(f(value))
            case Warn(value, warning):
                return Warn(f(value), warning)
            case _:
                return typing.cast("Err[E]", self)

    def map_warn[V](self, f: Callable[[W], V], /) -> WarnResult[T, E, V]:
        match self:
            case Warn(value, warning):
                return Warn(value, f(warning))
            case _:
                return typing.cast("Ok[T] | Err[E]", self)

    def map_err[F](self, f: Callable[[E], F], /) -> WarnResult[T, F, W]:
        match self:
            case Err(error):
                return Err(f(error))
            case _:
                return typing.cast("Ok[T] | Warn[T, W]", self)

    def map[U](
        self,
        f: Callable[[MaybeWarn[T, W]], MaybeWarn[U, W]],
        /,
    ) -> WarnResult[U, E, W]:
        """
        Transform the continuation payload as a whole.

        ``f`` sees the value together with its warning and may add, replace
        or drop it. Never called on Err.
        """
        match self.branch():
            case Continue(output):
                return WarnResult.from_maybe(f(output))
            case Break(residual):
                return residual
            case _ as unreachable:
                assert_never(unreachable)

    # ─────────────────────────────────────────────────────────────────
    # Chaining
    # ─────────────────────────────────────────────────────────────────

    def and_then[U](
        self,
        f: Callable[[MaybeWarn[T, W]], WarnResult[U, E, W]],
        /,
    ) -> WarnResult[U, E, W]:
        """Chain a dependent operation; short-circuits on Err without calling ``f``."""
        match self.branch():
            case Continue(output):
                return f(output)
            case Break(residual):
                return residual
            case _ as unreachable:
                assert_never(unreachable)

    def or_else[F](self, f: Callable[[E], WarnResult[T, F, W]], /) -> WarnResult[T, F, W]:
        """Recovery hook, called only on Err. Ok / Warn pass through untouched."""
        match self:
            case Err(error):
                return f(error)
            case _:
                return typing.cast("Ok[T] | Warn[T, W]", self)

    # ─────────────────────────────────────────────────────────────────
    # Structure flipping
    # ─────────────────────────────────────────────────────────────────

    def transpose_lossy(self) -> Option[WarnResult[typing.Any, E, W]]:
        """
        Turn a result over an optional value into an optional result.

        The value may be ``None``, ``Nothing()`` or ``Some(v)``. Lossy by
        name: ``Warn(None, w)`` becomes ``Nothing()`` and ``w`` is gone.

            Ok(None)        -> Nothing()
            Warn(None, w)   -> Nothing()
            Ok(Some(v))     -> Some(Ok(v))
            Warn(Some(v), w)-> Some(Warn(v, w))
            Err(e)          -> Some(Err(e))
        """
        match self:
            case Ok(None | Nothing()) | Warn(None | Nothing(), _):
                return Nothing()
            case Ok(value):
                return Some(Ok(_present(value)))
            case Warn(value, warning):
                return Some(Warn(_present(value), warning))
            case _:
                return Some(self)

    def flatten_inner[U](self: WarnResult[WarnResult[U, E, W], E, W]) -> WarnResult[U, E, W]:
        """
        Collapse a nested result. When both levels warn, the inner warning wins.

            Warn(Warn(1, "inner"), "outer").flatten_inner() == Warn(1, "inner")
        """
        match self:
            case Ok(Ok(value)):
                return Ok(value)
            case Ok(Warn(value, warning)) | Warn(Warn(value, warning), _) | Warn(Ok(value), warning):
                return Warn(value, warning)
            case Ok(Err(error)) | Warn(Err(error), _) | Err(error):
                return Err(error)
        raise TypeError(f"flatten_inner() needs a nested WarnResult, got {self!r}")

    def flatten_outer[U](self: WarnResult[WarnResult[U, E, W], E, W]) -> WarnResult[U, E, W]:
        """
        Collapse a nested result. When both levels warn, the outer warning wins.

            Warn(Warn(1, "inner"), "outer").flatten_outer() == Warn(1, "outer")
        """
        match self:
            case Ok(Ok(value)):
                return Ok(value)
            case Ok(Warn(value, warning)) | Warn(Ok(value) | Warn(value, _), warning):
                return Warn(value, warning)
            case Ok(Err(error)) | Warn(Err(error), _) | Err(error):
                return Err(error)
        raise TypeError(f"flatten_outer() needs a nested WarnResult, got {self!r}")

    # ─────────────────────────────────────────────────────────────────
    # Conversions
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def from_maybe[V, X](maybe: MaybeWarn[V, X], /) -> WarnResult[V, typing.Never, X]:
        """Clean -> Ok, Warned -> Warn."""
        match maybe:
            case Warned(value, warning):
                return Warn(value, warning)
            case _:
                return Ok(maybe.value)

    @staticmethod
    def from_result[V, X](result: BinaryResult[V, X], /) -> WarnResult[V, X, typing.Never]:
        """kungfu Ok -> Ok, kungfu Error -> Err. Never produces Warn."""
        match result:
            case BinaryOk(value):
                return Ok(value)
            case Nothing():
                raise TypeError("Nothing is an absent value, not a failure")
            case Error(error):
                return Err(error)
        raise TypeError(f"Expected a kungfu Result, got {result!r}")

    # ─────────────────────────────────────────────────────────────────
    # Propagation protocol
    # ─────────────────────────────────────────────────────────────────

    def branch(self) -> ControlFlow[Err[E], MaybeWarn[T, W]]:
        match self:
            case Ok(value):
                return Continue(Clean(value))
            case Warn(value, warning):
                return Continue(Warned(value, warning))
            case _:
                return Break(typing.cast("Err[E]", self))

    @classmethod
    def from_residual(cls, residual: typing.Any, /) -> WarnResult[typing.Any, typing.Any, typing.Any]:
        """Accepts a tri-state Err or a binary kungfu Error."""
        match residual:
            case Err():
                return residual
            case Nothing():
                raise ResidualMismatchError(residual, cls)
            case Error(error):
                return Err(error)
            case _:
                raise ResidualMismatchError(residual, cls)


def _present(value: typing.Any) -> typing.Any:
    match value:
        case Some(inner):
            return inner
        case _:
            return value


@dataclass(frozen=True, slots=True, repr=False)
class Ok[T](WarnResult[T, typing.Never, typing.Never]):
    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Warn[T, W](WarnResult[T, typing.Never, W]):
    value: T
    warning: W

    def __repr__(self) -> str:
        return f"Warn({self.value!r}, {self.warning!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Err[E](WarnResult[typing.Never, E, typing.Never]):
    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


__all__ = ("Err", "Ok", "Severity", "Warn", "WarnResult")
