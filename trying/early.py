"""
Early - early-return values
===========================

For when a call either already has the final answer (Done) or hands back
something to keep working on (Todo). Propagating a Done returns it from the
enclosing function straight away:

    @propagating(into=Early)
    def lookup(key: str) -> Early[str, Request]:
        propagate(from_cache(key))    # Done(hit) ends here
        return Todo(Request(key))
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._errors import ResidualMismatchError, WrongVariantError
from .protocol import Break, Continue, ControlFlow


class Early[D, T]:
    """Either Done(value) - computation finished - or Todo(value) - keep going."""

    __slots__ = ()

    def is_done(self) -> bool:
        return isinstance(self, Done)

    def is_todo(self) -> bool:
        return isinstance(self, Todo)

    def unwrap(self) -> D:
        """The Done value; raises WrongVariantError on Todo."""
        match self:
            case Done(value):
                return value
            case _:
                raise WrongVariantError("Called unwrap() on Early.Todo")

    def unwrap_todo(self) -> T:
        """The Todo value; raises WrongVariantError on Done."""
        match self:
            case Todo(value):
                return value
            case _:
                raise WrongVariantError("Called unwrap_todo() on Early.Done")

    def as_ref(self) -> Early[D, T]:
        """A new Early of the same variant over the same payload object."""
        match self:
            case Done(value):
                return Done(value)
            case Todo(value):
                return Todo(value)
        raise TypeError(f"Not an Early variant: {self!r}")

    def and_then[U](self, f: Callable[[T], Early[D, U]], /) -> Early[D, U]:
        """Done passes through; Todo(v) becomes f(v)."""
        match self:
            case Todo(value):
                return f(value)
            case _:
                return typing.cast("Done[D]", self)

    def branch(self) -> ControlFlow[Done[D], T]:
        match self:
            case Todo(value):
                return Continue(value)
            case _:
                return Break(typing.cast("Done[D]", self))

    @classmethod
    def from_residual(cls, residual: typing.Any, /) -> Early[typing.Any, typing.Any]:
        match residual:
            case Done():
                return residual
            case _:
                raise ResidualMismatchError(residual, cls)


@dataclass(frozen=True, slots=True, repr=False)
class Done[D](Early[D, typing.Never]):
    value: D

    def __repr__(self) -> str:
        return f"Done({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Todo[T](Early[typing.Never, T]):
    value: T

    def __repr__(self) -> str:
        return f"Todo({self.value!r})"


__all__ = ("Done", "Early", "Todo")
