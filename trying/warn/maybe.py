"""
MaybeWarn - "succeeded, maybe with a diagnostic"
=================================================

The continuation payload of a WarnResult: what propagate() hands back when
the outcome was not a failure. Two variants:

- Clean(value)             - succeeded
- Warned(value, warning)   - succeeded, but something is worth reporting

Both always carry exactly one value; only Warned carries a warning.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from .result import Severity


class MaybeWarn[T, W]:
    """Carrier of a produced value and, optionally, its warning."""

    __slots__ = ()

    value: T

    def is_warn(self) -> bool:
        return isinstance(self, Warned)

    @property
    def severity(self) -> Severity:
        from .result import Severity
        return Severity.WARN if self.is_warn() else Severity.OK

    def discard_warnings(self) -> T:
        """Give up the value; any warning is dropped for good."""
        return self.value

    def map[U](self, f: Callable[[T], U], /) -> MaybeWarn[U, W]:
        """Transform the value, keep the warning."""
        match self:
            case Warned(value, warning):
                return Warned(f(value), warning)
            case _:
                return Clean(f(self.value))

    def map_warn[V](self, f: Callable[[W], V], /) -> MaybeWarn[T, V]:
        """Transform the warning if there is one."""
        match self:
            case Warned(value, warning):
                return Warned(value, f(warning))
            case _:
                return Clean(self.value)

    def as_ref(self) -> MaybeWarn[T, W]:
        """
        A new carrier of the same variant over the same payload objects.

        Rebinding ``value`` on the copy leaves the original alone; in-place
        mutation of a mutable payload is visible through both.
        """
        match self:
            case Warned(value, warning):
                return Warned(value, warning)
            case _:
                return Clean(self.value)

    def as_mut(self) -> MaybeWarn[T, W]:
        """A carrier whose assignments reach this one: the carrier itself."""
        return self


@dataclass(slots=True, repr=False)
class Clean[T](MaybeWarn[T, typing.Never]):
    value: T

    def __repr__(self) -> str:
        return f"Clean({self.value!r})"


@dataclass(slots=True, repr=False)
class Warned[T, W](MaybeWarn[T, W]):
    value: T
    warning: W

    def __repr__(self) -> str:
        return f"Warned({self.value!r}, {self.warning!r})"


__all__ = ("Clean", "MaybeWarn", "Warned")
