from __future__ import annotations

import typing


class Propagation(BaseException):
    """
    Short-circuit signal raised by propagate() and caught by @propagating.

    Derives from BaseException so that ``except Exception`` in user code
    does not intercept an early return. Seeing it escape means propagate()
    was called outside a @propagating function.
    """

    residual: typing.Any

    def __init__(self, residual: typing.Any) -> None:
        self.residual = residual
        super().__init__(
            f"{residual!r} propagated outside a @propagating function"
        )


class ResidualMismatchError(TypeError):
    """A residual cannot be lifted into the requested target type."""

    residual: typing.Any
    target: type

    def __init__(self, residual: typing.Any, target: type) -> None:
        self.residual = residual
        self.target = target
        super().__init__(f"Cannot lift residual {residual!r} into {target.__name__}")


class WrongVariantError(RuntimeError):
    """A payload was extracted from a variant that does not carry it."""


__all__ = ("Propagation", "ResidualMismatchError", "WrongVariantError")
