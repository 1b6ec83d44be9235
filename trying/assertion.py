"""
Assert - a check that must be consumed
======================================

An Assert is a runtime check made into a propagable value. It remembers
where it was made, and a failed one cannot be silently forgotten: it has to
be propagated, turned into an AssertionError, reported, or explicitly
defused. A failed Assert dropped without any of that aborts the process.

    @checks
    def test_frobnicate():
        value = frobnicate(1)
        propagate(Assert.eq(value, 2).msg("Failed to frobnicate"))
        propagate(Assert.ne(frobnicate(1), frobnicate(2)))
        return Assert.success()
"""

from __future__ import annotations

import inspect
import os
import sys
import typing
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

import kungfu
from kungfu import Error, Nothing

from ._errors import ResidualMismatchError
from .protocol import Break, Continue, ControlFlow, propagating

type DropHandler = Callable[[Assert], None]


@dataclass(frozen=True, slots=True)
class Location:
    """Call site an assertion was made at."""

    filename: str
    lineno: int
    function: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


@dataclass(frozen=True, slots=True)
class AssertFailure:
    """Residual of a failed assertion."""

    message: str
    location: Location | None = None

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.message} at {self.location}"


def _call_site() -> Location | None:
    # first frame outside this module is the caller that made the assertion
    frame = inspect.currentframe()
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return None
    return Location(frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)


_LIBRARY_DIRS: typing.Final = (
    os.path.dirname(__file__) + os.sep,
    os.path.dirname(kungfu.__file__) + os.sep,
)


def _propagation_site() -> Location | None:
    """
    Where an early exit being handled right now started.

    The innermost traceback frame outside trying and kungfu is the line that
    called propagate() or .unwrap(). Without such an exception, the caller.
    """
    handled = sys.exception()
    tb = handled.__traceback__ if handled is not None else None
    site = None
    while tb is not None:
        code = tb.tb_frame.f_code
        if not code.co_filename.startswith(_LIBRARY_DIRS):
            site = Location(code.co_filename, tb.tb_lineno, code.co_name)
        tb = tb.tb_next
    return site if site is not None else _call_site()


def abort_on_drop(dropped: Assert) -> None:
    """Default drop handler: say where the assertion came from, then abort."""
    sys.stderr.write(
        "Failed assertion dropped. (Did you forget propagate() or raise_if_failed()?)\n"
        f"{dropped!r}\n"
    )
    sys.stderr.flush()
    os.abort()


_drop_handler: DropHandler = abort_on_drop


def set_drop_handler(handler: DropHandler) -> DropHandler:
    """Replace the handler run for a dropped failed Assert; returns the old one."""
    global _drop_handler
    previous, _drop_handler = _drop_handler, handler
    return previous


class Assert:
    """
    Outcome of a logical assertion made at runtime.

    Consumed by propagate(), raise_if_failed(), defuse(), report(), or by
    msg() / with_msg() which hand the state over to a new Assert.
    """

    __slots__ = ("_failure", "_consumed")

    def __init__(self, failure: AssertFailure | None = None) -> None:
        """Private constructor. Use success() / failure() and the checks instead."""
        self._failure = failure
        self._consumed = False

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def success(cls) -> Assert:
        return cls()

    @classmethod
    def failure(cls, message: str = "Assertion failed") -> Assert:
        return cls(AssertFailure(message, _call_site()))

    @classmethod
    def is_true(cls, condition: bool) -> Assert:
        if condition:
            return cls.success()
        return cls.failure("Expected `True`, got `False`")

    @classmethod
    def is_false(cls, condition: bool) -> Assert:
        if not condition:
            return cls.success()
        return cls.failure("Expected `False`, got `True`")

    @classmethod
    def eq(cls, left: typing.Any, right: typing.Any) -> Assert:
        if left == right:
            return cls.success()
        return cls.failure(f"Expected `{left!r}` to equal `{right!r}`")

    @classmethod
    def ne(cls, left: typing.Any, right: typing.Any) -> Assert:
        if left != right:
            return cls.success()
        return cls.failure(f"Expected `{left!r}` to not equal `{right!r}`")

    # ─────────────────────────────────────────────────────────────────
    # Messages
    # ─────────────────────────────────────────────────────────────────

    def msg(self, message: str, /) -> Assert:
        """Replace the failure message. Ignored on success."""
        failure = self.consume()
        if failure is None:
            return Assert()
        return Assert(AssertFailure(message, failure.location))

    def with_msg(self, message: Callable[[], str], /) -> Assert:
        """Like msg(), but only builds the message if the assertion failed."""
        failure = self.consume()
        if failure is None:
            return Assert()
        return Assert(AssertFailure(message(), failure.location))

    # ─────────────────────────────────────────────────────────────────
    # Inspection and consumption
    # ─────────────────────────────────────────────────────────────────

    def is_failure(self) -> bool:
        return self._failure is not None

    def is_success(self) -> bool:
        return self._failure is None

    def consume(self) -> AssertFailure | None:
        """Mark as handled and hand out the failure, if any."""
        self._consumed = True
        return self._failure

    def raise_if_failed(self) -> None:
        """Convert a failure into an AssertionError; do nothing on success."""
        failure = self.consume()
        if failure is not None:
            raise AssertionError(str(failure))

    def defuse(self) -> None:
        """
        Consume harmlessly. Probably not what you want, unless a failed
        assertion really has to be ignored.
        """
        self.consume()

    # ─────────────────────────────────────────────────────────────────
    # Propagation protocol
    # ─────────────────────────────────────────────────────────────────

    def branch(self) -> ControlFlow[AssertFailure, None]:
        failure = self.consume()
        if failure is None:
            return Continue(None)
        return Break(failure)

    @classmethod
    def from_residual(cls, residual: typing.Any, /) -> Assert:
        """
        Accepts an AssertFailure; a kungfu Error or a tri-state Err becomes a
        failure whose message is the error's text, located where it was
        propagated.
        """
        from .warn import Err

        match residual:
            case AssertFailure():
                return cls(residual)
            case Nothing():
                raise ResidualMismatchError(residual, cls)
            case Error(error) | Err(error):
                return cls(AssertFailure(str(error), _propagation_site()))
            case _:
                raise ResidualMismatchError(residual, cls)

    def __repr__(self) -> str:
        if self._failure is None:
            return "Assertion Successful"
        return f"Assertion Failed: {self._failure}"

    def __del__(self) -> None:
        if self._failure is not None and not self._consumed:
            _drop_handler(self)


def checks[**P](func: Callable[P, Assert | None], /) -> Callable[P, None]:
    """
    Run a test function written against Assert.

    propagate() works inside; a failed Assert coming out of the function is
    raised as AssertionError, which is what test runners look for.
    """
    checked = propagating(func, into=Assert)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> None:
        outcome = checked(*args, **kwargs)
        if outcome is not None:
            outcome.raise_if_failed()

    return wrapper


__all__ = (
    "Assert",
    "AssertFailure",
    "Location",
    "abort_on_drop",
    "checks",
    "set_drop_handler",
)
