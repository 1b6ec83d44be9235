"""
Reporting at the program boundary
=================================

The one place outcomes meet the outside world: a final outcome becomes one
human-readable line on the error stream and a process exit status.

- Ok      -> success (or the status of a nested reportable value)
- Warn    -> "Warning: ..." line, then as Ok
- Err     -> "Error: ..." line, failure
- Assert  -> failure line with the call site, failure; success otherwise
"""

from __future__ import annotations

import enum
import sys
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Nothing
from kungfu import Ok as BinaryOk

from .assertion import Assert
from .logging import logger
from .warn import Err, Ok, Warn


class ExitCode(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1


def _stderr() -> typing.TextIO:
    return sys.stderr


@dataclass(frozen=True, slots=True)
class ReportPolicy:
    """
    How outcomes are written.

    ``stream`` is resolved at report time, so a replaced sys.stderr is
    honoured.
    """

    stream: Callable[[], typing.TextIO] = _stderr
    warning_prefix: str = "Warning"
    error_prefix: str = "Error"
    render: Callable[[typing.Any], str] = repr

    def write(self, line: str) -> None:
        out = self.stream()
        out.write(line + "\n")
        out.flush()


DEFAULT_POLICY: typing.Final = ReportPolicy()


def report(outcome: typing.Any, *, policy: ReportPolicy = DEFAULT_POLICY) -> ExitCode:
    """
    Write the diagnostic or error of ``outcome`` and give its exit status.

    Warnings are written but keep the success status; only failures change it.
    """
    logger().debug("reporting %r", outcome)
    match outcome:
        case Ok(value) | BinaryOk(value):
            return _status_of(value, policy)
        case Warn(value, warning):
            policy.write(f"{policy.warning_prefix}: {policy.render(warning)}")
            return _status_of(value, policy)
        case Nothing():
            raise TypeError("Nothing is an absent value, not an outcome")
        case Err(error) | Error(error):
            policy.write(f"{policy.error_prefix}: {policy.render(error)}")
            return ExitCode.FAILURE
        case Assert():
            failure = outcome.consume()
            if failure is None:
                return ExitCode.SUCCESS
            policy.write(f"Assertion Failed: {failure}")
            return ExitCode.FAILURE
        case _:
            return _status_of(outcome, policy)


def _status_of(value: typing.Any, policy: ReportPolicy) -> ExitCode:
    match value:
        case ExitCode():
            return value
        case Ok() | Warn() | Err() | BinaryOk() | Error() | Assert():
            return report(value, policy=policy)
        case _:
            return ExitCode.SUCCESS


def run(main: Callable[[], typing.Any], *, policy: ReportPolicy = DEFAULT_POLICY) -> typing.NoReturn:
    """Call ``main`` and exit the process with the reported status."""
    sys.exit(int(report(main(), policy=policy)))


__all__ = ("DEFAULT_POLICY", "ExitCode", "ReportPolicy", "report", "run")
