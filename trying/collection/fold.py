"""
Fold combinators
================

Fold with warning accumulation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._helpers import as_warn_result
from ..warn import Diagnostics, Err, Ok, Severity, Warn, WarnResult


def fold[A, T, E, W](
    items: Iterable[A],
    handler: Callable[[T, A], WarnResult[T, E, W]],
    *,
    initial: T,
) -> WarnResult[T, E, Diagnostics[W]]:
    """
    Thread an accumulator through ``handler(acc, item)``.

    Warnings from every step are kept in order; the first Err ends the fold.
    """
    severity = Severity.OK
    acc = initial
    warnings = Diagnostics[W]()

    for item in items:
        match as_warn_result(handler(acc, item)):
            case Ok(value):
                acc = value
            case Warn(value, warning):
                severity = Severity.WARN
                acc = value
                warnings.append(warning)
            case Err() as failure:
                return failure

    if severity is Severity.WARN:
        return Warn(acc, warnings)
    return Ok(acc)


__all__ = ("fold",)
