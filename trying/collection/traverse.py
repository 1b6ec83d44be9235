"""
Traverse combinators
====================

Fold a sequence of outcomes into one outcome over a container, merging
warnings and stopping at the first failure.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import as_warn_result, identity
from ..warn import Diagnostics, Err, Ok, Severity, Warn, WarnResult


def traverse[A, T, E, W, C](
    items: Iterable[A],
    handler: Callable[[A], WarnResult[T, E, W]],
    *,
    into: Callable[[list[T]], C] = list,
) -> WarnResult[C, E, Diagnostics[W]]:
    """
    Monadic map: A -> WarnResult[T], sequential and lazy.

    Single pass over ``items``:
    - Ok(v): keep v
    - Warn(v, w): keep v, record w, the outcome becomes at least Warn
    - Err(e): stop right there; ``handler`` is not called for later items
      and the outcome is Err(e)

    ``handler`` may also return a binary kungfu result (never a Warn).
    The kept values are handed to ``into`` (list by default).
    """
    severity = Severity.OK
    values: list[T] = []
    warnings = Diagnostics[W]()

    for item in items:
        match as_warn_result(handler(item)):
            case Ok(value):
                values.append(value)
            case Warn(value, warning):
                severity = Severity.WARN
                values.append(value)
                warnings.append(warning)
            case Err() as failure:
                return failure

    if severity is Severity.WARN:
        return Warn(into(values), warnings)
    return Ok(into(values))


def collect[T, E, W, C](
    results: Iterable[WarnResult[T, E, W] | typing.Any],
    *,
    into: Callable[[list[T]], C] = list,
) -> WarnResult[C, E, Diagnostics[W]]:
    """
    Flip structure: [WarnResult[T]] -> WarnResult[[T]].

    Implemented as traverse(id).

    Example:
        collect([Ok(1), Warn(2, "a"), Ok(3), Warn(4, "b")])
        # Warn([1, 2, 3, 4], Diagnostics(['a', 'b']))
    """
    return traverse(results, identity, into=into)


__all__ = ("collect", "traverse")
