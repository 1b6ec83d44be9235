"""Tests for propagate() / @propagating."""

from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Nothing, Some
from kungfu import Ok as BinaryOk

from trying import (
    Break,
    Clean,
    Continue,
    Err,
    Ok,
    Propagable,
    Propagation,
    ResidualMismatchError,
    Warn,
    Warned,
    WarnResult,
    branch,
    propagate,
    propagating,
)


# ═════════════════════════════════════════════════════════════════════════════
# branch
# ═════════════════════════════════════════════════════════════════════════════


def test_branch_on_tri_state() -> None:
    assert branch(Ok(1)) == Continue(Clean(1))
    assert branch(Warn(1, "w")) == Continue(Warned(1, "w"))
    assert branch(Err("e")) == Break(Err("e"))


def test_branch_on_kungfu_results() -> None:
    assert branch(BinaryOk(1)) == Continue(1)
    assert branch(Some(1)) == Continue(1)
    assert isinstance(branch(Error("e")).residual, Error)
    assert isinstance(branch(Nothing()).residual, Nothing)


def test_branch_rejects_plain_values() -> None:
    with pytest.raises(TypeError):
        branch(42)


def test_tri_state_is_propagable() -> None:
    assert isinstance(Ok(1), Propagable)
    assert isinstance(Err("e"), Propagable)
    assert not isinstance(BinaryOk(1), Propagable)


# ═════════════════════════════════════════════════════════════════════════════
# propagating
# ═════════════════════════════════════════════════════════════════════════════


def _parse(raw: str) -> WarnResult[int, str]:
    if not raw:
        return Err("empty")
    if raw.startswith("0") and raw != "0":
        return Warn(int(raw), "leading zero")
    return Ok(int(raw))


@propagating
def _sum_pair(left: str, right: str) -> WarnResult[int, str]:
    a = propagate(_parse(left))
    b = propagate(_parse(right))
    return Ok(a.value + b.value)


def test_propagate_returns_payload() -> None:
    assert _sum_pair("1", "2") == Ok(3)


def test_propagate_payload_keeps_warning() -> None:
    seen = []

    @propagating
    def inspect_payload(raw: str) -> WarnResult[int, str]:
        payload = propagate(_parse(raw))
        seen.append(payload)
        return WarnResult.from_maybe(payload)

    assert inspect_payload("07") == Warn(7, "leading zero")
    assert seen == [Warned(7, "leading zero")]


def test_propagate_exits_early() -> None:
    calls = []

    @propagating
    def pipeline() -> WarnResult[int, str]:
        propagate(Err("stop"))
        calls.append("unreachable")
        return Ok(0)

    assert pipeline() == Err("stop")
    assert calls == []


def test_propagate_first_failure_wins() -> None:
    assert _sum_pair("", "") == Err("empty")


def test_kungfu_error_lifts_into_tri_state() -> None:
    @propagating
    def load() -> WarnResult[int, str]:
        value = propagate(Error("missing"))
        return Ok(value)

    assert load() == Err("missing")


def test_kungfu_ok_continues_with_plain_value() -> None:
    @propagating
    def load() -> WarnResult[int, str]:
        return Ok(propagate(BinaryOk(5)) * 2)

    assert load() == Ok(10)


def test_unwrap_inside_propagating_acts_as_propagate() -> None:
    @propagating
    def load() -> WarnResult[int, str]:
        return Ok(Err("inner").unwrap().value)

    assert load() == Err("inner")


def test_unwrap_of_kungfu_error_inside_propagating() -> None:
    @propagating
    def load() -> WarnResult[int, str]:
        return Ok(Error("inner").unwrap())

    assert load() == Err("inner")


def test_nothing_does_not_lift_into_tri_state() -> None:
    @propagating
    def load() -> WarnResult[int, str]:
        return Ok(propagate(Nothing()))

    with pytest.raises(ResidualMismatchError):
        load()


def test_explicit_target() -> None:
    class Outcome:
        def __init__(self, residual) -> None:
            self.residual = residual

        @classmethod
        def from_residual(cls, residual):
            return cls(residual)

    @propagating(into=Outcome)
    def work():
        propagate(Err("x"))

    assert work().residual == Err("x")


def test_propagating_preserves_metadata() -> None:
    assert _sum_pair.__name__ == "_sum_pair"


def test_propagate_outside_propagating_escapes() -> None:
    with pytest.raises(Propagation) as info:
        propagate(Err("lost"))
    assert info.value.residual == Err("lost")


def test_propagation_is_not_an_exception() -> None:
    @propagating
    def guarded() -> WarnResult[int, str]:
        try:
            propagate(Err("e"))
        except Exception:
            return Ok(-1)
        return Ok(0)

    assert guarded() == Err("e")


def test_async_propagating() -> None:
    async def fetch(raw: str) -> WarnResult[int, str]:
        await asyncio.sleep(0)
        return _parse(raw)

    @propagating
    async def pipeline(raw: str) -> WarnResult[int, str]:
        value = propagate(await fetch(raw))
        return Ok(value.value + 1)

    assert asyncio.run(pipeline("1")) == Ok(2)
    assert asyncio.run(pipeline("")) == Err("empty")
