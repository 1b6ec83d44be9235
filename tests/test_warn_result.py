"""Tests for WarnResult combinators.

Validates:
- variant-wise mapping
- chaining and recovery
- flatten precedence (inner vs outer)
- lossy transpose
- conversions to and from kungfu results
"""

from __future__ import annotations

import pytest
from kungfu import Error, Nothing, Some, UnwrapError
from kungfu import Ok as BinaryOk

from trying import (
    Clean,
    Err,
    Ok,
    ResidualMismatchError,
    Severity,
    Warn,
    Warned,
    WarnResult,
    WrongVariantError,
)


# ═════════════════════════════════════════════════════════════════════════════
# Inspection
# ═════════════════════════════════════════════════════════════════════════════


def test_predicates_and_severity() -> None:
    assert Ok(1).is_ok() and not Ok(1).is_warn() and not Ok(1).is_err()
    assert Warn(1, "w").is_warn()
    assert Err("e").is_err()

    assert Ok(1).severity is Severity.OK
    assert Warn(1, "w").severity is Severity.WARN
    assert Err("e").severity is Severity.ERR
    assert Severity.ERR > Severity.WARN > Severity.OK


def test_truthiness_treats_warning_as_success() -> None:
    assert Ok(0)
    assert Warn(0, "w")
    assert not Err("e")


def test_equality_and_hash() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Warn(1, "w")
    assert Err("e") != Ok("e")
    assert len({Ok(1), Ok(1), Warn(1, "w")}) == 2


def test_repr() -> None:
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Warn(1, "w")) == "Warn(1, 'w')"
    assert repr(Err("e")) == "Err('e')"


# ═════════════════════════════════════════════════════════════════════════════
# Mapping
# ═════════════════════════════════════════════════════════════════════════════


def test_map_val() -> None:
    assert Ok(2).map_val(lambda x: x + 1) == Ok(3)
    assert Warn(2, "w").map_val(lambda x: x + 1) == Warn(3, "w")
    assert Err("e").map_val(lambda x: x + 1) == Err("e")


def test_map_warn() -> None:
    assert Ok(2).map_warn(str.upper) == Ok(2)
    assert Warn(2, "w").map_warn(str.upper) == Warn(2, "W")
    assert Err("e").map_warn(str.upper) == Err("e")


def test_map_err() -> None:
    assert Ok(2).map_err(str.upper) == Ok(2)
    assert Warn(2, "w").map_err(str.upper) == Warn(2, "w")
    assert Err("e").map_err(str.upper) == Err("E")


def test_map_sees_the_whole_carrier() -> None:
    seen = []

    def f(carrier):
        seen.append(carrier)
        return carrier.map(lambda x: x * 10)

    assert Ok(1).map(f) == Ok(10)
    assert Warn(2, "w").map(f) == Warn(20, "w")
    assert seen == [Clean(1), Warned(2, "w")]


def test_map_can_attach_a_warning() -> None:
    assert Ok(1).map(lambda m: Warned(m.value, "late")) == Warn(1, "late")


def test_map_skips_err() -> None:
    def explode(_):
        raise AssertionError("must not be called")

    assert Err("e").map(explode) == Err("e")


# ═════════════════════════════════════════════════════════════════════════════
# Chaining
# ═════════════════════════════════════════════════════════════════════════════


def test_and_then_chains_on_success() -> None:
    assert Ok(2).and_then(lambda m: Ok(m.value * 2)) == Ok(4)
    assert Warn(2, "w").and_then(lambda m: WarnResult.from_maybe(m.map(str))) == Warn("2", "w")


def test_and_then_short_circuits() -> None:
    calls = []

    def step(m):
        calls.append(m)
        return Ok(m.value)

    assert Err("boom").and_then(step) == Err("boom")
    assert calls == []


def test_or_else_only_on_err() -> None:
    assert Err("e").or_else(lambda e: Ok(len(e))) == Ok(1)
    assert Err("e").or_else(lambda e: Err(e * 2)) == Err("ee")
    assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)
    assert Warn(1, "w").or_else(lambda e: Ok(0)) == Warn(1, "w")


# ═════════════════════════════════════════════════════════════════════════════
# Flatten
# ═════════════════════════════════════════════════════════════════════════════


def test_flatten_precedence() -> None:
    nested = Warn(Warn(1, "inner"), "outer")
    assert nested.flatten_inner() == Warn(1, "inner")
    assert nested.flatten_outer() == Warn(1, "outer")


@pytest.mark.parametrize(
    ("nested", "expected"),
    [
        (Ok(Ok(1)), Ok(1)),
        (Ok(Warn(1, "inner")), Warn(1, "inner")),
        (Warn(Ok(1), "outer"), Warn(1, "outer")),
        (Ok(Err("e")), Err("e")),
        (Warn(Err("e"), "outer"), Err("e")),
        (Err("e"), Err("e")),
    ],
)
def test_flatten_agrees_when_only_one_level_warns(nested, expected) -> None:
    assert nested.flatten_inner() == expected
    assert nested.flatten_outer() == expected


def test_flatten_rejects_flat_result() -> None:
    with pytest.raises(TypeError):
        Ok(1).flatten_inner()


# ═════════════════════════════════════════════════════════════════════════════
# Transpose
# ═════════════════════════════════════════════════════════════════════════════


def test_transpose_lossy_drops_warning_of_absent_value() -> None:
    transposed = Warn(None, "w").transpose_lossy()
    assert transposed == Nothing()
    assert isinstance(transposed, Nothing)


def test_transpose_lossy_absent() -> None:
    assert Ok(None).transpose_lossy() == Nothing()
    assert Ok(Nothing()).transpose_lossy() == Nothing()
    assert Warn(Nothing(), "w").transpose_lossy() == Nothing()


def test_transpose_lossy_present() -> None:
    assert Ok(1).transpose_lossy() == Some(Ok(1))
    assert Ok(Some(1)).transpose_lossy() == Some(Ok(1))
    assert Warn(Some(1), "w").transpose_lossy() == Some(Warn(1, "w"))
    assert Err("e").transpose_lossy() == Some(Err("e"))


# ═════════════════════════════════════════════════════════════════════════════
# Conversions
# ═════════════════════════════════════════════════════════════════════════════


def test_from_result_never_warns() -> None:
    assert WarnResult.from_result(BinaryOk(1)) == Ok(1)
    assert WarnResult.from_result(Error("e")) == Err("e")


def test_from_result_rejects_nothing() -> None:
    with pytest.raises(TypeError):
        WarnResult.from_result(Nothing())


def test_from_maybe() -> None:
    assert WarnResult.from_maybe(Clean(1)) == Ok(1)
    assert WarnResult.from_maybe(Warned(1, "w")) == Warn(1, "w")


@pytest.mark.parametrize("binary", [BinaryOk(7), Error("bad")])
def test_round_trip_through_tri_state(binary) -> None:
    assert WarnResult.from_result(binary).discard_warnings() == binary


def test_discard_warnings_narrows_explicitly() -> None:
    assert Warn(1, "w").discard_warnings() == BinaryOk(1)


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_returns_carrier() -> None:
    assert Ok(1).unwrap() == Clean(1)
    assert Warn(1, "w").unwrap() == Warned(1, "w")


def test_unwrap_on_err_raises_unwrap_error() -> None:
    with pytest.raises(UnwrapError):
        Err("boom").unwrap()
    with pytest.raises(UnwrapError):
        Err("boom").expect("needed a value")


def test_unwrap_err() -> None:
    assert Err("e").unwrap_err() == "e"
    with pytest.raises(WrongVariantError):
        Warn(1, "w").unwrap_err()


# ═════════════════════════════════════════════════════════════════════════════
# Residuals
# ═════════════════════════════════════════════════════════════════════════════


def test_from_residual_lifts_binary_failure() -> None:
    assert WarnResult.from_residual(Err("e")) == Err("e")
    assert WarnResult.from_residual(Error("e")) == Err("e")


def test_from_residual_rejects_other_residuals() -> None:
    with pytest.raises(ResidualMismatchError):
        WarnResult.from_residual(Nothing())
    with pytest.raises(ResidualMismatchError):
        WarnResult.from_residual("not a residual")
