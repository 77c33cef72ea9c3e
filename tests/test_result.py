"""Tests for ibanlib.core.result — Ok / Err values."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ibanlib.core.result import Err, Ok, from_optional, unwrap

# ---------------------------------------------------------------------------
# Ok and Err hold values, are frozen, support pattern matching
# ---------------------------------------------------------------------------


class TestOkBasics:
    def test_ok_holds_value(self) -> None:
        assert Ok("GB").value == "GB"

    def test_ok_is_frozen(self) -> None:
        ok = Ok(42)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ok.value = 99  # type: ignore[misc]

    def test_ok_equality(self) -> None:
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(99)

    def test_pattern_match_ok(self) -> None:
        match Ok(42):
            case Ok(v):
                assert v == 42
            case _:
                pytest.fail("Should match Ok")


class TestErrBasics:
    def test_err_holds_error(self) -> None:
        assert Err("fail").error == "fail"

    def test_err_is_frozen(self) -> None:
        err = Err("fail")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.error = "other"  # type: ignore[misc]

    def test_ok_is_not_err(self) -> None:
        assert not isinstance(Ok(1), Err)
        assert Ok(1) != Err(1)

    def test_pattern_match_err(self) -> None:
        match Err("fail"):
            case Ok(_):
                pytest.fail("Should match Err")
            case Err(e):
                assert e == "fail"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_ok_map_applies_function(self) -> None:
        assert Ok(2).map(lambda x: x * 10) == Ok(20)

    def test_err_map_passthrough(self) -> None:
        assert Err("e").map(lambda x: x * 10) == Err("e")

    def test_ok_bind_returns_err(self) -> None:
        assert Ok(2).bind(lambda _: Err("no")) == Err("no")

    def test_err_bind_short_circuits(self) -> None:
        called = []
        Err("e").bind(lambda x: called.append(x))
        assert called == []

    def test_unwrap_or(self) -> None:
        assert Ok(1).unwrap_or(5) == 1
        assert Err("e").unwrap_or(5) == 5

    def test_map_err(self) -> None:
        assert Err("e").map_err(str.upper) == Err("E")
        assert Ok(1).map_err(str.upper) == Ok(1)


class TestUnwrap:
    def test_unwrap_ok(self) -> None:
        assert unwrap(Ok("x")) == "x"

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(RuntimeError, match="unwrap on Err"):
            unwrap(Err("boom"))

    def test_method_unwrap_err_raises(self) -> None:
        with pytest.raises(RuntimeError):
            Err("boom").unwrap()

    def test_unwrap_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            unwrap("plain")  # type: ignore[arg-type]


class TestFromOptional:
    def test_value_becomes_ok(self) -> None:
        assert from_optional("97", lambda: "unused") == Ok("97")

    def test_none_becomes_err(self) -> None:
        assert from_optional(None, lambda: "missing") == Err("missing")

    def test_factory_not_called_on_value(self) -> None:
        def explode() -> str:
            raise AssertionError("factory called")

        assert from_optional(0, explode) == Ok(0)


class TestMonadLaws:
    @given(st.integers())
    def test_map_identity_law(self, x: int) -> None:
        assert Ok(x).map(lambda v: v) == Ok(x)

    @given(st.integers())
    def test_bind_left_identity(self, x: int) -> None:
        def f(v: int) -> Ok[int]:
            return Ok(v + 1)

        assert Ok(x).bind(f) == f(x)
