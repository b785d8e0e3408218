"""Tests for smart_result.core.result module."""

import pytest

from smart_result.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_value(self) -> None:
        assert Ok("User not found: 1").value == "User not found: 1"

    def test_predicates(self) -> None:
        result = Ok(42)
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42
        assert Ok(42).unwrap_or(0) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok(42).unwrap_err()

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_is_noop(self) -> None:
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_repr(self) -> None:
        assert repr(Ok(42)) == "Ok(42)"

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(0)
        assert Ok(42) != Err(42)


class TestErr:
    def test_error(self) -> None:
        assert Err("bad template").error == "bad template"

    def test_predicates(self) -> None:
        result = Err("error")
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("something went wrong").unwrap()

    def test_unwrap_or(self) -> None:
        result: Result[int, str] = Err("error")
        assert result.unwrap_or(42) == 42

    def test_unwrap_err(self) -> None:
        assert Err("oops").unwrap_err() == "oops"

    def test_map_is_noop(self) -> None:
        result: Result[int, str] = Err("error")
        assert result.map(lambda x: x * 2) == Err("error")

    def test_map_err(self) -> None:
        assert Err("oops").map_err(lambda e: f"error: {e}") == Err("error: oops")

    def test_repr(self) -> None:
        assert repr(Err("oops")) == "Err('oops')"


class TestTypeGuards:
    def test_is_ok(self) -> None:
        assert is_ok(Ok(1)) is True
        assert is_ok(Err("x")) is False

    def test_is_err(self) -> None:
        assert is_err(Err("x")) is True
        assert is_err(Ok(1)) is False


class TestPatternMatching:
    def test_match(self) -> None:
        def describe(result: Result[int, str]) -> str:
            match result:
                case Ok(value):
                    return f"ok {value}"
                case Err(error):
                    return f"err {error}"

        assert describe(Ok(1)) == "ok 1"
        assert describe(Err("no")) == "err no"
