"""Tests for the Error record and the unwrap exceptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fpkit import Error, Result, UnwrapError


class CodedError(Error):
    code: str = "E000"


def _raised(exc: Exception) -> Exception:
    try:
        raise exc
    except Exception as caught:
        return caught


def test_error_from_text() -> None:
    error = Error("disk full")

    assert error.message == "disk full"
    assert str(error) == "disk full"
    assert Error.from_message("disk full") == error
    assert Error(message="disk full") == error


def test_error_allows_empty_message() -> None:
    assert Error("").message == ""


def test_error_is_immutable() -> None:
    error = Error("x")
    with pytest.raises(ValidationError):
        error.message = "y"  # type: ignore[misc]


def test_error_value_identity() -> None:
    assert Error("x") == Error("x")
    assert Error("x") != Error("y")
    assert len({Error("x"), Error("x"), Error("y")}) == 2


def test_error_from_unraised_exception() -> None:
    assert Error.from_exception(ValueError("boom")).message == "ValueError: boom"


def test_error_from_raised_exception_includes_traceback() -> None:
    message = Error.from_exception(_raised(ValueError("boom"))).message

    assert message.startswith("Traceback (most recent call last):")
    assert message.endswith("ValueError: boom")
    assert "_raised" in message


def test_error_from_exception_without_traceback() -> None:
    error = Error.from_exception(_raised(ValueError("boom")), include_traceback=False)
    assert error.message == "ValueError: boom"


def test_traceback_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FPKIT_INCLUDE_TRACEBACK", "false")
    assert Error.from_exception(_raised(KeyError("k"))).message == "KeyError: 'k'"


def test_error_subclass_flows_through_results() -> None:
    coded = CodedError("not allowed", code="E403")
    result = Result.of_error(coded).then(lambda v: v)

    assert result.errors == (coded,)
    assert isinstance(result.errors[0], CodedError)
    assert result.errors[0].code == "E403"
    assert result.fail_message == "not allowed"
    assert result.to_dict()["errors"] == [{"message": "not allowed", "code": "E403"}]


def test_unwrap_error_from_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FPKIT_FAIL_MESSAGE_SEPARATOR", "; ")
    exc = UnwrapError.from_errors([Error("a"), Error("b")])

    assert exc.message == "a; b"
    assert str(exc) == "a; b"
    assert exc.errors == (Error("a"), Error("b"))
