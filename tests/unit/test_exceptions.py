"""Test the exception hierarchy and error handler."""

import logging

import pytest

from decimoney.exceptions import (
    ConfigurationError,
    DivisionByZeroError,
    ErrorCode,
    ErrorHandler,
    InvalidAmountError,
    MoneyError,
)


class TestMoneyError:
    """Test the base exception."""

    def test_str_includes_code(self) -> None:
        """Test string form is "[CODE] message"."""
        error = InvalidAmountError(field="a", value="abc")

        assert str(error) == "[INVALID_AMOUNT] Invalid monetary value provided."

    def test_to_dict(self) -> None:
        """Test serialization for logs."""
        cause = ValueError("inner")
        error = DivisionByZeroError(operation="divide", divisor="0.001", precision=2, cause=cause)

        data = error.to_dict()

        assert data["error_type"] == "DivisionByZeroError"
        assert data["error_code"] == "DIVISION_BY_ZERO"
        assert data["message"] == "Division by zero is not allowed."
        assert data["context"] == {"operation": "divide", "divisor": "0.001", "precision": 2}
        assert data["cause"] == "inner"
        assert "timestamp" in data

    def test_default_code(self) -> None:
        """Test the base class defaults to UNKNOWN_ERROR."""
        assert MoneyError("boom").error_code == ErrorCode.UNKNOWN_ERROR

    def test_context_kwarg_merges(self) -> None:
        """Test an explicit context is kept alongside named fields."""
        error = ConfigurationError(
            "bad", parameter="precision", value=-1, context={"source": "cli"}
        )

        assert error.context == {"source": "cli", "parameter": "precision", "value": -1}

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (InvalidAmountError(), ValueError),
            (DivisionByZeroError(), ZeroDivisionError),
            (ConfigurationError("bad"), ValueError),
        ],
    )
    def test_builtin_bases(self, error: MoneyError, builtin: type) -> None:
        """Test each error is also the matching builtin exception."""
        assert isinstance(error, MoneyError)
        assert isinstance(error, builtin)


class TestErrorHandler:
    """Test ErrorHandler."""

    def test_handle_money_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test coded errors are logged with merged context."""
        logger = logging.getLogger("decimoney.test")
        error = InvalidAmountError(field="b", value="x")

        with caplog.at_level(logging.ERROR, logger="decimoney.test"):
            data = ErrorHandler.handle_error(error, logger, context={"operation": "add"})

        assert data["error_code"] == "INVALID_AMOUNT"
        assert data["context"] == {"field": "b", "value": "'x'", "operation": "add"}
        assert "Error handled" in caplog.text

    def test_handle_plain_error(self) -> None:
        """Test non-coded errors are summarized."""
        data = ErrorHandler.handle_error(KeyError("k"), logging.getLogger("decimoney.test"))

        assert data["error_type"] == "KeyError"
        assert data["context"] == {}

    def test_reraise(self) -> None:
        """Test reraise propagates the original exception."""
        error = DivisionByZeroError()

        with pytest.raises(DivisionByZeroError) as exc_info:
            ErrorHandler.handle_error(error, logging.getLogger("decimoney.test"), reraise=True)

        assert exc_info.value is error
