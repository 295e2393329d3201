"""Specific exception classes."""

from __future__ import annotations

from typing import Any

from decimoney.exceptions.base import MoneyError
from decimoney.exceptions.codes import ErrorCode


class InvalidAmountError(MoneyError, ValueError):
    """Raised when an operand is not a well-formed base-10 amount."""

    def __init__(
        self,
        message: str = "Invalid monetary value provided.",
        field: str | None = None,
        value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", None) or {}
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = repr(value)

        super().__init__(message, error_code=ErrorCode.INVALID_AMOUNT, context=context, **kwargs)


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when a divisor rounds to zero at the active precision."""

    def __init__(
        self,
        message: str = "Division by zero is not allowed.",
        operation: str | None = None,
        divisor: str | None = None,
        precision: int | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", None) or {}
        if operation:
            context["operation"] = operation
        if divisor is not None:
            context["divisor"] = divisor
        if precision is not None:
            context["precision"] = precision

        super().__init__(
            message, error_code=ErrorCode.DIVISION_BY_ZERO, context=context, **kwargs
        )


class ConfigurationError(MoneyError, ValueError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", None) or {}
        if parameter:
            context["parameter"] = parameter
        if value is not None:
            context["value"] = value

        super().__init__(message, error_code=ErrorCode.INVALID_CONFIG, context=context, **kwargs)
