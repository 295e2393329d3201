"""Custom exception hierarchy and centralized error management.

Every failure raised by decimoney carries an :class:`ErrorCode` and a
context dictionary so callers can reject bad input without parsing messages.
"""

from decimoney.exceptions.base import MoneyError
from decimoney.exceptions.codes import ErrorCode
from decimoney.exceptions.exceptions import (
    ConfigurationError,
    DivisionByZeroError,
    InvalidAmountError,
)
from decimoney.exceptions.handler import ErrorHandler

__all__ = [
    "ErrorCode",
    "MoneyError",
    "InvalidAmountError",
    "DivisionByZeroError",
    "ConfigurationError",
    "ErrorHandler",
]
