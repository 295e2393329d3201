"""Error codes shared by all decimoney exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for better error tracking."""

    # Operand errors
    INVALID_AMOUNT = "INVALID_AMOUNT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
