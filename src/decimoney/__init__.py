"""
decimoney - Exact decimal arithmetic for monetary values

Amounts are parsed once into exact scaled integers and every operation
rounds a single time to the configured number of fractional digits.
"""

__version__ = "0.1.0"

from decimoney.domain import Amount, CalculatorConfig, Precision, RoundingMode, is_valid_money
from decimoney.engine import MoneyCalculator
from decimoney.exceptions import (
    ConfigurationError,
    DivisionByZeroError,
    ErrorCode,
    InvalidAmountError,
    MoneyError,
)

__all__ = [
    "__version__",
    # Engine
    "MoneyCalculator",
    # Domain
    "Amount",
    "CalculatorConfig",
    "Precision",
    "RoundingMode",
    "is_valid_money",
    # Exceptions
    "ErrorCode",
    "MoneyError",
    "InvalidAmountError",
    "DivisionByZeroError",
    "ConfigurationError",
]
