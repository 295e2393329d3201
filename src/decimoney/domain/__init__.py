"""Domain models and value types."""

from .amount import Amount, is_valid_money
from .models import CalculatorConfig
from .rounding import round_quotient
from .types import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    MAX_DIGITS,
    MAX_PRECISION,
    AmountLike,
    Precision,
    RoundingMode,
)

__all__ = [
    # Values
    "Amount",
    "is_valid_money",
    # Models
    "CalculatorConfig",
    # Rounding
    "round_quotient",
    # Types
    "AmountLike",
    "Precision",
    "RoundingMode",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "MAX_DIGITS",
    "MAX_PRECISION",
]
