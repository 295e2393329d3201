"""Domain types and type aliases."""

from __future__ import annotations

import decimal
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, NewType, Union

if TYPE_CHECKING:
    from decimoney.domain.amount import Amount

Precision = NewType("Precision", int)

DEFAULT_PRECISION = Precision(2)

# Largest digit count accepted in an operand (integer plus fractional digits)
# and largest precision. Results of any single operation stay well below the
# interpreter's int/str conversion limit of 4300 digits.
MAX_DIGITS = 1000
MAX_PRECISION = Precision(1000)

# Anything the engine accepts as an operand before parsing
AmountLike = Union[str, int, Decimal, "Amount"]


class RoundingMode(str, Enum):
    """Rounding rules applied when a result is normalized to a precision.

    Values match the constant names of the :mod:`decimal` module so a mode
    can be handed to ``Decimal.quantize`` unchanged.
    """

    HALF_UP = decimal.ROUND_HALF_UP  # half away from zero
    HALF_EVEN = decimal.ROUND_HALF_EVEN  # banker's rounding
    HALF_DOWN = decimal.ROUND_HALF_DOWN  # half toward zero
    DOWN = decimal.ROUND_DOWN  # truncate toward zero
    UP = decimal.ROUND_UP  # away from zero
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR

    @classmethod
    def from_name(cls, name: str | RoundingMode) -> RoundingMode:
        """Resolve ``"half_up"``, ``"HALF_UP"`` or ``"ROUND_HALF_UP"`` to a mode."""
        if isinstance(name, RoundingMode):
            return name
        key = name.strip().upper()
        if key.startswith("ROUND_"):
            key = key[len("ROUND_") :]
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown rounding mode: {name}") from None


DEFAULT_ROUNDING = RoundingMode.HALF_UP
