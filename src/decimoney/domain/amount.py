"""Exact decimal amount value type.

An :class:`Amount` stores a base-10 number as a signed Python int scaled by
``10**scale``. Addition, subtraction and multiplication are exact; rounding
only happens through :meth:`Amount.quantize` and :meth:`Amount.divide`.

Usage:
    from decimoney.domain.amount import Amount

    total = Amount.parse("10.005") + Amount.parse("0.004")
    # Amount('10.009')
    total.quantize(2)
    # Amount('10.01')
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Any

from decimoney.domain.rounding import round_quotient
from decimoney.domain.types import DEFAULT_ROUNDING, MAX_DIGITS, RoundingMode
from decimoney.exceptions import InvalidAmountError

# Optional sign, then "12", "12.", "12.34" or ".34". ASCII digits only.
_AMOUNT_PATTERN = re.compile(r"([+-]?)(?:([0-9]+)(?:\.([0-9]*))?|\.([0-9]+))", re.ASCII)

_UNITS_LIMIT = 10**MAX_DIGITS
_TOO_LONG = f"Amount exceeds the maximum of {MAX_DIGITS} digits."


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Amount:
    """Immutable exact decimal number.

    Equality and ordering are numeric, so ``Amount.parse("2.50")`` equals
    ``Amount.parse("2.5")`` even though they print differently.
    """

    units: int
    scale: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.units, bool) or not isinstance(self.units, int):
            raise TypeError(f"units must be int, got {type(self.units).__name__}")
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise ValueError(f"scale must be a non-negative int, got {self.scale!r}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, value: Any, field: str = "value") -> Amount:
        """Parse a text, int, Decimal or Amount operand without rounding it.

        Args:
            value: Operand to parse
            field: Operand name reported in the error context

        Returns:
            Exact Amount

        Raises:
            InvalidAmountError: If value is not a well-formed base-10 amount
        """
        if isinstance(value, Amount):
            return value
        if isinstance(value, str):
            return cls._from_text(value, field)
        if isinstance(value, bool):
            raise InvalidAmountError(field=field, value=value)
        if isinstance(value, int):
            if abs(value) >= _UNITS_LIMIT:
                # repr of such an int may itself exceed the conversion limit
                raise InvalidAmountError(_TOO_LONG, field=field)
            return cls(value, 0)
        if isinstance(value, Decimal):
            return cls._from_decimal(value, field)

        # float, None and everything else
        raise InvalidAmountError(field=field, value=value)

    @classmethod
    def _from_text(cls, text: str, field: str) -> Amount:
        match = _AMOUNT_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidAmountError(field=field, value=text)

        sign, integer, fraction, bare_fraction = match.groups()
        if bare_fraction is not None:
            integer, fraction = "", bare_fraction
        fraction = fraction or ""
        if len(integer) + len(fraction) > MAX_DIGITS:
            raise InvalidAmountError(_TOO_LONG, field=field, value=text)

        units = int(integer + fraction)
        return cls(-units if sign == "-" else units, len(fraction))

    @classmethod
    def _from_decimal(cls, value: Decimal, field: str) -> Amount:
        if not value.is_finite():
            raise InvalidAmountError(field=field, value=value)

        sign, digits, exponent = value.as_tuple()
        # Digits written out in fixed-point form, checked before 10**exponent
        width = len(digits) + exponent if exponent >= 0 else max(len(digits), -exponent)
        if width > MAX_DIGITS:
            raise InvalidAmountError(_TOO_LONG, field=field, value=value)

        units = int("".join(map(str, digits)) or "0")
        if exponent >= 0:
            units *= 10**exponent
            scale = 0
        else:
            scale = -exponent
        return cls(-units if sign else units, scale)

    @classmethod
    def zero(cls, scale: int = 0) -> Amount:
        """Zero with ``scale`` fractional digits."""
        return cls(0, scale)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.units == 0

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        return (self.units > 0) - (self.units < 0)

    def to_decimal(self) -> Decimal:
        """Convert to an equal :class:`~decimal.Decimal` (exact, no context rounding)."""
        return Decimal(str(self))

    # ------------------------------------------------------------------
    # Scaling and rounding
    # ------------------------------------------------------------------

    def rescale(self, scale: int) -> Amount:
        """Widen to ``scale`` fractional digits. Never loses digits."""
        if scale < self.scale:
            raise ValueError(f"Cannot rescale {self} to fewer digits ({scale}); use quantize")
        return Amount(self.units * 10 ** (scale - self.scale), scale)

    def quantize(self, scale: int, rounding: RoundingMode = DEFAULT_ROUNDING) -> Amount:
        """Round to exactly ``scale`` fractional digits.

        Args:
            scale: Target number of fractional digits
            rounding: Rule applied when digits are dropped

        Returns:
            Amount with ``scale`` fractional digits
        """
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        if scale >= self.scale:
            return self.rescale(scale)
        units = round_quotient(self.units, 10 ** (self.scale - scale), rounding)
        return Amount(units, scale)

    # ------------------------------------------------------------------
    # Exact arithmetic
    # ------------------------------------------------------------------

    def _aligned(self, other: Amount) -> tuple[int, int, int]:
        scale = max(self.scale, other.scale)
        return self.rescale(scale).units, other.rescale(scale).units, scale

    def __add__(self, other: object) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        left, right, scale = self._aligned(other)
        return Amount(left + right, scale)

    def __sub__(self, other: object) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        left, right, scale = self._aligned(other)
        return Amount(left - right, scale)

    def __mul__(self, other: object) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(self.units * other.units, self.scale + other.scale)

    def __neg__(self) -> Amount:
        return Amount(-self.units, self.scale)

    def __pos__(self) -> Amount:
        return self

    def __abs__(self) -> Amount:
        return Amount(abs(self.units), self.scale)

    def divide(
        self, other: Amount, scale: int, rounding: RoundingMode = DEFAULT_ROUNDING
    ) -> Amount:
        """Divide by ``other`` and round the exact quotient once to ``scale`` digits.

        Raises:
            ZeroDivisionError: If other is exactly zero
        """
        if other.is_zero:
            raise ZeroDivisionError("division by zero")
        # (a / 10**sa) / (b / 10**sb) * 10**scale
        numerator = self.units * 10 ** (other.scale + scale)
        denominator = other.units * 10**self.scale
        return Amount(round_quotient(numerator, denominator, rounding), scale)

    def remainder(self, other: Amount) -> Amount:
        """Exact remainder of truncated division; takes the sign of ``self``.

        Raises:
            ZeroDivisionError: If other is exactly zero
        """
        if other.is_zero:
            raise ZeroDivisionError("modulus by zero")
        left, right, scale = self._aligned(other)
        magnitude = abs(left) % abs(right)
        return Amount(-magnitude if left < 0 else magnitude, scale)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: Amount) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other."""
        left, right, _ = self._aligned(other)
        return (left > right) - (left < right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        units, scale = self.units, self.scale
        while scale and units % 10 == 0:
            units //= 10
            scale -= 1
        return hash((units, scale))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        digits = str(abs(self.units)).rjust(self.scale + 1, "0")
        sign = "-" if self.units < 0 else ""
        if not self.scale:
            return f"{sign}{digits}"
        return f"{sign}{digits[: -self.scale]}.{digits[-self.scale :]}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"


def is_valid_money(value: Any) -> bool:
    """Return True if ``value`` parses as a base-10 amount.

    Negative values are valid; they represent debts, refunds or overpayments.
    Exponent notation, grouping separators, whitespace, floats and operands
    longer than ``MAX_DIGITS`` digits are not.
    """
    try:
        Amount.parse(value)
    except InvalidAmountError:
        return False
    return True
