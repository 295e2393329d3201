"""Test integer rounding primitives."""

from decimal import Decimal

import pytest

from decimoney.domain.rounding import round_quotient
from decimoney.domain.types import RoundingMode


class TestRoundQuotient:
    """Test round_quotient for every rounding mode."""

    @pytest.mark.parametrize(
        ("numerator", "mode", "expected"),
        [
            # Half away from zero
            (25, RoundingMode.HALF_UP, 3),
            (-25, RoundingMode.HALF_UP, -3),
            (15, RoundingMode.HALF_UP, 2),
            (24, RoundingMode.HALF_UP, 2),
            (26, RoundingMode.HALF_UP, 3),
            # Banker's
            (25, RoundingMode.HALF_EVEN, 2),
            (-25, RoundingMode.HALF_EVEN, -2),
            (15, RoundingMode.HALF_EVEN, 2),
            (-15, RoundingMode.HALF_EVEN, -2),
            # Half toward zero
            (25, RoundingMode.HALF_DOWN, 2),
            (-25, RoundingMode.HALF_DOWN, -2),
            (26, RoundingMode.HALF_DOWN, 3),
            # Directed
            (29, RoundingMode.DOWN, 2),
            (-29, RoundingMode.DOWN, -2),
            (21, RoundingMode.UP, 3),
            (-21, RoundingMode.UP, -3),
            (21, RoundingMode.CEILING, 3),
            (-21, RoundingMode.CEILING, -2),
            (21, RoundingMode.FLOOR, 2),
            (-21, RoundingMode.FLOOR, -3),
        ],
    )
    def test_modes(self, numerator: int, mode: RoundingMode, expected: int) -> None:
        """Test each mode on ties and non-ties."""
        assert round_quotient(numerator, 10, mode) == expected

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_exact_quotient_untouched(self, mode: RoundingMode) -> None:
        """Test exact quotients never move."""
        assert round_quotient(20, 10, mode) == 2
        assert round_quotient(-20, 10, mode) == -2
        assert round_quotient(0, 7, mode) == 0

    def test_negative_denominator(self) -> None:
        """Test the sign of the denominator folds into the result."""
        assert round_quotient(25, -10, RoundingMode.HALF_UP) == -3
        assert round_quotient(-25, -10, RoundingMode.HALF_UP) == 3

    def test_zero_denominator(self) -> None:
        """Test zero denominator raises."""
        with pytest.raises(ZeroDivisionError):
            round_quotient(1, 0, RoundingMode.HALF_UP)

    def test_huge_operands(self) -> None:
        """Test values far beyond 64-bit range stay exact."""
        numerator = 10**40 + 5
        assert round_quotient(numerator, 10, RoundingMode.HALF_UP) == 10**39 + 1

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_agrees_with_decimal_module(self, mode: RoundingMode) -> None:
        """Test every mode matches Decimal.quantize on tenths."""
        for tenths in range(-45, 46):
            expected = Decimal(tenths).scaleb(-1).quantize(Decimal("1"), rounding=mode.value)
            assert round_quotient(tenths, 10, mode) == int(expected), tenths


class TestRoundingMode:
    """Test RoundingMode name resolution."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("half_even", RoundingMode.HALF_EVEN),
            ("ROUND_HALF_EVEN", RoundingMode.HALF_EVEN),
            (" Half_Up ", RoundingMode.HALF_UP),
            ("down", RoundingMode.DOWN),
            (RoundingMode.FLOOR, RoundingMode.FLOOR),
        ],
    )
    def test_from_name(self, name: str, expected: RoundingMode) -> None:
        """Test lenient name lookup."""
        assert RoundingMode.from_name(name) is expected

    def test_from_name_unknown(self) -> None:
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown rounding mode"):
            RoundingMode.from_name("sideways")

    def test_values_are_decimal_constants(self) -> None:
        """Test values can be handed to the decimal module."""
        assert RoundingMode.HALF_UP.value == "ROUND_HALF_UP"
        rounding = RoundingMode.HALF_EVEN.value
        quantized = Decimal("0.125").quantize(Decimal("0.01"), rounding=rounding)
        assert quantized == Decimal("0.12")
