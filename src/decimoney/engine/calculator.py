"""Fixed-precision decimal arithmetic engine.

:class:`MoneyCalculator` validates text (or int/Decimal/Amount) operands,
computes the exact result on scaled integers and rounds it once to the
configured precision. Results are fixed-point strings with exactly
``precision`` fractional digits.

Usage:
    from decimoney import MoneyCalculator

    calc = MoneyCalculator(precision=2)
    calc.add("10.005", "0.004")      # "10.01"
    calc.divide("1.00", "3.00")      # "0.33"
    calc.with_precision(4).divide("1", "3")  # "0.3333"
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from decimoney.domain.amount import Amount, is_valid_money
from decimoney.domain.models import CalculatorConfig
from decimoney.domain.types import AmountLike, RoundingMode
from decimoney.exceptions import ConfigurationError, DivisionByZeroError
from decimoney.utils.logging import get_logger

if TYPE_CHECKING:
    from decimoney.config import Settings

logger = get_logger(__name__)


class MoneyCalculator:
    """Decimal arithmetic for monetary values at a configurable precision.

    The instance holds nothing but an immutable :class:`CalculatorConfig`.
    Every operation reads it once, so a single call never mixes precisions.
    Prefer :meth:`with_precision` over :meth:`set_precision` for instances
    shared between threads.
    """

    def __init__(
        self,
        precision: int | None = None,
        rounding: RoundingMode | str | None = None,
        config: CalculatorConfig | None = None,
    ) -> None:
        if config is not None and (precision is not None or rounding is not None):
            raise ConfigurationError("Pass either config or precision/rounding, not both")
        self._config = config or self._build_config(precision=precision, rounding=rounding)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> MoneyCalculator:
        """Create a calculator from application settings.

        Raises:
            ConfigurationError: If default_precision exceeds max_precision
        """
        if settings is None:
            from decimoney.config import get_settings

            settings = get_settings()

        if settings.default_precision > settings.max_precision:
            raise ConfigurationError(
                f"default_precision {settings.default_precision} exceeds "
                f"max_precision {settings.max_precision}",
                parameter="default_precision",
                value=settings.default_precision,
            )
        return cls(precision=settings.default_precision, rounding=settings.rounding)

    @staticmethod
    def _build_config(**overrides: Any) -> CalculatorConfig:
        values = {key: value for key, value in overrides.items() if value is not None}
        try:
            return CalculatorConfig(**values)
        except ValidationError as e:
            error = e.errors()[0]
            parameter = str(error["loc"][0]) if error["loc"] else None
            raise ConfigurationError(
                f"Invalid calculator configuration: {error['msg']}",
                parameter=parameter,
                value=values.get(parameter) if parameter else None,
                cause=e,
            ) from e

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def precision(self) -> int:
        return self._config.precision

    @property
    def rounding(self) -> RoundingMode:
        return self._config.rounding

    def get_precision(self) -> int:
        """Get the current precision."""
        return self._config.precision

    def set_precision(self, precision: int) -> None:
        """Set the precision for subsequent operations.

        Values already returned are unaffected.

        Raises:
            ConfigurationError: If precision is not a non-negative int
        """
        config = self._build_config(precision=precision, rounding=self._config.rounding)
        logger.debug("Precision changed from %d to %d", self._config.precision, precision)
        self._config = config

    def with_precision(self, precision: int) -> MoneyCalculator:
        """Return a new calculator with ``precision``; this one is unchanged."""
        config = self._build_config(precision=precision, rounding=self.rounding)
        return MoneyCalculator(config=config)

    def with_rounding(self, rounding: RoundingMode | str) -> MoneyCalculator:
        """Return a new calculator with ``rounding``; this one is unchanged."""
        config = self._build_config(precision=self.precision, rounding=rounding)
        return MoneyCalculator(config=config)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def is_valid_money(value: Any) -> bool:
        """Validate if a value is a valid monetary amount.

        Negative values are allowed as they represent debts, losses, or overpayments.
        """
        return is_valid_money(value)

    @staticmethod
    def parse(value: AmountLike, field: str = "value") -> Amount:
        """Parse an operand exactly as written.

        Raises:
            InvalidAmountError: If value is not a valid monetary amount
        """
        return Amount.parse(value, field)

    def quantize(self, value: AmountLike) -> Amount:
        """Round an operand to the current precision and return it as an Amount."""
        config = self._config
        return Amount.parse(value).quantize(config.precision, config.rounding)

    @staticmethod
    def _operands(a: AmountLike, b: AmountLike) -> tuple[Amount, Amount]:
        return Amount.parse(a, "a"), Amount.parse(b, "b")

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, a: AmountLike, b: AmountLike) -> str:
        """Addition of two monetary values."""
        config = self._config
        left, right = self._operands(a, b)
        return str((left + right).quantize(config.precision, config.rounding))

    def subtract(self, a: AmountLike, b: AmountLike) -> str:
        """Subtraction of two monetary values."""
        config = self._config
        left, right = self._operands(a, b)
        return str((left - right).quantize(config.precision, config.rounding))

    def multiply(self, a: AmountLike, b: AmountLike) -> str:
        """Multiplication of two monetary values.

        The product of the unrounded operands is rounded once.
        """
        config = self._config
        left, right = self._operands(a, b)
        return str((left * right).quantize(config.precision, config.rounding))

    def divide(self, a: AmountLike, b: AmountLike) -> str:
        """Division of two monetary values.

        Raises:
            InvalidAmountError: If either operand is invalid
            DivisionByZeroError: If ``b`` rounds to zero at the current precision
        """
        config = self._config
        left, right = self._operands(a, b)
        self._check_divisor(right, config, "divide", "Division by zero is not allowed.")
        return str(left.divide(right, config.precision, config.rounding))

    def modulus(self, a: AmountLike, b: AmountLike) -> str:
        """Modulus of two monetary values.

        The remainder of truncated division takes the sign of ``a``.

        Raises:
            InvalidAmountError: If either operand is invalid
            DivisionByZeroError: If ``b`` rounds to zero at the current precision
        """
        config = self._config
        left, right = self._operands(a, b)
        self._check_divisor(right, config, "modulus", "Modulus by zero is not allowed.")
        return str(left.remainder(right).quantize(config.precision, config.rounding))

    @staticmethod
    def _check_divisor(
        divisor: Amount, config: CalculatorConfig, operation: str, message: str
    ) -> None:
        # A divisor that rounds to zero at the active precision counts as zero
        if divisor.quantize(config.precision, config.rounding).is_zero:
            raise DivisionByZeroError(
                message,
                operation=operation,
                divisor=str(divisor),
                precision=config.precision,
            )

    def compare(self, a: AmountLike, b: AmountLike) -> int:
        """Compare two monetary values after rounding both to the current precision.

        Returns:
            0 if equal, 1 if a > b, -1 if a < b
        """
        config = self._config
        left, right = self._operands(a, b)
        return left.quantize(config.precision, config.rounding).compare(
            right.quantize(config.precision, config.rounding)
        )

    def round(self, value: AmountLike) -> str:
        """Round a monetary value to the current precision."""
        return str(self.quantize(value))

    # ------------------------------------------------------------------
    # Helpers built on the operations above
    # ------------------------------------------------------------------

    def sum(self, values: Iterable[AmountLike]) -> str:
        """Exact sum of ``values`` rounded once; ``"0.00"``-style zero when empty."""
        config = self._config
        total = Amount.zero()
        for index, value in enumerate(values):
            total += Amount.parse(value, f"values[{index}]")
        return str(total.quantize(config.precision, config.rounding))

    def negate(self, value: AmountLike) -> str:
        """Negate a monetary value and round it."""
        config = self._config
        return str((-Amount.parse(value)).quantize(config.precision, config.rounding))

    def absolute(self, value: AmountLike) -> str:
        """Absolute value of a monetary value, rounded."""
        config = self._config
        return str(abs(Amount.parse(value)).quantize(config.precision, config.rounding))

    def is_zero(self, value: AmountLike) -> bool:
        """Whether ``value`` rounds to zero at the current precision."""
        return self.quantize(value).is_zero

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(precision={self.precision}, "
            f"rounding={self.rounding.name})"
        )
