"""Domain models for the decimal engine.

Configuration is validated with Pydantic and frozen, so a calculator that
holds one can be shared without its rounding behavior changing underneath.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from decimoney.domain.types import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    MAX_PRECISION,
    Precision,
    RoundingMode,
)


class CalculatorConfig(BaseModel):
    """Precision and rounding rule used by a :class:`MoneyCalculator`.

    Precision is the number of fractional digits kept after every operation.
    It is capped at ``MAX_PRECISION`` so rendered results stay within the
    interpreter's int/str conversion limit.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    precision: Precision = Field(
        default=DEFAULT_PRECISION,
        ge=0,
        le=MAX_PRECISION,
        description="Fractional digits retained in every result",
    )
    rounding: RoundingMode = Field(
        default=DEFAULT_ROUNDING,
        description="Rounding rule applied when a result is normalized",
    )

    @field_validator("rounding", mode="before")
    @classmethod
    def validate_rounding(cls, v: object) -> object:
        """Accept rounding mode names as well as enum members."""
        if isinstance(v, str) and not isinstance(v, RoundingMode):
            return RoundingMode.from_name(v)
        return v

