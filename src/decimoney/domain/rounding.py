"""Integer rounding primitives.

All rounding in decimoney reduces to dividing one Python int by another and
choosing the integer neighbour of the exact quotient. No floating point is
involved at any step.
"""

from decimoney.domain.types import RoundingMode


def round_quotient(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """Round ``numerator / denominator`` to an integer.

    Args:
        numerator: Signed dividend
        denominator: Divisor, must be non-zero (sign is folded into the result)
        mode: Rounding rule for inexact quotients

    Returns:
        The rounded integer quotient

    Raises:
        ZeroDivisionError: If denominator is zero

    Examples:
        >>> round_quotient(10009, 10, RoundingMode.HALF_UP)
        1001
        >>> round_quotient(-5, 10, RoundingMode.HALF_UP)
        -1
        >>> round_quotient(25, 10, RoundingMode.HALF_EVEN)
        2
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))

    if remainder and _should_increment(quotient, remainder, abs(denominator), negative, mode):
        quotient += 1

    return -quotient if negative else quotient


def _should_increment(
    quotient: int, remainder: int, denominator: int, negative: bool, mode: RoundingMode
) -> bool:
    """Decide whether a truncated magnitude moves one step away from zero."""
    twice = remainder * 2

    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative
    if twice != denominator:
        return twice > denominator

    # Exactly halfway
    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    return quotient % 2 == 1  # HALF_EVEN
