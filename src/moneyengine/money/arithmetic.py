"""Exact scaled-integer arithmetic.

Money values are ``unscaled_value * 10**-scale`` with Python ints on both
sides, so every operation here is exact. Rounding happens only in
round_quotient(), which divides two ints and applies a RoundingMode.

decimal.Decimal is used at the boundary (input conversion and the
``amount`` accessor) but never for the arithmetic itself: Decimal contexts
have a finite precision and would round silently on large values.

Python 3.13+.
"""

import math
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from moneyengine.constants import MAX_AMOUNT_EXPONENT
from moneyengine.diagnostics import ErrorTemplate, MoneyArgumentError, RoundingNecessaryError

from .rounding import RoundingMode

__all__ = [
    "align",
    "compare_scaled",
    "digits_to_int",
    "rescale",
    "round_quotient",
    "split_digits",
    "to_decimal",
    "to_plain_string",
    "to_unscaled",
]

Amount: TypeAlias = Decimal | int | str | float
"""Inputs accepted wherever a plain decimal amount is expected."""


def to_unscaled(amount: Amount) -> tuple[int, int]:
    """Convert a decimal amount to ``(unscaled_value, scale)``.

    Floats go through their shortest repr, so 0.1 becomes scale 1 rather
    than its 55-digit binary expansion. Positive exponents are expanded so
    the scale is never negative.

    Args:
        amount: Decimal, int, str or float

    Returns:
        Tuple of (unscaled_value, scale) with scale >= 0

    Raises:
        MoneyArgumentError: If amount is a bool, NaN, infinite, not a number,
            or has an exponent above MAX_AMOUNT_EXPONENT

    Example:
        >>> to_unscaled(Decimal("12.340"))
        (12340, 3)
        >>> to_unscaled(Decimal("1E+2"))
        (100, 0)
    """
    match amount:
        case bool():
            raise MoneyArgumentError(ErrorTemplate.amount_invalid(amount))
        case int():
            return amount, 0
        case Decimal():
            value = amount
        case float():
            if not math.isfinite(amount):
                raise MoneyArgumentError(ErrorTemplate.amount_invalid(amount))
            value = Decimal(repr(amount))
        case str():
            try:
                value = Decimal(amount.strip())
            except InvalidOperation as e:
                raise MoneyArgumentError(ErrorTemplate.amount_invalid(amount)) from e
        case _:
            raise MoneyArgumentError(ErrorTemplate.amount_invalid(amount))

    sign, digits, exponent = value.as_tuple()
    # NaN and infinities carry a string exponent
    if not isinstance(exponent, int):
        raise MoneyArgumentError(ErrorTemplate.amount_invalid(amount))
    if exponent > MAX_AMOUNT_EXPONENT:
        raise MoneyArgumentError(
            ErrorTemplate.amount_exponent_too_large(exponent, MAX_AMOUNT_EXPONENT)
        )

    unscaled = digits_to_int(digits)
    if sign:
        unscaled = -unscaled
    if exponent >= 0:
        return unscaled * 10**exponent, 0
    return unscaled, -exponent


def digits_to_int(digits: Sequence[int]) -> int:
    """Build a non-negative int from its decimal digits, most significant first.

    Goes through Decimal, whose conversions are not bound by the
    interpreter's int/str digit limit.

    Example:
        >>> digits_to_int((1, 2, 0))
        120
    """
    if not digits:
        return 0
    return int(Decimal((0, tuple(digits), 0)))


def _digit_string(unscaled: int) -> str:
    """Decimal digits of abs(unscaled), for any number of digits."""
    return str(Decimal(abs(unscaled)))


def to_decimal(unscaled: int, scale: int) -> Decimal:
    """Build the exact Decimal for ``unscaled * 10**-scale``.

    Uses the tuple constructor, which is not subject to context precision.
    """
    sign = 1 if unscaled < 0 else 0
    return Decimal((sign, Decimal(abs(unscaled)).as_tuple().digits, -scale))


def split_digits(unscaled: int, scale: int) -> tuple[bool, str, str]:
    """Split a scaled value into sign, integer digits and fraction digits.

    Example:
        >>> split_digits(-1205, 3)
        (True, '1', '205')
        >>> split_digits(7, 2)
        (False, '0', '07')
    """
    digits = _digit_string(unscaled).rjust(scale + 1, "0")
    if scale == 0:
        return unscaled < 0, digits, ""
    return unscaled < 0, digits[:-scale], digits[-scale:]


def to_plain_string(unscaled: int, scale: int) -> str:
    """Render without exponent notation, e.g. ``-12.30``."""
    negative, integer, fraction = split_digits(unscaled, scale)
    text = f"{integer}.{fraction}" if fraction else integer
    return f"-{text}" if negative else text


def round_quotient(
    numerator: int,
    denominator: int,
    rounding_mode: RoundingMode,
    scale: int = 0,
) -> int:
    """Divide two ints, rounding the quotient with rounding_mode.

    Args:
        numerator: Dividend
        denominator: Divisor (nonzero)
        rounding_mode: How to round an inexact quotient
        scale: Target scale, reported when rounding is not allowed

    Returns:
        Rounded integer quotient

    Raises:
        RoundingNecessaryError: If the quotient is inexact and
            rounding_mode is UNNECESSARY
    """
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    # divmod floors: numerator / denominator lies in (q, q + 1) when r > 0
    q, r = divmod(numerator, denominator)
    if r == 0:
        return q

    negative = q < 0
    match rounding_mode:
        case RoundingMode.FLOOR:
            return q
        case RoundingMode.CEILING:
            return q + 1
        case RoundingMode.DOWN:
            return q + 1 if negative else q
        case RoundingMode.UP:
            return q if negative else q + 1
        case RoundingMode.HALF_UP | RoundingMode.HALF_DOWN | RoundingMode.HALF_EVEN:
            twice = 2 * r
            if twice < denominator:
                return q
            if twice > denominator:
                return q + 1
            # Exactly halfway
            if rounding_mode is RoundingMode.HALF_EVEN:
                return q if q % 2 == 0 else q + 1
            away_from_zero = rounding_mode is RoundingMode.HALF_UP
            if negative:
                return q if away_from_zero else q + 1
            return q + 1 if away_from_zero else q
        case _:
            raise RoundingNecessaryError(ErrorTemplate.rounding_necessary(scale))


def rescale(unscaled: int, scale: int, new_scale: int, rounding_mode: RoundingMode) -> int:
    """Re-express ``unscaled * 10**-scale`` at new_scale.

    Raising the scale is always exact; lowering it rounds.
    """
    if new_scale >= scale:
        return unscaled * 10 ** (new_scale - scale)
    return round_quotient(unscaled, 10 ** (scale - new_scale), rounding_mode, new_scale)


def align(
    unscaled1: int, scale1: int, unscaled2: int, scale2: int
) -> tuple[int, int, int]:
    """Bring two scaled values to their common (larger) scale.

    Returns:
        Tuple of (unscaled1, unscaled2, scale)
    """
    scale = max(scale1, scale2)
    return (
        unscaled1 * 10 ** (scale - scale1),
        unscaled2 * 10 ** (scale - scale2),
        scale,
    )


def compare_scaled(unscaled1: int, scale1: int, unscaled2: int, scale2: int) -> int:
    """Numeric comparison of two scaled values: -1, 0 or 1."""
    left, right, _ = align(unscaled1, scale1, unscaled2, scale2)
    return (left > right) - (left < right)
