"""BigMoney: an exact monetary amount with an arbitrary scale.

A BigMoney is ``(currency, unscaled_value, scale)`` and represents
``unscaled_value * 10**-scale`` in that currency. The scale is independent
of the currency's decimal places, so USD 1.234 is a valid BigMoney.

All operations return new values. Operations combining two amounts require
the same currency and raise CurrencyMismatchError otherwise. Operations that
could lose digits take a RoundingMode; RoundingMode.UNNECESSARY raises
RoundingNecessaryError instead of discarding nonzero digits.

Equality is structural: USD 1.0 and USD 1.00 are different values with
equal amounts. Use is_equal() or compare_to() for numeric comparison.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from moneyengine.currency import CurrencyUnit
from moneyengine.diagnostics import (
    CurrencyMismatchError,
    ErrorTemplate,
    MoneyArgumentError,
)

from .arithmetic import (
    Amount,
    align,
    compare_scaled,
    rescale,
    round_quotient,
    to_decimal,
    to_plain_string,
    to_unscaled,
)
from .provider import BigMoneyProvider
from .rounding import RoundingMode

if TYPE_CHECKING:
    from .money import Money

__all__ = ["BigMoney"]

# "USD 12.34": three letter code, at least one space, amount
_MONEY_STRING_MIN_LENGTH = 5


def _currency_of(currency: CurrencyUnit | str) -> CurrencyUnit:
    if isinstance(currency, CurrencyUnit):
        return currency
    if isinstance(currency, str):
        return CurrencyUnit.of(currency)
    raise MoneyArgumentError(
        ErrorTemplate.invalid_argument("currency", "must be a CurrencyUnit or currency code")
    )


@dataclass(frozen=True, slots=True)
class BigMoney:
    """Monetary amount with arbitrary scale.

    Immutable, thread-safe, hashable.

    Attributes:
        currency: Currency of the amount
        unscaled_value: Amount as an integer number of 10**-scale units
        scale: Number of fractional digits (>= 0)

    Example:
        >>> BigMoney.of("USD", "10.00").plus(BigMoney.of("USD", "5.005"))
        BigMoney(currency=CurrencyUnit(code='USD', ...), unscaled_value=15005, scale=3)
    """

    currency: CurrencyUnit
    unscaled_value: int
    scale: int

    def __post_init__(self) -> None:
        """Validate BigMoney invariants.

        Raises:
            MoneyArgumentError: If a field is missing, the wrong type, or
                the scale is negative
        """
        if not isinstance(self.currency, CurrencyUnit):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("currency", "must be a CurrencyUnit")
            )
        if isinstance(self.unscaled_value, bool) or not isinstance(self.unscaled_value, int):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("unscaled_value", "must be an int")
            )
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise MoneyArgumentError(ErrorTemplate.invalid_argument("scale", "must be an int"))
        if self.scale < 0:
            raise MoneyArgumentError(ErrorTemplate.scale_negative(self.scale))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, currency: CurrencyUnit | str, amount: Amount) -> BigMoney:
        """Create from a decimal amount; the scale is the amount's scale.

        Example:
            >>> BigMoney.of("USD", "12.340").scale
            3
        """
        unscaled, scale = to_unscaled(amount)
        return cls(_currency_of(currency), unscaled, scale)

    @classmethod
    def of_scale(
        cls,
        currency: CurrencyUnit | str,
        unscaled_value: Amount,
        scale: int,
        rounding_mode: RoundingMode = RoundingMode.UNNECESSARY,
    ) -> BigMoney:
        """Create from an unscaled value and scale.

        With an int unscaled_value this is the raw constructor. Any other
        amount is re-expressed at ``scale`` using rounding_mode.

        Example:
            >>> str(BigMoney.of_scale("USD", 1234, 2))
            'USD 12.34'
        """
        unit = _currency_of(currency)
        if isinstance(unscaled_value, int) and not isinstance(unscaled_value, bool):
            return cls(unit, unscaled_value, scale)
        if scale < 0:
            raise MoneyArgumentError(ErrorTemplate.scale_negative(scale))
        unscaled, amount_scale = to_unscaled(unscaled_value)
        return cls(unit, rescale(unscaled, amount_scale, scale, rounding_mode), scale)

    @classmethod
    def of_major(cls, currency: CurrencyUnit | str, amount_major: int) -> BigMoney:
        """Whole units of currency at scale 0 (e.g. 25 -> USD 25)."""
        return cls(_currency_of(currency), amount_major, 0)

    @classmethod
    def of_minor(cls, currency: CurrencyUnit | str, amount_minor: int) -> BigMoney:
        """Minor units at the currency scale (e.g. 2595 -> USD 25.95)."""
        unit = _currency_of(currency)
        return cls(unit, amount_minor, unit.decimal_places)

    @classmethod
    def zero(cls, currency: CurrencyUnit | str, scale: int = 0) -> BigMoney:
        return cls(_currency_of(currency), 0, scale)

    @classmethod
    def total(cls, *monies: BigMoneyProvider) -> BigMoney:
        """Sum one or more amounts in the same currency.

        Raises:
            MoneyArgumentError: If no amounts are given
            CurrencyMismatchError: If the currencies differ
        """
        if not monies:
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("monies", "at least one amount is required")
            )
        result = cls.from_provider(monies[0])
        for money in monies[1:]:
            result = result.plus(money)
        return result

    @classmethod
    def parse(cls, money_str: str) -> BigMoney:
        """Parse the ``str()`` form: currency code, spaces, plain amount.

        Example:
            >>> BigMoney.parse("USD 12.34").unscaled_value
            1234

        Raises:
            MoneyArgumentError: If the text is not of that form
            IllegalCurrencyError: If the currency code is unknown
        """
        if not isinstance(money_str, str) or len(money_str) < _MONEY_STRING_MIN_LENGTH:
            raise MoneyArgumentError(ErrorTemplate.money_string_invalid(str(money_str)))
        code, sep, rest = money_str[:3], money_str[3], money_str[4:].lstrip(" ")
        if sep != " " or not rest:
            raise MoneyArgumentError(ErrorTemplate.money_string_invalid(money_str))
        currency = CurrencyUnit.of(code)
        try:
            return cls.of(currency, rest)
        except MoneyArgumentError as e:
            raise MoneyArgumentError(ErrorTemplate.money_string_invalid(money_str)) from e

    @classmethod
    def from_provider(cls, provider: BigMoneyProvider) -> BigMoney:
        """Obtain a BigMoney from any BigMoneyProvider.

        Raises:
            MoneyArgumentError: If the object is not a provider or returns
                something other than a BigMoney
        """
        if isinstance(provider, BigMoney):
            return provider
        if not isinstance(provider, BigMoneyProvider):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("provider", "must provide to_big_money()")
            )
        money = provider.to_big_money()
        if not isinstance(money, BigMoney):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("provider", "to_big_money() did not return BigMoney")
            )
        return money

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """The exact amount as a Decimal, carrying this value's scale."""
        return to_decimal(self.unscaled_value, self.scale)

    @property
    def amount_major(self) -> int:
        """Whole units, truncated toward zero (USD -12.34 -> -12)."""
        return rescale(self.unscaled_value, self.scale, 0, RoundingMode.DOWN)

    @property
    def amount_minor(self) -> int:
        """Total minor units at the currency scale, truncated toward zero.

        USD 12.345 -> 1234.
        """
        return rescale(
            self.unscaled_value, self.scale, self.currency.decimal_places, RoundingMode.DOWN
        )

    @property
    def minor_part(self) -> int:
        """Minor units beyond the whole units, signed (USD -12.34 -> -34)."""
        minor = self.amount_minor
        part = abs(minor) % 10**self.currency.decimal_places
        return -part if minor < 0 else part

    def is_currency_scale(self) -> bool:
        return self.scale == self.currency.decimal_places

    def is_same_currency(self, other: BigMoneyProvider) -> bool:
        return self.currency == BigMoney.from_provider(other).currency

    def is_zero(self) -> bool:
        return self.unscaled_value == 0

    def is_positive(self) -> bool:
        return self.unscaled_value > 0

    def is_positive_or_zero(self) -> bool:
        return self.unscaled_value >= 0

    def is_negative(self) -> bool:
        return self.unscaled_value < 0

    def is_negative_or_zero(self) -> bool:
        return self.unscaled_value <= 0

    # Aliases matching the spelling used for predicates elsewhere
    is_zero_or_positive = is_positive_or_zero
    is_zero_or_negative = is_negative_or_zero

    # ------------------------------------------------------------------
    # Re-expression
    # ------------------------------------------------------------------

    def with_scale(
        self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigMoney:
        """Re-express the amount at scale, rounding if digits are dropped.

        Example:
            >>> str(BigMoney.of("USD", "1.235").with_scale(2, RoundingMode.HALF_EVEN))
            'USD 1.24'
        """
        if scale < 0:
            raise MoneyArgumentError(ErrorTemplate.scale_negative(scale))
        if scale == self.scale:
            return self
        unscaled = rescale(self.unscaled_value, self.scale, scale, rounding_mode)
        return BigMoney(self.currency, unscaled, scale)

    def with_currency_scale(
        self, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigMoney:
        return self.with_scale(self.currency.decimal_places, rounding_mode)

    def with_amount(self, amount: Amount) -> BigMoney:
        """Same currency, new amount (with the new amount's scale)."""
        return BigMoney.of(self.currency, amount)

    def with_currency_unit(self, currency: CurrencyUnit | str) -> BigMoney:
        """Same amount and scale in another currency. No conversion is done."""
        unit = _currency_of(currency)
        if unit == self.currency:
            return self
        return BigMoney(unit, self.unscaled_value, self.scale)

    def strip_trailing_zeros(self) -> BigMoney:
        """Drop trailing fraction zeros (USD 12.3400 -> USD 12.34, 0.00 -> 0)."""
        unscaled, scale = self.unscaled_value, self.scale
        if unscaled == 0:
            scale = 0
        while scale > 0 and unscaled % 10 == 0:
            unscaled //= 10
            scale -= 1
        if scale == self.scale:
            return self
        return BigMoney(self.currency, unscaled, scale)

    def rounded(self, scale: int, rounding_mode: RoundingMode) -> BigMoney:
        """Round to scale decimal places while keeping the current scale.

        A negative scale rounds to tens, hundreds and so on.

        Example:
            >>> str(BigMoney.of("USD", "1.2345").rounded(2, RoundingMode.HALF_UP))
            'USD 1.2300'
        """
        if scale >= self.scale:
            return self
        factor = 10 ** (self.scale - scale)
        unscaled = round_quotient(self.unscaled_value, factor, rounding_mode, scale) * factor
        if unscaled == self.unscaled_value:
            return self
        return BigMoney(self.currency, unscaled, self.scale)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_currency(self, other: BigMoney) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                ErrorTemplate.currency_mismatch(self.currency.code, other.currency.code),
                first_currency=self.currency,
                second_currency=other.currency,
            )

    def _operand(self, other: BigMoneyProvider | Amount) -> tuple[int, int]:
        """Unscaled value and scale of a money or plain-amount operand."""
        if isinstance(other, BigMoneyProvider):
            money = BigMoney.from_provider(other)
            self._check_currency(money)
            return money.unscaled_value, money.scale
        return to_unscaled(other)

    def plus(self, other: BigMoneyProvider | Amount) -> BigMoney:
        """Add an amount in the same currency; scale becomes the larger scale.

        Raises:
            CurrencyMismatchError: If other is money in another currency
        """
        unscaled, scale = self._operand(other)
        if unscaled == 0 and scale <= self.scale:
            return self
        left, right, common = align(self.unscaled_value, self.scale, unscaled, scale)
        return BigMoney(self.currency, left + right, common)

    def minus(self, other: BigMoneyProvider | Amount) -> BigMoney:
        """Subtract an amount in the same currency; scale becomes the larger scale.

        Raises:
            CurrencyMismatchError: If other is money in another currency
        """
        unscaled, scale = self._operand(other)
        if unscaled == 0 and scale <= self.scale:
            return self
        left, right, common = align(self.unscaled_value, self.scale, unscaled, scale)
        return BigMoney(self.currency, left - right, common)

    def plus_major(self, amount: int) -> BigMoney:
        """Add whole units; the scale is unchanged."""
        if amount == 0:
            return self
        return BigMoney(self.currency, self.unscaled_value + amount * 10**self.scale, self.scale)

    def minus_major(self, amount: int) -> BigMoney:
        return self.plus_major(-amount)

    def plus_minor(self, amount: int) -> BigMoney:
        """Add minor units; the scale becomes at least the currency scale."""
        return self.plus(BigMoney(self.currency, amount, self.currency.decimal_places))

    def minus_minor(self, amount: int) -> BigMoney:
        return self.plus_minor(-amount)

    def multiplied_by(
        self, factor: Amount, rounding_mode: RoundingMode | None = None
    ) -> BigMoney:
        """Multiply by a decimal factor.

        Without a rounding mode the result is exact and its scale is this
        scale plus the factor's scale. With a rounding mode the result keeps
        this scale.

        Example:
            >>> str(BigMoney.of("USD", "2.50").multiplied_by("1.1"))
            'USD 2.750'
            >>> str(BigMoney.of("USD", "2.50").multiplied_by("1.1", RoundingMode.HALF_UP))
            'USD 2.75'
        """
        factor_unscaled, factor_scale = to_unscaled(factor)
        unscaled = self.unscaled_value * factor_unscaled
        scale = self.scale + factor_scale
        if rounding_mode is None:
            if factor_unscaled == 1 and factor_scale == 0:
                return self
            return BigMoney(self.currency, unscaled, scale)
        return BigMoney(
            self.currency, rescale(unscaled, scale, self.scale, rounding_mode), self.scale
        )

    def divided_by(
        self, divisor: Amount, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigMoney:
        """Divide by a decimal divisor, keeping this scale.

        Example:
            >>> str(BigMoney.of("USD", "1.00").divided_by(3, RoundingMode.HALF_UP))
            'USD 0.33'

        Raises:
            MoneyArgumentError: If divisor is zero
            RoundingNecessaryError: If the quotient is inexact at this scale
                and rounding_mode is UNNECESSARY
        """
        divisor_unscaled, divisor_scale = to_unscaled(divisor)
        if divisor_unscaled == 0:
            raise MoneyArgumentError(ErrorTemplate.division_by_zero())
        if divisor_unscaled == 1 and divisor_scale == 0:
            return self
        # (u / 10**s) / (d / 10**ds) at scale s is u * 10**ds / d
        unscaled = round_quotient(
            self.unscaled_value * 10**divisor_scale, divisor_unscaled, rounding_mode, self.scale
        )
        return BigMoney(self.currency, unscaled, self.scale)

    def negated(self) -> BigMoney:
        if self.unscaled_value == 0:
            return self
        return BigMoney(self.currency, -self.unscaled_value, self.scale)

    def abs(self) -> BigMoney:
        return self.negated() if self.is_negative() else self

    def converted_to(
        self,
        currency: CurrencyUnit | str,
        conversion_rate: Amount,
        rounding_mode: RoundingMode | None = None,
    ) -> BigMoney:
        """Convert to another currency by multiplying by a rate.

        Without a rounding mode the result is exact (scale grows by the
        rate's scale). With one, the result keeps this scale.

        Example:
            >>> str(BigMoney.of("USD", "10.00").converted_to("EUR", "0.92"))
            'EUR 9.2000'

        Raises:
            MoneyArgumentError: If currency is this currency or the rate is
                not positive
        """
        unit = _currency_of(currency)
        if unit == self.currency:
            raise MoneyArgumentError(ErrorTemplate.conversion_same_currency(unit.code))
        rate_unscaled, rate_scale = to_unscaled(conversion_rate)
        if rate_unscaled <= 0:
            raise MoneyArgumentError(
                ErrorTemplate.conversion_rate_invalid(to_plain_string(rate_unscaled, rate_scale))
            )
        product = self.multiplied_by(conversion_rate, rounding_mode)
        return BigMoney(unit, product.unscaled_value, product.scale)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: BigMoneyProvider) -> int:
        """Numeric comparison ignoring scale: -1, 0 or 1.

        Raises:
            CurrencyMismatchError: If the currencies differ
        """
        money = BigMoney.from_provider(other)
        self._check_currency(money)
        return compare_scaled(self.unscaled_value, self.scale, money.unscaled_value, money.scale)

    def is_equal(self, other: BigMoneyProvider) -> bool:
        """Numerically equal, ignoring scale (USD 1.0 is_equal USD 1.00)."""
        return self.compare_to(other) == 0

    def is_greater_than(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) > 0

    def is_greater_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) >= 0

    def is_less_than(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) < 0

    def is_less_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) <= 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigMoney):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigMoney):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigMoney):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigMoney):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __neg__(self) -> BigMoney:
        return self.negated()

    def __abs__(self) -> BigMoney:
        return self.abs()

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_big_money(self) -> BigMoney:
        return self

    def to_money(self, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Money:
        """Convert to Money, rounding to the currency scale.

        Raises:
            RoundingNecessaryError: If digits would be lost and rounding_mode
                is UNNECESSARY
        """
        from .money import Money  # noqa: PLC0415 - circular

        return Money.from_provider(self, rounding_mode)

    def __str__(self) -> str:
        """Currency code and plain amount, e.g. ``USD 12.34``."""
        return f"{self.currency.code} {to_plain_string(self.unscaled_value, self.scale)}"

