"""Money: a monetary amount fixed at its currency's scale.

Money wraps a BigMoney whose scale always equals the currency's decimal
places (2 for USD, 0 for JPY, 3 for BHD). Operations that would produce a
different scale round back to the currency scale with the caller's
rounding mode, which defaults to RoundingMode.UNNECESSARY so that lost
digits raise RoundingNecessaryError rather than disappear silently.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from moneyengine.currency import CurrencyUnit
from moneyengine.diagnostics import ErrorTemplate, MoneyArgumentError

from .arithmetic import Amount
from .big_money import BigMoney
from .provider import BigMoneyProvider
from .rounding import RoundingMode

__all__ = ["Money"]

_UNNECESSARY = RoundingMode.UNNECESSARY


@dataclass(frozen=True, slots=True)
class Money:
    """Monetary amount at the currency's default scale.

    Immutable, thread-safe, hashable. Because the scale is fixed by the
    currency, equality is numeric equality within a currency.

    Attributes:
        money: Underlying BigMoney (scale == currency.decimal_places)

    Example:
        >>> str(Money.of("USD", "12.3"))
        'USD 12.30'
        >>> Money.of("USD", "12.345")
        Traceback (most recent call last):
        RoundingNecessaryError: ...
    """

    money: BigMoney

    def __post_init__(self) -> None:
        """Validate that the wrapped value is at the currency scale.

        Raises:
            MoneyArgumentError: If money is not a BigMoney or has the wrong scale
        """
        if not isinstance(self.money, BigMoney):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("money", "must be a BigMoney")
            )
        if not self.money.is_currency_scale():
            raise MoneyArgumentError(
                ErrorTemplate.scale_mismatch(
                    self.money.currency.code,
                    self.money.scale,
                    self.money.currency.decimal_places,
                )
            )

    def _with(self, money: BigMoney, rounding_mode: RoundingMode = _UNNECESSARY) -> Money:
        money = money.with_currency_scale(rounding_mode)
        if money == self.money:
            return self
        return Money(money)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(
        cls,
        currency: CurrencyUnit | str,
        amount: Amount,
        rounding_mode: RoundingMode = _UNNECESSARY,
    ) -> Money:
        """Create from a decimal amount, rounding to the currency scale.

        Raises:
            RoundingNecessaryError: If the amount has more fraction digits
                than the currency allows and rounding_mode is UNNECESSARY
        """
        return cls(BigMoney.of(currency, amount).with_currency_scale(rounding_mode))

    @classmethod
    def of_major(cls, currency: CurrencyUnit | str, amount_major: int) -> Money:
        """Whole units (e.g. 25 -> USD 25.00)."""
        return cls(BigMoney.of_major(currency, amount_major).with_currency_scale())

    @classmethod
    def of_minor(cls, currency: CurrencyUnit | str, amount_minor: int) -> Money:
        """Minor units (e.g. 2595 -> USD 25.95)."""
        return cls(BigMoney.of_minor(currency, amount_minor))

    @classmethod
    def zero(cls, currency: CurrencyUnit | str) -> Money:
        unit = currency if isinstance(currency, CurrencyUnit) else CurrencyUnit.of(currency)
        return cls(BigMoney.zero(unit, unit.decimal_places))

    @classmethod
    def total(cls, *monies: BigMoneyProvider) -> Money:
        """Sum one or more amounts in the same currency.

        Raises:
            MoneyArgumentError: If no amounts are given
            CurrencyMismatchError: If the currencies differ
            RoundingNecessaryError: If a BigMoney operand has digits beyond
                the currency scale
        """
        return cls.from_provider(BigMoney.total(*monies))

    @classmethod
    def parse(cls, money_str: str) -> Money:
        """Parse ``"USD 12.34"``; the amount must fit the currency scale.

        Raises:
            MoneyArgumentError: If the text is malformed
            IllegalCurrencyError: If the currency code is unknown
            RoundingNecessaryError: If the amount has too many fraction digits
        """
        return cls.from_provider(BigMoney.parse(money_str))

    @classmethod
    def from_provider(
        cls,
        provider: BigMoneyProvider,
        rounding_mode: RoundingMode = _UNNECESSARY,
    ) -> Money:
        """Obtain Money from any BigMoneyProvider, rounding to the currency scale."""
        if isinstance(provider, Money):
            return provider
        return cls(BigMoney.from_provider(provider).with_currency_scale(rounding_mode))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def currency(self) -> CurrencyUnit:
        return self.money.currency

    @property
    def unscaled_value(self) -> int:
        return self.money.unscaled_value

    @property
    def scale(self) -> int:
        return self.money.scale

    @property
    def amount(self) -> Decimal:
        return self.money.amount

    @property
    def amount_major(self) -> int:
        return self.money.amount_major

    @property
    def amount_minor(self) -> int:
        return self.money.amount_minor

    @property
    def minor_part(self) -> int:
        return self.money.minor_part

    def is_same_currency(self, other: BigMoneyProvider) -> bool:
        return self.money.is_same_currency(other)

    def is_zero(self) -> bool:
        return self.money.is_zero()

    def is_positive(self) -> bool:
        return self.money.is_positive()

    def is_positive_or_zero(self) -> bool:
        return self.money.is_positive_or_zero()

    def is_negative(self) -> bool:
        return self.money.is_negative()

    def is_negative_or_zero(self) -> bool:
        return self.money.is_negative_or_zero()

    is_zero_or_positive = is_positive_or_zero
    is_zero_or_negative = is_negative_or_zero

    # ------------------------------------------------------------------
    # Re-expression
    # ------------------------------------------------------------------

    def with_amount(
        self, amount: Amount, rounding_mode: RoundingMode = _UNNECESSARY
    ) -> Money:
        return self._with(self.money.with_amount(amount), rounding_mode)

    def with_currency_unit(
        self, currency: CurrencyUnit | str, rounding_mode: RoundingMode = _UNNECESSARY
    ) -> Money:
        """Same amount in another currency, rounded to that currency's scale.

        Example:
            >>> str(Money.of("USD", "12.50").with_currency_unit("JPY", RoundingMode.HALF_EVEN))
            'JPY 12'
        """
        return self._with(self.money.with_currency_unit(currency), rounding_mode)

    def rounded(self, scale: int, rounding_mode: RoundingMode) -> Money:
        """Round to scale decimal places; the currency scale is kept.

        Example:
            >>> str(Money.of("USD", "12.34").rounded(1, RoundingMode.DOWN))
            'USD 12.30'
        """
        return self._with(self.money.rounded(scale, rounding_mode))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(
        self,
        other: BigMoneyProvider | Amount,
        rounding_mode: RoundingMode = _UNNECESSARY,
    ) -> Money:
        """Add an amount in the same currency.

        Raises:
            CurrencyMismatchError: If other is money in another currency
            RoundingNecessaryError: If other has digits beyond the currency
                scale and rounding_mode is UNNECESSARY
        """
        return self._with(self.money.plus(other), rounding_mode)

    def minus(
        self,
        other: BigMoneyProvider | Amount,
        rounding_mode: RoundingMode = _UNNECESSARY,
    ) -> Money:
        return self._with(self.money.minus(other), rounding_mode)

    def plus_major(self, amount: int) -> Money:
        return self._with(self.money.plus_major(amount))

    def minus_major(self, amount: int) -> Money:
        return self._with(self.money.minus_major(amount))

    def plus_minor(self, amount: int) -> Money:
        return self._with(self.money.plus_minor(amount))

    def minus_minor(self, amount: int) -> Money:
        return self._with(self.money.minus_minor(amount))

    def multiplied_by(
        self, factor: Amount, rounding_mode: RoundingMode = _UNNECESSARY
    ) -> Money:
        """Multiply by a decimal factor, rounding to the currency scale.

        Example:
            >>> str(Money.of("USD", "2.50").multiplied_by("1.15", RoundingMode.HALF_UP))
            'USD 2.88'
        """
        return self._with(self.money.multiplied_by(factor, rounding_mode))

    def divided_by(
        self, divisor: Amount, rounding_mode: RoundingMode = _UNNECESSARY
    ) -> Money:
        """Divide by a decimal divisor, rounding to the currency scale.

        Raises:
            MoneyArgumentError: If divisor is zero
            RoundingNecessaryError: If the quotient is inexact and
                rounding_mode is UNNECESSARY
        """
        return self._with(self.money.divided_by(divisor, rounding_mode))

    def negated(self) -> Money:
        return self._with(self.money.negated())

    def abs(self) -> Money:
        return self._with(self.money.abs())

    def converted_to(
        self,
        currency: CurrencyUnit | str,
        conversion_rate: Amount,
        rounding_mode: RoundingMode = _UNNECESSARY,
    ) -> Money:
        """Convert to another currency, rounding to its scale.

        Example:
            >>> str(Money.of("USD", "10.00").converted_to("JPY", "149.735", RoundingMode.HALF_UP))
            'JPY 1497'

        Raises:
            MoneyArgumentError: If currency is this currency or the rate is
                not positive
            RoundingNecessaryError: If rounding is needed and rounding_mode
                is UNNECESSARY
        """
        converted = self.money.converted_to(currency, conversion_rate)
        return Money(converted.with_currency_scale(rounding_mode))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: BigMoneyProvider) -> int:
        return self.money.compare_to(other)

    def is_equal(self, other: BigMoneyProvider) -> bool:
        return self.money.is_equal(other)

    def is_greater_than(self, other: BigMoneyProvider) -> bool:
        return self.money.is_greater_than(other)

    def is_greater_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self.money.is_greater_than_or_equal(other)

    def is_less_than(self, other: BigMoneyProvider) -> bool:
        return self.money.is_less_than(other)

    def is_less_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self.money.is_less_than_or_equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __neg__(self) -> Money:
        return self.negated()

    def __abs__(self) -> Money:
        return self.abs()

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_big_money(self) -> BigMoney:
        return self.money

    def __str__(self) -> str:
        return str(self.money)
