"""Tests for BigMoney: construction, accessors, arithmetic and comparison.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from moneyengine import (
    BigMoney,
    CurrencyMismatchError,
    CurrencyUnit,
    IllegalCurrencyError,
    Money,
    MoneyArgumentError,
    RoundingMode,
    RoundingNecessaryError,
)

USD = CurrencyUnit.of("USD")
EUR = CurrencyUnit.of("EUR")
JPY = CurrencyUnit.of("JPY")


class _Wallet:
    """Minimal BigMoneyProvider."""

    def __init__(self, money: BigMoney) -> None:
        self._money = money

    def to_big_money(self) -> BigMoney:
        return self._money


class TestConstruction:
    """Factories and invariant validation."""

    def test_of_keeps_amount_scale(self) -> None:
        """of() takes the scale from the amount."""
        money = BigMoney.of(USD, "12.340")
        assert (money.unscaled_value, money.scale) == (12340, 3)

    def test_of_accepts_currency_code(self) -> None:
        """A currency code string is looked up in the registry."""
        assert BigMoney.of("EUR", 5).currency is EUR

    def test_of_unknown_currency_raises(self) -> None:
        """Unknown codes raise IllegalCurrencyError."""
        with pytest.raises(IllegalCurrencyError):
            BigMoney.of("QQQ", 1)

    def test_of_scale_raw_unscaled(self) -> None:
        """An int unscaled value is used as-is."""
        money = BigMoney.of_scale(USD, 1234, 2)
        assert str(money) == "USD 12.34"

    def test_of_scale_rounds_decimal_amount(self) -> None:
        """A decimal amount is re-expressed at the requested scale."""
        money = BigMoney.of_scale(USD, Decimal("1.235"), 2, RoundingMode.HALF_UP)
        assert (money.unscaled_value, money.scale) == (124, 2)

    def test_of_scale_unnecessary_raises(self) -> None:
        """Dropping digits without a rounding mode raises."""
        with pytest.raises(RoundingNecessaryError):
            BigMoney.of_scale(USD, "1.235", 2)

    def test_of_major_and_minor(self) -> None:
        """of_major uses scale 0; of_minor uses the currency scale."""
        assert str(BigMoney.of_major(USD, 25)) == "USD 25"
        assert str(BigMoney.of_minor(USD, 2595)) == "USD 25.95"
        assert str(BigMoney.of_minor(JPY, 500)) == "JPY 500"

    def test_zero(self) -> None:
        """zero() accepts an optional scale."""
        assert BigMoney.zero(USD).scale == 0
        assert str(BigMoney.zero(USD, 3)) == "USD 0.000"

    @pytest.mark.parametrize(
        ("currency", "unscaled", "scale"),
        [(USD, 1, -1), ("USD", 1, 0), (USD, 1.5, 0), (USD, True, 0), (USD, 1, True)],
    )
    def test_invalid_fields_raise(self, currency: object, unscaled: object, scale: object) -> None:
        """Wrong types and negative scales are rejected."""
        with pytest.raises(MoneyArgumentError):
            BigMoney(currency, unscaled, scale)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """BigMoney is immutable."""
        money = BigMoney.of(USD, 1)
        with pytest.raises(FrozenInstanceError):
            money.scale = 2  # type: ignore[misc]

    def test_total(self) -> None:
        """total() sums providers of one currency."""
        total = BigMoney.total(
            BigMoney.of(USD, 1), Money.of(USD, "2.50"), BigMoney.of(USD, "0.001")
        )
        assert str(total) == "USD 3.501"

    def test_total_empty_raises(self) -> None:
        """At least one amount is required."""
        with pytest.raises(MoneyArgumentError, match="at least one"):
            BigMoney.total()

    def test_total_mixed_currencies_raises(self) -> None:
        """Mixed currencies are rejected."""
        with pytest.raises(CurrencyMismatchError):
            BigMoney.total(BigMoney.of(USD, 1), BigMoney.of(EUR, 1))

    def test_from_provider(self) -> None:
        """Any object with to_big_money() is accepted."""
        money = BigMoney.of(USD, "3.00")
        assert BigMoney.from_provider(_Wallet(money)) is money
        assert BigMoney.from_provider(money) is money

    def test_from_provider_rejects_non_provider(self) -> None:
        """Objects without to_big_money() are rejected."""
        with pytest.raises(MoneyArgumentError, match="provider"):
            BigMoney.from_provider(Decimal(1))  # type: ignore[arg-type]


class TestParse:
    """BigMoney.parse of the str() form."""

    def test_parse(self) -> None:
        """Code, space, amount."""
        money = BigMoney.parse("USD 12.34")
        assert money == BigMoney(USD, 1234, 2)

    def test_parse_extra_spaces(self) -> None:
        """Several spaces between code and amount are allowed."""
        assert BigMoney.parse("EUR   -0.5") == BigMoney(EUR, -5, 1)

    def test_parse_round_trips_str(self) -> None:
        """parse(str(m)) == m."""
        money = BigMoney(JPY, 123456789012345678901234567890, 7)
        assert BigMoney.parse(str(money)) == money

    @pytest.mark.parametrize("text", ["USD", "USD12.34", "USD ", "USD abc", "USD 1.2.3"])
    def test_parse_malformed(self, text: str) -> None:
        """Malformed text raises MoneyArgumentError."""
        with pytest.raises(MoneyArgumentError, match="cannot be parsed"):
            BigMoney.parse(text)

    def test_parse_unknown_currency(self) -> None:
        """Unknown currency codes raise IllegalCurrencyError."""
        with pytest.raises(IllegalCurrencyError):
            BigMoney.parse("QQQ 1.00")


class TestAccessors:
    """Amount views and sign predicates."""

    def test_amount_is_exact_decimal(self) -> None:
        """amount keeps the scale."""
        assert BigMoney.of(USD, "12.300").amount.as_tuple() == Decimal("12.300").as_tuple()

    @pytest.mark.parametrize(
        ("text", "major", "minor", "part"),
        [
            ("12.34", 12, 1234, 34),
            ("-12.34", -12, -1234, -34),
            ("12.345", 12, 1234, 34),
            ("-0.07", 0, -7, -7),
        ],
    )
    def test_major_minor(self, text: str, major: int, minor: int, part: int) -> None:
        """Major and minor views truncate toward zero and keep the sign."""
        money = BigMoney.of(USD, text)
        assert money.amount_major == major
        assert money.amount_minor == minor
        assert money.minor_part == part

    def test_minor_part_zero_decimal_currency(self) -> None:
        """JPY has no minor part."""
        assert BigMoney.of(JPY, 1500).minor_part == 0

    def test_predicates(self) -> None:
        """Sign predicates follow the unscaled value."""
        negative, zero, positive = BigMoney.of(USD, -1), BigMoney.zero(USD, 2), BigMoney.of(USD, 1)
        assert negative.is_negative() and negative.is_negative_or_zero()
        assert zero.is_zero() and zero.is_positive_or_zero() and zero.is_zero_or_negative()
        assert positive.is_positive() and positive.is_zero_or_positive()
        assert not zero.is_positive() and not zero.is_negative()

    def test_is_currency_scale(self) -> None:
        """True only when scale equals the currency's decimal places."""
        assert BigMoney.of(USD, "1.00").is_currency_scale()
        assert not BigMoney.of(USD, "1.0").is_currency_scale()

    def test_is_same_currency(self) -> None:
        """Compares currencies of any providers."""
        assert BigMoney.of(USD, 1).is_same_currency(Money.of(USD, 2))
        assert not BigMoney.of(USD, 1).is_same_currency(BigMoney.of(EUR, 1))


class TestReExpression:
    """with_scale, strip_trailing_zeros, rounded and friends."""

    def test_with_scale_up(self) -> None:
        """Raising the scale is exact."""
        assert str(BigMoney.of(USD, "1.5").with_scale(3)) == "USD 1.500"

    def test_with_scale_rounds(self) -> None:
        """Lowering the scale uses the rounding mode."""
        assert str(BigMoney.of(USD, "1.235").with_scale(2, RoundingMode.HALF_EVEN)) == "USD 1.24"

    def test_with_scale_unnecessary_raises(self) -> None:
        """UNNECESSARY refuses to drop nonzero digits."""
        with pytest.raises(RoundingNecessaryError):
            BigMoney.of(USD, "1.235").with_scale(2)

    def test_with_scale_negative_raises(self) -> None:
        """Negative scales are rejected."""
        with pytest.raises(MoneyArgumentError, match="Scale must be zero or positive"):
            BigMoney.of(USD, 1).with_scale(-1)

    def test_with_currency_scale_is_idempotent(self) -> None:
        """Already at the currency scale: same value returned."""
        money = BigMoney.of(USD, "9.99")
        assert money.with_currency_scale() is money

    def test_with_currency_scale_pseudo_currency(self) -> None:
        """Pseudo-currencies use scale 0."""
        assert BigMoney.of("XAU", "12.0").with_currency_scale().scale == 0

    def test_with_amount_and_currency_unit(self) -> None:
        """with_amount replaces the amount; with_currency_unit only the currency."""
        money = BigMoney.of(USD, "1.00")
        assert str(money.with_amount("7.5")) == "USD 7.5"
        assert str(money.with_currency_unit("EUR")) == "EUR 1.00"
        assert money.with_currency_unit(USD) is money

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("12.3400", "USD 12.34"), ("0.00", "USD 0"), ("100", "USD 100"), ("-1.50", "USD -1.5")],
    )
    def test_strip_trailing_zeros(self, text: str, expected: str) -> None:
        """Trailing fraction zeros are dropped; integer zeros are kept."""
        assert str(BigMoney.of(USD, text).strip_trailing_zeros()) == expected

    def test_rounded_keeps_scale(self) -> None:
        """rounded() zero-fills the dropped digits."""
        money = BigMoney.of(USD, "1.2345").rounded(2, RoundingMode.HALF_UP)
        assert str(money) == "USD 1.2300"

    def test_rounded_negative_scale(self) -> None:
        """A negative scale rounds to tens."""
        assert str(BigMoney.of(USD, "125.5").rounded(-1, RoundingMode.HALF_UP)) == "USD 130.0"

    def test_rounded_beyond_scale_is_noop(self) -> None:
        """Rounding to a larger scale returns the same value."""
        money = BigMoney.of(USD, "1.23")
        assert money.rounded(5, RoundingMode.UNNECESSARY) is money


class TestArithmetic:
    """Addition, multiplication, division and conversion."""

    def test_plus_takes_larger_scale(self) -> None:
        """10.00 + 5.005 = 15.005 at scale 3."""
        result = BigMoney.of(USD, "10.00").plus(BigMoney.of(USD, "5.005"))
        assert (result.unscaled_value, result.scale) == (15005, 3)

    def test_plus_plain_amount(self) -> None:
        """Plain decimal amounts are added in the receiver's currency."""
        assert str(BigMoney.of(USD, "1.00").plus("0.005")) == "USD 1.005"

    def test_plus_money(self) -> None:
        """Money operands are accepted through the provider protocol."""
        assert str(BigMoney.of(USD, "0.5").plus(Money.of(USD, 1))) == "USD 1.50"

    def test_plus_zero_returns_self(self) -> None:
        """Adding zero at a smaller scale leaves the value unchanged."""
        money = BigMoney.of(USD, "1.23")
        assert money.plus(BigMoney.zero(USD)) is money

    def test_plus_currency_mismatch(self) -> None:
        """Different currencies raise CurrencyMismatchError."""
        with pytest.raises(CurrencyMismatchError, match="USD/EUR") as exc_info:
            BigMoney.of(USD, 1).plus(BigMoney.of(EUR, 1))
        assert exc_info.value.first_currency is USD
        assert exc_info.value.second_currency is EUR

    def test_minus(self) -> None:
        """Subtraction aligns scales."""
        assert str(BigMoney.of(USD, "1").minus(BigMoney.of(USD, "0.25"))) == "USD 0.75"

    def test_major_and_minor_arithmetic(self) -> None:
        """plus_major keeps the scale; plus_minor lifts to the currency scale."""
        money = BigMoney.of(USD, "1.234")
        assert str(money.plus_major(2)) == "USD 3.234"
        assert str(money.minus_major(2)) == "USD -0.766"
        assert str(BigMoney.of(USD, "1.5").plus_minor(5)) == "USD 1.55"
        assert str(money.minus_minor(4)) == "USD 1.194"

    def test_multiplied_by_exact(self) -> None:
        """Without a rounding mode the scales add."""
        assert str(BigMoney.of(USD, "2.50").multiplied_by("1.1")) == "USD 2.750"

    def test_multiplied_by_rounded(self) -> None:
        """With a rounding mode the scale is kept."""
        result = BigMoney.of(USD, "2.50").multiplied_by("1.15", RoundingMode.HALF_UP)
        assert str(result) == "USD 2.88"

    def test_multiplied_by_one_returns_self(self) -> None:
        """Multiplying by 1 is the identity."""
        money = BigMoney.of(USD, "2.50")
        assert money.multiplied_by(1) is money

    def test_multiplied_by_negative(self) -> None:
        """Negative factors flip the sign."""
        assert str(BigMoney.of(USD, "2.50").multiplied_by(-2)) == "USD -5.00"

    def test_divided_by_inexact_raises(self) -> None:
        """1.00 / 3 cannot be represented at scale 2."""
        with pytest.raises(RoundingNecessaryError):
            BigMoney.of(USD, "1.00").divided_by(3)

    def test_divided_by_rounded(self) -> None:
        """1.00 / 3 rounds to 0.33 and keeps the scale."""
        assert str(BigMoney.of(USD, "1.00").divided_by(3, RoundingMode.HALF_UP)) == "USD 0.33"
        assert str(BigMoney.of(USD, "-1.00").divided_by(3, RoundingMode.FLOOR)) == "USD -0.34"

    def test_divided_by_decimal_divisor(self) -> None:
        """Fractional divisors are exact when possible."""
        assert str(BigMoney.of(USD, "1.00").divided_by("0.5")) == "USD 2.00"

    def test_divided_by_zero_raises(self) -> None:
        """Zero divisors are rejected."""
        with pytest.raises(MoneyArgumentError, match="Division by zero"):
            BigMoney.of(USD, 1).divided_by("0.00")

    def test_negated_and_abs(self) -> None:
        """Sign operations, including the unary operators."""
        money = BigMoney.of(USD, "-1.50")
        assert str(money.negated()) == "USD 1.50"
        assert str(-money) == "USD 1.50"
        assert abs(money) == money.abs() == BigMoney.of(USD, "1.50")
        zero = BigMoney.zero(USD)
        assert zero.negated() is zero

    def test_converted_to_exact(self) -> None:
        """Conversion multiplies by the rate."""
        assert str(BigMoney.of(USD, "10.00").converted_to("EUR", "0.92")) == "EUR 9.2000"

    def test_converted_to_rounded(self) -> None:
        """With a rounding mode the scale is kept."""
        result = BigMoney.of(USD, "10.00").converted_to(JPY, "149.735", RoundingMode.HALF_UP)
        assert str(result) == "JPY 1497.35"

    def test_converted_to_same_currency_raises(self) -> None:
        """Converting to the same currency is an argument error."""
        with pytest.raises(MoneyArgumentError, match="to itself"):
            BigMoney.of(USD, 1).converted_to(USD, "1.1")

    @pytest.mark.parametrize("rate", ["0", "-1.5", 0])
    def test_converted_to_non_positive_rate_raises(self, rate: str | int) -> None:
        """Rates must be positive."""
        with pytest.raises(MoneyArgumentError, match="must be positive"):
            BigMoney.of(USD, 1).converted_to(EUR, rate)


class TestComparison:
    """Structural equality versus numeric comparison."""

    def test_equality_is_scale_sensitive(self) -> None:
        """USD 1.0 and USD 1.00 are different values with equal amounts."""
        a, b = BigMoney.of(USD, "1.0"), BigMoney.of(USD, "1.00")
        assert a != b
        assert a.is_equal(b)
        assert a.compare_to(b) == 0
        assert len({a, b}) == 2

    def test_ordering(self) -> None:
        """Ordering is numeric within a currency."""
        values = [BigMoney.of(USD, v) for v in ("1.5", "-2", "0.25", "1.50")]
        assert [str(v) for v in sorted(values)] == ["USD -2", "USD 0.25", "USD 1.5", "USD 1.50"]
        assert BigMoney.of(USD, 2) > BigMoney.of(USD, "1.99")
        assert BigMoney.of(USD, 2) >= BigMoney.of(USD, "2.00")

    def test_comparison_predicates(self) -> None:
        """Named predicates mirror compare_to()."""
        small, large = BigMoney.of(USD, 1), BigMoney.of(USD, 2)
        assert small.is_less_than(large) and small.is_less_than_or_equal(large)
        assert large.is_greater_than(small) and large.is_greater_than_or_equal(small)

    def test_compare_currency_mismatch(self) -> None:
        """Comparing different currencies raises."""
        with pytest.raises(CurrencyMismatchError):
            BigMoney.of(USD, 1).compare_to(BigMoney.of(EUR, 1))
        with pytest.raises(CurrencyMismatchError):
            _ = BigMoney.of(USD, 1) < BigMoney.of(EUR, 1)

    def test_ordering_with_other_types(self) -> None:
        """Ordering against non-BigMoney is unsupported."""
        with pytest.raises(TypeError):
            _ = BigMoney.of(USD, 1) < 2  # type: ignore[operator]


class TestConversion:
    """to_big_money, to_money and str()."""

    def test_to_money(self) -> None:
        """to_money() rounds to the currency scale when asked."""
        assert str(BigMoney.of(USD, "1.5").to_money()) == "USD 1.50"
        assert str(BigMoney.of(USD, "1.234").to_money(RoundingMode.HALF_UP)) == "USD 1.23"

    def test_to_money_unnecessary_raises(self) -> None:
        """Extra digits need a rounding mode."""
        with pytest.raises(RoundingNecessaryError):
            BigMoney.of(USD, "1.234").to_money()

    def test_str_plain_notation(self) -> None:
        """str() never uses exponent notation."""
        assert str(BigMoney.of(USD, Decimal("1E+3"))) == "USD 1000"
        assert str(BigMoney(USD, -5, 3)) == "USD -0.005"


class TestLargeAmounts:
    """Amounts longer than the interpreter's int/str conversion limit."""

    ONES = (10**5000 - 1) // 9  # 5000 ones

    def test_of_long_string(self) -> None:
        """A 5000-digit string becomes the exact unscaled value."""
        money = BigMoney.of(USD, "1" * 5000)
        assert money.unscaled_value == self.ONES
        assert money.scale == 0

    def test_str_long_value(self) -> None:
        """str() renders every digit."""
        money = BigMoney.of_scale(USD, 10**5000, 2)
        assert str(money) == "USD 1" + "0" * 4998 + ".00"
        assert str(money.negated()) == "USD -1" + "0" * 4998 + ".00"

    def test_parse_long_value(self) -> None:
        """parse() reads back what str() writes."""
        money = BigMoney.of_scale(USD, self.ONES, 3)
        assert BigMoney.parse(str(money)) == money

    def test_amount_long_value(self) -> None:
        """The Decimal amount keeps every digit."""
        amount = BigMoney.of_scale(USD, 10**5000, 2).amount
        assert amount == Decimal((0, (1,) + (0,) * 5000, -2))

    def test_arithmetic_long_value(self) -> None:
        """Arithmetic on long values stays exact."""
        money = BigMoney.of(USD, "1" * 5000).plus(BigMoney.of(USD, "0.01"))
        assert money.unscaled_value == self.ONES * 100 + 1
        assert money.scale == 2

    @pytest.mark.parametrize("amount", ["1e999999999", Decimal("1E+10001")])
    def test_of_huge_exponent_rejected(self, amount: str | Decimal) -> None:
        """Huge exponents are rejected up front."""
        with pytest.raises(MoneyArgumentError, match="exponent"):
            BigMoney.of(USD, amount)

    def test_parse_huge_exponent_rejected(self) -> None:
        """parse() reports huge exponents as invalid money strings."""
        with pytest.raises(MoneyArgumentError, match="cannot be parsed"):
            BigMoney.parse("USD 1E999999999")
