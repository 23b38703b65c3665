"""Quickstart example for moneyengine.

This example demonstrates basic usage of moneyengine: exact money values,
currency lookups, rounding and formatting.

Note: Examples print results directly for brevity. In production, catch
MoneyError subclasses at your application boundary and report them.
"""

from decimal import Decimal

from moneyengine import (
    BigMoney,
    CurrencyMismatchError,
    CurrencyUnit,
    Money,
    MoneyAmountStyle,
    MoneyFormatterBuilder,
    MoneyParseError,
    RoundingMode,
    RoundingNecessaryError,
)

# Example 1: Currencies
print("=" * 50)
print("Example 1: Currencies")
print("=" * 50)

usd = CurrencyUnit.of("USD")
print(usd.code, usd.numeric3_code, usd.decimal_places)
# Output: USD 840 2

jpy = CurrencyUnit.of("JPY")
print(jpy.code, jpy.decimal_places)
# Output: JPY 0

print(CurrencyUnit.of_numeric_code(978).code)
# Output: EUR

print(CurrencyUnit.of_country("CH").code)
# Output: CHF

print(usd.symbol("en_US"), CurrencyUnit.of("EUR").display_name("de_DE"))
# Output: $ Euro

# Example 2: Money values
print("\n" + "=" * 50)
print("Example 2: Money at the Currency Scale")
print("=" * 50)

price = Money.of("USD", "12.5")
print(price)
# Output: USD 12.50

print(Money.of_minor("USD", 1999))
# Output: USD 19.99

print(Money.parse("EUR 9.2"))
# Output: EUR 9.20

total = Money.total(price, Money.of("USD", 7), Money.of_minor("USD", 25))
print(total)
# Output: USD 19.75

# Example 3: Arithmetic and rounding
print("\n" + "=" * 50)
print("Example 3: Arithmetic and Rounding")
print("=" * 50)

print(price.multiplied_by(3))
# Output: USD 37.50

print(price.divided_by(3, RoundingMode.HALF_EVEN))
# Output: USD 4.17

try:
    price.divided_by(3)
except RoundingNecessaryError as e:
    print(f"Rounding required: {e}")

try:
    price.plus(Money.of("EUR", 1))
except CurrencyMismatchError as e:
    print(f"Mismatch: {e}")
# Output: Mismatch: Currencies differ: USD/EUR

# Example 4: BigMoney keeps every digit
print("\n" + "=" * 50)
print("Example 4: Arbitrary Scale with BigMoney")
print("=" * 50)

unit_price = BigMoney.of("USD", "0.0125")
print(unit_price.multiplied_by(1000))
# Output: USD 12.5000

print(unit_price.plus(BigMoney.of("USD", "10.00")))
# Output: USD 10.0125

print(unit_price.with_currency_scale(RoundingMode.HALF_UP))
# Output: USD 0.01

print(unit_price.strip_trailing_zeros().scale, unit_price.amount == Decimal("0.0125"))
# Output: 4 True

# Example 5: Currency conversion
print("\n" + "=" * 50)
print("Example 5: Conversion")
print("=" * 50)

print(Money.of("USD", 100).converted_to("JPY", "149.735", RoundingMode.HALF_UP))
# Output: JPY 14974

print(BigMoney.of("USD", 100).converted_to("EUR", "0.92"))
# Output: EUR 92.00

# Example 6: Formatting
print("\n" + "=" * 50)
print("Example 6: Formatting")
print("=" * 50)

code_formatter = (
    MoneyFormatterBuilder()
    .append_currency_code()
    .append_literal(" ")
    .append_amount(MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA)
    .to_formatter("en_US")
)
print(code_formatter.print(Money.of("USD", "1234567.8")))
# Output: USD 1,234,567.80

german = (
    MoneyFormatterBuilder()
    .append_amount_localized()
    .append_literal(" ")
    .append_currency_code()
    .to_formatter("de_DE")
)
print(german.print(Money.of("EUR", "1234.5")))
# Output: 1.234,50 EUR

symbol_formatter = (
    MoneyFormatterBuilder()
    .append_currency_symbol_localized()
    .append_amount_localized()
    .to_formatter("en_US")
)
print(symbol_formatter.print(Money.of("USD", "1234.5")))
# Output: $1,234.50

# Example 7: Parsing
print("\n" + "=" * 50)
print("Example 7: Parsing")
print("=" * 50)

print(code_formatter.parse_big_money("USD 1,234.5"))
# Output: USD 1234.5

print(code_formatter.parse_money("USD 1,234.5"))
# Output: USD 1234.50

context = code_formatter.parse("USD 12.34 and more")
print(context.is_error(), context.is_full_parse(), repr(context.remaining))
# Output: False False ' and more'

try:
    code_formatter.parse_big_money("US12.34")
except MoneyParseError as e:
    print(f"Parse error at index {e.error_index}: {e}")
# Output: Parse error at index 2: Text could not be parsed at index 2: 'US12.34'

print("\n" + "=" * 50)
print("All examples completed!")
print("=" * 50)
