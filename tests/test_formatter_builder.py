"""Tests for MoneyFormatterBuilder and MoneyFormatter configuration.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest

from moneyengine import (
    BigMoney,
    MoneyAmountStyle,
    MoneyArgumentError,
    MoneyFormatterBuilder,
)
from moneyengine.format import MoneyParseContext, MoneyPrintContext, TextBuffer


class _BracketPrinter:
    """Custom printer writing the currency code in brackets."""

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        buffer.write(f"[{money.currency.code}]")

    def __str__(self) -> str:
        return "${bracket}"


class _SkipParser:
    """Custom parser consuming one character."""

    def parse(self, context: MoneyParseContext) -> None:
        context.index += 1


class TestBuilderAppend:
    """Appending elements."""

    def test_chaining_returns_builder(self) -> None:
        """Every append method returns the same builder."""
        builder = MoneyFormatterBuilder()
        assert builder.append_currency_code() is builder
        assert builder.append_literal(" ") is builder
        assert builder.append_amount() is builder
        assert builder.append_amount_localized() is builder
        assert builder.append_currency_numeric_code() is builder
        assert builder.append_currency_numeric3_code() is builder
        assert builder.append_currency_symbol_localized() is builder
        assert builder.append(_BracketPrinter(), None) is builder

    def test_str_describes_elements(self) -> None:
        """str() lists the elements in order."""
        builder = (
            MoneyFormatterBuilder()
            .append_currency_code()
            .append_literal(" ")
            .append_amount()
            .append_currency_numeric3_code()
            .append_currency_numeric_code()
            .append_currency_symbol_localized()
        )
        assert str(builder) == (
            "${code}' '${amount}${numeric3Code}${numericCode}${symbolLocalized}"
        )
        assert str(builder.to_formatter("en_US")) == str(builder)

    @pytest.mark.parametrize("literal", ["", None])
    def test_empty_literal_is_noop(self, literal: str | None) -> None:
        """Empty or None literals append nothing."""
        formatter = MoneyFormatterBuilder().append_literal(literal).to_formatter("en_US")
        assert formatter.elements == ()

    def test_append_requires_printer_or_parser(self) -> None:
        """append(None, None) is an argument error."""
        with pytest.raises(MoneyArgumentError, match="both None"):
            MoneyFormatterBuilder().append(None, None)

    def test_append_amount_requires_style(self) -> None:
        """append_amount rejects non-style arguments."""
        with pytest.raises(MoneyArgumentError, match="style"):
            MoneyFormatterBuilder().append_amount("0.00")  # type: ignore[arg-type]

    def test_append_formatter_copies_elements(self) -> None:
        """append_formatter() reuses another formatter's elements."""
        inner = MoneyFormatterBuilder().append_currency_code().to_formatter("en_US")
        outer = (
            MoneyFormatterBuilder()
            .append_formatter(inner)
            .append_literal(" ")
            .append_amount(MoneyAmountStyle.ASCII_DECIMAL_POINT_NO_GROUPING)
            .to_formatter("en_US")
        )
        assert outer.elements[0] is inner.elements[0]
        assert outer.print(BigMoney.of("USD", "12.5")) == "USD 12.5"

    def test_user_supplied_str(self) -> None:
        """User-supplied elements describe themselves."""
        printer = _BracketPrinter()
        builder = MoneyFormatterBuilder().append(printer, None)
        assert str(builder) == "${bracket}:"


class TestToFormatter:
    """to_formatter() and locale handling."""

    def test_formatter_is_snapshot(self) -> None:
        """Appending after to_formatter() does not change built formatters."""
        builder = MoneyFormatterBuilder().append_currency_code()
        formatter = builder.to_formatter("en_US")
        builder.append_literal("!")
        assert len(formatter.elements) == 1
        assert len(builder.to_formatter("en_US").elements) == 2

    def test_bcp47_locale_normalized(self) -> None:
        """BCP-47 codes are stored in POSIX form."""
        formatter = MoneyFormatterBuilder().append_amount().to_formatter("de-DE")
        assert formatter.locale == "de_DE"

    @pytest.mark.parametrize("locale", ["xx_YY", "not a locale", ""])
    def test_unknown_locale_raises(self, locale: str) -> None:
        """Explicit unknown locales are rejected."""
        with pytest.raises(MoneyArgumentError, match="Unknown locale"):
            MoneyFormatterBuilder().append_amount().to_formatter(locale)

    def test_default_locale(self) -> None:
        """Without a locale the formatter uses a locale Babel knows."""
        formatter = MoneyFormatterBuilder().append_amount().to_formatter()
        assert formatter.locale
        assert formatter.print(BigMoney.of("USD", 1)) != ""

    def test_with_locale(self) -> None:
        """with_locale() rebinds the same elements."""
        formatter = MoneyFormatterBuilder().append_amount().to_formatter("en_US")
        german = formatter.with_locale("de-DE")
        assert german.locale == "de_DE"
        assert german.elements == formatter.elements
        assert german.print(BigMoney.of("EUR", "1234.5")) == "1.234,5"
        with pytest.raises(MoneyArgumentError):
            formatter.with_locale("xx_YY")

    def test_build_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Building a formatter logs the element count and locale."""
        with caplog.at_level(logging.DEBUG, logger="moneyengine.format.builder"):
            MoneyFormatterBuilder().append_currency_code().append_amount().to_formatter("en_US")
        assert "Built MoneyFormatter with 2 elements for en_US" in caplog.text


class TestCapabilities:
    """is_printer() and is_parser()."""

    def test_standard_elements_print_and_parse(self) -> None:
        """Code, literal, amount and numeric elements do both."""
        formatter = (
            MoneyFormatterBuilder()
            .append_currency_code()
            .append_literal(" ")
            .append_amount()
            .append_currency_numeric3_code()
            .to_formatter("en_US")
        )
        assert formatter.is_printer()
        assert formatter.is_parser()

    def test_symbol_is_print_only(self) -> None:
        """A localized symbol makes the formatter print-only."""
        formatter = (
            MoneyFormatterBuilder()
            .append_currency_symbol_localized()
            .append_amount()
            .to_formatter("en_US")
        )
        assert formatter.is_printer()
        assert not formatter.is_parser()

    def test_user_supplied_capabilities(self) -> None:
        """User-supplied elements report what they were given."""
        print_only = MoneyFormatterBuilder().append(_BracketPrinter(), None).to_formatter("en_US")
        parse_only = MoneyFormatterBuilder().append(None, _SkipParser()).to_formatter("en_US")
        assert print_only.is_printer() and not print_only.is_parser()
        assert parse_only.is_parser() and not parse_only.is_printer()
