"""MoneyFormatter: immutable, locale-bound printer and parser.

Built by MoneyFormatterBuilder. A formatter holds an ordered tuple of
printer/parser elements and a locale. It is safe to share between threads:
elements are immutable, localized amount styles are resolved into cached
immutable snapshots, and each parse call owns a fresh MoneyParseContext.

Python 3.13+.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from moneyengine.diagnostics import (
    ErrorTemplate,
    MoneyArgumentError,
    MoneyFormatError,
    MoneyParseError,
)
from moneyengine.locale_utils import validate_locale
from moneyengine.money import BigMoney, BigMoneyProvider, Money, RoundingMode

from .context import MoneyParseContext, MoneyPrintContext
from .printer_parser import PrinterParser, TextBuffer

__all__ = ["MoneyFormatter"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoneyFormatter:
    """Formats and parses money values.

    Attributes:
        elements: Ordered printer/parser elements
        locale: POSIX locale code for localized elements

    Example:
        >>> formatter = (
        ...     MoneyFormatterBuilder()
        ...     .append_currency_code()
        ...     .append_literal(" ")
        ...     .append_amount(MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA)
        ...     .to_formatter("en_US")
        ... )
        >>> formatter.print(Money.of("USD", "1234567.89"))
        'USD 1,234,567.89'
        >>> str(formatter.parse_big_money("USD 1,234,567.89"))
        'USD 1234567.89'
    """

    elements: tuple[PrinterParser, ...]
    locale: str

    def with_locale(self, locale: str) -> MoneyFormatter:
        """Same elements bound to another locale.

        Raises:
            MoneyArgumentError: If Babel does not know the locale
        """
        return MoneyFormatter(self.elements, validate_locale(locale))

    def is_printer(self) -> bool:
        """True if every element can print."""
        return all(element.is_printer for element in self.elements)

    def is_parser(self) -> bool:
        """True if every element can parse."""
        return all(element.is_parser for element in self.elements)

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print(self, money: BigMoneyProvider) -> str:
        """Print a money value to a string.

        Raises:
            MoneyFormatError: If the formatter cannot print
        """
        buffer = io.StringIO()
        self.print_to(buffer, money)
        return buffer.getvalue()

    def print_to(self, buffer: TextBuffer, money: BigMoneyProvider) -> None:
        """Print a money value to any object with a ``write(str)`` method.

        Raises:
            MoneyFormatError: If the formatter cannot print
        """
        if not self.is_printer():
            raise MoneyFormatError(ErrorTemplate.not_a_printer())
        big_money = BigMoney.from_provider(money)
        context = MoneyPrintContext(self.locale)
        for element in self.elements:
            element.print(context, buffer, big_money)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str, start_index: int = 0) -> MoneyParseContext:
        """Parse text without raising on malformed input.

        Elements run in order until one records an error. The returned
        context holds the error index (or -1), the final index and any
        parsed currency and amount. Trailing unparsed text is not an error
        here; check ``context.is_full_parse()``.

        Raises:
            MoneyFormatError: If the formatter cannot parse
            MoneyArgumentError: If start_index is outside the text
        """
        if not self.is_parser():
            raise MoneyFormatError(ErrorTemplate.not_a_parser())
        if not 0 <= start_index <= len(text):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("start_index", "must be within the text")
            )
        context = MoneyParseContext(text, start_index, self.locale)
        for element in self.elements:
            element.parse(context)
            if context.is_error():
                break
        return context

    def parse_big_money(self, text: str) -> BigMoney:
        """Parse the whole text into a BigMoney.

        Example:
            >>> formatter.parse_big_money("US12.34")
            Traceback (most recent call last):
            MoneyParseError: Text could not be parsed at index 2: 'US12.34'

        Raises:
            MoneyParseError: If the text does not match, is only partly
                consumed, or lacks a currency or an amount
        """
        context = self.parse(text)
        if not context.is_error() and not context.is_full_parse():
            logger.debug("Unparsed text at index %d: %r", context.index, text)
            raise MoneyParseError(
                ErrorTemplate.parse_incomplete(text, context.index),
                error_index=context.index,
                input_text=text,
            )
        if context.is_error():
            logger.debug("Parse failed at index %d: %r", context.error_index, text)
        return context.to_big_money()

    def parse_money(
        self, text: str, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> Money:
        """Parse the whole text into Money at the currency scale.

        Raises:
            MoneyParseError: As for parse_big_money
            RoundingNecessaryError: If the amount has more fraction digits
                than the currency and rounding_mode is UNNECESSARY
        """
        return Money.from_provider(self.parse_big_money(text), rounding_mode)

    def __str__(self) -> str:
        """Pattern-like description, e.g. ``${code}' '${amount}``."""
        return "".join(str(element) for element in self.elements)
