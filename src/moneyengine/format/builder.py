"""MoneyFormatterBuilder: assembles printer/parser elements into a formatter.

The builder is mutable and single-writer. Each append method returns the
builder for chaining. to_formatter() snapshots the elements into an
immutable tuple, so the builder can keep being used afterwards without
affecting formatters already built.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from moneyengine.diagnostics import ErrorTemplate, MoneyArgumentError
from moneyengine.locale_utils import get_default_locale, validate_locale

from .amount_style import MoneyAmountStyle
from .formatter import MoneyFormatter
from .printer_parser import (
    AmountPrinterParser,
    CurrencyCodePrinterParser,
    LiteralPrinterParser,
    LocalizedSymbolPrinter,
    NumericCodePrinterParser,
    PrinterParser,
    UserSuppliedPrinterParser,
)

if TYPE_CHECKING:
    from .printer_parser import MoneyParser, MoneyPrinter

__all__ = ["MoneyFormatterBuilder"]

logger = logging.getLogger(__name__)


class MoneyFormatterBuilder:
    """Builder for MoneyFormatter.

    Example:
        >>> builder = MoneyFormatterBuilder()
        >>> _ = builder.append_currency_code().append_literal(" ").append_amount()
        >>> formatter = builder.to_formatter("de_DE")
        >>> formatter.print(Money.of("EUR", "1234.5"))
        'EUR 1.234,50'
    """

    __slots__ = ("_elements",)

    def __init__(self) -> None:
        self._elements: list[PrinterParser] = []

    def append(
        self,
        printer: MoneyPrinter | None,
        parser: MoneyParser | None,
    ) -> MoneyFormatterBuilder:
        """Append an application-supplied printer and/or parser.

        Raises:
            MoneyArgumentError: If both printer and parser are None
        """
        if printer is None and parser is None:
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("printer", "printer and parser are both None")
            )
        self._elements.append(UserSuppliedPrinterParser(printer, parser))
        return self

    def append_formatter(self, formatter: MoneyFormatter) -> MoneyFormatterBuilder:
        """Append all elements of an existing formatter (its locale is ignored)."""
        self._elements.extend(formatter.elements)
        return self

    def append_literal(self, literal: str | None) -> MoneyFormatterBuilder:
        """Append fixed text. None or "" appends nothing."""
        if literal:
            self._elements.append(LiteralPrinterParser(literal))
        return self

    def append_amount(
        self, style: MoneyAmountStyle = MoneyAmountStyle.LOCALIZED_GROUPING
    ) -> MoneyFormatterBuilder:
        """Append the amount in the given style (localized grouping by default)."""
        if not isinstance(style, MoneyAmountStyle):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("style", "must be a MoneyAmountStyle")
            )
        self._elements.append(AmountPrinterParser(style))
        return self

    def append_amount_localized(self) -> MoneyFormatterBuilder:
        return self.append_amount(MoneyAmountStyle.LOCALIZED_GROUPING)

    def append_currency_code(self) -> MoneyFormatterBuilder:
        """Append the three-letter currency code (e.g. 'USD')."""
        self._elements.append(CurrencyCodePrinterParser())
        return self

    def append_currency_numeric_code(self) -> MoneyFormatterBuilder:
        """Append the unpadded numeric code (e.g. '36' for AUD)."""
        self._elements.append(NumericCodePrinterParser(zero_pad=False))
        return self

    def append_currency_numeric3_code(self) -> MoneyFormatterBuilder:
        """Append the three-digit numeric code (e.g. '036' for AUD)."""
        self._elements.append(NumericCodePrinterParser(zero_pad=True))
        return self

    def append_currency_symbol_localized(self) -> MoneyFormatterBuilder:
        """Append the localized currency symbol. The formatter cannot parse."""
        self._elements.append(LocalizedSymbolPrinter())
        return self

    def to_formatter(self, locale: str | None = None) -> MoneyFormatter:
        """Build an immutable formatter bound to a locale.

        Args:
            locale: Locale code; None uses the system locale (en_US if the
                system locale is unknown to Babel)

        Raises:
            MoneyArgumentError: If an explicit locale is unknown to Babel
        """
        locale_code = get_default_locale() if locale is None else validate_locale(locale)
        formatter = MoneyFormatter(tuple(self._elements), locale_code)
        logger.debug(
            "Built MoneyFormatter with %d elements for %s", len(formatter.elements), locale_code
        )
        return formatter

    def __str__(self) -> str:
        return "".join(str(element) for element in self._elements)
