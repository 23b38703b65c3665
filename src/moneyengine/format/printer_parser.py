"""Printer/parser elements.

A formatter is an ordered tuple of elements. Each element is immutable and
can print one part of a money value to a text buffer, parse that part from
a MoneyParseContext, or both. Parsing is a single left-to-right pass: an
element either consumes text and advances the context index, or records an
error index and leaves the index where it was.

Custom elements can be supplied by applications through the MoneyPrinter
and MoneyParser protocols.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias

from moneyengine.constants import ISO_CURRENCY_CODE_LENGTH, NUMERIC_CODE_LENGTH
from moneyengine.currency import CurrencyUnit
from moneyengine.diagnostics import IllegalCurrencyError
from moneyengine.money import BigMoney
from moneyengine.money.arithmetic import digits_to_int, split_digits

from .amount_style import MoneyAmountStyle
from .context import MoneyParseContext, MoneyPrintContext

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "MoneyParser",
    "MoneyPrinter",
    "TextBuffer",
    # Elements
    "AmountPrinterParser",
    "CurrencyCodePrinterParser",
    "LiteralPrinterParser",
    "LocalizedSymbolPrinter",
    "NumericCodePrinterParser",
    "UserSuppliedPrinterParser",
    # Type aliases
    "PrinterParser",
]

_MINUS = "-"
_PLUS = "+"


# ============================================================================
# PROTOCOLS
# ============================================================================


class TextBuffer(Protocol):
    """Anything with a ``write(str)`` method (io.StringIO, open text files)."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover  # Protocol stub - not executable


class MoneyPrinter(Protocol):
    """Prints part of a money value.

    Implementations must be immutable and thread-safe.
    """

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        """Write this element's text for money to buffer."""
        ...  # pragma: no cover  # Protocol stub - not executable


class MoneyParser(Protocol):
    """Parses part of a money value.

    Implementations must be immutable and thread-safe. On success they
    advance ``context.index``; on failure they call ``context.set_error()``.
    """

    def parse(self, context: MoneyParseContext) -> None:
        """Consume this element's text from context."""
        ...  # pragma: no cover  # Protocol stub - not executable


# ============================================================================
# ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LiteralPrinterParser:
    """Fixed text, printed unchanged and matched exactly when parsing."""

    literal: str

    is_printer = True
    is_parser = True

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        buffer.write(self.literal)

    def parse(self, context: MoneyParseContext) -> None:
        if context.text.startswith(self.literal, context.index):
            context.index += len(self.literal)
        else:
            context.set_error()

    def __str__(self) -> str:
        return f"'{self.literal}'"


@dataclass(frozen=True, slots=True)
class AmountPrinterParser:
    """The numeric amount, written in a MoneyAmountStyle.

    Printing uses the exact unscaled digits, so every fraction digit of the
    value's scale is written. The sign is written before the first digit
    and never takes part in grouping.
    """

    style: MoneyAmountStyle

    is_printer = True
    is_parser = True

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        style = self.style.resolve(context.locale)

        negative, integer, fraction = split_digits(money.unscaled_value, money.scale)
        integer = _translate_digits(integer, style.zero_character)
        fraction = _translate_digits(fraction, style.zero_character)

        parts: list[str] = [_MINUS] if negative else []
        size = style.grouping_size
        for position, digit in enumerate(integer):
            parts.append(digit)
            # Digits still to be written after this one
            remaining = len(integer) - position - 1
            if style.grouping and remaining > 0 and remaining % size == 0:
                parts.append(style.grouping_character)
        if fraction or style.force_decimal_point:
            parts.append(style.decimal_point_character)
            parts.append(fraction)
        buffer.write("".join(parts))

    def parse(self, context: MoneyParseContext) -> None:
        """Parse sign, integer digits, grouping characters and fraction.

        Grouping characters are skipped only between two integer digits.
        At least one digit is required; the number of fraction digits read
        becomes the scale.
        """
        style = self.style.resolve(context.locale)

        text = context.text
        length = len(text)
        position = context.index
        if position >= length:
            context.set_error()
            return

        negative = False
        if text[position] in (_MINUS, _PLUS):
            negative = text[position] == _MINUS
            position += 1

        zero = ord(style.zero_character)
        decimal_point = style.decimal_point_character
        group = style.grouping_character if style.grouping else None
        integer_digits: list[int] = []
        fraction_digits: list[int] = []
        seen_decimal_point = False

        while position < length:
            value = ord(text[position]) - zero
            if 0 <= value <= 9:  # noqa: PLR2004
                (fraction_digits if seen_decimal_point else integer_digits).append(value)
                position += 1
            elif not seen_decimal_point and text.startswith(decimal_point, position):
                seen_decimal_point = True
                position += len(decimal_point)
            elif (
                group is not None
                and not seen_decimal_point
                and integer_digits
                and text.startswith(group, position)
                and _is_digit_at(text, position + len(group), zero)
            ):
                position += len(group)
            else:
                break

        if not integer_digits and not fraction_digits:
            context.set_error()
            return

        unscaled = digits_to_int(integer_digits + fraction_digits)
        context.set_amount(-unscaled if negative else unscaled, len(fraction_digits))
        context.index = position

    def __str__(self) -> str:
        return "${amount}"


@dataclass(frozen=True, slots=True)
class CurrencyCodePrinterParser:
    """The three-letter currency code."""

    is_printer = True
    is_parser = True

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        buffer.write(money.currency.code)

    def parse(self, context: MoneyParseContext) -> None:
        start = context.index
        end = start + ISO_CURRENCY_CODE_LENGTH
        text = context.text
        # Report the first character that cannot be part of a code
        for position in range(start, end):
            if position >= len(text) or not _is_code_letter(text[position]):
                context.set_error(position)
                return
        try:
            context.currency = CurrencyUnit.of(text[start:end])
        except IllegalCurrencyError:
            context.set_error(start)
            return
        context.index = end

    def __str__(self) -> str:
        return "${code}"


@dataclass(frozen=True, slots=True)
class NumericCodePrinterParser:
    """The ISO numeric currency code.

    Attributes:
        zero_pad: Print and require exactly three digits ("036") instead of
            the plain number ("36")
    """

    zero_pad: bool = False

    is_printer = True
    is_parser = True

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        currency = money.currency
        if self.zero_pad:
            buffer.write(currency.numeric3_code)
        elif currency.numeric_code >= 0:
            buffer.write(str(currency.numeric_code))

    def parse(self, context: MoneyParseContext) -> None:
        start = context.index
        text = context.text
        position = start
        while (
            position < len(text)
            and position - start < NUMERIC_CODE_LENGTH
            and "0" <= text[position] <= "9"
        ):
            position += 1
        if position == start or (self.zero_pad and position - start < NUMERIC_CODE_LENGTH):
            context.set_error(position)
            return
        try:
            context.currency = CurrencyUnit.of_numeric_code(text[start:position])
        except IllegalCurrencyError:
            context.set_error(start)
            return
        context.index = position

    def __str__(self) -> str:
        return "${numeric3Code}" if self.zero_pad else "${numericCode}"


@dataclass(frozen=True, slots=True)
class LocalizedSymbolPrinter:
    """The currency symbol for the context locale. Print only."""

    is_printer = True
    is_parser = False

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        buffer.write(money.currency.symbol(context.locale))

    def parse(self, context: MoneyParseContext) -> None:
        # Symbols are ambiguous ('$' is used by dozens of currencies)
        context.set_error()

    def __str__(self) -> str:
        return "${symbolLocalized}"


@dataclass(frozen=True, slots=True)
class UserSuppliedPrinterParser:
    """Application-supplied printer and/or parser.

    Either side may be None, in which case the formatter cannot print (or
    parse) while this element is present.
    """

    printer: MoneyPrinter | None
    parser: MoneyParser | None

    @property
    def is_printer(self) -> bool:
        return self.printer is not None

    @property
    def is_parser(self) -> bool:
        return self.parser is not None

    def print(self, context: MoneyPrintContext, buffer: TextBuffer, money: BigMoney) -> None:
        if self.printer is not None:
            self.printer.print(context, buffer, money)

    def parse(self, context: MoneyParseContext) -> None:
        if self.parser is None:
            context.set_error()
            return
        self.parser.parse(context)

    def __str__(self) -> str:
        if self.printer is self.parser:
            return str(self.printer)
        printer = "" if self.printer is None else str(self.printer)
        parser = "" if self.parser is None else str(self.parser)
        return f"{printer}:{parser}"


PrinterParser: TypeAlias = (
    LiteralPrinterParser
    | AmountPrinterParser
    | CurrencyCodePrinterParser
    | NumericCodePrinterParser
    | LocalizedSymbolPrinter
    | UserSuppliedPrinterParser
)
"""Any element a MoneyFormatter can hold."""


# ============================================================================
# HELPERS
# ============================================================================


def _translate_digits(digits: str, zero_character: str) -> str:
    """Map ASCII digits onto the digit range starting at zero_character."""
    if zero_character == "0":
        return digits
    offset = ord(zero_character) - ord("0")
    return "".join(chr(ord(d) + offset) for d in digits)


def _is_digit_at(text: str, position: int, zero: int) -> bool:
    return position < len(text) and 0 <= ord(text[position]) - zero <= 9  # noqa: PLR2004


def _is_code_letter(char: str) -> bool:
    return "A" <= char <= "Z"
