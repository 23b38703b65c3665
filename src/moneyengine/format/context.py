"""Print and parse contexts.

MoneyPrintContext is an immutable carrier for the locale used by one print
call. MoneyParseContext is the mutable cursor for one parse call: elements
read ``text`` from ``index``, store what they parse, and either advance the
index or record an error index. A parse context is owned by exactly one
parse call and is never shared between threads.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from moneyengine.currency import CurrencyUnit
from moneyengine.diagnostics import ErrorTemplate, MoneyParseError
from moneyengine.money import BigMoney
from moneyengine.money.arithmetic import to_decimal

__all__ = ["MoneyParseContext", "MoneyPrintContext"]

# Sentinel for "no error recorded"
NO_ERROR = -1


@dataclass(frozen=True, slots=True)
class MoneyPrintContext:
    """Context for one print call.

    Attributes:
        locale: POSIX locale code used for localized elements
    """

    locale: str


@dataclass(slots=True)
class MoneyParseContext:
    """Mutable state for one parse call.

    Attributes:
        text: Full text being parsed
        index: Current parse position
        locale: POSIX locale code used for localized elements
        error_index: Position of the first error, or -1 if none
        currency: Parsed currency, if any element produced one
        unscaled_value: Parsed amount digits, if any element produced them
        scale: Scale of the parsed amount

    Example:
        >>> context = formatter.parse("USD 12.34")
        >>> context.is_complete()
        True
        >>> context.amount
        Decimal('12.34')
    """

    text: str
    index: int = 0
    locale: str = "en_US"
    error_index: int = NO_ERROR
    currency: CurrencyUnit | None = None
    unscaled_value: int | None = None
    scale: int | None = None

    @property
    def text_length(self) -> int:
        return len(self.text)

    @property
    def remaining(self) -> str:
        """Unparsed text from the current index."""
        return self.text[self.index :]

    @property
    def amount(self) -> Decimal | None:
        """Parsed amount as an exact Decimal, or None if none was parsed."""
        if self.unscaled_value is None or self.scale is None:
            return None
        return to_decimal(self.unscaled_value, self.scale)

    def set_amount(self, unscaled_value: int, scale: int) -> None:
        self.unscaled_value = unscaled_value
        self.scale = scale

    def set_error(self, error_index: int | None = None) -> None:
        """Record a parse error.

        The index is left unchanged so the failing element is visible.

        Args:
            error_index: Offending position; defaults to the current index
        """
        self.error_index = self.index if error_index is None else error_index

    def is_error(self) -> bool:
        return self.error_index != NO_ERROR

    def is_full_parse(self) -> bool:
        """True if all text has been consumed."""
        return self.index >= len(self.text)

    def is_complete(self) -> bool:
        """True if parsing succeeded and produced a currency and an amount."""
        return not self.is_error() and self.currency is not None and self.amount is not None

    def to_big_money(self) -> BigMoney:
        """Combine the parsed currency and amount.

        Raises:
            MoneyParseError: If an error was recorded or the currency or
                the amount is missing
        """
        if self.is_error():
            raise MoneyParseError(
                ErrorTemplate.parse_failed(self.text, self.error_index),
                error_index=self.error_index,
                input_text=self.text,
            )
        if self.currency is None:
            raise MoneyParseError(
                ErrorTemplate.parse_missing_currency(self.text),
                error_index=self.index,
                input_text=self.text,
            )
        if self.unscaled_value is None or self.scale is None:
            raise MoneyParseError(
                ErrorTemplate.parse_missing_amount(self.text),
                error_index=self.index,
                input_text=self.text,
            )
        return BigMoney(self.currency, self.unscaled_value, self.scale)
