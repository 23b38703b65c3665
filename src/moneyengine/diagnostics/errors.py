"""Money exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object built
by ErrorTemplate. Argument-style errors also inherit from the matching
built-in (ValueError, ArithmeticError) so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic, ErrorCategory

if TYPE_CHECKING:
    from moneyengine.currency import CurrencyUnit

__all__ = [
    "CurrencyMismatchError",
    "IllegalCurrencyError",
    "MoneyArgumentError",
    "MoneyError",
    "MoneyFormatError",
    "MoneyParseError",
    "RoundingNecessaryError",
]


class MoneyError(Exception):
    """Base exception for all money errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Broad error category for dispatching
    """

    category: ErrorCategory = ErrorCategory.ARITHMETIC

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class CurrencyMismatchError(MoneyError, ValueError):
    """Binary operation on two amounts in different currencies.

    Attributes:
        first_currency: Currency of the receiver
        second_currency: Currency of the argument
    """

    category = ErrorCategory.CURRENCY

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        first_currency: CurrencyUnit | None = None,
        second_currency: CurrencyUnit | None = None,
    ) -> None:
        super().__init__(message)
        self.first_currency = first_currency
        self.second_currency = second_currency


class IllegalCurrencyError(MoneyError, ValueError):
    """Unknown or malformed currency code, numeric code or territory."""

    category = ErrorCategory.CURRENCY


class MoneyArgumentError(MoneyError, ValueError):
    """Invalid argument: negative scale, bad rate, bad amount, missing field."""


class RoundingNecessaryError(MoneyError, ArithmeticError):
    """Rounding would discard nonzero digits under RoundingMode.UNNECESSARY."""


class MoneyFormatError(MoneyError):
    """Formatter misuse, such as printing with a parse-only formatter."""

    category = ErrorCategory.FORMATTING


class MoneyParseError(MoneyFormatError):
    """Text could not be parsed into a money value.

    Never carries a partial result. The error index points at the first
    character that could not be consumed.

    Attributes:
        error_index: Index of the failure in input_text (-1 if unknown)
        input_text: The full text passed to the parser

    Example:
        >>> try:
        ...     formatter.parse_big_money("US12.34")
        ... except MoneyParseError as e:
        ...     print(e.error_index)
        2
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        error_index: int = -1,
        input_text: str = "",
    ) -> None:
        super().__init__(message)
        self.error_index = error_index
        self.input_text = input_text
