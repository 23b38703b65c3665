"""Diagnostic codes and data structures.

Defines error codes, text spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for MoneyError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        CURRENCY: Unknown currency or currency mismatch
        ARITHMETIC: Rounding or invalid arithmetic arguments
        FORMATTING: Formatter misuse or printing failure
        PARSE: Text could not be parsed into a money value
    """

    CURRENCY = "currency"
    ARITHMETIC = "arithmetic"
    FORMATTING = "formatting"
    PARSE = "parse"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Currency errors (registry lookups, mismatches)
        2000-2999: Arithmetic errors (rounding, invalid arguments)
        3000-3999: Formatting errors (printer/parser capability)
        4000-4999: Parsing errors (text to money)
    """

    # Currency errors (1000-1999)
    CURRENCY_MISMATCH = 1001
    CURRENCY_UNKNOWN = 1002
    CURRENCY_NUMERIC_UNKNOWN = 1003
    CURRENCY_COUNTRY_UNKNOWN = 1004
    CURRENCY_CODE_INVALID = 1005
    CURRENCY_ALREADY_REGISTERED = 1006

    # Arithmetic errors (2000-2999)
    ROUNDING_NECESSARY = 2001
    INVALID_ARGUMENT = 2002
    SCALE_NEGATIVE = 2003
    SCALE_MISMATCH = 2004
    CONVERSION_RATE_INVALID = 2005
    CONVERSION_SAME_CURRENCY = 2006
    DIVISION_BY_ZERO = 2007
    AMOUNT_INVALID = 2008
    AMOUNT_EXPONENT_TOO_LARGE = 2009

    # Formatting errors (3000-3999)
    NOT_A_PRINTER = 3001
    NOT_A_PARSER = 3002
    LOCALE_UNKNOWN = 3003
    STYLE_INVALID = 3004

    # Parsing errors (4000-4999)
    PARSE_FAILED = 4001
    PARSE_INCOMPLETE = 4002
    PARSE_MISSING_CURRENCY = 4003
    PARSE_MISSING_AMOUNT = 4004
    PARSE_MONEY_STRING_INVALID = 4005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location in parsed text for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything needed to
    render an error for humans (hint) or tools (code, span).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Position in parsed text (None for non-parse errors)
        hint: Suggestion for fixing the error
        argument_name: Argument that caused the error (argument errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    argument_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PARSE_FAILED]: Text could not be parsed at index 2: 'US12.34'
              --> index 2
              = help: Check that the text matches the formatter pattern

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
