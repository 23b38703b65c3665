"""Diagnostic system for money errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    CurrencyMismatchError,
    IllegalCurrencyError,
    MoneyArgumentError,
    MoneyError,
    MoneyFormatError,
    MoneyParseError,
    RoundingNecessaryError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CurrencyMismatchError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "IllegalCurrencyError",
    "MoneyArgumentError",
    "MoneyError",
    "MoneyFormatError",
    "MoneyParseError",
    "OutputFormat",
    "RoundingNecessaryError",
    "SourceSpan",
]
