"""MoneyEngine - exact, currency-aware money values with composable formatting.

Monetary amounts use exact scaled-integer arithmetic (never binary floats)
and respect each currency's number of fraction digits. A small set of
immutable printer/parser elements composes into thread-safe formatters
that print money values and parse them back.

Public API:
    BigMoney - Amount with arbitrary scale
    Money - Amount fixed at the currency's scale
    CurrencyUnit - ISO 4217 currency (registry-backed)
    RoundingMode - How scale-reducing operations round
    MoneyFormatterBuilder - Assembles formatters from elements
    MoneyFormatter - Immutable, locale-bound printer/parser
    MoneyAmountStyle - Digit, separator and grouping style for amounts

Exceptions:
    MoneyError - Base exception class
    CurrencyMismatchError - Operation on two different currencies
    IllegalCurrencyError - Unknown or malformed currency
    MoneyArgumentError - Invalid argument (negative scale, bad rate, ...)
    RoundingNecessaryError - Rounding needed but UNNECESSARY was requested
    MoneyFormatError - Formatter cannot print or parse
    MoneyParseError - Text could not be parsed

Submodules:
    moneyengine.money - BigMoney, Money and exact arithmetic helpers
    moneyengine.format - Formatter, builder, styles and parse context
    moneyengine.diagnostics - Error codes, templates and formatting
    moneyengine.locale_utils - Locale normalization and Babel lookups
"""

# Essential Public API - Minimal exports for clean namespace
from .currency import CurrencyUnit, register_currency, registered_currencies
from .diagnostics import (
    CurrencyMismatchError,
    IllegalCurrencyError,
    MoneyArgumentError,
    MoneyError,
    MoneyFormatError,
    MoneyParseError,
    RoundingNecessaryError,
)
from .format import MoneyAmountStyle, MoneyFormatter, MoneyFormatterBuilder, MoneyParseContext
from .money import BigMoney, BigMoneyProvider, Money, RoundingMode

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneyengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BigMoney",
    "BigMoneyProvider",
    "CurrencyMismatchError",
    "CurrencyUnit",
    "IllegalCurrencyError",
    "Money",
    "MoneyAmountStyle",
    "MoneyArgumentError",
    "MoneyError",
    "MoneyFormatError",
    "MoneyFormatter",
    "MoneyFormatterBuilder",
    "MoneyParseContext",
    "MoneyParseError",
    "RoundingMode",
    "RoundingNecessaryError",
    "__version__",
    "register_currency",
    "registered_currencies",
]
