"""Money formatting and parsing.

Build a MoneyFormatter from printer/parser elements with
MoneyFormatterBuilder, then print or parse money values with it.

Python 3.13+.
"""

from .amount_style import MoneyAmountStyle
from .builder import MoneyFormatterBuilder
from .context import MoneyParseContext, MoneyPrintContext
from .formatter import MoneyFormatter
from .printer_parser import MoneyParser, MoneyPrinter, TextBuffer

__all__ = [
    "MoneyAmountStyle",
    "MoneyFormatter",
    "MoneyFormatterBuilder",
    "MoneyParseContext",
    "MoneyParser",
    "MoneyPrintContext",
    "MoneyPrinter",
    "TextBuffer",
]
