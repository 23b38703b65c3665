"""Exact monetary amounts.

BigMoney carries an arbitrary scale; Money is fixed at the currency scale.
Both are immutable and use exact integer arithmetic.

Python 3.13+.
"""

from .big_money import BigMoney
from .money import Money
from .provider import BigMoneyProvider
from .rounding import RoundingMode

__all__ = [
    "BigMoney",
    "BigMoneyProvider",
    "Money",
    "RoundingMode",
]
