"""BigMoneyProvider protocol.

Anything that can produce a BigMoney (BigMoney, Money, or an application's
own value types) can be passed to arithmetic, comparison and formatter
print methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .big_money import BigMoney

__all__ = ["BigMoneyProvider"]


@runtime_checkable
class BigMoneyProvider(Protocol):
    """Protocol for objects convertible to BigMoney.

    Example:
        >>> @dataclass(frozen=True)
        ... class Invoice:
        ...     total: Money
        ...     def to_big_money(self) -> BigMoney:
        ...         return self.total.to_big_money()
        >>> formatter.print(Invoice(Money.of("USD", 5)))
    """

    def to_big_money(self) -> BigMoney:
        """Return the value as a BigMoney."""
        ...  # pragma: no cover  # Protocol stub - not executable
