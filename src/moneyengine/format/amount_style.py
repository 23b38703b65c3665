"""Amount style: how the numeric part of a money value is written.

A style names the zero digit, decimal point, grouping character and
grouping size. Any of these may be left as None ("localized"), in which
case they are resolved from a locale's CLDR data via Babel when printing
or parsing. Resolution returns a new, fully explicit style and is cached
per (style, locale), so a style instance is never mutated.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from typing import ClassVar

from moneyengine.constants import MAX_LOCALE_CACHE_SIZE
from moneyengine.diagnostics import ErrorTemplate, MoneyArgumentError
from moneyengine.locale_utils import get_babel_locale, normalize_locale

__all__ = ["MoneyAmountStyle", "ResolvedAmountStyle"]

# Fallback when CLDR has no grouped decimal pattern for a locale.
_DEFAULT_GROUPING_SIZE = 3
# Babel reports (1000, 1000) for patterns without grouping separators.
_MAX_GROUPING_SIZE = 999


@dataclass(frozen=True, slots=True)
class MoneyAmountStyle:
    """Style of the amount part of a formatted money value.

    Immutable, thread-safe, hashable.

    Attributes:
        zero_character: Digit zero; digits 1-9 follow it in Unicode order.
            None to localize.
        decimal_point_character: Decimal separator. None to localize.
        grouping_character: Group separator. None to localize.
        grouping_size: Digits per group. None to localize.
        grouping: Whether to group integer digits at all
        force_decimal_point: Print a decimal point even when there are no
            fraction digits

    Example:
        >>> style = MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_DOT
        >>> style.with_grouping_size(4).grouping_size
        4
    """

    zero_character: str | None = None
    decimal_point_character: str | None = None
    grouping_character: str | None = None
    grouping_size: int | None = None
    grouping: bool = True
    force_decimal_point: bool = False

    # Presets (assigned after the class body)
    ASCII_DECIMAL_POINT_GROUP3_COMMA: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_POINT_GROUP3_SPACE: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_POINT_NO_GROUPING: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_COMMA_GROUP3_DOT: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_COMMA_GROUP3_SPACE: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_COMMA_NO_GROUPING: ClassVar[MoneyAmountStyle]
    LOCALIZED_GROUPING: ClassVar[MoneyAmountStyle]
    LOCALIZED_NO_GROUPING: ClassVar[MoneyAmountStyle]

    def __post_init__(self) -> None:
        """Validate explicit fields.

        Raises:
            MoneyArgumentError: If a character field is empty (or, for the
                zero character, longer than one character) or the grouping
                size is below 1
        """
        if self.zero_character is not None and (
            not isinstance(self.zero_character, str) or len(self.zero_character) != 1
        ):
            raise MoneyArgumentError(
                ErrorTemplate.style_invalid("zero_character", self.zero_character)
            )
        for name in ("decimal_point_character", "grouping_character"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or not value):
                raise MoneyArgumentError(ErrorTemplate.style_invalid(name, value))
        if self.grouping_size is not None and (
            isinstance(self.grouping_size, bool)
            or not isinstance(self.grouping_size, int)
            or self.grouping_size < 1
        ):
            raise MoneyArgumentError(
                ErrorTemplate.style_invalid("grouping_size", self.grouping_size)
            )

    @property
    def is_localized(self) -> bool:
        """True if any field still needs a locale to resolve."""
        return (
            self.zero_character is None
            or self.decimal_point_character is None
            or self.grouping_character is None
            or self.grouping_size is None
        )

    def localize(self, locale: str) -> MoneyAmountStyle:
        """Resolve localized fields for a locale.

        Explicit fields are kept. The result is cached per (style, locale)
        and safe to share across threads.

        Args:
            locale: Locale code (BCP-47 or POSIX)

        Returns:
            Fully explicit style
        """
        if not self.is_localized:
            return self
        return _localize(self, normalize_locale(locale))

    def resolve(self, locale: str) -> ResolvedAmountStyle:
        """Resolve into the explicit form used when printing and parsing.

        Args:
            locale: Locale code (BCP-47 or POSIX)

        Returns:
            ResolvedAmountStyle with every field set
        """
        # Explicit styles resolve the same way in every locale
        return _resolve(self, normalize_locale(locale) if self.is_localized else "")

    # ------------------------------------------------------------------
    # Copy-with methods
    # ------------------------------------------------------------------

    def with_zero_character(self, zero_character: str | None) -> MoneyAmountStyle:
        return replace(self, zero_character=zero_character)

    def with_decimal_point_character(self, decimal_point: str | None) -> MoneyAmountStyle:
        return replace(self, decimal_point_character=decimal_point)

    def with_grouping_character(self, grouping_character: str | None) -> MoneyAmountStyle:
        return replace(self, grouping_character=grouping_character)

    def with_grouping_size(self, grouping_size: int | None) -> MoneyAmountStyle:
        return replace(self, grouping_size=grouping_size)

    def with_grouping(self, grouping: bool) -> MoneyAmountStyle:
        return replace(self, grouping=grouping)

    def with_force_decimal_point(self, force_decimal_point: bool) -> MoneyAmountStyle:
        return replace(self, force_decimal_point=force_decimal_point)


@dataclass(frozen=True, slots=True)
class ResolvedAmountStyle:
    """A MoneyAmountStyle with every field explicit.

    Produced by MoneyAmountStyle.resolve() for one locale and consumed by
    the amount printer/parser.
    """

    zero_character: str
    decimal_point_character: str
    grouping_character: str
    grouping_size: int
    grouping: bool
    force_decimal_point: bool


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cldr_number_symbols(locale_code: str) -> tuple[str, str, int]:
    """Decimal symbol, group symbol and primary grouping size from CLDR."""
    from babel.numbers import get_decimal_symbol, get_group_symbol  # noqa: PLC0415

    babel_locale = get_babel_locale(locale_code)
    pattern = babel_locale.decimal_formats.get(None)
    grouping_size = pattern.grouping[0] if pattern is not None else _DEFAULT_GROUPING_SIZE
    if not 0 < grouping_size <= _MAX_GROUPING_SIZE:
        grouping_size = _DEFAULT_GROUPING_SIZE
    return get_decimal_symbol(babel_locale), get_group_symbol(babel_locale), grouping_size


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _resolve(style: MoneyAmountStyle, locale_code: str) -> ResolvedAmountStyle:
    """Fill the None fields of style from CLDR number symbols."""
    if style.is_localized:
        decimal_point, grouping_character, grouping_size = _cldr_number_symbols(locale_code)
    else:
        decimal_point, grouping_character, grouping_size = ".", ",", _DEFAULT_GROUPING_SIZE
    return ResolvedAmountStyle(
        # Babel formats with the Latin numbering system
        zero_character=style.zero_character or "0",
        decimal_point_character=style.decimal_point_character or decimal_point,
        grouping_character=style.grouping_character or grouping_character,
        grouping_size=style.grouping_size or grouping_size,
        grouping=style.grouping,
        force_decimal_point=style.force_decimal_point,
    )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _localize(style: MoneyAmountStyle, locale_code: str) -> MoneyAmountStyle:
    resolved = _resolve(style, locale_code)
    return replace(
        style,
        zero_character=resolved.zero_character,
        decimal_point_character=resolved.decimal_point_character,
        grouping_character=resolved.grouping_character,
        grouping_size=resolved.grouping_size,
    )


MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA = MoneyAmountStyle("0", ".", ",", 3, True)
MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_SPACE = MoneyAmountStyle("0", ".", " ", 3, True)
MoneyAmountStyle.ASCII_DECIMAL_POINT_NO_GROUPING = MoneyAmountStyle("0", ".", ",", 3, False)
MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_DOT = MoneyAmountStyle("0", ",", ".", 3, True)
MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_SPACE = MoneyAmountStyle("0", ",", " ", 3, True)
MoneyAmountStyle.ASCII_DECIMAL_COMMA_NO_GROUPING = MoneyAmountStyle("0", ",", ".", 3, False)
MoneyAmountStyle.LOCALIZED_GROUPING = MoneyAmountStyle(grouping=True)
MoneyAmountStyle.LOCALIZED_NO_GROUPING = MoneyAmountStyle(grouping=False)
