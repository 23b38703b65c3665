"""Tests for MoneyAmountStyle: presets, validation and localization.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel.numbers import get_decimal_symbol, get_group_symbol

from moneyengine import MoneyAmountStyle, MoneyArgumentError
from moneyengine.format.amount_style import ResolvedAmountStyle


class TestPresets:
    """Predefined styles."""

    def test_ascii_decimal_point_group3_comma(self) -> None:
        """Point decimal, comma groups of three."""
        style = MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA
        assert style.zero_character == "0"
        assert style.decimal_point_character == "."
        assert style.grouping_character == ","
        assert style.grouping_size == 3
        assert style.grouping
        assert not style.force_decimal_point

    def test_ascii_decimal_comma_group3_dot(self) -> None:
        """Comma decimal, dot groups of three."""
        style = MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_DOT
        assert (style.decimal_point_character, style.grouping_character) == (",", ".")

    def test_no_grouping_presets(self) -> None:
        """NO_GROUPING presets disable grouping."""
        assert not MoneyAmountStyle.ASCII_DECIMAL_POINT_NO_GROUPING.grouping
        assert not MoneyAmountStyle.ASCII_DECIMAL_COMMA_NO_GROUPING.grouping

    def test_localized_presets(self) -> None:
        """Localized presets leave every character field unresolved."""
        assert MoneyAmountStyle.LOCALIZED_GROUPING.is_localized
        assert MoneyAmountStyle.LOCALIZED_GROUPING.grouping
        assert not MoneyAmountStyle.LOCALIZED_NO_GROUPING.grouping
        assert not MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_SPACE.is_localized


class TestCopyMethods:
    """with_* methods return modified copies."""

    def test_with_methods_do_not_mutate(self) -> None:
        """The original style is unchanged."""
        base = MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA
        changed = (
            base.with_zero_character("٠")
            .with_decimal_point_character("٫")
            .with_grouping_character("٬")
            .with_grouping_size(2)
            .with_grouping(False)
            .with_force_decimal_point(True)
        )
        assert changed == MoneyAmountStyle("٠", "٫", "٬", 2, False, True)
        assert base.grouping_character == ","

    def test_with_none_makes_field_localized(self) -> None:
        """Setting a field to None makes it localized again."""
        style = MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA.with_grouping_character(None)
        assert style.is_localized

    def test_hashable_and_equal(self) -> None:
        """Equal styles compare and hash equal."""
        a = MoneyAmountStyle("0", ".", ",", 3)
        assert a == MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA
        assert hash(a) == hash(MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA)


class TestValidation:
    """Invalid field values raise MoneyArgumentError."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"zero_character": ""},
            {"zero_character": "00"},
            {"decimal_point_character": ""},
            {"grouping_character": ""},
            {"grouping_size": 0},
            {"grouping_size": -3},
            {"grouping_size": True},
        ],
    )
    def test_invalid_fields(self, kwargs: dict[str, object]) -> None:
        """Empty characters and non-positive group sizes are rejected."""
        with pytest.raises(MoneyArgumentError, match="Invalid amount style"):
            MoneyAmountStyle(**kwargs)  # type: ignore[arg-type]

    def test_multi_character_separators_allowed(self) -> None:
        """Decimal and grouping separators may be longer than one character."""
        style = MoneyAmountStyle("0", "::", "  ", 3)
        assert style.decimal_point_character == "::"


class TestLocalize:
    """Resolving localized fields from CLDR."""

    @pytest.mark.parametrize("locale", ["en_US", "de_DE", "fr_FR", "de_CH"])
    def test_localize_uses_cldr_symbols(self, locale: str) -> None:
        """Separators come from Babel's number symbols."""
        style = MoneyAmountStyle.LOCALIZED_GROUPING.localize(locale)
        assert not style.is_localized
        assert style.zero_character == "0"
        assert style.decimal_point_character == get_decimal_symbol(locale)
        assert style.grouping_character == get_group_symbol(locale)
        assert style.grouping_size == 3
        assert style.grouping

    def test_localize_keeps_explicit_fields(self) -> None:
        """Only None fields are resolved."""
        style = MoneyAmountStyle(grouping_character="'", grouping_size=4).localize("de_DE")
        assert style.grouping_character == "'"
        assert style.grouping_size == 4
        assert style.decimal_point_character == ","

    def test_localize_keeps_flags(self) -> None:
        """grouping and force_decimal_point survive localization."""
        style = MoneyAmountStyle.LOCALIZED_NO_GROUPING.with_force_decimal_point(True)
        resolved = style.localize("en_US")
        assert not resolved.grouping
        assert resolved.force_decimal_point

    def test_localize_explicit_style_returns_self(self) -> None:
        """Fully explicit styles need no locale."""
        style = MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_SPACE
        assert style.localize("ja_JP") is style

    def test_localize_is_cached_across_spellings(self) -> None:
        """BCP-47 and POSIX spellings share one cached snapshot."""
        first = MoneyAmountStyle.LOCALIZED_GROUPING.localize("en-GB")
        second = MoneyAmountStyle.LOCALIZED_GROUPING.localize("en_GB")
        assert first is second

    def test_localize_indian_primary_group(self) -> None:
        """Locales with secondary grouping use the primary group size."""
        style = MoneyAmountStyle.LOCALIZED_GROUPING.localize("en_IN")
        assert style.grouping_size == 3


class TestResolve:
    """resolve() gives the fully explicit form used by the amount element."""

    def test_resolve_localized(self) -> None:
        """Resolved fields match localize()."""
        style = MoneyAmountStyle.LOCALIZED_NO_GROUPING.with_force_decimal_point(True)
        resolved = style.resolve("de-DE")
        localized = style.localize("de_DE")
        assert resolved == ResolvedAmountStyle(
            zero_character="0",
            decimal_point_character=localized.decimal_point_character or "",
            grouping_character=localized.grouping_character or "",
            grouping_size=3,
            grouping=False,
            force_decimal_point=True,
        )
        assert resolved.decimal_point_character == ","

    def test_resolve_explicit_ignores_locale(self) -> None:
        """Explicit styles resolve without consulting the locale."""
        resolved = MoneyAmountStyle("٠", "::", "__", 4).resolve("xx_YY")
        assert resolved.zero_character == "٠"
        assert resolved.decimal_point_character == "::"
        assert resolved.grouping_character == "__"
        assert resolved.grouping_size == 4

    def test_resolve_is_cached(self) -> None:
        """Resolution is shared across calls and spellings."""
        style = MoneyAmountStyle.LOCALIZED_GROUPING
        assert style.resolve("fr-FR") is style.resolve("fr_FR")
