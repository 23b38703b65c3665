"""Currency units and the currency registry.

CurrencyUnit is an immutable ISO 4217 currency: alphabetic code, numeric
code and default fraction digits. Instances are obtained from the registry,
which is seeded lazily from the ISO 4217 table in constants.py and may be
extended at runtime with register_currency().

Localized presentation (symbol, display name) and territory lookups come
from Babel's CLDR data.

Thread Safety:
    The registry loads under a lock with double-checked initialization.
    Registration also takes the lock; lookups read immutable snapshots.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TypeAlias

from moneyengine.constants import (
    ISO_4217_CURRENCIES,
    ISO_CURRENCY_CODE_LENGTH,
    MAX_CURRENCY_DECIMALS,
    MAX_NUMERIC_CODE,
    NO_NUMERIC_CODE,
    NUMERIC_CODE_LENGTH,
    PSEUDO_CURRENCY_DECIMALS,
)
from moneyengine.diagnostics import (
    ErrorTemplate,
    IllegalCurrencyError,
    MoneyArgumentError,
)
from moneyengine.locale_utils import get_babel_locale, get_default_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CurrencyCode",
    # Data classes
    "CurrencyUnit",
    # Registry
    "CurrencyRegistry",
    "register_currency",
    "registered_currencies",
]

logger = logging.getLogger(__name__)


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

CurrencyCode: TypeAlias = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'GBP')."""


# ============================================================================
# CURRENCY UNIT
# ============================================================================


@dataclass(frozen=True, slots=True, order=True)
class CurrencyUnit:
    """ISO 4217 currency.

    Immutable, thread-safe, hashable. Ordered by currency code.

    Attributes:
        code: Three-letter currency code (e.g., 'USD')
        numeric_code: ISO numeric code, or -1 if the currency has none
        default_fraction_digits: Minor unit digits, or -1 for
            pseudo-currencies (gold, SDR, testing) that have none
    """

    code: CurrencyCode
    numeric_code: int = NO_NUMERIC_CODE
    default_fraction_digits: int = 0

    def __post_init__(self) -> None:
        """Validate code, numeric code and fraction digits.

        Raises:
            IllegalCurrencyError: If the code is not three uppercase ASCII letters
            MoneyArgumentError: If the numeric code or fraction digits are
                out of range
        """
        if not _is_valid_code(self.code):
            raise IllegalCurrencyError(ErrorTemplate.currency_code_invalid(str(self.code)))
        if (
            isinstance(self.numeric_code, bool)
            or not isinstance(self.numeric_code, int)
            or not NO_NUMERIC_CODE <= self.numeric_code <= MAX_NUMERIC_CODE
        ):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("numeric_code", "must be -1 or 0-999")
            )
        if (
            isinstance(self.default_fraction_digits, bool)
            or not isinstance(self.default_fraction_digits, int)
            or not PSEUDO_CURRENCY_DECIMALS
            <= self.default_fraction_digits
            <= MAX_CURRENCY_DECIMALS
        ):
            raise MoneyArgumentError(
                ErrorTemplate.invalid_argument("decimal_places", "must be -1 or 0-30")
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, currency_code: str) -> CurrencyUnit:
        """Look up a currency by its three-letter code.

        Raises:
            IllegalCurrencyError: If the code is not registered
        """
        return _registry.get(currency_code)

    @classmethod
    def of_numeric_code(cls, numeric_code: int | str) -> CurrencyUnit:
        """Look up a currency by ISO numeric code.

        Strings of one to three digits are accepted, so "36" and "036"
        both find AUD.

        Raises:
            IllegalCurrencyError: If the numeric code is not registered
        """
        return _registry.get_by_numeric(numeric_code)

    @classmethod
    def of_country(cls, territory: str) -> CurrencyUnit:
        """Look up the currency currently in use in a territory.

        Args:
            territory: ISO 3166-1 alpha-2 code (e.g., 'US', 'DE')

        Raises:
            IllegalCurrencyError: If no registered currency is in use there
        """
        return _registry.get_by_country(territory)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def numeric3_code(self) -> str:
        """Numeric code zero-padded to three digits, or "" if none."""
        if self.numeric_code < 0:
            return ""
        return str(self.numeric_code).zfill(NUMERIC_CODE_LENGTH)

    @property
    def decimal_places(self) -> int:
        """Scale used by Money; pseudo-currencies report 0."""
        return max(self.default_fraction_digits, 0)

    @property
    def is_pseudo_currency(self) -> bool:
        return self.default_fraction_digits < 0

    def symbol(self, locale: str | None = None) -> str:
        """Localized currency symbol (e.g., '$' in en_US, 'US$' in en_AU).

        Falls back to the currency code when CLDR has no symbol.

        Args:
            locale: Locale code; None uses the system default locale
        """
        from babel.numbers import get_currency_symbol  # noqa: PLC0415

        babel_locale = get_babel_locale(locale or get_default_locale())
        return get_currency_symbol(self.code, locale=babel_locale)

    def display_name(self, locale: str | None = None) -> str:
        """Localized currency name (e.g., 'US Dollar').

        Falls back to the currency code when CLDR has no name.
        """
        from babel.numbers import get_currency_name  # noqa: PLC0415

        babel_locale = get_babel_locale(locale or get_default_locale())
        return get_currency_name(self.code, locale=babel_locale)

    def __str__(self) -> str:
        return self.code


# ============================================================================
# REGISTRY
# ============================================================================


def _is_valid_code(code: object) -> bool:
    return (
        isinstance(code, str)
        and len(code) == ISO_CURRENCY_CODE_LENGTH
        and code.isascii()
        and code.isalpha()
        and code.isupper()
    )


class CurrencyRegistry:
    """Registry of known currencies keyed by code and numeric code.

    The ISO 4217 table is loaded on first use (thread-safe, idempotent).

    Attributes:
        _loaded: Whether the ISO table has been loaded
        _lock: Threading lock guarding loading and registration
        _by_code: Currency code -> CurrencyUnit
        _by_numeric: Numeric code -> CurrencyUnit
    """

    __slots__ = ("_by_code", "_by_numeric", "_loaded", "_lock")

    def __init__(self) -> None:
        """Initialize an empty registry (ISO table is lazy-loaded)."""
        self._loaded: bool = False
        self._lock: threading.Lock = threading.Lock()
        self._by_code: dict[str, CurrencyUnit] = {}
        self._by_numeric: dict[int, CurrencyUnit] = {}

    def ensure_loaded(self) -> None:
        """Load the ISO 4217 table once.

        Uses double-check locking pattern for thread safety.
        """
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return  # type: ignore[unreachable]

            for code, (numeric, digits) in ISO_4217_CURRENCIES.items():
                unit = CurrencyUnit(code, numeric, digits)
                self._by_code[code] = unit
                self._by_numeric[numeric] = unit
            self._loaded = True
            logger.debug("Loaded %d ISO 4217 currencies", len(self._by_code))

    def get(self, currency_code: str) -> CurrencyUnit:
        """Get a currency by code.

        Raises:
            IllegalCurrencyError: If the code is not registered
        """
        self.ensure_loaded()
        unit = self._by_code.get(currency_code) if isinstance(currency_code, str) else None
        if unit is None:
            raise IllegalCurrencyError(ErrorTemplate.currency_unknown(str(currency_code)))
        return unit

    def get_by_numeric(self, numeric_code: int | str) -> CurrencyUnit:
        """Get a currency by numeric code (int, or a string of 1-3 digits).

        Raises:
            IllegalCurrencyError: If the numeric code is not registered
        """
        self.ensure_loaded()
        match numeric_code:
            case bool():
                key = None
            case int():
                key = numeric_code
            case str() if (
                0 < len(numeric_code) <= NUMERIC_CODE_LENGTH
                and numeric_code.isascii()
                and numeric_code.isdigit()
            ):
                key = int(numeric_code)
            case _:
                key = None
        unit = self._by_numeric.get(key) if key is not None else None
        if unit is None:
            raise IllegalCurrencyError(ErrorTemplate.currency_numeric_unknown(numeric_code))
        return unit

    def get_by_country(self, territory: str) -> CurrencyUnit:
        """Get the registered currency currently in use in a territory.

        Uses Babel's CLDR territory currency data. When a territory has
        several legal tenders, the first one CLDR lists that is registered
        wins.

        Raises:
            IllegalCurrencyError: If no registered currency is in use there
        """
        from babel.numbers import get_territory_currencies  # noqa: PLC0415

        self.ensure_loaded()
        codes: list[str] = []
        if isinstance(territory, str) and territory:
            codes = get_territory_currencies(territory.upper())
        for code in codes:
            unit = self._by_code.get(code)
            if unit is not None:
                return unit
        raise IllegalCurrencyError(ErrorTemplate.currency_country_unknown(str(territory)))

    def register(
        self,
        currency_code: str,
        numeric_code: int,
        decimal_places: int,
        *,
        force: bool = False,
    ) -> CurrencyUnit:
        """Register a currency.

        Args:
            currency_code: Three uppercase ASCII letters
            numeric_code: 0-999, or -1 for none
            decimal_places: 0-30, or -1 for a pseudo-currency
            force: Replace an existing currency with the same code or
                numeric code instead of failing

        Returns:
            The registered CurrencyUnit

        Raises:
            IllegalCurrencyError: If the code is malformed
            MoneyArgumentError: If the numeric code or decimal places are
                out of range, or the currency exists and force is False
        """
        unit = CurrencyUnit(currency_code, numeric_code, decimal_places)
        self.ensure_loaded()
        with self._lock:
            existing = self._by_code.get(currency_code)
            clash = self._by_numeric.get(numeric_code) if numeric_code >= 0 else None
            if not force:
                if existing is not None:
                    raise MoneyArgumentError(
                        ErrorTemplate.currency_already_registered(currency_code)
                    )
                if clash is not None:
                    raise MoneyArgumentError(
                        ErrorTemplate.currency_already_registered(str(numeric_code))
                    )

            if existing is not None:
                logger.warning("Replacing registered currency %r with %r", existing, unit)
                if self._by_numeric.get(existing.numeric_code) == existing:
                    del self._by_numeric[existing.numeric_code]
            if clash is not None and clash.code != currency_code:
                logger.warning(
                    "Numeric code %d moves from %s to %s", numeric_code, clash.code, currency_code
                )

            self._by_code[currency_code] = unit
            if numeric_code >= 0:
                self._by_numeric[numeric_code] = unit

        logger.info(
            "Registered currency %s (numeric %d, %d decimal places)",
            currency_code, numeric_code, decimal_places,
        )
        return unit

    def currencies(self) -> tuple[CurrencyUnit, ...]:
        """All registered currencies sorted by code."""
        self.ensure_loaded()
        with self._lock:
            return tuple(sorted(self._by_code.values()))


# Module-level singleton
_registry = CurrencyRegistry()


def register_currency(
    currency_code: str,
    numeric_code: int,
    decimal_places: int,
    *,
    force: bool = False,
) -> CurrencyUnit:
    """Register a custom currency in the global registry.

    Example:
        >>> unit = register_currency("XBT", -1, 8)
        >>> CurrencyUnit.of("XBT").decimal_places
        8

    See CurrencyRegistry.register for argument validation.
    """
    return _registry.register(currency_code, numeric_code, decimal_places, force=force)


def registered_currencies() -> tuple[CurrencyUnit, ...]:
    """All registered currencies sorted by code."""
    return _registry.currencies()
