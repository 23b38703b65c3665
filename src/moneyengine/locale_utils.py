"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from moneyengine.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_default_locale",
    "get_system_locale",
    "normalize_locale",
    "validate_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling normalizes at the system boundary using this function,
    then uses the normalized form for cache keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Avoids repeated
    parsing overhead on the print/parse hot path.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            # Strip encoding suffix if present
            if "." in system_locale:
                system_locale = system_locale.split(".")[0]
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE


def get_default_locale() -> str:
    """Get the system locale if Babel knows it, else the en_US fallback.

    Used when a formatter is built without an explicit locale. Unknown
    system locales (e.g. "C.UTF-8" variants on minimal containers) log a
    warning and fall back to en_US instead of failing.

    Returns:
        POSIX locale code that Babel can parse.
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    system_locale = get_system_locale()
    try:
        get_babel_locale(system_locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown system locale '%s': %s. Falling back to %s",
            system_locale, e, DEFAULT_LOCALE,
        )
        return DEFAULT_LOCALE
    return system_locale


def validate_locale(locale_code: str) -> str:
    """Normalize a locale code and check that Babel knows it.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        POSIX locale code

    Raises:
        MoneyArgumentError: If the locale is malformed or unknown to CLDR
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    from moneyengine.diagnostics import ErrorTemplate, MoneyArgumentError  # noqa: PLC0415

    if not isinstance(locale_code, str) or not locale_code:
        raise MoneyArgumentError(ErrorTemplate.locale_unknown(str(locale_code)))
    normalized = normalize_locale(locale_code)
    try:
        get_babel_locale(normalized)
    except (UnknownLocaleError, ValueError) as e:
        raise MoneyArgumentError(ErrorTemplate.locale_unknown(locale_code)) from e
    return normalized
