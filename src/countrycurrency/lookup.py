"""Query API over the compiled-in country/currency dataset.

Every lookup is a linear scan of COUNTRY_CURRENCIES in dataset order:

- Matching is exact and case-sensitive ('us' does not find 'US')
- No trimming or normalization of the caller's code
- First matching record wins (relevant for shared currencies like EUR)

The dataset has a few hundred records and is immutable, so no index or
cache is kept. Single-record lookups raise CodeNotFoundError on a miss.

Thread-safe: pure functions over immutable data.

Python 3.13+.
"""

from __future__ import annotations

import logging

from countrycurrency.data import COUNTRY_CURRENCIES
from countrycurrency.errors import CodeKind, CodeNotFoundError
from countrycurrency.records import CountryCurrencyInfo
from countrycurrency.validation import CountryCode, CurrencyCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Country lookups
    "get_country",
    "get_currency",
    "get_decimals_by_country_iso_code",
    # Currency lookups
    "get_decimals_by_currency_iso_code",
    "get_countries_by_currency",
    # Dataset access
    "get_currencies",
]

logger = logging.getLogger(__name__)


# ============================================================================
# INTERNAL SCANS
# ============================================================================


def _find_by_country(country_code: str) -> CountryCurrencyInfo | None:
    """Return the first record with this exact country code, or None."""
    for record in COUNTRY_CURRENCIES:
        if record.country_iso_code == country_code:
            return record
    return None


def _find_by_currency(currency_code: str) -> CountryCurrencyInfo | None:
    """Return the first record listing this exact currency code, or None."""
    for record in COUNTRY_CURRENCIES:
        if currency_code in record.currencies:
            return record
    return None


def _not_found(message: str, code: str, kind: CodeKind) -> CodeNotFoundError:
    """Build the NotFound error for a failed lookup and log the miss."""
    logger.debug("Lookup miss (%s code): %r", kind, code)
    return CodeNotFoundError(message, code=code, kind=kind)


# ============================================================================
# COUNTRY LOOKUPS
# ============================================================================


def get_currency(country_code: CountryCode) -> CurrencyCode:
    """Get the primary currency for a country.

    Args:
        country_code: ISO 3166-1 alpha-2 code (e.g., 'US'). Case-sensitive.

    Returns:
        ISO 4217 code of the country's primary currency.

    Raises:
        CodeNotFoundError: If no record has this country code.

    Example:
        >>> get_currency("US")
        'USD'
    """
    record = _find_by_country(country_code)
    if record is None:
        msg = f"Unable to find currency for isocode: {country_code}"
        raise _not_found(msg, country_code, CodeKind.COUNTRY)
    return record.primary_currency


def get_decimals_by_country_iso_code(country_code: CountryCode) -> int:
    """Get the minor-unit decimals used for a country's primary currency.

    Args:
        country_code: ISO 3166-1 alpha-2 code (e.g., 'JP'). Case-sensitive.

    Returns:
        Non-negative number of decimal places.

    Raises:
        CodeNotFoundError: If no record has this country code.
    """
    record = _find_by_country(country_code)
    if record is None:
        msg = f"Unable to find decimals for isocode: {country_code}"
        raise _not_found(msg, country_code, CodeKind.COUNTRY)
    return record.decimals


def get_country(country_code: CountryCode) -> CountryCurrencyInfo:
    """Get the full record for a country.

    Args:
        country_code: ISO 3166-1 alpha-2 code (e.g., 'US'). Case-sensitive.

    Returns:
        The dataset's CountryCurrencyInfo (immutable, shared).

    Raises:
        CodeNotFoundError: If no record has this country code.
    """
    record = _find_by_country(country_code)
    if record is None:
        msg = f"Unable to find country for isocode: {country_code}"
        raise _not_found(msg, country_code, CodeKind.COUNTRY)
    return record


# ============================================================================
# CURRENCY LOOKUPS
# ============================================================================


def get_decimals_by_currency_iso_code(currency_code: CurrencyCode) -> int:
    """Get decimals for a currency via the first country that lists it.

    The value is the ``decimals`` of the first record in dataset order whose
    currencies contain the code. For a shared currency such as EUR this is
    the first Eurozone record; for a secondary code (e.g. CLF under CL) it
    is that country's primary-currency decimals.

    Args:
        currency_code: ISO 4217 code (e.g., 'USD'). Case-sensitive.

    Returns:
        Non-negative number of decimal places.

    Raises:
        CodeNotFoundError: If no record lists this currency.
    """
    record = _find_by_currency(currency_code)
    if record is None:
        msg = f"Unable to find decimals for a currency with isocode: {currency_code}"
        raise _not_found(msg, currency_code, CodeKind.CURRENCY)
    return record.decimals


def get_countries_by_currency(
    currency_code: CurrencyCode,
) -> tuple[CountryCurrencyInfo, ...]:
    """Get every record that lists a currency, in dataset order.

    Args:
        currency_code: ISO 4217 code (e.g., 'EUR'). Case-sensitive.

    Returns:
        Matching records; empty tuple if none.
    """
    return tuple(
        record for record in COUNTRY_CURRENCIES if currency_code in record.currencies
    )


# ============================================================================
# DATASET ACCESS
# ============================================================================


def get_currencies() -> tuple[CountryCurrencyInfo, ...]:
    """Get the full dataset in its defined order.

    Returns the immutable dataset tuple itself; records are frozen, so
    callers cannot alter shared state through it.
    """
    return COUNTRY_CURRENCIES
