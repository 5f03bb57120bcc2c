"""Code-format validation for ISO 3166-1 and ISO 4217 codes.

Provides the runtime form of the fixed-shape code types:

    CountryCode:  [A-Z]{2}
    CurrencyCode: [A-Z]{3}

Only ASCII uppercase letters are accepted. Python's str.isupper() and
str.isalpha() accept non-ASCII letters (e.g. 'É'), so matching uses an
explicit ASCII character class instead.

Validation is format-only: these helpers never consult the dataset or
CLDR, so a well-formed but unassigned code (e.g. 'ZZ') passes.

Thread Safety:
    All functions are pure with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING, TypeIs

from countrycurrency.constants import (
    COUNTRY_CODE_LENGTH,
    CURRENCY_CODE_LENGTH,
    WIRE_FIELD_COUNTRY,
    WIRE_FIELD_CURRENCIES,
)
from countrycurrency.errors import InvalidRecordError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from countrycurrency.records import CountryCurrencyInfo

__all__ = [
    "CountryCode",
    "CurrencyCode",
    "find_duplicate_country_codes",
    "is_valid_country_code",
    "is_valid_currency_code",
    "require_country_code",
    "require_currency_code",
]

type CountryCode = str
"""ISO 3166-1 alpha-2 country code (e.g., 'US', 'LV', 'DE')."""

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'GBP')."""

# Compiled once at module load. fullmatch() rejects trailing newlines,
# which '$' would let through.
_COUNTRY_CODE_PATTERN: re.Pattern[str] = re.compile(rf"[A-Z]{{{COUNTRY_CODE_LENGTH}}}")
_CURRENCY_CODE_PATTERN: re.Pattern[str] = re.compile(rf"[A-Z]{{{CURRENCY_CODE_LENGTH}}}")


def is_valid_country_code(value: object) -> TypeIs[CountryCode]:
    """Check if value is shaped like an ISO 3166-1 alpha-2 code.

    Args:
        value: Candidate code (any type)

    Returns:
        True if value is a str of exactly two uppercase ASCII letters

    Example:
        >>> is_valid_country_code("US")
        True
        >>> is_valid_country_code("us")
        False
    """
    return isinstance(value, str) and _COUNTRY_CODE_PATTERN.fullmatch(value) is not None


def is_valid_currency_code(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is shaped like an ISO 4217 alphabetic code.

    Args:
        value: Candidate code (any type)

    Returns:
        True if value is a str of exactly three uppercase ASCII letters

    Example:
        >>> is_valid_currency_code("EUR")
        True
        >>> is_valid_currency_code("EU")
        False
    """
    return isinstance(value, str) and _CURRENCY_CODE_PATTERN.fullmatch(value) is not None


def require_country_code(value: object, *, field: str = WIRE_FIELD_COUNTRY) -> CountryCode:
    """Return value unchanged if it is a valid country code.

    Raises:
        InvalidRecordError: If value is not two uppercase ASCII letters
    """
    if not is_valid_country_code(value):
        msg = f"Invalid ISO 3166-1 alpha-2 country code: {value!r}"
        raise InvalidRecordError(msg, field=field)
    return value


def require_currency_code(value: object, *, field: str = WIRE_FIELD_CURRENCIES) -> CurrencyCode:
    """Return value unchanged if it is a valid currency code.

    Raises:
        InvalidRecordError: If value is not three uppercase ASCII letters
    """
    if not is_valid_currency_code(value):
        msg = f"Invalid ISO 4217 currency code: {value!r}"
        raise InvalidRecordError(msg, field=field)
    return value


def find_duplicate_country_codes(
    records: Iterable[CountryCurrencyInfo],
) -> tuple[CountryCode, ...]:
    """Find country codes that occur in more than one record.

    Lookups resolve duplicates by first match, so a duplicate silently
    shadows the later record. Used by the dataset audit and tests.

    Args:
        records: Records to scan, in dataset order

    Returns:
        Duplicated codes in order of first occurrence (empty if none)
    """
    counts = Counter(record.country_iso_code for record in records)
    return tuple(code for code, count in counts.items() if count > 1)
