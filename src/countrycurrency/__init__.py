"""countrycurrency - static ISO 3166-1 to ISO 4217 lookup.

Read-only reference dataset mapping country codes to the currencies in use
and the minor-unit decimals of each country's primary currency.

Public API:
    CountryCurrencyInfo - Immutable per-country record (wire codec included)
    get_currency - Primary currency for a country
    get_currencies - The full dataset, in order
    get_decimals_by_country_iso_code - Decimals for a country
    get_decimals_by_currency_iso_code - Decimals via first country using a currency
    get_country - Full record for a country
    get_countries_by_currency - Every record listing a currency
    is_valid_country_code / is_valid_currency_code - Code-format type guards

Exceptions:
    CountryCurrencyError - Base exception class
    CodeNotFoundError - Unknown country or currency code
    InvalidRecordError - Malformed record or wire dict

Submodules:
    countrycurrency.data - The compiled-in COUNTRY_CURRENCIES tuple
    countrycurrency.cldr - Dataset audit against Babel CLDR data (needs Babel)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .errors import CodeKind, CodeNotFoundError, CountryCurrencyError, InvalidRecordError
from .lookup import (
    get_countries_by_currency,
    get_country,
    get_currencies,
    get_currency,
    get_decimals_by_country_iso_code,
    get_decimals_by_currency_iso_code,
)
from .records import CountryCurrencyInfo
from .validation import (
    CountryCode,
    CurrencyCode,
    is_valid_country_code,
    is_valid_currency_code,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("countrycurrency")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CodeKind",
    "CodeNotFoundError",
    "CountryCode",
    "CountryCurrencyError",
    "CountryCurrencyInfo",
    "CurrencyCode",
    "InvalidRecordError",
    "__version__",
    "get_countries_by_currency",
    "get_country",
    "get_currencies",
    "get_currency",
    "get_decimals_by_country_iso_code",
    "get_decimals_by_currency_iso_code",
    "is_valid_country_code",
    "is_valid_currency_code",
]
