"""Shared constants for countrycurrency.

Single source of truth for code lengths and the field names of the
record wire format. Kept dependency-free so every other module can
import it without cycles.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code shapes
    "COUNTRY_CODE_LENGTH",
    "CURRENCY_CODE_LENGTH",
    # Wire format
    "WIRE_FIELD_COUNTRY",
    "WIRE_FIELD_CURRENCIES",
    "WIRE_FIELD_DECIMALS",
]

# ============================================================================
# CODE SHAPES
# ============================================================================

# ISO 3166-1 alpha-2: two uppercase ASCII letters.
COUNTRY_CODE_LENGTH: int = 2

# ISO 4217 alphabetic code: three uppercase ASCII letters.
CURRENCY_CODE_LENGTH: int = 3

# ============================================================================
# WIRE FORMAT
# ============================================================================

# Field names consumers of the serialized record depend on.
# Changing any of these is a breaking change.
WIRE_FIELD_COUNTRY: str = "CountryIsoCode"
WIRE_FIELD_CURRENCIES: str = "Currencies"
WIRE_FIELD_DECIMALS: str = "Decimals"
