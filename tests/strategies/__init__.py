"""Hypothesis strategies for countrycurrency property-based testing.

Usage:
    from tests.strategies import dataset_records, unknown_country_codes
"""

from .codes import (
    currency_by_sharing,
    dataset_country_codes,
    dataset_currency_codes,
    dataset_records,
    unknown_country_codes,
    unknown_currency_codes,
    valid_records,
)

__all__ = [
    "currency_by_sharing",
    "dataset_country_codes",
    "dataset_currency_codes",
    "dataset_records",
    "unknown_country_codes",
    "unknown_currency_codes",
    "valid_records",
]
