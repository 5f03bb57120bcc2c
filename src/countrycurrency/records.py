"""CountryCurrencyInfo record type and its wire codec.

One record per country: the ISO 3166-1 alpha-2 code, the ordered ISO 4217
codes in use (primary first), and the minor-unit decimals of the primary
currency.

The serialized shape is a stable contract:

    {"CountryIsoCode": "US", "Currencies": ["USD"], "Decimals": 2}

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from countrycurrency.constants import (
    WIRE_FIELD_COUNTRY,
    WIRE_FIELD_CURRENCIES,
    WIRE_FIELD_DECIMALS,
)
from countrycurrency.errors import InvalidRecordError
from countrycurrency.validation import (
    CountryCode,
    CurrencyCode,
    require_country_code,
    require_currency_code,
)

__all__ = ["CountryCurrencyInfo"]


@dataclass(frozen=True, slots=True)
class CountryCurrencyInfo:
    """Currency information for a single country.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.
    Every field is validated on construction; a list passed as
    ``currencies`` is frozen to a tuple.

    Attributes:
        country_iso_code: ISO 3166-1 alpha-2 code (e.g., 'US').
        currencies: ISO 4217 codes in use, primary currency first.
        decimals: Minor-unit decimal places of the primary currency.

    Example:
        >>> info = CountryCurrencyInfo("PA", ("PAB", "USD"), 2)
        >>> info.primary_currency
        'PAB'
    """

    country_iso_code: CountryCode
    currencies: tuple[CurrencyCode, ...]
    decimals: int

    def __post_init__(self) -> None:
        """Validate fields and freeze the currencies sequence."""
        require_country_code(self.country_iso_code)

        # str is a Sequence too; "USD" must not become ("U", "S", "D")
        if isinstance(self.currencies, str) or not isinstance(self.currencies, Sequence):
            msg = f"Currencies must be a sequence of codes, got {self.currencies!r}"
            raise InvalidRecordError(msg, field=WIRE_FIELD_CURRENCIES)
        if not self.currencies:
            msg = f"Country {self.country_iso_code} must list at least one currency"
            raise InvalidRecordError(msg, field=WIRE_FIELD_CURRENCIES)
        for code in self.currencies:
            require_currency_code(code)
        object.__setattr__(self, "currencies", tuple(self.currencies))

        # bool is an int subclass; True is not a decimal count
        if (
            isinstance(self.decimals, bool)
            or not isinstance(self.decimals, int)
            or self.decimals < 0
        ):
            msg = f"Decimals must be a non-negative integer, got {self.decimals!r}"
            raise InvalidRecordError(msg, field=WIRE_FIELD_DECIMALS)

    @property
    def primary_currency(self) -> CurrencyCode:
        """Default currency for the country (first listed)."""
        return self.currencies[0]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape.

        Returns:
            Fresh dict; mutating it does not affect the record.
        """
        return {
            WIRE_FIELD_COUNTRY: self.country_iso_code,
            WIRE_FIELD_CURRENCIES: list(self.currencies),
            WIRE_FIELD_DECIMALS: self.decimals,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CountryCurrencyInfo:
        """Build a record from the wire shape.

        Extra keys are ignored.

        Args:
            data: Mapping with CountryIsoCode, Currencies and Decimals keys

        Returns:
            Validated CountryCurrencyInfo

        Raises:
            InvalidRecordError: If a field is missing or malformed
        """
        for key in (WIRE_FIELD_COUNTRY, WIRE_FIELD_CURRENCIES, WIRE_FIELD_DECIMALS):
            if key not in data:
                msg = f"Missing field {key!r} in country currency record"
                raise InvalidRecordError(msg, field=key)
        return cls(
            country_iso_code=data[WIRE_FIELD_COUNTRY],
            currencies=data[WIRE_FIELD_CURRENCIES],
            decimals=data[WIRE_FIELD_DECIMALS],
        )
