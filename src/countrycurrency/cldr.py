"""Dataset audit against Babel's CLDR data.

Cross-checks COUNTRY_CURRENCIES (or any record sequence) with the Unicode
CLDR tables shipped in Babel. This is a maintenance tool: lookups never
read Babel, and the compiled-in dataset stays authoritative.

Findings are informational. CLDR reflects usage and can lag or lead ISO
4217 amendments (new codes, redenominations), so a finding is a prompt to
check the ISO tables, not proof of an error. Only duplicate country codes
are structural.

Requires Babel installation:
    pip install countrycurrency[babel]

Without Babel, audit_dataset raises BabelImportError with installation
guidance. Babel is imported lazily so the rest of the package never needs it.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from countrycurrency.data import COUNTRY_CURRENCIES
from countrycurrency.validation import (
    CountryCode,
    CurrencyCode,
    find_duplicate_country_codes,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from countrycurrency.records import CountryCurrencyInfo

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data classes
    "AuditFinding",
    "FindingKind",
    # Audit
    "audit_dataset",
    # Exceptions
    "BabelImportError",
]

logger = logging.getLogger(__name__)


# ============================================================================
# EXCEPTIONS
# ============================================================================


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides installation guidance to users.
    """

    def __init__(self) -> None:
        super().__init__(
            "Babel is required for the CLDR dataset audit. "
            "Install with: pip install countrycurrency[babel]"
        )


# ============================================================================
# DATA CLASSES
# ============================================================================


class FindingKind(StrEnum):
    """Category of an audit finding."""

    DUPLICATE_COUNTRY = "duplicate-country"
    UNKNOWN_TERRITORY = "unknown-territory"
    UNKNOWN_CURRENCY = "unknown-currency"
    PRECISION_MISMATCH = "precision-mismatch"
    PRIMARY_MISMATCH = "primary-mismatch"

    @property
    def is_structural(self) -> bool:
        """True for findings that break lookup semantics, not just CLDR parity."""
        return self is FindingKind.DUPLICATE_COUNTRY


@dataclass(frozen=True, slots=True)
class AuditFinding:
    """One discrepancy between a record and CLDR.

    Immutable, hashable.

    Attributes:
        kind: Finding category.
        country_iso_code: Country of the offending record.
        currency_code: Currency involved, or None for territory-level findings.
        detail: Human-readable explanation.
    """

    kind: FindingKind
    country_iso_code: CountryCode
    currency_code: CurrencyCode | None
    detail: str


# ============================================================================
# BABEL INTERFACE (LAZY IMPORT)
# ============================================================================


def _get_babel_territories() -> frozenset[str]:
    """Get all territory codes Babel knows (English display names)."""
    try:
        from babel import Locale  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return frozenset(Locale.parse("en").territories)


def _get_babel_currencies() -> frozenset[str]:
    """Get all currency codes Babel knows."""
    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return frozenset(list_currencies())


def _get_babel_precision(code: str) -> int:
    """Get CLDR minor-unit precision for a currency."""
    try:
        from babel.numbers import get_currency_precision  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return get_currency_precision(code)


def _get_babel_tender_currencies(territory: str) -> list[str]:
    """Get currencies that are legal tender in a territory today.

    Returns empty list when CLDR has no currency data for the territory.
    """
    try:
        from babel.numbers import get_territory_currencies  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return list(get_territory_currencies(territory, tender=True))


# ============================================================================
# CHECKS
# ============================================================================


def _check_record(
    record: CountryCurrencyInfo,
    territories: frozenset[str],
    currencies: frozenset[str],
) -> list[AuditFinding]:
    """Compare one record with CLDR."""
    country = record.country_iso_code
    findings: list[AuditFinding] = []

    if country not in territories:
        findings.append(
            AuditFinding(
                kind=FindingKind.UNKNOWN_TERRITORY,
                country_iso_code=country,
                currency_code=None,
                detail=f"{country}: not a CLDR territory",
            )
        )

    for code in record.currencies:
        if code not in currencies:
            findings.append(
                AuditFinding(
                    kind=FindingKind.UNKNOWN_CURRENCY,
                    country_iso_code=country,
                    currency_code=code,
                    detail=f"{country}: {code} not recognized by Babel",
                )
            )

    primary = record.primary_currency
    if primary in currencies:
        babel_precision = _get_babel_precision(primary)
        if babel_precision != record.decimals:
            findings.append(
                AuditFinding(
                    kind=FindingKind.PRECISION_MISMATCH,
                    country_iso_code=country,
                    currency_code=primary,
                    detail=(
                        f"{country}: {primary} decimals={record.decimals},"
                        f" Babel CLDR={babel_precision}"
                    ),
                )
            )

    tender = _get_babel_tender_currencies(country)
    # No CLDR tender data means nothing to compare against
    if tender and primary not in tender:
        findings.append(
            AuditFinding(
                kind=FindingKind.PRIMARY_MISMATCH,
                country_iso_code=country,
                currency_code=primary,
                detail=f"{country}: primary {primary}, Babel tender={','.join(tender)}",
            )
        )

    return findings


def audit_dataset(
    records: Sequence[CountryCurrencyInfo] = COUNTRY_CURRENCIES,
) -> tuple[AuditFinding, ...]:
    """Audit records against Babel's CLDR data.

    Args:
        records: Records to audit (default: the compiled-in dataset).

    Returns:
        Findings in record order; duplicate-country findings come first.

    Raises:
        BabelImportError: If Babel not installed.
    """
    territories = _get_babel_territories()
    currencies = _get_babel_currencies()

    findings: list[AuditFinding] = [
        AuditFinding(
            kind=FindingKind.DUPLICATE_COUNTRY,
            country_iso_code=code,
            currency_code=None,
            detail=f"{code}: appears more than once; later records are unreachable",
        )
        for code in find_duplicate_country_codes(records)
    ]
    for record in records:
        findings.extend(_check_record(record, territories, currencies))

    logger.info(
        "Audited %d records against CLDR: %d finding(s)", len(records), len(findings)
    )
    return tuple(findings)
