"""Exception hierarchy for country/currency lookups.

Two failure families:
- CodeNotFoundError: a well-formed query found no matching record
- InvalidRecordError: a record (or its wire dict) violates the data model

Both derive from CountryCurrencyError and from the matching builtin
(LookupError / ValueError), so callers can catch either way.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

__all__ = [
    "CodeKind",
    "CodeNotFoundError",
    "CountryCurrencyError",
    "InvalidRecordError",
]


class CodeKind(StrEnum):
    """Which code space a lookup key belongs to.

    Inherits from ``StrEnum`` so ``str(kind)`` yields ``"country"`` or
    ``"currency"`` directly, for log lines and error payloads.
    """

    COUNTRY = "country"
    CURRENCY = "currency"


class CountryCurrencyError(Exception):
    """Base exception for all countrycurrency errors."""


class CodeNotFoundError(CountryCurrencyError, LookupError):
    """No dataset record matches the requested code.

    Raised synchronously by every single-record lookup. Never retried or
    recovered inside the package.

    Attributes:
        code: The code exactly as the caller supplied it
        kind: Whether ``code`` was a country or a currency code
    """

    def __init__(self, message: str, *, code: str, kind: CodeKind) -> None:
        """Initialize CodeNotFoundError.

        Args:
            message: Human-readable description of the failed lookup
            code: Offending lookup key
            kind: Code space of the lookup key
        """
        super().__init__(message)
        self.code = code
        self.kind = kind


class InvalidRecordError(CountryCurrencyError, ValueError):
    """A CountryCurrencyInfo field or wire dict entry is malformed.

    Attributes:
        field: Name of the offending record field
    """

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field
