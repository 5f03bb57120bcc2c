"""Tests for the countrycurrency exception hierarchy."""

import pytest

from countrycurrency import (
    CodeKind,
    CodeNotFoundError,
    CountryCurrencyError,
    InvalidRecordError,
    get_country,
)


class TestCodeKind:
    """Tests for CodeKind StrEnum."""

    def test_str_is_plain_value(self) -> None:
        """str() yields the bare value, not the 'CodeKind.X' repr."""
        assert str(CodeKind.COUNTRY) == "country"
        assert str(CodeKind.CURRENCY) == "currency"

    def test_compares_equal_to_string(self) -> None:
        """Members compare equal to their string values."""
        assert CodeKind.COUNTRY == "country"


class TestCodeNotFoundError:
    """Tests for CodeNotFoundError."""

    def test_is_lookup_error(self) -> None:
        """CodeNotFoundError can be caught as a builtin LookupError."""
        assert issubclass(CodeNotFoundError, LookupError)
        assert issubclass(CodeNotFoundError, CountryCurrencyError)

    def test_carries_code_and_kind(self) -> None:
        """Constructor stores the offending code and its kind."""
        exc = CodeNotFoundError("missing", code="ZZ", kind=CodeKind.COUNTRY)
        assert exc.code == "ZZ"
        assert exc.kind is CodeKind.COUNTRY
        assert str(exc) == "missing"

    def test_raised_error_is_catchable_as_base(self) -> None:
        """A failed lookup can be handled through the package base class."""
        with pytest.raises(CountryCurrencyError):
            get_country("ZZ")


class TestInvalidRecordError:
    """Tests for InvalidRecordError."""

    def test_is_value_error(self) -> None:
        """InvalidRecordError can be caught as a builtin ValueError."""
        assert issubclass(InvalidRecordError, ValueError)
        assert issubclass(InvalidRecordError, CountryCurrencyError)

    def test_carries_field(self) -> None:
        """Constructor stores the offending field name."""
        exc = InvalidRecordError("bad", field="Decimals")
        assert exc.field == "Decimals"
        assert str(exc) == "bad"

    def test_not_a_lookup_error(self) -> None:
        """Record errors are not confused with lookup misses."""
        assert not issubclass(InvalidRecordError, LookupError)
