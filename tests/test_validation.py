"""Tests for code-format validation helpers.

Tests cover:
- Country and currency code type guards
- require_* helpers and the field they report
- Duplicate country code detection
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from countrycurrency.data import COUNTRY_CURRENCIES
from countrycurrency.errors import InvalidRecordError
from countrycurrency.records import CountryCurrencyInfo
from countrycurrency.validation import (
    find_duplicate_country_codes,
    is_valid_country_code,
    is_valid_currency_code,
    require_country_code,
    require_currency_code,
)


class TestIsValidCountryCode:
    """Tests for is_valid_country_code()."""

    @pytest.mark.parametrize("code", ["US", "DE", "ZZ", "AA"])
    def test_accepts_two_uppercase_letters(self, code: str) -> None:
        """Any two uppercase ASCII letters are well-formed."""
        assert is_valid_country_code(code) is True

    @pytest.mark.parametrize(
        "value",
        ["", "U", "USA", "us", "Us", "U1", "12", " US", "US\n", "ÉU", "ＵＳ"],
    )
    def test_rejects_malformed_strings(self, value: str) -> None:
        """Wrong length, case, digits, whitespace and non-ASCII are rejected."""
        assert is_valid_country_code(value) is False

    @pytest.mark.parametrize("value", [None, 12, b"US", ["U", "S"]])
    def test_rejects_non_strings(self, value: object) -> None:
        """Non-str values are never valid."""
        assert is_valid_country_code(value) is False

    @given(code=st.from_regex(r"[A-Z]{2}", fullmatch=True))
    def test_regex_generated_codes_valid(self, code: str) -> None:
        """Every [A-Z]{2} string passes."""
        assert is_valid_country_code(code)


class TestIsValidCurrencyCode:
    """Tests for is_valid_currency_code()."""

    @pytest.mark.parametrize("code", ["USD", "EUR", "ZZZ"])
    def test_accepts_three_uppercase_letters(self, code: str) -> None:
        """Any three uppercase ASCII letters are well-formed."""
        assert is_valid_currency_code(code) is True

    @pytest.mark.parametrize("value", ["", "US", "USDT", "usd", "US1", "USD\n", None, 840])
    def test_rejects_malformed_values(self, value: object) -> None:
        """Wrong length, case, digits, trailing newline and non-str are rejected."""
        assert is_valid_currency_code(value) is False


class TestRequireHelpers:
    """Tests for require_country_code() and require_currency_code()."""

    def test_require_country_code_returns_value(self) -> None:
        """Valid codes are returned unchanged."""
        assert require_country_code("GB") == "GB"

    def test_require_country_code_raises_with_field(self) -> None:
        """Invalid country codes raise with the wire field name."""
        with pytest.raises(InvalidRecordError, match="country code") as exc_info:
            require_country_code("gb")
        assert exc_info.value.field == "CountryIsoCode"

    def test_require_currency_code_returns_value(self) -> None:
        """Valid codes are returned unchanged."""
        assert require_currency_code("GBP") == "GBP"

    def test_require_currency_code_raises_with_field(self) -> None:
        """Invalid currency codes raise with the wire field name."""
        with pytest.raises(InvalidRecordError, match="currency code") as exc_info:
            require_currency_code("GB")
        assert exc_info.value.field == "Currencies"

    def test_custom_field_name(self) -> None:
        """Caller-supplied field name is reported."""
        with pytest.raises(InvalidRecordError) as exc_info:
            require_currency_code("x", field="primary")
        assert exc_info.value.field == "primary"


class TestFindDuplicateCountryCodes:
    """Tests for find_duplicate_country_codes()."""

    def test_no_duplicates(self) -> None:
        """Distinct codes yield an empty tuple."""
        records = [
            CountryCurrencyInfo("US", ("USD",), 2),
            CountryCurrencyInfo("JP", ("JPY",), 0),
        ]
        assert find_duplicate_country_codes(records) == ()

    def test_duplicates_in_first_occurrence_order(self) -> None:
        """Each duplicated code is reported once, in first-seen order."""
        records = [
            CountryCurrencyInfo("JP", ("JPY",), 0),
            CountryCurrencyInfo("US", ("USD",), 2),
            CountryCurrencyInfo("US", ("USN",), 2),
            CountryCurrencyInfo("JP", ("JPY",), 0),
            CountryCurrencyInfo("US", ("USD",), 2),
        ]
        assert find_duplicate_country_codes(records) == ("JP", "US")

    def test_empty_input(self) -> None:
        """No records, no duplicates."""
        assert find_duplicate_country_codes([]) == ()

    def test_dataset_has_no_duplicates(self) -> None:
        """The compiled-in dataset has unique country codes."""
        assert find_duplicate_country_codes(COUNTRY_CURRENCIES) == ()
