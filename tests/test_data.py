"""Integrity tests for the compiled-in COUNTRY_CURRENCIES dataset."""

import pytest

from countrycurrency.data import COUNTRY_CURRENCIES
from countrycurrency.records import CountryCurrencyInfo
from countrycurrency.validation import is_valid_country_code, is_valid_currency_code


class TestDatasetShape:
    """Structural invariants of the dataset."""

    def test_is_immutable_tuple(self) -> None:
        """Dataset is a tuple of CountryCurrencyInfo."""
        assert isinstance(COUNTRY_CURRENCIES, tuple)
        assert all(isinstance(r, CountryCurrencyInfo) for r in COUNTRY_CURRENCIES)

    def test_covers_assigned_countries(self) -> None:
        """Every ISO 3166-1 country with a currency is present (Antarctica excluded)."""
        assert len(COUNTRY_CURRENCIES) == 248
        codes = {r.country_iso_code for r in COUNTRY_CURRENCIES}
        assert "AQ" not in codes

    def test_country_codes_unique(self) -> None:
        """No country code appears twice."""
        codes = [r.country_iso_code for r in COUNTRY_CURRENCIES]
        assert len(codes) == len(set(codes))

    def test_sorted_by_country_code(self) -> None:
        """Records are ordered by country code, so fixtures are reproducible."""
        codes = [r.country_iso_code for r in COUNTRY_CURRENCIES]
        assert codes == sorted(codes)

    def test_all_codes_well_formed(self) -> None:
        """Every code satisfies the format guards."""
        for record in COUNTRY_CURRENCIES:
            assert is_valid_country_code(record.country_iso_code)
            assert record.currencies
            assert all(is_valid_currency_code(c) for c in record.currencies)
            assert record.decimals >= 0

    def test_no_repeated_currency_within_record(self) -> None:
        """A record never lists the same currency twice."""
        for record in COUNTRY_CURRENCIES:
            assert len(record.currencies) == len(set(record.currencies))


class TestDatasetContent:
    """Spot checks of well-known entries."""

    @pytest.mark.parametrize(
        ("country", "currencies", "decimals"),
        [
            ("US", ("USD",), 2),
            ("GB", ("GBP",), 2),
            ("JP", ("JPY",), 0),
            ("KR", ("KRW",), 0),
            ("KW", ("KWD",), 3),
            ("BH", ("BHD",), 3),
            ("CL", ("CLP", "CLF"), 0),
            ("PA", ("PAB", "USD"), 2),
            ("BT", ("BTN", "INR"), 2),
            ("CH", ("CHF", "CHE", "CHW"), 2),
            ("HR", ("EUR",), 2),
            ("BG", ("EUR",), 2),
            ("SN", ("XOF",), 0),
            ("NC", ("XPF",), 0),
        ],
    )
    def test_known_entries(
        self, country: str, currencies: tuple[str, ...], decimals: int
    ) -> None:
        """Known countries carry the expected currencies and decimals."""
        record = next(r for r in COUNTRY_CURRENCIES if r.country_iso_code == country)
        assert record.currencies == currencies
        assert record.decimals == decimals

    def test_first_record_is_andorra(self) -> None:
        """AD (Andorra) is the first record and the first to list EUR."""
        assert COUNTRY_CURRENCIES[0] == CountryCurrencyInfo("AD", ("EUR",), 2)
