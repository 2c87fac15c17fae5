"""Tests for ISO 4217 currency code resolution."""

import pytest

from isoidentity import (
    country_by_code,
    currencies_by_country,
    currency_by_code,
    currency_by_numeric,
    find_currencies,
    is_fund,
    is_precious_metal,
    list_currencies,
)
from isoidentity.currencies.currencyidentity import build_currency_table, validate_currency_document


class TestCurrencyByCode:
    """Alphabetic lookups"""

    def test_yen(self):
        yen = currency_by_code("JPY")
        assert yen is not None
        assert yen.name == "Yen"
        assert yen.numeric == 392
        assert yen.minor_unit == 0
        assert [c.alpha2 for c in yen.countries] == ["JP"]
        assert str(yen) == "JPY"

    def test_case_flag(self):
        assert currency_by_code("jpy") is None
        assert currency_by_code("jpy", case_sensitive=False) is currency_by_code("JPY")
        assert currency_by_code("Jpy", case_sensitive=False) is currency_by_code("JPY")

    def test_misses(self):
        assert currency_by_code(None) is None
        assert currency_by_code("") is None
        assert currency_by_code("ZZZ") is None
        assert currency_by_code("YEN") is None

    def test_minor_units(self):
        assert currency_by_code("USD").minor_unit == 2
        assert currency_by_code("CLF").minor_unit == 0
        assert currency_by_code("XAU").minor_unit is None

    def test_undefined(self):
        undefined = currency_by_code("UNDEFINED")
        assert undefined.is_undefined
        assert undefined.numeric is None
        assert currency_by_code("undefined", case_sensitive=False) is undefined

    def test_lookup_is_idempotent_over_table(self, currencies):
        for c in currencies.entries:
            assert currency_by_code(c.code) is c
            assert currency_by_code(c.code.lower(), case_sensitive=False) is c


class TestCurrencyByNumeric:
    """Numeric lookups"""

    def test_numeric(self):
        assert currency_by_numeric(978).code == "EUR"
        assert currency_by_numeric(392).code == "JPY"
        assert currency_by_numeric(999).code == "XXX"

    def test_non_positive_numbers_miss(self):
        assert currency_by_numeric(0) is None
        assert currency_by_numeric(-978) is None
        assert currency_by_numeric(None) is None

    def test_unassigned_number_misses(self):
        assert currency_by_numeric(1) is None


class TestTags:
    """Fund and precious metal flags are fixed per entry"""

    def test_fund(self):
        assert is_fund(currency_by_code("BOV"))
        assert is_fund(currency_by_code("USN"))
        assert not is_fund(currency_by_code("USD"))
        assert not is_fund(currency_by_code("XAU"))

    def test_precious_metal(self):
        assert is_precious_metal(currency_by_code("XAU"))
        assert not is_precious_metal(currency_by_code("EUR"))
        assert not is_precious_metal(currency_by_code("BOV"))

    def test_defaults_are_false(self, currencies):
        flagged = [c.code for c in currencies.entries if c.fund or c.precious_metal]
        assert len(flagged) == 13
        assert not any(c.fund and c.precious_metal for c in currencies.entries)

    def test_listings(self):
        assert list_currencies(precious_metal=True)["code"].tolist() == ["XAG", "XAU", "XPD", "XPT"]
        assert len(list_currencies(fund=True)) == 9
        plain = list_currencies(fund=False, precious_metal=False)
        assert "EUR" in plain["code"].tolist()
        assert "BOV" not in plain["code"].tolist()


class TestCurrenciesByCountry:
    """Country cross-reference"""

    def test_by_code(self):
        assert [c.code for c in currencies_by_country("CH")] == ["CHE", "CHF", "CHW"]

    def test_by_country_entry(self):
        assert [c.code for c in currencies_by_country(country_by_code("JP"))] == ["JPY"]

    def test_any_country_code_form(self):
        assert currencies_by_country("CHE") == currencies_by_country("CH")
        assert currencies_by_country("ch", case_sensitive=False) == currencies_by_country("CH")

    def test_euro_countries(self):
        euro = currency_by_code("EUR")
        assert country_by_code("DE") in euro.countries
        assert country_by_code("FR") in euro.countries

    def test_misses_are_empty(self):
        assert currencies_by_country(None) == []
        assert currencies_by_country("ZZ") == []
        assert currencies_by_country("ch") == []


def test_find_currencies():
    assert [c.code for c in find_currencies(".*Ruble")] == ["BYN", "BYR", "RUB", "RUR"]
    assert find_currencies("Doubloon") == []
    with pytest.raises(ValueError):
        find_currencies(None)


class TestCurrencyTable:
    """Structural checks"""

    def test_unknown_country_is_rejected(self, countries):
        doc = {"currencies": [{"code": "ZZZ", "name": "Nowhere", "numeric": 1, "countries": ["QQ"]}]}
        assert validate_currency_document(doc, countries)
        with pytest.raises(ValueError, match="Invalid currency table"):
            build_currency_table(doc, countries)

    def test_fund_and_metal_conflict(self, countries):
        doc = {"currencies": [{"code": "ZZZ", "name": "Odd", "fund": True, "precious_metal": True}]}
        assert validate_currency_document(doc, countries)

    def test_duplicate_numeric(self, countries):
        doc = {"currencies": [
            {"code": "AAA", "name": "A", "numeric": 5},
            {"code": "BBB", "name": "B", "numeric": 5},
        ]}
        issues = validate_currency_document(doc, countries)
        assert any("numeric" in issue for issue in issues)
