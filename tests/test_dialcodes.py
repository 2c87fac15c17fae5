"""Tests for international dialing prefixes."""

import pytest

from isoidentity import (
    country_by_code,
    country_by_phone,
    dialcode_by_phone,
    dialcode_by_prefix,
    dialcodes_by_country,
    list_dialcodes,
    prefix_by_phone,
    remove_dial_prefix,
)
from isoidentity.dialcodes.dialcodeidentity import build_dialcode_table, validate_dialcode_document


class TestDialcodeByPrefix:
    """Exact prefix lookups"""

    def test_with_and_without_plus(self):
        assert dialcode_by_prefix("+81").country.alpha2 == "JP"
        assert dialcode_by_prefix("81") is dialcode_by_prefix("+81")

    def test_shared_codes_resolve_to_preferred(self):
        """+1 is shared by the NANP countries, +7 by Russia and Kazakhstan"""
        assert dialcode_by_prefix("1").country.alpha2 == "US"
        assert dialcode_by_prefix("7").country.alpha2 == "RU"

    def test_misses(self):
        assert dialcode_by_prefix(None) is None
        assert dialcode_by_prefix("") is None
        assert dialcode_by_prefix("0") is None

    def test_str(self):
        assert str(dialcode_by_prefix("44")) == "+44"


class TestPhoneNumbers:
    """Longest-prefix matching on phone numbers"""

    def test_country_by_phone(self):
        assert country_by_phone("+44 20 7946 0000").alpha2 == "GB"
        assert country_by_phone("+81 3 1234 5678").alpha2 == "JP"
        assert country_by_phone("+7 495 123 4567").alpha2 == "RU"
        assert country_by_phone("+1 212 555 0100").alpha2 == "US"

    def test_three_digit_prefix(self):
        assert country_by_phone("+372 5555 1234").alpha2 == "EE"
        assert prefix_by_phone("+3725551234") == "+372"

    def test_prefix_by_phone(self):
        assert prefix_by_phone("+4915112345678", with_plus=False) == "49"
        assert prefix_by_phone("+4915112345678") == "+49"

    def test_requires_plus(self):
        assert dialcode_by_phone("020 7946 0000") is None
        assert dialcode_by_phone("0044 20 7946 0000") is None
        assert country_by_phone("81312345678") is None
        assert prefix_by_phone("81312345678") is None

    def test_empty(self):
        assert dialcode_by_phone(None) is None
        assert dialcode_by_phone("") is None
        assert dialcode_by_phone("+") is None

    def test_surrounding_whitespace(self):
        assert country_by_phone("  +41 44 668 1800 ").alpha2 == "CH"

    def test_remove_dial_prefix(self):
        assert remove_dial_prefix("+372 5555 1234") == "5555 1234"
        assert remove_dial_prefix("+4915112345678") == "15112345678"
        assert remove_dial_prefix("5555 1234") == "5555 1234"


class TestDialcodesByCountry:
    """Country cross-reference"""

    def test_by_code(self):
        assert [d.prefix for d in dialcodes_by_country("JP")] == ["81"]
        assert [d.prefix for d in dialcodes_by_country("KZ")] == ["7"]

    def test_by_entry(self):
        assert dialcodes_by_country(country_by_code("CHE")) == dialcodes_by_country("CH")

    def test_misses_are_empty(self):
        assert dialcodes_by_country(None) == []
        assert dialcodes_by_country("ZZ") == []
        assert dialcodes_by_country("jp") == []


class TestDialcodeTable:
    """Structural checks"""

    def test_listing(self, dialcodes):
        df = list_dialcodes()
        assert len(df) == len(dialcodes.entries)
        assert list(df.columns) == ["country", "prefix", "preferred"]
        assert sorted(df[df["preferred"]]["country"]) == ["RU", "US"]

    def test_shared_code_needs_one_preferred(self, countries):
        doc = {"dialcodes": [
            {"country": "RU", "prefix": "7"},
            {"country": "KZ", "prefix": "7"},
        ]}
        assert validate_dialcode_document(doc, countries)
        with pytest.raises(ValueError, match="Invalid dial code table"):
            build_dialcode_table(doc, countries)

    def test_bad_prefix_and_country(self, countries):
        doc = {"dialcodes": [
            {"country": "QQ", "prefix": "12345"},
        ]}
        issues = validate_dialcode_document(doc, countries)
        assert len(issues) == 2
