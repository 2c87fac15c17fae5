"""Tests for ISO 3166-1 country code resolution.

Covers:
1. Exact alpha-2 / alpha-3 / alpha-4 lookups and the case flag
2. Numeric lookups, including shared numbers (BU/MM, UK/GB, ...)
3. Collision policy is taken from the table, not from row order
4. The UNDEFINED sentinel
5. Regex search and DataFrame listings
"""

import re

import pandas as pd
import pytest

from isoidentity import (
    Assignment,
    country_by_code,
    country_by_numeric,
    find_countries,
    list_countries,
)
from isoidentity.countries.countryidentity import (
    build_country_table,
    resolve_country_numeric,
    uncovered_collisions,
    validate_country_document,
)


# ---- Exact code lookups ----

class TestCountryByCode:
    """Alpha-2, alpha-3 and alpha-4 lookups"""

    def test_alpha2(self):
        japan = country_by_code("JP")
        assert japan is not None
        assert japan.name == "Japan"
        assert japan.alpha3 == "JPN"
        assert japan.numeric == 392

    def test_alpha3_resolves_to_same_entry(self):
        assert country_by_code("JPN") is country_by_code("JP")

    def test_alpha4_transitional_codes(self):
        """Four-letter ISO 3166-3 codes resolve like the plain codes"""
        assert country_by_code("BUMM") is country_by_code("BU")
        assert country_by_code("ANHH").alpha2 == "AN"
        assert country_by_code("TPTL") is country_by_code("TMP")

    def test_case_sensitive_miss(self):
        assert country_by_code("jp") is None
        assert country_by_code("Jpn") is None

    def test_case_insensitive_hit(self):
        assert country_by_code("jp", case_sensitive=False) is country_by_code("JP")
        assert country_by_code("bumm", case_sensitive=False).alpha2 == "BU"

    def test_empty_and_none(self):
        assert country_by_code(None) is None
        assert country_by_code("") is None
        assert country_by_code("", case_sensitive=False) is None

    def test_unknown_fails_closed(self):
        """Wrong lengths and unknown codes return None, never raise"""
        assert country_by_code("ZZ") is None
        assert country_by_code("J") is None
        assert country_by_code("JAPAN") is None

    def test_shared_alpha3_prefers_current_entry(self):
        """FIN belongs to FI (Finland) and SF (its old code)"""
        assert country_by_code("FIN").alpha2 == "FI"
        assert country_by_code("SF").alpha3 == "FIN"

    def test_lookup_is_idempotent_over_table(self, countries):
        for c in countries.entries:
            assert country_by_code(c.alpha2) is c
            assert country_by_code(c.alpha2) is country_by_code(c.alpha2)
            assert country_by_code(c.alpha2.lower(), case_sensitive=False) is c


# ---- Numeric lookups ----

class TestCountryByNumeric:
    """Numeric lookups and collision policy"""

    def test_plain_numeric(self):
        assert country_by_numeric(392).alpha2 == "JP"
        assert country_by_numeric(4).alpha2 == "AF"

    def test_non_positive_numbers_miss(self):
        assert country_by_numeric(0) is None
        assert country_by_numeric(-1) is None
        assert country_by_numeric(-392) is None
        assert country_by_numeric(None) is None

    def test_unassigned_number_misses(self):
        assert country_by_numeric(999) is None

    @pytest.mark.parametrize("numeric,current,predecessor", [
        (104, "MM", "BU"),
        (180, "CD", "ZR"),
        (246, "FI", "SF"),
        (626, "TL", "TP"),
        (826, "GB", "UK"),
    ])
    def test_shared_numeric_resolves_to_current(self, numeric, current, predecessor):
        """A shared number returns the current entry; the predecessor keeps its letters"""
        assert country_by_numeric(numeric).alpha2 == current
        assert country_by_code(predecessor).numeric == numeric
        assert country_by_code(predecessor).assignment != Assignment.OFFICIALLY_ASSIGNED

    def test_shared_numeric_is_deterministic(self):
        first = country_by_numeric(104)
        for _ in range(10):
            assert country_by_numeric(104) is first

    def test_numeric_alias(self):
        """280 (former West Germany) still resolves to Germany"""
        assert country_by_numeric(280).alpha2 == "DE"

    def test_retired_unique_numbers(self):
        assert country_by_numeric(890).alpha2 == "YU"
        assert country_by_numeric(891).alpha2 == "CS"

    def test_numeric_str_is_zero_padded(self):
        assert country_by_code("AF").numeric_str == "004"
        assert country_by_code("EU").numeric_str is None


# ---- Table-driven collision policy ----

class TestCollisionPolicy:
    """Which entry owns a shared number comes from numeric_preferred"""

    def test_mini_table(self, mini_country_document):
        table = build_country_table(mini_country_document)
        assert resolve_country_numeric(table, 104).alpha2 == "MM"
        assert table.by_code["BUMM"].alpha2 == "BU"

    def test_reordering_does_not_change_winner(self, mini_country_document):
        reordered = dict(mini_country_document)
        reordered["countries"] = list(reversed(mini_country_document["countries"]))
        table = build_country_table(reordered)
        assert resolve_country_numeric(table, 104).alpha2 == "MM"

    def test_full_table_reversed(self, country_document):
        reordered = dict(country_document)
        reordered["countries"] = list(reversed(country_document["countries"]))
        table = build_country_table(reordered)
        for numeric, winner in country_document["numeric_preferred"].items():
            assert table.by_numeric[int(numeric)].alpha2 == winner

    def test_preferred_table_overrides_current_flag(self, mini_country_document):
        """The explicit table wins even when it names the reserved entry"""
        doc = dict(mini_country_document, numeric_preferred={104: "BU"})
        table = build_country_table(doc)
        assert resolve_country_numeric(table, 104).alpha2 == "BU"

    def test_preferred_must_be_a_colliding_entry(self, mini_country_document):
        doc = dict(mini_country_document, numeric_preferred={104: "JP"})
        with pytest.raises(ValueError):
            build_country_table(doc)

    def test_unresolvable_collision_is_left_out(self, mini_country_document, caplog):
        """Two reserved entries on one number, no preference: the number misses"""
        doc = dict(mini_country_document, numeric_preferred={})
        doc["countries"] = [
            dict(e, assignment="TRANSITIONALLY_RESERVED") if e["alpha2"] == "MM" else e
            for e in mini_country_document["countries"]
        ]
        table = build_country_table(doc)
        assert resolve_country_numeric(table, 104) is None
        assert "collision" in caplog.text

    def test_shipped_table_has_no_uncovered_collisions(self, country_document):
        assert validate_country_document(country_document) == []
        assert uncovered_collisions(country_document) == []

    def test_duplicate_alpha2_is_invalid(self, mini_country_document):
        doc = dict(mini_country_document)
        doc["countries"] = mini_country_document["countries"] + [{"alpha2": "JP", "name": "Japan again"}]
        with pytest.raises(ValueError, match="Invalid country table"):
            build_country_table(doc)


# ---- Sentinel ----

def test_undefined_sentinel():
    undefined = country_by_code("UNDEFINED")
    assert undefined is not None
    assert undefined.is_undefined
    assert undefined.numeric is None
    assert country_by_code("undefined", case_sensitive=False) is undefined
    assert country_by_code("undefined") is None


def test_undefined_never_on_numeric_index(countries):
    assert all(not c.is_undefined for c in countries.by_numeric.values())


def test_str_is_alpha2():
    assert str(country_by_code("JPN")) == "JP"


# ---- Search and listings ----

class TestFindCountries:
    """Regex search on names"""

    def test_full_match_in_table_order(self):
        assert [c.alpha2 for c in find_countries(".*United.*")] == ["AE", "GB", "TZ", "UK", "UM", "US"]

    def test_compiled_pattern(self):
        assert [c.alpha2 for c in find_countries(re.compile("Japan"))] == ["JP"]

    def test_partial_name_does_not_match(self):
        assert find_countries("United") == []

    def test_no_match_is_empty_list(self):
        assert find_countries("Atlantis") == []

    def test_none_pattern_raises(self):
        with pytest.raises(ValueError):
            find_countries(None)

    def test_invalid_pattern_raises(self):
        with pytest.raises(re.error):
            find_countries("[")


class TestListCountries:
    """DataFrame listings"""

    def test_all(self, countries):
        df = list_countries()
        assert len(df) == len(countries.entries)
        assert list(df.columns) == ["alpha2", "alpha3", "alpha4", "numeric", "name", "assignment"]
        assert df["numeric"].dtype == pd.Int64Dtype()

    def test_filter_by_assignment(self):
        df = list_countries("OFFICIALLY_ASSIGNED")
        assert len(df) == 249
        assert set(df["assignment"]) == {"OFFICIALLY_ASSIGNED"}

    def test_filter_by_enum(self):
        df = list_countries(Assignment.TRANSITIONALLY_RESERVED)
        assert "BU" in df["alpha2"].tolist()
        assert "JP" not in df["alpha2"].tolist()

    def test_unknown_assignment_raises(self):
        with pytest.raises(ValueError):
            list_countries("NOT_A_CATEGORY")
