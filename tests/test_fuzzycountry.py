"""Tests for free-text country resolution (country_identifier and friends)."""

import pytest

from isoidentity import (
    country_identifier,
    country_identifiers,
    match_country,
)


class TestCountryIdentifier:
    """Test country_identifier function"""

    def test_iso_codes(self):
        """Any code form, any case"""
        assert country_identifier("US") == "US"
        assert country_identifier("usa") == "US"
        assert country_identifier("DEU") == "DE"

    def test_official_names(self):
        assert country_identifier("United States") == "US"
        assert country_identifier("Japan") == "JP"
        assert country_identifier("Mexico") == "MX"

    def test_colloquial_aliases(self):
        assert country_identifier("England") == "GB"
        assert country_identifier("Holland") == "NL"
        assert country_identifier("Ivory Coast") == "CI"
        assert country_identifier("Deutschland") == "DE"

    def test_accents_and_punctuation(self):
        assert country_identifier("Côte d’Ivoire") == "CI"
        assert country_identifier("México") == "MX"

    def test_reserved_predecessor_maps_to_successor(self):
        """UK and Burma share their numeric codes with GB and MM"""
        assert country_identifier("UK") == "GB"
        assert country_identifier("Burma") == "MM"
        assert country_identifier("BUMM") == "MM"

    def test_reserved_without_successor_stays(self):
        assert country_identifier("EU") == "EU"

    def test_output_systems(self):
        assert country_identifier("Holland", to="ISO3") == "NLD"
        assert country_identifier("Japan", to="numeric") == "392"
        assert country_identifier("Afghanistan", to="NUMERIC") == "004"

    def test_unknown_output_system_raises(self):
        with pytest.raises(ValueError):
            country_identifier("Japan", to="FIPS")

    def test_user_assigned(self):
        """Kosovo (XK) is user-assigned"""
        assert country_identifier("Kosovo") == "XK"
        assert country_identifier("Kosovo", allow_user_assigned=False) is None

    def test_typo_needs_fuzzy(self):
        assert country_identifier("Untied States") == "US"
        assert country_identifier("Untied States", fuzzy=False) is None

    def test_empty_inputs(self):
        assert country_identifier(None) is None
        assert country_identifier("") is None
        assert country_identifier("   ") is None

    def test_undefined_sentinel_is_not_a_country(self):
        assert country_identifier("UNDEFINED", fuzzy=False) is None

    def test_gibberish(self):
        assert country_identifier("qwzxv plonk") is None


def test_country_identifiers_batch():
    assert country_identifiers(["USA", "Holland", "England"]) == ["US", "NL", "GB"]
    assert country_identifiers(["México", "Holland"], to="ISO3") == ["MEX", "NLD"]
    assert country_identifiers(["Japan", ""]) == ["JP", None]


class TestMatchCountry:
    """Top-K candidate listing"""

    def test_best_candidate(self):
        results = match_country("Untied Kingdom", k=1)
        assert len(results) == 1
        assert results[0]["alpha2"] == "GB"
        assert results[0]["score"] > 85

    def test_scores_descend(self):
        results = match_country("Korea", k=5)
        assert len(results) == 5
        scores = [r["score"] for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_each_country_once(self):
        """GB is reachable under several names but is listed once"""
        results = match_country("Britain", k=10)
        codes = [r["alpha2"] for r in results]
        assert len(codes) == len(set(codes))

    def test_empty_query(self):
        assert match_country("", k=3) == []
