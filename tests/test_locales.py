"""Tests for locale composition and parsing (language × country).

Covers:
1. parse_locale with "-" and "_" separators, alpha-3 parts, the case flag
2. Malformed input returns None
3. compose_locale always joins with "-"
4. Round trip over the whole table
5. The "undefined" sentinel
6. Reverse lookups by language and by country
"""

import pytest

from isoidentity import (
    compose_locale,
    country_by_code,
    language_by_code,
    list_locales,
    locale_from_parts,
    locales_by_country,
    locales_by_language,
    parse_locale,
)
from isoidentity.locales.localeidentity import build_locale_table, validate_locale_document


# ---- Parsing ----

class TestParseLocale:
    """parse_locale"""

    def test_hyphen(self):
        loc = parse_locale("pt-BR")
        assert loc is not None
        assert loc.language.code == "pt"
        assert loc.country.alpha2 == "BR"

    def test_underscore_gives_same_locale(self):
        assert parse_locale("pt_BR") is parse_locale("pt-BR")
        assert parse_locale("ja_JP") is parse_locale("ja-JP")

    def test_language_only(self):
        loc = parse_locale("pt")
        assert loc.language.code == "pt"
        assert loc.country is None

    def test_alpha3_parts(self):
        assert str(parse_locale("por-BR")) == "pt-BR"
        assert str(parse_locale("jpn_JP")) == "ja-JP"
        assert str(parse_locale("ja-JPN")) == "ja-JP"

    def test_case_flag(self):
        assert parse_locale("PT-br") is None
        assert parse_locale("PT-br", case_sensitive=False) is parse_locale("pt-BR")

    @pytest.mark.parametrize("code", [
        "ja+JP",      # unknown separator
        "ja JP",
        "j-JP",       # language too short
        "japa-JP",    # no separator at a language offset
        "ja-",        # missing country
        "ja-ZZ",      # unknown country
        "xx-JP",      # unknown language
        "ja-BR",      # valid parts, pair not in the table
        "",
        None,
    ])
    def test_malformed_or_unknown(self, code):
        assert parse_locale(code) is None

    def test_pair_must_be_listed(self):
        assert parse_locale("fr-CA") is not None
        assert parse_locale("fr-JP") is None


# ---- Undefined sentinel ----

class TestUndefinedLocale:
    """The single "undefined" locale"""

    def test_bare(self):
        loc = parse_locale("undefined")
        assert loc is not None
        assert loc.is_undefined
        assert str(loc) == "undefined"

    def test_with_undefined_country(self):
        assert parse_locale("undefined-UNDEFINED") is parse_locale("undefined")
        assert parse_locale("undefined_UNDEFINED") is parse_locale("undefined")

    def test_case_insensitive(self):
        assert parse_locale("UNDEFINED", case_sensitive=False) is parse_locale("undefined")
        assert parse_locale("Undefined-undefined", case_sensitive=False) is parse_locale("undefined")

    def test_from_parts(self):
        undefined = language_by_code("undefined")
        assert locale_from_parts(undefined) is parse_locale("undefined")
        assert locale_from_parts(undefined, country_by_code("UNDEFINED")) is parse_locale("undefined")

    def test_compose(self):
        undefined = language_by_code("undefined")
        assert compose_locale(undefined) == "undefined"
        assert compose_locale(undefined, country_by_code("UNDEFINED")) == "undefined"


# ---- Composition ----

class TestComposeLocale:
    """compose_locale"""

    def test_pair(self):
        assert compose_locale(language_by_code("pt"), country_by_code("BR")) == "pt-BR"

    def test_language_only(self):
        assert compose_locale(language_by_code("pt")) == "pt"

    def test_never_underscore(self):
        assert str(parse_locale("pt_BR")) == "pt-BR"

    def test_round_trip_over_table(self, locales):
        for loc in locales.entries:
            code = str(loc)
            assert parse_locale(code) is loc
            assert compose_locale(loc.language, loc.country) == code


# ---- locale_from_parts ----

class TestLocaleFromParts:
    """Resolve a (language, country) pair"""

    def test_strings(self):
        assert str(locale_from_parts("ja", "JP")) == "ja-JP"
        assert str(locale_from_parts("ja")) == "ja"

    def test_entries(self):
        loc = locale_from_parts(language_by_code("de"), country_by_code("CH"))
        assert str(loc) == "de-CH"
        assert loc.name == "German (Switzerland)"

    def test_unlisted_pair(self):
        assert locale_from_parts("ja", "BR") is None

    def test_unknown_part(self):
        assert locale_from_parts("zz", "JP") is None
        assert locale_from_parts("ja", "ZZ") is None
        assert locale_from_parts(None, "JP") is None


# ---- Reverse lookups ----

class TestReverseLookups:
    """locales_by_language / locales_by_country"""

    def test_by_language(self):
        arabic = locales_by_language("ar")
        assert len(arabic) == 18
        assert all(loc.language.code == "ar" for loc in arabic)
        assert str(arabic[0]) == "ar"

    def test_by_country(self):
        assert [str(loc) for loc in locales_by_country("CH")] == ["de-CH", "fr-CH", "it-CH"]

    def test_by_entry(self):
        assert locales_by_country(country_by_code("CHE")) == locales_by_country("CH")
        assert locales_by_language(language_by_code("ar")) == locales_by_language("ar")

    def test_table_order(self, locales):
        expected = [loc for loc in locales.entries if loc.language.code == "en"]
        assert locales_by_language("en") == expected

    def test_misses_are_empty(self):
        assert locales_by_language(None) == []
        assert locales_by_language("zz") == []
        assert locales_by_country(None) == []
        assert locales_by_country("ZZ") == []


# ---- Table ----

def loc_row(loc):
    return {
        "language": loc.language.code,
        "country": loc.country.alpha2 if loc.country is not None else None,
    }


def test_shipped_table_is_valid(locales):
    assert validate_locale_document(
        {"locales": [loc_row(loc) for loc in locales.entries]},
        locales.languages,
        locales.countries,
    ) == []


def test_duplicate_pair_is_rejected(locales):
    doc = {"locales": [
        {"language": "undefined", "country": "UNDEFINED"},
        {"language": "ja", "country": "JP"},
        {"language": "ja", "country": "JP"},
    ]}
    with pytest.raises(ValueError, match="Invalid locale table"):
        build_locale_table(doc, locales.languages, locales.countries)


def test_missing_sentinel_is_rejected(locales):
    doc = {"locales": [{"language": "ja", "country": "JP"}]}
    assert validate_locale_document(doc, locales.languages, locales.countries)


def test_list_locales(locales):
    df = list_locales()
    assert len(df) == len(locales.entries)
    assert list(df.columns) == ["code", "language", "country", "name"]
    assert "pt-BR" in df["code"].tolist()
