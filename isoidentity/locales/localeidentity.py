"""
Locale composition and parsing.

A locale is a language (ISO 639-1) optionally qualified by a country
(ISO 3166-1). Only the pairs listed in locales.yaml are valid. The canonical
string form is "ja" or "ja-JP"; parsing also accepts "ja_JP", three-letter
language codes ("jpn-JP") and any country code form ("ja-JPN").

The sentinel locale "undefined" stands for an undefined language with an
absent or undefined country.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

from isoidentity.countries.countryidentity import (
    Country,
    CountryTable,
    resolve_country_code,
)
from isoidentity.languages.languageidentity import (
    UNDEFINED_KEY,
    Language,
    LanguageTable,
    resolve_language_code,
)

logger = logging.getLogger(__name__)

SEPARATORS = ("-", "_")
CANONICAL_SEPARATOR = "-"

# Lengths of a language part: alpha-2, alpha-3, "undefined".
LANGUAGE_LENGTHS = (2, 3, len(UNDEFINED_KEY))


def compose_locale(language: Language, country: Optional[Country] = None) -> str:
    """Canonical string form of a (language, country) pair.

    Examples:
        >>> compose_locale(language_by_code("pt"), country_by_code("BR"))
        'pt-BR'
        >>> compose_locale(language_by_code("pt"))
        'pt'
    """
    if language.is_undefined and (country is None or country.is_undefined):
        return UNDEFINED_KEY
    if country is None:
        return language.code
    return f"{language.code}{CANONICAL_SEPARATOR}{country.alpha2}"


@dataclass(frozen=True)
class Locale:
    """A valid (language, country) pair. str(locale) is its canonical form."""

    language: Language
    country: Optional[Country] = None

    @property
    def code(self) -> str:
        return compose_locale(self.language, self.country)

    @property
    def is_undefined(self) -> bool:
        return self.language.is_undefined

    @property
    def name(self) -> str:
        if self.is_undefined:
            return "Undefined"
        if self.country is None:
            return self.language.name
        return f"{self.language.name} ({self.country.name})"

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "language": self.language.code,
            "country": self.country.alpha2 if self.country is not None else None,
            "name": self.name,
        }

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class LocaleTable:
    """Immutable locale table with the component tables it was resolved against."""

    entries: Tuple[Locale, ...]
    undefined: Locale
    by_parts: Mapping[Tuple[str, Optional[str]], Locale] = field(repr=False)
    languages: LanguageTable = field(repr=False)
    countries: CountryTable = field(repr=False)


def validate_locale_document(
    document: dict,
    languages: LanguageTable,
    countries: CountryTable,
) -> List[str]:
    """Structural checks on a parsed locales.yaml document."""
    issues = []
    entries = document.get("locales") or []

    pairs = [(e.get("language"), e.get("country")) for e in entries]
    duplicates = sorted(f"{lang}_{c}" for (lang, c), n in Counter(pairs).items() if n > 1)
    if duplicates:
        issues.append(f"Duplicate locales: {duplicates}")

    for language, country in pairs:
        if language not in languages.by_alpha2:
            issues.append(f"Locale {language}_{country} has unknown language {language}")
        if country is not None and country not in countries.by_code:
            issues.append(f"Locale {language}_{country} has unknown country {country}")

    sentinels = [p for p in pairs if p[0] == UNDEFINED_KEY]
    if len(sentinels) != 1:
        issues.append(f"Expected exactly one undefined locale, found {len(sentinels)}")

    return issues


def build_locale_table(
    document: dict,
    languages: LanguageTable,
    countries: CountryTable,
) -> LocaleTable:
    """Build the immutable locale table.

    Raises:
        ValueError: If the document fails structural validation
    """
    issues = validate_locale_document(document, languages, countries)
    if issues:
        raise ValueError(f"Invalid locale table: {issues}")

    entries = tuple(
        Locale(
            language=languages.by_alpha2[e["language"]],
            country=countries.by_code[e["country"]] if e.get("country") else None,
        )
        for e in document["locales"]
    )
    by_parts = MappingProxyType({
        (loc.language.code, loc.country.alpha2 if loc.country is not None else None): loc
        for loc in entries
    })
    undefined = next(loc for loc in entries if loc.is_undefined)

    logger.info(f"Built locale table: {len(entries)} entries")
    return LocaleTable(
        entries=entries,
        undefined=undefined,
        by_parts=by_parts,
        languages=languages,
        countries=countries,
    )


def locale_from_parts(
    table: LocaleTable,
    language: Union[str, Language, None],
    country: Union[str, Country, None] = None,
    case_sensitive: bool = True,
) -> Optional[Locale]:
    """Resolve a (language, country) pair to a Locale.

    Each part is resolved through its own code space; a part that does not
    resolve, or a pair absent from the table, returns None.
    """
    if isinstance(language, Language):
        lang = language
    else:
        lang = resolve_language_code(table.languages, language, case_sensitive)
    if lang is None:
        return None

    if country is None or country == "":
        ctry = None
    elif isinstance(country, Country):
        ctry = country
    else:
        ctry = resolve_country_code(table.countries, country, case_sensitive)
        if ctry is None:
            return None

    if lang.is_undefined and (ctry is None or ctry.is_undefined):
        return table.undefined

    return table.by_parts.get((lang.code, ctry.alpha2 if ctry is not None else None))


def parse_locale(
    table: LocaleTable,
    code: Optional[str],
    case_sensitive: bool = True,
) -> Optional[Locale]:
    """Parse "ja", "ja-JP", "ja_JP", "jpn-JP", "undefined", ...

    The separator must sit right after the language part (offset 2, 3 or 9).
    Malformed input returns None.
    """
    if not code:
        return None

    if len(code) in LANGUAGE_LENGTHS:
        return locale_from_parts(table, code, None, case_sensitive)

    for offset in LANGUAGE_LENGTHS:
        if len(code) > offset + 1 and code[offset] in SEPARATORS:
            return locale_from_parts(table, code[:offset], code[offset + 1:], case_sensitive)

    logger.debug(f"Unparseable locale {code!r}")
    return None


def locales_for_language(table: LocaleTable, language: Optional[Language]) -> List[Locale]:
    """Locales of a language, in table order."""
    if language is None:
        return []
    return [loc for loc in table.entries if loc.language == language]


def locales_for_country(table: LocaleTable, country: Optional[Country]) -> List[Locale]:
    """Locales of a country, in table order."""
    if country is None:
        return []
    return [loc for loc in table.entries if loc.country == country]


__all__ = [
    "SEPARATORS",
    "LANGUAGE_LENGTHS",
    "Locale",
    "LocaleTable",
    "compose_locale",
    "validate_locale_document",
    "build_locale_table",
    "locale_from_parts",
    "parse_locale",
    "locales_for_language",
    "locales_for_country",
]
