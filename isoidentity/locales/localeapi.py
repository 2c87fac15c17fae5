"""Locale resolution API.

Public API for building, parsing and decomposing locale identifiers
(language × country).
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from isoidentity.countries.countryapi import load_countries
from isoidentity.countries.countryidentity import Country, resolve_country_code
from isoidentity.languages.languageapi import load_languages
from isoidentity.languages.languageidentity import Language, resolve_language_code
from isoidentity.locales import localeidentity
from isoidentity.locales.localeidentity import (
    Locale,
    LocaleTable,
    build_locale_table,
    locales_for_country,
    locales_for_language,
)
from isoidentity.utils.dataloader import load_code_table


@lru_cache(maxsize=1)
def load_locales(path: Optional[Union[str, Path]] = None) -> LocaleTable:
    """Load locales.yaml into an immutable LocaleTable.

    Language and country parts are resolved against load_languages() and
    load_countries().

    Raises:
        FileNotFoundError: If no table is found
        ValueError: If the table is structurally invalid
    """
    document = load_code_table(__file__, "locales", "locales.yaml", path=path)
    return build_locale_table(document, load_languages(), load_countries())


def parse_locale(code: Optional[str], case_sensitive: bool = True) -> Optional[Locale]:
    """Parse a locale string.

    "-" and "_" are both accepted as separator; anything else returns None.

    Examples:
        >>> loc = parse_locale("pt-BR")
        >>> (loc.language.code, loc.country.alpha2)
        ('pt', 'BR')
        >>> parse_locale("pt_BR") == parse_locale("pt-BR")
        True
        >>> parse_locale("ja+JP") is None
        True
        >>> str(parse_locale("undefined"))
        'undefined'
    """
    return localeidentity.parse_locale(load_locales(), code, case_sensitive)


def locale_from_parts(
    language: Union[str, Language, None],
    country: Union[str, Country, None] = None,
    case_sensitive: bool = True,
) -> Optional[Locale]:
    """Look up the locale for a language and an optional country.

    Examples:
        >>> str(locale_from_parts("ja", "JP"))
        'ja-JP'
        >>> locale_from_parts("ja", "BR") is None
        True
    """
    return localeidentity.locale_from_parts(load_locales(), language, country, case_sensitive)


def compose_locale(language: Language, country: Optional[Country] = None) -> str:
    """Canonical locale string: "pt" or "pt-BR" (always hyphenated)."""
    return localeidentity.compose_locale(language, country)


def locales_by_language(
    language: Union[str, Language, None],
    case_sensitive: bool = True,
) -> List[Locale]:
    """Locales of a language, in table order (empty for None or unknown).

    Examples:
        >>> len(locales_by_language("ar"))
        18
    """
    if isinstance(language, str):
        language = resolve_language_code(load_languages(), language, case_sensitive)
    return locales_for_language(load_locales(), language)


def locales_by_country(
    country: Union[str, Country, None],
    case_sensitive: bool = True,
) -> List[Locale]:
    """Locales of a country, in table order (empty for None or unknown).

    Examples:
        >>> [str(loc) for loc in locales_by_country("CH")]
        ['de-CH', 'fr-CH', 'it-CH']
    """
    if isinstance(country, str):
        country = resolve_country_code(load_countries(), country, case_sensitive)
    return locales_for_country(load_locales(), country)


def list_locales() -> pd.DataFrame:
    """Locales as a DataFrame (code, language, country, name) in table order."""
    return pd.DataFrame([loc.to_dict() for loc in load_locales().entries])


__all__ = [
    "load_locales",
    "parse_locale",
    "locale_from_parts",
    "compose_locale",
    "locales_by_language",
    "locales_by_country",
    "list_locales",
]
