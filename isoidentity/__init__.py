"""ISO Identity - canonical ISO code resolution and cross-reference

Public API for language (ISO 639), country (ISO 3166-1), currency (ISO 4217),
script (ISO 15924), locale and dialing code identifiers.

Usage:
    from isoidentity import country_by_code, currency_by_code, parse_locale

    # Exact lookups (case-sensitive by default)
    country_by_code("JPN")                          # Country(alpha2='JP', ...)
    currency_by_code("jpy", case_sensitive=False)   # Currency(code='JPY', ...)

    # Numeric lookups
    country_by_numeric(392)                         # Country(alpha2='JP', ...)

    # Bibliographic / terminological language codes
    get_alpha3_t(alpha3_by_code("ger"))             # LanguageAlpha3(code='deu', ...)

    # Locales
    str(parse_locale("pt_BR"))                      # 'pt-BR'

    # Free-text country names
    country_identifier("Holland")                   # 'NL'

Every lookup returns None (or an empty list) when nothing matches.
"""

import logging

__version__ = "0.1.0"

# ============================================================================
# Country Resolution API
# ============================================================================

from .countries.countryidentity import Assignment, Country
from .countries.countryapi import (
    load_countries,        # Load the ISO 3166-1 table
    country_by_code,       # Alpha-2 / alpha-3 / alpha-4 lookup
    country_by_numeric,    # Numeric lookup with collision policy
    find_countries,        # Regex search on names
    list_countries,        # DataFrame listing
    country_identifier,    # Free-text name -> code
    country_identifiers,   # Batch free-text resolution
    match_country,         # Top-K fuzzy candidates
)

# ============================================================================
# Language Resolution API
# ============================================================================

from .languages.languageidentity import Language, LanguageAlpha3, Usage
from .languages.languageapi import (
    load_languages,        # Load the ISO 639 tables
    language_by_code,      # ISO 639-1 lookup
    alpha3_by_code,        # ISO 639-2 lookup
    find_languages,        # Regex search on ISO 639-1 names
    find_alpha3,           # Regex search on ISO 639-2 names
    get_synonym,           # Other ISO 639-2 form
    get_usage,             # TERMINOLOGY / BIBLIOGRAPHY / COMMON
    get_alpha3_t,          # Terminological form
    get_alpha3_b,          # Bibliographic form
    list_languages,        # DataFrame listing (ISO 639-1)
    list_alpha3,           # DataFrame listing (ISO 639-2)
)

# ============================================================================
# Currency Resolution API
# ============================================================================

from .currencies.currencyidentity import Currency
from .currencies.currencyapi import (
    load_currencies,       # Load the ISO 4217 table
    currency_by_code,      # Alphabetic lookup
    currency_by_numeric,   # Numeric lookup
    currencies_by_country, # Currencies used in a country
    find_currencies,       # Regex search on names
    list_currencies,       # DataFrame listing
    is_fund,               # Fund code flag
    is_precious_metal,     # Precious metal flag
)

# ============================================================================
# Locale Resolution API
# ============================================================================

from .locales.localeidentity import Locale
from .locales.localeapi import (
    load_locales,          # Load the locale table
    parse_locale,          # "pt-BR" / "pt_BR" -> Locale
    locale_from_parts,     # (language, country) -> Locale
    compose_locale,        # (language, country) -> "pt-BR"
    locales_by_language,   # Locales of a language
    locales_by_country,    # Locales of a country
    list_locales,          # DataFrame listing
)

# ============================================================================
# Dial Code API
# ============================================================================

from .dialcodes.dialcodeidentity import DialCode
from .dialcodes.dialcodeapi import (
    load_dialcodes,        # Load the calling code table
    dialcode_by_prefix,    # "81" / "+81" -> DialCode
    dialcode_by_phone,     # "+81 3 ..." -> DialCode
    country_by_phone,      # "+81 3 ..." -> Country
    prefix_by_phone,       # "+81 3 ..." -> "+81"
    remove_dial_prefix,    # "+81 3 ..." -> "3 ..."
    dialcodes_by_country,  # Calling codes of a country
    list_dialcodes,        # DataFrame listing
)

# ============================================================================
# Script Resolution API
# ============================================================================

from .scripts.scriptidentity import Script
from .scripts.scriptapi import (
    load_scripts,          # Load the ISO 15924 table
    script_by_code,        # Four-letter code lookup (title case)
    script_by_numeric,     # Numeric lookup
    find_scripts,          # Regex search on names
    list_scripts,          # DataFrame listing
)

logger = logging.getLogger(__name__)


def clear_cache() -> None:
    """Clear every code table cache.

    Tables are rebuilt on next use; call this after changing
    ISOIDENTITY_DATA_DIR.
    """
    for loader in (
        load_dialcodes, load_locales, load_currencies, load_languages, load_countries, load_scripts,
    ):
        loader.cache_clear()
    logger.info("Cleared isoidentity table caches")


__all__ = [
    # Version
    "__version__",
    "clear_cache",

    # Countries
    "Assignment",
    "Country",
    "load_countries",
    "country_by_code",
    "country_by_numeric",
    "find_countries",
    "list_countries",
    "country_identifier",
    "country_identifiers",
    "match_country",

    # Languages
    "Language",
    "LanguageAlpha3",
    "Usage",
    "load_languages",
    "language_by_code",
    "alpha3_by_code",
    "find_languages",
    "find_alpha3",
    "get_synonym",
    "get_usage",
    "get_alpha3_t",
    "get_alpha3_b",
    "list_languages",
    "list_alpha3",

    # Currencies
    "Currency",
    "load_currencies",
    "currency_by_code",
    "currency_by_numeric",
    "currencies_by_country",
    "find_currencies",
    "list_currencies",
    "is_fund",
    "is_precious_metal",

    # Locales
    "Locale",
    "load_locales",
    "parse_locale",
    "locale_from_parts",
    "compose_locale",
    "locales_by_language",
    "locales_by_country",
    "list_locales",

    # Dial codes
    "DialCode",
    "load_dialcodes",
    "dialcode_by_prefix",
    "dialcode_by_phone",
    "country_by_phone",
    "prefix_by_phone",
    "remove_dial_prefix",
    "dialcodes_by_country",
    "list_dialcodes",

    # Scripts
    "Script",
    "load_scripts",
    "script_by_code",
    "script_by_numeric",
    "find_scripts",
    "list_scripts",
]
