"""Locale identifiers (language × country)."""

from isoidentity.locales.localeidentity import Locale
from isoidentity.locales.localeapi import (
    load_locales,
    parse_locale,
    locale_from_parts,
    compose_locale,
    locales_by_language,
    locales_by_country,
    list_locales,
)

__all__ = [
    "Locale",
    "load_locales",
    "parse_locale",
    "locale_from_parts",
    "compose_locale",
    "locales_by_language",
    "locales_by_country",
    "list_locales",
]
