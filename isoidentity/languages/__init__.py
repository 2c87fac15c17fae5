"""Language code resolution (ISO 639-1 / ISO 639-2) and B/T synonyms."""

from isoidentity.languages.languageidentity import (
    Language,
    LanguageAlpha3,
    Usage,
)
from isoidentity.languages.languageapi import (
    load_languages,
    language_by_code,
    alpha3_by_code,
    find_languages,
    find_alpha3,
    get_synonym,
    get_usage,
    get_alpha3_t,
    get_alpha3_b,
    list_languages,
    list_alpha3,
)

__all__ = [
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
]
