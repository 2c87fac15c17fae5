"""Language code resolution API.

Public API for ISO 639-1 (alpha-2) and ISO 639-2 (alpha-3) lookups and for
navigating bibliographic/terminological synonym pairs.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from isoidentity.languages import languageidentity
from isoidentity.languages.languageidentity import (
    Language,
    LanguageAlpha3,
    LanguageTable,
    Usage,
    build_language_table,
    resolve_alpha3_code,
    resolve_language_code,
)
from isoidentity.utils.dataloader import load_code_table
from isoidentity.utils.resolver import find_by_pattern


@lru_cache(maxsize=1)
def load_languages(path: Optional[Union[str, Path]] = None) -> LanguageTable:
    """Load languages.yaml into an immutable LanguageTable.

    Raises:
        FileNotFoundError: If no table is found
        ValueError: If the table is structurally invalid
    """
    document = load_code_table(__file__, "languages", "languages.yaml", path=path)
    return build_language_table(document)


def language_by_code(code: Optional[str], case_sensitive: bool = True) -> Optional[Language]:
    """Look up an ISO 639-1 language.

    Accepts alpha-2 codes, withdrawn alpha-2 codes (iw, ji, in), alpha-3
    codes in either form, and "undefined".

    Examples:
        >>> language_by_code("ja").name
        'Japanese'
        >>> language_by_code("iw").code
        'he'
        >>> language_by_code("fre").code
        'fr'
        >>> language_by_code("JA") is None
        True
    """
    return resolve_language_code(load_languages(), code, case_sensitive)


def alpha3_by_code(code: Optional[str], case_sensitive: bool = True) -> Optional[LanguageAlpha3]:
    """Look up an ISO 639-2 entry. Alpha-2 input returns its terminological form.

    Examples:
        >>> alpha3_by_code("fre").usage
        <Usage.BIBLIOGRAPHY: 'BIBLIOGRAPHY'>
        >>> alpha3_by_code("fr").code
        'fra'
        >>> str(alpha3_by_code("New"))
        'new'
    """
    return resolve_alpha3_code(load_languages(), code, case_sensitive)


def find_languages(pattern) -> List[Language]:
    """ISO 639-1 entries whose name fully matches a regular expression.

    Raises:
        ValueError: If pattern is None
    """
    return find_by_pattern(load_languages().alpha2_entries, pattern, lambda e: e.name)


def find_alpha3(pattern) -> List[LanguageAlpha3]:
    """ISO 639-2 entries whose name fully matches a regular expression.

    Examples:
        >>> len(find_alpha3("Old.*"))
        7

    Raises:
        ValueError: If pattern is None
    """
    return find_by_pattern(load_languages().alpha3_entries, pattern, lambda e: e.name)


def get_synonym(entry: LanguageAlpha3) -> LanguageAlpha3:
    """The other ISO 639-2 form of the language, or the entry itself.

    Examples:
        >>> get_synonym(alpha3_by_code("fre")).code
        'fra'
        >>> get_synonym(alpha3_by_code("jpn")).code
        'jpn'
    """
    return languageidentity.get_synonym(load_languages(), entry)


def get_usage(entry: LanguageAlpha3) -> Usage:
    """TERMINOLOGY, BIBLIOGRAPHY, or COMMON."""
    return languageidentity.get_usage(entry)


def get_alpha3_t(entry: LanguageAlpha3) -> LanguageAlpha3:
    """Terminological (T) form of the entry's language."""
    return languageidentity.get_alpha3_t(load_languages(), entry)


def get_alpha3_b(entry: LanguageAlpha3) -> LanguageAlpha3:
    """Bibliographic (B) form of the entry's language."""
    return languageidentity.get_alpha3_b(load_languages(), entry)


def list_languages() -> pd.DataFrame:
    """ISO 639-1 languages as a DataFrame (code, alpha3, name) in table order."""
    return pd.DataFrame([e.to_dict() for e in load_languages().alpha2_entries])


def list_alpha3(usage: Optional[Union[str, Usage]] = None) -> pd.DataFrame:
    """ISO 639-2 entries as a DataFrame, optionally filtered by usage.

    Examples:
        >>> len(list_alpha3(usage="BIBLIOGRAPHY"))
        20
    """
    entries = load_languages().alpha3_entries
    if usage is not None:
        wanted = Usage(usage.value if isinstance(usage, Usage) else usage)
        entries = [e for e in entries if e.usage == wanted]
    return pd.DataFrame([e.to_dict() for e in entries])


__all__ = [
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
