"""
Language code resolution core (ISO 639-1 / ISO 639-2).

Two code spaces share one table:

- alpha-3: every ISO 639-2 code (plus the ISO 639-5 family codes). Twenty
  languages have two alpha-3 forms, a bibliographic one (B, e.g. "fre") and a
  terminological one (T, e.g. "fra"). Each member of such a pair records its
  usage and its synonym; every other entry is COMMON and is its own synonym.
- alpha-2: ISO 639-1 codes, each linked to the T (or COMMON) alpha-3 entry
  whose name it shares.

Both spaces have an "undefined" sentinel entry.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from isoidentity.languages.languagenormalize import (
    canonicalize_alpha3_code,
    canonicalize_language_code,
)

logger = logging.getLogger(__name__)

UNDEFINED_KEY = "undefined"


class Usage(Enum):
    """Which ISO 639-2 form an alpha-3 entry is."""

    TERMINOLOGY = "TERMINOLOGY"
    BIBLIOGRAPHY = "BIBLIOGRAPHY"
    COMMON = "COMMON"


@dataclass(frozen=True)
class LanguageAlpha3:
    """One ISO 639-2 entry. str(entry) is its code."""

    code: str
    name: str
    alpha2: Optional[str] = None
    usage: Usage = Usage.COMMON
    synonym: Optional[str] = None

    @property
    def is_undefined(self) -> bool:
        return self.code == UNDEFINED_KEY

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "alpha2": self.alpha2,
            "usage": self.usage.value,
            "synonym": self.synonym,
        }

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class Language:
    """One ISO 639-1 entry, linked to its alpha-3 (T or COMMON) entry."""

    code: str
    alpha3: LanguageAlpha3

    @property
    def name(self) -> str:
        return self.alpha3.name

    @property
    def is_undefined(self) -> bool:
        return self.code == UNDEFINED_KEY

    def to_dict(self) -> dict:
        return {"code": self.code, "alpha3": self.alpha3.code, "name": self.name}

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class LanguageTable:
    """Immutable language tables with their lookup indexes."""

    alpha2_entries: Tuple[Language, ...]
    alpha3_entries: Tuple[LanguageAlpha3, ...]
    by_alpha2: Mapping[str, Language] = field(repr=False)
    by_alpha3: Mapping[str, LanguageAlpha3] = field(repr=False)
    legacy_aliases: Mapping[str, str] = field(repr=False)


def parse_alpha3(entry: dict) -> LanguageAlpha3:
    """Convert a languages.yaml alpha3 entry to a LanguageAlpha3."""
    return LanguageAlpha3(
        code=str(entry["code"]),
        name=str(entry["name"]),
        alpha2=entry.get("alpha2") or None,
        usage=Usage(entry.get("usage", Usage.COMMON.value)),
        synonym=entry.get("synonym") or None,
    )


def validate_language_document(document: dict) -> List[str]:
    """Structural checks on a parsed languages.yaml document.

    Checks unique keys, that every link (alpha-2 -> alpha-3, alpha-3 ->
    alpha-2, synonym, legacy alias) points to an existing key, and that
    synonym pairs are symmetric with one T and one B member.
    """
    issues = []
    alpha3 = [parse_alpha3(e) for e in document.get("alpha3") or []]
    alpha2 = document.get("alpha2") or []

    for label, keys in (("alpha3", [e.code for e in alpha3]), ("alpha2", [str(e["code"]) for e in alpha2])):
        duplicates = sorted(k for k, n in Counter(keys).items() if n > 1)
        if duplicates:
            issues.append(f"Duplicate {label} codes: {duplicates}")

    by_code = {e.code: e for e in alpha3}
    alpha2_codes = {str(e["code"]) for e in alpha2}

    for e in alpha2:
        target = by_code.get(e.get("alpha3"))
        if target is None:
            issues.append(f"alpha2 {e['code']} points to unknown alpha3 {e.get('alpha3')}")
        elif target.usage == Usage.BIBLIOGRAPHY:
            issues.append(f"alpha2 {e['code']} points to bibliographic form {target.code}")

    for e in alpha3:
        if e.alpha2 and e.alpha2 not in alpha2_codes:
            issues.append(f"alpha3 {e.code} points to unknown alpha2 {e.alpha2}")

        if e.usage == Usage.COMMON:
            if e.synonym:
                issues.append(f"alpha3 {e.code} is COMMON but has synonym {e.synonym}")
            continue

        other = by_code.get(e.synonym) if e.synonym else None
        if other is None:
            issues.append(f"alpha3 {e.code} ({e.usage.value}) has unknown synonym {e.synonym}")
        elif other.synonym != e.code:
            issues.append(f"Synonym pair {e.code} -> {other.code} is not symmetric")
        elif other.usage == e.usage or other.usage == Usage.COMMON:
            issues.append(f"Synonym pair {e.code}/{other.code} needs one TERMINOLOGY and one BIBLIOGRAPHY member")

    for legacy, modern in (document.get("legacy_aliases") or {}).items():
        if modern not in alpha2_codes:
            issues.append(f"Legacy alias {legacy} -> {modern} points to unknown alpha2")
        if legacy in alpha2_codes:
            issues.append(f"Legacy alias {legacy} shadows a current alpha2 code")

    return issues


def build_language_table(document: dict) -> LanguageTable:
    """Build the immutable language tables.

    Raises:
        ValueError: If the document fails structural validation
    """
    issues = validate_language_document(document)
    if issues:
        raise ValueError(f"Invalid language table: {issues}")

    alpha3_entries = tuple(parse_alpha3(e) for e in document["alpha3"])
    by_alpha3 = {e.code: e for e in alpha3_entries}

    alpha2_entries = tuple(
        Language(code=str(e["code"]), alpha3=by_alpha3[e["alpha3"]]) for e in document["alpha2"]
    )
    by_alpha2 = {e.code: e for e in alpha2_entries}

    legacy = {str(k): str(v) for k, v in (document.get("legacy_aliases") or {}).items()}

    logger.info(
        f"Built language table: {len(alpha2_entries)} alpha-2 and {len(alpha3_entries)} alpha-3 entries"
    )

    return LanguageTable(
        alpha2_entries=alpha2_entries,
        alpha3_entries=alpha3_entries,
        by_alpha2=MappingProxyType(by_alpha2),
        by_alpha3=MappingProxyType(by_alpha3),
        legacy_aliases=MappingProxyType(legacy),
    )


def resolve_language_code(
    table: LanguageTable,
    code: Optional[str],
    case_sensitive: bool = True,
) -> Optional[Language]:
    """Look up an ISO 639-1 entry by alpha-2 or alpha-3 (T or B) code."""
    key = canonicalize_language_code(code, case_sensitive, table.legacy_aliases)
    if key is None:
        return None

    if len(key) == 3:
        entry = resolve_alpha3_code(table, key, case_sensitive)
        if entry is None or entry.alpha2 is None:
            return None
        return table.by_alpha2.get(entry.alpha2)

    return table.by_alpha2.get(key)


def resolve_alpha3_code(
    table: LanguageTable,
    code: Optional[str],
    case_sensitive: bool = True,
) -> Optional[LanguageAlpha3]:
    """Look up an ISO 639-2 entry by alpha-3 code; alpha-2 input gives the T form."""
    key = canonicalize_alpha3_code(code, case_sensitive)
    if key is None:
        return None

    if len(key) == 2:
        language = resolve_language_code(table, key, case_sensitive)
        return language.alpha3 if language is not None else None

    return table.by_alpha3.get(key)


# ---- Synonym linker ----

def get_synonym(table: LanguageTable, entry: LanguageAlpha3) -> LanguageAlpha3:
    """The other ISO 639-2 form of the same language, or the entry itself."""
    if entry.synonym is None:
        return entry
    return table.by_alpha3[entry.synonym]


def get_usage(entry: LanguageAlpha3) -> Usage:
    return entry.usage


def get_alpha3_t(table: LanguageTable, entry: LanguageAlpha3) -> LanguageAlpha3:
    """Terminological form: the entry if it is TERMINOLOGY, else its synonym."""
    if entry.usage == Usage.TERMINOLOGY:
        return entry
    return get_synonym(table, entry)


def get_alpha3_b(table: LanguageTable, entry: LanguageAlpha3) -> LanguageAlpha3:
    """Bibliographic form: the entry if it is BIBLIOGRAPHY, else its synonym."""
    if entry.usage == Usage.BIBLIOGRAPHY:
        return entry
    return get_synonym(table, entry)


__all__ = [
    "UNDEFINED_KEY",
    "Usage",
    "LanguageAlpha3",
    "Language",
    "LanguageTable",
    "parse_alpha3",
    "validate_language_document",
    "build_language_table",
    "resolve_language_code",
    "resolve_alpha3_code",
    "get_synonym",
    "get_usage",
    "get_alpha3_t",
    "get_alpha3_b",
]
