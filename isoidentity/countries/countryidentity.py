"""
Country code resolution core (ISO 3166-1).

The table holds officially assigned codes plus the reserved codes that still
circulate (UK, SU, FX, EU, the ISO 3166-3 transitional codes, ...) and the
UNDEFINED sentinel. Every entry is reachable by alpha-2, alpha-3 and, for
formerly used names, the four-letter ISO 3166-3 code.

Numeric codes are not unique across the table: a current code and its
predecessor may share one number (MM/BU = 104, TL/TP = 626, ...). Which entry
a shared number resolves to is stated in the table itself (numeric_preferred),
never inferred from row order.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from isoidentity.countries.countrynormalize import (
    canonicalize_country_code,
    normalize_country_name,
)
from isoidentity.utils.resolver import build_index, group_by_keys

logger = logging.getLogger(__name__)

UNDEFINED_KEY = "UNDEFINED"


class Assignment(Enum):
    """ISO 3166-1 assignment category of a code."""

    OFFICIALLY_ASSIGNED = "OFFICIALLY_ASSIGNED"
    USER_ASSIGNED = "USER_ASSIGNED"
    EXCEPTIONALLY_RESERVED = "EXCEPTIONALLY_RESERVED"
    TRANSITIONALLY_RESERVED = "TRANSITIONALLY_RESERVED"


@dataclass(frozen=True)
class Country:
    """One ISO 3166-1 entry. str(country) is its alpha-2 code."""

    alpha2: str
    name: str
    alpha3: Optional[str] = None
    numeric: Optional[int] = None
    assignment: Assignment = Assignment.OFFICIALLY_ASSIGNED
    alpha4: Optional[str] = None

    @property
    def numeric_str(self) -> Optional[str]:
        """Numeric code zero-padded to three digits ('004' for Afghanistan)."""
        if self.numeric is None:
            return None
        return f"{self.numeric:03d}"

    @property
    def is_undefined(self) -> bool:
        return self.alpha2 == UNDEFINED_KEY

    def to_dict(self) -> dict:
        return {
            "alpha2": self.alpha2,
            "alpha3": self.alpha3,
            "alpha4": self.alpha4,
            "numeric": self.numeric,
            "name": self.name,
            "assignment": self.assignment.value,
        }

    def __str__(self) -> str:
        return self.alpha2


@dataclass(frozen=True)
class CountryTable:
    """Immutable country table with its lookup indexes."""

    entries: Tuple[Country, ...]
    by_code: Mapping[str, Country] = field(repr=False)
    by_numeric: Mapping[int, Country] = field(repr=False)
    by_name: Mapping[str, Country] = field(repr=False)


def parse_country(entry: dict) -> Country:
    """Convert a countries.yaml entry to a Country."""
    numeric = entry.get("numeric")
    return Country(
        alpha2=str(entry["alpha2"]),
        name=str(entry["name"]),
        alpha3=entry.get("alpha3") or None,
        numeric=int(numeric) if numeric is not None else None,
        assignment=Assignment(entry.get("assignment", Assignment.OFFICIALLY_ASSIGNED.value)),
        alpha4=entry.get("alpha4") or None,
    )


def validate_country_document(document: dict) -> List[str]:
    """Structural checks on a parsed countries.yaml document.

    Returns:
        List of issues (empty when the table is usable)
    """
    issues = []
    entries = document.get("countries") or []

    alpha2_keys = [str(e.get("alpha2", "")) for e in entries]
    duplicates = sorted(k for k, n in Counter(alpha2_keys).items() if n > 1)
    if duplicates:
        issues.append(f"Duplicate alpha2 keys: {duplicates}")

    alpha4_keys = [e["alpha4"] for e in entries if e.get("alpha4")]
    if len(alpha4_keys) != len(set(alpha4_keys)):
        issues.append(f"Duplicate alpha4 keys in: {alpha4_keys}")

    valid = set(alpha2_keys)
    for section in ("numeric_preferred", "numeric_aliases", "alpha3_preferred", "name_aliases"):
        dangling = {k: v for k, v in (document.get(section) or {}).items() if v not in valid}
        if dangling:
            issues.append(f"{section} points to unknown alpha2 codes: {dangling}")

    sentinel = [e for e in entries if e.get("alpha2") == UNDEFINED_KEY]
    if sentinel and sentinel[0].get("numeric") is not None:
        issues.append("The UNDEFINED entry must not carry a numeric code")

    return issues


def uncovered_collisions(document: dict) -> List[str]:
    """Numeric and alpha-3 codes shared by several entries without a preferred entry."""
    countries = [parse_country(e) for e in document.get("countries") or []]
    issues = []

    checks = (
        ("numeric", lambda c: c.numeric, document.get("numeric_preferred") or {}),
        ("alpha3", lambda c: c.alpha3, document.get("alpha3_preferred") or {}),
    )
    for label, key_fn, preferred in checks:
        groups = group_by_keys(countries, [key_fn])
        for key, members in groups.items():
            if len(members) > 1 and key not in preferred:
                issues.append(f"{label} {key} shared by {[c.alpha2 for c in members]} has no preferred entry")

    return issues


def _is_current(country: Country) -> bool:
    return country.assignment == Assignment.OFFICIALLY_ASSIGNED


def build_country_table(document: dict) -> CountryTable:
    """Build the immutable country table and its indexes.

    Raises:
        ValueError: If the document fails structural validation
    """
    issues = validate_country_document(document)
    if issues:
        raise ValueError(f"Invalid country table: {issues}")

    entries = tuple(parse_country(e) for e in document["countries"])
    canonical = lambda c: c.alpha2  # noqa: E731

    by_code = build_index(
        entries,
        [lambda c: c.alpha2, lambda c: c.alpha3, lambda c: c.alpha4],
        canonical,
        preferred=document.get("alpha3_preferred") or {},
        is_current=_is_current,
        label="country code",
    )

    numeric: Dict[int, Country] = dict(
        build_index(
            [c for c in entries if not c.is_undefined],
            [lambda c: c.numeric],
            canonical,
            preferred={int(k): v for k, v in (document.get("numeric_preferred") or {}).items()},
            is_current=_is_current,
            label="numeric country code",
        )
    )
    for number, alpha2 in (document.get("numeric_aliases") or {}).items():
        if int(number) in numeric:
            logger.warning(f"Numeric alias {number} -> {alpha2} shadows an assigned code, ignored")
            continue
        numeric[int(number)] = by_code[alpha2]

    names: Dict[str, Country] = dict(
        build_index(
            [c for c in entries if not c.is_undefined],
            [lambda c: normalize_country_name(c.name)],
            canonical,
            is_current=_is_current,
            label="country name",
        )
    )
    for alias, alpha2 in (document.get("name_aliases") or {}).items():
        names.setdefault(normalize_country_name(str(alias)), by_code[alpha2])

    logger.info(f"Built country table: {len(entries)} entries, {len(numeric)} numeric codes")

    return CountryTable(
        entries=entries,
        by_code=by_code,
        by_numeric=MappingProxyType(numeric),
        by_name=MappingProxyType(names),
    )


def resolve_country_code(
    table: CountryTable,
    code: Optional[str],
    case_sensitive: bool = True,
) -> Optional[Country]:
    """Look up an alpha-2, alpha-3 or alpha-4 code. Misses return None."""
    key = canonicalize_country_code(code, case_sensitive)
    if key is None:
        return None
    return table.by_code.get(key)


def resolve_country_numeric(table: CountryTable, numeric: Optional[int]) -> Optional[Country]:
    """Look up an ISO 3166-1 numeric code. Zero and negative numbers never match."""
    if numeric is None or numeric <= 0:
        return None
    return table.by_numeric.get(numeric)


def resolve_country_name(table: CountryTable, name: Optional[str]) -> Optional[Country]:
    """Exact (normalized) match on official names and colloquial aliases."""
    if not name:
        return None
    return table.by_name.get(normalize_country_name(name))


__all__ = [
    "UNDEFINED_KEY",
    "Assignment",
    "Country",
    "CountryTable",
    "parse_country",
    "validate_country_document",
    "uncovered_collisions",
    "build_country_table",
    "resolve_country_code",
    "resolve_country_numeric",
    "resolve_country_name",
]
