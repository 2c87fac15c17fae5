"""
Currency code resolution core (ISO 4217).

Each entry carries its numeric code, minor unit and the countries that use it.
Fund codes (BOV, CHE, ...) and precious metal codes (XAU, XAG, ...) are
flagged in the table; the flags are fixed per entry, never computed.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from isoidentity.countries.countryidentity import Country, CountryTable
from isoidentity.currencies.currencynormalize import canonicalize_currency_code
from isoidentity.utils.resolver import build_index

logger = logging.getLogger(__name__)

UNDEFINED_KEY = "UNDEFINED"


@dataclass(frozen=True)
class Currency:
    """One ISO 4217 entry. str(currency) is its alphabetic code."""

    code: str
    name: str
    numeric: Optional[int] = None
    minor_unit: Optional[int] = None
    countries: Tuple[Country, ...] = ()
    fund: bool = False
    precious_metal: bool = False

    @property
    def is_undefined(self) -> bool:
        return self.code == UNDEFINED_KEY

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "numeric": self.numeric,
            "minor_unit": self.minor_unit,
            "countries": [c.alpha2 for c in self.countries],
            "fund": self.fund,
            "precious_metal": self.precious_metal,
        }

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class CurrencyTable:
    """Immutable currency table with its lookup indexes."""

    entries: Tuple[Currency, ...]
    by_code: Mapping[str, Currency] = field(repr=False)
    by_numeric: Mapping[int, Currency] = field(repr=False)


def validate_currency_document(document: dict, countries: CountryTable) -> List[str]:
    """Structural checks on a parsed currencies.yaml document."""
    issues = []
    entries = document.get("currencies") or []

    for label, keys in (
        ("code", [str(e.get("code", "")) for e in entries]),
        ("numeric", [e["numeric"] for e in entries if e.get("numeric") is not None]),
    ):
        duplicates = sorted(k for k, n in Counter(keys).items() if n > 1)
        if duplicates:
            issues.append(f"Duplicate currency {label}s: {duplicates}")

    for e in entries:
        unknown = [c for c in e.get("countries") or [] if c not in countries.by_code]
        if unknown:
            issues.append(f"Currency {e.get('code')} lists unknown countries: {unknown}")
        if e.get("fund") and e.get("precious_metal"):
            issues.append(f"Currency {e.get('code')} cannot be both a fund and a precious metal")
        if e.get("code") == UNDEFINED_KEY and e.get("numeric") is not None:
            issues.append("The UNDEFINED entry must not carry a numeric code")

    return issues


def build_currency_table(document: dict, countries: CountryTable) -> CurrencyTable:
    """Build the immutable currency table, linking each entry to its countries.

    Raises:
        ValueError: If the document fails structural validation
    """
    issues = validate_currency_document(document, countries)
    if issues:
        raise ValueError(f"Invalid currency table: {issues}")

    entries = tuple(
        Currency(
            code=str(e["code"]),
            name=str(e["name"]),
            numeric=e.get("numeric"),
            minor_unit=e.get("minor_unit"),
            countries=tuple(countries.by_code[c] for c in e.get("countries") or []),
            fund=bool(e.get("fund", False)),
            precious_metal=bool(e.get("precious_metal", False)),
        )
        for e in document["currencies"]
    )

    by_code = build_index(entries, [lambda c: c.code], lambda c: c.code, label="currency code")
    by_numeric = build_index(
        [c for c in entries if not c.is_undefined],
        [lambda c: c.numeric],
        lambda c: c.code,
        label="numeric currency code",
    )

    logger.info(f"Built currency table: {len(entries)} entries")
    return CurrencyTable(entries=entries, by_code=by_code, by_numeric=by_numeric)


def resolve_currency_code(
    table: CurrencyTable,
    code: Optional[str],
    case_sensitive: bool = True,
) -> Optional[Currency]:
    """Look up an ISO 4217 alphabetic code. Misses return None."""
    key = canonicalize_currency_code(code, case_sensitive)
    if key is None:
        return None
    return table.by_code.get(key)


def resolve_currency_numeric(table: CurrencyTable, numeric: Optional[int]) -> Optional[Currency]:
    """Look up an ISO 4217 numeric code. Zero and negative numbers never match."""
    if numeric is None or numeric <= 0:
        return None
    return table.by_numeric.get(numeric)


def currencies_for_country(table: CurrencyTable, country: Optional[Country]) -> List[Currency]:
    """Currencies used in a country, in table order."""
    if country is None:
        return []
    return [c for c in table.entries if country in c.countries]


def is_fund(currency: Currency) -> bool:
    return currency.fund


def is_precious_metal(currency: Currency) -> bool:
    return currency.precious_metal


__all__ = [
    "UNDEFINED_KEY",
    "Currency",
    "CurrencyTable",
    "validate_currency_document",
    "build_currency_table",
    "resolve_currency_code",
    "resolve_currency_numeric",
    "currencies_for_country",
    "is_fund",
    "is_precious_metal",
]
