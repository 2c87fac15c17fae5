"""
Free-text Country Resolution
----------------------------

Pipeline (first hit wins):
  1) exact ISO 3166 code (alpha-2, alpha-3, alpha-4), case-insensitive
  2) exact official name or colloquial alias from countries.yaml
  3) country_converter (coco) regex classification
  4) pycountry lookup (official, common and historic names)
  5) rapidfuzz fuzzy match over names + aliases

Reserved predecessor codes resolve to their current successor when the two
share a numeric code (UK -> GB, BU -> MM, ZR -> CD, ...).

API:
  country_identifier(name, to='ISO2', allow_user_assigned=True, fuzzy=True, fuzzy_threshold=85)
  country_identifiers(names, to='ISO2', allow_user_assigned=True, fuzzy=True, fuzzy_threshold=85)
  match_country(name, k=5)

Examples:
  >>> country_identifier("USA")            # 'US'
  >>> country_identifier("Deutschland")    # 'DE'
  >>> country_identifier("Ivory Coast")    # 'CI'
  >>> country_identifier("England")        # 'GB'
  >>> country_identifiers(["México", "Holland"], to="ISO3")  # ['MEX', 'NLD']
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, List, Optional

# ---- Optional imports with helpful error messages ----
try:
    import country_converter as coco
except ImportError as e:
    raise ImportError("country_converter not installed. pip install country_converter") from e

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

from isoidentity.countries.countryidentity import (
    Assignment,
    Country,
    CountryTable,
    resolve_country_code,
    resolve_country_name,
)
from isoidentity.countries.countrynormalize import normalize_country_name
from isoidentity.utils.resolver import find_best_match, topk_matches

logger = logging.getLogger(__name__)

TARGETS = ("ISO2", "ISO3", "NUMERIC")


@lru_cache(maxsize=1)
def _converter() -> "coco.CountryConverter":
    return coco.CountryConverter()


def _current(table: CountryTable, country: Country) -> Country:
    """Map a reserved predecessor code to the entry that now owns its number."""
    if country.assignment == Assignment.OFFICIALLY_ASSIGNED or country.numeric is None:
        return country
    successor = table.by_numeric.get(country.numeric)
    return successor if successor is not None else country


def _format(country: Optional[Country], to: str) -> Optional[str]:
    if country is None:
        return None
    if to == "ISO2":
        return country.alpha2
    if to == "ISO3":
        return country.alpha3
    return country.numeric_str


def _via_coco(table: CountryTable, s: str) -> Optional[Country]:
    result = _converter().convert(names=s, to="ISO2", not_found="not found")
    a2 = result[0] if isinstance(result, list) else result
    if not a2 or a2 == "not found":
        return None
    return table.by_code.get(a2)


def _via_pycountry(table: CountryTable, s: str) -> Optional[Country]:
    try:
        c = pycountry.countries.lookup(s)
    except LookupError:
        return None
    a2 = getattr(c, "alpha_2", None)
    return table.by_code.get(a2) if a2 else None


def resolve_country_text(
    table: CountryTable,
    name: Optional[str],
    *,
    allow_user_assigned: bool = True,
    fuzzy: bool = True,
    fuzzy_threshold: int = 85,
) -> Optional[Country]:
    """Resolve any country hint to a Country entry, or None."""
    if not name or not str(name).strip():
        return None

    s = str(name).strip()

    stages = (
        ("code", lambda: resolve_country_code(table, s, case_sensitive=False)),
        ("name", lambda: resolve_country_name(table, s)),
        ("country_converter", lambda: _via_coco(table, s)),
        ("pycountry", lambda: _via_pycountry(table, s)),
    )

    for stage, resolve in stages:
        hit = resolve()
        if hit is None or hit.is_undefined:
            continue
        hit = _current(table, hit)
        if hit.assignment == Assignment.USER_ASSIGNED and not allow_user_assigned:
            logger.debug(f"{s!r} resolved to user-assigned {hit.alpha2} via {stage}, rejected")
            return None
        logger.debug(f"{s!r} resolved to {hit.alpha2} via {stage}")
        return hit

    if fuzzy:
        match = find_best_match(normalize_country_name(s), table.by_name, threshold=fuzzy_threshold)
        if match:
            hit, score = match
            hit = _current(table, hit)
            if hit.assignment == Assignment.USER_ASSIGNED and not allow_user_assigned:
                return None
            logger.debug(f"{s!r} fuzzy-matched {hit.alpha2} (score {score:.1f})")
            return hit

    return None


def country_identifier(
    table: CountryTable,
    name: Optional[str],
    to: str = "ISO2",
    *,
    allow_user_assigned: bool = True,
    fuzzy: bool = True,
    fuzzy_threshold: int = 85,
) -> Optional[str]:
    """
    Resolve a country-like string to a canonical code.

    Args:
        table: Country table (see countryapi.load_countries)
        name: Any country hint: 'USA', 'México', 'England', 'Ivory Coast', 'DEU'
        to:   'ISO2' (default), 'ISO3', or 'numeric'
        allow_user_assigned: allow 'XK' (Kosovo) mapping
        fuzzy: use fuzzy fallback on last resort
        fuzzy_threshold: minimum RapidFuzz score to accept a fuzzy match

    Returns:
        Canonical code in requested system, or None if not recognized.

    Raises:
        ValueError: If `to` is not one of ISO2, ISO3, numeric
    """
    target = to.upper()
    if target not in TARGETS:
        raise ValueError(f"Unknown code system {to!r}; use one of ISO2, ISO3, numeric")

    country = resolve_country_text(
        table,
        name,
        allow_user_assigned=allow_user_assigned,
        fuzzy=fuzzy,
        fuzzy_threshold=fuzzy_threshold,
    )
    return _format(country, target)


def country_identifiers(
    table: CountryTable,
    names: Iterable[str],
    to: str = "ISO2",
    *,
    allow_user_assigned: bool = True,
    fuzzy: bool = True,
    fuzzy_threshold: int = 85,
) -> List[Optional[str]]:
    """Vectorized convenience wrapper."""
    return [
        country_identifier(
            table, n, to=to, allow_user_assigned=allow_user_assigned, fuzzy=fuzzy, fuzzy_threshold=fuzzy_threshold
        )
        for n in names
    ]


def match_country(table: CountryTable, name: str, k: int = 5) -> List[dict]:
    """Top-K candidates with fuzzy scores, best first."""
    return [
        {**country.to_dict(), "score": score}
        for country, score in topk_matches(normalize_country_name(name), table.by_name, k=k)
    ]


__all__ = [
    "resolve_country_text",
    "country_identifier",
    "country_identifiers",
    "match_country",
]
