"""Country code resolution API.

Public API for ISO 3166-1 lookups: exact code and numeric resolution,
name search, listings, and free-text name resolution.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from isoidentity.countries.countryidentity import (
    Assignment,
    Country,
    CountryTable,
    build_country_table,
    resolve_country_code,
    resolve_country_numeric,
)
from isoidentity.countries import fuzzycountry
from isoidentity.utils.dataloader import load_code_table
from isoidentity.utils.resolver import find_by_pattern


@lru_cache(maxsize=1)
def load_countries(path: Optional[Union[str, Path]] = None) -> CountryTable:
    """Load countries.yaml into an immutable CountryTable.

    Cached: the table is built once and shared by every lookup.

    Loading priority:
    1. Explicit path if provided
    2. ISOIDENTITY_DATA_DIR/countries.yaml
    3. Package data (isoidentity/countries/data/countries.yaml)

    Raises:
        FileNotFoundError: If no table is found
        ValueError: If the table is structurally invalid
    """
    document = load_code_table(__file__, "countries", "countries.yaml", path=path)
    return build_country_table(document)


def country_by_code(code: Optional[str], case_sensitive: bool = True) -> Optional[Country]:
    """Look up a country by ISO 3166-1 alpha-2, alpha-3 or ISO 3166-3 alpha-4 code.

    Args:
        code: "JP", "JPN", "BUMM", "UNDEFINED", ...
        case_sensitive: If False, "jp" is accepted for "JP"

    Returns:
        Country entry, or None if the code is unknown

    Examples:
        >>> country_by_code("JPN").alpha2
        'JP'
        >>> country_by_code("ANHH").alpha2
        'AN'
        >>> country_by_code("jp") is None
        True
        >>> country_by_code("jp", case_sensitive=False).name
        'Japan'
    """
    return resolve_country_code(load_countries(), code, case_sensitive)


def country_by_numeric(numeric: Optional[int]) -> Optional[Country]:
    """Look up a country by ISO 3166-1 numeric code.

    Numbers shared by a current entry and its predecessor resolve to the
    current entry; the predecessor stays reachable by its letter codes.

    Examples:
        >>> country_by_numeric(392).alpha2
        'JP'
        >>> country_by_numeric(104).alpha2   # not BU (Burma)
        'MM'
        >>> country_by_numeric(0) is None
        True
    """
    return resolve_country_numeric(load_countries(), numeric)


def find_countries(pattern) -> List[Country]:
    """Countries whose name fully matches a regular expression, in table order.

    Raises:
        ValueError: If pattern is None

    Examples:
        >>> [c.alpha2 for c in find_countries(".*United.*")]
        ['AE', 'GB', 'TZ', 'UK', 'UM', 'US']
    """
    return find_by_pattern(load_countries().entries, pattern, lambda c: c.name)


def list_countries(assignment: Optional[Union[str, Assignment]] = None) -> pd.DataFrame:
    """List countries as a DataFrame, optionally filtered by assignment category.

    Args:
        assignment: e.g. "OFFICIALLY_ASSIGNED" or Assignment.TRANSITIONALLY_RESERVED

    Returns:
        DataFrame with columns alpha2, alpha3, alpha4, numeric, name, assignment
    """
    entries = load_countries().entries
    if assignment is not None:
        wanted = Assignment(assignment.value if isinstance(assignment, Assignment) else assignment)
        entries = [c for c in entries if c.assignment == wanted]

    df = pd.DataFrame([c.to_dict() for c in entries])
    if not df.empty:
        df["numeric"] = df["numeric"].astype("Int64")
    return df


def country_identifier(
    name: Optional[str],
    to: str = "ISO2",
    *,
    allow_user_assigned: bool = True,
    fuzzy: bool = True,
    fuzzy_threshold: int = 85,
) -> Optional[str]:
    """Get canonical ISO identifier for a country name, code or colloquialism.

    Uses a multi-stage pipeline:
    1. Exact ISO code (any case)
    2. Official names and colloquial aliases (England, Holland, etc.)
    3. country_converter (handles many aliases)
    4. pycountry (official ISO 3166 names)
    5. Fuzzy matching with RapidFuzz (typo tolerance)

    Args:
        name: Country name or code in any format (e.g., "USA", "United States", "US")
        to: 'ISO2' (default), 'ISO3', or 'numeric'

    Returns:
        Code in the requested system, or None if not recognized

    Examples:
        >>> country_identifier("United States")
        'US'

        >>> country_identifier("UK")
        'GB'

        >>> country_identifier("Holland", to="ISO3")
        'NLD'

        >>> country_identifier("Untied States")  # Typo
        'US'
    """
    return fuzzycountry.country_identifier(
        load_countries(),
        name,
        to=to,
        allow_user_assigned=allow_user_assigned,
        fuzzy=fuzzy,
        fuzzy_threshold=fuzzy_threshold,
    )


def country_identifiers(names: Iterable[str], to: str = "ISO2", **kwargs) -> List[Optional[str]]:
    """Batch resolve country names to codes.

    Examples:
        >>> country_identifiers(["USA", "Holland", "England"])
        ['US', 'NL', 'GB']
    """
    return fuzzycountry.country_identifiers(load_countries(), names, to=to, **kwargs)


def match_country(name: str, *, k: int = 5) -> List[dict]:
    """Top-K candidates + scores (for review UIs).

    Examples:
        >>> [m["alpha2"] for m in match_country("Untied Kingdom", k=1)]
        ['GB']
    """
    return fuzzycountry.match_country(load_countries(), name, k=k)


__all__ = [
    "load_countries",
    "country_by_code",
    "country_by_numeric",
    "find_countries",
    "list_countries",
    "country_identifier",
    "country_identifiers",
    "match_country",
]
