"""Country code resolution (ISO 3166-1) and free-text country names."""

from isoidentity.countries.countryidentity import (
    Assignment,
    Country,
)
from isoidentity.countries.countryapi import (
    load_countries,
    country_by_code,
    country_by_numeric,
    find_countries,
    list_countries,
    country_identifier,
    country_identifiers,
    match_country,
)

__all__ = [
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
]
