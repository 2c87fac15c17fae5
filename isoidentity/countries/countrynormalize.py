"""Country code and name normalization."""

from typing import Optional

from isoidentity.utils.normalize import canonicalize_code, normalize_name


def canonicalize_country_code(code: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Canonicalize an ISO 3166-1 code (alpha-2, alpha-3 or alpha-4).

    Country codes are uppercase; "UNDEFINED" is the sentinel key.

    Examples:
        >>> canonicalize_country_code("jp", case_sensitive=False)
        'JP'
        >>> canonicalize_country_code("jp")
        'jp'
        >>> canonicalize_country_code("") is None
        True
    """
    return canonicalize_code(code, case_sensitive, upper=True)


def normalize_country_name(name: str) -> str:
    """Normalize a country name for alias and fuzzy matching.

    Examples:
        >>> normalize_country_name("Côte d'Ivoire")
        "cote d'ivoire"
        >>> normalize_country_name("Korea, Republic of")
        'korea republic of'
    """
    return normalize_name(name)


__all__ = [
    "canonicalize_country_code",
    "normalize_country_name",
]
