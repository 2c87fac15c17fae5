"""Currency code normalization."""

from typing import Optional

from isoidentity.utils.normalize import canonicalize_code


def canonicalize_currency_code(code: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Canonicalize an ISO 4217 alphabetic code (uppercase, "UNDEFINED" sentinel).

    Examples:
        >>> canonicalize_currency_code("jpy", case_sensitive=False)
        'JPY'
        >>> canonicalize_currency_code("jpy")
        'jpy'
    """
    return canonicalize_code(code, case_sensitive, upper=True)


__all__ = ["canonicalize_currency_code"]
