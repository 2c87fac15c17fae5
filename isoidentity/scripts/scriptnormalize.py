"""Script code normalization.

ISO 15924 codes are written in title case ("Jpan", "Latn"). Case-insensitive
lookups fold to that form, so "JPAN" and "jpaN" both become "Jpan" and
"UNDEFINED" becomes the "Undefined" sentinel.
"""

from typing import Optional

from isoidentity.utils.normalize import canonicalize_code


def canonicalize_script_code(code: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Canonicalize an ISO 15924 code.

    Examples:
        >>> canonicalize_script_code("jpaN", case_sensitive=False)
        'Jpan'
        >>> canonicalize_script_code("jpaN")
        'jpaN'
    """
    return canonicalize_code(code, case_sensitive, upper=False, title=True)


__all__ = ["canonicalize_script_code"]
