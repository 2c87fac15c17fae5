"""Language code normalization.

ISO 639 codes are lowercase. Two irregularities are handled here and nowhere
else:

- Withdrawn ISO 639-1 codes (iw, ji, in) are rewritten to their current
  codes (he, yi, id). The mapping is data (legacy_aliases in languages.yaml)
  and is passed in by the caller.
- The ISO 639-2 code of Newari is "new". Some platforms can only store it
  capitalized as "New"; that spelling is accepted as the same key in both
  case modes.
"""

from typing import Mapping, Optional

from isoidentity.utils.normalize import canonicalize_code

# Spelling -> canonical key, applied after case folding.
IRREGULAR_ALPHA3 = {"New": "new"}


def canonicalize_language_code(
    code: Optional[str],
    case_sensitive: bool = True,
    legacy_aliases: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Canonicalize an ISO 639-1 code, applying legacy aliases first.

    Examples:
        >>> canonicalize_language_code("JA", case_sensitive=False)
        'ja'
        >>> canonicalize_language_code("iw", legacy_aliases={"iw": "he"})
        'he'
        >>> canonicalize_language_code("IW", legacy_aliases={"iw": "he"})
        'IW'
    """
    return canonicalize_code(code, case_sensitive, upper=False, aliases=legacy_aliases)


def canonicalize_alpha3_code(code: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Canonicalize an ISO 639-2 code.

    Examples:
        >>> canonicalize_alpha3_code("JPN", case_sensitive=False)
        'jpn'
        >>> canonicalize_alpha3_code("New")
        'new'
        >>> canonicalize_alpha3_code("NEW")
        'NEW'
    """
    key = canonicalize_code(code, case_sensitive, upper=False)
    if key is None:
        return None
    return IRREGULAR_ALPHA3.get(key, key)


__all__ = [
    "IRREGULAR_ALPHA3",
    "canonicalize_language_code",
    "canonicalize_alpha3_code",
]
