"""Shared text normalization utilities.

Two kinds of normalization live here:

- canonicalize_code: the strict rule applied to code input (country,
  currency and language codes) before exact lookup.
- normalize_name: the loose rule applied to free-text names before fuzzy
  matching.
"""

import re
import unicodedata
from typing import Mapping, Optional


def canonicalize_code(
    raw: Optional[str],
    case_sensitive: bool,
    *,
    upper: bool,
    title: bool = False,
    aliases: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Canonicalize a code string for exact lookup.

    Steps:
      1. None or empty input returns None (not found, not an error)
      2. Legacy aliases are checked first: exact match when case_sensitive,
         case-insensitive match otherwise. A hit returns the modern code.
      3. When not case_sensitive, fold to the space's canonical case
         (upper, lower or title).

    Args:
        raw: Code as supplied by the caller
        case_sensitive: Whether the caller's casing must match the canonical key
        upper: Canonical case of the space (True for countries/currencies,
               False for languages)
        title: Fold to title case instead ("Jpan"); overrides upper
        aliases: Optional legacy -> canonical code mapping

    Returns:
        Canonicalized code, or None for empty input

    Examples:
        >>> canonicalize_code("jp", False, upper=True)
        'JP'

        >>> canonicalize_code("jp", True, upper=True)
        'jp'

        >>> canonicalize_code("IW", False, upper=False, aliases={"iw": "he"})
        'he'

        >>> canonicalize_code("JPAN", False, upper=False, title=True)
        'Jpan'
    """
    if not raw:
        return None

    if aliases:
        if case_sensitive:
            modern = aliases.get(raw)
            if modern is not None:
                return modern
        else:
            for legacy, modern in aliases.items():
                if legacy.lower() == raw.lower():
                    return modern

    if case_sensitive:
        return raw

    if title:
        return raw.capitalize()
    return raw.upper() if upper else raw.lower()


def normalize_name(
    s: str,
    *,
    allowed_chars: str = r"a-z0-9\s\-'",
) -> str:
    """Generic normalization for fuzzy name matching.

    Transformations:
      1. Curly apostrophes to ASCII
      2. Unicode normalization (NFKD) and ASCII transliteration
      3. Lowercase
      4. Remove punctuation (keep only allowed_chars)
      5. Collapse whitespace

    Examples:
        >>> normalize_name("Côte d’Ivoire")
        "cote d'ivoire"

        >>> normalize_name("Korea, Republic of")
        'korea republic of'
    """
    if not s:
        return ""

    s = s.replace("’", "'").replace("‘", "'")

    # Unicode normalization and ASCII conversion
    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")

    s = s.lower()

    # Remove punctuation except allowed characters
    s = re.sub(rf"[^{allowed_chars}]", " ", s)

    # Collapse whitespace
    s = re.sub(r"\s+", " ", s).strip()

    return s


__all__ = [
    "canonicalize_code",
    "normalize_name",
]
