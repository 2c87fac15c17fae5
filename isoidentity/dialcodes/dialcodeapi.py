"""Dial code API: country calling codes and phone number prefixes."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from isoidentity.countries.countryapi import country_by_code, load_countries
from isoidentity.countries.countryidentity import Country
from isoidentity.dialcodes.dialcodeidentity import (
    DialCode,
    DialCodeTable,
    build_dialcode_table,
    dialcodes_for_country,
    resolve_phone,
    resolve_prefix,
    strip_prefix,
)
from isoidentity.utils.dataloader import load_code_table


@lru_cache(maxsize=1)
def load_dialcodes(path: Optional[Union[str, Path]] = None) -> DialCodeTable:
    """Load dialcodes.yaml into an immutable DialCodeTable.

    Raises:
        FileNotFoundError: If no table is found
        ValueError: If the table is structurally invalid
    """
    document = load_code_table(__file__, "dialcodes", "dialcodes.yaml", path=path)
    return build_dialcode_table(document, load_countries())


def dialcode_by_prefix(prefix: Optional[str]) -> Optional[DialCode]:
    """Look up a calling code ("81" or "+81").

    Examples:
        >>> dialcode_by_prefix("+81").country.alpha2
        'JP'
        >>> dialcode_by_prefix("1").country.alpha2
        'US'
    """
    return resolve_prefix(load_dialcodes(), prefix)


def dialcode_by_phone(phone: Optional[str]) -> Optional[DialCode]:
    """Calling code of an international phone number, or None.

    Examples:
        >>> str(dialcode_by_phone("+44 20 7946 0000"))
        '+44'
        >>> dialcode_by_phone("020 7946 0000") is None
        True
    """
    return resolve_phone(load_dialcodes(), phone)


def country_by_phone(phone: Optional[str]) -> Optional[Country]:
    """Country owning the calling code of a phone number."""
    hit = dialcode_by_phone(phone)
    return hit.country if hit is not None else None


def prefix_by_phone(phone: Optional[str], with_plus: bool = True) -> Optional[str]:
    """Calling code of a phone number as text ("+44" or "44").

    Examples:
        >>> prefix_by_phone("+4915112345678", with_plus=False)
        '49'
    """
    hit = dialcode_by_phone(phone)
    if hit is None:
        return None
    return f"+{hit.prefix}" if with_plus else hit.prefix


def remove_dial_prefix(phone: str) -> str:
    """Strip the calling code from a phone number.

    Examples:
        >>> remove_dial_prefix("+372 5555 1234")
        '5555 1234'
        >>> remove_dial_prefix("5555 1234")
        '5555 1234'
    """
    return strip_prefix(load_dialcodes(), phone)


def dialcodes_by_country(
    country: Union[str, Country, None],
    case_sensitive: bool = True,
) -> List[DialCode]:
    """Calling codes of a country (empty for None or unknown)."""
    if isinstance(country, str):
        country = country_by_code(country, case_sensitive)
    return dialcodes_for_country(load_dialcodes(), country)


def list_dialcodes() -> pd.DataFrame:
    """Dial codes as a DataFrame (country, prefix, preferred) in table order."""
    return pd.DataFrame([d.to_dict() for d in load_dialcodes().entries])


__all__ = [
    "load_dialcodes",
    "dialcode_by_prefix",
    "dialcode_by_phone",
    "country_by_phone",
    "prefix_by_phone",
    "remove_dial_prefix",
    "dialcodes_by_country",
    "list_dialcodes",
]
