"""Currency code resolution API.

Public API for ISO 4217 lookups by alphabetic code, numeric code and
country, plus the fund / precious metal predicates.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from isoidentity.countries.countryapi import country_by_code, load_countries
from isoidentity.countries.countryidentity import Country
from isoidentity.currencies.currencyidentity import (
    Currency,
    CurrencyTable,
    build_currency_table,
    currencies_for_country,
    is_fund,
    is_precious_metal,
    resolve_currency_code,
    resolve_currency_numeric,
)
from isoidentity.utils.dataloader import load_code_table
from isoidentity.utils.resolver import find_by_pattern


@lru_cache(maxsize=1)
def load_currencies(path: Optional[Union[str, Path]] = None) -> CurrencyTable:
    """Load currencies.yaml into an immutable CurrencyTable.

    Country references are resolved against load_countries().

    Raises:
        FileNotFoundError: If no table is found
        ValueError: If the table is structurally invalid
    """
    document = load_code_table(__file__, "currencies", "currencies.yaml", path=path)
    return build_currency_table(document, load_countries())


def currency_by_code(code: Optional[str], case_sensitive: bool = True) -> Optional[Currency]:
    """Look up a currency by ISO 4217 alphabetic code.

    Examples:
        >>> currency_by_code("JPY").name
        'Yen'
        >>> currency_by_code("jpy") is None
        True
        >>> currency_by_code("jpy", case_sensitive=False).minor_unit
        0
    """
    return resolve_currency_code(load_currencies(), code, case_sensitive)


def currency_by_numeric(numeric: Optional[int]) -> Optional[Currency]:
    """Look up a currency by ISO 4217 numeric code; n <= 0 returns None.

    Examples:
        >>> currency_by_numeric(978).code
        'EUR'
    """
    return resolve_currency_numeric(load_currencies(), numeric)


def currencies_by_country(
    country: Optional[Union[str, Country]],
    case_sensitive: bool = True,
) -> List[Currency]:
    """Currencies used in a country, in table order.

    Args:
        country: Country entry or any country code accepted by country_by_code
        case_sensitive: Applies when country is given as a string

    Returns:
        List of currencies (empty for None or an unknown country)

    Examples:
        >>> [c.code for c in currencies_by_country("CH")]
        ['CHE', 'CHF', 'CHW']
    """
    if isinstance(country, str):
        country = country_by_code(country, case_sensitive)
    return currencies_for_country(load_currencies(), country)


def find_currencies(pattern) -> List[Currency]:
    """Currencies whose name fully matches a regular expression, in table order.

    Examples:
        >>> [c.code for c in find_currencies(".*Ruble")]
        ['BYN', 'BYR', 'RUB', 'RUR']

    Raises:
        ValueError: If pattern is None
    """
    return find_by_pattern(load_currencies().entries, pattern, lambda c: c.name)


def list_currencies(
    fund: Optional[bool] = None,
    precious_metal: Optional[bool] = None,
) -> pd.DataFrame:
    """List currencies as a DataFrame, optionally filtered by the fixed flags.

    Examples:
        >>> list_currencies(precious_metal=True)["code"].tolist()
        ['XAG', 'XAU', 'XPD', 'XPT']
    """
    entries = load_currencies().entries
    if fund is not None:
        entries = [c for c in entries if is_fund(c) == fund]
    if precious_metal is not None:
        entries = [c for c in entries if is_precious_metal(c) == precious_metal]

    df = pd.DataFrame([c.to_dict() for c in entries])
    if not df.empty:
        df["numeric"] = df["numeric"].astype("Int64")
        df["minor_unit"] = df["minor_unit"].astype("Int64")
    return df


__all__ = [
    "load_currencies",
    "currency_by_code",
    "currency_by_numeric",
    "currencies_by_country",
    "find_currencies",
    "list_currencies",
    "is_fund",
    "is_precious_metal",
]
