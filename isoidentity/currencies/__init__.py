"""Currency code resolution (ISO 4217)."""

from isoidentity.currencies.currencyidentity import Currency
from isoidentity.currencies.currencyapi import (
    load_currencies,
    currency_by_code,
    currency_by_numeric,
    currencies_by_country,
    find_currencies,
    list_currencies,
    is_fund,
    is_precious_metal,
)

__all__ = [
    "Currency",
    "load_currencies",
    "currency_by_code",
    "currency_by_numeric",
    "currencies_by_country",
    "find_currencies",
    "list_currencies",
    "is_fund",
    "is_precious_metal",
]
