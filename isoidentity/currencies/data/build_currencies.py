#!/usr/bin/env python3
"""
Validate currencies.yaml and export currencies.parquet.

Checks code/numeric uniqueness, country references and the fund/metal
flags, then cross-checks numeric codes against pycountry's ISO 4217 data.
Historic codes that pycountry no longer carries (RUR, BYR, ...) are
reported in the summary, not as issues.
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from isoidentity.countries.countryapi import load_countries
from isoidentity.currencies.currencyidentity import UNDEFINED_KEY, validate_currency_document
from isoidentity.utils.build_framework import (
    BuildConfig,
    build_code_table,
    validate_duplicate_keys,
    validate_required_fields,
)
from isoidentity.utils.build_utils import join_codes


def process_currency(entry: dict) -> dict:
    """Convert a currencies.yaml entry to a DataFrame row."""
    numeric = entry.get('numeric')
    return {
        'code': str(entry.get('code', '')),
        'name': str(entry.get('name', '')),
        'numeric': f"{numeric:03d}" if numeric is not None else '',
        'minor_unit': entry.get('minor_unit', -1),
        'countries': join_codes(entry.get('countries')),
        'fund': bool(entry.get('fund', False)),
        'precious_metal': bool(entry.get('precious_metal', False)),
    }


def _pycountry_currencies():
    try:
        import pycountry
    except ImportError as e:
        raise ImportError("pycountry not installed. pip install pycountry") from e
    return pycountry.currencies


def crosscheck_pycountry(df: pd.DataFrame) -> List[str]:
    """Compare numeric codes with pycountry for codes it knows."""
    currencies = _pycountry_currencies()
    issues = []
    for _, row in df[df['code'] != UNDEFINED_KEY].iterrows():
        ref = currencies.get(alpha_3=row['code'])
        if ref is not None and ref.numeric != row['numeric']:
            issues.append(f"{row['code']}: numeric {row['numeric']} != pycountry {ref.numeric}")
    return issues


def validate_currencies(df: pd.DataFrame, document: dict) -> List[str]:
    """Validate currency data and return list of issues."""
    issues = []

    issues.extend(validate_duplicate_keys(df, 'code'))
    issues.extend(validate_duplicate_keys(df, 'numeric'))
    issues.extend(validate_required_fields(df, ['code', 'name']))
    issues.extend(validate_currency_document(document, load_countries()))
    issues.extend(crosscheck_pycountry(df))

    return issues


def generate_currency_summary(df: pd.DataFrame, document: dict) -> None:
    """Print currency-specific summary statistics."""
    print(f"\nFund codes: {', '.join(df[df['fund']]['code'])}")
    print(f"Precious metals: {', '.join(df[df['precious_metal']]['code'])}")

    print("\nMinor unit distribution:")
    for unit, count in df['minor_unit'].value_counts().sort_index().items():
        label = "n/a" if unit == -1 else unit
        print(f"  {label}: {count}")

    currencies = _pycountry_currencies()
    historic = [
        code for code in df['code']
        if code != UNDEFINED_KEY and currencies.get(alpha_3=code) is None
    ]
    if historic:
        print(f"\nNot in pycountry (historic or withdrawn): {', '.join(historic)}")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "currencies.yaml",
        output_parquet=data_dir / "currencies.parquet",
        process_entry=process_currency,
        validate_data=validate_currencies,
        generate_summary=generate_currency_summary,
        entity_plural="currencies",
        yaml_key="currencies",
    )

    return build_code_table(config)


if __name__ == "__main__":
    sys.exit(main())
