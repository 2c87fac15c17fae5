#!/usr/bin/env python3
"""
Validate dialcodes.yaml and export dialcodes.parquet.

Checks that every calling code is 1-4 digits, names a known country, and
that shared codes (+1, +7) have exactly one preferred entry. Calling codes
that extend another calling code are reported as issues.
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from isoidentity.countries.countryapi import load_countries
from isoidentity.dialcodes.dialcodeidentity import validate_dialcode_document
from isoidentity.utils.build_framework import (
    BuildConfig,
    build_code_table,
    validate_required_fields,
)


def process_dialcode(entry: dict) -> dict:
    """Convert a dialcodes.yaml entry to a DataFrame row."""
    return {
        'name': str(entry.get('country', '')),
        'prefix': str(entry.get('prefix', '')),
        'preferred': bool(entry.get('preferred', False)),
    }


def validate_prefix_free(df: pd.DataFrame) -> List[str]:
    """Report distinct calling codes that extend another calling code."""
    prefixes = sorted(set(df['prefix']))
    nested = [
        f"+{short} / +{long}"
        for short in prefixes
        for long in prefixes
        if long != short and long.startswith(short)
    ]
    if nested:
        return [f"Nested calling codes: {nested}"]
    return []


def validate_dialcodes(df: pd.DataFrame, document: dict) -> List[str]:
    """Validate dial code data and return list of issues."""
    issues = []

    issues.extend(validate_required_fields(df, ['name', 'prefix']))
    issues.extend(validate_dialcode_document(document, load_countries()))
    issues.extend(validate_prefix_free(df))

    return issues


def generate_dialcode_summary(df: pd.DataFrame, document: dict) -> None:
    """Print dial-code-specific summary statistics."""
    print("\nPrefix length distribution:")
    for length, count in df['prefix'].str.len().value_counts().sort_index().items():
        print(f"  {length} digits: {count}")

    shared = df[df.duplicated(subset=['prefix'], keep=False)]
    for prefix, group in shared.groupby('prefix'):
        preferred = group[group['preferred']]['name'].tolist()
        print(f"\nShared +{prefix}: {', '.join(group['name'])} (preferred: {', '.join(preferred)})")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "dialcodes.yaml",
        output_parquet=data_dir / "dialcodes.parquet",
        process_entry=process_dialcode,
        validate_data=validate_dialcodes,
        generate_summary=generate_dialcode_summary,
        entity_plural="dialcodes",
        yaml_key="dialcodes",
    )

    return build_code_table(config)


if __name__ == "__main__":
    sys.exit(main())
