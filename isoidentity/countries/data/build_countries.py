#!/usr/bin/env python3
"""
Validate countries.yaml and export countries.parquet.

This script:
1. Loads countries.yaml
2. Flattens every entry into a row of strings (numeric codes zero-padded)
3. Checks key uniqueness, collision policies and alias targets
4. Cross-checks alpha-3 and numeric codes of officially assigned entries
   against pycountry
5. Writes countries.parquet and prints a summary
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from isoidentity.countries.countryidentity import (
    Assignment,
    parse_country,
    uncovered_collisions,
    validate_country_document,
)
from isoidentity.utils.build_framework import (
    BuildConfig,
    build_code_table,
    validate_duplicate_keys,
    validate_required_fields,
)


def process_country(entry: dict) -> dict:
    """Convert a countries.yaml entry to a DataFrame row."""
    country = parse_country(entry)
    return {
        'alpha2': country.alpha2,
        'alpha3': country.alpha3 or '',
        'alpha4': country.alpha4 or '',
        'numeric': country.numeric_str or '',
        'name': country.name,
        'assignment': country.assignment.value,
    }


def crosscheck_pycountry(df: pd.DataFrame) -> List[str]:
    """Compare officially assigned rows with pycountry's ISO 3166-1 data."""
    try:
        import pycountry
    except ImportError as e:
        raise ImportError("pycountry not installed. pip install pycountry") from e

    issues = []
    official = df[df['assignment'] == Assignment.OFFICIALLY_ASSIGNED.value]
    for _, row in official.iterrows():
        ref = pycountry.countries.get(alpha_2=row['alpha2'])
        if ref is None:
            issues.append(f"{row['alpha2']} is not an ISO 3166-1 code according to pycountry")
            continue
        if ref.alpha_3 != row['alpha3']:
            issues.append(f"{row['alpha2']}: alpha3 {row['alpha3']} != pycountry {ref.alpha_3}")
        if ref.numeric != row['numeric']:
            issues.append(f"{row['alpha2']}: numeric {row['numeric']} != pycountry {ref.numeric}")
    return issues


def validate_countries(df: pd.DataFrame, document: dict) -> List[str]:
    """Validate country data and return list of issues."""
    issues = []

    issues.extend(validate_duplicate_keys(df, 'alpha2'))
    issues.extend(validate_duplicate_keys(df, 'alpha4'))
    issues.extend(validate_required_fields(df, ['alpha2', 'name', 'assignment']))
    issues.extend(validate_country_document(document))
    issues.extend(uncovered_collisions(document))
    issues.extend(crosscheck_pycountry(df))

    return issues


def generate_country_summary(df: pd.DataFrame, document: dict) -> None:
    """Print country-specific summary statistics."""
    print("\nAssignment distribution:")
    for assignment, count in df['assignment'].value_counts().items():
        print(f"  {assignment}: {count}")

    print(f"\nNumeric collision overrides: {len(document.get('numeric_preferred') or {})}")
    print(f"Colloquial name aliases: {len(document.get('name_aliases') or {})}")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "countries.yaml",
        output_parquet=data_dir / "countries.parquet",
        process_entry=process_country,
        validate_data=validate_countries,
        generate_summary=generate_country_summary,
        entity_plural="countries",
        yaml_key="countries",
    )

    return build_code_table(config)


if __name__ == "__main__":
    sys.exit(main())
