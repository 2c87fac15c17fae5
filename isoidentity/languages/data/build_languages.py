#!/usr/bin/env python3
"""
Validate languages.yaml and export languages.parquet.

One row per ISO 639-2 (alpha-3) entry. Checks synonym symmetry, alpha-2
links and legacy aliases, and cross-checks terminological codes against
pycountry's ISO 639 data.
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from isoidentity.languages.languageidentity import (
    UNDEFINED_KEY,
    Usage,
    parse_alpha3,
    validate_language_document,
)
from isoidentity.utils.build_framework import (
    BuildConfig,
    build_code_table,
    validate_duplicate_keys,
    validate_required_fields,
)


def process_language(entry: dict) -> dict:
    """Convert a languages.yaml alpha3 entry to a DataFrame row."""
    language = parse_alpha3(entry)
    return {
        'code': language.code,
        'name': language.name,
        'alpha2': language.alpha2 or '',
        'usage': language.usage.value,
        'synonym': language.synonym or '',
    }


def crosscheck_pycountry(df: pd.DataFrame) -> List[str]:
    """Compare alpha-2 links of terminological/common codes with pycountry."""
    try:
        import pycountry
    except ImportError as e:
        raise ImportError("pycountry not installed. pip install pycountry") from e

    issues = []
    linked = df[(df['alpha2'] != '') & (df['usage'] != Usage.BIBLIOGRAPHY.value) & (df['code'] != UNDEFINED_KEY)]
    for _, row in linked.iterrows():
        ref = pycountry.languages.get(alpha_3=row['code'])
        if ref is None:
            continue
        ref_alpha2 = getattr(ref, 'alpha_2', '')
        if ref_alpha2 != row['alpha2']:
            issues.append(f"{row['code']}: alpha2 {row['alpha2']} != pycountry {ref_alpha2!r}")
    return issues


def validate_languages(df: pd.DataFrame, document: dict) -> List[str]:
    """Validate language data and return list of issues."""
    issues = []

    issues.extend(validate_duplicate_keys(df, 'code'))
    issues.extend(validate_required_fields(df, ['code', 'name']))
    issues.extend(validate_language_document(document))
    issues.extend(crosscheck_pycountry(df))

    return issues


def generate_language_summary(df: pd.DataFrame, document: dict) -> None:
    """Print language-specific summary statistics."""
    print("\nUsage distribution:")
    for usage, count in df['usage'].value_counts().items():
        print(f"  {usage}: {count}")

    print(f"\nISO 639-1 codes: {len(document.get('alpha2') or [])}")
    print(f"Legacy aliases: {dict(document.get('legacy_aliases') or {})}")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "languages.yaml",
        output_parquet=data_dir / "languages.parquet",
        process_entry=process_language,
        validate_data=validate_languages,
        generate_summary=generate_language_summary,
        entity_plural="languages",
        yaml_key="alpha3",
    )

    return build_code_table(config)


if __name__ == "__main__":
    sys.exit(main())
