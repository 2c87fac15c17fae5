#!/usr/bin/env python3
"""
Validate locales.yaml and export locales.parquet.

Every pair must reference a known ISO 639-1 language and, when present, a
known ISO 3166-1 country.
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from isoidentity.countries.countryapi import load_countries
from isoidentity.languages.languageapi import load_languages
from isoidentity.locales.localeidentity import CANONICAL_SEPARATOR, validate_locale_document
from isoidentity.utils.build_framework import (
    BuildConfig,
    build_code_table,
    validate_duplicate_keys,
    validate_required_fields,
)


def process_locale(entry: dict) -> dict:
    """Convert a locales.yaml entry to a DataFrame row.

    The display name is looked up in the language and country tables and is
    empty when a part is unknown (reported by validate_locales).
    """
    language = str(entry.get('language', ''))
    country = entry.get('country') or ''

    lang = load_languages().by_alpha2.get(language)
    ctry = load_countries().by_code.get(country) if country else None
    if lang is None or (country and ctry is None):
        name = ''
    elif ctry is None:
        name = lang.name
    else:
        name = f"{lang.name} ({ctry.name})"

    return {
        'code': f"{language}{CANONICAL_SEPARATOR}{country}" if country else language,
        'language': language,
        'country': country,
        'name': name,
    }


def validate_locales(df: pd.DataFrame, document: dict) -> List[str]:
    """Validate locale data and return list of issues."""
    issues = []

    issues.extend(validate_duplicate_keys(df, 'code'))
    issues.extend(validate_required_fields(df, ['language']))
    issues.extend(validate_locale_document(document, load_languages(), load_countries()))

    return issues


def generate_locale_summary(df: pd.DataFrame, document: dict) -> None:
    """Print locale-specific summary statistics."""
    print(f"\nLanguage-only locales: {(df['country'] == '').sum()}")
    print(f"Distinct languages: {df['language'].nunique()}")
    print(f"Distinct countries: {df[df['country'] != '']['country'].nunique()}")

    print("\nLanguages with most locales:")
    for language, count in df['language'].value_counts().head(5).items():
        print(f"  {language}: {count}")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "locales.yaml",
        output_parquet=data_dir / "locales.parquet",
        process_entry=process_locale,
        validate_data=validate_locales,
        generate_summary=generate_locale_summary,
        entity_plural="locales",
        yaml_key="locales",
    )

    return build_code_table(config)


if __name__ == "__main__":
    sys.exit(main())
