#!/usr/bin/env python3
"""
Validate scripts.yaml and export scripts.parquet.

Checks code form and code/numeric uniqueness, then cross-checks numeric
codes against pycountry's ISO 15924 data.
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from isoidentity.scripts.scriptidentity import UNDEFINED_KEY, validate_script_document
from isoidentity.utils.build_framework import (
    BuildConfig,
    build_code_table,
    validate_duplicate_keys,
    validate_required_fields,
)


def process_script(entry: dict) -> dict:
    """Convert a scripts.yaml entry to a DataFrame row."""
    numeric = entry.get('numeric')
    return {
        'code': str(entry.get('code', '')),
        'name': str(entry.get('name', '')),
        'numeric': f"{numeric:03d}" if numeric is not None else '',
    }


def _pycountry_scripts():
    try:
        import pycountry
    except ImportError as e:
        raise ImportError("pycountry not installed. pip install pycountry") from e
    return pycountry.scripts


def crosscheck_pycountry(df: pd.DataFrame) -> List[str]:
    """Compare numeric codes with pycountry for codes it knows."""
    scripts = _pycountry_scripts()
    issues = []
    for _, row in df[df['code'] != UNDEFINED_KEY].iterrows():
        ref = scripts.get(alpha_4=row['code'])
        if ref is not None and ref.numeric != row['numeric']:
            issues.append(f"{row['code']}: numeric {row['numeric']} != pycountry {ref.numeric}")
    return issues


def validate_scripts(df: pd.DataFrame, document: dict) -> List[str]:
    """Validate script data and return list of issues."""
    issues = []

    issues.extend(validate_duplicate_keys(df, 'code'))
    issues.extend(validate_duplicate_keys(df, 'numeric'))
    issues.extend(validate_required_fields(df, ['code', 'name']))
    issues.extend(validate_script_document(document))
    issues.extend(crosscheck_pycountry(df))

    return issues


def generate_script_summary(df: pd.DataFrame, document: dict) -> None:
    """Print script-specific summary statistics."""
    aliases = df[df['name'].str.contains(r'\(alias for ', regex=True)]
    print(f"\nAlias codes: {', '.join(aliases['code'])}")

    special = df[df['code'].str.startswith('Z')]
    print(f"Special codes: {', '.join(special['code'])}")

    scripts = _pycountry_scripts()
    missing = [
        code for code in df['code']
        if code != UNDEFINED_KEY and scripts.get(alpha_4=code) is None
    ]
    if missing:
        print(f"\nNot in pycountry: {', '.join(missing)}")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "scripts.yaml",
        output_parquet=data_dir / "scripts.parquet",
        process_entry=process_script,
        validate_data=validate_scripts,
        generate_summary=generate_script_summary,
        entity_plural="scripts",
        yaml_key="scripts",
    )

    return build_code_table(config)


if __name__ == "__main__":
    sys.exit(main())
